# Analisador sintático descendente recursivo.
#
# P1:  program              -> PROGRAM variable SEMI block DOT
# P2:  block                -> declarations compound_statement
# P3:  declarations         -> VAR (variable_declaration SEMI)+
# P4:                        | epsilon
# P5:  variable_declaration -> ID (COMMA ID)* COLON type_spec
# P6:  type_spec            -> INTEGER
# P7:                        | REAL
# P8:  compound_statement   -> BEGIN statement_list END
# P9:  statement_list       -> statement (SEMI statement)*
# P10: statement            -> compound_statement
# P11:                       | assignment_statement
# P12:                       | epsilon
# P13: assignment_statement -> variable ASSIGN expr
# P14: variable             -> ID
# P15: expr                 -> term ((PLUS | MINUS) term)*
# P16: term                 -> factor ((MUL | INTEGER_DIV | FLOAT_DIV) factor)*
# P17: factor               -> (PLUS | MINUS) factor
# P18:                       | INTEGER_CONST
# P19:                       | REAL_CONST
# P20:                       | LPAREN expr RPAREN
# P21:                       | variable

import logging

from .analex import Lexer, Token, TokenType
from .ast1 import Assign, BinOp, Block, Compound, NoOp, Num, Program, Type, UnaryOp, Var, VarDecl
from .erros import UnexpectedTokenError

logger = logging.getLogger(__name__)

ADD_OPS = (TokenType.PLUS, TokenType.MINUS)
MUL_OPS = (TokenType.MUL, TokenType.INTEGER_DIV, TokenType.FLOAT_DIV)


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current_token: Token = self.lexer.get_next_token()

    def error(self, expected):
        raise UnexpectedTokenError(
            f"Unexpected token {self.current_token}, expected {expected} "
            f"at line {self.lexer.lineno}"
        )

    def eat(self, token_type: TokenType):
        if self.current_token.type is token_type:
            self.current_token = self.lexer.get_next_token()
        else:
            self.error(token_type.name)

    # P1
    def program(self) -> Program:
        logger.debug("Derivando por P1: program -> PROGRAM variable SEMI block DOT")
        self.eat(TokenType.PROGRAM)
        var_node = self.variable()
        self.eat(TokenType.SEMI)
        block_node = self.block()
        self.eat(TokenType.DOT)
        return Program(var_node.value, block_node)

    # P2
    def block(self) -> Block:
        logger.debug("Derivando por P2: block -> declarations compound_statement")
        declarations = self.declarations()
        compound = self.compound_statement()
        return Block(declarations, compound)

    # P3, P4
    def declarations(self) -> list:
        declarations = []
        if self.current_token.type is TokenType.VAR:
            logger.debug("Derivando por P3: declarations -> VAR (variable_declaration SEMI)+")
            self.eat(TokenType.VAR)
            # o '+' obriga a pelo menos uma declaração
            declarations.extend(self.variable_declaration())
            self.eat(TokenType.SEMI)
            while self.current_token.type is TokenType.ID:
                declarations.extend(self.variable_declaration())
                self.eat(TokenType.SEMI)
        else:
            logger.debug("Derivando por P4: declarations -> epsilon")
        return declarations

    # P5
    def variable_declaration(self) -> list:
        logger.debug("Derivando por P5: variable_declaration -> ID (COMMA ID)* COLON type_spec")
        var_nodes = [Var(self.current_token)]
        self.eat(TokenType.ID)
        while self.current_token.type is TokenType.COMMA:
            self.eat(TokenType.COMMA)
            var_nodes.append(Var(self.current_token))
            self.eat(TokenType.ID)
        self.eat(TokenType.COLON)
        type_node = self.type_spec()
        return [VarDecl(var_node, type_node) for var_node in var_nodes]

    # P6, P7
    def type_spec(self) -> Type:
        token = self.current_token
        if token.type is TokenType.INTEGER:
            logger.debug("Derivando por P6: type_spec -> INTEGER")
            self.eat(TokenType.INTEGER)
        elif token.type is TokenType.REAL:
            logger.debug("Derivando por P7: type_spec -> REAL")
            self.eat(TokenType.REAL)
        else:
            self.error("INTEGER or REAL")
        return Type(token)

    # P8
    def compound_statement(self) -> Compound:
        logger.debug("Derivando por P8: compound_statement -> BEGIN statement_list END")
        self.eat(TokenType.BEGIN)
        nodes = self.statement_list()
        self.eat(TokenType.END)
        return Compound(nodes)

    # P9
    def statement_list(self) -> list:
        logger.debug("Derivando por P9: statement_list -> statement (SEMI statement)*")
        results = [self.statement()]
        while self.current_token.type is TokenType.SEMI:
            self.eat(TokenType.SEMI)
            results.append(self.statement())
        return results

    # P10, P11, P12
    def statement(self):
        if self.current_token.type is TokenType.BEGIN:
            logger.debug("Derivando por P10: statement -> compound_statement")
            return self.compound_statement()
        if self.current_token.type is TokenType.ID:
            logger.debug("Derivando por P11: statement -> assignment_statement")
            return self.assignment_statement()
        logger.debug("Derivando por P12: statement -> epsilon")
        return NoOp()

    # P13
    def assignment_statement(self) -> Assign:
        logger.debug("Derivando por P13: assignment_statement -> variable ASSIGN expr")
        left = self.variable()
        token = self.current_token
        self.eat(TokenType.ASSIGN)
        right = self.expr()
        return Assign(left, token, right)

    # P14
    def variable(self) -> Var:
        node = Var(self.current_token)
        self.eat(TokenType.ID)
        return node

    # P15
    def expr(self):
        node = self.term()
        while self.current_token.type in ADD_OPS:
            token = self.current_token
            self.eat(token.type)
            node = BinOp(node, token, self.term())
        return node

    # P16
    def term(self):
        node = self.factor()
        while self.current_token.type in MUL_OPS:
            token = self.current_token
            self.eat(token.type)
            node = BinOp(node, token, self.factor())
        return node

    # P17 a P21
    def factor(self):
        token = self.current_token
        if token.type in ADD_OPS:
            self.eat(token.type)
            return UnaryOp(token, self.factor())
        if token.type is TokenType.INTEGER_CONST:
            self.eat(TokenType.INTEGER_CONST)
            return Num(token)
        if token.type is TokenType.REAL_CONST:
            self.eat(TokenType.REAL_CONST)
            return Num(token)
        if token.type is TokenType.LPAREN:
            self.eat(TokenType.LPAREN)
            node = self.expr()
            self.eat(TokenType.RPAREN)
            return node
        return self.variable()

    def parse(self) -> Program:
        node = self.program()
        if self.current_token.type is not TokenType.EOF:
            self.error(TokenType.EOF.name)
        logger.debug("Análise sintática concluída com sucesso.")
        return node


def parse(text: str) -> Program:
    return Parser(Lexer(text)).parse()
