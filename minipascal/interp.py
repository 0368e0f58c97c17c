"""Interpretador: percorre a árvore e calcula os valores das variáveis globais."""

import logging
from typing import Dict, Union

from .analex import Lexer, TokenType
from .anasem import analyze
from .anasin import Parser
from .ast1 import Assign, BinOp, Block, Compound, NoOp, Num, Program, Type, UnaryOp, Var, VarDecl
from .erros import ArithmeticOverflowError, DivisionByZeroError, InternalError, NameNotFoundError

logger = logging.getLogger(__name__)

Number = Union[int, float]


class Interpreter:
    def __init__(self, tree):
        self.tree = tree
        self.GLOBAL_SCOPE: Dict[str, Number] = {}

    def visit(self, node):
        if isinstance(node, Program):
            self.visit(node.block)
        elif isinstance(node, Block):
            for declaration in node.declarations:
                self.visit(declaration)
            self.visit(node.compound_statement)
        elif isinstance(node, Compound):
            for child in node.children:
                self.visit(child)
        elif isinstance(node, Assign):
            self.GLOBAL_SCOPE[node.left.value] = self.visit(node.right)
        elif isinstance(node, Var):
            return self.visit_var(node)
        elif isinstance(node, BinOp):
            return self.visit_bin_op(node)
        elif isinstance(node, UnaryOp):
            return self.visit_unary_op(node)
        elif isinstance(node, Num):
            return node.value
        elif isinstance(node, (VarDecl, Type, NoOp)):
            pass
        else:
            raise InternalError(f"No visit method for {type(node).__name__}")

    def visit_var(self, node: Var) -> Number:
        var_name = node.value
        # teste de pertença explícito: 0 é um valor válido
        if var_name not in self.GLOBAL_SCOPE:
            raise NameNotFoundError(var_name)
        return self.GLOBAL_SCOPE[var_name]

    def visit_bin_op(self, node: BinOp) -> Number:
        left = self.visit(node.left)
        right = self.visit(node.right)
        try:
            return self.apply_bin_op(node.op, left, right)
        except (OverflowError, ValueError) as e:
            # inteiros grandes demais para float, ou inf/nan vindos de reais enormes
            raise ArithmeticOverflowError(
                f"Arithmetic overflow in {node.op.value}: {e}"
            ) from e

    def apply_bin_op(self, token, left: Number, right: Number) -> Number:
        op = token.type

        if op is TokenType.PLUS:
            return left + right
        if op is TokenType.MINUS:
            return left - right
        if op is TokenType.MUL:
            return left * right
        if op is TokenType.INTEGER_DIV:
            if right == 0:
                raise DivisionByZeroError("Division by zero in DIV")
            return int(left // right)
        if op is TokenType.FLOAT_DIV:
            if right == 0:
                raise DivisionByZeroError("Division by zero in /")
            return left / right
        raise InternalError(f"Unknown binary operator {token}")

    def visit_unary_op(self, node: UnaryOp) -> Number:
        op = node.op.type
        if op is TokenType.PLUS:
            return +self.visit(node.expr)
        if op is TokenType.MINUS:
            return -self.visit(node.expr)
        raise InternalError(f"Unknown unary operator {node.op}")

    def get_globals(self) -> Dict[str, Number]:
        return dict(self.GLOBAL_SCOPE)

    def interpret(self) -> Dict[str, Number]:
        self.visit(self.tree)
        logger.info(f"global runtime memory: {self.GLOBAL_SCOPE}")
        return self.get_globals()


def run(text: str) -> Dict[str, Number]:
    """Lê, analisa, verifica e executa o programa text; devolve as variáveis globais."""
    tree = Parser(Lexer(text)).parse()
    analyze(tree)
    return Interpreter(tree).interpret()
