"""Análise semântica: tabela de símbolos e verificação de nomes.

A tabela é plana (um só scope, o global) e começa com os tipos INTEGER e REAL.
O SymbolTableBuilder percorre a árvore e falha se uma variável for usada ou
atribuída sem ter sido declarada.
"""

import logging
from typing import Dict, Optional

from .ast1 import Assign, BinOp, Block, Compound, NoOp, Num, Program, Type, UnaryOp, Var, VarDecl
from .erros import InternalError, NameNotDeclaredError, NameNotFoundError

logger = logging.getLogger(__name__)


class Symbol:
    def __init__(self, name: str, type: Optional[str] = None):
        self.name = name
        self.type = type

    def __str__(self):
        return self.name

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return (self.name, self.type) == (other.name, other.type)

    def __hash__(self):
        return hash((self.name, self.type))


class BuiltinTypeSymbol(Symbol):
    def __init__(self, name: str):
        super().__init__(name)

    def __repr__(self):
        return f"BuiltinTypeSymbol({self.name!r})"


class VarSymbol(Symbol):
    def __init__(self, name: str, type: str):
        super().__init__(name, type)

    def __str__(self):
        return f"<{self.name}:{self.type}>"

    def __repr__(self):
        return f"VarSymbol({self.name!r}, {self.type!r})"


class SymbolTable:
    def __init__(self):
        self._symbols: Dict[str, Symbol] = {}
        self.define(BuiltinTypeSymbol('INTEGER'))
        self.define(BuiltinTypeSymbol('REAL'))

    def __str__(self):
        return "Symbols: " + ", ".join(str(symbol) for symbol in self._symbols.values())

    def define(self, symbol: Symbol):
        # redeclarar um nome substitui o símbolo anterior
        logger.debug(f"Define: {symbol}")
        self._symbols[symbol.name] = symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        logger.debug(f"Lookup: {name}")
        return self._symbols.get(name)

    def symbols(self) -> Dict[str, Symbol]:
        return dict(self._symbols)


class SymbolTableBuilder:
    def __init__(self):
        self.symtab = SymbolTable()

    def visit(self, node):
        if isinstance(node, Program):
            self.visit(node.block)
        elif isinstance(node, Block):
            for declaration in node.declarations:
                self.visit(declaration)
            self.visit(node.compound_statement)
        elif isinstance(node, VarDecl):
            self.visit_var_decl(node)
        elif isinstance(node, Compound):
            for child in node.children:
                self.visit(child)
        elif isinstance(node, Assign):
            self.visit_assign(node)
        elif isinstance(node, Var):
            if self.symtab.lookup(node.value) is None:
                raise NameNotFoundError(node.value)
        elif isinstance(node, BinOp):
            self.visit(node.left)
            self.visit(node.right)
        elif isinstance(node, UnaryOp):
            self.visit(node.expr)
        elif isinstance(node, (Num, Type, NoOp)):
            pass
        else:
            raise InternalError(f"No visit method for {type(node).__name__}")

    def visit_var_decl(self, node: VarDecl):
        type_name = node.type_node.value
        self.symtab.define(VarSymbol(node.var_node.value, type_name))

    def visit_assign(self, node: Assign):
        # os nomes usados à direita são verificados antes do alvo
        self.visit(node.right)
        var_name = node.left.value
        if self.symtab.lookup(var_name) is None:
            raise NameNotDeclaredError(var_name)


def analyze(tree) -> SymbolTable:
    """Verifica os nomes de tree e devolve a tabela de símbolos preenchida."""
    builder = SymbolTableBuilder()
    builder.visit(tree)
    logger.info(builder.symtab)
    return builder.symtab
