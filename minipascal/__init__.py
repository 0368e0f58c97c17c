"""Interpretador de um subconjunto de Pascal."""

from .analex import Lexer, Token, TokenType, tokenize
from .anasem import SymbolTable, SymbolTableBuilder, analyze
from .anasin import Parser, parse
from .erros import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    InternalError,
    InterpreterError,
    InvalidCharacterError,
    NameNotDeclaredError,
    NameNotFoundError,
    UnexpectedTokenError,
    UnterminatedCommentError,
)
from .interp import Interpreter, run

__version__ = "0.1.0"
__all__ = [
    "Lexer", "Token", "TokenType", "tokenize",
    "Parser", "parse",
    "SymbolTable", "SymbolTableBuilder", "analyze",
    "Interpreter", "run",
    "InterpreterError", "InvalidCharacterError", "UnterminatedCommentError",
    "UnexpectedTokenError", "NameNotFoundError", "NameNotDeclaredError",
    "DivisionByZeroError", "ArithmeticOverflowError", "InternalError",
]
