"""Analisador léxico. As regras são do ply.lex; a classe Lexer embrulha um
clone do lexer do ply e devolve Tokens um de cada vez, com EOF no fim."""

import logging
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Union

import ply.lex as lex

from .erros import InvalidCharacterError, UnterminatedCommentError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    # palavras reservadas
    PROGRAM = 'PROGRAM'
    VAR = 'VAR'
    INTEGER = 'INTEGER'
    REAL = 'REAL'
    BEGIN = 'BEGIN'
    END = 'END'
    INTEGER_DIV = 'INTEGER_DIV'

    ID = 'ID'
    INTEGER_CONST = 'INTEGER_CONST'
    REAL_CONST = 'REAL_CONST'

    ASSIGN = 'ASSIGN'
    PLUS = 'PLUS'
    MINUS = 'MINUS'
    MUL = 'MUL'
    FLOAT_DIV = 'FLOAT_DIV'
    LPAREN = 'LPAREN'
    RPAREN = 'RPAREN'
    SEMI = 'SEMI'
    COLON = 'COLON'
    COMMA = 'COMMA'
    DOT = 'DOT'

    EOF = 'EOF'


class Token(NamedTuple):
    type: TokenType
    value: Union[int, float, str, None]

    def __str__(self):
        return f"Token({self.type.name}, {self.value})"


# Palavras reservadas (sensível a maiúsculas)
reserved = {
    'PROGRAM': 'PROGRAM',
    'VAR': 'VAR',
    'DIV': 'INTEGER_DIV',
    'INTEGER': 'INTEGER',
    'REAL': 'REAL',
    'BEGIN': 'BEGIN',
    'END': 'END',
}

# O EOF não é produzido pelo ply, é o Lexer que o cria
tokens = [tt.name for tt in TokenType if tt is not TokenType.EOF]

t_ASSIGN    = r':='
t_COLON     = r':'
t_SEMI      = r';'
t_DOT       = r'\.'
t_PLUS      = r'\+'
t_MINUS     = r'-'
t_MUL       = r'\*'
t_FLOAT_DIV = r'/'
t_LPAREN    = r'\('
t_RPAREN    = r'\)'
t_COMMA     = r','

t_ignore = ' \t\r\f\v'


def t_COMMENT(t):
    r'\{[^}]*\}'
    t.lexer.lineno += t.value.count('\n')


def t_REAL_CONST(t):
    r'[0-9]+\.[0-9]+'
    t.value = float(t.value)
    return t


def t_INTEGER_CONST(t):
    r'[0-9]+'
    t.value = int(t.value)
    return t


def t_ID(t):
    r'[A-Za-z][A-Za-z0-9]*'
    t.type = reserved.get(t.value, 'ID')
    return t


def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)


def t_error(t):
    char = t.value[0]
    if char == '{':
        # só chega aqui se o t_COMMENT não encontrou o '}'
        raise UnterminatedCommentError(f"Unterminated comment at line {t.lineno}")
    raise InvalidCharacterError(f"Invalid character {char!r} at line {t.lineno}")


lexer = lex.lex(errorlog=logger)


class Lexer:
    """Produz um Token de cada vez a partir do texto fonte.

    Depois de esgotado o input devolve sempre Token(EOF, None).
    """

    def __init__(self, text: str):
        self.text = text
        self._lexer = lexer.clone()
        self._lexer.lineno = 1
        self._lexer.input(text)

    @property
    def lineno(self) -> int:
        return self._lexer.lineno

    def get_next_token(self) -> Token:
        tok: Optional[lex.LexToken] = self._lexer.token()
        if tok is None:
            return Token(TokenType.EOF, None)
        return Token(TokenType[tok.type], tok.value)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.get_next_token()
            yield token
            if token.type is TokenType.EOF:
                return


def tokenize(text: str) -> List[Token]:
    """Lista de todos os tokens de text, terminada em EOF."""
    return list(Lexer(text))
