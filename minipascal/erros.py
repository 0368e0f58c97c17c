"""Erros do interpretador. Todas as fases lançam subclasses de InterpreterError,
por isso quem chama só precisa de apanhar essa classe.
"""


class InterpreterError(Exception):
    kind = "Error"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


#
# Análise léxica
#

class LexerError(InterpreterError):
    pass


class InvalidCharacterError(LexerError):
    kind = "InvalidCharacter"


class UnterminatedCommentError(LexerError):
    kind = "UnterminatedComment"


#
# Análise sintática
#

class ParserError(InterpreterError):
    pass


class UnexpectedTokenError(ParserError):
    kind = "UnexpectedToken"


#
# Análise semântica e execução
#

class SemanticError(InterpreterError):
    kind = "NameError"


class NameNotFoundError(SemanticError):
    """Variável usada numa expressão sem símbolo (ou sem valor, em execução)."""

    def __init__(self, name):
        super().__init__(f"Name Error {name} not found")
        self.name = name


class NameNotDeclaredError(SemanticError):
    """Atribuição a uma variável que nunca foi declarada."""

    def __init__(self, name):
        super().__init__(f"Name Error {name} not declared")
        self.name = name


class DivisionByZeroError(InterpreterError):
    kind = "DivisionByZero"


class ArithmeticOverflowError(InterpreterError):
    """Resultado que não cabe num float (ou inf/nan vindo de um real enorme)."""
    kind = "Overflow"


class InternalError(InterpreterError):
    kind = "Internal"
