import unittest

from minipascal.analex import Lexer, Token, TokenType, tokenize
from minipascal.erros import InvalidCharacterError, UnterminatedCommentError

CODE = """PROGRAM Part10AST;
  VAR
    a, b : INTEGER;
    y    : REAL;

  BEGIN {Part10AST}
    a := 2;
    b := 10 * a + 10 * a DIV 4;
    y := 20 / 7 + 3.14;
  END.  {Part10AST}"""


class LexerTestCase(unittest.TestCase):

    def test_program_tokens(self):
        expected = [
            "Token(PROGRAM, PROGRAM)", "Token(ID, Part10AST)", "Token(SEMI, ;)",
            "Token(VAR, VAR)", "Token(ID, a)", "Token(COMMA, ,)", "Token(ID, b)",
            "Token(COLON, :)", "Token(INTEGER, INTEGER)", "Token(SEMI, ;)",
            "Token(ID, y)", "Token(COLON, :)", "Token(REAL, REAL)", "Token(SEMI, ;)",
            "Token(BEGIN, BEGIN)",
            "Token(ID, a)", "Token(ASSIGN, :=)", "Token(INTEGER_CONST, 2)", "Token(SEMI, ;)",
            "Token(ID, b)", "Token(ASSIGN, :=)", "Token(INTEGER_CONST, 10)", "Token(MUL, *)",
            "Token(ID, a)", "Token(PLUS, +)", "Token(INTEGER_CONST, 10)", "Token(MUL, *)",
            "Token(ID, a)", "Token(INTEGER_DIV, DIV)", "Token(INTEGER_CONST, 4)", "Token(SEMI, ;)",
            "Token(ID, y)", "Token(ASSIGN, :=)", "Token(INTEGER_CONST, 20)", "Token(FLOAT_DIV, /)",
            "Token(INTEGER_CONST, 7)", "Token(PLUS, +)", "Token(REAL_CONST, 3.14)", "Token(SEMI, ;)",
            "Token(END, END)", "Token(DOT, .)", "Token(EOF, None)",
        ]
        lexer = Lexer(CODE)
        for text in expected:
            self.assertEqual(text, str(lexer.get_next_token()))

    def test_eof_is_repeated(self):
        lexer = Lexer("END")
        self.assertEqual(Token(TokenType.END, "END"), lexer.get_next_token())
        for _ in range(3):
            self.assertEqual(Token(TokenType.EOF, None), lexer.get_next_token())

    def test_tokenize_is_deterministic(self):
        text = "PROGRAM P; VAR a:INTEGER; BEGIN a:=2 END."
        first = tokenize(text)
        self.assertEqual(first, tokenize(text))
        self.assertEqual(TokenType.EOF, first[-1].type)

    def test_numbers(self):
        cases = {
            "42": [Token(TokenType.INTEGER_CONST, 42)],
            "3.14": [Token(TokenType.REAL_CONST, 3.14)],
            "1.": [Token(TokenType.INTEGER_CONST, 1), Token(TokenType.DOT, ".")],
            "-5": [Token(TokenType.MINUS, "-"), Token(TokenType.INTEGER_CONST, 5)],
        }
        for case, result in cases.items():
            self.assertEqual(result + [Token(TokenType.EOF, None)], tokenize(case), case)
        self.assertIsInstance(tokenize("7")[0].value, int)
        self.assertIsInstance(tokenize("7.0")[0].value, float)

    def test_reserved_words_are_case_sensitive(self):
        self.assertEqual(TokenType.BEGIN, tokenize("BEGIN")[0].type)
        self.assertEqual(Token(TokenType.ID, "begin"), tokenize("begin")[0])
        self.assertEqual(Token(TokenType.ID, "DIVIDE"), tokenize("DIVIDE")[0])

    def test_assign_and_colon(self):
        types = [token.type for token in tokenize("a := b : c")]
        self.assertEqual(
            [TokenType.ID, TokenType.ASSIGN, TokenType.ID, TokenType.COLON, TokenType.ID, TokenType.EOF],
            types,
        )

    def test_comments_are_skipped(self):
        self.assertEqual(
            [Token(TokenType.ID, "a"), Token(TokenType.ID, "b"), Token(TokenType.EOF, None)],
            tokenize("a { um\ncomentario } b"),
        )

    def test_line_numbers(self):
        lexer = Lexer("a\n{ x\n y }\nb")
        lexer.get_next_token()
        lexer.get_next_token()
        self.assertEqual(4, lexer.lineno)

    def test_errors(self):
        should_raise = {
            "a := 1 @ 2": InvalidCharacterError,
            "a := 'x'": InvalidCharacterError,
            "a := b_c": InvalidCharacterError,
            "a := ٣": InvalidCharacterError,   # dígito árabe-índico
            "x := 1.٥": InvalidCharacterError,
            "BEGIN { sem fim": UnterminatedCommentError,
        }
        for case, error in should_raise.items():
            self.assertRaises(error, tokenize, case)

    def test_error_message_has_line(self):
        with self.assertRaises(InvalidCharacterError) as ctx:
            tokenize("a\nb\n#")
        self.assertIn("line 3", str(ctx.exception))
        self.assertEqual("InvalidCharacter", ctx.exception.kind)


if __name__ == '__main__':
    unittest.main()
