"""
Test suite for the Lox scanner.

Tests cover:
- Single and two-character tokens
- Comments, whitespace and line tracking
- String, number and identifier literals
- Reserved words
- Error collection and recovery

Author: lox-frontend contributors
"""

import os
import sys
import tempfile
import unittest
from typing import List

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.scanner import Scanner, ScanResult, scan, scan_file
from lox.lexer.tokens import Token, TokenType, KEYWORDS
from lox.lexer.errors import LexError, ERROR_CODES


class ScannerTestCase(unittest.TestCase):
    """Shared helpers for scanner tests."""

    def _types(self, source: str) -> List[TokenType]:
        """Significant token types for a snippet, EOF included."""
        result = scan(source)
        self.assertFalse(result.has_errors(), f"Unexpected errors: {result.errors}")
        return [token.type for token in result.significant()]

    def _first(self, source: str) -> Token:
        return scan(source).tokens[0]


class TestPunctuation(ScannerTestCase):
    """Single-character and one-or-two character tokens."""

    def test_single_character_tokens(self):
        cases = {
            "(": TokenType.LEFT_PAREN,
            ")": TokenType.RIGHT_PAREN,
            "{": TokenType.LEFT_BRACE,
            "}": TokenType.RIGHT_BRACE,
            ",": TokenType.COMMA,
            ".": TokenType.DOT,
            "-": TokenType.MINUS,
            "+": TokenType.PLUS,
            ";": TokenType.SEMICOLON,
            "*": TokenType.STAR,
            "/": TokenType.SLASH,
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                token = self._first(source)
                self.assertEqual(token.type, expected)
                self.assertEqual(token.lexeme, source)
                self.assertEqual(token.line, 1)

    def test_two_character_tokens(self):
        cases = {
            "!": TokenType.BANG,
            "!=": TokenType.BANG_EQUAL,
            "=": TokenType.EQUAL,
            "==": TokenType.EQUAL_EQUAL,
            "<": TokenType.LESS,
            "<=": TokenType.LESS_EQUAL,
            ">": TokenType.GREATER,
            ">=": TokenType.GREATER_EQUAL,
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                self.assertEqual(self._types(source), [expected, TokenType.EOF])

    def test_prefix_followed_by_other_character(self):
        self.assertEqual(self._types("!,"), [TokenType.BANG, TokenType.COMMA, TokenType.EOF])
        self.assertEqual(self._types("!=,"), [TokenType.BANG_EQUAL, TokenType.COMMA, TokenType.EOF])
        self.assertEqual(self._types("/,"), [TokenType.SLASH, TokenType.COMMA, TokenType.EOF])

    def test_only_one_character_of_lookahead_combines(self):
        self.assertEqual(
            self._types("==="),
            [TokenType.EQUAL_EQUAL, TokenType.EQUAL, TokenType.EOF]
        )
        self.assertEqual(
            self._types("<=>"),
            [TokenType.LESS_EQUAL, TokenType.GREATER, TokenType.EOF]
        )


class TestTrivia(ScannerTestCase):
    """Whitespace, newlines and comments are tokens too."""

    def test_empty_source(self):
        result = scan("")
        self.assertEqual(len(result.tokens), 1)
        self.assertEqual(result.tokens[0].type, TokenType.EOF)
        self.assertEqual(result.tokens[0].line, 1)
        self.assertEqual(result.errors, [])

    def test_whitespace_run_is_one_token(self):
        result = scan("     \t\t\r   ")
        self.assertEqual([t.type for t in result.tokens], [TokenType.WHITESPACE, TokenType.EOF])
        self.assertEqual(result.tokens[0].lexeme, "     \t\t\r   ")
        self.assertEqual(result.tokens[1].line, 1)

    def test_newline_carries_pre_increment_line(self):
        result = scan("  ,\n,  ")
        types = [t.type for t in result.tokens]
        self.assertEqual(types, [
            TokenType.WHITESPACE, TokenType.COMMA, TokenType.NEWLINE,
            TokenType.COMMA, TokenType.WHITESPACE, TokenType.EOF,
        ])
        self.assertEqual(result.tokens[1].line, 1)
        self.assertEqual(result.tokens[2].line, 1)
        self.assertEqual(result.tokens[3].line, 2)
        self.assertEqual(result.tokens[-1].line, 2)

    def test_comment_retained(self):
        result = scan("// comment\n1")
        types = [t.type for t in result.tokens]
        self.assertEqual(types, [TokenType.COMMENT, TokenType.NEWLINE, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(result.tokens[0].lexeme, "// comment")
        self.assertEqual(result.tokens[2].line, 2)

    def test_comment_at_end_of_input(self):
        result = scan("1 // trailing")
        self.assertEqual(result.tokens[-2].type, TokenType.COMMENT)
        self.assertEqual(result.tokens[-2].lexeme, "// trailing")
        self.assertEqual(result.tokens[-1].type, TokenType.EOF)

    def test_comment_swallows_operators(self):
        self.assertEqual(self._types("// ( ) \"not a string"), [TokenType.EOF])

    def test_significant_drops_trivia_and_keeps_eof(self):
        result = scan("var x = 1; // one\n")
        self.assertEqual(
            [t.type for t in result.significant()],
            [TokenType.VAR, TokenType.IDENTIFIER, TokenType.EQUAL,
             TokenType.NUMBER, TokenType.SEMICOLON, TokenType.EOF]
        )


class TestStrings(ScannerTestCase):
    """String literals."""

    def test_simple_string(self):
        token = self._first('"foo"')
        self.assertEqual(token.type, TokenType.STRING)
        self.assertEqual(token.lexeme, '"foo"')
        self.assertEqual(token.literal, "foo")

    def test_string_followed_by_punctuation(self):
        result = scan('"foo,",')
        self.assertEqual(result.tokens[0].literal, "foo,")
        self.assertEqual(result.tokens[1].type, TokenType.COMMA)

    def test_multiline_string(self):
        result = scan('"foo\nbar" x')
        string = result.tokens[0]
        self.assertEqual(string.literal, "foo\nbar")
        self.assertEqual(string.line, 1)
        identifier = result.tokens[2]
        self.assertEqual(identifier.type, TokenType.IDENTIFIER)
        self.assertEqual(identifier.line, 2)

    def test_no_escape_processing(self):
        token = self._first(r'"a\nb"')
        self.assertEqual(token.literal, "a\\nb")

    def test_empty_string(self):
        token = self._first('""')
        self.assertEqual(token.type, TokenType.STRING)
        self.assertEqual(token.literal, "")

    def test_unterminated_string(self):
        result = scan('"abc')
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].code, "L002")
        self.assertNotIn(TokenType.STRING, [t.type for t in result.tokens])
        self.assertEqual([t.type for t in result.tokens], [TokenType.EOF])

    def test_unterminated_string_reports_starting_line(self):
        result = scan('1\n"abc\ndef')
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].line, 2)
        self.assertEqual(result.tokens[-1].type, TokenType.EOF)
        self.assertEqual(result.tokens[-1].line, 3)


class TestNumbers(ScannerTestCase):
    """Number literals and the trailing-dot lookahead."""

    def test_integer(self):
        token = self._first("32")
        self.assertEqual(token.type, TokenType.NUMBER)
        self.assertEqual(token.lexeme, "32")
        self.assertEqual(token.literal, 32.0)
        self.assertIsInstance(token.literal, float)

    def test_fraction(self):
        token = self._first("1.5")
        self.assertEqual(token.lexeme, "1.5")
        self.assertEqual(token.literal, 1.5)

    def test_trailing_dot_not_consumed(self):
        result = scan("1.")
        self.assertEqual([t.type for t in result.tokens], [TokenType.NUMBER, TokenType.DOT, TokenType.EOF])
        self.assertEqual(result.tokens[0].lexeme, "1")
        self.assertEqual(result.tokens[0].literal, 1.0)

    def test_second_dot_starts_new_tokens(self):
        result = scan("32.50.3")
        self.assertEqual(
            [(t.type, t.lexeme) for t in result.tokens],
            [(TokenType.NUMBER, "32.50"), (TokenType.DOT, "."),
             (TokenType.NUMBER, "3"), (TokenType.EOF, "")]
        )
        self.assertEqual(result.tokens[0].literal, 32.5)

    def test_trailing_dot_before_identifier(self):
        self.assertEqual(
            self._types("12.abs"),
            [TokenType.NUMBER, TokenType.DOT, TokenType.IDENTIFIER, TokenType.EOF]
        )

    def test_leading_dot_is_not_a_number(self):
        self.assertEqual(self._types(".5"), [TokenType.DOT, TokenType.NUMBER, TokenType.EOF])

    def test_number_then_identifier(self):
        result = scan("1foo")
        self.assertEqual(result.tokens[0].literal, 1.0)
        self.assertEqual(result.tokens[1].type, TokenType.IDENTIFIER)
        self.assertEqual(result.tokens[1].lexeme, "foo")

    def test_minus_is_separate_token(self):
        self.assertEqual(self._types("-3"), [TokenType.MINUS, TokenType.NUMBER, TokenType.EOF])


class TestIdentifiers(ScannerTestCase):
    """Identifiers and reserved words."""

    def test_reserved_words(self):
        for word, expected in KEYWORDS.items():
            with self.subTest(word=word):
                token = self._first(word)
                self.assertEqual(token.type, expected)
                self.assertEqual(token.lexeme, word)
                self.assertTrue(token.is_keyword)

    def test_keyword_prefix_is_identifier(self):
        self.assertEqual(self._first("and").type, TokenType.AND)
        token = self._first("android")
        self.assertEqual(token.type, TokenType.IDENTIFIER)
        self.assertEqual(token.lexeme, "android")
        self.assertEqual(token.literal, "android")
        self.assertEqual(self._first("organ").type, TokenType.IDENTIFIER)

    def test_keywords_are_case_sensitive(self):
        self.assertEqual(self._first("And").type, TokenType.IDENTIFIER)

    def test_underscores_and_digits(self):
        for name in ("_foo", "foo_bar", "x1", "__init__"):
            with self.subTest(name=name):
                token = self._first(name)
                self.assertEqual(token.type, TokenType.IDENTIFIER)
                self.assertEqual(token.lexeme, name)

    def test_boolean_keywords_carry_literal(self):
        self.assertIs(self._first("true").literal, True)
        self.assertIs(self._first("false").literal, False)
        self.assertIsNone(self._first("nil").literal)


class TestErrors(ScannerTestCase):
    """Error collection and recovery."""

    def test_unexpected_character(self):
        result = scan("@")
        self.assertEqual(len(result.errors), 1)
        error = result.errors[0]
        self.assertIsInstance(error, LexError)
        self.assertEqual(error.code, "L001")
        self.assertEqual(error.line, 1)
        self.assertEqual([t.type for t in result.tokens], [TokenType.EOF])

    def test_recovery_continues_scanning(self):
        result = scan("1 # 2\n$ 3")
        self.assertEqual(len(result.errors), 2)
        self.assertEqual([e.line for e in result.errors], [1, 2])
        numbers = [t.literal for t in result.tokens if t.type == TokenType.NUMBER]
        self.assertEqual(numbers, [1.0, 2.0, 3.0])

    def test_each_bad_character_reported(self):
        result = scan("@@@")
        self.assertEqual(len(result.errors), 3)
        self.assertEqual([e.location.column for e in result.errors], [1, 2, 3])

    def test_non_ascii_letters_rejected(self):
        result = scan("é")
        self.assertEqual(len(result.errors), 1)

    def test_error_message_names_location(self):
        result = scan("a ?", filename="script.lox")
        rendered = str(result.errors[0])
        self.assertIn("Unexpected character: '?'", rendered)
        self.assertIn("script.lox:1:3", rendered)

    def test_messages_come_from_error_codes(self):
        result = scan('@ "open')
        self.assertEqual([e.code for e in result.errors], ["L001", "L002"])
        for error in result.errors:
            with self.subTest(code=error.code):
                self.assertTrue(error.message.startswith(ERROR_CODES[error.code]))
        self.assertEqual(result.errors[1].message, "Unterminated string")

    def test_errors_never_raised(self):
        try:
            scan('@ "never closed')
        except LexError:
            self.fail("scan() raised a LexError")


class TestScannerProperties(ScannerTestCase):
    """Whole-stream properties."""

    SAMPLES = [
        "",
        "var answer = 42;",
        "print \"hello\" + name; // greet\n",
        "fun add(a, b) {\n\treturn a + b;\r\n}\n",
        "if (x >= 1.25 and !done) { y = x / 2.5 * -3; }",
        "class Foo < Bar { init() { this.x = nil; super.init(); } }",
        "\"multi\nline\" != \"other\"\n\n// end",
        "while (i <= 10.) i = i + 1;",
    ]

    def test_lexemes_reconstruct_source(self):
        for source in self.SAMPLES:
            with self.subTest(source=source):
                result = scan(source)
                self.assertFalse(result.has_errors())
                self.assertEqual("".join(t.lexeme for t in result.tokens), source)

    def test_exactly_one_eof_at_end(self):
        for source in self.SAMPLES:
            with self.subTest(source=source):
                tokens = scan(source).tokens
                eofs = [t for t in tokens if t.type == TokenType.EOF]
                self.assertEqual(len(eofs), 1)
                self.assertIs(tokens[-1], eofs[0])
                self.assertEqual(tokens[-1].line, source.count("\n") + 1)

    def test_offsets_point_at_lexemes(self):
        source = "fun add(a, b) {\n  return a + b;\n}"
        for token in scan(source).tokens:
            offset = token.location.offset
            self.assertEqual(source[offset:offset + len(token.lexeme)], token.lexeme)

    def test_repeated_scans_are_independent(self):
        scanner = Scanner("1 @ 2")
        first = scanner.scan_tokens()
        second = scanner.scan_tokens()
        self.assertEqual(first.tokens, second.tokens)
        self.assertEqual(len(second.errors), 1)
        self.assertIsNot(first.tokens, second.tokens)
        self.assertTrue(scanner.has_errors())
        self.assertFalse(Scanner("1 2").scan_tokens().has_errors())

    def test_result_unpacks(self):
        tokens, errors = scan("1")
        self.assertEqual(len(tokens), 2)
        self.assertEqual(errors, [])
        self.assertIsInstance(scan("1"), ScanResult)


class TestScanFile(unittest.TestCase):
    """Scanning from a file on disk."""

    def test_scan_file_uses_path_as_filename(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "script.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("print 1;\n@")
            result = scan_file(path)

        self.assertEqual(result.tokens[0].type, TokenType.PRINT)
        self.assertEqual(result.tokens[0].location.filename, path)
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].line, 2)

    def test_missing_file_raises(self):
        with self.assertRaises(OSError):
            scan_file(os.path.join(tempfile.gettempdir(), "no-such-dir-lox", "missing.lox"))


if __name__ == '__main__':
    unittest.main()
