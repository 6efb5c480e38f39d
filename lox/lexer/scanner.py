"""
Lox Scanner - turns source text into tokens

Single left-to-right pass with at most two characters of lookahead.
Whitespace, newlines and comments come out as tokens too, so the token
stream always accounts for every character of valid input. Lexical errors
are collected and returned next to the tokens instead of aborting the scan.

Author: lox-frontend contributors
"""

import logging
from typing import List, NamedTuple

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
    significant_tokens
)
from .errors import (
    LexError, create_unexpected_character_error, create_unterminated_string_error
)

logger = logging.getLogger(__name__)

WHITESPACE_CHARS = " \t\r"


class ScanResult(NamedTuple):
    """Everything one scan produced: the tokens and every lexical error."""
    tokens: List[Token]
    errors: List[LexError]

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def significant(self) -> List[Token]:
        """Tokens a parser consumes: trivia removed, EOF kept."""
        return significant_tokens(self.tokens)


class Scanner:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens ending in exactly one EOF
    token. Each call to scan_tokens() starts from a clean state, so the
    same scanner can be run repeatedly with identical results.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the scanner with source text.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexError] = []

        # Where the token being scanned started
        self._start_pos = 0
        self._start_line = 1
        self._start_column = 1

    def scan_tokens(self) -> ScanResult:
        """
        Scan the entire source.

        Returns:
            ScanResult with the token list (EOF last) and all lexical errors
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self._start_pos = self.pos
            self._start_line = self.line
            self._start_column = self.column
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self._location(self.line, self.column, self.pos)))

        logger.debug(
            "scanned %s: %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return ScanResult(self.tokens, self.errors)

    def _scan_token(self):
        """Consume one lexeme starting at the current position."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in TWO_CHAR_TOKENS:
            one_char, two_char = TWO_CHAR_TOKENS[char]
            self._add_token(two_char if self._match('=') else one_char)
        elif char == '/':
            if self._match('/'):
                self._scan_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE_CHARS:
            while not self._is_at_end() and self._peek() in WHITESPACE_CHARS:
                self._advance()
            self._add_token(TokenType.WHITESPACE)
        elif char == '\n':
            # _start_line still holds the line the newline ends
            self._add_token(TokenType.NEWLINE)
        elif char == '"':
            self._scan_string()
        elif self._is_digit(char):
            self._scan_number()
        elif self._is_identifier_start(char):
            self._scan_identifier()
        else:
            self._error(create_unexpected_character_error(char, self._start_location()))

    def _scan_comment(self):
        while not self._is_at_end() and self._peek() != '\n':
            self._advance()
        self._add_token(TokenType.COMMENT)

    def _scan_string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while not self._is_at_end() and self._peek() != '"':
            self._advance()

        if self._is_at_end():
            self._error(create_unterminated_string_error(self._start_location()))
            return

        self._advance()  # Closing quote

        # No escape processing: the literal is the raw text between the quotes
        literal = self.source[self._start_pos + 1:self.pos - 1]
        self._add_token(TokenType.STRING, literal)

    def _scan_number(self):
        """Scan digits with an optional fractional part."""
        while self._is_digit(self._peek()):
            self._advance()

        # A '.' belongs to the number only if a digit follows it
        if self._peek() == '.' and self._is_digit(self._peek(1)):
            self._advance()
            while self._is_digit(self._peek()):
                self._advance()

        lexeme = self.source[self._start_pos:self.pos]
        self._add_token(TokenType.NUMBER, float(lexeme))

    def _scan_identifier(self):
        while self._is_identifier_continue(self._peek()):
            self._advance()

        lexeme = self.source[self._start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)

        if token_type == TokenType.IDENTIFIER:
            literal = lexeme
        elif token_type in (TokenType.TRUE, TokenType.FALSE):
            literal = token_type == TokenType.TRUE
        else:
            literal = None

        self._add_token(token_type, literal)

    def _add_token(self, token_type: TokenType, literal=None):
        lexeme = self.source[self._start_pos:self.pos]
        self.tokens.append(Token(token_type, lexeme, literal, self._start_location()))

    def _error(self, error: LexError):
        logger.debug("lexical error at %s: %s", error.location, error.message)
        self.errors.append(error)

    def _location(self, line: int, column: int, offset: int) -> SourceLocation:
        return SourceLocation(self.filename, line, column, offset)

    def _start_location(self) -> SourceLocation:
        return self._location(self._start_line, self._start_column, self._start_pos)

    @staticmethod
    def _is_digit(char: str) -> bool:
        return '0' <= char <= '9'

    @staticmethod
    def _is_identifier_start(char: str) -> bool:
        return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'

    def _is_identifier_continue(self, char: str) -> bool:
        return self._is_identifier_start(char) or self._is_digit(char)

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self) -> str:
        """Consume one character, updating line/column."""
        char = self.source[self.pos]
        self.pos += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is the expected one."""
        if self._is_at_end() or self.source[self.pos] != expected:
            return False
        self._advance()
        return True

    def _peek(self, offset: int = 0) -> str:
        """Look at a character ahead without consuming it ('\\0' past the end)."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if the last scan encountered any errors."""
        return len(self.errors) > 0


def scan(source: str, filename: str = "<string>") -> ScanResult:
    """
    Scan a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        ScanResult; lexical errors are in ``result.errors``, never raised
    """
    return Scanner(source, filename).scan_tokens()


def scan_file(filepath: str) -> ScanResult:
    """
    Scan a source file.

    Args:
        filepath: Path to source file

    Returns:
        ScanResult for the file contents

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan(source, filepath)
