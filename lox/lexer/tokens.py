"""
Token definitions for the Lox lexer.

This module defines every token kind the scanner can produce:
- Single-character punctuation and operators
- One-or-two character operators (``!=``, ``==``, ``<=``, ``>=``)
- Literals (strings, numbers, identifiers)
- Reserved words
- Structural markers (whitespace, newlines, comments) and end of input

Author: lox-frontend contributors
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from .values import Value


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # foo, _bar, baz42
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Reserved words
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Structural markers
    # ========================================================================
    WHITESPACE = auto()             # run of spaces, tabs, carriage returns
    NEWLINE = auto()                # \n
    COMMENT = auto()                # // to end of line
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), decoded literal value,
    and the location of the token's first character.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # Decoded value (float for NUMBER, text for STRING)
    location: SourceLocation

    def __str__(self) -> str:
        if self.literal is not None and self.literal != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.literal!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.location!r})")

    @property
    def line(self) -> int:
        """1-based line of the token's first character."""
        return self.location.line

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in LITERAL_TOKENS

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in RESERVED_TOKENS

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in UNARY_OPERATORS or self.type in BINARY_OPERATORS or self.type is TokenType.EQUAL

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    @property
    def is_trivia(self) -> bool:
        """Check if the parser should skip this token."""
        return self.type in TRIVIA_TOKENS

    def literal_value(self) -> Value:
        """
        Get the Value carried by a literal-bearing token.

        Raises:
            ValueError: If the token kind carries no literal value
        """
        if self.type == TokenType.NUMBER:
            return Value.number(self.literal)
        if self.type == TokenType.STRING:
            return Value.string(self.literal)
        if self.type == TokenType.TRUE:
            return Value.boolean(True)
        if self.type == TokenType.FALSE:
            return Value.boolean(False)
        if self.type == TokenType.NIL:
            return Value.nil()
        raise ValueError(f"{self.type.name} token carries no literal value")


# Lookup tables used by the scanner.
# Each one is consulted at most once per lexeme.

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
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
}

# Characters that start either a one- or a two-character token.
# Maps the first character to (one-char type, two-char type); the second
# character is always '='.
TWO_CHAR_TOKENS: Dict[str, tuple] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

RESERVED_TOKENS = frozenset(KEYWORDS.values())

LITERAL_TOKENS = frozenset({
    TokenType.STRING, TokenType.NUMBER,
    TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
})

TRIVIA_TOKENS = frozenset({
    TokenType.WHITESPACE, TokenType.NEWLINE, TokenType.COMMENT,
})

# Operators valid in Unary / Binary position
UNARY_OPERATORS = frozenset({TokenType.MINUS, TokenType.BANG})

BINARY_OPERATORS = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH,
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
    TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL,
})


def significant_tokens(tokens: Iterable[Token]) -> List[Token]:
    """Drop whitespace, newline and comment tokens, keeping EOF."""
    return [token for token in tokens if not token.is_trivia]
