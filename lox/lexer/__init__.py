"""
Lox Lexer Package

Implements the lexical scanner for Lox and the token/value vocabulary shared
with the later stages of the interpreter.

Key Features:
- Single pass, at most two characters of lookahead
- Whitespace, newlines and comments retained as tokens
- Error recovery: every lexical error collected in one pass
- Source location tracking on every token

Author: lox-frontend contributors
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, significant_tokens
from .values import Value, ValueType, ValueTypeError
from .scanner import Scanner, ScanResult, scan, scan_file
from .errors import LexError, Diagnostic

__all__ = [
    "Scanner",
    "ScanResult",
    "scan",
    "scan_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "significant_tokens",
    "Value",
    "ValueType",
    "ValueTypeError",
    "LexError",
    "Diagnostic",
]
