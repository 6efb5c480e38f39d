"""
Lox Front End Package

Scanner, token/value model, expression AST and pretty-printer for the Lox
scripting language: the front end of a tree-walk interpreter.

Architecture:
    lox/
    ├── lexer/           # Tokens, literal values and the scanner
    └── syntax/          # Expression AST and pretty-printer

Author: lox-frontend contributors
License: MIT
"""

__version__ = "0.1.0"
__author__ = "lox-frontend contributors"
__license__ = "MIT"

from .lexer import Scanner, ScanResult, scan, scan_file, Token, TokenType, Value, LexError
from .syntax import Expr, Literal, Grouping, Unary, Binary, ExprPrinter, print_expr, FormatError

__all__ = [
    # Scanning
    "Scanner",
    "ScanResult",
    "scan",
    "scan_file",
    "Token",
    "TokenType",
    "Value",
    "LexError",

    # Expressions
    "Expr",
    "Literal",
    "Grouping",
    "Unary",
    "Binary",
    "ExprPrinter",
    "print_expr",
    "FormatError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
