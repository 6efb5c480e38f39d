"""
Lox Syntax Package

Expression AST nodes and the pretty-printer that renders them.

Author: lox-frontend contributors
"""

from .expr import Expr, ExprType, Literal, Grouping, Unary, Binary
from .printer import ExprPrinter, print_expr
from .errors import FormatError

__all__ = [
    "Expr",
    "ExprType",
    "Literal",
    "Grouping",
    "Unary",
    "Binary",
    "ExprPrinter",
    "print_expr",
    "FormatError",
]
