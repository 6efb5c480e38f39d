"""
Expression AST node definitions for Lox.

The node set is closed: Literal, Grouping, Unary and Binary. Nodes are
frozen dataclasses, so a tree cannot be modified once the parser has built
it, and structurally equal trees compare equal.

Operator kinds are not checked here. Building Unary nodes only from
``-``/``!`` and Binary nodes only from arithmetic, comparison and equality
tokens is the parser's job.

Author: lox-frontend contributors
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List

from ..lexer.tokens import Token
from ..lexer.values import Value


class ExprType(Enum):
    """Enumeration of all expression node types."""
    LITERAL = "Literal"
    GROUPING = "Grouping"
    UNARY = "Unary"
    BINARY = "Binary"


class Expr(ABC):
    """Base class for expression nodes."""

    @property
    @abstractmethod
    def node_type(self) -> ExprType:
        pass

    @abstractmethod
    def children(self) -> List['Expr']:
        """Get all child nodes, left to right."""
        pass


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value expression."""
    value: Value

    @property
    def node_type(self) -> ExprType:
        return ExprType.LITERAL

    def children(self) -> List[Expr]:
        return []

    @classmethod
    def number(cls, number: float) -> 'Literal':
        return cls(Value.number(number))

    @classmethod
    def string(cls, text: str) -> 'Literal':
        return cls(Value.string(text))

    @classmethod
    def boolean(cls, flag: bool) -> 'Literal':
        return cls(Value.boolean(flag))

    @classmethod
    def nil(cls) -> 'Literal':
        return cls(Value.nil())


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized sub-expression."""
    expression: Expr

    @property
    def node_type(self) -> ExprType:
        return ExprType.GROUPING

    def children(self) -> List[Expr]:
        return [self.expression]


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation: ``-operand`` or ``!operand``."""
    operator: Token
    operand: Expr

    @property
    def node_type(self) -> ExprType:
        return ExprType.UNARY

    def children(self) -> List[Expr]:
        return [self.operand]


@dataclass(frozen=True)
class Binary(Expr):
    """Binary operation expression."""
    left: Expr
    operator: Token
    right: Expr

    @property
    def node_type(self) -> ExprType:
        return ExprType.BINARY

    def children(self) -> List[Expr]:
        return [self.left, self.right]
