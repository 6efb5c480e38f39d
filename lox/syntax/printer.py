"""
Expression pretty-printer.

Renders an expression tree as fully parenthesized prefix notation, e.g.
``(* (- 123) (group 45.67))``. The output is a debugging view, not
something the parser reads back.

ExprPrinter is a builder: every build step appends to the one buffer the
printer owns and hands the printer back, so the walk threads a single
accumulator through the whole tree instead of sharing it.

Author: lox-frontend contributors
"""

import logging
from io import StringIO
from typing import Callable, List, Optional, TextIO, Union

from .expr import Expr, Literal, Grouping, Unary, Binary
from .errors import FormatError
from ..lexer.tokens import Token
from ..lexer.values import Value

logger = logging.getLogger(__name__)


class ExprPrinter:
    """Accumulates the rendering of one or more expressions."""

    def __init__(self):
        self._buffer = StringIO()

    def build(self, expr: Expr) -> 'ExprPrinter':
        """
        Append the rendering of expr and return the printer.

        The tree is walked with an explicit work stack holding nodes still to
        render and builder steps still to run, so nesting depth is not bound
        by the interpreter's recursion limit.
        """
        work: List[Union[Expr, Callable[[], 'ExprPrinter']]] = [expr]
        while work:
            item = work.pop()
            if isinstance(item, Literal):
                self.build_literal(item.value)
            elif isinstance(item, Grouping):
                self._l_paren("group")
                work.extend([self._r_paren, item.expression])
            elif isinstance(item, Unary):
                self._l_paren(item.operator.lexeme)
                work.extend([self._r_paren, item.operand])
            elif isinstance(item, Binary):
                self._l_paren(item.operator.lexeme)
                # Pushed in reverse: left renders first
                work.extend([self._r_paren, item.right, self._space, item.left])
            elif callable(item) and not isinstance(item, Expr):
                item()
            else:
                raise TypeError(f"Cannot print {type(item).__name__}: not an expression node")
        return self

    def build_literal(self, value: Value) -> 'ExprPrinter':
        return self._append(str(value))

    def build_grouping(self, expression: Expr) -> 'ExprPrinter':
        return self.build(Grouping(expression))

    def build_unary(self, operator: Token, operand: Expr) -> 'ExprPrinter':
        return self.build(Unary(operator, operand))

    def build_binary(self, left: Expr, operator: Token, right: Expr) -> 'ExprPrinter':
        return self.build(Binary(left, operator, right))

    def text(self) -> str:
        """Everything rendered so far."""
        return self._buffer.getvalue()

    def write_to(self, sink: TextIO) -> str:
        """
        Write the rendered text to a stream.

        Raises:
            FormatError: If the stream rejects the write
        """
        text = self.text()
        try:
            sink.write(text)
        except (OSError, ValueError) as e:
            logger.debug("printer sink failed: %s", e)
            raise FormatError(f"Could not write expression to sink: {e}") from e
        return text

    def _l_paren(self, name: str) -> 'ExprPrinter':
        return self._append(f"({name} ")

    def _r_paren(self) -> 'ExprPrinter':
        return self._append(")")

    def _space(self) -> 'ExprPrinter':
        return self._append(" ")

    def _append(self, text: str) -> 'ExprPrinter':
        self._buffer.write(text)
        return self


def print_expr(expr: Expr, sink: Optional[TextIO] = None) -> str:
    """
    Render an expression tree.

    Args:
        expr: Root of the tree
        sink: Optional text stream that also receives the rendering

    Returns:
        The rendered text

    Raises:
        FormatError: If sink is given and writing to it fails
    """
    printer = ExprPrinter().build(expr)
    if sink is None:
        return printer.text()
    return printer.write_to(sink)
