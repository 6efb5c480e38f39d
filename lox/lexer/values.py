"""
Literal values for the Lox front end.

A Value is the decoded payload carried by NUMBER and STRING tokens and by
Literal expression nodes. The set of variants is closed: strings, 64-bit
floats, booleans and nil.

Author: lox-frontend contributors
"""

import math
from decimal import Decimal
from enum import Enum
from dataclasses import dataclass
from typing import Any


class ValueType(Enum):
    """The four kinds of literal value."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NIL = "nil"


class ValueTypeError(TypeError):
    """Raised when a value is read back as the wrong kind."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Type error: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class Value:
    """
    A literal value.

    Build values through the classmethods rather than the constructor so the
    payload always matches its type.
    """
    type: ValueType
    payload: Any = None

    @classmethod
    def string(cls, text: str) -> 'Value':
        return cls(ValueType.STRING, text)

    @classmethod
    def number(cls, number: float) -> 'Value':
        return cls(ValueType.NUMBER, float(number))

    @classmethod
    def boolean(cls, flag: bool) -> 'Value':
        return cls(ValueType.BOOLEAN, bool(flag))

    @classmethod
    def nil(cls) -> 'Value':
        return cls(ValueType.NIL, None)

    @classmethod
    def from_python(cls, obj: Any) -> 'Value':
        """Wrap a plain Python object (str, int, float, bool or None)."""
        # bool first: bool is a subclass of int
        if obj is None:
            return cls.nil()
        if isinstance(obj, bool):
            return cls.boolean(obj)
        if isinstance(obj, (int, float)):
            return cls.number(obj)
        if isinstance(obj, str):
            return cls.string(obj)
        raise ValueTypeError("string, number, boolean or nil", type(obj).__name__)

    @property
    def type_name(self) -> str:
        return self.type.value

    def as_number(self) -> float:
        if self.type is ValueType.NUMBER:
            return self.payload
        raise ValueTypeError("number", self.type_name)

    def as_string(self) -> str:
        if self.type is ValueType.STRING:
            return self.payload
        raise ValueTypeError("string", self.type_name)

    def as_bool(self) -> bool:
        """Read a boolean back; nil reads as false."""
        if self.type is ValueType.BOOLEAN:
            return self.payload
        if self.type is ValueType.NIL:
            return False
        raise ValueTypeError("boolean", self.type_name)

    def is_truthy(self) -> bool:
        if self.type is ValueType.NIL:
            return False
        if self.type is ValueType.BOOLEAN:
            return self.payload
        return True

    def __str__(self) -> str:
        if self.type is ValueType.STRING:
            return self.payload
        if self.type is ValueType.NUMBER:
            return format_number(self.payload)
        if self.type is ValueType.BOOLEAN:
            return "true" if self.payload else "false"
        return "nil"

    def __repr__(self) -> str:
        if self.type is ValueType.NIL:
            return "Value.nil()"
        return f"Value.{self.type_name}({self.payload!r})"


def format_number(number: float) -> str:
    """
    Render a number in plain decimal form.

    Integral values drop the fractional part (``1.0`` renders as ``1``),
    everything else uses the shortest round-tripping representation.
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number.is_integer():
        if number == 0 and math.copysign(1.0, number) < 0:
            return "-0"
        return str(int(number))
    text = repr(number)
    if 'e' not in text:
        return text
    # repr switches to exponent form for very small magnitudes
    return format(Decimal(text), 'f')
