"""Runtime values for the Lox interpreter.

Every expression evaluates to exactly one of four tagged values:
`Number`, `StringValue`, `Bool` or `Nil`. The tag is the Python class, so
each operator inspects its operands with `isinstance` and never has to
guess what an untyped box contains. `Nil` has a single shared instance,
`NIL`.

The helpers below implement the language rules that are independent of
any operator: truthiness, equality and conversion to display text.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union
import math


@dataclass(frozen=True)
class Number:
    value: float

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


@dataclass(frozen=True)
class StringValue:
    value: str

    def __repr__(self) -> str:
        return f"StringValue({self.value!r})"


@dataclass(frozen=True)
class Bool:
    value: bool

    def __repr__(self) -> str:
        return f"Bool({self.value!r})"


@dataclass(frozen=True)
class Nil:
    """Marker object for the Lox `nil` value."""

    def __repr__(self) -> str:
        return 'Nil'


NIL = Nil()
TRUE = Bool(True)
FALSE = Bool(False)

Value = Union[Number, StringValue, Bool, Nil]


def boolean(flag: bool) -> Bool:
    return TRUE if flag else FALSE


def type_name(value: Value) -> str:
    """Return the Lox type name of a runtime value."""
    if isinstance(value, Number):
        return 'Number'
    if isinstance(value, StringValue):
        return 'String'
    if isinstance(value, Bool):
        return 'Bool'
    if isinstance(value, Nil):
        return 'Nil'
    raise TypeError(f"not a Lox value: {value!r}")


def is_truthy(value: Value) -> bool:
    """Nil and false are falsy; every other value, 0 and "" included, is truthy."""
    if isinstance(value, Nil):
        return False
    if isinstance(value, Bool):
        return value.value
    return True


def values_equal(a: Value, b: Value) -> bool:
    """Structural equality. Values of different types are never equal."""
    if isinstance(a, Nil) and isinstance(b, Nil):
        return True
    if isinstance(a, Number) and isinstance(b, Number):
        return a.value == b.value
    if isinstance(a, StringValue) and isinstance(b, StringValue):
        return a.value == b.value
    if isinstance(a, Bool) and isinstance(b, Bool):
        return a.value == b.value
    return False


def format_number(x: float) -> str:
    """Shortest round-trip digits written positionally, dropping a trailing `.0`."""
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'inf' if x > 0 else '-inf'
    text = format(Decimal(repr(x)), 'f')
    if text.endswith('.0'):
        text = text[:-2]
    return text


def stringify(value: Value) -> str:
    """Convert a Lox value to the text `print` writes."""
    if isinstance(value, Nil):
        return 'nil'
    if isinstance(value, Bool):
        return 'true' if value.value else 'false'
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, StringValue):
        return value.value
    raise TypeError(f"not a Lox value: {value!r}")
