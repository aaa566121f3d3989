"""Runtime value helpers for Lox.

Lox values map directly onto Python objects: numbers are `float`,
strings are `str`, booleans are `bool` and `nil` is `None`. This module
holds the language rules that differ from Python's own behaviour for
those objects: truthiness, equality across kinds, the printed form of a
value and IEEE-754 division.
"""

from __future__ import annotations

import math
from typing import Any


def is_number(value: Any) -> bool:
    # bool is a subclass of int, not float, so it is excluded here
    return isinstance(value, float)


def is_truthy(value: Any) -> bool:
    """Only `nil` and `false` are falsy; `0` and `""` are truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    """Equality per the Lox rules.

    `nil` equals only `nil`, and values of different kinds are never
    equal. Python would otherwise consider `true == 1.0`.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if type(a) is not type(b):
        return False
    return a == b


def divide(a: float, b: float) -> float:
    """Divide two numbers with IEEE-754 semantics instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def type_name(value: Any) -> str:
    """Return the Lox type name of a runtime value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    return type(value).__name__


def stringify(value: Any) -> str:
    """Convert a Lox value to the text `print` writes for it."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        text = str(value)
        if text.endswith('.0'):
            text = text[:-2]
        return text
    return str(value)
