"""
Runtime type assertions over a small, closed set of value kinds.
"""

from __future__ import annotations

import datetime as dt
import numbers
import re
from enum import Enum
from typing import Any, Union


class VariableKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"
    REGEXP = "regexp"
    DATE = "date"
    UNDEFINED = "undefined"


def kind_of(value: Any) -> VariableKind:
    """Classify *value* structurally into a `VariableKind`."""
    if value is None:
        return VariableKind.UNDEFINED
    # bool is an int subclass; test it first
    if isinstance(value, bool):
        return VariableKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return VariableKind.NUMBER
    if isinstance(value, str):
        return VariableKind.STRING
    if isinstance(value, re.Pattern):
        return VariableKind.REGEXP
    if isinstance(value, dt.date):
        return VariableKind.DATE
    if isinstance(value, (list, tuple)):
        return VariableKind.ARRAY
    if callable(value):
        return VariableKind.FUNCTION
    return VariableKind.OBJECT


def validate_variable_type(value: Any, expected_kind: Union[str, VariableKind]) -> None:
    """
    Raise TypeError unless *value* is of *expected_kind*.

    Valid kinds are: string, number, boolean, object, array, function,
    regexp, date, undefined. Any other *expected_kind* raises ValueError.
    """
    try:
        expected = VariableKind(expected_kind)
    except ValueError:
        valid = ", ".join(kind.value for kind in VariableKind)
        raise ValueError(f"Unknown variable kind {expected_kind!r}; expected one of: {valid}") from None

    actual = kind_of(value)
    if actual is not expected:
        raise TypeError(f'Variable of type "{actual.value}" must be of type "{expected.value}"')
