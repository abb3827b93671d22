"""Normalization of property values into CSS declarations.

A leaf value is one of:

    scalar        "red", 10, 1.5
    convertible   any object with a zero-argument ``to_css()`` method
    array         a list or tuple of scalars and convertibles

Numbers always receive the configured unit suffix; strings pass through.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from domstylesheet.errors import InvalidValueError
from domstylesheet.model import Declaration

__all__ = [
    "ToCSSConvertible",
    "ValueKind",
    "classify",
    "is_nested",
    "hyphenate",
    "format_scalar",
    "resolve_value",
]

_UPPER_RE = re.compile(r"[A-Z]")


@runtime_checkable
class ToCSSConvertible(Protocol):
    """A value type that knows how to render itself as a CSS scalar."""

    def to_css(self) -> str | int | float: ...


class ValueKind(str, Enum):
    SCALAR = "scalar"
    CONVERTIBLE = "convertible"
    ARRAY = "array"
    NESTED = "nested"


def classify(value: Any, prop: str = "") -> ValueKind:
    """Return the kind of *value*, raising InvalidValueError for anything else."""
    # bool is an int subclass but has no CSS rendering
    if isinstance(value, bool):
        raise InvalidValueError(
            f"Boolean value for {prop!r} cannot be rendered as CSS", prop=prop, value=value
        )
    if isinstance(value, type):
        raise InvalidValueError(
            f"Class {value.__name__} given for {prop!r}, expected an instance",
            prop=prop,
            value=value,
        )
    # conversion takes precedence over every other shape
    if isinstance(value, ToCSSConvertible):
        if not callable(value.to_css):
            raise InvalidValueError(
                f"{type(value).__name__}.to_css for {prop!r} is not callable",
                prop=prop,
                value=value,
            )
        return ValueKind.CONVERTIBLE
    if isinstance(value, (str, int, float)):
        return ValueKind.SCALAR
    if isinstance(value, Mapping):
        return ValueKind.NESTED
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    raise InvalidValueError(
        f"Unsupported value for {prop!r}: {type(value).__name__}", prop=prop, value=value
    )


def is_nested(value: Any) -> bool:
    """Return True if *value* is a variant scope rather than a leaf value."""
    return isinstance(value, Mapping) and not isinstance(value, ToCSSConvertible)


def hyphenate(name: str) -> str:
    """Convert a camelCase property name to its CSS form (fontSize -> font-size)."""
    return _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), name)


def format_scalar(value: str | int | float, unit: str = "px") -> str:
    """Render a scalar, suffixing numbers with *unit*."""
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidValueError(
                f"Non-finite number {value!r} cannot be rendered as CSS", value=value
            )
        if value.is_integer():
            value = int(value)
    return f"{value}{unit}"


def _lift(prop: str, value: Any) -> str | int | float:
    """Convert a single array element or top-level value to a scalar."""
    kind = classify(value, prop)
    if kind is ValueKind.SCALAR:
        return value
    if kind is ValueKind.CONVERTIBLE:
        converted = value.to_css()
        # converted results are never converted again
        if isinstance(converted, bool) or not isinstance(converted, (str, int, float)):
            raise InvalidValueError(
                f"{type(value).__name__}.to_css() for {prop!r} returned "
                f"{type(converted).__name__}, expected a string or number",
                prop=prop,
                value=value,
            )
        return converted
    raise InvalidValueError(
        f"Nested {kind.value} value is not allowed inside {prop!r}", prop=prop, value=value
    )


def resolve_value(prop: str, value: Any, unit: str = "px") -> list[Declaration]:
    """Resolve *value* for *prop* into one or more declarations.

    An empty array still yields a single declaration with an empty value.
    """
    kind = classify(value, prop)
    if kind is ValueKind.NESTED:
        raise InvalidValueError(
            f"Nested spec under {prop!r} is a variant, not a value", prop=prop, value=value
        )

    css_prop = hyphenate(prop)
    if kind is ValueKind.ARRAY:
        if not value:
            return [Declaration(css_prop, "")]
        return [Declaration(css_prop, format_scalar(_lift(prop, item), unit)) for item in value]
    return [Declaration(css_prop, format_scalar(_lift(prop, value), unit))]
