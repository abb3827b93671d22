"""Error hierarchy for the style compiler."""
from __future__ import annotations

from typing import Any


class StyleError(Exception):
    """Base error for all domstylesheet errors."""


class InvalidValueError(StyleError, ValueError, TypeError):
    """A leaf value has a shape that cannot be rendered as a declaration."""

    def __init__(self, message: str, *, prop: str = "", value: Any = None) -> None:
        super().__init__(message)
        self.prop = prop
        self.value = value


class InvalidSpecError(StyleError, TypeError):
    """A non-mapping was given where a style spec is expected."""

    def __init__(self, message: str, *, path: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.path = path


class MergeError(StyleError):
    """A patch cannot be merged onto a base spec because the shapes conflict."""

    def __init__(self, message: str, *, path: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.path = path
