"""Recognized pseudo-class variant names and their native selectors."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

__all__ = ["DEFAULT_PSEUDO_CLASSES", "PseudoClassTable"]

DEFAULT_PSEUDO_CLASSES: Mapping[str, str] = MappingProxyType(
    {
        # user action
        "hover": ":hover",
        "active": ":active",
        "focus": ":focus",
        "focusWithin": ":focus-within",
        "focusVisible": ":focus-visible",
        "visited": ":visited",
        "link": ":link",
        "target": ":target",
        # input state
        "checked": ":checked",
        "disabled": ":disabled",
        "enabled": ":enabled",
        "indeterminate": ":indeterminate",
        "invalid": ":invalid",
        "valid": ":valid",
        "required": ":required",
        "optional": ":optional",
        "readOnly": ":read-only",
        "readWrite": ":read-write",
        "placeholderShown": ":placeholder-shown",
        # structural
        "root": ":root",
        "empty": ":empty",
        "firstChild": ":first-child",
        "lastChild": ":last-child",
        "onlyChild": ":only-child",
        "firstOfType": ":first-of-type",
        "lastOfType": ":last-of-type",
        "onlyOfType": ":only-of-type",
    }
)


class PseudoClassTable:
    """Immutable lookup from variant name to native pseudo selector."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        source = DEFAULT_PSEUDO_CLASSES if entries is None else entries
        self._entries: Mapping[str, str] = MappingProxyType(dict(source))

    def is_pseudo(self, name: str) -> bool:
        return name in self._entries

    def selector(self, name: str) -> str:
        """Return the native selector for *name* (``KeyError`` if unknown)."""
        return self._entries[name]

    def extend(self, extra: Mapping[str, str]) -> PseudoClassTable:
        """Return a new table with *extra* entries added or replaced."""
        merged = dict(self._entries)
        merged.update(extra)
        return PseudoClassTable(merged)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PseudoClassTable({len(self._entries)} entries)"
