"""Deep merge of a patch spec onto a base spec."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from domstylesheet.errors import InvalidSpecError, MergeError
from domstylesheet.values import is_nested

__all__ = ["deep_merge"]


def _describe(value: Any) -> str:
    return "variant" if is_nested(value) else "value"


def deep_merge(
    base: Mapping[str, Any], patch: Mapping[str, Any], path: tuple[str, ...] = ()
) -> dict[str, Any]:
    """Return a new spec with *patch* merged onto *base*.

    - Keys only in *base* are kept in their original position.
    - Keys only in *patch* are appended in patch order.
    - Two nested specs merge recursively.
    - Two leaf values: the patch value wins outright (arrays are replaced,
      not concatenated).
    - A nested spec meeting a leaf value in either direction is a MergeError.

    Neither input is modified.
    """
    if not isinstance(base, Mapping):
        raise InvalidSpecError(f"Base spec must be a mapping, got {type(base).__name__}", path=path)
    if not isinstance(patch, Mapping):
        raise InvalidSpecError(f"Patch must be a mapping, got {type(patch).__name__}", path=path)

    merged: dict[str, Any] = dict(base)
    for key, value in patch.items():
        if key not in merged:
            merged[key] = value
            continue
        current = merged[key]
        key_path = path + (key,)
        current_nested = is_nested(current)
        value_nested = is_nested(value)
        if current_nested and value_nested:
            merged[key] = deep_merge(current, value, key_path)
        elif current_nested or value_nested:
            raise MergeError(
                f"Cannot merge {_describe(value)} onto {_describe(current)} "
                f"at {'.'.join(key_path)!r}",
                path=key_path,
            )
        else:
            merged[key] = value
    return merged
