"""Compiled style model: Declaration, CompiledRule, RuleNode and CompiledStyle."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from domstylesheet.compiler import StyleCompiler

VariantPath = tuple[str, ...]


@dataclass(frozen=True)
class Declaration:
    """A single ``property:value`` pair."""

    prop: str  # hyphenated, e.g. "font-size"
    value: str

    def __str__(self) -> str:
        return f"{self.prop}:{self.value}"


@dataclass(frozen=True)
class CompiledRule:
    """One emitted rule: equivalent selectors sharing a declaration block."""

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...]

    @property
    def selector(self) -> str:
        return ", ".join(self.selectors)

    def to_css(self) -> str:
        body = ";".join(str(d) for d in self.declarations)
        if body:
            body += ";"
        return f"{self.selector} {{ {body} }}"


@dataclass(frozen=True)
class RuleNode:
    """A compiled scope of the spec tree and its child variant scopes."""

    path: VariantPath  # () for the root
    class_name: str  # root class for (), modifier class otherwise
    rule: CompiledRule
    children: tuple[RuleNode, ...] = ()

    def walk(self):
        """Yield this node and every descendant in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class CompiledStyle:
    """The immutable result of compiling a style spec.

    ``rules`` holds the serialized rules in pre-order, root first.
    ``class_name`` maps active variant flags to a class attribute string.
    """

    name: str  # minted root class name, e.g. "Style_style3"
    base_name: str  # the name it was minted from, e.g. "style"
    spec: Mapping[str, Any] = field(hash=False)  # frozen snapshot of the compiled tree
    root: RuleNode
    rules: tuple[str, ...]
    variant_table: tuple[tuple[VariantPath, str], ...]
    compiler: StyleCompiler | None = field(default=None, repr=False, compare=False)

    @property
    def variants(self) -> list[VariantPath]:
        """Every variant path in pre-order."""
        return [path for path, _ in self.variant_table]

    def class_name(self, flags: Mapping[str, bool] | None = None, **variants: bool) -> str:
        """Return the root class plus the modifier class of every active path.

        A path is active only when every segment on it is flagged true, so
        a nested variant never shows up without its ancestors.  Names that
        are not variants of this style are ignored.
        """
        active = dict(flags or {})
        active.update(variants)
        names = [self.name]
        for path, modifier in self.variant_table:
            if all(active.get(segment) for segment in path):
                names.append(modifier)
        return " ".join(names)

    def stylesheet(self) -> str:
        """Return all rules joined into a single stylesheet text."""
        return "\n".join(self.rules)

    def override(self, patch: Mapping[str, Any], base_name: str | None = None) -> CompiledStyle:
        """Compile this style's spec merged with *patch* into a new style."""
        if self.compiler is None:
            from domstylesheet.compiler import default_compiler

            return default_compiler.override(self, patch, base_name)
        return self.compiler.override(self, patch, base_name)
