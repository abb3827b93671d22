"""Recursive compiler from nested style specs to scoped CSS rules.

Spec example:
    {
        "width": 10,
        "color": "red",
        "hover": {"color": "white"},       # pseudo-class variant
        "selected": {                      # arbitrary variant
            "fontWeight": "bold",
            "hover": {"color": "black"},
        },
    }

compiles (for the base name ``button``) to:
    .Button_button1 { box-sizing:border-box;width:10px;color:red;-moz-box-sizing:border-box; }
    .Button_button1--hover, .Button_button1:hover { color:white; }
    .Button_button1--selected { font-weight:bold; }
    .Button_button1--selected--hover, .Button_button1--selected:hover { color:black; }
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from domstylesheet.config import CompilerConfig
from domstylesheet.errors import InvalidSpecError, MergeError
from domstylesheet.merge import deep_merge
from domstylesheet.model import CompiledRule, CompiledStyle, Declaration, RuleNode, VariantPath
from domstylesheet.naming import Namer, default_namer
from domstylesheet.values import is_nested, resolve_value

__all__ = [
    "BOX_SIZING_OPEN",
    "BOX_SIZING_CLOSE",
    "StyleCompiler",
    "default_compiler",
    "create",
    "compile_style",
    "override",
    "freeze_spec",
]

logger = logging.getLogger("domstylesheet")

# Every root rule is wrapped in this pair.
BOX_SIZING_OPEN = Declaration("box-sizing", "border-box")
BOX_SIZING_CLOSE = Declaration("-moz-box-sizing", "border-box")


def freeze_spec(spec: Any, path: VariantPath = ()) -> Mapping[str, Any]:
    """Return a read-only snapshot of *spec*, validating its shape.

    Nested mappings become ``MappingProxyType`` and arrays become tuples.
    Leaf values themselves are not inspected here.
    """
    if not isinstance(spec, Mapping):
        where = ".".join(path) or "<root>"
        raise InvalidSpecError(
            f"Style spec at {where} must be a mapping, got {type(spec).__name__}", path=path
        )
    frozen: dict[str, Any] = {}
    for key, value in spec.items():
        if not isinstance(key, str):
            raise InvalidSpecError(f"Style spec keys must be strings, got {key!r}", path=path)
        if is_nested(value):
            frozen[key] = freeze_spec(value, path + (key,))
        elif isinstance(value, list):
            frozen[key] = tuple(value)
        else:
            frozen[key] = value
    return MappingProxyType(frozen)


class StyleCompiler:
    """Compiles style specs into :class:`CompiledStyle` objects.

    The namer is shared by default so that class names stay unique across
    every compiler in the process.  Pass a dedicated ``Namer`` for isolated
    numbering.
    """

    def __init__(self, config: CompilerConfig | None = None, namer: Namer | None = None) -> None:
        self.config = config or CompilerConfig()
        self.namer = namer or default_namer
        self._pseudo = self.config.pseudo_classes()

    # --- public operations ----------------------------------------------------

    def compile(self, spec: Mapping[str, Any], base_name: str) -> CompiledStyle:
        """Compile *spec* into a new style named after *base_name*."""
        if not isinstance(base_name, str) or not base_name:
            raise InvalidSpecError(f"Base name must be a non-empty string, got {base_name!r}")

        frozen = freeze_spec(spec)
        name = self.namer.mint(base_name)
        root = self._compile_node(frozen, name, ())

        nodes = list(root.walk())
        rules = tuple(node.rule.to_css() for node in nodes)
        variant_table = tuple((node.path, node.class_name) for node in nodes if node.path)

        logger.debug("Compiled style %s: %d rule(s)", name, len(rules))
        return CompiledStyle(
            name=name,
            base_name=base_name,
            spec=frozen,
            root=root,
            rules=rules,
            variant_table=variant_table,
            compiler=self,
        )

    def override(
        self,
        base: CompiledStyle | Mapping[str, Any],
        patch: Mapping[str, Any],
        base_name: str | None = None,
    ) -> CompiledStyle:
        """Compile *base*'s spec deep-merged with *patch* into a new style.

        *base* is either a compiled style or a plain spec.  The base name
        defaults to the compiled style's own base name.
        """
        if isinstance(base, CompiledStyle):
            base_spec: Mapping[str, Any] = base.spec
            base_name = base_name or base.base_name
        elif isinstance(base, Mapping):
            base_spec = base
        else:
            raise MergeError(
                f"Cannot override {type(base).__name__}, expected a compiled style or a spec"
            )
        if base_name is None:
            raise InvalidSpecError("A base name is required when overriding a plain spec")

        merged = deep_merge(base_spec, patch)
        logger.debug("Overriding style %r with keys %s", base_name, list(patch))
        return self.compile(merged, base_name)

    # --- tree walk ------------------------------------------------------------

    def _compile_node(self, spec: Mapping[str, Any], root_name: str, path: VariantPath) -> RuleNode:
        declarations: list[Declaration] = []
        children: list[RuleNode] = []
        for key, value in spec.items():
            if is_nested(value):
                sep = self.config.variant_separator
                if sep in key:
                    raise InvalidSpecError(
                        f"Variant name {key!r} must not contain the separator {sep!r}",
                        path=path + (key,),
                    )
                children.append(self._compile_node(value, root_name, path + (key,)))
            else:
                declarations.extend(resolve_value(key, value, self.config.unit))

        if not path:
            rule = CompiledRule(
                selectors=(f".{root_name}",),
                declarations=(BOX_SIZING_OPEN, *declarations, BOX_SIZING_CLOSE),
            )
        else:
            rule = CompiledRule(
                selectors=self._selectors(root_name, path),
                declarations=tuple(declarations),
            )
        return RuleNode(
            path=path,
            class_name=self._modifier(root_name, path),
            rule=rule,
            children=tuple(children),
        )

    def _modifier(self, root_name: str, path: VariantPath) -> str:
        sep = self.config.variant_separator
        return root_name + "".join(sep + segment for segment in path)

    def _selectors(self, root_name: str, path: VariantPath) -> tuple[str, ...]:
        """Return every selector equivalent to the variant at *path*.

        A selector splits the path at ``k``: ``path[:k]`` become dashed
        modifier classes and ``path[k:]``, which must all be pseudo-classes,
        become native pseudo selectors.  The all-dashed form comes first,
        then the splits from the fewest modifier classes upward.
        """
        n = len(path)
        k_min = n
        while k_min > 0 and self._pseudo.is_pseudo(path[k_min - 1]):
            k_min -= 1

        selectors = []
        for k in (n, *range(k_min, n)):
            natives = "".join(self._pseudo.selector(segment) for segment in path[k:])
            selectors.append(f".{self._modifier(root_name, path[:k])}{natives}")
        return tuple(dict.fromkeys(selectors))


default_compiler = StyleCompiler()


def create(spec: Mapping[str, Any], base_name: str) -> CompiledStyle:
    """Compile *spec* with the default compiler."""
    return default_compiler.compile(spec, base_name)


compile_style = create


def override(
    base: CompiledStyle | Mapping[str, Any],
    patch: Mapping[str, Any],
    base_name: str | None = None,
) -> CompiledStyle:
    """Merge *patch* onto *base* and compile the result with the default compiler."""
    return default_compiler.override(base, patch, base_name)
