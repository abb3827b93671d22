"""Compile nested style specs into scoped CSS rules and class-name functions."""

__version__ = "0.1.0"

from domstylesheet.compiler import (
    BOX_SIZING_CLOSE,
    BOX_SIZING_OPEN,
    StyleCompiler,
    compile_style,
    create,
    default_compiler,
    override,
)
from domstylesheet.config import CompilerConfig
from domstylesheet.errors import InvalidSpecError, InvalidValueError, MergeError, StyleError
from domstylesheet.merge import deep_merge
from domstylesheet.model import CompiledRule, CompiledStyle, Declaration, RuleNode
from domstylesheet.naming import Namer, default_namer
from domstylesheet.pseudo import DEFAULT_PSEUDO_CLASSES, PseudoClassTable
from domstylesheet.values import ToCSSConvertible, hyphenate, resolve_value

__all__ = [
    "__version__",
    # compilation
    "StyleCompiler",
    "create",
    "compile_style",
    "override",
    "default_compiler",
    "BOX_SIZING_OPEN",
    "BOX_SIZING_CLOSE",
    # model
    "CompiledStyle",
    "CompiledRule",
    "RuleNode",
    "Declaration",
    # collaborators
    "CompilerConfig",
    "Namer",
    "default_namer",
    "PseudoClassTable",
    "DEFAULT_PSEUDO_CLASSES",
    "ToCSSConvertible",
    "hyphenate",
    "resolve_value",
    "deep_merge",
    # errors
    "StyleError",
    "InvalidValueError",
    "InvalidSpecError",
    "MergeError",
]
