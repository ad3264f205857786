"""Public package exports for the expression-to-LaTeX translator."""

from .bindings import FunctionBinding, SymbolBinding
from .errors import (
    ArityError,
    BindingKindError,
    ClassificationError,
    TranslationError,
    UnresolvedNameError,
    UnsupportedSyntaxError,
)
from .expr import Call, Identifier, Literal, NodeKind, classify
from .names import call_heads, free_identifiers
from .notation import DEFAULT_NOTATION, NotationTable
from .python_frontend import parse_expression
from .safe_string import SafeString, escape, unescape, wrap
from .scope import ScopeTable, build_scope_chain
from .translator import Translator, translate

__all__ = [
    "ArityError",
    "BindingKindError",
    "Call",
    "ClassificationError",
    "DEFAULT_NOTATION",
    "FunctionBinding",
    "Identifier",
    "Literal",
    "NodeKind",
    "NotationTable",
    "SafeString",
    "ScopeTable",
    "SymbolBinding",
    "TranslationError",
    "Translator",
    "UnresolvedNameError",
    "UnsupportedSyntaxError",
    "build_scope_chain",
    "call_heads",
    "classify",
    "escape",
    "free_identifiers",
    "parse_expression",
    "translate",
    "unescape",
    "wrap",
]
