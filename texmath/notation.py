"""Known symbols and functions of the LaTeX math notation.

The tables below are the only customisation point of the translator: adding a
special name, an operator or a notation template means adding one entry here
(or to a JSON notation file loaded through :meth:`NotationTable.load`).  The
default table is built once at import time and never mutated afterwards, so
translations running in parallel threads can share it freely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .bindings import FunctionBinding, SymbolBinding
from .renderers import build_function


logger = logging.getLogger(__name__)


_GREEK_LOWER = (
    "alpha",
    "beta",
    "gamma",
    "delta",
    "epsilon",
    "varepsilon",
    "zeta",
    "eta",
    "theta",
    "vartheta",
    "iota",
    "kappa",
    "lambda",
    "mu",
    "nu",
    "xi",
    "pi",
    "rho",
    "sigma",
    "tau",
    "upsilon",
    "phi",
    "varphi",
    "chi",
    "psi",
    "omega",
)

# Upper-case letters that look like their Latin counterparts have no macro.
_GREEK_UPPER = (
    "Gamma",
    "Delta",
    "Theta",
    "Lambda",
    "Xi",
    "Pi",
    "Sigma",
    "Upsilon",
    "Phi",
    "Psi",
    "Omega",
)

DEFAULT_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        **{name: f"\\{name}" for name in _GREEK_LOWER + _GREEK_UPPER},
        "lam": "\\lambda",
        "inf": "\\infty",
        "infty": "\\infty",
        "nabla": "\\nabla",
        "partial": "\\partial",
        "hbar": "\\hbar",
        "ell": "\\ell",
        "emptyset": "\\emptyset",
    }
)


def _wrap(prefix: str, suffix: str = "") -> Dict[str, str]:
    return {"kind": "wrap", "prefix": prefix, "suffix": suffix}


def _infix(separator: str) -> Dict[str, str]:
    return {"kind": "infix", "separator": separator}


def _template(pattern: str) -> Dict[str, str]:
    return {"kind": "template", "pattern": pattern}


def _named_function(macro: str) -> Dict[str, str]:
    return _wrap(f"\\{macro}\\left(", "\\right)")


DEFAULT_FUNCTIONS: Mapping[str, Mapping[str, object]] = MappingProxyType(
    {
        # prefix operators
        "neg": _wrap("-"),
        "pos": _wrap("+"),
        "not": _wrap("\\lnot "),
        # infix operators
        "+": _infix(" + "),
        "-": _infix(" - "),
        "*": _infix(" \\cdot "),
        "%": _infix(" \\bmod "),
        "==": _infix(" = "),
        "!=": _infix(" \\neq "),
        "<": _infix(" < "),
        "<=": _infix(" \\leq "),
        ">": _infix(" > "),
        ">=": _infix(" \\geq "),
        "and": _infix(" \\land "),
        "or": _infix(" \\lor "),
        "in": _infix(" \\in "),
        # two-slot templates
        "/": _template("\\frac{#1}{#2}"),
        "//": _template("\\left\\lfloor \\frac{#1}{#2} \\right\\rfloor"),
        "**": _template("{#1}^{#2}"),
        "[]": _template("{#1}_{#2}"),
        "frac": _template("\\frac{#1}{#2}"),
        "binom": _template("\\binom{#1}{#2}"),
        "root": _template("\\sqrt[#2]{#1}"),
        # grouping and named functions
        "paren": _wrap("\\left(", "\\right)"),
        "sqrt": _wrap("\\sqrt{", "}"),
        "abs": _wrap("\\left|", "\\right|"),
        "floor": _wrap("\\left\\lfloor ", " \\right\\rfloor"),
        "ceil": _wrap("\\left\\lceil ", " \\right\\rceil"),
        "sin": _named_function("sin"),
        "cos": _named_function("cos"),
        "tan": _named_function("tan"),
        "arcsin": _named_function("arcsin"),
        "arccos": _named_function("arccos"),
        "arctan": _named_function("arctan"),
        "sinh": _named_function("sinh"),
        "cosh": _named_function("cosh"),
        "tanh": _named_function("tanh"),
        "exp": _named_function("exp"),
        "log": _named_function("log"),
        "ln": _named_function("ln"),
        "max": {"kind": "variadic", "prefix": "\\max\\left(", "suffix": "\\right)"},
        "min": {"kind": "variadic", "prefix": "\\min\\left(", "suffix": "\\right)"},
    }
)


@dataclass(frozen=True)
class NotationTable:
    """Read-only known-symbol and known-function tables."""

    symbols: Mapping[str, SymbolBinding] = field(default_factory=dict)
    functions: Mapping[str, FunctionBinding] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))
        object.__setattr__(self, "functions", MappingProxyType(dict(self.functions)))

    @classmethod
    def from_specs(
        cls,
        symbols: Mapping[str, str],
        functions: Mapping[str, Mapping[str, object]],
    ) -> "NotationTable":
        """Build a table from plain ``name -> text`` and ``name -> spec`` data."""

        return cls(
            {name: _symbol(name, text) for name, text in symbols.items()},
            {name: build_function(name, spec) for name, spec in functions.items()},
        )

    def extend(
        self,
        *,
        symbols: Optional[Mapping[str, str]] = None,
        functions: Optional[Mapping[str, Mapping[str, object]]] = None,
    ) -> "NotationTable":
        """Return a new table with extra entries layered over this one."""

        extra = NotationTable.from_specs(symbols or {}, functions or {})
        return NotationTable(
            {**self.symbols, **extra.symbols},
            {**self.functions, **extra.functions},
        )

    @classmethod
    def load(cls, path: Path, base: Optional["NotationTable"] = None) -> "NotationTable":
        """Load a JSON notation file and layer it over ``base``.

        The file holds an object with optional ``symbols`` (``name -> text``)
        and ``functions`` (``name -> renderer spec``) members; see
        :func:`texmath.renderers.build_function` for the spec format.
        ``base`` defaults to :data:`DEFAULT_NOTATION`.
        """

        data: Any = json.loads(path.read_text("utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"notation file {path} must contain a JSON object")

        symbols = data.get("symbols", {})
        functions = data.get("functions", {})
        if not isinstance(symbols, dict):
            raise ValueError(f"notation file {path}: 'symbols' must be an object")
        if not isinstance(functions, dict):
            raise ValueError(f"notation file {path}: 'functions' must be an object")
        for name, spec in functions.items():
            if not isinstance(spec, dict):
                raise ValueError(f"notation file {path}: function {name!r} must be an object")

        table = (base or DEFAULT_NOTATION).extend(symbols=symbols, functions=functions)
        logger.debug(
            "loaded notation file %s (%d symbols, %d functions)",
            path,
            len(symbols),
            len(functions),
        )
        return table

    def has_symbol(self, name: str) -> bool:
        return name in self.symbols

    def has_function(self, name: str) -> bool:
        return name in self.functions


def _symbol(name: str, text: object) -> SymbolBinding:
    if not isinstance(text, str):
        raise ValueError(f"symbol {name!r} must map to a string")
    return SymbolBinding(name, text)


DEFAULT_NOTATION = NotationTable.from_specs(DEFAULT_SYMBOLS, DEFAULT_FUNCTIONS)


__all__ = [
    "DEFAULT_FUNCTIONS",
    "DEFAULT_NOTATION",
    "DEFAULT_SYMBOLS",
    "NotationTable",
]
