"""Builders for :class:`~texmath.bindings.FunctionBinding` values.

Each builder captures a small rendering rule (wrap a single argument, join two
arguments with an infix separator, fill the slots of a template, …) and
returns a binding ready to be placed in a scope table.  The notation tables
are plain data fed through :func:`build_function`; no code is generated per
name.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional, Tuple

from .bindings import FunctionBinding
from .safe_string import escape


_SLOT = re.compile(r"#(\d)")

RENDERER_KINDS = ("wrap", "infix", "template", "variadic")


def unary_wrap(name: str, prefix: str, suffix: str = "") -> FunctionBinding:
    """``prefix + arg + suffix`` for exactly one argument."""

    def render(args: Tuple[str, ...]) -> str:
        return f"{prefix}{args[0]}{suffix}"

    return FunctionBinding(name, render, arity=1, style="wrap")


def binary_infix(name: str, separator: str) -> FunctionBinding:
    """``arg1 + separator + arg2`` for exactly two arguments."""

    def render(args: Tuple[str, ...]) -> str:
        return f"{args[0]}{separator}{args[1]}"

    return FunctionBinding(name, render, arity=2, style="infix")


def template(name: str, pattern: str, arity: Optional[int] = None) -> FunctionBinding:
    """Fill the ``#1``, ``#2``, … slots of ``pattern`` with the arguments.

    The slot syntax follows LaTeX macro parameters so patterns read like the
    macro they expand to, e.g. ``\\frac{#1}{#2}``.  When ``arity`` is omitted
    it is the highest slot number used in the pattern.
    """

    slots = [int(number) for number in _SLOT.findall(pattern)]
    if any(slot == 0 for slot in slots):
        raise ValueError(f"template for {name!r} uses slot #0; slots start at #1")
    highest = max(slots, default=0)
    if arity is None:
        arity = highest
    elif arity < highest:
        raise ValueError(
            f"template for {name!r} uses slot #{highest} but declares arity {arity}"
        )

    def render(args: Tuple[str, ...]) -> str:
        return _SLOT.sub(lambda match: args[int(match.group(1)) - 1], pattern)

    return FunctionBinding(name, render, arity=arity, style="template")


def variadic(
    name: str,
    prefix: str,
    suffix: str = "",
    separator: str = ", ",
) -> FunctionBinding:
    """``prefix + separator.join(args) + suffix`` for any number of arguments."""

    def render(args: Tuple[str, ...]) -> str:
        return f"{prefix}{separator.join(args)}{suffix}"

    return FunctionBinding(name, render, arity=None, style="variadic")


def opaque_call(name: str) -> FunctionBinding:
    """Render an unknown call as ``\\mathrm{name}(arg1, arg2)``."""

    prefix = f"\\mathrm{{{escape(name).to_text()}}}("

    def render(args: Tuple[str, ...]) -> str:
        return f"{prefix}{', '.join(args)})"

    return FunctionBinding(name, render, arity=None, style="opaque")


def build_function(name: str, spec: Mapping[str, object]) -> FunctionBinding:
    """Create a binding from a declarative ``spec`` mapping.

    ``spec["kind"]`` selects the builder; the remaining keys are its
    arguments::

        {"kind": "wrap", "prefix": "\\sqrt{", "suffix": "}"}
        {"kind": "infix", "separator": " + "}
        {"kind": "template", "pattern": "\\frac{#1}{#2}"}
        {"kind": "variadic", "prefix": "\\max\\left(", "suffix": "\\right)"}
    """

    kind = spec.get("kind")
    try:
        if kind == "wrap":
            return unary_wrap(name, _text(spec, "prefix"), _text(spec, "suffix", ""))
        if kind == "infix":
            return binary_infix(name, _text(spec, "separator"))
        if kind == "template":
            arity = spec.get("arity")
            if arity is not None and (isinstance(arity, bool) or not isinstance(arity, int)):
                raise ValueError("'arity' must be an integer")
            return template(name, _text(spec, "pattern"), arity)
        if kind == "variadic":
            return variadic(
                name,
                _text(spec, "prefix"),
                _text(spec, "suffix", ""),
                _text(spec, "separator", ", "),
            )
    except KeyError as exc:
        raise ValueError(f"renderer {name!r} is missing {exc.args[0]!r}") from None
    except ValueError as exc:
        raise ValueError(f"renderer {name!r}: {exc}") from None
    raise ValueError(
        f"renderer {name!r} has unknown kind {kind!r}; expected one of {', '.join(RENDERER_KINDS)}"
    )


def _text(spec: Mapping[str, object], key: str, default: Optional[str] = None) -> str:
    if key not in spec:
        if default is None:
            raise KeyError(key)
        return default
    value = spec[key]
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string")
    return value


__all__ = [
    "RENDERER_KINDS",
    "binary_infix",
    "build_function",
    "opaque_call",
    "template",
    "unary_wrap",
    "variadic",
]
