"""Parent-linked lookup tables used to resolve names during translation.

A fresh chain is built for every tree.  From the innermost layer outwards:

1. opaque-call fallbacks for call heads the notation does not know,
2. the known functions of the notation,
3. identity fallbacks for identifiers the notation does not know,
4. the known symbols of the notation.

Lookups walk the chain from the innermost layer and the first binding of the
requested kind wins.  Since fallbacks are only synthesised for names absent
from the matching known table, a known entry is never shadowed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Type, TypeVar

from .bindings import Binding, FunctionBinding, SymbolBinding
from .errors import BindingKindError, UnresolvedNameError
from .expr import ExpressionNode
from .names import call_heads, free_identifiers
from .notation import NotationTable
from .renderers import opaque_call


_B = TypeVar("_B", SymbolBinding, FunctionBinding)


@dataclass(frozen=True)
class ScopeTable:
    """Ordered ``name -> Binding`` mapping with an optional parent."""

    label: str
    bindings: Mapping[str, Binding] = field(default_factory=dict)
    parent: Optional["ScopeTable"] = None

    def __post_init__(self) -> None:
        if not isinstance(self.bindings, MappingProxyType):
            object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    def layers(self) -> Iterator["ScopeTable"]:
        """Yield this table followed by its ancestors, innermost first."""

        table: Optional[ScopeTable] = self
        while table is not None:
            yield table
            table = table.parent

    def lookup(self, name: str) -> Optional[Binding]:
        """Return the first binding of ``name`` walking outward."""

        for table in self.layers():
            binding = table.bindings.get(name)
            if binding is not None:
                return binding
        return None

    def lookup_kind(self, name: str, binding_type: Type[_B]) -> _B:
        """Return the first binding of ``name`` that is a ``binding_type``.

        Raises :class:`BindingKindError` when ``name`` is only bound with the
        other kind and :class:`UnresolvedNameError` when it is not bound at
        all.
        """

        mismatch: Optional[Binding] = None
        for table in self.layers():
            binding = table.bindings.get(name)
            if binding is None:
                continue
            if isinstance(binding, binding_type):
                return binding
            if mismatch is None:
                mismatch = binding
        if mismatch is not None:
            raise BindingKindError(name, binding_type.kind)
        raise UnresolvedNameError(name, binding_type.kind)

    def describe(self) -> str:
        lines: List[str] = []
        for table in self.layers():
            lines.append(f"{table.label}:")
            if not table.bindings:
                lines.append("  (empty)")
            for binding in table.bindings.values():
                lines.append(f"  {binding.describe()}")
        return "\n".join(lines)


def resolve_symbol(chain: ScopeTable, name: str) -> SymbolBinding:
    return chain.lookup_kind(name, SymbolBinding)


def resolve_function(chain: ScopeTable, name: str) -> FunctionBinding:
    return chain.lookup_kind(name, FunctionBinding)


def build_scope_chain(tree: ExpressionNode, notation: NotationTable) -> ScopeTable:
    """Build the four-layer chain for ``tree`` and return its innermost layer."""

    known_symbols = ScopeTable("known symbols", notation.symbols)
    fallback_symbols = ScopeTable(
        "fallback symbols",
        {
            name: SymbolBinding(name, name)
            for name in free_identifiers(tree)
            if not notation.has_symbol(name)
        },
        parent=known_symbols,
    )
    known_functions = ScopeTable("known functions", notation.functions, parent=fallback_symbols)
    return ScopeTable(
        "fallback functions",
        {
            name: opaque_call(name)
            for name in call_heads(tree)
            if not notation.has_function(name)
        },
        parent=known_functions,
    )


__all__ = [
    "ScopeTable",
    "build_scope_chain",
    "resolve_function",
    "resolve_symbol",
]
