"""Values stored in scope tables.

A name is bound either to replacement text (:class:`SymbolBinding`) or to a
render function that combines already rendered argument strings
(:class:`FunctionBinding`).  Both are frozen once created.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Optional, Sequence, Tuple, Union

from .errors import ArityError


RenderFunction = Callable[[Tuple[str, ...]], str]


@dataclass(frozen=True)
class SymbolBinding:
    """Name rendered as a fixed piece of markup."""

    kind: ClassVar[str] = "symbol"

    name: str
    text: str

    def describe(self) -> str:
        return f"{self.name} -> {self.text!r}"


@dataclass(frozen=True)
class FunctionBinding:
    """Name rendered by applying ``render`` to the rendered arguments.

    ``arity`` is ``None`` for renderers accepting any number of arguments;
    otherwise :meth:`invoke` enforces the exact count.
    """

    kind: ClassVar[str] = "function"

    name: str
    render: RenderFunction
    arity: Optional[int] = None
    style: str = "custom"

    def invoke(self, args: Sequence[str]) -> str:
        rendered = tuple(args)
        if self.arity is not None and len(rendered) != self.arity:
            raise ArityError(self.name, self.arity, len(rendered))
        return self.render(rendered)

    def describe(self) -> str:
        arity = "*" if self.arity is None else str(self.arity)
        return f"{self.name}/{arity} ({self.style})"


Binding = Union[SymbolBinding, FunctionBinding]


__all__ = ["Binding", "FunctionBinding", "RenderFunction", "SymbolBinding"]
