"""Expression tree nodes consumed by the translator.

Trees are produced by an external parser (see :mod:`texmath.python_frontend`
for the one shipped with the package) and only ever traversed here.  The node
set is closed: a tree is built from :class:`Literal`, :class:`Identifier` and
:class:`Call` and every consumer dispatches on :func:`classify`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple, Union

from .errors import ClassificationError


class NodeKind(Enum):
    LITERAL = "literal"
    IDENTIFIER = "identifier"
    CALL = "call"


@dataclass(frozen=True)
class Literal:
    """Constant value rendered through its textual form."""

    value: object

    def describe(self) -> str:
        return f"literal {self.value!r}"


@dataclass(frozen=True)
class Identifier:
    """Free name resolved against the symbol layers."""

    name: str

    def describe(self) -> str:
        return f"identifier {self.name}"


@dataclass(frozen=True)
class Call:
    """Application of ``head`` to an ordered list of argument nodes."""

    head: str
    args: Tuple["ExpressionNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable tuple.
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    def describe(self) -> str:
        inner = ", ".join(describe_node(arg) for arg in self.args)
        return f"call {self.head}({inner})"


ExpressionNode = Union[Literal, Identifier, Call]


def classify(node: object) -> NodeKind:
    """Return the :class:`NodeKind` of ``node``.

    Anything that is not one of the three node classes is rejected with a
    :class:`~texmath.errors.ClassificationError`.  Call nodes are also checked
    for a string head since the head is looked up by name.
    """

    if isinstance(node, Literal):
        return NodeKind.LITERAL
    if isinstance(node, Identifier):
        if not isinstance(node.name, str):
            raise ClassificationError(describe_node(node))
        return NodeKind.IDENTIFIER
    if isinstance(node, Call):
        if not isinstance(node.head, str):
            raise ClassificationError(describe_node(node))
        return NodeKind.CALL
    raise ClassificationError(describe_node(node))


def describe_node(node: object) -> str:
    """Return a short human readable description used in error messages."""

    describe = getattr(node, "describe", None)
    if isinstance(node, (Literal, Identifier, Call)) and callable(describe):
        return describe()
    return f"{type(node).__name__} {node!r}"


def call(head: str, *args: ExpressionNode) -> Call:
    """Convenience constructor mirroring the call syntax of the target tree."""

    return Call(head, tuple(args))


def walk(node: ExpressionNode) -> Iterable[ExpressionNode]:
    """Yield ``node`` and every descendant in pre-order."""

    yield node
    if classify(node) is NodeKind.CALL:
        for arg in node.args:
            yield from walk(arg)


__all__ = [
    "Call",
    "ExpressionNode",
    "Identifier",
    "Literal",
    "NodeKind",
    "call",
    "classify",
    "describe_node",
    "walk",
]
