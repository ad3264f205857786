"""Collect the names a tree refers to.

Two independent walks over the same tree: one gathers the free identifiers
(values), the other the heads of every call (functions).  The results drive
the synthesis of fallback bindings in :mod:`texmath.scope`.  Both keep the
first-encountered order so repeated runs build identical scope tables.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .expr import ExpressionNode, NodeKind, classify, walk


def free_identifiers(node: ExpressionNode) -> Tuple[str, ...]:
    """Return the identifiers referenced as values, without duplicates.

    Call heads are function names and are not included; use
    :func:`call_heads` for those.
    """

    seen: Dict[str, None] = {}
    for child in walk(node):
        if classify(child) is NodeKind.IDENTIFIER:
            seen.setdefault(child.name, None)
    return tuple(seen)


def call_heads(node: ExpressionNode) -> Tuple[str, ...]:
    """Return the head name of every call in the tree, without duplicates."""

    seen: Dict[str, None] = {}
    for child in walk(node):
        if classify(child) is NodeKind.CALL:
            seen.setdefault(child.head, None)
    return tuple(seen)


__all__ = ["call_heads", "free_identifiers"]
