"""Translate expression trees into LaTeX math markup.

The translator ties the other modules together: it builds a scope chain for
the tree (:mod:`texmath.scope`), evaluates the tree against it depth first and
marks the final text as markup.  Every call is independent; the only shared
state is the read-only notation table.
"""

from __future__ import annotations

import logging
from typing import Optional

from .expr import ExpressionNode, NodeKind, classify
from .notation import DEFAULT_NOTATION, NotationTable
from .safe_string import SafeString, escape, wrap
from .scope import ScopeTable, build_scope_chain, resolve_function, resolve_symbol


logger = logging.getLogger(__name__)


def render_literal(value: object) -> str:
    """Return the markup for a literal value.

    Strings are user data and get escaped; a :class:`SafeString` passes
    through untouched.  Other values use their ``str`` form.
    """

    if not isinstance(value, (str, SafeString)):
        value = str(value)
    return escape(value).to_text()


class Translator:
    """Render :class:`~texmath.expr.ExpressionNode` trees with a notation."""

    def __init__(self, notation: Optional[NotationTable] = None) -> None:
        self.notation = notation if notation is not None else DEFAULT_NOTATION

    def translate(self, tree: ExpressionNode) -> SafeString:
        chain = self.scope_for(tree)
        text = self._evaluate(tree, chain)
        return wrap(text)

    def scope_for(self, tree: ExpressionNode) -> ScopeTable:
        """Return the scope chain :meth:`translate` would use for ``tree``."""

        chain = build_scope_chain(tree, self.notation)
        if logger.isEnabledFor(logging.DEBUG):
            fallback_functions = list(chain.bindings)
            fallback_symbols = [
                name
                for table in chain.layers()
                if table.label == "fallback symbols"
                for name in table.bindings
            ]
            logger.debug(
                "scope for %s: fallback functions=%s fallback symbols=%s",
                type(tree).__name__,
                fallback_functions,
                fallback_symbols,
            )
        return chain

    def _evaluate(self, node: ExpressionNode, chain: ScopeTable) -> str:
        kind = classify(node)
        if kind is NodeKind.LITERAL:
            return render_literal(node.value)
        if kind is NodeKind.IDENTIFIER:
            return resolve_symbol(chain, node.name).text
        if kind is NodeKind.CALL:
            args = [self._evaluate(arg, chain) for arg in node.args]
            return resolve_function(chain, node.head).invoke(args)
        raise AssertionError(f"unhandled node kind {kind}")


def translate(tree: ExpressionNode, notation: Optional[NotationTable] = None) -> SafeString:
    """Translate ``tree`` with ``notation`` (the default table when omitted)."""

    return Translator(notation).translate(tree)


__all__ = ["Translator", "render_literal", "translate"]
