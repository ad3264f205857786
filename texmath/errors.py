"""Exception hierarchy raised while translating expression trees.

Every failure is deterministic: the same tree and notation table always
produce the same error, so nothing in the package retries.  The classes also
derive from the closest builtin exception which lets callers that do not care
about the taxonomy keep catching ``TypeError``/``LookupError``/``ValueError``.
"""

from __future__ import annotations

from typing import Optional


class TranslationError(Exception):
    """Base class for every error reported by :mod:`texmath`."""


class ClassificationError(TranslationError, TypeError):
    """Raised when a node does not match any known expression shape."""

    def __init__(self, node_description: str) -> None:
        super().__init__(f"cannot classify node of this shape: {node_description}")
        self.node_description = node_description


class BindingKindError(TranslationError, LookupError):
    """A name resolved, but only to a binding of the wrong kind."""

    def __init__(self, name: str, required: str) -> None:
        super().__init__(f"name {name!r} is not bound as a {required}")
        self.name = name
        self.required = required


class UnresolvedNameError(TranslationError, LookupError):
    """No scope layer binds the requested name."""

    def __init__(self, name: str, required: str) -> None:
        super().__init__(f"no {required} binding for {name!r}")
        self.name = name
        self.required = required


class ArityError(TranslationError, TypeError):
    """A fixed-arity renderer received the wrong number of arguments."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        plural = "" if expected == 1 else "s"
        super().__init__(
            f"{name!r} expects {expected} argument{plural}, got {actual}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class UnsupportedSyntaxError(TranslationError, ValueError):
    """The Python front end met syntax it cannot express as a tree."""

    def __init__(self, message: str, *, column: Optional[int] = None) -> None:
        if column is not None:
            message = f"{message} (column {column})"
        super().__init__(message)
        self.column = column


__all__ = [
    "ArityError",
    "BindingKindError",
    "ClassificationError",
    "TranslationError",
    "UnresolvedNameError",
    "UnsupportedSyntaxError",
]
