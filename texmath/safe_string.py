"""Escape-safety helpers for LaTeX math output.

Text headed for the generated markup comes in two flavours: raw strings that
may contain characters with a special meaning in LaTeX, and
:class:`SafeString` instances that are already valid markup.  :func:`escape`
is the only way to turn the former into the latter and it never touches a
value that is already marked, so content cannot be escaped twice no matter how
many layers hand it around.  :func:`wrap` is the explicit opt-out used for
markup that is trusted by construction (the output of the renderers).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Tuple, Union


DISPLAY_TAG = "tex"

# Order matters: the backslash goes first because every later replacement
# introduces one. The caret goes after the braces because its replacement
# contains some. Every replacement is valid in math mode.
RESERVED_CHARACTERS: Tuple[Tuple[str, str], ...] = (
    ("\\", "\\backslash "),
    ("{", "\\{"),
    ("}", "\\}"),
    ("$", "\\$"),
    ("&", "\\&"),
    ("#", "\\#"),
    ("%", "\\%"),
    ("_", "\\_"),
    ("^", "\\hat{}"),
    ("~", "\\sim "),
)

_REVERSE: Dict[str, str] = {escaped: raw for raw, escaped in RESERVED_CHARACTERS}
_ESCAPE_SEQUENCE = re.compile(
    "|".join(re.escape(escaped) for _, escaped in RESERVED_CHARACTERS)
)


@dataclass(frozen=True)
class SafeString:
    """Text that is known to be valid LaTeX markup."""

    text: str

    def to_text(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"{DISPLAY_TAG}{self.text!r}"

    def __len__(self) -> int:
        return len(self.text)


Markup = Union[str, SafeString]


def escape(value: Markup) -> SafeString:
    """Return ``value`` as markup, escaping reserved characters if needed.

    A :class:`SafeString` is returned unchanged.  Plain strings have every
    reserved character rewritten in the order listed in
    :data:`RESERVED_CHARACTERS`.
    """

    if isinstance(value, SafeString):
        return value
    if not isinstance(value, str):
        raise TypeError(f"escape() expects str or SafeString, got {type(value).__name__}")
    text = value
    for raw, escaped in RESERVED_CHARACTERS:
        text = text.replace(raw, escaped)
    return SafeString(text)


def wrap(raw: str) -> SafeString:
    """Mark ``raw`` as markup without inspecting it."""

    if isinstance(raw, SafeString):
        return raw
    if not isinstance(raw, str):
        raise TypeError(f"wrap() expects str, got {type(raw).__name__}")
    return SafeString(raw)


def unescape(text: Markup) -> str:
    """Reverse :func:`escape`.

    Escape sequences never overlap so a single left-to-right scan recovers
    the original text; ``unescape(escape(s)) == s`` holds for every string.
    """

    if isinstance(text, SafeString):
        text = text.text
    return _ESCAPE_SEQUENCE.sub(lambda match: _REVERSE[match.group(0)], text)


__all__ = [
    "DISPLAY_TAG",
    "Markup",
    "RESERVED_CHARACTERS",
    "SafeString",
    "escape",
    "unescape",
    "wrap",
]
