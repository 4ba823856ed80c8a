"""Tag extraction: raw text to an ordered sequence of tag tokens."""

from __future__ import annotations

import re

from tagmatch.models.tokens import Token

# ``<`` + optional ``/`` + name (letter, then letters/digits) + anything up to ``>``.
# ASCII semantics keep ``\b`` from treating non-ASCII letters as part of the name.
TAG_PATTERN = re.compile(r"</?([A-Za-z][A-Za-z0-9]*)\b[^>]*>", re.ASCII)


def line_number(text: str, position: int) -> int:
    """1-based line of *position* within *text*."""
    return text.count("\n", 0, position) + 1


def tokenize(text: str) -> tuple[Token, ...]:
    """Return every tag occurrence in *text*, in source order.

    Self-closing tags (``<br/>``) are recorded as openers and anything
    between the name and ``>`` is ignored.  Text that does not match the
    tag pattern yields no token.
    """
    return tuple(
        Token(
            name=match.group(1),
            is_closing=match.group(0).startswith("</"),
            position=match.start(),
            line=line_number(text, match.start()),
            raw=match.group(0),
        )
        for match in TAG_PATTERN.finditer(text)
    )
