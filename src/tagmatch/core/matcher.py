"""Per-token partner search used for highlighting.

Each lookup is a local walk from one token and does not consult the
validator.  On malformed input the two can disagree: in ``<a></b></a>``
the validator reports a mismatch while tokens 0 and 2 still match here.
"""

from __future__ import annotations

from collections.abc import Sequence

from tagmatch.models.report import MatchResult
from tagmatch.models.tokens import Token


def find_partner(tokens: Sequence[Token], index: int) -> int | None:
    """Return the index of the partner of ``tokens[index]``, or ``None``.

    A closer walks backward looking for an opener of the same name, an
    opener walks forward looking for a closer of the same name.  Tags of
    the same name and the same direction seen on the way are nested
    occurrences: each is pushed on a local stack, and a candidate found
    while that stack is non-empty pops one entry instead of matching.
    Tags with other names are ignored.

    Raises:
        IndexError: If *index* is outside *tokens*.
    """
    if not 0 <= index < len(tokens):
        raise IndexError(f"token index {index} out of range (0..{len(tokens) - 1})")

    target = tokens[index]
    if target.is_closing:
        candidates = range(index - 1, -1, -1)
    else:
        candidates = range(index + 1, len(tokens))

    nested: list[int] = []
    for i in candidates:
        tag = tokens[i]
        if tag.name != target.name:
            continue
        if tag.is_closing == target.is_closing:
            nested.append(i)
        elif not nested:
            return i
        else:
            nested.pop()
    return None


def match_all(tokens: Sequence[Token]) -> tuple[MatchResult, ...]:
    """Compute a :class:`MatchResult` for every token in one pass.

    Gives the same partners as calling :func:`find_partner` on each index:
    with only same-name tags taking part, the local walks pair tags the way
    ordinary bracket matching does, one stack of open indices per name.
    """
    partners: list[int | None] = [None] * len(tokens)
    open_by_name: dict[str, list[int]] = {}
    for i, token in enumerate(tokens):
        pending = open_by_name.setdefault(token.name, [])
        if not token.is_closing:
            pending.append(i)
        elif pending:
            j = pending.pop()
            partners[i] = j
            partners[j] = i
    return tuple(MatchResult(index=i, partner=p) for i, p in enumerate(partners))
