"""Report assembly: pure aggregation of upstream results."""

from __future__ import annotations

from collections.abc import Sequence

from tagmatch.models.errors import TagError
from tagmatch.models.report import MatchResult, Report, ReportCounts
from tagmatch.models.tokens import Token


def assemble(
    tokens: Sequence[Token],
    errors: Sequence[TagError],
    match_results: Sequence[MatchResult],
) -> Report:
    """Combine tokens, errors and match results into a :class:`Report`."""
    closing = sum(1 for t in tokens if t.is_closing)
    counts = ReportCounts(
        total=len(tokens),
        opening=len(tokens) - closing,
        closing=closing,
        error_count=len(errors),
    )
    return Report(
        tokens=tuple(tokens),
        errors=tuple(errors),
        match_results=tuple(match_results),
        counts=counts,
    )
