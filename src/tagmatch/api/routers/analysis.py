"""Analysis endpoints: POST /analyze and POST /analyze/steps."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice

from fastapi import APIRouter, Depends, HTTPException

from tagmatch.api.deps import get_settings
from tagmatch.api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    CountsResponse,
    EmptyInputDetail,
    ErrorDetail,
    StepResponse,
    StepsRequest,
    StepsResponse,
    TokenInfo,
)
from tagmatch.core.pipeline import analyze, extract, iter_steps
from tagmatch.models.errors import TagError
from tagmatch.models.report import EmptyInput, Report
from tagmatch.models.tokens import Token
from tagmatch.settings import Settings

router = APIRouter()


# -- helpers -----------------------------------------------------------------


def _reject_empty(signal: EmptyInput) -> HTTPException:
    detail = EmptyInputDetail(error=signal.reason.value, message=signal.message)
    return HTTPException(status_code=422, detail=detail.model_dump())


def _error_details(errors: Sequence[TagError], tokens: Sequence[Token]) -> list[ErrorDetail]:
    """Convert errors to API details, resolving each token to its index."""
    index_by_position = {t.position: i for i, t in enumerate(tokens)}
    return [
        ErrorDetail(
            kind=e.kind,
            name=e.name,
            message=e.message,
            line=e.line,
            token_index=index_by_position[e.token.position] if e.token is not None else None,
            expected=e.expected,
        )
        for e in errors
    ]


def _analyze_response(report: Report) -> AnalyzeResponse:
    tokens = [
        TokenInfo(
            index=i,
            name=t.name,
            is_closing=t.is_closing,
            position=t.position,
            line=t.line,
            raw=t.raw,
            partner=report.match_results[i].partner,
        )
        for i, t in enumerate(report.tokens)
    ]
    return AnalyzeResponse(
        valid=report.valid,
        counts=CountsResponse(**report.counts.model_dump()),
        tokens=tokens,
        errors=_error_details(report.errors, report.tokens),
    )


# -- endpoints ---------------------------------------------------------------


@router.post("", response_model=AnalyzeResponse)
async def analyze_text(body: AnalyzeRequest) -> AnalyzeResponse:
    """Validate tag nesting and return the full report."""
    result = analyze(body.text)
    if isinstance(result, EmptyInput):
        raise _reject_empty(result)
    return _analyze_response(result)


@router.post("/steps", response_model=StepsResponse)
async def analyze_steps(
    body: StepsRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> StepsResponse:
    """Replay validation one tag at a time, up to *limit* steps."""
    tokens = extract(body.text)
    if isinstance(tokens, EmptyInput):
        raise _reject_empty(tokens)

    limit = min(body.limit or settings.max_steps, settings.max_steps)
    replay = iter_steps(tokens)
    taken = list(islice(replay, limit + 1))
    truncated = len(taken) > limit
    taken = taken[:limit]

    steps = [
        StepResponse(
            step=s.step,
            action=s.action,
            name=s.name,
            description=s.description,
            token_index=s.token_index,
            stack=list(s.stack),
            error_count=len(s.errors),
        )
        for s in taken
    ]
    last_errors = taken[-1].errors if taken else ()
    return StepsResponse(
        steps=steps,
        truncated=truncated,
        errors=_error_details(last_errors, tokens),
    )
