"""Pydantic domain models for TagMatch."""

from tagmatch.models.errors import TagError, TagErrorKind
from tagmatch.models.report import (
    EmptyInput,
    EmptyReason,
    MatchResult,
    Report,
    ReportCounts,
    StepAction,
    ValidationOutcome,
    ValidationStep,
)
from tagmatch.models.tokens import Token

__all__ = [
    "EmptyInput",
    "EmptyReason",
    "MatchResult",
    "Report",
    "ReportCounts",
    "StepAction",
    "TagError",
    "TagErrorKind",
    "Token",
    "ValidationOutcome",
    "ValidationStep",
]
