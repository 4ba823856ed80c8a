"""Validation outcome, match index and report models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from tagmatch.models.errors import TagError
from tagmatch.models.tokens import Token


class ValidationOutcome(BaseModel):
    """Errors in discovery order plus the stack left after the main scan."""

    errors: tuple[TagError, ...] = ()
    final_stack: tuple[str, ...] = ()

    model_config = {"frozen": True}


class MatchResult(BaseModel):
    """Partner of one token as found by the local match search."""

    index: int
    partner: int | None = None

    model_config = {"frozen": True}

    @property
    def matched(self) -> bool:
        return self.partner is not None


class ReportCounts(BaseModel):
    total: int
    opening: int
    closing: int
    error_count: int

    model_config = {"frozen": True}


class Report(BaseModel):
    """Complete result of one analysis run."""

    tokens: tuple[Token, ...]
    errors: tuple[TagError, ...]
    match_results: tuple[MatchResult, ...]
    counts: ReportCounts

    model_config = {"frozen": True}

    @property
    def valid(self) -> bool:
        return self.counts.error_count == 0


class EmptyReason(StrEnum):
    EMPTY_INPUT = "EMPTY_INPUT"
    NO_TAGS = "NO_TAGS"


class EmptyInput(BaseModel):
    """Returned instead of a report when there is nothing to validate."""

    reason: EmptyReason
    message: str

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> EmptyInput:
        return cls(
            reason=EmptyReason.EMPTY_INPUT,
            message="Please enter some markup to validate.",
        )

    @classmethod
    def no_tags(cls) -> EmptyInput:
        return cls(reason=EmptyReason.NO_TAGS, message="No tags found in the input.")


class StepAction(StrEnum):
    PUSH = "push"
    POP = "pop"
    EXTRA_CLOSING = "extra_closing"
    MISMATCH = "mismatch"
    UNCLOSED = "unclosed"


class ValidationStep(BaseModel):
    """State of a validation run after one step.

    ``token_index`` is ``None`` for the end-of-input steps that drain
    unclosed tags from the stack.
    """

    step: int
    action: StepAction
    token_index: int | None = None
    name: str
    stack: tuple[str, ...] = ()
    errors: tuple[TagError, ...] = ()

    model_config = {"frozen": True}

    @property
    def description(self) -> str:
        if self.action is StepAction.PUSH:
            return f"Pushed '<{self.name}>' onto stack"
        if self.action is StepAction.POP:
            return f"Matched '</{self.name}>' with '<{self.name}>' - popped from stack"
        if self.action is StepAction.EXTRA_CLOSING:
            return f"Error: Extra closing tag '</{self.name}>' found"
        if self.action is StepAction.MISMATCH:
            return f"Error: Expected '</{self.errors[-1].expected}>' but found '</{self.name}>'"
        return f"Error: Unclosed tag '<{self.name}>' found"
