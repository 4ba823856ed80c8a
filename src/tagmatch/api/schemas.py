"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tagmatch.models.errors import TagErrorKind
from tagmatch.models.report import StepAction


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze."""

    text: str = Field(description="Markup text to validate")


class StepsRequest(BaseModel):
    """Request body for POST /analyze/steps."""

    text: str = Field(description="Markup text to replay step by step")
    limit: int | None = Field(default=None, ge=1, description="Maximum steps to return")


class TokenInfo(BaseModel):
    """A tag occurrence in the submitted text."""

    index: int
    name: str
    is_closing: bool
    position: int
    line: int
    raw: str
    partner: int | None = None


class ErrorDetail(BaseModel):
    """A single nesting error."""

    kind: TagErrorKind
    name: str
    message: str
    line: int | None = None
    token_index: int | None = None
    expected: str | None = None


class CountsResponse(BaseModel):
    total: int
    opening: int
    closing: int
    error_count: int


class AnalyzeResponse(BaseModel):
    """Response body for POST /analyze."""

    valid: bool
    counts: CountsResponse
    tokens: list[TokenInfo] = []
    errors: list[ErrorDetail] = []


class StepResponse(BaseModel):
    """One step of a validation replay."""

    step: int
    action: StepAction
    name: str
    description: str
    token_index: int | None = None
    stack: list[str] = []
    error_count: int = 0


class StepsResponse(BaseModel):
    """Response body for POST /analyze/steps."""

    steps: list[StepResponse] = []
    truncated: bool = False
    errors: list[ErrorDetail] = []


class EmptyInputDetail(BaseModel):
    """Detail of the 422 returned when there is nothing to validate."""

    error: str
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
