"""Tests for Pydantic domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tagmatch.models import (
    EmptyInput,
    EmptyReason,
    MatchResult,
    ReportCounts,
    StepAction,
    TagError,
    TagErrorKind,
    Token,
)
from tagmatch.settings import Settings


class TestEnums:
    def test_error_kind_values(self) -> None:
        assert TagErrorKind.EXTRA_CLOSING == "extra_closing"
        assert TagErrorKind.MISMATCH == "mismatch"
        assert TagErrorKind.UNCLOSED == "unclosed"

    def test_step_action_values(self) -> None:
        assert StepAction.PUSH == "push"
        assert StepAction.POP == "pop"


class TestTagError:
    def test_extra_closing(self) -> None:
        token = Token(name="div", is_closing=True, position=12, line=3, raw="</div>")
        error = TagError.extra_closing(token)
        assert error.kind == TagErrorKind.EXTRA_CLOSING
        assert error.line == 3
        assert error.expected is None

    def test_mismatch_carries_expected(self) -> None:
        token = Token(name="b", is_closing=True, position=3, line=1)
        error = TagError.mismatch(token, expected="a")
        assert error.expected == "a"
        assert error.name == "b"

    def test_unclosed_has_only_name(self) -> None:
        error = TagError.unclosed("p")
        assert error.token is None
        assert error.name == "p"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            TagError.unclosed("p").name = "q"  # type: ignore[misc]


class TestResults:
    def test_match_result(self) -> None:
        assert MatchResult(index=0, partner=3).matched
        assert not MatchResult(index=1).matched

    def test_counts_roundtrip_json(self) -> None:
        counts = ReportCounts(total=4, opening=2, closing=2, error_count=0)
        assert ReportCounts.model_validate_json(counts.model_dump_json()) == counts

    def test_empty_signals(self) -> None:
        assert EmptyInput.empty().reason == EmptyReason.EMPTY_INPUT
        assert EmptyInput.no_tags().reason == EmptyReason.NO_TAGS


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PORT", raising=False)
        settings = Settings(_env_file=None)
        assert settings.effective_port == 8000
        assert settings.mcp_transport == "stdio"

    def test_port_takes_precedence(self) -> None:
        settings = Settings(_env_file=None, port=8080, api_server_port=9001)
        assert settings.effective_port == 8080

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_STEPS", "25")
        assert Settings(_env_file=None).max_steps == 25
