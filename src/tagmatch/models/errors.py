"""Structural nesting errors reported by the validator."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from tagmatch.models.tokens import Token


class TagErrorKind(StrEnum):
    EXTRA_CLOSING = "extra_closing"
    MISMATCH = "mismatch"
    UNCLOSED = "unclosed"


class TagError(BaseModel):
    """A single nesting defect.

    ``token`` is the offending token, or ``None`` for unclosed tags, which
    only carry the name left on the stack.  ``expected`` is set for
    mismatches only.
    """

    kind: TagErrorKind
    name: str
    token: Token | None = None
    expected: str | None = None
    message: str

    model_config = {"frozen": True}

    @property
    def line(self) -> int | None:
        return self.token.line if self.token is not None else None

    @classmethod
    def extra_closing(cls, token: Token) -> TagError:
        return cls(
            kind=TagErrorKind.EXTRA_CLOSING,
            name=token.name,
            token=token,
            message=f"Extra closing tag '{token.name}' found at line {token.line}",
        )

    @classmethod
    def mismatch(cls, token: Token, expected: str) -> TagError:
        return cls(
            kind=TagErrorKind.MISMATCH,
            name=token.name,
            token=token,
            expected=expected,
            message=(
                f"Mismatched tag: expected '</{expected}>' but found "
                f"'</{token.name}>' at line {token.line}"
            ),
        )

    @classmethod
    def unclosed(cls, name: str) -> TagError:
        return cls(
            kind=TagErrorKind.UNCLOSED,
            name=name,
            message=f"Unclosed tag '<{name}>'",
        )
