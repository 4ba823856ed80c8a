"""Tag tokens produced by the tokenizer."""

from __future__ import annotations

from pydantic import BaseModel


class Token(BaseModel):
    """One recognised tag occurrence in the source text.

    ``position`` is the 0-based offset of the opening ``<``; ``line`` is 1-based.
    The token's index in its sequence is its identity for cross-referencing.
    """

    name: str
    is_closing: bool
    position: int
    line: int
    raw: str = ""

    model_config = {"frozen": True}
