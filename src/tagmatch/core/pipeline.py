"""Orchestrates a run: Text → Tokens → {Validation, Match index} → Report."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from tagmatch.core.matcher import match_all
from tagmatch.core.report import assemble
from tagmatch.core.tokenizer import tokenize
from tagmatch.core.validator import TagValidator, validate
from tagmatch.models.report import EmptyInput, Report, StepAction, ValidationStep
from tagmatch.models.tokens import Token

logger = logging.getLogger(__name__)


def extract(text: str) -> tuple[Token, ...] | EmptyInput:
    """Tokenize *text*, or return the :class:`EmptyInput` signal for it."""
    if not text.strip():
        return EmptyInput.empty()

    tokens = tokenize(text)
    if not tokens:
        return EmptyInput.no_tags()
    return tokens


def analyze(text: str) -> Report | EmptyInput:
    """Validate the tag structure of *text*.

    Returns an :class:`EmptyInput` signal instead of a report when the text
    is blank or contains no recognisable tag.  Leading and trailing
    whitespace only matters for the blank check; token positions refer to
    *text* as given.
    """
    tokens = extract(text)
    if isinstance(tokens, EmptyInput):
        return tokens

    outcome = validate(tokens)
    report = assemble(tokens, outcome.errors, match_all(tokens))
    logger.debug(
        "analyzed %d tags (%d opening, %d closing): %d errors",
        report.counts.total, report.counts.opening, report.counts.closing,
        report.counts.error_count,
    )
    return report


class StepSequence:
    """Lazy, restartable step-by-step replay of a validation run.

    Every iteration starts a fresh run over the same tokens; stopping
    early leaves nothing behind.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tuple(tokens)

    def __iter__(self) -> Iterator[ValidationStep]:
        validator = TagValidator()
        step = 0
        for index, token in enumerate(self.tokens):
            action = validator.feed(token)
            yield ValidationStep(
                step=step,
                action=action,
                token_index=index,
                name=token.name,
                stack=tuple(validator.stack),
                errors=tuple(validator.errors),
            )
            step += 1
        while validator.stack:
            name = validator.drain_one()
            yield ValidationStep(
                step=step,
                action=StepAction.UNCLOSED,
                name=name,
                stack=tuple(validator.stack),
                errors=tuple(validator.errors),
            )
            step += 1

    def __len__(self) -> int:
        # One step per token plus one per tag left open at the end.
        return len(self.tokens) + len(validate(self.tokens).final_stack)


def iter_steps(source: str | Sequence[Token]) -> StepSequence:
    """Return the step replay for *source* (text or already extracted tokens)."""
    tokens = tokenize(source) if isinstance(source, str) else source
    return StepSequence(tokens)
