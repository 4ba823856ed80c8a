"""Stack-based nesting validation."""

from __future__ import annotations

from collections.abc import Sequence

from tagmatch.models.errors import TagError
from tagmatch.models.report import StepAction, ValidationOutcome
from tagmatch.models.tokens import Token


class TagValidator:
    """Checks nesting discipline of a token sequence with an explicit stack.

    One instance holds the state of one run.  Use :meth:`feed` for each
    token in order and :meth:`finish` once at end of input; :meth:`run`
    does both.  A closing tag that differs from the top of the stack is
    reported as a mismatch and does not pop anything.
    """

    def __init__(self) -> None:
        self.stack: list[str] = []
        self.errors: list[TagError] = []

    def feed(self, token: Token) -> StepAction:
        """Process one token and return what happened to the stack."""
        if not token.is_closing:
            self.stack.append(token.name)
            return StepAction.PUSH

        if not self.stack:
            self.errors.append(TagError.extra_closing(token))
            return StepAction.EXTRA_CLOSING

        top = self.stack[-1]
        if top == token.name:
            self.stack.pop()
            return StepAction.POP

        self.errors.append(TagError.mismatch(token, expected=top))
        return StepAction.MISMATCH

    def drain_one(self) -> str:
        """Pop the innermost open tag and record it as unclosed."""
        name = self.stack.pop()
        self.errors.append(TagError.unclosed(name))
        return name

    def finish(self) -> None:
        while self.stack:
            self.drain_one()

    def run(self, tokens: Sequence[Token]) -> ValidationOutcome:
        for token in tokens:
            self.feed(token)
        final_stack = tuple(self.stack)
        self.finish()
        return ValidationOutcome(errors=tuple(self.errors), final_stack=final_stack)


def validate(tokens: Sequence[Token]) -> ValidationOutcome:
    """Validate *tokens* with a fresh stack.

    ``final_stack`` is the stack as it stood at the end of the scan, before
    the remaining entries were reported as unclosed.
    """
    return TagValidator().run(tokens)
