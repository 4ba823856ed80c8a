"""Command-line checker: report nesting errors in files as ``path:line: message``."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from collections.abc import Sequence
from typing import TextIO

from tagmatch.core.pipeline import analyze
from tagmatch.core.validator import TagValidator
from tagmatch.models.errors import TagErrorKind
from tagmatch.models.report import EmptyInput, Report, StepAction
from tagmatch.models.tokens import Token
from tagmatch.settings import Settings

logger = logging.getLogger("tagmatch.cli")


def unclosed_lines(tokens: Sequence[Token]) -> list[int]:
    """Lines of the openers left on the stack, innermost first.

    Follows the validator's stack step for step so the result lines up
    with its unclosed errors.
    """
    validator = TagValidator()
    open_lines: list[int] = []
    for token in tokens:
        action = validator.feed(token)
        if action is StepAction.PUSH:
            open_lines.append(token.line)
        elif action is StepAction.POP:
            open_lines.pop()
    return list(reversed(open_lines))


def check(text: str, path: str, out: TextIO) -> bool:
    """Print diagnostics for *text*; return True when it is valid."""
    result = analyze(text)
    if isinstance(result, EmptyInput):
        print(f"{path}: {result.message}", file=out)
        return True
    return _print_report(result, path, out)


def _print_report(report: Report, path: str, out: TextIO) -> bool:
    unclosed = iter(unclosed_lines(report.tokens))
    for error in report.errors:
        line = next(unclosed) if error.kind is TagErrorKind.UNCLOSED else error.line
        print(f"{path}:{line}: {error.message}", file=out)
    return report.valid


def main(argv: Sequence[str] | None = None) -> None:
    parser = ArgumentParser(
        prog="tagmatch-check", description="Check that markup tags are properly nested."
    )
    parser.add_argument("paths", nargs="*", help="paths to markup documents (defaults to stdin).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=Settings().log_level.upper())

    valid = True
    if not args.paths:
        valid = check(sys.stdin.read(), "<stdin>", sys.stdout)
    for path in args.paths:
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError as e:
            print(f"file not found: {e.filename}", file=sys.stderr)
            sys.exit(2)
        except UnicodeDecodeError as e:
            print(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})", file=sys.stderr)
            sys.exit(2)
        except OSError as e:
            print(f"{path}: {e.strerror or e}", file=sys.stderr)
            sys.exit(2)
        logger.debug("checking %s (%d chars)", path, len(text))
        valid = check(text, path, sys.stdout) and valid

    sys.exit(0 if valid else 1)


if __name__ == "__main__":
    main()
