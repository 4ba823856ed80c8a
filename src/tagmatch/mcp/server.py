"""FastMCP server exposing TagMatch's analysis as MCP tools.

Run via::

    tagmatch-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http tagmatch-mcp    # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  tagmatch-mcp    # legacy SSE on port 9000

Tools are stateless: every call tokenizes and validates the text it is given.
"""

from __future__ import annotations

import logging
from itertools import islice

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from tagmatch import __version__
from tagmatch.core.matcher import find_partner
from tagmatch.core.pipeline import analyze, iter_steps
from tagmatch.models.report import EmptyInput, Report
from tagmatch.settings import Settings

logger = logging.getLogger("tagmatch.mcp")

mcp = FastMCP("TagMatch")


def _require_report(text: str) -> Report:
    result = analyze(text)
    if isinstance(result, EmptyInput):
        raise ToolError(result.message)
    return result


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool
def analyze_markup(text: str) -> str:
    """Check that the tags in a markup document are properly nested.

    Returns a summary of the tags found followed by every nesting error
    (mismatched, extra closing and unclosed tags) in the order found.

    Args:
        text: Markup document to check.
    """
    logger.info("analyze_markup called (text length=%d)", len(text))
    report = _require_report(text)
    counts = report.counts
    lines = [
        f"Total tags found: {counts.total}",
        f"Opening tags: {counts.opening}",
        f"Closing tags: {counts.closing}",
        f"Errors found: {counts.error_count}",
    ]
    if report.valid:
        lines.append("All tags are properly matched and nested.")
        return "\n".join(lines)

    lines.append("Errors:")
    for e in report.errors:
        lines.append(f"  [{e.kind}] {e.message}")
    unmatched = [m.index for m in report.match_results if not m.matched]
    if unmatched:
        lines.append("Tags without a partner:")
        for i in unmatched:
            token = report.tokens[i]
            lines.append(f"  #{i} {token.raw} (line {token.line})")
    return "\n".join(lines)


@mcp.tool
def step_through(text: str, limit: int = 50) -> str:
    """Replay the stack-based validation one tag at a time.

    Each line shows the action taken and the stack afterwards (bottom to top).

    Args:
        text: Markup document to replay.
        limit: Maximum number of steps to show.
    """
    if limit < 1:
        raise ToolError("limit must be at least 1")
    report = _require_report(text)
    replay = iter_steps(report.tokens)
    lines = []
    for s in islice(replay, limit):
        stack = " ".join(f"<{name}>" for name in s.stack) or "(empty)"
        lines.append(f"Step {s.step + 1}: {s.description}  stack: {stack}")
    remaining = len(replay) - len(lines)
    if remaining > 0:
        lines.append(f"... {remaining} more step(s)")
    return "\n".join(lines)


@mcp.tool
def find_tag_partner(text: str, index: int) -> str:
    """Find the opening or closing counterpart of one tag.

    Args:
        text: Markup document.
        index: 0-based index of the tag among all tags in the document.
    """
    report = _require_report(text)
    try:
        partner = find_partner(report.tokens, index)
    except IndexError as exc:
        raise ToolError(str(exc)) from exc
    token = report.tokens[index]
    if partner is None:
        return f"#{index} {token.raw} (line {token.line}) has no partner"
    other = report.tokens[partner]
    return (
        f"#{index} {token.raw} (line {token.line}) matches "
        f"#{partner} {other.raw} (line {other.line})"
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "TagMatch MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
