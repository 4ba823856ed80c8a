"""Tag extraction, nesting validation and match indexing."""

from tagmatch.core.matcher import find_partner, match_all
from tagmatch.core.pipeline import analyze, extract, iter_steps
from tagmatch.core.report import assemble
from tagmatch.core.tokenizer import tokenize
from tagmatch.core.validator import TagValidator, validate

__all__ = [
    "TagValidator",
    "analyze",
    "assemble",
    "extract",
    "find_partner",
    "iter_steps",
    "match_all",
    "tokenize",
    "validate",
]
