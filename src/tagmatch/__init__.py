"""TagMatch: markup tag nesting validation."""

from tagmatch.core.pipeline import analyze, iter_steps

__version__ = "0.1.0"

__all__ = ["__version__", "analyze", "iter_steps"]
