"""fuzzyrank - Fuzzy search and ranking of strings.

A Python library and command line tool that matches short patterns against
strings the way fuzzy file finders do: every pattern character must occur in
order, case-insensitively, and matches are scored by how natural they look
(contiguous runs, word starts, camel case boundaries).

Example:
    >>> import fuzzyrank
    >>> [m.source_string for m in fuzzyrank.rank("a", ["aaa", "aa", "a"])]
    ['a', 'aa', 'aaa']
"""

__version__ = "1.0.0"

from .matching import (
    FuzzyMatcher,
    MatcherConfig,
    Ranker,
    configure_separators,
    match,
    rank,
)
from .models import (
    MatchResult,
    RankedMatch,
    SearchReport,
    SessionSummary,
)

__all__ = [
    "__version__",
    "FuzzyMatcher",
    "MatcherConfig",
    "Ranker",
    "configure_separators",
    "match",
    "rank",
    "MatchResult",
    "RankedMatch",
    "SearchReport",
    "SessionSummary",
]


def main() -> None:
    """Entry point for the fuzzyrank CLI application.

    Imports and runs the Typer app from the fuzzyrank.cli module.
    """
    from fuzzyrank.cli import app
    app()
