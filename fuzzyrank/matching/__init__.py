"""Fuzzy matching package for fuzzyrank.

This package contains the FuzzyMatcher that aligns a pattern with a single
candidate, the Ranker that orders a collection of candidates, and the
separator configuration both of them use.

Example:
    >>> from fuzzyrank.matching import Ranker
    >>> ranker = Ranker()
    >>> for match in ranker.rank("fm", ["fuzzy_matcher.py", "README.md"]):
    ...     print(match.source_string, match.score, match.matched_indexes)
"""

from .config import (
    DEFAULT_SEPARATORS,
    MatcherConfig,
    configure_separators,
    get_default_config,
    reset_separators,
)
from .fuzzy_matcher import (
    CAMEL_CASE_BONUS,
    FIRST_RUNE_BONUS,
    LEADING_RUNE_PENALTY,
    MAX_LEADING_RUNE_PENALTY,
    MAX_RECURSIONS,
    SEPARATOR_BONUS,
    SEQUENTIAL_BONUS,
    UNMATCHED_RUNE_PENALTY,
    FuzzyMatcher,
    match,
)
from .ranker import Ranker, rank

__all__ = [
    "CAMEL_CASE_BONUS",
    "DEFAULT_SEPARATORS",
    "FIRST_RUNE_BONUS",
    "LEADING_RUNE_PENALTY",
    "MAX_LEADING_RUNE_PENALTY",
    "MAX_RECURSIONS",
    "SEPARATOR_BONUS",
    "SEQUENTIAL_BONUS",
    "UNMATCHED_RUNE_PENALTY",
    "FuzzyMatcher",
    "MatcherConfig",
    "Ranker",
    "configure_separators",
    "get_default_config",
    "match",
    "rank",
    "reset_separators",
]
