"""
Models package for the fuzzyrank search engine.

This package provides convenient imports for all data models:
- MatchResult: Single pattern/candidate match outcome
- RankedMatch: Ranked match with its source index
- SearchReport: Result of one session query
- SessionSummary: Search session statistics
"""

from .data_models import (
    MatchResult,
    RankedMatch,
    SearchReport,
    SessionSummary,
)

__all__ = [
    "MatchResult",
    "RankedMatch",
    "SearchReport",
    "SessionSummary",
]
