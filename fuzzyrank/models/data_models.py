"""
Core data models for the fuzzyrank search engine.

This module contains the following dataclasses:
- MatchResult: Outcome of matching one pattern against one candidate
- RankedMatch: A matched candidate as returned by the ranker
- SearchReport: Result of a single query run by a search session
- SessionSummary: Summary of an interactive search session
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class MatchResult:
    """Outcome of matching a pattern against a single candidate."""
    matched: bool                     # Every pattern char found in order
    score: int = 0                    # Only comparable for the same pattern
    matched_indexes: List[int] = field(default_factory=list)  # One per pattern char


@dataclass
class RankedMatch:
    """A candidate that matched the pattern, as returned by the ranker."""
    source_string: str                # The matched candidate
    source_index: int                 # Position in the input collection
    score: int                        # Match score (higher is better)
    matched_indexes: List[int] = field(default_factory=list)  # For highlighting


@dataclass
class SearchReport:
    """Result of a single query run by a SearchSession."""
    pattern: str                      # Pattern as typed
    total_candidates: int             # Size of the searched collection
    matches: List[RankedMatch] = field(default_factory=list)  # Ranked matches
    duration_seconds: float = 0.0     # Time spent ranking

    @property
    def match_count(self) -> int:
        """Number of candidates that matched the pattern."""
        return len(self.matches)


@dataclass
class SessionSummary:
    """Summary of a search session returned by SearchSession."""
    source: str                       # Where the candidates came from
    total_candidates: int = 0         # Number of candidates loaded
    queries_run: int = 0              # Number of patterns ranked
    total_matches: int = 0            # Matches summed over all queries
    duration_seconds: float = 0.0     # Wall-clock session duration
    interrupted: bool = False         # Whether the session ended with Ctrl-C
