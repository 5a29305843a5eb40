"""Ranking of candidate collections for fuzzyrank.

The Ranker applies a FuzzyMatcher to every candidate, drops the candidates
that do not match and orders the rest by descending score. The sort is
stable: candidates with equal scores keep their input order, and every
RankedMatch carries the candidate's index in the input collection.

Example:
    >>> from fuzzyrank.matching import Ranker
    >>> ranker = Ranker()
    >>> [m.source_string for m in ranker.rank("a", ["aaa", "aa", "a"])]
    ['a', 'aa', 'aaa']
"""

import logging
from typing import Iterable, List, Optional

from fuzzyrank.matching.config import MatcherConfig
from fuzzyrank.matching.fuzzy_matcher import FuzzyMatcher
from fuzzyrank.models import RankedMatch

logger = logging.getLogger("fuzzyrank")


class Ranker:
    """Ranks candidate strings by their fuzzy match score.

    Attributes:
        matcher: The FuzzyMatcher applied to each candidate.
    """

    def __init__(
        self,
        matcher: Optional[FuzzyMatcher] = None,
        config: Optional[MatcherConfig] = None,
    ) -> None:
        """Initialize the Ranker.

        Args:
            matcher: Matcher to use. Defaults to a new FuzzyMatcher.
            config: Configuration for the default matcher. Ignored when
                matcher is given.
        """
        self.matcher = matcher or FuzzyMatcher(config)

    def rank(self, pattern: str, candidates: Iterable[str]) -> List[RankedMatch]:
        """Rank candidates against pattern.

        Args:
            pattern: The search pattern.
            candidates: Candidate strings, in input order. Not modified.

        Returns:
            Matching candidates sorted by descending score, equal scores in
            input order. Empty if nothing matched.
        """
        results: List[RankedMatch] = []
        total = 0

        for idx, candidate in enumerate(candidates):
            total += 1
            result = self.matcher.match(pattern, candidate)
            if result.matched:
                results.append(RankedMatch(
                    source_string=candidate,
                    source_index=idx,
                    score=result.score,
                    matched_indexes=result.matched_indexes,
                ))

        # sorted() is stable, so equal scores keep their input order
        results = sorted(results, key=lambda m: -m.score)

        logger.debug(
            f"Ranked {total} candidates for pattern {pattern!r}: {len(results)} matched"
        )
        return results


def rank(pattern: str, candidates: Iterable[str]) -> List[RankedMatch]:
    """Rank candidates using the process-wide configuration."""
    return Ranker().rank(pattern, candidates)
