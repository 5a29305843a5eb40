"""Fuzzy matching implementation for fuzzyrank.

This module provides the FuzzyMatcher class which decides whether every
character of a pattern occurs, in order and case-insensitively, within a
candidate string, and scores how natural the best alignment is.

The search is a bounded backtracking search. Each time a pattern character
matches, two alignments are explored:
    1. Eager: take this occurrence and advance both cursors.
    2. Skip: search the same remaining pattern one position further along,
       keeping the occurrences taken so far.
The skip branch with the strictly highest score replaces the eager alignment
only if it scores strictly higher, so equal scores keep the earliest
alignment. Every skip branch spends one unit of a recursion budget of
MAX_RECURSIONS; a branch that runs out of budget is treated as a failed
match, which bounds the work on inputs such as "ab" repeated many times.

Scoring of a complete alignment:
    - LEADING_RUNE_PENALTY per character before the first match, clamped at
      MAX_LEADING_RUNE_PENALTY (no penalty for an empty pattern)
    - UNMATCHED_RUNE_PENALTY per unmatched character
    - FIRST_RUNE_BONUS if the first character is matched
    - SEQUENTIAL_BONUS per match directly following the previous match
    - CAMEL_CASE_BONUS per uppercase match preceded by a lowercase character
    - SEPARATOR_BONUS per match preceded by a configured separator

Example:
    >>> from fuzzyrank.matching import FuzzyMatcher
    >>> matcher = FuzzyMatcher()
    >>> result = matcher.match("abc", "aXbXcXXX")
    >>> result.matched_indexes
    [0, 2, 4]
"""

from typing import Dict, List, Optional, Tuple

from fuzzyrank.matching.config import MatcherConfig, get_default_config
from fuzzyrank.models import MatchResult

MAX_RECURSIONS = 10

SEQUENTIAL_BONUS = 15       # Bonus for adjacent matches
SEPARATOR_BONUS = 20        # Bonus if a match occurs right after a separator
CAMEL_CASE_BONUS = 20       # Bonus for an uppercase match after a lowercase character
FIRST_RUNE_BONUS = 15       # Bonus if the first character is matched

LEADING_RUNE_PENALTY = -5       # Penalty for every character before the first match
MAX_LEADING_RUNE_PENALTY = -15  # Maximum penalty for leading characters
UNMATCHED_RUNE_PENALTY = -1     # Penalty for every character that wasn't matched

# (partial score, matched indexes) of the best alignment of a pattern suffix
_Alignment = Tuple[int, Tuple[int, ...]]


def is_lower(char: str) -> bool:
    """Return True if char has a single-character uppercase form.

    Characters that only upper-case to several characters, like "ß" ("SS"),
    are not lowercase. Greek letters with ypogegrammeni upper-case to a
    single titlecase letter and still count.
    """
    upper = char.upper()
    if len(upper) != 1:
        upper = char.title()
    return len(upper) == 1 and upper != char


def is_upper(char: str) -> bool:
    """Return True if char changes when lower-cased.

    "İ" lower-cases to "i" plus a combining dot and counts as uppercase.
    """
    return char.lower()[:1] != char


class _AlignmentSearch:
    """Backtracking search over the alignments of one pattern and candidate.

    The best alignment of pattern[p:] against candidate[start:] does not
    depend on the occurrences taken before it: a skip branch always starts
    at least two positions after the previous match, so no sequential bonus
    crosses the boundary. Sub-searches are therefore memoised on
    (pattern position, string position, remaining budget), which yields the
    same alignments as the plain recursion without repeating work.
    """

    def __init__(self, pattern: str, candidate: str, config: MatcherConfig) -> None:
        self._candidate = candidate
        self._config = config
        self._pattern = [c.casefold() for c in pattern]
        self._text = [c.casefold() for c in candidate]
        self._bonuses: List[int] = []
        self._memo: Dict[Tuple[int, int, int], Optional[_Alignment]] = {}

    def align(self) -> Optional[_Alignment]:
        """Best alignment of the whole pattern, or None."""
        if not self.is_feasible():
            return None
        self._bonuses = [
            self._position_bonus(self._candidate, idx, self._config)
            for idx in range(len(self._candidate))
        ]
        return self.best(0, 0, MAX_RECURSIONS)

    @staticmethod
    def _position_bonus(candidate: str, idx: int, config: MatcherConfig) -> int:
        """Bonus earned by matching the character at idx."""
        if idx == 0:
            return FIRST_RUNE_BONUS

        bonus = 0
        left_neighbor = candidate[idx - 1]
        if is_lower(left_neighbor) and is_upper(candidate[idx]):
            bonus += CAMEL_CASE_BONUS
        if config.is_separator(left_neighbor):
            bonus += SEPARATOR_BONUS
        return bonus

    def is_feasible(self) -> bool:
        """Check that the pattern is a case-insensitive subsequence."""
        offset = 0
        for char in self._pattern:
            try:
                offset = self._text.index(char, offset) + 1
            except ValueError:
                return False
        return True

    def _gain(self, pattern_idx: int, str_idx: int, previous: Optional[int]) -> int:
        """Score contributed by matching pattern[pattern_idx] at str_idx."""
        gain = self._bonuses[str_idx]
        if pattern_idx == 0:
            gain += max(LEADING_RUNE_PENALTY * str_idx, MAX_LEADING_RUNE_PENALTY)
        if previous is not None and previous + 1 == str_idx:
            gain += SEQUENTIAL_BONUS
        return gain

    def best(self, pattern_idx: int, start: int, remaining: int) -> Optional[_Alignment]:
        """Best alignment of pattern[pattern_idx:] within text[start:].

        Returns None if the pattern suffix cannot be aligned or the
        recursion budget is exhausted.
        """
        if remaining < 0:
            return None

        key = (pattern_idx, start, remaining)
        if key in self._memo:
            return self._memo[key]

        pattern = self._pattern
        text = self._text

        eager: List[int] = []
        score = 0
        best_skip: Optional[_Alignment] = None

        p, i = pattern_idx, start
        while p < len(pattern) and i < len(text):
            if pattern[p] != text[i]:
                i += 1
                continue

            skipped = self.best(p, i + 1, remaining - 1)
            if skipped is not None:
                skip_score = score + skipped[0]
                if best_skip is None or skip_score > best_skip[0]:
                    best_skip = (skip_score, tuple(eager) + skipped[1])

            score += self._gain(p, i, eager[-1] if eager else None)
            eager.append(i)
            p += 1
            i += 1

        result: Optional[_Alignment]
        if p < len(pattern):
            result = None
        elif best_skip is not None and best_skip[0] > score:
            result = best_skip
        else:
            result = (score, tuple(eager))

        self._memo[key] = result
        return result


class FuzzyMatcher:
    """Matches a pattern against candidate strings and scores the match.

    Attributes:
        config: Explicit MatcherConfig, or None to use the process-wide
            default at the start of every match.

    Example:
        >>> matcher = FuzzyMatcher()
        >>> matcher.match("IaCCS", "thisIsACamelCaseString").matched_indexes
        [4, 6, 7, 12, 16]
    """

    def __init__(self, config: Optional[MatcherConfig] = None) -> None:
        """Initialize the FuzzyMatcher.

        Args:
            config: Optional explicit configuration. Defaults to the
                process-wide configuration, read on every match.
        """
        self._config = config

    @property
    def config(self) -> MatcherConfig:
        """The configuration the next match will use."""
        if self._config is not None:
            return self._config
        return get_default_config()

    def match(self, pattern: str, candidate: str) -> MatchResult:
        """Match pattern against candidate.

        Args:
            pattern: Characters to find in order, case-insensitively. The
                empty pattern matches every candidate.
            candidate: The string to search.

        Returns:
            MatchResult with matched=False if the pattern cannot be
            aligned, otherwise the score and one index per pattern
            character.
        """
        alignment = _AlignmentSearch(pattern, candidate, self.config).align()
        if alignment is None:
            return MatchResult(matched=False)

        score, indexes = alignment
        score += UNMATCHED_RUNE_PENALTY * (len(candidate) - len(indexes))
        return MatchResult(matched=True, score=score, matched_indexes=list(indexes))


def match(pattern: str, candidate: str) -> MatchResult:
    """Match pattern against candidate using the process-wide configuration."""
    return FuzzyMatcher().match(pattern, candidate)
