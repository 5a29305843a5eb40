"""Matcher configuration for fuzzyrank.

A match that lands right after a separator character earns a bonus. The
separator set lives in a MatcherConfig; matchers either hold an explicit
config or read the process-wide default when a match starts.

The default may be replaced with configure_separators(). Replacing it while
other threads are matching is the caller's responsibility to synchronise:
every match takes a single snapshot of the config when it begins.

Example:
    >>> from fuzzyrank.matching import configure_separators
    >>> config = configure_separators({" ", "/", ":"})
    >>> config.is_separator(":")
    True
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable

DEFAULT_SEPARATORS: FrozenSet[str] = frozenset(" _-.,/\\\t")


@dataclass(frozen=True)
class MatcherConfig:
    """Immutable configuration consumed by FuzzyMatcher.

    Attributes:
        separators: Characters that earn the separator bonus for the
            character following them.
    """

    separators: FrozenSet[str] = DEFAULT_SEPARATORS

    def __post_init__(self) -> None:
        """Normalise and validate the separator set.

        Raises:
            ValueError: If any separator is not a single-character string.
        """
        separators = frozenset(self.separators)
        for sep in separators:
            if not isinstance(sep, str) or len(sep) != 1:
                raise ValueError(
                    f"separators must be single characters, got {sep!r}"
                )
        # frozen dataclass: bypass __setattr__ to store the normalised set
        object.__setattr__(self, "separators", separators)

    def is_separator(self, char: str) -> bool:
        """Return True if char is one of the configured separators."""
        return char in self.separators


_default_config = MatcherConfig()


def get_default_config() -> MatcherConfig:
    """Return the process-wide configuration used by default matchers."""
    return _default_config


def configure_separators(separators: Iterable[str]) -> MatcherConfig:
    """Replace the process-wide separator set.

    Must not be called while a match is in progress on another thread.

    Args:
        separators: The new separator characters. An empty iterable
            disables the separator bonus.

    Returns:
        The new process-wide MatcherConfig.

    Raises:
        ValueError: If any separator is not a single character. The
            previous configuration stays in effect.
    """
    global _default_config
    _default_config = MatcherConfig(separators=frozenset(separators))
    return _default_config


def reset_separators() -> MatcherConfig:
    """Restore the default separator set."""
    return configure_separators(DEFAULT_SEPARATORS)
