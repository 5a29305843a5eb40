"""SearchSession for running fuzzy searches over a candidate collection.

This module provides the SearchSession class that coordinates the Ranker,
SearchTUI and SearchLogger. It implements the consumer side of the ranking
contract: every pattern is ranked against the full candidate collection and
the results are rendered with their matched characters highlighted.

Example:
    from pathlib import Path
    from fuzzyrank.orchestration import SearchSession, load_candidates

    candidates = load_candidates(Path("filenames.txt"))
    session = SearchSession(candidates, source="filenames.txt", limit=20)

    # One-shot query
    report = session.run_query("fzmtch")

    # Re-rank on every pattern until ':q'
    summary = session.run_interactive()
    session.close()
"""

import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence

from rich.markup import escape

from fuzzyrank.matching import MatcherConfig, Ranker, get_default_config
from fuzzyrank.models import SearchReport, SessionSummary
from fuzzyrank.orchestration.search_logger import SearchLogger
from fuzzyrank.ui import SearchTUI

logger = logging.getLogger("fuzzyrank")

QUIT_COMMAND = ":q"


def load_candidates(path: Path) -> List[str]:
    """Load a line-delimited candidate file.

    Line terminators are stripped; a trailing empty line left by the final
    newline is dropped. Other empty lines are kept as candidates so that
    source indexes equal line numbers minus one.

    Args:
        path: UTF-8 text file with one candidate per line.

    Returns:
        The candidates in file order.

    Raises:
        OSError: If the file does not exist or cannot be read.
    """
    path = Path(path)
    if not path.exists():
        raise OSError(f"Candidate file does not exist: {path}")
    if not path.is_file():
        raise OSError(f"Candidate path is not a file: {path}")

    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        candidates = [line.rstrip("\r") for line in f.read().split("\n")]

    if candidates and candidates[-1] == "":
        candidates.pop()

    logger.debug(f"Loaded {len(candidates)} candidates from {path}")
    return candidates


class SearchSession:
    """Runs fuzzy searches over a fixed candidate collection.

    Attributes:
        candidates: The candidate strings, in source order.
        source: Description of where the candidates came from.
        limit: Maximum number of results displayed per query.
        verbose: Whether to display scores and indexes.
    """

    def __init__(
        self,
        candidates: Sequence[str],
        source: str = "<memory>",
        config: Optional[MatcherConfig] = None,
        tui: Optional[SearchTUI] = None,
        logger_instance: Optional[SearchLogger] = None,
        limit: int = 20,
        verbose: bool = False,
    ) -> None:
        """Initialize the SearchSession.

        Args:
            candidates: Candidate strings to search.
            source: Description of the candidate source, used in output.
            config: Matcher configuration. Defaults to the process-wide
                configuration.
            tui: SearchTUI used for output. Defaults to a new SearchTUI.
            logger_instance: Optional SearchLogger. The session opens it on
                the first query and closes it in close().
            limit: Maximum number of results displayed per query.
            verbose: If True, display scores and matched indexes.

        Raises:
            ValueError: If limit is less than 1.
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        self.candidates = list(candidates)
        self.source = source
        self.limit = limit
        self.verbose = verbose

        self._config = config
        self._ranker = Ranker(config=config)
        self._tui = tui or SearchTUI()
        self._logger = logger_instance
        self._log_started = False

        self._start_time = time.time()
        self._queries_run = 0
        self._total_matches = 0
        self._interrupted = False

    def run_query(self, pattern: str) -> SearchReport:
        """Rank all candidates against pattern and display the results.

        Args:
            pattern: The search pattern.

        Returns:
            SearchReport with the ranked matches and the ranking time.
        """
        started = time.perf_counter()
        matches = self._ranker.rank(pattern, self.candidates)
        elapsed = time.perf_counter() - started

        report = SearchReport(
            pattern=pattern,
            total_candidates=len(self.candidates),
            matches=matches,
            duration_seconds=elapsed,
        )

        self._queries_run += 1
        self._total_matches += report.match_count

        self._tui.display_results(report, limit=self.limit, show_scores=self.verbose)
        self._log_query(report)
        return report

    def run_interactive(self) -> SessionSummary:
        """Re-rank the candidates for every entered pattern.

        The session ends on ':q', end of input or Ctrl-C. An empty pattern
        matches every candidate.

        Returns:
            SessionSummary of the session so far.
        """
        self._tui.console.print(
            f"[dim]Loaded {len(self.candidates):,} candidates from "
            f"{escape(self.source)}. Enter {QUIT_COMMAND} to quit.[/dim]",
            highlight=False,
        )
        # Show the full collection before the first pattern
        self.run_query("")

        while True:
            try:
                pattern = self._tui.prompt_pattern()
            except EOFError:
                break
            except KeyboardInterrupt:
                self._tui.console.print("\n[yellow]Search interrupted by user.[/yellow]")
                self._interrupted = True
                break

            if pattern == QUIT_COMMAND:
                break
            self.run_query(pattern)

        summary = self.summary()
        self._tui.display_session_summary(summary)
        return summary

    def summary(self) -> SessionSummary:
        """Return the statistics of the session so far."""
        return SessionSummary(
            source=self.source,
            total_candidates=len(self.candidates),
            queries_run=self._queries_run,
            total_matches=self._total_matches,
            duration_seconds=time.time() - self._start_time,
            interrupted=self._interrupted,
        )

    def close(self) -> None:
        """Write the log summary, if a log was started, and close the log."""
        if self._logger is None:
            return
        if self._log_started:
            self._logger.log_summary(self.summary())
            if self.verbose:
                self._tui.console.print(
                    f"[dim]Log file: {self._logger.get_log_path()}[/dim]"
                )
        self._logger.close()

    def _log_query(self, report: SearchReport) -> None:
        """Write a query to the session log, opening it on first use."""
        if self._logger is None:
            return

        if not self._log_started:
            config = self._config or get_default_config()
            self._logger.open()
            self._logger.log_header(len(self.candidates), config.separators)
            self._log_started = True

        self._logger.log_query(report)
