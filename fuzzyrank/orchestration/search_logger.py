"""SearchLogger for writing search sessions to a structured log file.

This module provides the SearchLogger class that records the queries of a
search session: a header describing the candidate source, one block per
query with its top results, and a closing summary.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, TextIO

from fuzzyrank.models import SearchReport, SessionSummary


class SearchLogger:
    """Logger for search sessions with a structured output format.

    Usage:
        with SearchLogger(log_path, source="files.txt") as logger:
            logger.log_header(total_candidates, separators)
            for report in reports:
                logger.log_query(report)
            logger.log_summary(summary)

    Attributes:
        SEPARATOR: The 65-character separator line used between sections.
        TOP_RESULTS: Number of results written per query.
    """

    SEPARATOR = "=" * 65
    TOP_RESULTS = 10

    def __init__(
        self,
        log_file_path: Optional[Path] = None,
        source: str = "<memory>",
    ) -> None:
        """Initialize the SearchLogger.

        Args:
            log_file_path: Optional path for the log file. If not provided,
                generates a timestamped filename in the current directory.
            source: Description of where the candidates came from.

        Raises:
            OSError: If the log file path is not writable.
        """
        self._source = source
        self._start_timestamp = datetime.now()
        self._file_handle: Optional[TextIO] = None
        self._query_counter = 0

        if log_file_path is None:
            timestamp_str = self._start_timestamp.strftime("%Y-%m-%d_%H-%M-%S")
            self._log_file_path = Path.cwd() / f"search_log_{timestamp_str}.log"
        else:
            self._log_file_path = Path(log_file_path)

        self._validate_path()

    def _validate_path(self) -> None:
        """Validate that the log file path is writable.

        Raises:
            OSError: If the parent directory doesn't exist or is not writable.
        """
        parent = self._log_file_path.parent
        if not parent.exists():
            raise OSError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise OSError(f"Parent path is not a directory: {parent}")
        try:
            test_file = parent / f".fuzzyrank_test_{id(self)}"
            test_file.touch()
            test_file.unlink()
        except PermissionError:
            raise OSError(f"Permission denied: cannot write to {parent}")

    def __enter__(self) -> "SearchLogger":
        """Open the log file.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def open(self) -> None:
        """Open the log file for writing, truncating it."""
        try:
            self._file_handle = open(self._log_file_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open log file for writing: {e}")

    def close(self) -> None:
        """Close the log file. Safe to call more than once."""
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing log file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    def get_log_path(self) -> Path:
        """Get the path to the log file."""
        return self._log_file_path

    def log_header(self, total_candidates: int, separators: Iterable[str]) -> None:
        """Write the header section.

        Args:
            total_candidates: Number of candidates in the session.
            separators: Separator set used by the matcher.
        """
        self._write_separator()
        self._write_line("fuzzyrank - Search Log")
        self._write_separator()
        self._write_line(f"Timestamp: {self._format_timestamp(self._start_timestamp)}")
        self._write_line(f"Source: {self._source}")
        self._write_line(f"Candidates: {total_candidates:,}")
        shown = " ".join(repr(sep) for sep in sorted(separators))
        self._write_line(f"Separators: {shown or '(none)'}")
        self._write_line("")

    def log_query(self, report: SearchReport) -> None:
        """Write one query block with its top results.

        Args:
            report: The SearchReport of the query.
        """
        if self._query_counter == 0:
            self._write_separator()
            self._write_line("QUERIES")
            self._write_separator()
            self._write_line("")

        self._query_counter += 1
        now = self._format_timestamp(datetime.now())
        self._write_line(f"[{now}] Query {self._query_counter}: {report.pattern!r}")
        self._write_line(
            f"Matches: {report.match_count:,} of {report.total_candidates:,}", indent=2
        )
        self._write_line(f"Elapsed: {report.duration_seconds * 1000:.3f} ms", indent=2)

        for match in report.matches[: self.TOP_RESULTS]:
            self._write_line(
                f"- [{match.source_index}] {match.source_string} "
                f"(score {match.score}, indexes {match.matched_indexes})",
                indent=4,
            )
        if report.match_count > self.TOP_RESULTS:
            self._write_line(
                f"... {report.match_count - self.TOP_RESULTS:,} more", indent=4
            )
        self._write_line("")

    def log_summary(self, summary: SessionSummary) -> None:
        """Write the summary section.

        Args:
            summary: The SessionSummary of the session.
        """
        self._write_separator()
        self._write_line("SUMMARY")
        self._write_separator()
        self._write_line(f"Queries run: {summary.queries_run}")
        self._write_line(f"Total matches: {summary.total_matches:,}")
        if summary.interrupted:
            self._write_line("Session interrupted by user")
        self._write_line(f"Duration: {self._format_duration(summary.duration_seconds)}")
        self._write_line("")
        self._write_line(f"Log file: {self._log_file_path}")
        self._write_separator()

    def _format_duration(self, seconds: float) -> str:
        """Format duration in human-readable format.

        Returns:
            Formatted string like "5m 23s", "1h 5m 30s", or "45s".
        """
        total_seconds = int(seconds)

        if total_seconds < 60:
            return f"{total_seconds}s"

        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        secs = total_seconds % 60

        if hours > 0:
            return f"{hours}h {minutes}m {secs}s"
        return f"{minutes}m {secs}s"

    def _format_timestamp(self, dt: datetime) -> str:
        """Format a datetime as 'YYYY-MM-DD HH:MM:SS'."""
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_separator(self) -> None:
        self._write_line(self.SEPARATOR)

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the log file with optional indentation.

        Args:
            text: The text to write.
            indent: Number of spaces to indent the line.
        """
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed log file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)
