"""Terminal User Interface for fuzzyrank searches.

This module provides the SearchTUI class, a Rich-based display for ranked
search results. Every result is printed with the characters at its matched
indexes highlighted, which is how a fuzzy finder shows why a candidate
matched.

Example:
    from fuzzyrank.ui import SearchTUI
    from fuzzyrank.matching import Ranker

    tui = SearchTUI()
    matches = Ranker().rank("fm", candidates)
    tui.display_results(SearchReport("fm", len(candidates), matches), limit=20)
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from fuzzyrank.models import MatchResult, RankedMatch, SearchReport, SessionSummary


class SearchTUI:
    """Rich-based Terminal User Interface for fuzzy search results.

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).
        match_style: Rich style applied to matched characters.

    Attributes:
        console: The Rich Console instance used for all output.
        match_style: Style of highlighted characters.
    """

    def __init__(
        self, console: Optional[Console] = None, match_style: str = "bold red"
    ) -> None:
        self.console = console or Console()
        self.match_style = match_style

    def highlight(self, match: RankedMatch) -> Text:
        """Render a ranked match with its matched characters styled.

        Args:
            match: The RankedMatch to render.

        Returns:
            A Rich Text of match.source_string with the characters at
            match.matched_indexes styled with match_style.
        """
        text = Text(match.source_string)
        for idx in match.matched_indexes:
            text.stylize(self.match_style, idx, idx + 1)
        return text

    def display_results(
        self, report: SearchReport, limit: int = 20, show_scores: bool = False
    ) -> None:
        """Display the ranked results of a query.

        Args:
            report: The SearchReport to display.
            limit: Maximum number of results to print.
            show_scores: If True, print score and indexes next to each result.
        """
        self.console.print(
            f"Searching {report.total_candidates:,} strings in total.", highlight=False
        )
        self.console.print(
            f"Found {report.match_count:,} matches in "
            f"{self._format_elapsed(report.duration_seconds)}",
            highlight=False,
        )

        shown = report.matches[:limit]
        for match in shown:
            line = self.highlight(match)
            if show_scores:
                line.append(f"  ({match.score}) {match.matched_indexes}", style="dim")
            self.console.print(line)

        remaining = report.match_count - len(shown)
        if remaining > 0:
            self.console.print(f"[dim]... and {remaining:,} more[/dim]")

    def display_match(self, pattern: str, candidate: str, result: MatchResult) -> None:
        """Display the outcome of matching a single candidate.

        Args:
            pattern: The pattern that was matched.
            candidate: The candidate string.
            result: The MatchResult returned by the matcher.
        """
        if not result.matched:
            self.console.print(
                f"[yellow]No match:[/yellow] {escape(repr(pattern))} "
                f"does not match {escape(repr(candidate))}"
            )
            return

        ranked = RankedMatch(
            source_string=candidate,
            source_index=0,
            score=result.score,
            matched_indexes=result.matched_indexes,
        )
        table = Table(show_header=False, box=None)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Candidate", self.highlight(ranked))
        table.add_row("Score", str(result.score))
        table.add_row("Indexes", str(result.matched_indexes))

        panel = Panel(table, title=f"Match: {escape(repr(pattern))}", border_style="blue")
        self.console.print(panel)

    def prompt_pattern(self) -> str:
        """Ask for the next search pattern.

        Returns:
            The entered pattern with surrounding whitespace removed.
        """
        pattern = Prompt.ask(
            "[bold]Search pattern[/bold] [dim](:q to quit)[/dim]",
            default="",
            console=self.console,
        )
        return pattern.strip()

    def display_session_summary(self, summary: SessionSummary) -> None:
        """Display statistics after an interactive session ends.

        Args:
            summary: SessionSummary with aggregated statistics.
        """
        title = "Session Summary"
        if summary.interrupted:
            title += " [yellow][INTERRUPTED][/yellow]"

        self.console.print(Panel(title, border_style="green"))

        table = Table(show_header=True, header_style="bold")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Source", escape(summary.source))
        table.add_row("Candidates", f"{summary.total_candidates:,}")
        table.add_row("Queries run", f"{summary.queries_run:,}")
        table.add_row("Total matches", f"{summary.total_matches:,}")
        table.add_row("Duration", self._format_duration(summary.duration_seconds))

        self.console.print(table)

    def _format_elapsed(self, seconds: float) -> str:
        """Format a query time, e.g. "850µs", "12.3ms" or "1.25s"."""
        if seconds < 0:
            seconds = 0
        if seconds < 0.001:
            return f"{seconds * 1_000_000:.0f}µs"
        if seconds < 1:
            return f"{seconds * 1000:.1f}ms"
        return f"{seconds:.2f}s"

    def _format_duration(self, seconds: float) -> str:
        """Convert seconds to human-readable duration.

        Args:
            seconds: Duration in seconds.

        Returns:
            Formatted duration string (e.g., "5m 23s").
        """
        if seconds < 0:
            seconds = 0
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs}s"
