"""
fuzzyrank - CLI Interface.

A command-line interface for fuzzy searching line-delimited candidate lists,
e.g. file names or commands. Results are ranked by match quality and printed
with the matched characters highlighted.

Usage Examples:
    # Match a single candidate
    fuzzyrank match IaCCS thisIsACamelCaseString

    # Rank a file of candidates
    fuzzyrank search fzmtch filenames.txt --limit 10

    # Custom separators, with scores and a session log
    fuzzyrank search fm filenames.txt --separators "/:" --verbose --log-file search.log

    # Interactive search, re-ranked on every pattern
    fuzzyrank interactive filenames.txt
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from fuzzyrank.matching import FuzzyMatcher, MatcherConfig
from fuzzyrank.orchestration import SearchLogger, SearchSession, load_candidates
from fuzzyrank.ui import SearchTUI

__version__ = "1.0.0"

# Initialize Typer app
app = typer.Typer(
    name="fuzzyrank",
    help="fuzzyrank - Fuzzy search and rank lists of strings.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"fuzzyrank v{__version__}")
        raise typer.Exit()


def validate_limit(value: int) -> int:
    """
    Validate the result limit is positive.

    Raises:
        typer.BadParameter: If value is less than 1.
    """
    if value < 1:
        raise typer.BadParameter("Limit must be at least 1")
    return value


def build_config(separators: Optional[str]) -> Optional[MatcherConfig]:
    """
    Build a matcher configuration from the --separators option.

    Every character of the option value is a separator; the two-character
    sequence "\\t" stands for a tab.

    Args:
        separators: Option value, or None to keep the default separators.

    Returns:
        A MatcherConfig, or None if the option was not given.
    """
    if separators is None:
        return None
    return MatcherConfig(separators=frozenset(separators.replace("\\t", "\t")))


def open_candidates(file: Path) -> list:
    """
    Load candidates, exiting with a descriptive error on failure.

    Raises:
        typer.Exit: If the file cannot be read.
    """
    try:
        return load_candidates(file)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """fuzzyrank - Fuzzy search and rank lists of strings."""
    pass


@app.command("match")
def match_command(
    pattern: str = typer.Argument(..., help="Pattern to look for."),
    candidate: str = typer.Argument(..., help="String to match against."),
    separators: Optional[str] = typer.Option(
        None,
        "--separators",
        "-s",
        help="Separator characters (default: space _ - . , / \\ tab).",
    ),
) -> None:
    """
    Match a pattern against a single string.

    Prints the score and the matched character positions. Exits with
    code 1 if the pattern does not match.
    """
    matcher = FuzzyMatcher(build_config(separators))
    result = matcher.match(pattern, candidate)

    SearchTUI(console=console).display_match(pattern, candidate, result)

    if not result.matched:
        raise typer.Exit(1)


@app.command()
def search(
    pattern: str = typer.Argument(..., help="Pattern to look for."),
    file: Path = typer.Argument(
        ...,
        help="Line-delimited file of candidates.",
        exists=False,  # We do our own validation
    ),
    limit: int = typer.Option(
        20,
        "--limit",
        "-n",
        help="Maximum number of results to display.",
        callback=validate_limit,
    ),
    separators: Optional[str] = typer.Option(
        None,
        "--separators",
        "-s",
        help="Separator characters (default: space _ - . , / \\ tab).",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        "-l",
        help="Path for log file output.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show scores and matched positions.",
    ),
) -> None:
    """
    Rank the candidates of a file against a pattern.

    Exits with code 1 if no candidate matches.
    """
    candidates = open_candidates(file)

    logger_instance: Optional[SearchLogger] = None
    if log_file:
        try:
            logger_instance = SearchLogger(log_file, source=str(file))
        except OSError as e:
            console.print(
                f"[yellow]Warning:[/yellow] Failed to create log file: {e}. "
                "Continuing without logging."
            )
            logger_instance = None

    session = SearchSession(
        candidates,
        source=str(file),
        config=build_config(separators),
        tui=SearchTUI(console=console),
        logger_instance=logger_instance,
        limit=limit,
        verbose=verbose,
    )
    try:
        report = session.run_query(pattern)
    except KeyboardInterrupt:
        console.print("\n[yellow]Search interrupted by user.[/yellow]")
        raise typer.Exit(130)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    finally:
        session.close()

    if not report.matches:
        raise typer.Exit(1)


@app.command()
def interactive(
    file: Path = typer.Argument(
        ...,
        help="Line-delimited file of candidates.",
        exists=False,  # We do our own validation
    ),
    limit: int = typer.Option(
        20,
        "--limit",
        "-n",
        help="Maximum number of results to display.",
        callback=validate_limit,
    ),
    separators: Optional[str] = typer.Option(
        None,
        "--separators",
        "-s",
        help="Separator characters (default: space _ - . , / \\ tab).",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        "-l",
        help="Path for log file output.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show scores and matched positions.",
    ),
) -> None:
    """
    Interactive search: re-rank the candidates for every pattern entered.

    Enter :q, press Ctrl-D or Ctrl-C to quit.
    """
    candidates = open_candidates(file)

    logger_instance: Optional[SearchLogger] = None
    if log_file:
        try:
            logger_instance = SearchLogger(log_file, source=str(file))
        except OSError as e:
            console.print(f"[red]Error:[/red] Failed to create log file: {e}")
            raise typer.Exit(1)

    session = SearchSession(
        candidates,
        source=str(file),
        config=build_config(separators),
        tui=SearchTUI(console=console),
        logger_instance=logger_instance,
        limit=limit,
        verbose=verbose,
    )
    try:
        summary = session.run_interactive()
    except KeyboardInterrupt:
        console.print("\n[yellow]Search interrupted by user.[/yellow]")
        raise typer.Exit(130)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    finally:
        session.close()

    if log_file and logger_instance:
        console.print(f"\n[dim]Log written to: {log_file}[/dim]")

    if summary.interrupted:
        raise typer.Exit(130)


if __name__ == "__main__":
    app()
