"""Pytest fixtures for fuzzyrank tests."""

import io
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest
from rich.console import Console

from fuzzyrank.matching import FuzzyMatcher, Ranker, reset_separators
from fuzzyrank.models import RankedMatch, SearchReport, SessionSummary
from fuzzyrank.ui import SearchTUI


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: end-to-end workflow tests")


@pytest.fixture(autouse=True)
def default_separators() -> Generator[None, None, None]:
    """Restore the process-wide separator set after every test."""
    reset_separators()
    yield
    reset_separators()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def matcher() -> FuzzyMatcher:
    """Matcher using the process-wide configuration."""
    return FuzzyMatcher()


@pytest.fixture
def ranker() -> Ranker:
    """Ranker using the process-wide configuration."""
    return Ranker()


@pytest.fixture
def sample_filenames() -> List[str]:
    """A small file listing in the style of a source tree."""
    return [
        "README.md",
        "setup.py",
        "fuzzyrank/__init__.py",
        "fuzzyrank/cli.py",
        "fuzzyrank/matching/fuzzy_matcher.py",
        "fuzzyrank/matching/ranker.py",
        "fuzzyrank/ui/search_tui.py",
        "tests/unit/test_matcher.py",
        "docs/FuzzyMatcherGuide.md",
    ]


@pytest.fixture
def candidate_file(temp_dir: Path, sample_filenames: List[str]) -> Path:
    """Write sample_filenames to a line-delimited candidate file.

    Returns:
        Path to the candidate file.
    """
    path = temp_dir / "filenames.txt"
    path.write_text("\n".join(sample_filenames) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_ranked_matches() -> List[RankedMatch]:
    """Ranked matches as produced for pattern 'a' over ["hay", "stack"]."""
    return [
        RankedMatch(source_string="hay", source_index=0, score=-7, matched_indexes=[1]),
        RankedMatch(source_string="stack", source_index=1, score=-14, matched_indexes=[2]),
    ]


@pytest.fixture
def sample_search_report(sample_ranked_matches: List[RankedMatch]) -> SearchReport:
    """SearchReport wrapping sample_ranked_matches."""
    return SearchReport(
        pattern="a",
        total_candidates=2,
        matches=sample_ranked_matches,
        duration_seconds=0.0042,
    )


@pytest.fixture
def sample_session_summary() -> SessionSummary:
    """A finished session summary."""
    return SessionSummary(
        source="filenames.txt",
        total_candidates=9,
        queries_run=3,
        total_matches=12,
        duration_seconds=83.0,
        interrupted=False,
    )


@pytest.fixture
def tui_with_output() -> "tuple[SearchTUI, io.StringIO]":
    """Create a SearchTUI with captured, uncoloured output.

    Returns:
        Tuple of (SearchTUI instance, StringIO for reading output).
    """
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=120)
    return SearchTUI(console=console), output
