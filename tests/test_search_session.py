"""Unit tests for SearchSession and load_candidates."""

from pathlib import Path
from typing import List
from unittest.mock import MagicMock, patch

import pytest

from fuzzyrank.matching import MatcherConfig
from fuzzyrank.orchestration import SearchLogger, SearchSession, load_candidates


class TestLoadCandidates:
    """Tests for reading candidate files."""

    def test_loads_lines_in_order(self, candidate_file: Path, sample_filenames: List[str]):
        assert load_candidates(candidate_file) == sample_filenames

    def test_keeps_inner_empty_lines(self, temp_dir: Path):
        path = temp_dir / "c.txt"
        path.write_bytes(b"a\n\nb")
        assert load_candidates(path) == ["a", "", "b"]

    def test_strips_crlf(self, temp_dir: Path):
        path = temp_dir / "c.txt"
        path.write_bytes(b"one\r\ntwo\r\n")
        assert load_candidates(path) == ["one", "two"]

    def test_empty_file(self, temp_dir: Path):
        path = temp_dir / "c.txt"
        path.write_bytes(b"")
        assert load_candidates(path) == []

    def test_invalid_utf8_is_replaced(self, temp_dir: Path):
        path = temp_dir / "c.txt"
        path.write_bytes(b"ok\nbad\xff\n")
        assert load_candidates(path) == ["ok", "bad\ufffd"]

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(OSError, match="does not exist"):
            load_candidates(temp_dir / "missing.txt")

    def test_directory(self, temp_dir: Path):
        with pytest.raises(OSError, match="not a file"):
            load_candidates(temp_dir)


class TestRunQuery:
    """Tests for one-shot queries."""

    def test_rejects_invalid_limit(self):
        with pytest.raises(ValueError, match="at least 1"):
            SearchSession(["a"], limit=0)

    def test_run_query_ranks_all_candidates(self, tui_with_output):
        tui, output = tui_with_output
        session = SearchSession(["hay", "stack", "xyz"], tui=tui)

        report = session.run_query("a")

        assert report.pattern == "a"
        assert report.total_candidates == 3
        assert [m.source_string for m in report.matches] == ["hay", "stack"]
        assert report.duration_seconds >= 0
        assert "Found 2 matches" in output.getvalue()

    def test_counters(self, tui_with_output):
        tui, _ = tui_with_output
        session = SearchSession(["hay", "stack", "xyz"], source="inline", tui=tui)

        session.run_query("a")
        session.run_query("")
        summary = session.summary()

        assert summary.source == "inline"
        assert summary.total_candidates == 3
        assert summary.queries_run == 2
        assert summary.total_matches == 5
        assert summary.interrupted is False

    def test_limit_is_applied(self, tui_with_output):
        tui, output = tui_with_output
        session = SearchSession(["a1", "a2", "a3"], tui=tui, limit=1)

        session.run_query("a")

        assert "... and 2 more" in output.getvalue()

    def test_verbose_shows_scores(self, tui_with_output):
        tui, output = tui_with_output
        session = SearchSession(["hay"], tui=tui, verbose=True)

        session.run_query("a")

        assert "(-7) [1]" in output.getvalue()

    def test_custom_config(self, tui_with_output):
        tui, _ = tui_with_output
        session = SearchSession(["a/b", "a:b"], tui=tui, config=MatcherConfig(separators={":"}))

        report = session.run_query("b")

        assert [m.source_string for m in report.matches] == ["a:b", "a/b"]


class TestRunInteractive:
    """Tests for the interactive loop with a patched prompt."""

    def test_quit_command(self, tui_with_output):
        tui, output = tui_with_output
        session = SearchSession(["hay", "stack"], tui=tui)

        with patch.object(tui, "prompt_pattern", side_effect=["st", ":q"]):
            summary = session.run_interactive()

        # The empty pattern runs before the first prompt
        assert summary.queries_run == 2
        assert summary.total_matches == 3
        assert summary.interrupted is False
        text = output.getvalue()
        assert "Loaded 2 candidates" in text
        assert "Session Summary" in text

    def test_end_of_input(self, tui_with_output):
        tui, _ = tui_with_output
        session = SearchSession(["hay"], tui=tui)

        with patch.object(tui, "prompt_pattern", side_effect=["a", EOFError()]):
            summary = session.run_interactive()

        assert summary.queries_run == 2
        assert summary.interrupted is False

    def test_keyboard_interrupt(self, tui_with_output):
        tui, output = tui_with_output
        session = SearchSession(["hay"], tui=tui)

        with patch.object(tui, "prompt_pattern", side_effect=KeyboardInterrupt()):
            summary = session.run_interactive()

        assert summary.queries_run == 1
        assert summary.interrupted is True
        assert "Search interrupted by user." in output.getvalue()
        assert "INTERRUPTED" in output.getvalue()


class TestSessionLogging:
    """Tests for the session log lifecycle."""

    def test_log_is_written(self, temp_dir: Path, tui_with_output):
        tui, _ = tui_with_output
        log_path = temp_dir / "session.log"
        search_logger = SearchLogger(log_file_path=log_path, source="inline")
        session = SearchSession(
            ["hay", "stack"], source="inline", tui=tui, logger_instance=search_logger
        )

        session.run_query("a")
        session.run_query("st")
        session.close()

        content = log_path.read_text(encoding="utf-8")
        assert content.count("fuzzyrank - Search Log") == 1
        assert "Candidates: 2" in content
        assert "Query 1: 'a'" in content
        assert "Query 2: 'st'" in content
        assert "Queries run: 2" in content

    def test_log_not_created_without_queries(self, temp_dir: Path, tui_with_output):
        tui, _ = tui_with_output
        log_path = temp_dir / "session.log"
        session = SearchSession(
            ["hay"], tui=tui, logger_instance=SearchLogger(log_file_path=log_path)
        )

        session.close()

        assert not log_path.exists()

    def test_verbose_close_prints_log_path(self, temp_dir: Path, tui_with_output):
        tui, output = tui_with_output
        log_path = temp_dir / "session.log"
        session = SearchSession(
            ["hay"],
            tui=tui,
            logger_instance=SearchLogger(log_file_path=log_path),
            verbose=True,
        )

        session.run_query("a")
        session.close()

        assert "Log file:" in output.getvalue()

    def test_close_without_logger(self, tui_with_output):
        tui, _ = tui_with_output
        SearchSession(["hay"], tui=tui).close()

    def test_header_uses_session_config(self, tui_with_output):
        tui, _ = tui_with_output
        search_logger = MagicMock(spec=SearchLogger)
        session = SearchSession(
            ["a"],
            tui=tui,
            config=MatcherConfig(separators={":"}),
            logger_instance=search_logger,
        )

        session.run_query("a")

        search_logger.open.assert_called_once()
        search_logger.log_header.assert_called_once_with(1, frozenset({":"}))
        search_logger.log_query.assert_called_once()
