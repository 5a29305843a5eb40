"""Search orchestration package for fuzzyrank.

This package contains the components that drive searches end to end:
- SearchLogger: Structured logging of search sessions to log files.
- SearchSession: Coordinator for one-shot and interactive searches.
- load_candidates: Reader for line-delimited candidate files.
"""

from fuzzyrank.orchestration.search_logger import SearchLogger
from fuzzyrank.orchestration.search_session import SearchSession, load_candidates

__all__ = ["SearchLogger", "SearchSession", "load_candidates"]
