"""Terminal UI package for fuzzyrank."""

from .search_tui import SearchTUI

__all__ = [
    "SearchTUI",
]
