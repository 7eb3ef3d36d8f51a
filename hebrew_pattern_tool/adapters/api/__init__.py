# hebrew_pattern_tool/adapters/api/__init__.py

"""API module for Hebrew word list pattern search

This module provides the host-facing functions that load word lists, search
them by template and export the matches.
"""

# Local imports
from hebrew_pattern_tool.adapters.api._export import export_matches
from hebrew_pattern_tool.adapters.api._export import render_matches_text
from hebrew_pattern_tool.adapters.api._searcher import PatternSearcher
from hebrew_pattern_tool.adapters.api._searcher import download_wordlist
from hebrew_pattern_tool.adapters.api._searcher import load_and_search_wordlists
from hebrew_pattern_tool.adapters.api._searcher import load_wordlist
from hebrew_pattern_tool.adapters.api._searcher import search_in_wordlist
from hebrew_pattern_tool.application.models.search_models import SearchResult

__all__ = [
    "PatternSearcher",
    "SearchResult",
    "download_wordlist",
    "export_matches",
    "load_and_search_wordlists",
    "load_wordlist",
    "render_matches_text",
    "search_in_wordlist",
]
