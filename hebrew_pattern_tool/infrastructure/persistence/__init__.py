# hebrew_pattern_tool/infrastructure/persistence/__init__.py

"""Persistence infrastructure for word list retrieval.

This module provides the text fetcher and the word list loader for built-in,
URL, pasted and custom sources.
"""

# Local imports
from hebrew_pattern_tool.infrastructure.persistence._fetcher import TextFetcher
from hebrew_pattern_tool.infrastructure.persistence._wordlist_loader import WordlistLoader
from hebrew_pattern_tool.infrastructure.persistence._wordlist_loader import (
    wordlist_from_pasted_text,
)
from hebrew_pattern_tool.infrastructure.persistence._wordlist_loader import (
    wordlist_name_from_url,
)

__all__ = ["TextFetcher", "WordlistLoader", "wordlist_from_pasted_text", "wordlist_name_from_url"]
