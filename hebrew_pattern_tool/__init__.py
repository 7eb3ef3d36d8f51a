# hebrew_pattern_tool/__init__.py

"""Hebrew Pattern Tool Package

A library for searching Hebrew word lists with a small template language:
``?`` for any one Hebrew character, ``[...]`` for a character class, and
optional required or forbidden letters.
"""

# Local imports
# High-level API
from hebrew_pattern_tool.adapters.api import PatternSearcher
from hebrew_pattern_tool.adapters.api import download_wordlist
from hebrew_pattern_tool.adapters.api import export_matches
from hebrew_pattern_tool.adapters.api import load_and_search_wordlists
from hebrew_pattern_tool.adapters.api import load_wordlist
from hebrew_pattern_tool.adapters.api import render_matches_text
from hebrew_pattern_tool.adapters.api import search_in_wordlist
from hebrew_pattern_tool.application.models.search_models import SearchOptions
from hebrew_pattern_tool.application.models.search_models import SearchResult
from hebrew_pattern_tool.application.models.search_models import SourceStatusRecord

# For users who want lower-level control
from hebrew_pattern_tool.application.processing import compile_template
from hebrew_pattern_tool.application.services import SearchService

# Data models
from hebrew_pattern_tool.core.domain import BuiltinSource
from hebrew_pattern_tool.core.domain import CustomSource
from hebrew_pattern_tool.core.domain import CustomWordlist
from hebrew_pattern_tool.core.domain import LetterConstraintSet
from hebrew_pattern_tool.core.domain import LetterState
from hebrew_pattern_tool.core.domain import LoadError
from hebrew_pattern_tool.core.domain import PastedSource
from hebrew_pattern_tool.core.domain import SearchValidationError
from hebrew_pattern_tool.core.domain import UrlSource
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.infrastructure.persistence import wordlist_from_pasted_text
from hebrew_pattern_tool.shared.utils.text_utils import strip_diacritics

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "PatternSearcher",
    "load_wordlist",
    "search_in_wordlist",
    "load_and_search_wordlists",
    "download_wordlist",
    "wordlist_from_pasted_text",
    "render_matches_text",
    "export_matches",
    # Data models
    "SearchOptions",
    "SearchResult",
    "SourceStatusRecord",
    "BuiltinSource",
    "UrlSource",
    "PastedSource",
    "CustomSource",
    "CustomWordlist",
    "LetterConstraintSet",
    "LetterState",
    # Errors
    "LoadError",
    "SearchValidationError",
    # Advanced usage
    "ConfigLoader",
    "SearchService",
    "compile_template",
    "strip_diacritics",
    # Version
    "__version__",
]
