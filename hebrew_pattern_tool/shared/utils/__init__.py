# hebrew_pattern_tool/shared/utils/__init__.py

"""Shared utility functions for text processing and chunked iteration"""

# Local imports
from hebrew_pattern_tool.shared.utils.batching import DEFAULT_CHUNK_SIZE
from hebrew_pattern_tool.shared.utils.batching import chunk_count
from hebrew_pattern_tool.shared.utils.batching import iter_chunks
from hebrew_pattern_tool.shared.utils.batching import yield_control
from hebrew_pattern_tool.shared.utils.text_utils import is_valid_word
from hebrew_pattern_tool.shared.utils.text_utils import parse_wordlist_text
from hebrew_pattern_tool.shared.utils.text_utils import split_lines
from hebrew_pattern_tool.shared.utils.text_utils import strip_diacritics

__all__ = [
    # Text utilities
    "is_valid_word",
    "parse_wordlist_text",
    "split_lines",
    "strip_diacritics",
    # Chunking
    "DEFAULT_CHUNK_SIZE",
    "chunk_count",
    "iter_chunks",
    "yield_control",
]
