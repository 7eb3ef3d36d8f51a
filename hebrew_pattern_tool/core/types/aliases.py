# hebrew_pattern_tool/core/types/aliases.py

"""Type aliases for words and callbacks using Python 3.13 type statements."""

# Standard library imports
from collections.abc import Callable

type Word = str  # Trimmed, whitespace-free line with at least one Hebrew character

# (current_chunk, total_chunks), current_chunk is 1-based
type ChunkProgressCallback = Callable[[int, int], None]

# (source_key, status, loaded_count, error_message)
type SourceStatusCallback = Callable[[str, str, int, str | None], None]

# Human-readable phase message, e.g. "searching nouns (part 2/5)"
type StatusMessageCallback = Callable[[str], None]

__all__ = [
    "ChunkProgressCallback",
    "SourceStatusCallback",
    "StatusMessageCallback",
    "Word",
]
