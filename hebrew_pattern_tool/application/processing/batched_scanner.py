# hebrew_pattern_tool/application/processing/batched_scanner.py

"""Chunked, cooperatively scheduled scan of a word list

Chunking exists so that a long matching pass hands control back to the event
loop between chunks. It never changes which words match or their order.
"""

# Standard library imports
from collections.abc import Sequence
from logging import getLogger

# Local imports
from hebrew_pattern_tool.application.processing.letter_filter import (
    passes_letter_constraints,
)
from hebrew_pattern_tool.application.processing.pattern_compiler import CompiledMatcher
from hebrew_pattern_tool.core.domain.constraints import LetterConstraintSet
from hebrew_pattern_tool.core.types.aliases import ChunkProgressCallback
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.shared.mixins import ChunkedMixin
from hebrew_pattern_tool.shared.utils.batching import chunk_count
from hebrew_pattern_tool.shared.utils.batching import iter_chunks
from hebrew_pattern_tool.shared.utils.batching import yield_control

logger = getLogger(__name__)


def filter_chunk(
    chunk: Sequence[str], matcher: CompiledMatcher, constraints: LetterConstraintSet | None
) -> list[str]:
    """Keep the words of one chunk that match and pass the letter constraints"""
    return [w for w in chunk if matcher.matches(w) and passes_letter_constraints(w, constraints)]


class BatchedScanner(ChunkedMixin):
    """Applies a compiled matcher and letter constraints to a word list in chunks"""

    def __init__(self, chunk_size: int | None = None, config: ConfigLoader | None = None) -> None:
        """Initialize scanner

        Args:
            chunk_size: Words per chunk, None for the configured default
            config: Optional configuration loader
        """
        self.config = self._init_config(config)
        self.chunk_size = self._init_chunk_size(chunk_size, self.config)

    async def scan(
        self,
        words: Sequence[str],
        matcher: CompiledMatcher,
        constraints: LetterConstraintSet | None = None,
        on_progress: ChunkProgressCallback | None = None,
    ) -> list[str]:
        """Return the matching words in input order

        A list that fits in one chunk is filtered in a single step without
        progress reports. Longer lists report on_progress(chunk, total) after
        each chunk and then yield to the event loop.

        Args:
            words: Candidate words
            matcher: Compiled template
            constraints: Optional required/forbidden letters
            on_progress: Called with (current_chunk, total_chunks), 1-based

        Returns:
            Matching words, in the order they appear in words
        """
        if len(words) <= self.chunk_size:
            return filter_chunk(words, matcher, constraints)

        total = chunk_count(len(words), self.chunk_size)
        matches: list[str] = []
        for number, chunk in iter_chunks(words, self.chunk_size):
            matches.extend(filter_chunk(chunk, matcher, constraints))
            logger.debug(f"Scanned chunk {number}/{total}: {len(matches):,} matches so far")
            if on_progress:
                on_progress(number, total)
            await yield_control()

        return matches
