# hebrew_pattern_tool/shared/utils/batching.py

"""Chunking helpers shared by the scanner and the word list loader"""

# Standard library imports
from asyncio import sleep
from collections.abc import Iterator
from collections.abc import Sequence
from math import ceil

# Words handled per cooperative step
DEFAULT_CHUNK_SIZE = 10_000


def chunk_count(length: int, chunk_size: int) -> int:
    """Number of chunks needed to cover length items"""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return ceil(length / chunk_size)


def iter_chunks[T](items: Sequence[T], chunk_size: int) -> Iterator[tuple[int, Sequence[T]]]:
    """Yield (chunk_number, chunk) pairs over consecutive slices of items

    chunk_number is 1-based. The last chunk may be shorter than chunk_size.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    for i in range(0, len(items), chunk_size):
        yield i // chunk_size + 1, items[i : i + chunk_size]


async def yield_control() -> None:
    """Give the event loop a chance to run other tasks between chunks"""
    await sleep(0)
