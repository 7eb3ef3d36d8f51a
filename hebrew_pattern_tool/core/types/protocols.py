# hebrew_pattern_tool/core/types/protocols.py

"""Protocol definitions for collaborators of the search core."""

# Standard library imports
from typing import Protocol


class TextFetcherProtocol(Protocol):
    """Obtains the raw text behind a URL or resource location.

    Implementations raise LoadError (carrying source_key) on any non-2xx
    response or transport failure.
    """

    async def fetch_text(self, location: str, source_key: str) -> str: ...


__all__ = ["TextFetcherProtocol"]
