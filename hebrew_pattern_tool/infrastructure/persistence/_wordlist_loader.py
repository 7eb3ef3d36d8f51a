# hebrew_pattern_tool/infrastructure/persistence/_wordlist_loader.py

"""Word list loader for built-in, URL, pasted and custom sources"""

# Standard library imports
from logging import getLogger
from urllib.parse import urlparse

# Local imports
from hebrew_pattern_tool.application.models.search_models import SearchOptions
from hebrew_pattern_tool.core.domain.exceptions import LoadError
from hebrew_pattern_tool.core.domain.word_source import BuiltinSource
from hebrew_pattern_tool.core.domain.word_source import CustomSource
from hebrew_pattern_tool.core.domain.word_source import CustomWordlist
from hebrew_pattern_tool.core.domain.word_source import PastedSource
from hebrew_pattern_tool.core.domain.word_source import UrlSource
from hebrew_pattern_tool.core.domain.word_source import WordSource
from hebrew_pattern_tool.core.types.protocols import TextFetcherProtocol
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.infrastructure.persistence._fetcher import TextFetcher
from hebrew_pattern_tool.shared.mixins import ChunkedMixin
from hebrew_pattern_tool.shared.utils.batching import iter_chunks
from hebrew_pattern_tool.shared.utils.batching import yield_control
from hebrew_pattern_tool.shared.utils.text_utils import parse_wordlist_text
from hebrew_pattern_tool.shared.utils.text_utils import strip_diacritics

logger = getLogger(__name__)

DEFAULT_DOWNLOAD_NAME = "custom_wordlist"


def wordlist_name_from_url(url: str) -> str:
    """Name a downloaded list after the last path segment of its URL"""
    segment = urlparse(url.strip()).path.rsplit("/", 1)[-1]
    return segment or DEFAULT_DOWNLOAD_NAME


def strip_all(words: list[str]) -> list[str]:
    """Strip diacritics from every word, dropping words left empty"""
    return [s for s in map(strip_diacritics, words) if s]


def wordlist_from_pasted_text(
    text: str, name: str = "pasted", options: SearchOptions | None = None
) -> CustomWordlist | None:
    """Build a custom word list from user-pasted text

    Args:
        text: Pasted text, one word per line
        name: Name given to the list
        options: When strip_diacritics is set, niqqud is removed

    Returns:
        CustomWordlist, or None when the text is blank
    """
    if not text or not text.strip():
        return None
    words = parse_wordlist_text(text)
    if options is not None and options.strip_diacritics:
        words = strip_all(words)
    return CustomWordlist(name=name, words=words)


class WordlistLoader(ChunkedMixin):
    """Loads and cleans the words of one source"""

    def __init__(
        self,
        fetcher: TextFetcherProtocol | None = None,
        config: ConfigLoader | None = None,
        chunk_size: int | None = None,
    ) -> None:
        """Initialize loader

        Args:
            fetcher: Text fetcher, defaults to the aiohttp/file TextFetcher
            config: Optional configuration loader
            chunk_size: Words per normalization step, None for the configured default
        """
        self.config = self._init_config(config)
        self.chunk_size = self._init_chunk_size(chunk_size, self.config)
        self.fetcher: TextFetcherProtocol = fetcher or TextFetcher(self.config)

    async def load(self, source: WordSource, options: SearchOptions) -> list[str]:
        """Load the valid words of a source

        Lines are trimmed; empty lines, lines with inner whitespace and lines
        without a Hebrew character are dropped silently.

        Args:
            source: Source descriptor
            options: strip_diacritics is honoured here

        Returns:
            Words in file order

        Raises:
            LoadError: If the raw text cannot be obtained
        """
        text = await self._resolve_text(source)
        words = parse_wordlist_text(text)

        if options.strip_diacritics:
            words = await self._strip_in_chunks(words)

        logger.info(f"Loaded {len(words):,} words from {source.key}")
        return words

    async def _resolve_text(self, source: WordSource) -> str:
        """Obtain raw text for a source descriptor"""
        if isinstance(source, BuiltinSource):
            location = self.config.sources.resolve(source.key)
            if location is None:
                raise LoadError(source.key, "unknown built-in source")
            return await self.fetcher.fetch_text(location, source.key)

        if isinstance(source, UrlSource):
            return await self.fetcher.fetch_text(source.url, source.key)

        if isinstance(source, PastedSource):
            return source.text

        if isinstance(source, CustomSource):
            if source.pasted and source.pasted.strip():
                return source.pasted
            if source.url and source.url.strip():
                return await self.fetcher.fetch_text(source.url.strip(), source.key)
            raise LoadError(source.key, "choose a source: URL or pasted text")

        raise TypeError(f"Unsupported word source: {source!r}")

    async def _strip_in_chunks(self, words: list[str]) -> list[str]:
        """Strip diacritics chunk by chunk, yielding to the event loop in between"""
        if len(words) <= self.chunk_size:
            return strip_all(words)

        stripped: list[str] = []
        for _, chunk in iter_chunks(words, self.chunk_size):
            stripped.extend(strip_all(list(chunk)))
            await yield_control()
        return stripped

    async def download(self, url: str, options: SearchOptions) -> CustomWordlist:
        """Download a URL into a named custom word list

        Args:
            url: Word list URL
            options: Loading options

        Returns:
            CustomWordlist named after the URL's last path segment

        Raises:
            LoadError: If the download fails or yields no valid words
        """
        name = wordlist_name_from_url(url)
        words = await self.load(UrlSource(key=name, url=url.strip()), options)
        if not words:
            raise LoadError(name, f"no valid Hebrew words found at {url}")
        return CustomWordlist(name=name, words=words, url=url.strip())
