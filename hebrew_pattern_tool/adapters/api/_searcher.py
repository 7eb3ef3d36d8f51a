# hebrew_pattern_tool/adapters/api/_searcher.py

"""Main searcher class and the host-facing search functions"""

# Standard library imports
from collections.abc import Sequence
from logging import getLogger

# Local imports
from hebrew_pattern_tool.adapters.api._export import ExportComponent
from hebrew_pattern_tool.application.models.search_models import SearchOptions
from hebrew_pattern_tool.application.models.search_models import SearchResult
from hebrew_pattern_tool.application.processing.batched_scanner import BatchedScanner
from hebrew_pattern_tool.application.processing.pattern_compiler import compile_template
from hebrew_pattern_tool.application.services import SearchService
from hebrew_pattern_tool.application.services._search_service import SourceChunkCallback
from hebrew_pattern_tool.core.domain.constraints import LetterConstraintSet
from hebrew_pattern_tool.core.domain.word_source import BuiltinSource
from hebrew_pattern_tool.core.domain.word_source import CustomWordlist
from hebrew_pattern_tool.core.domain.word_source import WordSource
from hebrew_pattern_tool.core.types.aliases import ChunkProgressCallback
from hebrew_pattern_tool.core.types.aliases import SourceStatusCallback
from hebrew_pattern_tool.core.types.aliases import StatusMessageCallback
from hebrew_pattern_tool.core.types.protocols import TextFetcherProtocol
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.infrastructure.config import get_config
from hebrew_pattern_tool.infrastructure.persistence import WordlistLoader
from hebrew_pattern_tool.infrastructure.persistence import wordlist_from_pasted_text

logger = getLogger(__name__)


class PatternSearcher(ExportComponent):
    """Main API for loading Hebrew word lists and searching them by template

    Example:
        >>> searcher = PatternSearcher()
        >>> result = asyncio.run(
        ...     searcher.load_and_search_wordlists(["nouns"], [], "ש?ם", searcher.default_options())
        ... )
        >>> searcher.export_results("matches.txt")
    """

    def __init__(
        self,
        config_path: str | None = None,
        config: ConfigLoader | None = None,
        fetcher: TextFetcherProtocol | None = None,
        chunk_size: int | None = None,
    ) -> None:
        """Initialize the searcher

        Args:
            config_path: Path to a configuration JSON file
            config: Already-built configuration, takes precedence over config_path
            fetcher: Text fetcher override, the aiohttp/file fetcher by default
            chunk_size: Words per chunk, None for the configured default
        """
        self.config = config or get_config(config_path)
        self.loader = WordlistLoader(fetcher=fetcher, config=self.config, chunk_size=chunk_size)
        self.scanner = BatchedScanner(chunk_size=chunk_size, config=self.config)
        self.service = SearchService(loader=self.loader, scanner=self.scanner, config=self.config)
        self.last_result: SearchResult | None = None

    def default_options(self, **overrides: bool) -> SearchOptions:
        """Search options from the configured defaults"""
        return SearchOptions.from_config(self.config, **overrides)

    async def load_wordlist(
        self, source: str | WordSource, options: SearchOptions | None = None
    ) -> list[str]:
        """Load the valid words of one source

        Args:
            source: Built-in source key or source descriptor
            options: Loading options, configured defaults when omitted

        Returns:
            Words in file order

        Raises:
            LoadError: If the source cannot be loaded
        """
        descriptor = BuiltinSource(key=source) if isinstance(source, str) else source
        return await self.loader.load(descriptor, options or self.default_options())

    async def search_in_wordlist(
        self,
        words: Sequence[str],
        template: str,
        whole_word: bool = True,
        on_progress: ChunkProgressCallback | None = None,
        constraints: LetterConstraintSet | None = None,
    ) -> list[str]:
        """Search an already-loaded word list

        Args:
            words: Candidate words
            template: Search template
            whole_word: Match whole words instead of substrings
            on_progress: Called with (current_chunk, total_chunks)
            constraints: Optional required/forbidden letters

        Returns:
            Matching words in input order
        """
        matcher = compile_template(template, whole_word)
        return await self.scanner.scan(words, matcher, constraints, on_progress=on_progress)

    async def load_and_search_wordlists(
        self,
        source_keys: Sequence[str | WordSource],
        custom_lists: Sequence[CustomWordlist],
        template: str,
        options: SearchOptions | None = None,
        on_source_status: SourceStatusCallback | None = None,
        on_progress: StatusMessageCallback | None = None,
        constraints: LetterConstraintSet | None = None,
        on_chunk_progress: SourceChunkCallback | None = None,
    ) -> SearchResult:
        """Load every source, search it and aggregate the matches

        Args:
            source_keys: Built-in keys or source descriptors, in order
            custom_lists: Already-loaded lists searched after the sources
            template: Search template
            options: Search options, configured defaults when omitted
            on_source_status: Called as (key, "success"|"error", count, message)
            on_progress: Receives human-readable phase messages
            constraints: Optional required/forbidden letters
            on_chunk_progress: Receives (key, current_chunk, total_chunks)

        Returns:
            SearchResult, also kept as last_result

        Raises:
            SearchValidationError: For an empty template or empty selection
        """
        self.last_result = await self.service.run(
            source_keys,
            custom_lists,
            template,
            options or self.default_options(),
            constraints=constraints,
            on_source_status=on_source_status,
            on_progress=on_progress,
            on_chunk_progress=on_chunk_progress,
        )
        return self.last_result

    async def download_wordlist(
        self, url: str, options: SearchOptions | None = None
    ) -> CustomWordlist:
        """Download a URL into a custom word list named after the URL

        Raises:
            LoadError: If the download fails or contains no valid words
        """
        wordlist = await self.loader.download(url, options or self.default_options())
        logger.info(f"Downloaded {len(wordlist.words):,} words as {wordlist.name}")
        return wordlist

    def wordlist_from_pasted_text(
        self, text: str, name: str = "pasted", options: SearchOptions | None = None
    ) -> CustomWordlist | None:
        """Build a custom word list from pasted text, None when blank"""
        return wordlist_from_pasted_text(text, name, options or self.default_options())


async def load_wordlist(
    source: str | WordSource,
    options: SearchOptions | None = None,
    config: ConfigLoader | None = None,
    fetcher: TextFetcherProtocol | None = None,
) -> list[str]:
    """Load the valid words of one source with a one-off searcher"""
    return await PatternSearcher(config=config, fetcher=fetcher).load_wordlist(source, options)


async def search_in_wordlist(
    words: Sequence[str],
    template: str,
    whole_word: bool = True,
    on_progress: ChunkProgressCallback | None = None,
    constraints: LetterConstraintSet | None = None,
    chunk_size: int | None = None,
) -> list[str]:
    """Search an already-loaded word list with a one-off searcher"""
    searcher = PatternSearcher(chunk_size=chunk_size)
    return await searcher.search_in_wordlist(words, template, whole_word, on_progress, constraints)


async def load_and_search_wordlists(
    source_keys: Sequence[str | WordSource],
    custom_lists: Sequence[CustomWordlist],
    template: str,
    options: SearchOptions | None = None,
    on_source_status: SourceStatusCallback | None = None,
    on_progress: StatusMessageCallback | None = None,
    constraints: LetterConstraintSet | None = None,
    config: ConfigLoader | None = None,
    fetcher: TextFetcherProtocol | None = None,
) -> SearchResult:
    """Run a full multi-source search with a one-off searcher"""
    searcher = PatternSearcher(config=config, fetcher=fetcher)
    return await searcher.load_and_search_wordlists(
        source_keys,
        custom_lists,
        template,
        options,
        on_source_status=on_source_status,
        on_progress=on_progress,
        constraints=constraints,
    )


async def download_wordlist(
    url: str,
    options: SearchOptions | None = None,
    config: ConfigLoader | None = None,
    fetcher: TextFetcherProtocol | None = None,
) -> CustomWordlist:
    """Download a URL into a custom word list with a one-off searcher"""
    return await PatternSearcher(config=config, fetcher=fetcher).download_wordlist(url, options)
