# hebrew_pattern_tool/application/services/_search_service.py

"""Search orchestration across multiple word sources

A run moves through IDLE -> LOADING -> SCANNING (per source) -> AGGREGATING
-> DONE. A source that fails to load is recorded as an error and the run
moves on; only unexpected failures end the run early.
"""

# Standard library imports
from collections.abc import Callable
from collections.abc import Sequence
from logging import getLogger
from time import perf_counter

# Local imports
from hebrew_pattern_tool.application.models.search_models import SearchOptions
from hebrew_pattern_tool.application.models.search_models import SearchResult
from hebrew_pattern_tool.application.models.search_models import SourceStatusRecord
from hebrew_pattern_tool.application.processing.aggregation import dedupe_words
from hebrew_pattern_tool.application.processing.aggregation import sort_words
from hebrew_pattern_tool.application.processing.batched_scanner import BatchedScanner
from hebrew_pattern_tool.application.processing.pattern_compiler import CompiledMatcher
from hebrew_pattern_tool.application.processing.pattern_compiler import compile_template
from hebrew_pattern_tool.core.domain.constraints import LetterConstraintSet
from hebrew_pattern_tool.core.domain.enums import LoadStatus
from hebrew_pattern_tool.core.domain.enums import RunState
from hebrew_pattern_tool.core.domain.exceptions import LoadError
from hebrew_pattern_tool.core.domain.exceptions import SearchValidationError
from hebrew_pattern_tool.core.domain.word_source import BuiltinSource
from hebrew_pattern_tool.core.domain.word_source import CustomWordlist
from hebrew_pattern_tool.core.domain.word_source import WordSource
from hebrew_pattern_tool.core.types.aliases import SourceStatusCallback
from hebrew_pattern_tool.core.types.aliases import StatusMessageCallback
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.infrastructure.persistence import WordlistLoader
from hebrew_pattern_tool.shared.mixins import ConfigurableMixin

logger = getLogger(__name__)

# (source_key, current_chunk, total_chunks)
type SourceChunkCallback = Callable[[str, int, int], None]


def validate_search_request(
    template: str,
    sources: Sequence[str | WordSource],
    custom_lists: Sequence[CustomWordlist],
) -> None:
    """Reject a search that cannot start

    Raises:
        SearchValidationError: If the template is empty or nothing is selected
    """
    if not template:
        raise SearchValidationError("Enter a search template")
    if not sources and not custom_lists:
        raise SearchValidationError("Choose at least one word source")


class SearchService(ConfigurableMixin):
    """Loads, scans and aggregates matches across sources for one run at a time

    The service keeps no state between runs apart from the last run state.
    Callers must not start a second run on the same instance while one is
    in flight.
    """

    def __init__(
        self,
        loader: WordlistLoader | None = None,
        scanner: BatchedScanner | None = None,
        config: ConfigLoader | None = None,
    ) -> None:
        """Initialize service

        Args:
            loader: Word list loader, built from config when omitted
            scanner: Batched scanner, built from config when omitted
            config: Optional configuration loader
        """
        self.config = self._init_config(config)
        self.loader = loader or WordlistLoader(config=self.config)
        self.scanner = scanner or BatchedScanner(config=self.config)
        self.state = RunState.IDLE

    def _set_state(self, state: RunState, source_key: str | None = None) -> None:
        self.state = state
        if source_key:
            logger.debug(f"Run state -> {state.value} ({source_key})")
        else:
            logger.debug(f"Run state -> {state.value}")

    async def run(
        self,
        sources: Sequence[str | WordSource],
        custom_lists: Sequence[CustomWordlist],
        template: str,
        options: SearchOptions,
        constraints: LetterConstraintSet | None = None,
        on_source_status: SourceStatusCallback | None = None,
        on_progress: StatusMessageCallback | None = None,
        on_chunk_progress: SourceChunkCallback | None = None,
    ) -> SearchResult:
        """Search every source, then every custom list, for template

        Args:
            sources: Built-in source keys or source descriptors, searched in order
            custom_lists: Already-loaded lists, searched after sources in order
            template: Search template
            options: Search options
            constraints: Optional required/forbidden letters
            on_source_status: Called as (key, "success"|"error", count, message)
                for every named source
            on_progress: Receives human-readable phase messages
            on_chunk_progress: Receives (key, current_chunk, total_chunks)

        Returns:
            SearchResult for the run

        Raises:
            SearchValidationError: Before anything is loaded, for an empty
                template or an empty selection
        """
        validate_search_request(template, sources, custom_lists)

        def emit(message: str) -> None:
            logger.info(message)
            if on_progress:
                on_progress(message)

        start = perf_counter()
        try:
            matcher = compile_template(template, options.whole_word)
            logger.info(f"Searching for {template!r} as /{matcher.expression}/")

            all_matches: list[str] = []
            total_loaded = 0
            statuses: dict[str, SourceStatusRecord] = {}

            for source in sources:
                descriptor = BuiltinSource(key=source) if isinstance(source, str) else source
                key = descriptor.key

                self._set_state(RunState.LOADING, key)
                emit(f"Loading {key}...")
                try:
                    words = await self.loader.load(descriptor, options)
                except LoadError as e:
                    self._set_state(RunState.ERRORED, key)
                    logger.warning(f"Failed to load {key}: {e.message}")
                    statuses[key] = SourceStatusRecord(
                        key=key, status=LoadStatus.ERROR, count=0, error=e.message
                    )
                    if on_source_status:
                        on_source_status(key, LoadStatus.ERROR.value, 0, e.message)
                    continue

                total_loaded += len(words)
                self._set_state(RunState.SCANNING, key)
                emit(f"Searching {key}...")
                matches = await self._scan(key, words, matcher, constraints, emit, on_chunk_progress)
                all_matches.extend(matches)

                statuses[key] = SourceStatusRecord(
                    key=key, status=LoadStatus.SUCCESS, count=len(words)
                )
                if on_source_status:
                    on_source_status(key, LoadStatus.SUCCESS.value, len(words), None)

            for custom in custom_lists:
                self._set_state(RunState.SCANNING, custom.name)
                emit(f"Searching {custom.name}...")
                matches = await self._scan(
                    custom.name, custom.words, matcher, constraints, emit, on_chunk_progress
                )
                all_matches.extend(matches)
                total_loaded += len(custom.words)

            self._set_state(RunState.AGGREGATING)
            final_matches = all_matches
            if options.dedupe:
                emit("Removing duplicates...")
                final_matches = dedupe_words(all_matches)

            if options.sort_results:
                emit("Sorting results...")
                final_matches = sort_words(final_matches, self.config.search.collation_locale)

        except Exception as e:
            self._set_state(RunState.ERRORED)
            logger.error(f"Search failed: {e}")
            raise

        self._set_state(RunState.DONE)
        result = SearchResult(
            matches=tuple(final_matches),
            total_loaded=total_loaded,
            total_matched=len(final_matches),
            source_statuses=statuses,
            elapsed_seconds=perf_counter() - start,
        )
        emit(f"Done: {result.total_matched:,} matches in {result.total_loaded:,} words")
        return result

    async def _scan(
        self,
        key: str,
        words: Sequence[str],
        matcher: CompiledMatcher,
        constraints: LetterConstraintSet | None,
        emit: StatusMessageCallback,
        on_chunk_progress: SourceChunkCallback | None,
    ) -> list[str]:
        """Scan one source's words, relaying chunk progress under its key"""

        def report(current: int, total: int) -> None:
            emit(f"Searching {key} (part {current}/{total})...")
            if on_chunk_progress:
                on_chunk_progress(key, current, total)

        return await self.scanner.scan(words, matcher, constraints, on_progress=report)
