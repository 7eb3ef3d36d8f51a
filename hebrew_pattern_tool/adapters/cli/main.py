# hebrew_pattern_tool/adapters/cli/main.py

"""
Hebrew Pattern Tool - CLI Main Module

Command-line interface for searching Hebrew word lists by template.

This CLI uses the public API provided by hebrew_pattern_tool.
"""

# Standard library imports
from argparse import Namespace
from asyncio import run
from logging import getLogger
from pathlib import Path
import sys

# Third party imports
from rich.console import Console
from rich.table import Table

# Local imports
from hebrew_pattern_tool.adapters.api import PatternSearcher
from hebrew_pattern_tool.adapters.api import export_matches
from hebrew_pattern_tool.adapters.api import render_matches_text
from hebrew_pattern_tool.adapters.cli.parser import build_constraints
from hebrew_pattern_tool.adapters.cli.parser import create_argument_parser
from hebrew_pattern_tool.application.models.search_models import SearchOptions
from hebrew_pattern_tool.application.models.search_models import SearchResult
from hebrew_pattern_tool.core.domain.enums import LoadStatus
from hebrew_pattern_tool.core.domain.exceptions import LoadError
from hebrew_pattern_tool.core.domain.exceptions import SearchValidationError
from hebrew_pattern_tool.core.domain.word_source import CustomWordlist
from hebrew_pattern_tool.infrastructure.config import get_config
from hebrew_pattern_tool.infrastructure.logging import ProgressBarManager
from hebrew_pattern_tool.infrastructure.logging import log_run_summary
from hebrew_pattern_tool.infrastructure.logging import set_up_logging

logger = getLogger(__name__)

EXIT_FAILURE = 1
EXIT_VALIDATION = 2


def options_from_args(searcher: PatternSearcher, args: Namespace) -> SearchOptions:
    """Apply the --keep-*/--no-sort/--substring switches to the configured defaults"""
    overrides: dict[str, bool] = {}
    if args.keep_diacritics:
        overrides["strip_diacritics"] = False
    if args.keep_duplicates:
        overrides["dedupe"] = False
    if args.no_sort:
        overrides["sort_results"] = False
    if args.substring:
        overrides["whole_word"] = False
    return searcher.default_options(**overrides)


def source_table(result: SearchResult) -> Table:
    """Per-source load status as a rich table"""
    table = Table(title="Sources")
    table.add_column("Source")
    table.add_column("Status")
    table.add_column("Words", justify="right")
    for key, record in result.source_statuses.items():
        if record.status is LoadStatus.SUCCESS:
            table.add_row(key, "[green]✓ loaded[/green]", f"{record.count:,}")
        else:
            table.add_row(key, f"[red]✗ {record.error}[/red]", "-")
    return table


async def collect_custom_lists(
    searcher: PatternSearcher,
    args: Namespace,
    options: SearchOptions,
    progress: ProgressBarManager,
) -> list[CustomWordlist]:
    """Download --url lists and read --paste-file; failing URLs are reported and skipped"""
    custom_lists: list[CustomWordlist] = []

    for url in args.url:
        try:
            custom_lists.append(await searcher.download_wordlist(url, options))
        except LoadError as e:
            logger.warning(f"Skipping {url}: {e.message}")
            progress.log_message(f"✗ {url}: {e.message}", "bold red")

    if args.paste_file:
        text = Path(args.paste_file).read_text(encoding="utf-8")
        pasted = searcher.wordlist_from_pasted_text(text, options=options)
        if pasted is not None:
            custom_lists.append(pasted)
        else:
            logger.warning(f"{args.paste_file} is empty")

    return custom_lists


async def run_search(
    searcher: PatternSearcher, args: Namespace, progress: ProgressBarManager
) -> SearchResult:
    """Collect sources from the arguments and run one search"""
    options = options_from_args(searcher, args)
    constraints = build_constraints(args.require, args.forbid)

    custom_lists = await collect_custom_lists(searcher, args, options, progress)

    if args.source:
        sources = list(args.source)
    elif args.url or args.paste_file:
        sources = []
    else:
        sources = list(searcher.config.sources.default_keys)

    def on_source_status(key: str, status: str, count: int, error: str | None) -> None:
        if status == LoadStatus.ERROR.value:
            progress.log_message(f"✗ {key}: {error}", "bold red")
        else:
            logger.info(f"✓ {key}: {count:,} words")

    return await searcher.load_and_search_wordlists(
        sources,
        custom_lists,
        args.template,
        options,
        on_source_status=on_source_status,
        constraints=constraints,
        on_chunk_progress=progress.update_chunks,
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point using the public API"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        build_constraints(args.require, args.forbid)
    except ValueError as e:
        parser.error(str(e))

    # Configure logging
    log_file_path = set_up_logging(
        log_file=args.log_file,
        log_level=args.log_level,
        silent=args.silent,
        disable_file_logging=args.disable_file_logging,
    )

    console = Console(stderr=True, quiet=args.silent)
    config = get_config(args.config)

    try:
        searcher = PatternSearcher(config=config, chunk_size=args.chunk_size)

        logger.info("=== STARTING PATTERN SEARCH ===")
        with ProgressBarManager(
            enabled=not (args.silent or args.no_progress), console=console
        ) as progress:
            result = run(run_search(searcher, args, progress))

        if result.source_statuses:
            console.print(source_table(result))

        if result.matches:
            print(render_matches_text(result.matches))
        console.print(
            f"[bold]{result.total_matched:,}[/bold] matches in "
            f"{result.total_loaded:,} words ({result.elapsed_seconds:.2f}s)"
        )

        output_file = None
        if args.output:
            output_file = export_matches(result.matches, args.output)

        log_run_summary(
            args.template, result, log_file=log_file_path, output_file=output_file
        )

    except SearchValidationError as e:
        logger.error(f"Invalid search: {e}")
        console.print(f"[bold red]{e}[/bold red]")
        sys.exit(EXIT_VALIDATION)
    except Exception as e:
        logger.error(f"Error during search: {e}")
        console.print(f"[bold red]Search failed:[/bold red] {e}")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
