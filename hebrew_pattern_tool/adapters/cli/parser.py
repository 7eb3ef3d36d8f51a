# hebrew_pattern_tool/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser
from argparse import ArgumentTypeError

# Local imports
from hebrew_pattern_tool.core.domain.alphabet import HEBREW_LETTERS
from hebrew_pattern_tool.core.domain.constraints import LetterConstraintSet
from hebrew_pattern_tool.infrastructure.config import get_config


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers"""
    try:
        number = int(value)
    except ValueError as e:
        raise ArgumentTypeError(f"{value!r} is not an integer") from e
    if number <= 0:
        raise ArgumentTypeError(f"{value!r} must be greater than 0")
    return number


def hebrew_letters(value: str) -> frozenset[str]:
    """argparse type for a run of Hebrew base letters, e.g. "אבג"

    Whitespace and commas between letters are ignored.
    """
    letters = frozenset(ch for ch in value if not ch.isspace() and ch != ",")
    invalid = sorted(ch for ch in letters if ch not in HEBREW_LETTERS)
    if invalid:
        raise ArgumentTypeError(f"not Hebrew letters: {' '.join(invalid)}")
    return letters


def build_constraints(
    required: frozenset[str] | None, forbidden: frozenset[str] | None
) -> LetterConstraintSet | None:
    """Combine --require/--forbid into a constraint set, None when both are empty

    Raises:
        ValueError: If a letter is both required and forbidden
    """
    constraints = LetterConstraintSet(
        required=required or frozenset(), forbidden=forbidden or frozenset()
    )
    return None if constraints.is_empty else constraints


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    # Load default configuration
    config = get_config()

    sources_config = config.sources
    search_config = config.search
    logging_config = config.logging

    parser = ArgumentParser(
        prog="hebrew-pattern-tool",
        description="Search Hebrew word lists with a simple template language",
        epilog=(
            "Template syntax: ? matches one Hebrew character, [...] is a character "
            "class, everything else is literal. Example: hebrew-pattern-tool 'ש?[מר]'"
        ),
    )

    parser.add_argument("template", help="Search template")

    # Word sources
    parser.add_argument(
        "--source",
        "-s",
        action="append",
        default=None,
        help=(
            "Built-in word list to search (repeatable, default: "
            f"{' '.join(sources_config.default_keys)} unless --url or --paste-file is given)"
        ),
    )
    parser.add_argument(
        "--url",
        action="append",
        default=[],
        help="Download a word list from URL and search it (repeatable)",
    )
    parser.add_argument(
        "--paste-file",
        default=None,
        help="Search the words of a local text file, one word per line",
    )

    # Letter constraints
    parser.add_argument(
        "--require",
        type=hebrew_letters,
        default=None,
        help="Letters every match must contain",
    )
    parser.add_argument(
        "--forbid",
        type=hebrew_letters,
        default=None,
        help="Letters no match may contain",
    )

    # Search options; all enabled by default, so use store_true to disable them
    parser.add_argument(
        "--keep-diacritics",
        action="store_true",
        help=f"Keep niqqud when loading (default strips: {search_config.strip_diacritics})",
    )
    parser.add_argument(
        "--keep-duplicates",
        action="store_true",
        help=f"Keep repeated matches (default removes: {search_config.dedupe})",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help=f"Keep matches in source order (default sorts: {search_config.sort_results})",
    )
    parser.add_argument(
        "--substring",
        action="store_true",
        help="Match the template anywhere in a word instead of the whole word",
    )
    parser.add_argument(
        "--chunk-size",
        type=positive_int,
        default=None,
        help=f"Words per scan step (default: {search_config.chunk_size})",
    )

    # Output options
    parser.add_argument(
        "--output",
        "-o",
        nargs="?",
        const=config.output.filename,
        default=None,
        help=f"Write matches to a text file (default name: {config.output.filename})",
    )
    parser.add_argument("--config", default=None, help="Path to configuration JSON file")

    # Logging options
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="DEBUG" if logging_config.debug else "WARNING",
        help="Console log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=logging_config.log_file,  # Use config default
        help="Path to log file (default: logs/hebrew_pattern_[timestamp].log)",
    )
    # File logging is enabled by default, so use store_true to disable it
    parser.add_argument("--disable-file-logging", action="store_true", help="Disable file logging")
    parser.add_argument("--silent", action="store_true", help="Suppress log and progress output")
    parser.add_argument("--no-progress", action="store_true", help="Hide progress bars")

    return parser
