# hebrew_pattern_tool/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs
from os.path import exists
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    # Local imports
    from hebrew_pattern_tool.application.models.search_models import SearchResult


def get_default_log_path() -> str:
    """Generate default log file path with timestamp"""
    log_dir = "logs"
    if not exists(log_dir):
        makedirs(log_dir)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/hebrew_pattern_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path()

        file_handler = FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)
        # File gets debug output even when the console is quieter
        root_logger.setLevel(DEBUG)

        getLogger(__name__).info(f"Logging to file: {log_file}")
        return log_file

    return None


def log_run_summary(
    template: str,
    result: "SearchResult",
    log_file: str | None = None,
    output_file: str | None = None,
) -> None:
    """Log final run summary with statistics

    Args:
        template: Searched template
        result: Result of the run
        log_file: Path to log file (if any)
        output_file: Path the matches were written to (if any)
    """
    logger = getLogger(__name__)

    minutes = int(result.elapsed_seconds // 60)
    seconds = result.elapsed_seconds % 60

    summary_lines = ["\n" + "=" * 80, "SEARCH COMPLETE", "=" * 80]
    summary_lines.extend(
        [
            f"Template: {template}",
            f"Words loaded: {result.total_loaded:,}",
            f"Matches: {result.total_matched:,}",
            f"Search time: {minutes}m {seconds:.1f}s",
        ]
    )

    if result.source_statuses:
        summary_lines.extend(["", "Sources:"])
        for key, record in result.source_statuses.items():
            if record.error:
                summary_lines.append(f"  {key}: {record.status.value} ({record.error})")
            else:
                summary_lines.append(f"  {key}: {record.status.value} ({record.count:,} words)")

    if output_file or log_file:
        summary_lines.extend(["", "Output:"])
        if output_file:
            summary_lines.append(f"  Matches: {output_file}")
        if log_file:
            summary_lines.append(f"  Log: {log_file}")

    summary_lines.append("=" * 80)
    logger.info("\n".join(summary_lines))
