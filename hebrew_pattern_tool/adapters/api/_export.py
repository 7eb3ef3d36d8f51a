# hebrew_pattern_tool/adapters/api/_export.py

"""Export of match lists as plain text"""

# Standard library imports
from collections.abc import Sequence
from logging import getLogger
from os import makedirs
from os.path import dirname

# Local imports
from hebrew_pattern_tool.application.models.search_models import SearchResult
from hebrew_pattern_tool.core.domain.exceptions import SearchValidationError
from hebrew_pattern_tool.infrastructure.config import ConfigLoader

logger = getLogger(__name__)


def render_matches_text(matches: Sequence[str]) -> str:
    """Join matches one per line, without a trailing newline"""
    return "\n".join(matches)


def export_matches(matches: Sequence[str], path: str) -> str:
    """Write matches to a UTF-8 text file

    Args:
        matches: Words to write, in order
        path: Output file path; missing parent directories are created

    Returns:
        The path written

    Raises:
        SearchValidationError: If there is nothing to export
    """
    if not matches:
        raise SearchValidationError("No results to download")

    output_dir = dirname(path)
    if output_dir:
        makedirs(output_dir, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(render_matches_text(matches))

    logger.info(f"  ✓ TXT: {path} ({len(matches):,} words)")
    return path


class ExportComponent:
    """Component for exporting the matches of the last search"""

    config: ConfigLoader
    last_result: SearchResult | None

    def export_results(self, path: str | None = None) -> str:
        """Export the last result's matches

        Args:
            path: Output path, defaults to the configured output filename

        Returns:
            The path written

        Raises:
            SearchValidationError: If no search has run or it found nothing
        """
        if self.last_result is None:
            raise SearchValidationError("No results to download")
        return export_matches(self.last_result.matches, path or self.config.output.filename)
