# tests/adapters/api/test_api_export.py

"""Tests for exporting matches"""

# Third party imports
import pytest

# Local imports
from hebrew_pattern_tool import PatternSearcher
from hebrew_pattern_tool import export_matches
from hebrew_pattern_tool import render_matches_text
from hebrew_pattern_tool.core.domain.exceptions import SearchValidationError


class TestRenderMatches:
    """Test the text body of an export"""

    def test_one_word_per_line(self):
        assert render_matches_text(["אא", "בב"]) == "אא\nבב"

    def test_single_word_has_no_newline(self):
        assert render_matches_text(["אא"]) == "אא"


class TestExportMatches:
    """Test writing match files"""

    def test_writes_utf8(self, tmp_path):
        path = tmp_path / "matches.txt"
        assert export_matches(["שלום", "עולם"], str(path)) == str(path)
        assert path.read_bytes() == "שלום\nעולם".encode("utf-8")

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "matches.txt"
        export_matches(("שלום",), str(path))
        assert path.exists()

    def test_empty_matches_rejected(self, tmp_path):
        path = tmp_path / "matches.txt"
        with pytest.raises(SearchValidationError, match="No results to download"):
            export_matches([], str(path))
        assert not path.exists()

    def test_export_before_search_rejected(self, make_config):
        searcher = PatternSearcher(config=make_config())
        with pytest.raises(SearchValidationError):
            searcher.export_results()
