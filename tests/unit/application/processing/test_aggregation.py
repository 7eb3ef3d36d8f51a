# tests/unit/application/processing/test_aggregation.py

"""Tests for duplicate removal and sorting of matches"""

# Standard library imports
from locale import LC_COLLATE
from locale import Error as LocaleError
from locale import setlocale
from unittest.mock import call
from unittest.mock import patch

# Third party imports
from hypothesis import given
from hypothesis import strategies as st

# Local imports
from hebrew_pattern_tool.application.processing.aggregation import collation_locale
from hebrew_pattern_tool.application.processing.aggregation import dedupe_words
from hebrew_pattern_tool.application.processing.aggregation import sort_words

hebrew_words = st.text(
    alphabet=st.characters(min_codepoint=0x05D0, max_codepoint=0x05EA), min_size=1, max_size=5
)


class TestDedupe:
    """Test duplicate removal"""

    def test_keeps_first_occurrence_order(self):
        assert dedupe_words(["בב", "אא", "בב", "גג", "אא"]) == ["בב", "אא", "גג"]

    def test_empty(self):
        assert dedupe_words([]) == []

    @given(st.lists(hebrew_words))
    def test_idempotent(self, words):
        """Running dedupe twice equals running it once"""
        once = dedupe_words(words)
        assert dedupe_words(once) == once
        assert len(set(once)) == len(once)
        assert set(once) == set(words)


class TestSort:
    """Test locale-aware sorting"""

    def test_dedupe_then_sort_scenario(self):
        assert sort_words(dedupe_words(["בב", "אא", "בב"])) == ["אא", "בב"]

    def test_does_not_mutate_input(self):
        words = ["גג", "אא"]
        assert sort_words(words) == ["אא", "גג"]
        assert words == ["גג", "אא"]

    def test_unavailable_locale_falls_back(self, caplog):
        words = ["גג", "אא", "בב"]
        assert sort_words(words, "xx_NOT_A_LOCALE.UTF-8") == sorted(words)
        assert "unavailable" in caplog.text

    def test_locale_restored_after_sort(self):
        before = setlocale(LC_COLLATE)
        with collation_locale("C"):
            pass
        assert setlocale(LC_COLLATE) == before

    def test_default_uses_environment_locale(self):
        """Without a configured locale the environment's LC_COLLATE is applied"""
        with patch(
            "hebrew_pattern_tool.application.processing.aggregation.setlocale",
            return_value="C",
        ) as mock_setlocale:
            sort_words(["בב", "אא"])

        assert mock_setlocale.call_args_list == [
            call(LC_COLLATE),
            call(LC_COLLATE, ""),
            call(LC_COLLATE, "C"),
        ]

    def test_unusable_environment_locale_still_sorts(self, caplog):
        def fake_setlocale(category, locale=None):
            if locale == "":
                raise LocaleError("unsupported locale setting")
            return "C"

        with patch(
            "hebrew_pattern_tool.application.processing.aggregation.setlocale",
            side_effect=fake_setlocale,
        ):
            assert sort_words(["גג", "אא"]) == ["אא", "גג"]
        assert all(record.levelname != "WARNING" for record in caplog.records)

    @given(st.lists(hebrew_words))
    def test_sorted_output_is_permutation(self, words):
        result = sort_words(words, "C")
        assert sorted(result) == sorted(words)
        assert result == sorted(words)
