# tests/unit/application/processing/test_pattern_compiler.py

"""Tests for template compilation"""

# Standard library imports
from re import error as RegexError

# Third party imports
from hypothesis import assume
from hypothesis import given
from hypothesis import strategies as st
import pytest

# Local imports
from hebrew_pattern_tool.application.processing.pattern_compiler import CompiledMatcher
from hebrew_pattern_tool.application.processing.pattern_compiler import compile_template
from hebrew_pattern_tool.application.processing.pattern_compiler import template_to_regex
from hebrew_pattern_tool.core.domain.alphabet import ALPHABET_CLASS

hebrew_letters = st.characters(min_codepoint=0x05D0, max_codepoint=0x05EA)
hebrew_words = st.text(alphabet=hebrew_letters, min_size=1, max_size=8)


class TestTemplateToRegex:
    """Test the template scan"""

    def test_literal_template(self):
        assert template_to_regex("שלום") == "^שלום$"

    def test_wildcard_expands_to_alphabet_class(self):
        assert template_to_regex("א?ב") == f"^א{ALPHABET_CLASS}ב$"

    def test_bracket_class_passes_through(self):
        assert template_to_regex("[אב]ג") == "^[אב]ג$"

    def test_wildcard_inside_class_is_literal(self):
        assert template_to_regex("[?]") == "^[?]$"

    def test_special_characters_escaped(self):
        assert template_to_regex("א.ב*") == r"^א\.ב\*$"

    def test_substring_mode_has_no_anchors(self):
        assert template_to_regex("א?", whole_word=False) == f"א{ALPHABET_CLASS}"

    def test_unterminated_class_is_literal(self):
        assert template_to_regex("א[ב?") == r"^א\[ב\?$"

    def test_second_class_left_open(self):
        """Only the unterminated class falls back, earlier classes stay classes"""
        assert template_to_regex("[אב]ג[ד") == r"^[אב]ג\[ד$"

    def test_closing_bracket_outside_class_is_literal(self):
        assert template_to_regex("א]") == r"^א\]$"


class TestCompiledMatcher:
    """Test matching behavior of compiled templates"""

    def test_basic_wildcard_scenario(self):
        matcher = compile_template("אה?ה")
        words = ["אהבה", "אכזבה", "אהוב"]
        assert [w for w in words if matcher.matches(w)] == ["אהבה"]

    def test_wildcard_matches_exactly_one_letter(self):
        matcher = compile_template("א?ב")
        assert matcher.matches("אגב")
        assert matcher.matches("אאב")
        assert not matcher.matches("אב")
        assert not matcher.matches("אגגב")
        assert not matcher.matches("אxב")

    def test_whole_word_versus_substring(self):
        assert compile_template("ב", whole_word=False).matches("אבג")
        assert not compile_template("ב", whole_word=True).matches("אבג")

    def test_whole_word_rejects_trailing_newline(self):
        matcher = compile_template("אב", whole_word=True)
        assert matcher.matches("אב")
        assert not matcher.matches("אב\n")
        assert compile_template("אב", whole_word=False).matches("אב\n")

    def test_character_class(self):
        matcher = compile_template("[אב]ג")
        assert matcher.matches("אג")
        assert matcher.matches("בג")
        assert not matcher.matches("גג")

    def test_negated_class(self):
        matcher = compile_template("[^א]ב")
        assert matcher.matches("גב")
        assert not matcher.matches("אב")

    def test_unterminated_class_matches_literally(self):
        matcher = compile_template("א[ב")
        assert matcher.matches("א[ב")
        assert not matcher.matches("אב")

    def test_literal_dot(self):
        matcher = compile_template("א.ב")
        assert matcher.matches("א.ב")
        assert not matcher.matches("אגב")

    def test_invalid_class_range_raises(self):
        with pytest.raises(RegexError):
            compile_template("[ת-א]")

    def test_matcher_is_callable_and_reusable(self):
        matcher = compile_template("ש?ם")
        assert matcher("שלם")
        assert not matcher("שלום")
        assert matcher("שים")

    def test_repr(self):
        assert repr(CompiledMatcher("א?", whole_word=False)) == "CompiledMatcher('א?', whole_word=False)"


class TestCompilerProperties:
    """Property-based tests for template compilation"""

    @given(hebrew_words, hebrew_words)
    def test_literal_template_matches_only_itself(self, template: str, word: str) -> None:
        """A template without wildcards or classes matches exactly the equal word"""
        matcher = compile_template(template, whole_word=True)
        assert matcher.matches(template)
        assert matcher.matches(word) == (word == template)

    @given(hebrew_letters, hebrew_letters, hebrew_letters)
    def test_wildcard_accepts_any_middle_letter(self, first: str, middle: str, last: str) -> None:
        matcher = compile_template(f"{first}?{last}")
        assert matcher.matches(first + middle + last)
        assert not matcher.matches(first + last)
        assert not matcher.matches(first + middle + middle + last)

    @given(hebrew_words, hebrew_words)
    def test_substring_mode_is_containment(self, template: str, word: str) -> None:
        """Without anchors a literal template matches iff it occurs in the word"""
        assert compile_template(template, whole_word=False).matches(word) == (template in word)

    @given(hebrew_words, hebrew_words, hebrew_words)
    def test_substring_match_has_whole_word_window(self, prefix: str, template: str, suffix: str):
        """A substring match implies the template matches a window of the word whole"""
        word = prefix + template + suffix
        assert compile_template(template, whole_word=False).matches(word)
        start = len(prefix)
        window = word[start : start + len(template)]
        assert compile_template(template, whole_word=True).matches(window)

    @given(hebrew_words)
    def test_wildcard_run_matches_same_length(self, word: str) -> None:
        wildcard_template = "?" * len(word)
        assert compile_template(wildcard_template, whole_word=True).matches(word)
        assert compile_template(wildcard_template, whole_word=False).matches(word)
        assume(len(word) > 1)
        assert not compile_template(wildcard_template[1:], whole_word=True).matches(word)
