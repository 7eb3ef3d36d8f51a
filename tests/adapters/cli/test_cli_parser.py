# tests/adapters/cli/test_cli_parser.py

"""Tests for command-line argument parsing"""

# Standard library imports
from argparse import ArgumentTypeError

# Third party imports
import pytest

# Local imports
from hebrew_pattern_tool.adapters.cli.parser import build_constraints
from hebrew_pattern_tool.adapters.cli.parser import create_argument_parser
from hebrew_pattern_tool.adapters.cli.parser import hebrew_letters
from hebrew_pattern_tool.adapters.cli.parser import positive_int


class TestArgumentTypes:
    """Test custom argparse types"""

    def test_hebrew_letters(self):
        assert hebrew_letters("שמ") == frozenset({"ש", "מ"})

    def test_hebrew_letters_ignores_separators(self):
        assert hebrew_letters("ש, מ ל") == frozenset({"ש", "מ", "ל"})

    def test_hebrew_letters_rejects_other_characters(self):
        with pytest.raises(ArgumentTypeError, match="not Hebrew letters"):
            hebrew_letters("שa")

    def test_hebrew_letters_rejects_points(self):
        with pytest.raises(ArgumentTypeError):
            hebrew_letters("\u05b8")

    def test_positive_int(self):
        assert positive_int("5") == 5
        with pytest.raises(ArgumentTypeError):
            positive_int("0")
        with pytest.raises(ArgumentTypeError):
            positive_int("many")


class TestBuildConstraints:
    """Test combining --require and --forbid"""

    def test_none_when_empty(self):
        assert build_constraints(None, None) is None
        assert build_constraints(frozenset(), frozenset()) is None

    def test_only_required(self):
        constraints = build_constraints(frozenset({"ש"}), None)
        assert constraints.required == frozenset({"ש"})
        assert constraints.forbidden == frozenset()

    def test_overlap_raises_value_error(self):
        with pytest.raises(ValueError):
            build_constraints(frozenset({"ש"}), frozenset({"ש"}))


class TestArgumentParser:
    """Test parser defaults and options"""

    def test_defaults(self):
        args = create_argument_parser().parse_args(["ש?ם"])
        assert args.template == "ש?ם"
        assert args.source is None
        assert args.url == []
        assert args.paste_file is None
        assert args.require is None
        assert args.forbid is None
        assert not args.keep_diacritics
        assert not args.keep_duplicates
        assert not args.no_sort
        assert not args.substring
        assert args.chunk_size is None
        assert args.output is None
        assert args.log_level == "WARNING"
        assert not args.silent

    def test_repeatable_sources(self):
        args = create_argument_parser().parse_args(["ש?ם", "-s", "nouns", "--source", "verbs"])
        assert args.source == ["nouns", "verbs"]

    def test_output_without_value_uses_configured_name(self):
        args = create_argument_parser().parse_args(["ש?ם", "--output"])
        assert args.output == "matches.txt"

    def test_invalid_chunk_size_exits(self):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["ש?ם", "--chunk-size", "0"])
