# hebrew_pattern_tool/core/domain/alphabet.py

"""Alphabet definition for the Hebrew script

The alphabet is the Unicode Hebrew block (U+0590..U+05FF). It is used both to
validate candidate words and to expand the wildcard token of a template.
"""

# Standard library imports
from re import compile as re_compile

ALPHABET_FIRST = "\u0590"
ALPHABET_LAST = "\u05ff"

# Regex character class matching exactly one alphabet code point
ALPHABET_CLASS = f"[{ALPHABET_FIRST}-{ALPHABET_LAST}]"

_ALPHABET_RE = re_compile(ALPHABET_CLASS)

# Base letters offered by a letter picker, final forms included
HEBREW_LETTERS: tuple[str, ...] = tuple(chr(cp) for cp in range(ord("א"), ord("ת") + 1))


def is_alphabet_char(char: str) -> bool:
    """Return True if char is a single code point inside the alphabet block"""
    return len(char) == 1 and ALPHABET_FIRST <= char <= ALPHABET_LAST


def contains_alphabet_char(text: str) -> bool:
    """Return True if text contains at least one alphabet character"""
    return _ALPHABET_RE.search(text) is not None


__all__ = [
    "ALPHABET_CLASS",
    "ALPHABET_FIRST",
    "ALPHABET_LAST",
    "HEBREW_LETTERS",
    "contains_alphabet_char",
    "is_alphabet_char",
]
