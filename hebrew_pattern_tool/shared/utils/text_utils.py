# hebrew_pattern_tool/shared/utils/text_utils.py

"""Text processing utilities for Hebrew word lists"""

# Standard library imports
from re import compile as re_compile
from unicodedata import category
from unicodedata import normalize as unicode_normalize

# Local imports
from hebrew_pattern_tool.core.domain.alphabet import contains_alphabet_char

_WHITESPACE_RE = re_compile(r"\s")


def strip_diacritics(word: str) -> str:
    """Remove combining marks (niqqud, cantillation) from a word

    Decomposes the word canonically (NFD), drops every code point whose
    Unicode category is a mark (Mn, Mc, Me) and recomposes what is left.
    A word without marks is returned unchanged.

    Args:
        word: Input word, possibly pointed

    Returns:
        The word with only base characters
    """
    if not word:
        return ""

    decomposed = unicode_normalize("NFD", word)
    bare = "".join(ch for ch in decomposed if not category(ch).startswith("M"))
    if len(bare) == len(decomposed):
        # Nothing stripped; keep the caller's code points as they were
        return word
    return unicode_normalize("NFC", bare)


def split_lines(text: str) -> list[str]:
    """Split raw word list text into trimmed, non-empty lines

    Handles both LF and CRLF line endings.

    Args:
        text: Raw text of a word list

    Returns:
        Lines with surrounding whitespace removed, empty lines dropped
    """
    if not text:
        return []
    return [line for line in (raw.strip() for raw in text.split("\n")) if line]


def is_valid_word(line: str) -> bool:
    """Check that a trimmed line is a usable word

    A word has no whitespace anywhere and contains at least one Hebrew
    character.
    """
    return bool(line) and _WHITESPACE_RE.search(line) is None and contains_alphabet_char(line)


def parse_wordlist_text(text: str) -> list[str]:
    """Split raw text into lines and keep only valid words, in input order

    Invalid lines are silently dropped.
    """
    return [line for line in split_lines(text) if is_valid_word(line)]
