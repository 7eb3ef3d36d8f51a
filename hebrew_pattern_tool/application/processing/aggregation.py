# hebrew_pattern_tool/application/processing/aggregation.py

"""Result aggregation: duplicate removal and locale-aware ordering"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Iterator
from contextlib import contextmanager
from locale import Error as LocaleError
from locale import LC_COLLATE
from locale import setlocale
from locale import strxfrm
from logging import getLogger

logger = getLogger(__name__)


def dedupe_words(words: Iterable[str]) -> list[str]:
    """Remove repeated words, keeping the first occurrence of each"""
    return list(dict.fromkeys(words))


@contextmanager
def collation_locale(locale_name: str | None) -> Iterator[None]:
    """Temporarily switch LC_COLLATE to locale_name

    None selects the locale named by the environment (LC_ALL, LC_COLLATE,
    LANG). An unavailable locale is logged and the process locale is used
    instead. The previous LC_COLLATE is restored on exit.
    """
    previous = setlocale(LC_COLLATE)
    try:
        setlocale(LC_COLLATE, locale_name or "")
    except LocaleError as e:
        if locale_name is None:
            logger.debug(f"Environment collation locale unavailable ({e}), using {previous!r}")
        else:
            logger.warning(
                f"Collation locale {locale_name!r} unavailable ({e}), using {previous!r}"
            )
        yield
        return

    try:
        yield
    finally:
        setlocale(LC_COLLATE, previous)


def sort_words(words: Iterable[str], locale_name: str | None = None) -> list[str]:
    """Sort words by locale-aware comparison

    The sort is stable; words that collate equal keep their relative order.

    Args:
        words: Words to sort
        locale_name: Collation locale, None for the environment's locale

    Returns:
        New sorted list
    """
    with collation_locale(locale_name):
        return sorted(words, key=strxfrm)
