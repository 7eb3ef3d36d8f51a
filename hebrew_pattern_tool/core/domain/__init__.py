# hebrew_pattern_tool/core/domain/__init__.py

"""Core domain models and constants"""

# Local imports
from hebrew_pattern_tool.core.domain.alphabet import ALPHABET_CLASS
from hebrew_pattern_tool.core.domain.alphabet import HEBREW_LETTERS
from hebrew_pattern_tool.core.domain.alphabet import contains_alphabet_char
from hebrew_pattern_tool.core.domain.alphabet import is_alphabet_char
from hebrew_pattern_tool.core.domain.constraints import LetterConstraintSet
from hebrew_pattern_tool.core.domain.enums import LetterState
from hebrew_pattern_tool.core.domain.enums import LoadStatus
from hebrew_pattern_tool.core.domain.enums import RunState
from hebrew_pattern_tool.core.domain.enums import SourceKind
from hebrew_pattern_tool.core.domain.exceptions import HebrewPatternError
from hebrew_pattern_tool.core.domain.exceptions import LoadError
from hebrew_pattern_tool.core.domain.exceptions import SearchValidationError
from hebrew_pattern_tool.core.domain.word_source import BuiltinSource
from hebrew_pattern_tool.core.domain.word_source import CustomSource
from hebrew_pattern_tool.core.domain.word_source import CustomWordlist
from hebrew_pattern_tool.core.domain.word_source import PastedSource
from hebrew_pattern_tool.core.domain.word_source import UrlSource
from hebrew_pattern_tool.core.domain.word_source import WordSource

__all__ = [
    "ALPHABET_CLASS",
    "BuiltinSource",
    "CustomSource",
    "CustomWordlist",
    "HEBREW_LETTERS",
    "HebrewPatternError",
    "LetterConstraintSet",
    "LetterState",
    "LoadError",
    "LoadStatus",
    "PastedSource",
    "RunState",
    "SearchValidationError",
    "SourceKind",
    "UrlSource",
    "WordSource",
    "contains_alphabet_char",
    "is_alphabet_char",
]
