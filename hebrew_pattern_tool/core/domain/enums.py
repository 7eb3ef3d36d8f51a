# hebrew_pattern_tool/core/domain/enums.py

"""Domain enumerations for the Hebrew pattern tool"""

# Standard library imports
from enum import Enum


class SourceKind(Enum):
    """Kind of word source a search can draw from"""

    BUILTIN = "builtin"  # Named source resolved through the source registry
    URL = "url"  # Remote word list fetched by URL
    PASTED = "pasted"  # Literal text supplied by the user
    CUSTOM = "custom"  # Pasted text if present, otherwise a URL


class LoadStatus(Enum):
    """Outcome of loading a single word source"""

    SUCCESS = "success"
    ERROR = "error"


class LetterState(Enum):
    """Per-letter state of a letter picker"""

    SELECTED = "selected"  # Letter must appear in the word
    DESELECTED = "deselected"  # Letter must not appear in the word


class RunState(Enum):
    """States an orchestrated search run moves through"""

    IDLE = "idle"
    LOADING = "loading"
    SCANNING = "scanning"
    ERRORED = "errored"  # A source failed to load, or the whole run failed
    AGGREGATING = "aggregating"
    DONE = "done"
