# hebrew_pattern_tool/core/domain/word_source.py

"""Word source descriptors and already-loaded custom word lists"""

# Standard library imports
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from hebrew_pattern_tool.core.domain.enums import SourceKind

# Source descriptors are immutable snapshots handed to the loader
SOURCE_CONFIG = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)


class BuiltinSource(BaseModel):
    """Named source resolved through the configured source registry"""

    model_config = SOURCE_CONFIG

    kind: Literal[SourceKind.BUILTIN] = SourceKind.BUILTIN
    key: str = Field(..., min_length=1, description="Registry key, e.g. 'nouns'")


class UrlSource(BaseModel):
    """Remote word list fetched directly from a URL"""

    model_config = SOURCE_CONFIG

    kind: Literal[SourceKind.URL] = SourceKind.URL
    key: str = Field(..., min_length=1, description="Identifier reported in status callbacks")
    url: str = Field(..., min_length=1)


class PastedSource(BaseModel):
    """Word list given as literal text"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[SourceKind.PASTED] = SourceKind.PASTED
    key: str = "pasted"
    text: str


class CustomSource(BaseModel):
    """User-configured source: pasted text wins over the URL when both are set"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal[SourceKind.CUSTOM] = SourceKind.CUSTOM
    key: str = "custom"
    url: str | None = None
    pasted: str | None = None


type WordSource = BuiltinSource | UrlSource | PastedSource | CustomSource


class CustomWordlist(BaseModel):
    """An already-loaded word list that is scanned without a load step"""

    model_config = ConfigDict(frozen=True)

    name: str
    words: list[str] = Field(default_factory=list)
    url: str | None = Field(default=None, description="Where the list was downloaded from")


__all__ = [
    "BuiltinSource",
    "CustomSource",
    "CustomWordlist",
    "PastedSource",
    "UrlSource",
    "WordSource",
]
