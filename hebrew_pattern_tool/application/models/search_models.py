# hebrew_pattern_tool/application/models/search_models.py

"""Pydantic models for search options and results"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from hebrew_pattern_tool.core.domain.enums import LoadStatus
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.infrastructure.config import get_config


class SearchOptions(BaseModel):
    """Options recognized by the loader and the search service"""

    model_config = ConfigDict(frozen=True)

    strip_diacritics: bool = Field(True, description="Strip combining marks before matching")
    dedupe: bool = Field(True, description="Remove repeated matches, keeping the first")
    sort_results: bool = Field(True, description="Apply locale-aware ordering to matches")
    whole_word: bool = Field(True, description="Anchor the template at both ends")

    @classmethod
    def from_config(cls, config: ConfigLoader | None = None, **overrides: bool) -> "SearchOptions":
        """Build options from the configured search defaults

        Args:
            config: Configuration loader, None for the default one
            **overrides: Option values that replace the configured defaults

        Returns:
            SearchOptions instance
        """
        search = (config or get_config()).search
        values = {
            "strip_diacritics": search.strip_diacritics,
            "dedupe": search.dedupe,
            "sort_results": search.sort_results,
            "whole_word": search.whole_word,
        }
        values.update(overrides)
        return cls(**values)


class SourceStatusRecord(BaseModel):
    """Load outcome of one named source"""

    model_config = ConfigDict(frozen=True)

    key: str
    status: LoadStatus
    count: int = Field(0, ge=0, description="Words loaded from the source")
    error: str | None = Field(None, description="Failure message when status is error")


class SearchResult(BaseModel):
    """Outcome of one search run; built fresh per run and never mutated"""

    model_config = ConfigDict(frozen=True)

    matches: tuple[str, ...] = ()
    total_loaded: int = Field(0, ge=0, description="Words loaded across all sources")
    total_matched: int = Field(0, ge=0, description="Matches after optional dedupe")
    source_statuses: dict[str, SourceStatusRecord] = Field(default_factory=dict)
    elapsed_seconds: float = Field(0.0, ge=0.0)

    @property
    def failed_sources(self) -> list[str]:
        """Keys of sources that failed to load"""
        return [k for k, v in self.source_statuses.items() if v.status is LoadStatus.ERROR]
