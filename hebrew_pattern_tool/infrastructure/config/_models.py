# hebrew_pattern_tool/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Local imports
from hebrew_pattern_tool.infrastructure.config._sources import SourcesConfig

logger = getLogger(__name__)


class SearchConfig(BaseModel):
    """Search defaults"""

    chunk_size: int = Field(10_000, gt=0, description="Words per cooperative scan step")
    strip_diacritics: bool = Field(True, description="Strip niqqud before matching")
    dedupe: bool = Field(True, description="Remove repeated matches")
    sort_results: bool = Field(True, description="Sort matches with the collation locale")
    whole_word: bool = Field(True, description="Anchor templates at both ends of the word")
    collation_locale: str | None = Field(
        None, description="Locale for sorting, None for the environment's locale"
    )


class FetchConfig(BaseModel):
    """HTTP fetch configuration

    No timeout is applied; a hung fetch holds its source.
    """

    user_agent: str = Field("hebrew-pattern-tool", description="User-Agent header")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class OutputConfig(BaseModel):
    """Output configuration"""

    filename: str = Field("matches.txt", description="Default export file name")

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Export file name must not be blank"""
        if not v.strip():
            raise ValueError("output filename must not be empty")
        return v


class AppConfig(BaseModel):
    """Root application configuration model"""

    search: SearchConfig = Field(default_factory=SearchConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try to find config.json in current directory
        if config_path is None:
            config_path = Path("config.json")
            if not config_path.exists():
                return cls()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = load(f)
                return cls.model_validate(data)
            except Exception as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
                return cls()

        logger.warning(f"Config file {config_path} not found. Using defaults.")
        return cls()
