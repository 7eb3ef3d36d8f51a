# hebrew_pattern_tool/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from hebrew_pattern_tool.infrastructure.config._models import AppConfig
from hebrew_pattern_tool.infrastructure.config._models import FetchConfig
from hebrew_pattern_tool.infrastructure.config._models import LoggingConfig
from hebrew_pattern_tool.infrastructure.config._models import OutputConfig
from hebrew_pattern_tool.infrastructure.config._models import SearchConfig
from hebrew_pattern_tool.infrastructure.config._sources import SourcesConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader giving typed access to each config section"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @property
    def config(self) -> dict[str, object]:
        """Full config as a plain dict"""
        return self._app_config.model_dump()

    @property
    def search(self) -> SearchConfig:
        """Search defaults"""
        return self._app_config.search

    @property
    def sources(self) -> SourcesConfig:
        """Built-in source registry"""
        return self._app_config.sources

    @property
    def fetch(self) -> FetchConfig:
        """HTTP fetch configuration"""
        return self._app_config.fetch

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging

    @property
    def output(self) -> OutputConfig:
        """Output configuration"""
        return self._app_config.output


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
