# hebrew_pattern_tool/infrastructure/config/__init__.py

"""Configuration infrastructure for the Hebrew pattern tool.

This module manages configuration loading, validation, and models.
"""

# Local imports
from hebrew_pattern_tool.infrastructure.config._loader import ConfigLoader
from hebrew_pattern_tool.infrastructure.config._loader import get_config
from hebrew_pattern_tool.infrastructure.config._models import AppConfig
from hebrew_pattern_tool.infrastructure.config._models import SearchConfig
from hebrew_pattern_tool.infrastructure.config._sources import SourcesConfig
from hebrew_pattern_tool.infrastructure.config._sources import is_url

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "SearchConfig",
    "SourcesConfig",
    "get_config",
    "is_url",
]
