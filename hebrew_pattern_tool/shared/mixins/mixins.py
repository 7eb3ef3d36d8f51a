# hebrew_pattern_tool/shared/mixins/mixins.py

"""Common mixins for reducing code duplication across classes

Current mixins:
- ConfigurableMixin: standardized config access for the scanner, the word
  list loader and the search service
- ChunkedMixin: chunk size resolution for components that work in
  cooperative steps
"""

# Local imports
from hebrew_pattern_tool.infrastructure.config import ConfigLoader
from hebrew_pattern_tool.infrastructure.config import get_config


class ConfigurableMixin:
    """Mixin for classes that need configuration access"""

    def _init_config(self, config: ConfigLoader | None = None) -> ConfigLoader:
        """Initialize configuration, using default if not provided

        Args:
            config: Optional ConfigLoader instance

        Returns:
            ConfigLoader instance (provided or default)
        """
        if config is None:
            config = get_config()
        return config


class ChunkedMixin(ConfigurableMixin):
    """Mixin for components that process words in fixed-size chunks"""

    def _init_chunk_size(self, chunk_size: int | None, config: ConfigLoader) -> int:
        """Resolve the chunk size, falling back to the configured default

        Args:
            chunk_size: Explicit chunk size or None
            config: Configuration to read the default from

        Returns:
            Positive chunk size

        Raises:
            ValueError: If an explicit chunk size is not positive
        """
        if chunk_size is None:
            return config.search.chunk_size
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        return chunk_size
