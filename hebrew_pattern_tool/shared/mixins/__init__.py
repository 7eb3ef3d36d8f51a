# hebrew_pattern_tool/shared/mixins/__init__.py

"""Shared mixins for cross-cutting concerns"""

# Local imports
from hebrew_pattern_tool.shared.mixins.mixins import ChunkedMixin
from hebrew_pattern_tool.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ChunkedMixin", "ConfigurableMixin"]
