# hebrew_pattern_tool/core/types/__init__.py

"""Type definitions for the Hebrew pattern tool

Pure type aliases and protocols with no implementation logic.
"""

# Local imports
from hebrew_pattern_tool.core.types.aliases import ChunkProgressCallback
from hebrew_pattern_tool.core.types.aliases import SourceStatusCallback
from hebrew_pattern_tool.core.types.aliases import StatusMessageCallback
from hebrew_pattern_tool.core.types.aliases import Word
from hebrew_pattern_tool.core.types.protocols import TextFetcherProtocol

__all__ = [
    "ChunkProgressCallback",
    "SourceStatusCallback",
    "StatusMessageCallback",
    "TextFetcherProtocol",
    "Word",
]
