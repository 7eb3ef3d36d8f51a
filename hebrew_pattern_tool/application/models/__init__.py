# hebrew_pattern_tool/application/models/__init__.py

"""Application-level models for data transfer and orchestration"""

# Local imports
from hebrew_pattern_tool.application.models.search_models import SearchOptions
from hebrew_pattern_tool.application.models.search_models import SearchResult
from hebrew_pattern_tool.application.models.search_models import SourceStatusRecord

__all__ = ["SearchOptions", "SearchResult", "SourceStatusRecord"]
