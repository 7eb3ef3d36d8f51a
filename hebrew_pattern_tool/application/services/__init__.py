# hebrew_pattern_tool/application/services/__init__.py

"""Application services orchestrating the search core"""

# Local imports
from hebrew_pattern_tool.application.services._search_service import SearchService
from hebrew_pattern_tool.application.services._search_service import (
    validate_search_request,
)

__all__ = ["SearchService", "validate_search_request"]
