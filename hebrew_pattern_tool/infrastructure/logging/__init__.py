# hebrew_pattern_tool/infrastructure/logging/__init__.py

"""Logging infrastructure for the Hebrew pattern tool.

This module provides centralized logging configuration, run summaries and
progress bars.
"""

# Local imports
from hebrew_pattern_tool.infrastructure.logging._progress import ProgressBarManager
from hebrew_pattern_tool.infrastructure.logging._setup import get_default_log_path
from hebrew_pattern_tool.infrastructure.logging._setup import log_run_summary
from hebrew_pattern_tool.infrastructure.logging._setup import set_up_logging

__all__ = ["ProgressBarManager", "get_default_log_path", "log_run_summary", "set_up_logging"]
