# hebrew_pattern_tool/adapters/cli/__init__.py

"""CLI adapter for the Hebrew pattern tool"""

# Local imports
from hebrew_pattern_tool.adapters.cli.main import main
from hebrew_pattern_tool.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "main"]
