#!/usr/bin/env python3
"""
Hebrew Pattern Tool - Main Entry Point

This module allows the package to be run as a script:
    python -m hebrew_pattern_tool
"""

# Local imports
from hebrew_pattern_tool.adapters.cli.main import main

if __name__ == "__main__":
    main()
