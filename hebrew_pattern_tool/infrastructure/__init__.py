# hebrew_pattern_tool/infrastructure/__init__.py

"""System infrastructure components for configuration, logging and persistence."""
