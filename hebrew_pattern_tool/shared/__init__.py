# hebrew_pattern_tool/shared/__init__.py

"""Shared utilities used across layers"""
