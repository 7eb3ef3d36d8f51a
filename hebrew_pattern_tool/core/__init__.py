# hebrew_pattern_tool/core/__init__.py

"""Core domain and type definitions"""
