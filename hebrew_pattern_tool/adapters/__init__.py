# hebrew_pattern_tool/adapters/__init__.py

"""Adapters exposing the search core to callers: the Python API and the CLI"""
