# hebrew_pattern_tool/application/__init__.py

"""Application layer: processing, models and orchestration services"""
