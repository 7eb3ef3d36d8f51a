# hebrew_pattern_tool/application/processing/__init__.py

"""Pattern compilation, filtering, scanning and aggregation"""

# Local imports
from hebrew_pattern_tool.application.processing.aggregation import dedupe_words
from hebrew_pattern_tool.application.processing.aggregation import sort_words
from hebrew_pattern_tool.application.processing.batched_scanner import BatchedScanner
from hebrew_pattern_tool.application.processing.letter_filter import (
    passes_letter_constraints,
)
from hebrew_pattern_tool.application.processing.pattern_compiler import CompiledMatcher
from hebrew_pattern_tool.application.processing.pattern_compiler import compile_template
from hebrew_pattern_tool.application.processing.pattern_compiler import template_to_regex

__all__ = [
    "BatchedScanner",
    "CompiledMatcher",
    "compile_template",
    "dedupe_words",
    "passes_letter_constraints",
    "sort_words",
    "template_to_regex",
]
