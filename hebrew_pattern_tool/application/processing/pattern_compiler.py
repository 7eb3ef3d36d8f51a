# hebrew_pattern_tool/application/processing/pattern_compiler.py

"""Compilation of search templates into word matchers

Template language:
- ``?`` matches exactly one Hebrew character
- ``[...]`` is passed through as a regex character class, unescaped
- every other character is literal

The compiler never rejects a template. A class left open at the end of the
template is taken literally, brackets included.
"""

# Standard library imports
from logging import getLogger
from re import Pattern
from re import compile as re_compile
from re import escape

# Local imports
from hebrew_pattern_tool.core.domain.alphabet import ALPHABET_CLASS

logger = getLogger(__name__)

WILDCARD = "?"
CLASS_OPEN = "["
CLASS_CLOSE = "]"


def template_to_regex(template: str, whole_word: bool = True) -> str:
    """Translate a template into a regular expression string

    Args:
        template: Template in the restricted pattern language
        whole_word: Anchor the expression at both ends of the word

    Returns:
        Regular expression source
    """
    parts: list[str] = []
    in_class = False
    class_start = 0  # Position in parts of the last opening bracket
    class_template_start = 0  # Position in template of the same bracket

    for i, ch in enumerate(template):
        if ch == CLASS_OPEN and not in_class:
            in_class = True
            class_start = len(parts)
            class_template_start = i
            parts.append(ch)
        elif ch == CLASS_CLOSE and in_class:
            in_class = False
            parts.append(ch)
        elif in_class:
            parts.append(ch)
        elif ch == WILDCARD:
            parts.append(ALPHABET_CLASS)
        else:
            parts.append(escape(ch))

    if in_class:
        # Unterminated class: fall back to the literal text that was accumulated
        unterminated = template[class_template_start:]
        logger.debug(f"Unterminated character class {unterminated!r}, matching it literally")
        parts[class_start:] = [escape(unterminated)]

    body = "".join(parts)
    return f"^{body}$" if whole_word else body


class CompiledMatcher:
    """Stateless matcher compiled from a template, reusable across many words"""

    def __init__(self, template: str, whole_word: bool = True) -> None:
        """Compile template

        Args:
            template: Template in the restricted pattern language
            whole_word: Require the whole word to match instead of any substring

        Raises:
            re.error: If a bracket class produces an invalid expression
        """
        self.template = template
        self.whole_word = whole_word
        self.expression = template_to_regex(template, whole_word)
        self._pattern: Pattern[str] = re_compile(self.expression)
        self._match = self._pattern.fullmatch if whole_word else self._pattern.search

    def matches(self, word: str) -> bool:
        """Return True if word matches the compiled template

        In whole-word mode the word must be consumed entirely, so a trailing
        newline is not absorbed by the end anchor.
        """
        return self._match(word) is not None

    __call__ = matches

    def __repr__(self) -> str:
        return f"CompiledMatcher({self.template!r}, whole_word={self.whole_word})"


def compile_template(template: str, whole_word: bool = True) -> CompiledMatcher:
    """Compile a template into a reusable matcher"""
    return CompiledMatcher(template, whole_word)
