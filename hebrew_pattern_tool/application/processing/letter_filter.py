# hebrew_pattern_tool/application/processing/letter_filter.py

"""Required/forbidden letter filtering of candidate words"""

# Local imports
from hebrew_pattern_tool.core.domain.constraints import LetterConstraintSet


def passes_letter_constraints(word: str, constraints: LetterConstraintSet | None) -> bool:
    """Check a word against required and forbidden letters

    Args:
        word: Candidate word
        constraints: Letter constraints, or None for no filtering

    Returns:
        True if every required letter occurs in word and no forbidden one does
    """
    if constraints is None or constraints.is_empty:
        return True

    for letter in constraints.required:
        if letter not in word:
            return False

    for letter in constraints.forbidden:
        if letter in word:
            return False

    return True
