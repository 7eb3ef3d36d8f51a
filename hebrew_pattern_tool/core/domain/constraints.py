# hebrew_pattern_tool/core/domain/constraints.py

"""Letter constraint value object

A snapshot of the letter picker: letters every match must contain and
letters no match may contain. The search core only ever sees this immutable
snapshot, never the picker itself.
"""

# Standard library imports
from collections.abc import Mapping
from typing import Self

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

# Local imports
from hebrew_pattern_tool.core.domain.alphabet import is_alphabet_char
from hebrew_pattern_tool.core.domain.enums import LetterState


class LetterConstraintSet(BaseModel):
    """Required and forbidden letters used as a secondary match filter"""

    model_config = ConfigDict(frozen=True)

    required: frozenset[str] = Field(default_factory=frozenset)
    forbidden: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("required", "forbidden")
    @classmethod
    def validate_letters(cls, v: frozenset[str]) -> frozenset[str]:
        """Each entry must be a single alphabet character"""
        for letter in v:
            if not is_alphabet_char(letter):
                raise ValueError(f"{letter!r} is not a single Hebrew character")
        return v

    @model_validator(mode="after")
    def validate_disjoint(self) -> Self:
        """A letter cannot be both required and forbidden"""
        overlap = self.required & self.forbidden
        if overlap:
            raise ValueError(
                f"Letters both required and forbidden: {', '.join(sorted(overlap))}"
            )
        return self

    @property
    def is_empty(self) -> bool:
        """True when no letter is required or forbidden"""
        return not self.required and not self.forbidden

    @classmethod
    def from_letter_states(cls, states: Mapping[str, LetterState]) -> "LetterConstraintSet | None":
        """Build a constraint set from a letter picker's per-letter state

        A mapping holds one state per letter, so the last toggle of a letter
        always wins and the two sets come out disjoint.

        Args:
            states: Letter to picker state; letters without a state are absent

        Returns:
            LetterConstraintSet, or None when no letter is selected or deselected
        """
        required = frozenset(k for k, v in states.items() if v is LetterState.SELECTED)
        forbidden = frozenset(k for k, v in states.items() if v is LetterState.DESELECTED)
        constraints = cls(required=required, forbidden=forbidden)
        return None if constraints.is_empty else constraints
