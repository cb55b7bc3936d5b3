"""Result models returned by the analysis engine.

All models are frozen value objects. ``StatisticsReport.to_dict()`` emits the
camelCase keys the display layer consumes.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.alignment import AlignmentErrorKind

_REPORT_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class KeypressAccuracy(BaseModel):
    """Keypress-level accuracy from replaying the raw keystroke log."""

    total_keypresses: int = Field(default=0, ge=0)
    correct_keypresses: int = Field(default=0, ge=0)
    accuracy_percent: float = Field(default=100.0, ge=0, le=100)

    model_config = _REPORT_CONFIG


class CharacterStats(BaseModel):
    """Final-string character classes: target compared to the reconciled input."""

    correct: int = Field(default=0, ge=0)
    incorrect: int = Field(default=0, ge=0)
    extra: int = Field(default=0, ge=0)
    missed: int = Field(default=0, ge=0)

    model_config = _REPORT_CONFIG

    @property
    def total(self) -> int:
        return self.correct + self.incorrect + self.extra + self.missed

    @property
    def accuracy_percent(self) -> float:
        """String-level accuracy: correct / all classified positions, 100 when empty."""
        if self.total == 0:
            return 100.0
        return self.correct / self.total * 100


class ErrorPattern(BaseModel):
    """Aggregated mistakes sharing one expected character.

    ``character`` is the empty string for insertions, which have no expected
    character. ``kind`` is the kind of the last error recorded for the key.
    """

    character: str
    frequency: int = Field(..., ge=1)
    positions: List[int] = Field(default_factory=list)
    common_mistakes: List[str] = Field(default_factory=list)
    kind: AlignmentErrorKind

    model_config = _REPORT_CONFIG


class ConsistencyBreakdown(BaseModel):
    """Intermediate values behind a consistency score."""

    rhythm_count: int = 0
    hesitation_count: int = 0
    long_pause_count: int = 0
    rhythm_score: float = 100.0
    hesitation_penalty: float = 0.0
    pause_penalty: float = 0.0
    score: float = Field(default=100.0, ge=0, le=100)

    model_config = _REPORT_CONFIG

    @property
    def interval_count(self) -> int:
        return self.rhythm_count + self.hesitation_count + self.long_pause_count


class StatisticsReport(BaseModel):
    """Statistics for one completed typing attempt.

    Two accuracy views are kept apart: ``accuracy_percent`` is keypress-level
    (mistakes fixed with backspace still count against it) while
    ``string_accuracy_percent`` only looks at the final reconciled input.

    Likewise ``total_chars`` counts every non-backspace keystroke (the basis of
    gross WPM), so it can exceed the length of ``user_input`` when mistakes
    were typed and then erased.
    """

    wpm: int = Field(..., ge=0, description="Net words per minute")
    gross_wpm: int = Field(..., ge=0)
    accuracy_percent: float = Field(..., ge=0, le=100)
    string_accuracy_percent: float = Field(..., ge=0, le=100)
    error_count: int = Field(..., ge=0, description="Edit distance of target vs input")
    correct_chars: int = Field(
        ..., ge=0, description="Target length minus the edit distance, floored at 0"
    )
    total_chars: int = Field(
        ...,
        ge=0,
        description=(
            "Non-backspace keystrokes, including ones later corrected; this is the "
            "typing volume, not the length of the final input"
        ),
    )
    consistency_score: float = Field(..., ge=0, le=100)
    error_patterns: List[ErrorPattern] = Field(default_factory=list)
    character_stats: CharacterStats

    model_config = _REPORT_CONFIG

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys for the display layer."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "StatisticsReport":
        """Rebuild a report from either camelCase or snake_case keys."""
        return cls.model_validate(d)
