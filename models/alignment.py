"""Alignment error model produced when reconciling target text against typed input."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AlignmentErrorKind(str, Enum):
    """Kinds of single-character edits between target and input."""

    SUBSTITUTION = "substitution"  # expected and actual both present
    DELETION = "deletion"  # expected present, nothing typed for it
    INSERTION = "insertion"  # typed character with no expected counterpart


class AlignmentError(BaseModel):
    """One discrepancy between the target text and the typed input."""

    expected_char: Optional[str] = Field(default=None, description="Target character, if any")
    actual_char: Optional[str] = Field(default=None, description="Typed character, if any")
    position: int = Field(..., ge=0, description="Index into the target text")
    kind: AlignmentErrorKind

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def check_sides_match_kind(self) -> "AlignmentError":
        """Validate that the present characters agree with the error kind."""
        if self.kind == AlignmentErrorKind.SUBSTITUTION:
            if self.expected_char is None or self.actual_char is None:
                raise ValueError("substitution requires both expected_char and actual_char")
        elif self.kind == AlignmentErrorKind.DELETION:
            if self.expected_char is None or self.actual_char is not None:
                raise ValueError("deletion requires expected_char and no actual_char")
        elif self.expected_char is not None or self.actual_char is None:
            raise ValueError("insertion requires actual_char and no expected_char")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
