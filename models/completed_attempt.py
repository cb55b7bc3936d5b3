"""Completed typing attempt handed from the session layer to the analyzer."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.keystroke import Keystroke


def replay_keystrokes(keystrokes: Sequence[Keystroke]) -> str:
    """Rebuild the reconciled input: keys are appended, backspace drops the last one."""
    chars: List[str] = []
    for keystroke in keystrokes:
        if keystroke.is_backspace:
            if chars:
                chars.pop()
        else:
            chars.append(keystroke.key)
    return "".join(chars)


def check_keystroke_order(keystrokes: Sequence[Keystroke]) -> None:
    """Raise ValueError when timestamps ever go backwards."""
    for index in range(1, len(keystrokes)):
        if keystrokes[index].timestamp < keystrokes[index - 1].timestamp:
            raise ValueError(
                f"keystrokes must be ordered by timestamp: keystroke {index} at "
                f"{keystrokes[index].timestamp} precedes {keystrokes[index - 1].timestamp}"
            )


class CompletedAttempt(BaseModel):
    """Pydantic model for a finished typing attempt.

    Created once by the session layer when an attempt ends and treated as
    frozen afterwards; the analyzer only reads it.
    """

    attempt_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    start_time: datetime
    end_time: datetime
    target_text: str = ""
    user_input: str = ""
    keystrokes: List[Keystroke] = Field(default_factory=list)
    duration_target: Optional[int] = Field(
        default=None, ge=0, description="Timer length in seconds for timed attempts"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("attempt_id")
    @classmethod
    def validate_uuid(cls, v: str) -> str:
        """Validate that the provided value is a valid UUID string."""
        uuid.UUID(v)
        return v

    @model_validator(mode="after")
    def check_times_and_order(self) -> "CompletedAttempt":
        """Validate cross-field constraints for timestamps and keystroke order."""
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        check_keystroke_order(self.keystrokes)
        return self

    @property
    def elapsed_minutes(self) -> float:
        """Wall-clock length of the attempt in minutes (unclamped)."""
        return (self.end_time - self.start_time).total_seconds() / 60.0

    def replay_keystrokes(self) -> str:
        return replay_keystrokes(self.keystrokes)

    @property
    def is_faithful_replay(self) -> bool:
        """True when ``user_input`` is exactly what the keystroke log produces."""
        return self.replay_keystrokes() == self.user_input

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the model to a plain dict using Pydantic v2 `model_dump()`."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CompletedAttempt":
        """Create a CompletedAttempt from a dict produced by ``to_dict``."""
        data = d.copy()
        data["keystrokes"] = [
            k if isinstance(k, Keystroke) else Keystroke.from_dict(data=k)
            for k in data.get("keystrokes", [])
        ]
        try:
            return cls.model_validate(data)
        except ValueError as e:
            raise ValueError(f"Invalid attempt data: {str(e)}") from e
