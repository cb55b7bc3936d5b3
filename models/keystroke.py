"""Keystroke model for the raw key log of a typing attempt."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Reserved control token for a backspace press. Capture layers that report
# the key name instead of the control character are normalised to it.
BACKSPACE = "\b"
BACKSPACE_ALIASES = ("Backspace",)


def is_backspace_key(key: str) -> bool:
    """Return True when ``key`` is the backspace control token or an alias of it."""
    return key == BACKSPACE or key in BACKSPACE_ALIASES


class Keystroke(BaseModel):
    """Pydantic model for one recorded key press.

    Keystrokes are immutable once recorded. Keys are compared by exact value,
    so no Unicode normalisation is applied here.
    """

    key: str = Field(..., min_length=1, description="Typed character or the backspace token")
    timestamp: float = Field(..., description="Absolute time of the key press in milliseconds")
    time_since_last: float = Field(
        default=0, description="Milliseconds since the previous keystroke (0 for the first)"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("key", mode="before")
    @classmethod
    def _normalize_backspace(cls, v: object) -> object:
        """Map backspace aliases onto the reserved control token."""
        if isinstance(v, str) and is_backspace_key(v):
            return BACKSPACE
        return v

    @property
    def is_backspace(self) -> bool:
        return self.key == BACKSPACE

    @classmethod
    def from_dict(cls, *, data: Dict[str, Any]) -> "Keystroke":
        """Create a Keystroke from a dict, accepting the camelCase capture keys too."""
        time_since_last = data.get("time_since_last", data.get("timeSinceLast", 0))
        if time_since_last is None:
            time_since_last = 0
        return cls(
            key=data.get("key", ""),
            timestamp=data.get("timestamp"),
            time_since_last=time_since_last,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the keystroke to a plain dictionary."""
        return {
            "key": self.key,
            "timestamp": self.timestamp,
            "time_since_last": self.time_since_last,
        }
