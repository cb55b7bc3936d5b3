"""Keystroke collection that builds a CompletedAttempt from live key presses."""

from datetime import datetime, timedelta
from typing import List, Optional

from models.completed_attempt import CompletedAttempt
from models.keystroke import Keystroke


class KeystrokeCollection:
    """Collect the raw key log of one attempt and keep the reconciled input alongside it."""

    def __init__(self, target_text: str = "") -> None:
        """Initialize an empty collection for ``target_text``."""
        self.target_text = target_text
        self.raw_keystrokes: List[Keystroke] = []
        self._net_chars: List[str] = []

    def add_keystroke(self, *, key: str, timestamp: float) -> Keystroke:
        """Record one key press and return the stored keystroke.

        Args:
            key: The typed character or a backspace token
            timestamp: Absolute time of the press in milliseconds
        """
        if self.raw_keystrokes:
            time_since_last = timestamp - self.raw_keystrokes[-1].timestamp
        else:
            time_since_last = 0  # No previous keystroke
        keystroke = Keystroke(key=key, timestamp=timestamp, time_since_last=time_since_last)
        self.raw_keystrokes.append(keystroke)

        # Backspace removes last character, otherwise append
        if keystroke.is_backspace:
            if self._net_chars:
                self._net_chars.pop()
        else:
            self._net_chars.append(keystroke.key)
        return keystroke

    @property
    def user_input(self) -> str:
        """The input as it currently reads after backspaces."""
        return "".join(self._net_chars)

    def clear(self) -> None:
        """Forget all recorded keystrokes."""
        self.raw_keystrokes.clear()
        self._net_chars.clear()

    def get_raw_count(self) -> int:
        """Get the count of raw keystrokes, backspaces included."""
        return len(self.raw_keystrokes)

    def get_net_count(self) -> int:
        """Get the length of the reconciled input."""
        return len(self._net_chars)

    def to_attempt(
        self,
        *,
        start_time: datetime,
        end_time: Optional[datetime] = None,
        duration_target: Optional[int] = None,
    ) -> CompletedAttempt:
        """Freeze the collection into a CompletedAttempt.

        When ``end_time`` is omitted it is derived from the span between
        ``start_time`` and the last keystroke's timestamp relative to the first.
        """
        if end_time is None:
            span_ms = 0.0
            if self.raw_keystrokes:
                span_ms = self.raw_keystrokes[-1].timestamp - self.raw_keystrokes[0].timestamp
            end_time = start_time + timedelta(milliseconds=span_ms)
        return CompletedAttempt(
            start_time=start_time,
            end_time=end_time,
            target_text=self.target_text,
            user_input=self.user_input,
            keystrokes=list(self.raw_keystrokes),
            duration_target=duration_target,
        )
