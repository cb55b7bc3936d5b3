"""Tests for the Keystroke and CompletedAttempt models."""

import uuid
from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from models.completed_attempt import CompletedAttempt, replay_keystrokes
from models.keystroke import BACKSPACE, Keystroke

START = datetime(2024, 3, 1, 12, 0, 0)


class TestKeystroke:
    """Keystroke validation and helpers."""

    def test_backspace_alias_normalized(self) -> None:
        """"Backspace" is stored as the control token."""
        keystroke = Keystroke(key="Backspace", timestamp=10)
        assert keystroke.key == BACKSPACE
        assert keystroke.is_backspace

    def test_printable_key_is_not_backspace(self) -> None:
        """Ordinary keys are not backspaces."""
        assert not Keystroke(key="b", timestamp=0).is_backspace

    def test_empty_key_rejected(self) -> None:
        """A keystroke needs a key."""
        with pytest.raises(ValidationError):
            Keystroke(key="", timestamp=0)

    def test_keystroke_is_frozen(self) -> None:
        """Keystrokes cannot be changed after creation."""
        keystroke = Keystroke(key="a", timestamp=0)
        with pytest.raises(ValidationError):
            keystroke.key = "b"

    def test_no_unicode_normalization(self) -> None:
        """Combining sequences are kept as typed."""
        decomposed = "e\u0301"
        assert Keystroke(key=decomposed, timestamp=0).key == decomposed

    def test_from_dict_accepts_camel_case_gap(self) -> None:
        """from_dict reads timeSinceLast."""
        keystroke = Keystroke.from_dict(data={"key": "a", "timestamp": 5, "timeSinceLast": 40})
        assert keystroke.time_since_last == 40
        assert Keystroke.from_dict(data=keystroke.to_dict()) == keystroke


class TestCompletedAttempt:
    """Attempt invariants and replay."""

    def test_defaults(self) -> None:
        """A bare attempt gets a UUID and empty text."""
        attempt = CompletedAttempt(start_time=START, end_time=START)
        uuid.UUID(attempt.attempt_id)
        assert attempt.target_text == ""
        assert attempt.keystrokes == []
        assert attempt.elapsed_minutes == 0.0

    def test_missing_times_rejected(self) -> None:
        """Both start and end times are required."""
        with pytest.raises(ValidationError):
            CompletedAttempt(end_time=START)
        with pytest.raises(ValidationError):
            CompletedAttempt(start_time=START)

    def test_end_before_start_rejected(self) -> None:
        """The end time may not precede the start."""
        with pytest.raises(ValidationError, match="end_time"):
            CompletedAttempt(start_time=START, end_time=START - timedelta(seconds=1))

    def test_unordered_keystrokes_rejected(self) -> None:
        """Keystrokes must be in timestamp order."""
        keystrokes = [
            Keystroke(key="a", timestamp=100),
            Keystroke(key="b", timestamp=50, time_since_last=-50),
        ]
        with pytest.raises(ValidationError, match="ordered"):
            CompletedAttempt(start_time=START, end_time=START, keystrokes=keystrokes)

    def test_equal_timestamps_allowed(self) -> None:
        """Keystrokes may share a timestamp."""
        keystrokes = [Keystroke(key="a", timestamp=100), Keystroke(key="b", timestamp=100)]
        attempt = CompletedAttempt(start_time=START, end_time=START, keystrokes=keystrokes)
        assert len(attempt.keystrokes) == 2

    def test_invalid_attempt_id_rejected(self) -> None:
        """attempt_id must be a UUID."""
        with pytest.raises(ValidationError):
            CompletedAttempt(attempt_id="not-a-uuid", start_time=START, end_time=START)

    def test_elapsed_minutes(self) -> None:
        """Elapsed time is reported in minutes."""
        attempt = CompletedAttempt(start_time=START, end_time=START + timedelta(seconds=90))
        assert attempt.elapsed_minutes == 1.5

    def test_replay_applies_backspace(self, keystroke_factory) -> None:
        """Replay removes characters on backspace and ignores a leading one."""
        keystrokes = keystroke_factory([BACKSPACE, "h", "x", BACKSPACE, "i"])
        assert replay_keystrokes(keystrokes) == "hi"

    def test_faithful_replay(self, keystroke_factory) -> None:
        """is_faithful_replay compares the input with the replayed log."""
        keystrokes = keystroke_factory(["h", "x", BACKSPACE, "i"])
        faithful = CompletedAttempt(
            start_time=START, end_time=START, user_input="hi", keystrokes=keystrokes
        )
        unfaithful = CompletedAttempt(
            start_time=START, end_time=START, user_input="hx", keystrokes=keystrokes
        )
        assert faithful.is_faithful_replay
        assert not unfaithful.is_faithful_replay

    def test_dict_round_trip(self, attempt_factory, keystroke_factory) -> None:
        """to_dict output loads back into an equal attempt."""
        attempt = attempt_factory(keystrokes=keystroke_factory("hello world"))
        assert CompletedAttempt.from_dict(attempt.to_dict()) == attempt

    def test_from_dict_wraps_validation_errors(self) -> None:
        """Bad data raises ValueError with a clear prefix."""
        with pytest.raises(ValueError, match="Invalid attempt data"):
            CompletedAttempt.from_dict({"start_time": START.isoformat()})
