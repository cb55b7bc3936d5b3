"""Pytest configuration for the test suite.

Factories for keystroke logs and completed attempts shared by the model and
service tests.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Union

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from helpers.debug_util import DebugUtil
from models.completed_attempt import CompletedAttempt
from models.keystroke import BACKSPACE, Keystroke

BASE_TIME = datetime(2024, 1, 15, 9, 30, 0)

KeystrokeFactory = Callable[..., List[Keystroke]]
AttemptFactory = Callable[..., CompletedAttempt]


def build_keystrokes(
    keys: Iterable[str],
    gaps: Union[float, Sequence[float]] = 100,
    start_ms: float = 0,
) -> List[Keystroke]:
    """Build a keystroke log for ``keys``.

    ``gaps`` is either one gap in ms used between every pair of keys, or one
    gap per key after the first.
    """
    keys = list(keys)
    if isinstance(gaps, (int, float)):
        gap_list = [float(gaps)] * max(0, len(keys) - 1)
    else:
        gap_list = [float(g) for g in gaps]
    assert len(gap_list) >= len(keys) - 1, "need one gap per keystroke after the first"

    keystrokes: List[Keystroke] = []
    timestamp = float(start_ms)
    for index, key in enumerate(keys):
        since_last = 0.0 if index == 0 else gap_list[index - 1]
        timestamp += since_last
        keystrokes.append(Keystroke(key=key, timestamp=timestamp, time_since_last=since_last))
    return keystrokes


@pytest.fixture
def keystroke_factory() -> KeystrokeFactory:
    """Return the keystroke log builder."""
    return build_keystrokes


@pytest.fixture
def attempt_factory() -> AttemptFactory:
    """Return a builder for CompletedAttempt values starting at a fixed time."""

    def _make(
        target_text: str = "hello world",
        user_input: Optional[str] = None,
        keystrokes: Optional[List[Keystroke]] = None,
        elapsed_seconds: float = 60.0,
    ) -> CompletedAttempt:
        if user_input is None:
            user_input = target_text
        return CompletedAttempt(
            start_time=BASE_TIME,
            end_time=BASE_TIME + timedelta(seconds=elapsed_seconds),
            target_text=target_text,
            user_input=user_input,
            keystrokes=keystrokes if keystrokes is not None else [],
            duration_target=60,
        )

    return _make


@pytest.fixture
def backspace() -> str:
    return BACKSPACE


@pytest.fixture
def quiet_debug_util() -> DebugUtil:
    """A DebugUtil pinned to quiet mode regardless of the environment."""
    return DebugUtil(mode="quiet")
