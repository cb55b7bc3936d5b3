"""Words-per-minute arithmetic."""

from __future__ import annotations

import math
from typing import Sequence

from models.keystroke import Keystroke

CHARS_PER_WORD = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


class SpeedCalculator:
    """Net and gross WPM from character or word counts.

    Callers clamp the elapsed time to a small positive floor first; a
    non-positive ``time_in_minutes`` still yields 0 rather than raising.
    """

    @staticmethod
    def calculate_net_wpm(correct_chars: int, time_in_minutes: float) -> int:
        """Net WPM from correctly typed characters, 5 characters per word."""
        if time_in_minutes <= 0:
            return 0
        return round_half_up(max(0, correct_chars) / CHARS_PER_WORD / time_in_minutes)

    @staticmethod
    def calculate_gross_wpm(total_typed_chars: int, time_in_minutes: float) -> int:
        """Gross WPM from every non-backspace keystroke, corrected ones included."""
        if time_in_minutes <= 0:
            return 0
        words = total_typed_chars / CHARS_PER_WORD
        return round_half_up(words / time_in_minutes)

    @staticmethod
    def calculate_word_wpm(correct_words: int, time_in_minutes: float) -> int:
        """Net WPM counted in whole correct words instead of 5-character units."""
        if time_in_minutes <= 0:
            return 0
        return round_half_up(correct_words / time_in_minutes)

    @staticmethod
    def count_typed_characters(keystrokes: Sequence[Keystroke]) -> int:
        """Count keystrokes that are not backspace."""
        return sum(1 for keystroke in keystrokes if not keystroke.is_backspace)

    @staticmethod
    def calculate_correct_words(target_text: str, user_input: str) -> int:
        """Count whitespace-delimited words that match the target word at the same index."""
        if not target_text.strip() or not user_input.strip():
            return 0

        target_words = target_text.split()
        user_words = user_input.split()
        return sum(
            1 for expected, typed in zip(target_words, user_words) if expected == typed
        )
