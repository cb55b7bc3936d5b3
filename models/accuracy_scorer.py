"""Accuracy scoring for typing attempts.

Two deliberately different views are computed here:

- keypress accuracy replays the raw keystroke log against a virtual cursor,
  so a mistake counts even after it was corrected with backspace;
- character stats compare the final reconciled input to the target
  position by position.

They only agree when the user never corrected anything.
"""

from __future__ import annotations

from typing import Sequence

from models.keystroke import Keystroke
from models.statistics_report import CharacterStats, KeypressAccuracy


class AccuracyScorer:
    """Stateless accuracy calculations."""

    @staticmethod
    def analyze_keypress_accuracy(
        keystrokes: Sequence[Keystroke], target_text: str
    ) -> KeypressAccuracy:
        """Replay ``keystrokes`` against ``target_text`` and score each key press.

        Backspace moves the cursor back one position (never below 0) and is
        not counted as a keypress. Every other key is correct when it equals
        the target character under the cursor; keys past the end of the
        target are always incorrect.

        Returns:
            KeypressAccuracy with accuracy 100 when there were no keypresses.
        """
        position = 0
        total_keypresses = 0
        correct_keypresses = 0

        for keystroke in keystrokes:
            if keystroke.is_backspace:
                if position > 0:
                    position -= 1
                continue

            total_keypresses += 1
            if position < len(target_text) and keystroke.key == target_text[position]:
                correct_keypresses += 1
            position += 1

        if total_keypresses > 0:
            accuracy = correct_keypresses / total_keypresses * 100
        else:
            accuracy = 100.0

        return KeypressAccuracy(
            total_keypresses=total_keypresses,
            correct_keypresses=correct_keypresses,
            accuracy_percent=accuracy,
        )

    @staticmethod
    def calculate_character_stats(target_text: str, user_input: str) -> CharacterStats:
        """Classify final characters as correct, incorrect, extra or missed."""
        min_length = min(len(target_text), len(user_input))
        correct = sum(1 for i in range(min_length) if target_text[i] == user_input[i])

        return CharacterStats(
            correct=correct,
            incorrect=min_length - correct,
            extra=max(0, len(user_input) - len(target_text)),
            missed=max(0, len(target_text) - len(user_input)),
        )
