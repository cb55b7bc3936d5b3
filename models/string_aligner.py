"""Edit distance and character alignment between target text and typed input.

The distance is the classic Levenshtein dynamic program. The aligned error
list is NOT a backtrace of that table: it comes from a greedy two-cursor walk
that resynchronises on the nearest reoccurrence of the mismatched character.
The walk is cheaper and close to optimal for ordinary typing mistakes, but on
text with many repeated characters it can report a different (and sometimes
longer) edit sequence than the minimum. Error-pattern statistics are defined
relative to this walk, so it must stay as is.
"""

from __future__ import annotations

from typing import List, Tuple

from models.alignment import AlignmentError, AlignmentErrorKind


class StringAligner:
    """Stateless string alignment helpers."""

    @staticmethod
    def levenshtein_distance(target: str, user_input: str) -> int:
        """Return the Levenshtein distance between ``target`` and ``user_input``.

        The (len(target)+1) x (len(user_input)+1) table lives in one flat list
        indexed as ``row * width + col``. Characters compare by exact value, so
        case and accents count as distinct.
        """
        target_len = len(target)
        input_len = len(user_input)
        width = input_len + 1
        table = [0] * ((target_len + 1) * width)

        for i in range(target_len + 1):
            table[i * width] = i
        for j in range(width):
            table[j] = j

        for i in range(1, target_len + 1):
            row = i * width
            prev_row = row - width
            target_char = target[i - 1]
            for j in range(1, width):
                substitution_cost = 0 if target_char == user_input[j - 1] else 1
                table[row + j] = min(
                    table[prev_row + j] + 1,  # deletion
                    table[row + j - 1] + 1,  # insertion
                    table[prev_row + j - 1] + substitution_cost,  # substitution
                )

        return table[target_len * width + input_len]

    @staticmethod
    def find_aligned_errors(target: str, user_input: str) -> List[AlignmentError]:
        """Walk both strings left to right and report the edits between them.

        On a mismatch the walk looks ahead for the next occurrence of the
        target character in the input and of the input character in the
        target. The closer resynchronisation wins: skipping input characters
        is an insertion, skipping target characters is a deletion. Ties go to
        insertion. If neither character reappears the pair is a substitution.

        Args:
            target: The text the user was asked to type.
            user_input: The final reconciled text the user produced.

        Returns:
            Ordered list of alignment errors; empty for identical strings.
        """
        errors: List[AlignmentError] = []
        target_index = 0
        input_index = 0
        target_len = len(target)
        input_len = len(user_input)

        while target_index < target_len or input_index < input_len:
            if target_index >= target_len:
                errors.append(
                    AlignmentError(
                        actual_char=user_input[input_index],
                        position=target_index,
                        kind=AlignmentErrorKind.INSERTION,
                    )
                )
                input_index += 1
                continue

            if input_index >= input_len:
                errors.append(
                    AlignmentError(
                        expected_char=target[target_index],
                        position=target_index,
                        kind=AlignmentErrorKind.DELETION,
                    )
                )
                target_index += 1
                continue

            expected = target[target_index]
            actual = user_input[input_index]
            if expected == actual:
                target_index += 1
                input_index += 1
                continue

            next_target_in_input = user_input.find(expected, input_index + 1)
            next_input_in_target = target.find(actual, target_index + 1)

            if next_target_in_input != -1 and (
                next_input_in_target == -1
                or next_target_in_input - input_index <= next_input_in_target - target_index
            ):
                errors.append(
                    AlignmentError(
                        actual_char=actual,
                        position=target_index,
                        kind=AlignmentErrorKind.INSERTION,
                    )
                )
                input_index += 1
            elif next_input_in_target != -1:
                errors.append(
                    AlignmentError(
                        expected_char=expected,
                        position=target_index,
                        kind=AlignmentErrorKind.DELETION,
                    )
                )
                target_index += 1
            else:
                errors.append(
                    AlignmentError(
                        expected_char=expected,
                        actual_char=actual,
                        position=target_index,
                        kind=AlignmentErrorKind.SUBSTITUTION,
                    )
                )
                target_index += 1
                input_index += 1

        return errors

    @classmethod
    def align(cls, target: str, user_input: str) -> Tuple[int, List[AlignmentError]]:
        """Return the edit distance and the aligned error list in one call."""
        return (
            cls.levenshtein_distance(target, user_input),
            cls.find_aligned_errors(target, user_input),
        )
