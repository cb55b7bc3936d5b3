"""Group alignment errors into per-character error patterns."""

from __future__ import annotations

from typing import Dict, List, Sequence

from models.alignment import AlignmentError, AlignmentErrorKind
from models.statistics_report import ErrorPattern

MISSING_KEY = "_MISSING_"
DELETED_MARKER = "_DELETED_"
DEFAULT_MAX_PATTERNS = 10


class _PatternAccumulator:
    """Running totals for one expected character."""

    def __init__(self, kind: AlignmentErrorKind) -> None:
        self.frequency = 0
        self.positions: List[int] = []
        self.mistakes: Dict[str, None] = {}
        self.kind = kind

    def add(self, error: AlignmentError) -> None:
        self.frequency += 1
        self.positions.append(error.position)
        actual = error.actual_char if error.actual_char is not None else DELETED_MARKER
        self.mistakes.setdefault(actual, None)
        # Last error wins; mixed kinds are not reported.
        self.kind = error.kind


class ErrorPatternAggregator:
    """Rank the characters a typist most often gets wrong."""

    def __init__(self, max_patterns: int = DEFAULT_MAX_PATTERNS) -> None:
        self.max_patterns = max_patterns

    def aggregate(self, errors: Sequence[AlignmentError]) -> List[ErrorPattern]:
        """Group ``errors`` by expected character and rank them by frequency.

        Insertions have no expected character and are grouped under one
        pattern whose ``character`` is the empty string. Deletions show up in
        ``common_mistakes`` as ``"_DELETED_"``. Ties keep first-seen order.

        Args:
            errors: Alignment errors in the order StringAligner produced them.

        Returns:
            At most ``max_patterns`` patterns, most frequent first.
        """
        grouped: Dict[str, _PatternAccumulator] = {}
        for error in errors:
            key = error.expected_char if error.expected_char is not None else MISSING_KEY
            accumulator = grouped.get(key)
            if accumulator is None:
                accumulator = grouped[key] = _PatternAccumulator(error.kind)
            accumulator.add(error)

        patterns = [
            ErrorPattern(
                character="" if key == MISSING_KEY else key,
                frequency=acc.frequency,
                positions=acc.positions,
                common_mistakes=list(acc.mistakes),
                kind=acc.kind,
            )
            for key, acc in grouped.items()
        ]
        patterns.sort(key=lambda pattern: pattern.frequency, reverse=True)
        return patterns[: self.max_patterns]
