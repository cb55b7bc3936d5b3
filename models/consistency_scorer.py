"""Typing rhythm consistency scoring.

Inter-keystroke intervals are split into three magnitude bands:

    rhythm      interval <= 400 ms
    hesitation  400 ms < interval <= 2000 ms
    long pause  interval > 2000 ms

The rhythm band gets a Tukey-trimmed coefficient-of-variation score with
exponential decay, ``100 * exp(-2 * cv)``. The other two bands subtract
penalties proportional to their share of all intervals. The final score is
clamped to [0, 100] and rounded to 2 decimals.
"""

from __future__ import annotations

import logging
import math
import statistics
from dataclasses import dataclass, field
from typing import List, Sequence

from models.keystroke import Keystroke
from models.statistics_report import ConsistencyBreakdown

logger = logging.getLogger(__name__)

RHYTHM_MAX_MS = 400
HESITATION_MAX_MS = 2000

MIN_KEYSTROKES = 5
MIN_RHYTHM_SAMPLES = 3
MIN_SAMPLES_FOR_TRIM = 5
SPARSE_RHYTHM_SCORE = 85.0

TUKEY_K = 1.5
HESITATION_PENALTY_CAP = 40.0
PAUSE_PENALTY_CAP = 20.0


@dataclass
class IntervalBuckets:
    """Positive inter-keystroke intervals split by magnitude band."""

    rhythm: List[float] = field(default_factory=list)
    hesitation: List[float] = field(default_factory=list)
    long_pause: List[float] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.rhythm) + len(self.hesitation) + len(self.long_pause)


class ConsistencyScorer:
    """Score how even a typist's rhythm was over one attempt (100 = perfectly even)."""

    @staticmethod
    def classify_intervals(keystrokes: Sequence[Keystroke]) -> IntervalBuckets:
        """Bucket the positive ``time_since_last`` values of ``keystrokes``.

        Zero and negative gaps (the first keystroke, simultaneous events) are
        dropped as noise.
        """
        buckets = IntervalBuckets()
        for keystroke in keystrokes:
            interval = keystroke.time_since_last
            if interval <= 0:
                continue
            if interval <= RHYTHM_MAX_MS:
                buckets.rhythm.append(interval)
            elif interval <= HESITATION_MAX_MS:
                buckets.hesitation.append(interval)
            else:
                buckets.long_pause.append(interval)
        return buckets

    @staticmethod
    def trim_outliers(intervals: Sequence[float]) -> List[float]:
        """Drop values outside the Tukey fences of ``intervals``.

        Quartiles are taken by index, ``sorted[floor(n * 0.25)]`` and
        ``sorted[floor(n * 0.75)]``. Trimming only happens with at least 5
        samples and a positive IQR, and is undone when it would keep fewer
        than half of the samples.

        Returns:
            The sorted, possibly trimmed, intervals.
        """
        values = sorted(intervals)
        n = len(values)
        if n < MIN_SAMPLES_FOR_TRIM:
            return values

        q1 = values[math.floor(n * 0.25)]
        q3 = values[math.floor(n * 0.75)]
        iqr = q3 - q1
        if iqr <= 0:
            return values

        lower = q1 - TUKEY_K * iqr
        upper = q3 + TUKEY_K * iqr
        filtered = [v for v in values if lower <= v <= upper]
        if len(filtered) < n / 2:
            return values
        return filtered

    @classmethod
    def rhythm_score(cls, rhythm_intervals: Sequence[float]) -> float:
        """Score the rhythm band by its coefficient of variation."""
        if len(rhythm_intervals) < MIN_RHYTHM_SAMPLES:
            return SPARSE_RHYTHM_SCORE

        values = cls.trim_outliers(rhythm_intervals)
        mean = statistics.fmean(values)
        stddev = math.sqrt(statistics.pvariance(values, mu=mean))
        cv = stddev / mean if mean != 0 else 0.0
        return max(0.0, 100.0 * math.exp(-2.0 * cv))

    @staticmethod
    def hesitation_penalty(hesitation_count: int, interval_count: int) -> float:
        if interval_count <= 0:
            return 0.0
        ratio = hesitation_count / interval_count
        return min(HESITATION_PENALTY_CAP, ratio * 30 + math.sqrt(ratio) * 15)

    @staticmethod
    def pause_penalty(long_pause_count: int, interval_count: int) -> float:
        if interval_count <= 0:
            return 0.0
        ratio = long_pause_count / interval_count
        return min(PAUSE_PENALTY_CAP, ratio * 15)

    @classmethod
    def analyze(cls, keystrokes: Sequence[Keystroke]) -> ConsistencyBreakdown:
        """Compute the consistency score together with its intermediate values.

        Fewer than 5 keystrokes is not enough data to judge and scores 100.
        """
        if len(keystrokes) < MIN_KEYSTROKES:
            return ConsistencyBreakdown()

        buckets = cls.classify_intervals(keystrokes)
        total = buckets.total
        rhythm = cls.rhythm_score(buckets.rhythm)
        hesitation = cls.hesitation_penalty(len(buckets.hesitation), total)
        pause = cls.pause_penalty(len(buckets.long_pause), total)
        score = round(max(0.0, rhythm - hesitation - pause), 2)

        logger.debug(
            "Consistency: %d rhythm, %d hesitation, %d long pause intervals -> %.2f",
            len(buckets.rhythm),
            len(buckets.hesitation),
            len(buckets.long_pause),
            score,
        )

        return ConsistencyBreakdown(
            rhythm_count=len(buckets.rhythm),
            hesitation_count=len(buckets.hesitation),
            long_pause_count=len(buckets.long_pause),
            rhythm_score=rhythm,
            hesitation_penalty=hesitation,
            pause_penalty=pause,
            score=score,
        )

    @classmethod
    def score(cls, keystrokes: Sequence[Keystroke]) -> float:
        """Return only the final 0-100 consistency score."""
        return cls.analyze(keystrokes).score
