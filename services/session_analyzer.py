"""Session analysis: turn a completed typing attempt into a statistics report.

The analyzer is a single-shot pure computation. It holds only its settings
and debug helper, so one instance may analyze any number of attempts,
including concurrently.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from helpers.debug_util import DebugUtil
from models.accuracy_scorer import AccuracyScorer
from models.analysis_settings import AnalysisSettings, OverflowPolicy
from models.completed_attempt import CompletedAttempt, check_keystroke_order
from models.consistency_scorer import ConsistencyScorer
from models.error_pattern_aggregator import ErrorPatternAggregator
from models.speed_calculator import SpeedCalculator
from models.statistics_report import StatisticsReport
from models.string_aligner import StringAligner

logger = logging.getLogger(__name__)


class SessionAnalysisError(Exception):
    """Base class for failures raised while analyzing an attempt."""

    def __init__(self, message: str = "Session analysis failed") -> None:
        """Initialize the error with a helpful message."""
        self.message = message
        super().__init__(self.message)


class AttemptValidationError(SessionAnalysisError):
    """Raised when an attempt breaks the contract the session layer must uphold."""

    def __init__(self, message: str = "Attempt failed validation") -> None:
        super().__init__(message)


class AttemptTooLongError(SessionAnalysisError):
    """Raised when target or input text exceeds the configured length limit."""

    def __init__(self, message: str = "Attempt text is too long to analyze") -> None:
        super().__init__(message)


class SessionAnalyzer:
    """Orchestrates alignment, accuracy, speed, consistency and error patterns."""

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        debug_util: Optional[DebugUtil] = None,
    ) -> None:
        """Create an analyzer.

        Args:
            settings: Tunables; defaults to ``AnalysisSettings()``.
            debug_util: Debug output helper; defaults to one configured from the environment.
        """
        self.settings = settings or AnalysisSettings()
        self.debug_util = debug_util or DebugUtil()
        self.error_pattern_aggregator = ErrorPatternAggregator(
            max_patterns=self.settings.max_error_patterns
        )

    def analyze(self, attempt: CompletedAttempt) -> StatisticsReport:
        """Compute the full statistics report for ``attempt``.

        Either the whole report is produced or an exception is raised; no
        partial results are returned.

        Raises:
            AttemptValidationError: Missing or inverted start/end times, keystrokes
                out of time order, or (with ``strict_replay``) an input that is not
                the replay of the keystroke log.
            AttemptTooLongError: Text over ``max_text_length`` under the reject policy.
        """
        self._validate_attempt(attempt)
        target_text = attempt.target_text
        user_input = attempt.user_input
        keystrokes = attempt.keystrokes

        # Only the quadratic alignment is bounded; the linear scorers see the full text.
        aligned_target, aligned_input = self._bound_texts(attempt)
        error_count, alignment_errors = StringAligner.align(aligned_target, aligned_input)
        keypress = AccuracyScorer.analyze_keypress_accuracy(keystrokes, target_text)

        elapsed_seconds = (attempt.end_time - attempt.start_time).total_seconds()
        time_in_minutes = max(self.settings.min_elapsed_minutes, elapsed_seconds / 60.0)

        correct_chars = max(0, len(target_text) - error_count)
        total_chars = SpeedCalculator.count_typed_characters(keystrokes)
        wpm = SpeedCalculator.calculate_net_wpm(correct_chars, time_in_minutes)
        gross_wpm = SpeedCalculator.calculate_gross_wpm(total_chars, time_in_minutes)

        consistency_score = ConsistencyScorer.score(keystrokes)
        error_patterns = self.error_pattern_aggregator.aggregate(alignment_errors)
        character_stats = AccuracyScorer.calculate_character_stats(target_text, user_input)

        self.debug_util.debugMessage(
            f"Attempt {attempt.attempt_id}: {error_count} edits, {total_chars} typed chars "
            f"over {time_in_minutes:.3f} min, wpm={wpm} gross={gross_wpm}"
        )

        return StatisticsReport(
            wpm=wpm,
            gross_wpm=gross_wpm,
            accuracy_percent=round(keypress.accuracy_percent, 2),
            string_accuracy_percent=round(character_stats.accuracy_percent, 2),
            error_count=error_count,
            correct_chars=correct_chars,
            total_chars=total_chars,
            consistency_score=consistency_score,
            error_patterns=error_patterns,
            character_stats=character_stats,
        )

    def _validate_attempt(self, attempt: CompletedAttempt) -> None:
        """Fail fast on contract violations from the session layer."""
        problem: Optional[str] = None
        if getattr(attempt, "start_time", None) is None:
            problem = "attempt is missing start_time"
        elif getattr(attempt, "end_time", None) is None:
            problem = "attempt is missing end_time"
        elif attempt.end_time < attempt.start_time:
            problem = "attempt end_time is before start_time"
        else:
            try:
                check_keystroke_order(attempt.keystrokes)
            except ValueError as e:
                problem = str(e)

        if problem is None and self.settings.strict_replay and not attempt.is_faithful_replay:
            problem = "user_input does not match the replay of the keystroke log"

        if problem is not None:
            logger.error("Rejecting attempt %s: %s", getattr(attempt, "attempt_id", "?"), problem)
            raise AttemptValidationError(problem)

    def _bound_texts(self, attempt: CompletedAttempt) -> Tuple[str, str]:
        """Return target and input for alignment, bounded according to the overflow policy."""
        limit = self.settings.max_text_length
        target_text = attempt.target_text
        user_input = attempt.user_input
        if len(target_text) <= limit and len(user_input) <= limit:
            return target_text, user_input

        if self.settings.overflow_policy == OverflowPolicy.REJECT:
            message = (
                f"attempt text too long to analyze (target {len(target_text)}, "
                f"input {len(user_input)}, limit {limit})"
            )
            logger.error("Rejecting attempt %s: %s", attempt.attempt_id, message)
            raise AttemptTooLongError(message)

        logger.warning(
            "Truncating attempt %s to %d characters (target %d, input %d)",
            attempt.attempt_id,
            limit,
            len(target_text),
            len(user_input),
        )
        return target_text[:limit], user_input[:limit]


def analyze_attempt(
    attempt: CompletedAttempt, settings: Optional[AnalysisSettings] = None
) -> StatisticsReport:
    """Analyze one attempt with a fresh analyzer."""
    return SessionAnalyzer(settings=settings).analyze(attempt)
