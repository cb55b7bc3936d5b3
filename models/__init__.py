"""
Models package for the typing session analyzer.

This package contains the data models and the stateless analysis components.
"""

__all__ = [
    "AccuracyScorer",
    "AlignmentError",
    "CompletedAttempt",
    "ConsistencyScorer",
    "ErrorPatternAggregator",
    "Keystroke",
    "SpeedCalculator",
    "StatisticsReport",
    "StringAligner",
]

from models.accuracy_scorer import AccuracyScorer
from models.alignment import AlignmentError
from models.completed_attempt import CompletedAttempt
from models.consistency_scorer import ConsistencyScorer
from models.error_pattern_aggregator import ErrorPatternAggregator
from models.keystroke import Keystroke
from models.speed_calculator import SpeedCalculator
from models.statistics_report import StatisticsReport
from models.string_aligner import StringAligner
