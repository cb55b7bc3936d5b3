"""Tests for analyzer configuration."""

import pytest
from pydantic import ValidationError

from models.analysis_settings import AnalysisSettings, OverflowPolicy


def test_defaults() -> None:
    """Default settings."""
    settings = AnalysisSettings()
    assert settings.min_elapsed_minutes == 0.01
    assert settings.max_text_length == 10_000
    assert settings.overflow_policy == OverflowPolicy.REJECT
    assert settings.max_error_patterns == 10
    assert settings.strict_replay is False


def test_from_env_reads_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """TYPING_ANALYZER_* variables override the defaults."""
    monkeypatch.setenv("TYPING_ANALYZER_MAX_TEXT_LENGTH", "500")
    monkeypatch.setenv("TYPING_ANALYZER_OVERFLOW_POLICY", "truncate")
    monkeypatch.setenv("TYPING_ANALYZER_STRICT_REPLAY", "true")
    monkeypatch.setenv("TYPING_ANALYZER_MIN_ELAPSED_MINUTES", "0.05")

    settings = AnalysisSettings.from_env()

    assert settings.max_text_length == 500
    assert settings.overflow_policy == OverflowPolicy.TRUNCATE
    assert settings.strict_replay is True
    assert settings.min_elapsed_minutes == 0.05
    assert settings.max_error_patterns == 10


def test_from_env_ignores_blank_values() -> None:
    """Blank values keep the default."""
    settings = AnalysisSettings.from_env({"TYPING_ANALYZER_MAX_ERROR_PATTERNS": "  "})
    assert settings.max_error_patterns == 10


def test_from_env_rejects_invalid_values() -> None:
    """Unparseable values raise ValidationError."""
    with pytest.raises(ValidationError):
        AnalysisSettings.from_env({"TYPING_ANALYZER_MAX_TEXT_LENGTH": "lots"})
    with pytest.raises(ValidationError):
        AnalysisSettings.from_env({"TYPING_ANALYZER_OVERFLOW_POLICY": "ignore"})


def test_non_positive_floor_rejected() -> None:
    """The elapsed-time floor must be positive."""
    with pytest.raises(ValidationError):
        AnalysisSettings(min_elapsed_minutes=0)
