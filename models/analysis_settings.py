"""Configuration for the session analyzer.

Values come from keyword arguments or, through ``AnalysisSettings.from_env()``,
from TYPING_ANALYZER_* environment variables.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "TYPING_ANALYZER_"


class OverflowPolicy(str, Enum):
    """What to do with target or input text longer than ``max_text_length``."""

    REJECT = "reject"
    TRUNCATE = "truncate"


class AnalysisSettings(BaseModel):
    """Tunables for one SessionAnalyzer.

    Attributes:
        min_elapsed_minutes: Floor applied to the elapsed time before WPM is computed.
        max_text_length: Longest target or input the quadratic alignment will accept.
        overflow_policy: Reject over-long attempts or truncate them.
        max_error_patterns: How many ranked error patterns a report keeps.
        strict_replay: Reject attempts whose user_input is not the keystroke replay.
    """

    min_elapsed_minutes: float = Field(default=0.01, gt=0)
    max_text_length: int = Field(default=10_000, ge=1)
    overflow_policy: OverflowPolicy = OverflowPolicy.REJECT
    max_error_patterns: int = Field(default=10, ge=1)
    strict_replay: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AnalysisSettings":
        """Build settings from TYPING_ANALYZER_<FIELD> variables; unset fields keep defaults."""
        if environ is None:
            environ = os.environ
        values: Dict[str, Any] = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls.model_validate(values)
