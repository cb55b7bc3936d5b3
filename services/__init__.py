"""Service initialization module.

Factory helpers to create and wire services with their dependencies.
"""

from __future__ import annotations

from typing import Optional

from helpers.debug_util import DebugUtil
from models.analysis_settings import AnalysisSettings
from services.session_analyzer import SessionAnalyzer


def init_services(debug_mode: Optional[str] = None) -> SessionAnalyzer:
    """Create a SessionAnalyzer configured from TYPING_ANALYZER_* environment variables.

    Example:
        analyzer = init_services()
        report = analyzer.analyze(attempt)
    """
    settings = AnalysisSettings.from_env()
    return SessionAnalyzer(settings=settings, debug_util=DebugUtil(mode=debug_mode))
