"""Debug utilities for controlling debug output of the analysis engine.

Debug traces either go to the logging system (quiet mode) or straight to
stdout (loud mode), selected by the TYPING_ANALYZER_DEBUG_MODE variable.
"""

import logging
import os
from typing import Optional

DEBUG_MODE_ENV_VAR = "TYPING_ANALYZER_DEBUG_MODE"
DEBUG_MODES = ("quiet", "loud")


class DebugUtil:
    """Manage debug output based on debug mode setting.

    Supports two modes:
    - "quiet": Debug messages are logged only
    - "loud": Debug messages are printed to stdout
    """

    def __init__(self, mode: Optional[str] = None) -> None:
        """Initialize the debug mode.

        Args:
            mode: Explicit mode. When omitted the TYPING_ANALYZER_DEBUG_MODE
                environment variable is read. Unknown values fall back to "quiet".
        """
        if mode is None:
            mode = os.environ.get(DEBUG_MODE_ENV_VAR, "quiet")
        self._mode = self._coerce_mode(mode)

        self._logger = logging.getLogger(self.__class__.__name__)
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)

    @staticmethod
    def _coerce_mode(mode: str) -> str:
        mode = mode.lower()
        return mode if mode in DEBUG_MODES else "quiet"

    def debug_mode(self) -> str:
        """Get the current debug mode."""
        return self._mode

    def debugMessage(self, *args: object) -> None:
        """Output a debug message based on the current debug mode.

        In "quiet" mode the arguments are joined and logged at DEBUG level.
        In "loud" mode they are printed to stdout with a [DEBUG] prefix.
        """
        if self._mode == "loud":
            print("[DEBUG]", *args)
        else:
            message = " ".join(str(arg) for arg in args)
            if message:
                self._logger.debug(message)
