"""Helper utilities for the typing session analyzer.

This package contains small cross-cutting utilities used by the models and
services packages.
"""

from .debug_util import DebugUtil  # noqa: F401
