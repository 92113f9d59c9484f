"""
sitesync.core - Foundation layer for the sitesync CLI.

Exports logging, command execution and timing helpers.
"""

from sitesync.core.utils import (
    # Logging
    log,
    Logger,
    # Runtime utilities
    format_cmd,
    run_streaming,
)
from sitesync.core.timing import (
    Clock,
    Stopwatch,
    format_duration,
)

__all__ = [
    # Logging
    "log",
    "Logger",
    # Runtime utilities
    "format_cmd",
    "run_streaming",
    # Timing
    "Clock",
    "Stopwatch",
    "format_duration",
]
