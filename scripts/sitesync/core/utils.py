"""
Shared utilities for the sitesync CLI.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Optional

# =============================================================================
# Logging
# =============================================================================


class Logger:
    """Simple colored logger with --no-color support."""

    COLORS = {
        "reset": "\033[0m",
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "magenta": "\033[95m",
        "cyan": "\033[96m",
        "bold": "\033[1m",
    }

    def __init__(self, use_color: Optional[bool] = None, verbose: bool = False):
        if use_color is None:
            self._use_color = sys.stdout.isatty()
        else:
            self._use_color = use_color
        self.verbose = verbose

    def set_color(self, use_color: bool) -> None:
        """Set whether to use color output."""
        self._use_color = use_color

    def set_verbose(self, verbose: bool) -> None:
        """Set whether debug messages are printed."""
        self.verbose = verbose

    def _color(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def header(self, message: str) -> None:
        """Print a section header."""
        print(f"\n{self._color('---', 'cyan')} {self._color(message, 'bold')} {self._color('---', 'cyan')}")

    def plain(self, message: str) -> None:
        """Print a message without indentation."""
        print(message)

    def info(self, message: str) -> None:
        """Print an info message."""
        print(f"  {message}")

    def success(self, message: str) -> None:
        """Print a success message."""
        print(f"  {self._color('[OK]', 'green')} {message}")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        print(f"  {self._color('[WARN]', 'yellow')} {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        print(f"  {self._color('[ERROR]', 'red')} {message}")

    def debug(self, message: str) -> None:
        if self.verbose:
            print(f"  {self._color('[DEBUG]', 'magenta')} {message}")

    def dry_run(self, message: str) -> None:
        print(f"  {self._color('[DRY-RUN]', 'blue')} {message}")

    def table_row(self, col1: str, col2: str, col1_width: int = 30) -> None:
        """Print a table row with two columns."""
        print(f"  {col1:<{col1_width}} {col2}")


# Global logger instance
log = Logger()


# =============================================================================
# Runtime Utilities
# =============================================================================


def format_cmd(cmd: list[str]) -> str:
    return " ".join(cmd)


def run_streaming(cmd: list[str], cwd: Path) -> int:
    """Run a command in cwd with inherited stdio and return its exit status.

    Output is not captured, so the child's logs reach the terminal live.
    Raises OSError when the executable cannot be started.
    """
    log.debug(f"Running: {format_cmd(cmd)} in {cwd}")

    # Flush our own buffered output so it lands before the child's
    sys.stdout.flush()
    result = subprocess.run(cmd, cwd=cwd, check=False)
    return result.returncode
