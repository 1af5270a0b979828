"""Logging utilities for shopnet tools.

Provides color-coded diagnostics on stderr so stdout only ever carries results.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for message types
    BLUE = "\033[94m"      # Debug traces (network dump, thresholds)
    YELLOW = "\033[93m"    # Warnings (skipped roads, short input)
    RED = "\033[91m"       # Fatal errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


# Markers for message types (color-blind accessible)
MARKER_DEBUG = "[•]"
MARKER_WARNING = "[!]"
MARKER_ERROR = "[x]"
MARKER_SUCCESS = "[✓]"
MARKER_INFO = "[i]"


def colored(text: str, color: Color, bold: bool = False, enabled: bool = True) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold
        enabled: Caller-level switch; False always returns plain text

    Returns:
        Colorized text if enabled and SHOPNET_NO_COLOR is not set, otherwise plain text
    """
    if not enabled or os.getenv("SHOPNET_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def _emit(
    message: str,
    color: Color,
    stream: Optional[TextIO],
    bold: bool = False,
    use_color: bool = True,
) -> None:
    # Resolve stderr at call time so redirected/captured streams are honored.
    print(colored(message, color, bold=bold, enabled=use_color), file=stream or sys.stderr)


def log_debug(message: str, stream: Optional[TextIO] = None, use_color: bool = True) -> None:
    """Log a debug trace (blue)."""
    _emit(f"{MARKER_DEBUG} {message}", Color.BLUE, stream, use_color=use_color)


def log_warning(message: str, stream: Optional[TextIO] = None, use_color: bool = True) -> None:
    """Log a recoverable problem (yellow)."""
    _emit(f"{MARKER_WARNING} warning: {message}", Color.YELLOW, stream, use_color=use_color)


def log_error(message: str, stream: Optional[TextIO] = None, use_color: bool = True) -> None:
    """Log a fatal error (red)."""
    _emit(f"{MARKER_ERROR} {message}", Color.RED, stream, bold=True, use_color=use_color)


def log_success(message: str, stream: Optional[TextIO] = None, use_color: bool = True) -> None:
    """Log a success (green)."""
    _emit(f"{MARKER_SUCCESS} {message}", Color.GREEN, stream, use_color=use_color)


def log_info(message: str, stream: Optional[TextIO] = None, use_color: bool = True) -> None:
    """Log metadata/info (cyan)."""
    _emit(f"{MARKER_INFO} {message}", Color.CYAN, stream, use_color=use_color)


@dataclass
class Diagnostics:
    """Diagnostics sink handed to the ingestion layer and the CLI.

    Warnings are always written; traces only when ``enabled`` is set. The
    network core never receives one of these and stays silent.
    """

    enabled: bool = False
    stream: Optional[TextIO] = None
    color: bool = True

    def trace(self, message: str) -> None:
        if self.enabled:
            log_debug(message, self.stream, use_color=self.color)

    def warn(self, message: str) -> None:
        log_warning(message, self.stream, use_color=self.color)

    def error(self, message: str) -> None:
        log_error(message, self.stream, use_color=self.color)

    def info(self, message: str) -> None:
        if self.enabled:
            log_info(message, self.stream, use_color=self.color)

    def success(self, message: str) -> None:
        if self.enabled:
            log_success(message, self.stream, use_color=self.color)
