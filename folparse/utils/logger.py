"""
Structured logging for the formula parser.

Provides configurable log levels (silent, normal, verbose, debug)
with consistent formatting for grammar compilation, accepted and
rejected inputs, and per-parse statistics.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Dict, TextIO


class LogLevel(Enum):
    """
    Logging levels for the parser.

    SILENT:  No output at all.
    NORMAL:  Rejected inputs and conversion failures only.
    VERBOSE: Grammar compilation and accepted inputs.
    DEBUG:   Per-parse token and tree statistics.
    """

    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class ParserLogger:
    """
    Structured logger for the formula parser.

    Output is filtered by the configured log level.

    Attributes:
        level: The minimum log level to display.
        stream: The output stream (defaults to stdout).
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        stream: TextIO = sys.stdout,
    ) -> None:
        self.level: LogLevel = level
        self.stream: TextIO = stream

    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log a debug message (only shown at DEBUG level).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.level.value >= LogLevel.DEBUG.value:
            self._write(f"[DEBUG] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log an info message (shown at VERBOSE and DEBUG levels).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.level.value >= LogLevel.VERBOSE.value:
            self._write(f"[INFO] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def input_accepted(self, text: str) -> None:
        """Log a successfully parsed input (shown at VERBOSE level and above)."""
        if self.level.value >= LogLevel.VERBOSE.value:
            self._write(f"ACCEPTED: {text}")

    def input_rejected(self, text: str, reason: str) -> None:
        """Log an input with no derivation (shown at NORMAL level and above)."""
        if self.level.value >= LogLevel.NORMAL.value:
            self._write(f"REJECTED: {text}")
            self._write(f"  reason: {reason}")

    def conversion_failed(self, text: str, reason: str) -> None:
        """Log a parse tree that could not be converted (NORMAL and above)."""
        if self.level.value >= LogLevel.NORMAL.value:
            self._write(f"CONVERSION FAILED: {text}")
            self._write(f"  reason: {reason}")

    def statistics(self, stats: Dict[str, Any]) -> None:
        """
        Log parse statistics (shown at DEBUG level).

        Args:
            stats: Dictionary of statistic names to values.
        """
        if self.level.value >= LogLevel.DEBUG.value:
            self._write("=== Parse Statistics ===")
            for key, value in stats.items():
                label = key.replace("_", " ").title()
                self._write(f"  {label}: {value}")

    def _write(self, message: str) -> None:
        """Write a line to the output stream."""
        self.stream.write(message + "\n")
