"""Exceptions raised by the formatting pipeline."""

from __future__ import annotations


class LogFormatterError(Exception):
    """Base class for all package errors."""


class RecordDecodeError(LogFormatterError):
    """A line could not be decoded into a LogRecord."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class RecordFormatError(LogFormatterError):
    """A decoded record could not be rendered."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
