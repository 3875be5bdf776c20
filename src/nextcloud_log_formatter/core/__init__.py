"""Decode, format and route JSON-lines log records."""

from __future__ import annotations

from .decoder import decode_line
from .errors import LogFormatterError, RecordDecodeError, RecordFormatError
from .format_service import FormatResult, FormatRun, format_log_file, process_lines, read_lines
from .formatter import (
    CANONICAL_FIELDS,
    LEGACY_FIELDS,
    FieldSpec,
    format_record,
    is_filtered,
    or_unknown,
    render_data,
    severity_label,
)
from .models import ExceptionInfo, FormattedBlock, LineDiagnostic, LogLevel, LogRecord
from .output import OutputConfig, OutputPaths, output_paths, write_blocks

__all__ = [
    "CANONICAL_FIELDS",
    "ExceptionInfo",
    "FieldSpec",
    "FormatResult",
    "FormatRun",
    "FormattedBlock",
    "LEGACY_FIELDS",
    "LineDiagnostic",
    "LogFormatterError",
    "LogLevel",
    "LogRecord",
    "OutputConfig",
    "OutputPaths",
    "RecordDecodeError",
    "RecordFormatError",
    "decode_line",
    "format_log_file",
    "format_record",
    "is_filtered",
    "or_unknown",
    "output_paths",
    "process_lines",
    "read_lines",
    "render_data",
    "severity_label",
    "write_blocks",
]
