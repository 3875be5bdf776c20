"""Render decoded records into text blocks and route them by severity."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import RecordFormatError
from .models import (
    UNKNOWN_LABEL,
    UNKNOWN_LEVEL,
    FormattedBlock,
    LogLevel,
    LogRecord,
)

UNKNOWN_VALUE = "Unknown"

# Only these exact numeric levels go to the filtered output.
FILTERED_LEVELS: frozenset[int] = frozenset({LogLevel.ERROR, LogLevel.FATAL})


def severity_label(level: int | None) -> str:
    """Map a numeric level to its label, or UNKNOWN."""
    code = UNKNOWN_LEVEL if level is None else level
    try:
        return LogLevel(code).name
    except ValueError:
        return UNKNOWN_LABEL


def is_filtered(level: int | None) -> bool:
    """True when a record belongs in the ERROR/FATAL output."""
    return level is not None and level in FILTERED_LEVELS


def or_unknown(value: str | None) -> str:
    return UNKNOWN_VALUE if value is None else value


def render_data(value: Any) -> str | None:
    """Stringify the opaque `data` field (None stays None)."""
    if value is None or isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise RecordFormatError(f"data field is not serializable ({e})") from e


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One rendered `Label: value` line."""

    label: str
    getter: Callable[[LogRecord], str | None]


def _exception_message(record: LogRecord) -> str | None:
    return record.exception.message if record.exception is not None else None


CANONICAL_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Request ID", lambda r: r.request_id),
    FieldSpec("Time", lambda r: r.time),
    FieldSpec("Remote Address", lambda r: r.remote_address),
    FieldSpec("User", lambda r: r.user),
    FieldSpec("App", lambda r: r.app),
    FieldSpec("Method", lambda r: r.method),
    FieldSpec("URL", lambda r: r.url),
    FieldSpec("Message", lambda r: r.message),
    FieldSpec("User Agent", lambda r: r.user_agent),
    FieldSpec("Exception", _exception_message),
    FieldSpec("Data", lambda r: render_data(r.data)),
    FieldSpec("Version", lambda r: r.version),
)

# Five-field layout of the earliest log exports.
LEGACY_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Time", lambda r: r.time),
    FieldSpec("User", lambda r: r.user),
    FieldSpec("Method", lambda r: r.method),
    FieldSpec("URL", lambda r: r.url),
    FieldSpec("Message", lambda r: r.message),
)


def format_record(
    record: LogRecord,
    *,
    line_no: int = 0,
    fields: Sequence[FieldSpec] = CANONICAL_FIELDS,
) -> FormattedBlock:
    """Render a record as a label line plus one `Label: value` line per field."""
    label = severity_label(record.level)
    parts = [f"{label}\n"]
    for fs in fields:
        parts.append(f"{fs.label}: {or_unknown(fs.getter(record))}\n")
    text = "".join(parts)

    return FormattedBlock(
        line_no=line_no,
        level=record.level,
        label=label,
        text=text,
        filtered=is_filtered(record.level),
    )
