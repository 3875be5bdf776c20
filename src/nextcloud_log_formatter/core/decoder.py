"""JSON-lines record decoder."""

from __future__ import annotations

import json

from pydantic import ValidationError

from .errors import RecordDecodeError
from .models import LogRecord


def decode_line(line: str) -> LogRecord:
    """Decode one JSON object line into a LogRecord.

    Unknown keys are ignored and recognised keys holding the wrong JSON type
    are treated as absent. Raises RecordDecodeError when the line is not a
    JSON object at all.
    """
    s = line.strip()
    if not s:
        raise RecordDecodeError(line, "empty line")

    try:
        obj = json.loads(s)
    except (ValueError, RecursionError) as e:
        raise RecordDecodeError(line, f"invalid JSON ({e})") from e

    if not isinstance(obj, dict):
        raise RecordDecodeError(line, f"expected a JSON object, got {type(obj).__name__}")

    try:
        return LogRecord.model_validate(obj)
    except ValidationError as e:
        raise RecordDecodeError(line, f"unexpected record shape ({e.error_count()} errors)") from e
