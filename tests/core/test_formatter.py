from __future__ import annotations

import pytest

from nextcloud_log_formatter.core.decoder import decode_line
from nextcloud_log_formatter.core.errors import RecordFormatError
from nextcloud_log_formatter.core.formatter import (
    CANONICAL_FIELDS,
    LEGACY_FIELDS,
    format_record,
    is_filtered,
    or_unknown,
    render_data,
    severity_label,
)
from nextcloud_log_formatter.core.models import ExceptionInfo, LogRecord


@pytest.mark.parametrize(
    ("level", "label"),
    [
        (0, "DEBUG"),
        (1, "INFO"),
        (2, "WARNING"),
        (3, "ERROR"),
        (4, "FATAL"),
        (-1, "UNKNOWN"),
        (5, "UNKNOWN"),
        (9, "UNKNOWN"),
        (None, "UNKNOWN"),
    ],
)
def test_severity_label(level: int | None, label: str) -> None:
    assert severity_label(level) == label


@pytest.mark.parametrize(
    ("level", "expected"),
    [(0, False), (1, False), (2, False), (3, True), (4, True), (5, False), (-1, False), (None, False)],
)
def test_is_filtered_uses_raw_level(level: int | None, expected: bool) -> None:
    assert is_filtered(level) is expected


def test_or_unknown() -> None:
    assert or_unknown(None) == "Unknown"
    assert or_unknown("") == ""
    assert or_unknown("x") == "x"


def test_render_data() -> None:
    assert render_data(None) is None
    assert render_data("plain") == "plain"
    assert render_data(12) == "12"
    assert render_data(False) == "false"
    assert render_data({"app": "files", "n": [1, 2]}) == '{"app": "files", "n": [1, 2]}'
    assert render_data(["é"]) == '["é"]'


def test_render_data_unserializable() -> None:
    loop: list = []
    loop.append(loop)
    with pytest.raises(RecordFormatError):
        render_data(loop)


def test_format_end_to_end_error_example() -> None:
    record = decode_line(
        '{"level":3,"time":"2024-01-01T00:00:00Z","user":"alice","method":"GET","url":"/x","message":"boom"}'
    )
    block = format_record(record, line_no=7)
    assert block.line_no == 7
    assert block.label == "ERROR"
    assert block.filtered is True
    assert block.text.startswith("ERROR\n")
    assert "User: alice\n" in block.text
    assert "Message: boom\n" in block.text
    assert "Time: 2024-01-01T00:00:00Z\n" in block.text
    assert "Request ID: Unknown\n" in block.text
    assert "Exception: Unknown\n" in block.text
    assert "Data: Unknown\n" in block.text


def test_format_field_order_and_shape() -> None:
    block = format_record(LogRecord())
    lines = block.text.split("\n")
    assert lines[0] == "UNKNOWN"
    assert lines[-1] == ""
    assert [ln.split(": ", 1)[0] for ln in lines[1:-1]] == [f.label for f in CANONICAL_FIELDS]
    assert all(ln.endswith(": Unknown") for ln in lines[1:-1])


def test_format_unknown_level_not_filtered() -> None:
    block = format_record(decode_line('{"level":9,"message":"weird"}'))
    assert block.label == "UNKNOWN"
    assert block.filtered is False
    assert "Message: weird\n" in block.text


def test_format_exception_and_data() -> None:
    record = LogRecord(exception=ExceptionInfo(message="quota"), data={"k": 1})
    block = format_record(record)
    assert "Exception: quota\n" in block.text
    assert 'Data: {"k": 1}\n' in block.text


def test_format_legacy_profile() -> None:
    record = decode_line('{"level":0,"time":"t","user":"bob","method":"GET","app":"files"}')
    block = format_record(record, fields=LEGACY_FIELDS)
    assert block.text == (
        "DEBUG\n"
        "Time: t\n"
        "User: bob\n"
        "Method: GET\n"
        "URL: Unknown\n"
        "Message: Unknown\n"
    )


def test_format_unserializable_data_raises() -> None:
    loop: dict = {}
    loop["self"] = loop
    with pytest.raises(RecordFormatError):
        format_record(LogRecord(level=3, data=loop))
