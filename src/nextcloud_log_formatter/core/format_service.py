"""Whole-file formatting runs.

This module is the main integration point: it reads a log file, pushes every
line through decode -> format -> route and writes both output files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .decoder import decode_line
from .errors import RecordDecodeError, RecordFormatError
from .formatter import CANONICAL_FIELDS, FieldSpec, format_record
from .models import FormattedBlock, LineDiagnostic
from .output import OutputConfig, OutputPaths, output_paths, write_blocks

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class FormatResult:
    """Blocks and diagnostics collected from one pass over the input."""

    all_blocks: list[FormattedBlock] = field(default_factory=list)
    filtered_blocks: list[FormattedBlock] = field(default_factory=list)
    diagnostics: list[LineDiagnostic] = field(default_factory=list)
    lines_read: int = 0


@dataclass(frozen=True, slots=True)
class FormatRun:
    result: FormatResult
    paths: OutputPaths


def read_lines(path: str | Path, *, encoding: str = "utf-8-sig") -> list[str]:
    """Load the whole file as a list of lines without line terminators."""
    with Path(path).open("r", encoding=encoding, newline="\n") as f:
        return [line.rstrip("\r\n") for line in f]


def _skip(result: FormatResult, diag: LineDiagnostic) -> None:
    result.diagnostics.append(diag)
    LOGGER.warning("%s", diag.describe())


def process_lines(
    lines: Iterable[str],
    *,
    fields: Sequence[FieldSpec] = CANONICAL_FIELDS,
) -> FormatResult:
    """Decode, format and route every line in input order."""
    result = FormatResult()
    for line_no, line in enumerate(lines, start=1):
        result.lines_read += 1

        try:
            record = decode_line(line)
        except RecordDecodeError as e:
            _skip(result, LineDiagnostic(line_no=line_no, kind="decode", reason=e.reason, raw=line))
            continue

        try:
            block = format_record(record, line_no=line_no, fields=fields)
        except RecordFormatError as e:
            _skip(result, LineDiagnostic(line_no=line_no, kind="format", reason=e.reason, raw=line))
            continue

        result.all_blocks.append(block)
        if block.filtered:
            result.filtered_blocks.append(block)

    return result


def format_log_file(
    input_path: str | Path,
    *,
    out_dir: str | Path | None = None,
    now: datetime | None = None,
    config: OutputConfig | None = None,
) -> FormatRun:
    """Format a JSON-lines log file into the filtered and all output files."""
    path = Path(input_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    cfg = config or OutputConfig()
    lines = read_lines(path, encoding=cfg.input_encoding)
    result = process_lines(lines)

    paths = output_paths(path, now=now or datetime.now(), out_dir=out_dir, config=cfg)
    write_blocks(paths.filtered, result.filtered_blocks, encoding=cfg.encoding)
    write_blocks(paths.all, result.all_blocks, encoding=cfg.encoding)

    LOGGER.info(
        "Formatted %d of %d lines from %s (%d filtered, %d skipped)",
        len(result.all_blocks),
        result.lines_read,
        path,
        len(result.filtered_blocks),
        len(result.diagnostics),
    )
    return FormatRun(result=result, paths=paths)
