"""Output file naming and writing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .models import FormattedBlock


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Fixed naming and encoding rules for a formatting run."""

    filtered_suffix: str = "_formatted_filtered"
    all_suffix: str = "_all_formatted"
    timestamp_format: str = "%Y%m%d_%H%M%S"
    extension: str = ".txt"
    encoding: str = "utf-8"
    input_encoding: str = "utf-8-sig"  # drops a leading BOM


@dataclass(frozen=True, slots=True)
class OutputPaths:
    """Where a run writes its two output files."""

    filtered: Path
    all: Path


def output_paths(
    input_path: str | Path,
    *,
    now: datetime,
    out_dir: str | Path | None = None,
    config: OutputConfig | None = None,
) -> OutputPaths:
    """Build `<stem><suffix>[<timestamp>]<ext>` names for both outputs.

    Files land in `out_dir`, or the current working directory when omitted.
    """
    cfg = config or OutputConfig()
    stem = Path(input_path).stem
    stamp = now.strftime(cfg.timestamp_format)
    base = Path(out_dir) if out_dir is not None else Path.cwd()

    def _name(suffix: str) -> Path:
        return base / f"{stem}{suffix}[{stamp}]{cfg.extension}"

    return OutputPaths(filtered=_name(cfg.filtered_suffix), all=_name(cfg.all_suffix))


def write_blocks(
    path: str | Path,
    blocks: Iterable[FormattedBlock],
    *,
    encoding: str = "utf-8",
) -> None:
    """Write block texts back to back; no blocks gives an empty file."""
    Path(path).write_text("".join(b.text for b in blocks), encoding=encoding)
