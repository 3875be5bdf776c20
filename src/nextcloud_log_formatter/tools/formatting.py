"""MCP tool implementations.

Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from nextcloud_log_formatter.core.format_service import format_log_file
from nextcloud_log_formatter.core.models import LineDiagnostic

MAX_REPORTED_DIAGNOSTICS = 100


def _diagnostic_to_dict(diag: LineDiagnostic) -> dict[str, Any]:
    return {
        "line_no": diag.line_no,
        "kind": diag.kind,
        "reason": diag.reason,
        "raw": diag.raw,
    }


def format_log_file_impl(
    *,
    log_path: str,
    out_dir: str | None = None,
) -> dict[str, Any]:
    """Implementation for the `format_log_file` MCP tool.

    Notes
    -----
    - Output files are written to the working directory unless out_dir is set.
    - Only the first MAX_REPORTED_DIAGNOSTICS skipped lines are listed; the
      `skipped` count is always exact.
    """
    if not log_path or not log_path.strip():
        raise ValueError("log_path must not be empty")
    if out_dir is not None and not Path(out_dir).is_dir():
        raise ValueError(f"out_dir is not a directory: {out_dir}")

    run = format_log_file(log_path, out_dir=out_dir)
    result = run.result

    return {
        "filtered_path": str(run.paths.filtered),
        "all_path": str(run.paths.all),
        "lines_read": result.lines_read,
        "all_count": len(result.all_blocks),
        "filtered_count": len(result.filtered_blocks),
        "skipped": len(result.diagnostics),
        "diagnostics": [
            _diagnostic_to_dict(d) for d in result.diagnostics[:MAX_REPORTED_DIAGNOSTICS]
        ],
    }
