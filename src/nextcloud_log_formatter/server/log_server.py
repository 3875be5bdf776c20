"""MCP server entrypoint (stdio transport).

Exposes the whole-file formatting run as a tool so MCP clients can produce
the same output files as the command line.

Run locally (stdio):
    python -m nextcloud_log_formatter.server.log_server
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from mcp.server.fastmcp import FastMCP

from nextcloud_log_formatter.tools.formatting import format_log_file_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Log to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("nextcloud-log-formatter", json_response=True)


@mcp.tool()
def format_log_file(log_path: str, out_dir: str | None = None) -> dict[str, Any]:
    """Reformat a JSON-lines log file into readable text files.

    Parameters
    ----------
    log_path:
        Path to a local log file with one JSON object per line.
    out_dir:
        Directory for the output files. Defaults to the server's working directory.

    Returns
    -------
    dict:
        {"filtered_path": str, "all_path": str, "lines_read": int,
         "all_count": int, "filtered_count": int, "skipped": int,
         "diagnostics": list[dict]}
    """
    return format_log_file_impl(log_path=log_path, out_dir=out_dir)


def main() -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
