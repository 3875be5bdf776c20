from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from nextcloud_log_formatter.core.format_service import format_log_file

# Higher levels would hide the per-line skip reports.
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING")


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nextcloud-log-formatter",
        description="Reformat a JSON-lines log into readable text (all records + ERROR/FATAL only).",
    )
    p.add_argument("log_file", help="Path to a log file with one JSON object per line")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Verbosity of diagnostics on stderr (default: WARNING, one line per skipped entry)",
    )
    return p


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint."""
    # argparse exits with status 2 and a usage line on a wrong argument count.
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    try:
        run = format_log_file(args.log_file)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)

    print(f"Filtered formatted log file created: {run.paths.filtered}")
    print(f"All formatted log file created: {run.paths.all}")


if __name__ == "__main__":
    main()
