"""Module entrypoint.

Allows:
    python -m nextcloud_log_formatter LOG_FILE
"""

from __future__ import annotations

from nextcloud_log_formatter.cli import main

if __name__ == "__main__":
    main()
