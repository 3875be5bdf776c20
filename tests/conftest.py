from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

ERROR_LINE = (
    '{"level":3,"time":"2024-01-01T00:00:00Z","user":"alice",'
    '"method":"GET","url":"/x","message":"boom"}'
)


@pytest.fixture
def write_jsonl_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    '{"reqId":"r1","level":1,"time":"2024-01-01T00:00:00Z","app":"files","message":"start"}',
                    ERROR_LINE,
                    "not json",
                    '{"level":9,"message":"weird"}',
                    '{"level":4,"app":"core","message":"disk full","exception":{"Message":"No space"}}',
                    '{"level":2,"message":"slow"}',
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write


@pytest.fixture
def write_lines() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")

    return _write
