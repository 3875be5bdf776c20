"""Core data models for log formatting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class LogLevel(IntEnum):
    """Numeric severity codes written by the application logger."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4


UNKNOWN_LEVEL = -1
UNKNOWN_LABEL = "UNKNOWN"


def _string_or_none(value: Any) -> str | None:
    # Wrong-typed values count as absent.
    return value if isinstance(value, str) else None


class ExceptionInfo(BaseModel):
    """The part of a logged exception that gets rendered."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str | None = Field(
        default=None, validation_alias=AliasChoices("message", "Message")
    )

    @field_validator("message", mode="before")
    @classmethod
    def _message(cls, value: Any) -> str | None:
        return _string_or_none(value)


class LogRecord(BaseModel):
    """One decoded JSON log line. Every field is optional."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    level: int | None = None
    request_id: str | None = Field(
        default=None, validation_alias=AliasChoices("requestId", "reqId", "request_id")
    )
    time: str | None = None
    remote_address: str | None = Field(
        default=None,
        validation_alias=AliasChoices("remoteAddress", "remoteAddr", "remote_address"),
    )
    user: str | None = None
    app: str | None = None
    method: str | None = None
    url: str | None = None
    message: str | None = None
    user_agent: str | None = Field(
        default=None, validation_alias=AliasChoices("userAgent", "user_agent")
    )
    exception: ExceptionInfo | None = None
    data: Any = None
    version: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _level(cls, value: Any) -> int | None:
        # bool is an int subclass, but `true` is not a severity.
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @field_validator(
        "request_id",
        "time",
        "remote_address",
        "user",
        "app",
        "method",
        "url",
        "message",
        "user_agent",
        "version",
        mode="before",
    )
    @classmethod
    def _strings(cls, value: Any) -> str | None:
        return _string_or_none(value)

    @field_validator("exception", mode="before")
    @classmethod
    def _exception(cls, value: Any) -> Any:
        if isinstance(value, (dict, ExceptionInfo)):
            return value
        return None


@dataclass(frozen=True, slots=True)
class FormattedBlock:
    """Rendered text of one record plus its routing decision."""

    line_no: int
    level: int | None
    label: str
    text: str
    filtered: bool  # also belongs in the ERROR/FATAL output


@dataclass(frozen=True, slots=True)
class LineDiagnostic:
    """A skipped input line and why it was skipped."""

    line_no: int
    kind: Literal["decode", "format"]
    reason: str
    raw: str

    def describe(self) -> str:
        """One-line console text for this diagnostic."""
        what = "Deserialization" if self.kind == "decode" else "Formatting"
        return f"{what} failed for log entry (line {self.line_no}, {self.reason}): {self.raw}"
