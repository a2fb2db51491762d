"""Outcome of reading the configuration file."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Why a configuration read failed."""

    NOT_FOUND = "not_found"
    SCHEMA = "schema"
    IO = "io"
    PARSE = "parse"
    UNKNOWN = "unknown"


class ReadResult(BaseModel):
    """Typed result of ``ConfigFile.load``.

    ``kind`` is ``None`` exactly when ``ok`` is true.  ``line`` is only set
    for parse failures.
    """

    ok: bool
    kind: ErrorKind | None = None
    message: str = ""
    path: str | None = None
    line: int | None = None
    switches: list[str] = Field(default_factory=list)

    @classmethod
    def success(cls, path: str, switches: list[str]) -> ReadResult:
        return cls(ok=True, path=path, switches=list(switches))

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        *,
        path: str | None = None,
        line: int | None = None,
    ) -> ReadResult:
        return cls(ok=False, kind=kind, message=message, path=path, line=line)
