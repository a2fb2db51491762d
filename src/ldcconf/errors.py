"""Custom exceptions for ldcconf."""

from __future__ import annotations

from ldc_common import ErrorKind


class LdcConfError(Exception):
    """Base exception for all configuration file operations."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class ConfigNotFoundError(LdcConfError):
    """No candidate location holds the configuration file."""

    kind = ErrorKind.NOT_FOUND


class ConfigSchemaError(LdcConfError):
    """The document lacks a usable ``default`` group."""

    kind = ErrorKind.SCHEMA


class ConfigIOError(LdcConfError):
    """The configuration file exists but could not be read."""

    kind = ErrorKind.IO


class ConfigParseError(LdcConfError):
    """The configuration file is not valid syntax."""

    kind = ErrorKind.PARSE

    def __init__(self, message: str, *, line: int, detail: str, exit_code: int = 1):
        super().__init__(message, exit_code=exit_code)
        self.line = line
        self.detail = detail


class UnknownConfigError(LdcConfError):
    """Any other failure while reading the configuration file."""
