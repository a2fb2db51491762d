"""Shared Pydantic models."""

from ldc_common.models.result import ErrorKind, ReadResult

__all__ = ["ErrorKind", "ReadResult"]
