"""Placeholder expansion for configured switches."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ldc_common import BINPATH_TOKEN


def expand(raw: str, bin_dir: str | Path) -> str:
    """Replace every ``%%ldcbinarypath%%`` in *raw* with *bin_dir*."""
    return raw.replace(BINPATH_TOKEN, str(bin_dir))


def expand_all(raws: Iterable[str], bin_dir: str | Path) -> list[str]:
    return [expand(raw, bin_dir) for raw in raws]
