"""Resolve the path of the running executable."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path


def resolve_executable(argv0: str | None, anchor: str | Path | None = None) -> Path:
    """Return the absolute, symlink-free path of the running executable.

    *anchor* is a path known from inside the process (for example the main
    module's ``__file__``) and wins over *argv0* when it exists.  Otherwise
    an *argv0* containing a directory part is taken relative to the working
    directory, a bare name is searched on ``PATH``, and ``sys.executable``
    is the last resort.
    """
    if anchor is not None and Path(anchor).exists():
        return Path(anchor).resolve()

    if argv0:
        if os.sep in argv0 or (os.altsep and os.altsep in argv0):
            return Path(os.path.abspath(argv0)).resolve()
        found = shutil.which(argv0)
        if found:
            return Path(found).resolve()

    return Path(sys.executable).resolve()
