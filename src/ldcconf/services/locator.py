"""Configuration file search across user, install and system locations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, NamedTuple

from ldc_common import ETC_DIR, ETC_SUBDIR, SYSTEM_ETC, USER_CONFIG_DIR

from ldcconf.services.platform import PlatformPaths

log = logging.getLogger(__name__)


class Candidate(NamedTuple):
    label: str
    path: Path


def candidate_paths(
    filename: str,
    executable: Path,
    platform: PlatformPaths,
    install_prefix: Path,
) -> Iterator[Candidate]:
    """Yield every search location in priority order.

    The order is relied upon by users overriding a system-wide file with a
    local one.  Platform lookups run only when their step is reached.
    """
    # Temporary configuration
    try:
        cwd = Path.cwd()
    except OSError as exc:
        log.debug("Skipping working directory: %s", exc)
    else:
        yield Candidate("working directory", cwd / filename)

    exe_dir = executable.parent
    yield Candidate("executable directory", exe_dir / filename)

    # User configuration
    yield Candidate("user config", platform.home_dir() / USER_CONFIG_DIR / filename)
    if platform.windows:
        yield Candidate("user home", platform.home_dir() / filename)

    # System configuration; the grandparent is taken directly, never via "..",
    # and there is none for an executable in the filesystem root
    if exe_dir.parent != exe_dir:
        yield Candidate("install etc", exe_dir.parent / ETC_DIR / filename)

    if platform.windows:
        registry_path = platform.registry_install_path()
        if registry_path is not None:
            yield Candidate("registry install path", registry_path / ETC_DIR / filename)
    else:
        yield Candidate("install prefix", install_prefix / ETC_DIR / filename)
        yield Candidate("install prefix (ldc)", install_prefix / ETC_DIR / ETC_SUBDIR / filename)
        yield Candidate("system", SYSTEM_ETC / filename)
        yield Candidate("system (ldc)", SYSTEM_ETC / ETC_SUBDIR / filename)


def locate(
    filename: str,
    executable: Path,
    platform: PlatformPaths,
    install_prefix: Path,
) -> Path | None:
    """Return the first existing candidate, or None when there is none."""
    for candidate in candidate_paths(filename, executable, platform, install_prefix):
        exists = candidate.path.exists()
        log.debug("Probing %s: %s (%s)", candidate.label, candidate.path, "found" if exists else "missing")
        if exists:
            return candidate.path
    return None
