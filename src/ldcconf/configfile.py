"""The LDC configuration file: search, parse and expand in one call."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from rich.console import Console

from ldc_common import ErrorKind, LdcSettings, ReadResult

from ldcconf.config import get_settings
from ldcconf.errors import ConfigNotFoundError, ConfigParseError, LdcConfError
from ldcconf.services import locator, parser
from ldcconf.services.executable import resolve_executable
from ldcconf.services.platform import PlatformPaths, current_platform
from ldcconf.services.settings_tree import SettingsTree

log = logging.getLogger(__name__)
err_console = Console(stderr=True)


class ConfigFile:
    """Switches and settings loaded from the first ``ldc2.conf`` found.

    Populated by a single call to :meth:`read` at startup and consulted
    read-only afterwards.  ``path`` is non-empty only after a successful
    read; a failed read leaves the instance empty.
    """

    def __init__(
        self,
        settings: LdcSettings | None = None,
        platform: PlatformPaths | None = None,
    ):
        self._settings = settings or get_settings()
        self._platform = platform or current_platform(self._settings)
        self.settings: SettingsTree | None = None
        self.path = ""
        self.switches: list[str] = []

    def reset(self) -> None:
        """Drop any loaded state, releasing the settings tree."""
        self.settings = None
        self.path = ""
        self.switches = []

    def load(
        self,
        argv0: str | None,
        filename: str | None = None,
        anchor: str | Path | None = None,
    ) -> ReadResult:
        """Locate and parse the configuration file, returning a typed result.

        Never raises; every failure is reported through ``ReadResult.kind``.
        """
        filename = filename or self._settings.config_filename
        self.reset()
        found: Path | None = None
        try:
            executable = resolve_executable(argv0, anchor)
            found = locator.locate(
                filename, executable, self._platform, self._settings.install_prefix
            )
            if found is None:
                raise ConfigNotFoundError(
                    f"Error failed to locate the configuration file: {filename}"
                )
            tree = parser.load_settings(found, filename)
            parser.check_default_group(tree)
            switches = parser.extract_switches(tree, executable.parent)
        except ConfigParseError as exc:
            return ReadResult.failure(exc.kind, str(exc), path=str(found), line=exc.line)
        except LdcConfError as exc:
            return ReadResult.failure(
                exc.kind, str(exc), path=str(found) if found is not None else None
            )
        except Exception as exc:
            log.debug("Unexpected failure reading %s", filename, exc_info=True)
            return ReadResult.failure(
                ErrorKind.UNKNOWN,
                f"Unknown exception caught!: {exc}",
                path=str(found) if found is not None else None,
            )

        self.settings = tree
        self.path = str(found)
        self.switches = switches
        log.debug("Loaded %s with %d switches", self.path, len(switches))
        return ReadResult.success(self.path, switches)

    def read(
        self,
        argv0: str | None,
        filename: str | None = None,
        anchor: str | Path | None = None,
    ) -> bool:
        """Like :meth:`load`, but report failures on stderr and return a flag."""
        result = self.load(argv0, filename, anchor)
        if not result.ok:
            log.info("Configuration read failed (%s)", result.kind.value)
            err_console.print(
                result.message, style="red", markup=False, highlight=False, soft_wrap=True
            )
        return result.ok


@lru_cache(maxsize=1)
def get_config_file() -> ConfigFile:
    """Return the process-wide ConfigFile (created once, cached)."""
    return ConfigFile()
