"""Platform capabilities needed by the configuration search."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ldc_common import REGISTRY_VALUE, LdcSettings

log = logging.getLogger(__name__)


class PlatformPaths:
    """Home directory and install path lookups for one platform."""

    windows = False

    def home_dir(self) -> Path:
        raise NotImplementedError

    def registry_install_path(self) -> Path | None:
        """Install path recorded by the installer, if the platform has one."""
        return None


class PosixPlatform(PlatformPaths):
    def home_dir(self) -> Path:
        return Path(os.environ.get("HOME") or "/")


class WindowsPlatform(PlatformPaths):
    windows = True

    def __init__(self, registry_key: str):
        self.registry_key = registry_key

    def home_dir(self) -> Path:
        # Per-user application data folder, like SHGetFolderPath(CSIDL_APPDATA)
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home()

    def registry_install_path(self) -> Path | None:
        try:
            import winreg
        except ImportError:
            return None

        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, self.registry_key) as key:
                value, value_type = winreg.QueryValueEx(key, REGISTRY_VALUE)
        except OSError as exc:
            log.debug("No install path under HKLM\\%s: %s", self.registry_key, exc)
            return None

        if value_type != winreg.REG_SZ or not value:
            return None
        return Path(value)


def current_platform(settings: LdcSettings) -> PlatformPaths:
    """Return the capability implementation for the running platform."""
    if sys.platform == "win32":
        return WindowsPlatform(settings.registry_key)
    return PosixPlatform()
