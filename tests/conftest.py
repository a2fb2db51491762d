"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from ldc_common import LdcSettings
from ldcconf.config import get_settings
from ldcconf.services.platform import PosixPlatform, WindowsPlatform


class FakeWindows(WindowsPlatform):
    """Windows capability with a fixed home and registry path."""

    def __init__(self, home: Path, registry: Path | None = None):
        super().__init__(r"SOFTWARE\ldc-developers\LDC\test")
        self._home = home
        self._registry = registry
        self.registry_calls = 0

    def home_dir(self) -> Path:
        return self._home

    def registry_install_path(self) -> Path | None:
        self.registry_calls += 1
        return self._registry


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def layout(tmp_path: Path, monkeypatch) -> dict[str, Path]:
    """An install tree, a home and a working directory under tmp_path."""
    tmp_path = tmp_path.resolve()
    dirs = {
        "cwd": tmp_path / "work",
        "home": tmp_path / "home",
        "prefix": tmp_path / "prefix",
        "bin": tmp_path / "opt" / "ldc" / "bin",
    }
    for d in dirs.values():
        d.mkdir(parents=True)
    dirs["exe"] = dirs["bin"] / "ldc2"
    dirs["exe"].write_text("")
    monkeypatch.chdir(dirs["cwd"])
    monkeypatch.setenv("HOME", str(dirs["home"]))
    return dirs


@pytest.fixture
def settings(layout: dict[str, Path]) -> LdcSettings:
    return LdcSettings(install_prefix=layout["prefix"])


@pytest.fixture
def posix() -> PosixPlatform:
    return PosixPlatform()


@pytest.fixture
def windows(layout: dict[str, Path]) -> FakeWindows:
    return FakeWindows(layout["home"])
