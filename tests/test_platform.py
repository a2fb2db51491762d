"""Tests for platform capabilities and executable resolution."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from ldc_common import LdcSettings
from ldcconf.services.executable import resolve_executable
from ldcconf.services.platform import PosixPlatform, WindowsPlatform, current_platform


class TestPosixPlatform:
    def test_home_from_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert PosixPlatform().home_dir() == tmp_path

    def test_home_fallback_root(self, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)
        assert PosixPlatform().home_dir() == Path("/")

    def test_no_registry(self):
        platform = PosixPlatform()
        assert platform.windows is False
        assert platform.registry_install_path() is None


class TestWindowsPlatform:
    def test_home_from_appdata(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("APPDATA", str(tmp_path))
        assert WindowsPlatform("key").home_dir() == tmp_path

    @pytest.mark.skipif(sys.platform == "win32", reason="winreg is available on Windows")
    def test_registry_without_winreg(self):
        assert WindowsPlatform("key").registry_install_path() is None


class TestCurrentPlatform:
    def test_posix(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        assert isinstance(current_platform(LdcSettings()), PosixPlatform)

    def test_windows_uses_versioned_key(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "win32")
        platform = current_platform(LdcSettings(version="1.2.3"))
        assert isinstance(platform, WindowsPlatform)
        assert platform.registry_key == r"SOFTWARE\ldc-developers\LDC\1.2.3"


class TestResolveExecutable:
    def test_anchor_wins(self, tmp_path: Path):
        anchor = tmp_path / "ldc2"
        anchor.write_text("")
        assert resolve_executable("/somewhere/else/ldc2", anchor) == anchor.resolve()

    def test_missing_anchor_ignored(self, tmp_path: Path):
        exe = tmp_path / "bin" / "ldc2"
        assert resolve_executable(str(exe), tmp_path / "nope") == exe.resolve()

    def test_relative_argv0(self, tmp_path: Path, monkeypatch):
        (tmp_path / "bin").mkdir()
        monkeypatch.chdir(tmp_path)
        assert resolve_executable(os.path.join("bin", "ldc2")) == (tmp_path / "bin" / "ldc2").resolve()

    def test_bare_name_searched_on_path(self, tmp_path: Path, monkeypatch):
        exe = tmp_path / "ldc2"
        exe.write_text("#!/bin/sh\n")
        exe.chmod(0o755)
        monkeypatch.setenv("PATH", str(tmp_path))
        assert resolve_executable("ldc2") == exe.resolve()

    def test_symlink_resolved(self, tmp_path: Path):
        real = tmp_path / "real" / "ldc2"
        real.parent.mkdir()
        real.write_text("")
        link = tmp_path / "ldc2"
        link.symlink_to(real)
        assert resolve_executable(str(link)) == real.resolve()

    def test_fallback_to_interpreter(self, monkeypatch):
        monkeypatch.setenv("PATH", "")
        assert resolve_executable("no-such-compiler") == Path(sys.executable).resolve()
        assert resolve_executable(None) == Path(sys.executable).resolve()
