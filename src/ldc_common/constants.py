"""Shared constants for the ldcconf tools."""

from pathlib import Path

# Version baked into the Windows registry key
LDC_VERSION = "0.11.0"

# Configuration file
CONFIG_FILENAME = "ldc2.conf"
DEFAULT_GROUP = "default"
SWITCHES_KEY = "switches"

# Placeholder replaced with the directory holding the running executable
BINPATH_TOKEN = "%%ldcbinarypath%%"

# Search locations (see ldcconf.services.locator)
USER_CONFIG_DIR = ".ldc"
ETC_DIR = "etc"
ETC_SUBDIR = "ldc"
INSTALL_PREFIX = Path("/usr/local")
SYSTEM_ETC = Path("/etc")

# Windows registry
REGISTRY_KEY_BASE = r"SOFTWARE\ldc-developers\LDC"
REGISTRY_VALUE = "Path"

# Environment variable callers fall back to when no file is found
FALLBACK_ENV_VAR = "DFLAGS"
