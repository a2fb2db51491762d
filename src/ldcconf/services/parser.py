"""TOML loading and schema checks for the configuration file."""

from __future__ import annotations

import logging
from pathlib import Path

import tomli

from ldc_common import DEFAULT_GROUP, SWITCHES_KEY

from ldcconf.errors import ConfigIOError, ConfigParseError, ConfigSchemaError, UnknownConfigError
from ldcconf.services import expander
from ldcconf.services.settings_tree import SettingsTree

log = logging.getLogger(__name__)

SWITCHES_PATH = f"{DEFAULT_GROUP}.{SWITCHES_KEY}"


def load_settings(path: Path, filename: str) -> SettingsTree:
    """Parse *path* into a SettingsTree.

    *filename* is the name reported in diagnostics.  Raises ConfigIOError
    when the file cannot be read and ConfigParseError on bad syntax.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigIOError(f"Error reading configuration file: {filename}") from exc

    try:
        data = tomli.loads(text)
    except tomli.TOMLDecodeError as exc:
        raise ConfigParseError(
            f"Error parsing configuration file: {filename}({exc.lineno}): {exc.msg}",
            line=exc.lineno,
            detail=exc.msg,
        ) from exc

    log.debug("Parsed %s (%d top-level keys)", path, len(data))
    return SettingsTree(data)


def check_default_group(tree: SettingsTree) -> None:
    """Raise ConfigSchemaError unless the tree has a ``default`` group."""
    if not tree.exists(DEFAULT_GROUP):
        raise ConfigSchemaError("no default settings in configuration file")
    if not tree.is_group(DEFAULT_GROUP):
        raise ConfigSchemaError("default is not a group")


def extract_switches(tree: SettingsTree, bin_dir: str | Path) -> list[str]:
    """Return ``default.switches`` with placeholders expanded.

    A missing array yields an empty list, and so does a ``switches`` scalar,
    which holds no elements.
    """
    if not tree.is_array(SWITCHES_PATH):
        log.debug("No %s array; using no switches", SWITCHES_PATH)
        return []

    raws = tree.lookup(SWITCHES_PATH)
    for i, value in enumerate(raws):
        if not isinstance(value, str):
            raise UnknownConfigError(f"setting {SWITCHES_PATH}[{i}] is not a string")
    return expander.expand_all(raws, bin_dir)
