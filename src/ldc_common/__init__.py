"""LDC Common: shared constants, settings and models for ldcconf."""

from ldc_common.constants import (
    BINPATH_TOKEN,
    CONFIG_FILENAME,
    DEFAULT_GROUP,
    ETC_DIR,
    ETC_SUBDIR,
    FALLBACK_ENV_VAR,
    INSTALL_PREFIX,
    LDC_VERSION,
    REGISTRY_KEY_BASE,
    REGISTRY_VALUE,
    SWITCHES_KEY,
    SYSTEM_ETC,
    USER_CONFIG_DIR,
)
from ldc_common.config import LdcSettings
from ldc_common.models.result import ErrorKind, ReadResult

__all__ = [
    "BINPATH_TOKEN",
    "CONFIG_FILENAME",
    "DEFAULT_GROUP",
    "ETC_DIR",
    "ETC_SUBDIR",
    "ErrorKind",
    "FALLBACK_ENV_VAR",
    "INSTALL_PREFIX",
    "LDC_VERSION",
    "LdcSettings",
    "REGISTRY_KEY_BASE",
    "REGISTRY_VALUE",
    "ReadResult",
    "SWITCHES_KEY",
    "SYSTEM_ETC",
    "USER_CONFIG_DIR",
]
