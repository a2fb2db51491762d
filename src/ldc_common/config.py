"""Central runtime settings for ldcconf."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

from ldc_common.constants import (
    CONFIG_FILENAME,
    INSTALL_PREFIX,
    LDC_VERSION,
    REGISTRY_KEY_BASE,
)


class LdcSettings(BaseSettings):
    """Runtime settings resolved once at startup (env prefix ``LDC_``)."""

    install_prefix: Path = INSTALL_PREFIX
    config_filename: str = CONFIG_FILENAME
    version: str = LDC_VERSION

    model_config = {"env_prefix": "LDC_"}

    @property
    def registry_key(self) -> str:
        return f"{REGISTRY_KEY_BASE}\\{self.version}"
