"""CLI settings: singleton LdcSettings resolved at startup."""

from __future__ import annotations

from functools import lru_cache

from ldc_common import LdcSettings


@lru_cache(maxsize=1)
def get_settings() -> LdcSettings:
    """Return the global LdcSettings (resolved once, cached)."""
    return LdcSettings()
