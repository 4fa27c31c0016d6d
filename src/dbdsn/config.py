"""
Runtime settings resolved from environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .core.errors import DSNConfigurationError

LOG_LEVEL_ENV = "DBDSN_LOG_LEVEL"
SLOW_READ_MS_ENV = "DBDSN_SLOW_READ_MS"
PROVIDER_VERSION_ENV = "DBDSN_PROVIDER_VERSION"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _parse_int(value: str, *, key: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise DSNConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc


def _parse_log_level(value: str, *, key: str) -> int:
    normalized = value.strip().upper()
    if normalized in _LEVEL_NAMES:
        return getattr(logging, normalized)
    if normalized.isdigit():
        return int(normalized)
    raise DSNConfigurationError(f"Invalid log level for '{key}': {value!r}")


@dataclass(frozen=True)
class Settings:
    """
    Ambient settings. None of them affect how DSNs are built or parsed.
    """

    log_level: int = logging.INFO
    slow_read_ms: int = 50
    provider_version: str = "dev"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        defaults = cls()

        raw_level = env.get(LOG_LEVEL_ENV)
        log_level = _parse_log_level(raw_level, key=LOG_LEVEL_ENV) if raw_level else defaults.log_level

        raw_slow = env.get(SLOW_READ_MS_ENV)
        slow_read_ms = _parse_int(raw_slow, key=SLOW_READ_MS_ENV) if raw_slow else defaults.slow_read_ms
        if slow_read_ms < 0:
            raise DSNConfigurationError(f"'{SLOW_READ_MS_ENV}' must be non-negative, got {slow_read_ms}")

        provider_version = env.get(PROVIDER_VERSION_ENV) or defaults.provider_version

        return cls(
            log_level=log_level,
            slow_read_ms=slow_read_ms,
            provider_version=provider_version,
        )
