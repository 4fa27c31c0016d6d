"""
dbdsn public package initialization.

Builds database DSNs from structured fields and parses them back, each
paired with a SHA-1 fingerprint of the DSN text.
"""

from .core import (  # noqa: F401
    BuildResult,
    ConnectionSpec,
    DSNConfigurationError,
    DSNError,
    DSNParseError,
    InvalidPortError,
    MalformedDSNError,
    ParseResult,
    build_dsn,
    fingerprint,
    parse_dsn,
    parse_dsn_from_env,
)
from .config import Settings  # noqa: F401
from .datasources import BuildDataSource, ConfigValidationError, ParseDataSource  # noqa: F401
from .provider import DatabaseDSNProvider  # noqa: F401

__all__ = [
    "BuildDataSource",
    "BuildResult",
    "ConfigValidationError",
    "ConnectionSpec",
    "DSNConfigurationError",
    "DSNError",
    "DSNParseError",
    "DatabaseDSNProvider",
    "InvalidPortError",
    "MalformedDSNError",
    "ParseDataSource",
    "ParseResult",
    "Settings",
    "build_dsn",
    "fingerprint",
    "parse_dsn",
    "parse_dsn_from_env",
]
