"""
DSN building and parsing.
"""

from .builder import BuildResult, build_dsn
from .errors import (
    DSNConfigurationError,
    DSNError,
    DSNParseError,
    InvalidPortError,
    MalformedDSNError,
)
from .parser import ParseResult, parse_dsn, parse_dsn_from_env
from .spec import ConnectionSpec, fingerprint

__all__ = [
    "BuildResult",
    "ConnectionSpec",
    "DSNConfigurationError",
    "DSNError",
    "DSNParseError",
    "InvalidPortError",
    "MalformedDSNError",
    "ParseResult",
    "build_dsn",
    "fingerprint",
    "parse_dsn",
    "parse_dsn_from_env",
]
