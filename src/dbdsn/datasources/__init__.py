"""
Read-only data sources exposed by the provider.
"""

from .base import (
    Attribute,
    ConfigValidationError,
    DataSource,
    DataSourceSchema,
    Diagnostic,
    ReadResponse,
)
from .build import BUILD_SCHEMA, BuildDataSource
from .parse import PARSE_SCHEMA, ParseDataSource

__all__ = [
    "Attribute",
    "BUILD_SCHEMA",
    "BuildDataSource",
    "ConfigValidationError",
    "DataSource",
    "DataSourceSchema",
    "Diagnostic",
    "PARSE_SCHEMA",
    "ParseDataSource",
    "ReadResponse",
]
