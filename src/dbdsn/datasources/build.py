"""
The ``<provider>_build`` data source.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..config import Settings
from ..core import ConnectionSpec, build_dsn
from ..security import redact_state
from ..utils import get_logger, time_call
from .base import (
    INT,
    MAP,
    STRING,
    Attribute,
    ConfigValidationError,
    DataSource,
    DataSourceSchema,
    ReadResponse,
    validation_diagnostics,
)

BUILD_SCHEMA = DataSourceSchema(
    description="Builds a database DSN from component parts.",
    attributes=(
        Attribute("driver", STRING, "Database driver (e.g., postgres, mysql, sqlserver)", required=True),
        Attribute("user", STRING, "Database username", optional=True),
        Attribute("password", STRING, "Database password", optional=True, sensitive=True),
        Attribute("host", STRING, "Database host", required=True),
        Attribute("port", INT, "Database port", required=True),
        Attribute("name", STRING, "Database name", required=True),
        Attribute("params", MAP, "Additional connection parameters", optional=True),
        Attribute("dsn", STRING, "The constructed DSN", computed=True, sensitive=True),
        Attribute("id", STRING, "SHA1 hash of the DSN for resource identification", computed=True),
    ),
)

_INPUTS = ("driver", "user", "password", "host", "port", "name", "params")


class BuildDataSource(DataSource):
    """
    Assemble a DSN and its fingerprint from structured fields.
    """

    type_suffix = "build"

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings.from_env()
        self.logger = get_logger("datasources.build")

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_{self.type_suffix}"

    def schema(self) -> DataSourceSchema:
        return BUILD_SCHEMA

    def read(self, config: Mapping[str, Any]) -> ReadResponse:
        response = ReadResponse()
        try:
            BUILD_SCHEMA.validate(config)
        except ConfigValidationError as exc:
            self.logger.warning("Rejected build configuration: %s", exc)
            validation_diagnostics(response, exc)
            return response

        state = {key: config.get(key) for key in _INPUTS}
        if state["params"] is not None:
            state["params"] = dict(state["params"])
        spec = ConnectionSpec(**state)

        with time_call("build read", self.logger, threshold_ms=self.settings.slow_read_ms):
            result = build_dsn(spec)

        state["dsn"] = result.dsn
        state["id"] = result.fingerprint
        response.state = state
        self.logger.info(
            "Built DSN state %s",
            redact_state(state, BUILD_SCHEMA.sensitive_attributes()),
        )
        return response
