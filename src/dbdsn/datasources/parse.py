"""
The ``<provider>_parse`` data source.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..config import Settings
from ..core import InvalidPortError, MalformedDSNError, parse_dsn
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

PARSE_SCHEMA = DataSourceSchema(
    description="Parses a database DSN into component parts.",
    attributes=(
        Attribute("dsn", STRING, "Database DSN to parse", required=True, sensitive=True),
        Attribute("driver", STRING, "Database driver", computed=True),
        Attribute("user", STRING, "Database username", computed=True),
        Attribute("password", STRING, "Database password", computed=True, sensitive=True),
        Attribute("host", STRING, "Database host", computed=True),
        Attribute("port", INT, "Database port", computed=True),
        Attribute("name", STRING, "Database name", computed=True),
        Attribute("params", MAP, "Additional connection parameters", computed=True),
        Attribute("id", STRING, "SHA1 hash of the DSN for resource identification", computed=True),
    ),
)


class ParseDataSource(DataSource):
    """
    Split a DSN into its fields. Every computed attribute may be null.
    """

    type_suffix = "parse"

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings.from_env()
        self.logger = get_logger("datasources.parse")

    def type_name(self, provider_type_name: str) -> str:
        return f"{provider_type_name}_{self.type_suffix}"

    def schema(self) -> DataSourceSchema:
        return PARSE_SCHEMA

    def read(self, config: Mapping[str, Any]) -> ReadResponse:
        response = ReadResponse()
        try:
            PARSE_SCHEMA.validate(config)
        except ConfigValidationError as exc:
            self.logger.warning("Rejected parse configuration: %s", exc)
            validation_diagnostics(response, exc)
            return response

        dsn = config["dsn"]
        try:
            with time_call("parse read", self.logger, threshold_ms=self.settings.slow_read_ms):
                result = parse_dsn(dsn)
        except InvalidPortError as exc:
            self.logger.warning("Port parse error: %s", exc)
            response.add_error("Port Parse Error", str(exc))
            return response
        except MalformedDSNError as exc:
            self.logger.warning("DSN parse error: %s", exc)
            response.add_error("DSN Parse Error", str(exc))
            return response

        state: dict[str, Any] = {"dsn": dsn}
        state.update(result.spec.as_dict())
        state["id"] = result.fingerprint
        response.state = state
        self.logger.info(
            "Parsed DSN state %s",
            redact_state(state, PARSE_SCHEMA.sensitive_attributes()),
        )
        return response
