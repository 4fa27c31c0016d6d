"""
Provider registry exposing the DSN data sources under one type name.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .config import Settings
from .datasources import BuildDataSource, DataSource, ParseDataSource, ReadResponse
from .utils import get_logger

PROVIDER_TYPE_NAME = "database_dsn"


class DatabaseDSNProvider:
    """
    Registers the build and parse data sources as ``database_dsn_build`` and
    ``database_dsn_parse``. The provider itself takes no configuration.
    """

    type_name = PROVIDER_TYPE_NAME

    def __init__(self, version: str | None = None, *, settings: Settings | None = None) -> None:
        self.settings = settings or Settings.from_env()
        self.version = version or self.settings.provider_version
        self.logger = get_logger("provider")
        self._data_sources: Dict[str, DataSource] = {}
        for data_source in (BuildDataSource(self.settings), ParseDataSource(self.settings)):
            self._data_sources[data_source.type_name(self.type_name)] = data_source

    def data_sources(self) -> Dict[str, DataSource]:
        return dict(self._data_sources)

    def data_source(self, type_name: str) -> DataSource:
        try:
            return self._data_sources[type_name]
        except KeyError:
            known = ", ".join(sorted(self._data_sources))
            raise KeyError(f"Unknown data source '{type_name}' (known: {known})") from None

    def read(self, type_name: str, config: Mapping[str, Any]) -> ReadResponse:
        data_source = self.data_source(type_name)
        self.logger.debug("Reading data source %s (provider version %s)", type_name, self.version)
        return data_source.read(config)
