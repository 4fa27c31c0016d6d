"""
Structured connection fields and the DSN fingerprint.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


def fingerprint(dsn: str) -> str:
    """
    Return the hex SHA-1 digest of ``dsn``.

    Used as a stable identifier for the DSN, never as a credential.
    """
    return hashlib.sha1(dsn.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class ConnectionSpec:
    driver: str
    host: Optional[str] = None
    port: Optional[int] = None
    name: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    params: Optional[Mapping[str, str]] = None

    def __post_init__(self) -> None:
        if self.params is not None:
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnectionSpec):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        params = tuple(sorted(self.params.items())) if self.params is not None else None
        return hash((self.driver, self.host, self.port, self.name, self.user, self.password, params))

    def sorted_params(self) -> list[tuple[str, str]]:
        if not self.params:
            return []
        return sorted(self.params.items())

    def as_dict(self) -> dict[str, object]:
        return {
            "driver": self.driver,
            "user": self.user,
            "password": self.password,
            "host": self.host,
            "port": self.port,
            "name": self.name,
            "params": dict(self.params) if self.params is not None else None,
        }
