"""
Decode a DSN string into a ConnectionSpec using the generic URL grammar.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qsl, unquote, urlsplit

from ..security.redaction import redact_dsn
from .errors import DSNConfigurationError, InvalidPortError, MalformedDSNError
from .spec import ConnectionSpec, fingerprint

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

logger = logging.getLogger("dbdsn.core.parser")


@dataclass(frozen=True)
class ParseResult:
    spec: ConnectionSpec
    fingerprint: str


def _decode(value: str) -> str:
    return unquote(value, errors="strict")


def _split_userinfo(userinfo: str) -> tuple[Optional[str], Optional[str]]:
    user, colon, password = userinfo.partition(":")
    return _decode(user), (_decode(password) if colon else None)


def _split_hostport(hostport: str) -> tuple[str, str]:
    if hostport.startswith("["):
        closing = hostport.find("]")
        if closing == -1:
            raise MalformedDSNError("Unable to parse DSN: unterminated IPv6 host")
        host, rest = hostport[1:closing], hostport[closing + 1 :]
        if rest and not rest.startswith(":"):
            raise MalformedDSNError("Unable to parse DSN: unexpected characters after IPv6 host")
        return host, rest[1:]
    host, colon, port = hostport.rpartition(":")
    if not colon:
        return hostport, ""
    return host, port


def _parse_port(raw: str) -> Optional[int]:
    if not raw:
        return None
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidPortError(raw)
    return int(raw)


def _parse_params(query: str) -> Optional[dict[str, str]]:
    params: dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True, errors="strict"):
        # First occurrence wins for repeated keys.
        params.setdefault(key, value)
    return params or None


def parse_dsn(dsn: str) -> ParseResult:
    """
    Parse ``dsn`` into its connection fields.

    Empty host, path and query map to ``None``. A ``user:`` userinfo yields
    an empty password, which is distinct from no password at all. The
    fingerprint is computed over the input text exactly as given.

    Raises ``MalformedDSNError`` when the string is not a URL and
    ``InvalidPortError`` when the port segment is not a base-10 integer.
    """

    if not isinstance(dsn, str):
        raise MalformedDSNError(f"DSN must be a string, got {type(dsn).__name__}")
    if _CONTROL_RE.search(dsn):
        raise MalformedDSNError("Unable to parse DSN: invalid control character in URL")
    if dsn[:1] == " ":
        raise MalformedDSNError("Unable to parse DSN: leading space before scheme")
    try:
        dsn.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedDSNError("Unable to parse DSN: not valid UTF-8 text") from exc
    if _BAD_ESCAPE_RE.search(dsn):
        raise MalformedDSNError("Unable to parse DSN: invalid URL escape")

    try:
        parts = urlsplit(dsn)
    except ValueError as exc:
        raise MalformedDSNError(f"Unable to parse DSN: {exc}") from exc
    if not parts.scheme:
        raise MalformedDSNError("Unable to parse DSN: missing scheme")

    userinfo, at, hostport = parts.netloc.rpartition("@")
    raw_host, raw_port = _split_hostport(hostport)
    if " " in raw_host:
        raise MalformedDSNError("Unable to parse DSN: invalid character ' ' in host name")
    port = _parse_port(raw_port)

    try:
        user, password = _split_userinfo(userinfo) if at else (None, None)
        host = _decode(raw_host)
        path = _decode(parts.path)
        params = _parse_params(parts.query)
    except UnicodeDecodeError as exc:
        raise MalformedDSNError("Unable to parse DSN: escape does not decode as UTF-8") from exc
    name = path[1:] if path.startswith("/") else path

    spec = ConnectionSpec(
        # urlsplit lowercases the scheme; keep the caller's spelling.
        driver=dsn[: len(parts.scheme)],
        user=user,
        password=password,
        host=host or None,
        port=port,
        name=name or None,
        params=params,
    )
    digest = fingerprint(dsn)
    logger.debug("Parsed DSN %s (id=%s)", redact_dsn(dsn), digest)
    return ParseResult(spec=spec, fingerprint=digest)


def parse_dsn_from_env(env_var: str) -> ParseResult:
    value = os.getenv(env_var)
    if not value:
        raise DSNConfigurationError(f"Environment variable {env_var} is not set")
    return parse_dsn(value)
