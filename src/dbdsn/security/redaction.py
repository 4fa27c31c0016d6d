"""Redaction helpers for DSNs and logged parameters."""

from __future__ import annotations

from typing import Any, Iterable, Mapping
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

REDACTED_VALUE = "***"

_SENSITIVE_KEY_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "api_key",
    "access_key",
    "secret_key",
    "private_key",
    "privatekey",
    "sslkey",
    "ssl_key",
    "sslpassword",
)


def _compact(value: str) -> str:
    return "".join(ch for ch in value if ch.isalnum())


def is_sensitive_key(key: str) -> bool:
    normalized = key.lower()
    compact = _compact(normalized)
    for token in _SENSITIVE_KEY_TOKENS:
        if token in normalized or _compact(token) in compact:
            return True
    return False


def redact_query_params(query: Mapping[str, str]) -> dict[str, str]:
    return {key: REDACTED_VALUE if is_sensitive_key(key) else val for key, val in query.items()}


def redact_dsn(dsn: str) -> str:
    """
    Return ``dsn`` with the password and sensitive query values masked.

    Never raises: text that does not split as a URL is fully masked.
    """

    try:
        parts = urlsplit(dsn)
    except (TypeError, ValueError):
        return REDACTED_VALUE
    if not parts.scheme:
        return REDACTED_VALUE

    netloc = parts.netloc
    userinfo, at, hostport = netloc.rpartition("@")
    if at:
        user, colon, _ = userinfo.partition(":")
        netloc = f"{user}:{REDACTED_VALUE}@{hostport}" if colon else f"{user}@{hostport}"

    query = parts.query
    if query:
        pairs = parse_qsl(query, keep_blank_values=True)
        query = urlencode(
            [(key, REDACTED_VALUE if is_sensitive_key(key) else value) for key, value in pairs],
            safe="*",
            quote_via=quote,
        )

    return urlunsplit((parts.scheme, netloc, parts.path, query, ""))


def redact_value(value: Any, *, key: str | None = None) -> Any:
    if key is not None and is_sensitive_key(str(key)):
        return REDACTED_VALUE
    if isinstance(value, Mapping):
        return {k: redact_value(v, key=str(k)) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [redact_value(item) for item in value]
    return value


def redact_state(state: Mapping[str, Any], sensitive: Iterable[str]) -> dict[str, Any]:
    """Mask the named attributes of a data-source state for logging."""
    hidden = set(sensitive)
    redacted: dict[str, Any] = {}
    for key, value in state.items():
        if key in hidden:
            if value is None:
                redacted[key] = None
            else:
                redacted[key] = redact_dsn(value) if key == "dsn" else REDACTED_VALUE
        else:
            redacted[key] = redact_value(value, key=key)
    return redacted
