"""
Assemble a DSN string from a ConnectionSpec.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote, urlencode

from ..security.redaction import redact_dsn
from .spec import ConnectionSpec, fingerprint

# Characters left unescaped on top of the RFC 3986 unreserved set.
_USERINFO_SAFE = "$&+,;="
_HOST_SAFE = "!$&'()*+,;=:[]"
_PATH_SAFE = "/$&+,:;=@"

logger = logging.getLogger("dbdsn.core.builder")


@dataclass(frozen=True)
class BuildResult:
    dsn: str
    fingerprint: str


def _userinfo(spec: ConnectionSpec) -> str:
    if spec.user is None:
        if spec.password is not None:
            logger.warning(
                "Password supplied without a user for driver '%s'; it will not appear in the DSN",
                spec.driver,
            )
        return ""
    userinfo = quote(spec.user, safe=_USERINFO_SAFE)
    if spec.password is not None:
        userinfo += ":" + quote(spec.password, safe=_USERINFO_SAFE)
    return userinfo + "@"


def _authority(spec: ConnectionSpec) -> str:
    authority = quote(spec.host or "", safe=_HOST_SAFE)
    if spec.port is not None:
        authority += f":{spec.port}"
    return authority


def _query(spec: ConnectionSpec) -> str:
    pairs = spec.sorted_params()
    if not pairs:
        return ""
    return urlencode(pairs)


def build_dsn(spec: ConnectionSpec) -> BuildResult:
    """
    Serialize ``spec`` as ``scheme://[user[:password]@]host:port/name[?query]``.

    No field is validated: empty strings are serialized as they are. Query
    parameters are emitted sorted by key so the DSN, and therefore its
    fingerprint, does not depend on the iteration order of ``spec.params``.
    """

    dsn = f"{spec.driver}:" if spec.driver else ""
    dsn += "//" + _userinfo(spec) + _authority(spec)
    dsn += quote("/" + (spec.name or ""), safe=_PATH_SAFE)
    query = _query(spec)
    if query:
        dsn += f"?{query}"

    digest = fingerprint(dsn)
    logger.debug("Built DSN %s (id=%s)", redact_dsn(dsn), digest)
    return BuildResult(dsn=dsn, fingerprint=digest)
