"""Security helpers for dbdsn."""

from .redaction import REDACTED_VALUE, redact_dsn, redact_query_params, redact_state

__all__ = ["REDACTED_VALUE", "redact_dsn", "redact_query_params", "redact_state"]
