"""
Error hierarchy for DSN building and parsing.
"""


class DSNError(ValueError):
    """Base error for dbdsn failures."""


class DSNConfigurationError(DSNError):
    """Raised when environment or settings values are missing or invalid."""


class DSNParseError(DSNError):
    """Base error for DSN strings that cannot be decoded."""


class MalformedDSNError(DSNParseError):
    """Raised when the input cannot be parsed under the generic URL grammar."""


class InvalidPortError(DSNParseError):
    """Raised when a port segment is present but is not a base-10 integer."""

    def __init__(self, port: str) -> None:
        self.port = port
        super().__init__(f"Unable to parse port '{port}': not a base-10 integer")
