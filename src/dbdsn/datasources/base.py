"""
Data-source schema, diagnostics and the read protocol.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Protocol

from ..core.errors import DSNError

STRING = "string"
INT = "int"
MAP = "map"

ERROR = "error"
WARNING = "warning"


class ConfigValidationError(DSNError):
    """
    Aggregated configuration error storing attribute-to-messages mapping.
    """

    def __init__(self, errors: Mapping[str, List[str]]) -> None:
        self.errors: Dict[str, List[str]] = {
            key: list(messages) for key, messages in errors.items()
        }
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        segments = []
        for name, messages in self.errors.items():
            segments.append(f"{name}: {'; '.join(messages)}")
        return "; ".join(segments)


def _is_utf8(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass(frozen=True)
class Attribute:
    name: str
    type: str
    description: str
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False

    def check_type(self, value: Any) -> str | None:
        if self.type == STRING:
            if not isinstance(value, str):
                return f"Expected a string, got {type(value).__name__}."
            if not _is_utf8(value):
                return "Value is not valid UTF-8 text."
        if self.type == INT and (isinstance(value, bool) or not isinstance(value, int)):
            return f"Expected an integer, got {type(value).__name__}."
        if self.type == MAP:
            if not isinstance(value, Mapping):
                return f"Expected a map of strings, got {type(value).__name__}."
            for key, item in value.items():
                if not isinstance(key, str):
                    return f"Map keys must be strings, got {type(key).__name__}."
                if not isinstance(item, str):
                    return f"Map entries must be strings, got {type(item).__name__} for key {key!r}."
                if not (_is_utf8(key) and _is_utf8(item)):
                    return f"Map entry for key {key!r} is not valid UTF-8 text."
        return None


@dataclass(frozen=True)
class DataSourceSchema:
    description: str
    attributes: tuple[Attribute, ...]

    def attribute(self, name: str) -> Attribute:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        raise KeyError(name)

    def names(self) -> list[str]:
        return [attribute.name for attribute in self.attributes]

    def sensitive_attributes(self) -> list[str]:
        return [attribute.name for attribute in self.attributes if attribute.sensitive]

    def validate(self, config: Mapping[str, Any]) -> None:
        errors: Dict[str, List[str]] = {}
        known = {attribute.name: attribute for attribute in self.attributes}

        for key in config:
            if key not in known:
                _add_error(errors, key, "Unsupported attribute.")

        for attribute in self.attributes:
            value = config.get(attribute.name)
            if attribute.computed and not (attribute.required or attribute.optional):
                if value is not None:
                    _add_error(errors, attribute.name, "Value is computed and cannot be set.")
                continue
            if value is None:
                if attribute.required:
                    _add_error(errors, attribute.name, "This attribute is required.")
                continue
            problem = attribute.check_type(value)
            if problem:
                _add_error(errors, attribute.name, problem)

        if errors:
            raise ConfigValidationError(errors)


@dataclass(frozen=True)
class Diagnostic:
    severity: str
    summary: str
    detail: str = ""


@dataclass
class ReadResponse:
    state: Dict[str, Any] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def add_error(self, summary: str, detail: str) -> None:
        self.diagnostics.append(Diagnostic(ERROR, summary, detail))

    def add_warning(self, summary: str, detail: str) -> None:
        self.diagnostics.append(Diagnostic(WARNING, summary, detail))

    def has_error(self) -> bool:
        return any(diagnostic.severity == ERROR for diagnostic in self.diagnostics)


class DataSource(Protocol):
    """
    Read-only lookup exposed by the provider.
    """

    type_suffix: str

    def type_name(self, provider_type_name: str) -> str:
        """
        Return the fully qualified type name under the given provider.
        """

    def schema(self) -> DataSourceSchema:
        """
        Describe the accepted configuration and computed outputs.
        """

    def read(self, config: Mapping[str, Any]) -> ReadResponse:
        """
        Compute the state for ``config``; failures are reported as diagnostics.
        """


def _add_error(errors: Dict[str, List[str]], name: str, message: str) -> None:
    errors.setdefault(name, []).append(message)


def validation_diagnostics(response: ReadResponse, exc: ConfigValidationError) -> None:
    for name, messages in exc.errors.items():
        for message in messages:
            response.add_error("Invalid Configuration", f"{name}: {message}")
