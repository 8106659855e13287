"""Error types for chartype.

Every error derives from ChartypeError. The value errors also derive from
ValueError so pydantic validators report them as validation failures.
"""

from typing import Any


class ChartypeError(Exception):
    """Base class for all chartype errors."""


class InvalidFieldError(ChartypeError, ValueError):
    """A field identifier is outside its closed set.

    Attributes:
        field_type: The enumeration the value was checked against.
        value: The rejected code, member or token.
    """

    def __init__(self, field_type: type, value: Any) -> None:
        self.field_type = field_type
        self.value = value
        label = getattr(field_type, "label", lambda: field_type.__name__)()
        super().__init__(f"invalid {label} field: {value!r}")


class MalformedPayloadError(ChartypeError, ValueError):
    """A structured payload is not a JSON string scalar."""

    def __init__(self, payload: Any, reason: str) -> None:
        self.payload = payload
        self.reason = reason
        super().__init__(f"malformed payload {payload!r}: {reason}")


class DecimalParseError(ChartypeError, ValueError):
    """A raw token could not be parsed as a finite decimal.

    Attributes:
        field: Name of the record attribute being parsed.
        value: The raw text that failed to parse.
    """

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"can't parse {field}: {value!r} is not a decimal")


class ConfigError(ChartypeError):
    """Configuration file could not be loaded."""
