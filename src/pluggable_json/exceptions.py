"""
Centralized exception classes for the pluggable_json library.

All pluggable_json-specific exceptions inherit from PluggableJSONError for easy catching.
"""

from __future__ import annotations

from collections.abc import Sequence


class PluggableJSONError(Exception):
    """Base exception for all pluggable_json errors."""


class ConfigError(PluggableJSONError):
    """Raised when a codec is constructed with an invalid configuration."""


class MissingFieldsError(ConfigError):
    """Raised when a serializer does not provide all of the required members."""

    def __init__(self, index: int, fields: Sequence[str]) -> None:
        self.index = index
        self.fields = tuple(fields)
        super().__init__(
            f"Serializer {index} is missing required field(s): {', '.join(self.fields)}"
        )


class DuplicateTypeError(ConfigError):
    """Raised when two serializers declare the same type."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Multiple serializers registered for type '{type_name}'")


class InvalidSerializerError(ConfigError):
    """Raised when a serializer provides all members but one of them is unusable."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        super().__init__(f"Serializer {index} is invalid: {reason}")


class FormatError(PluggableJSONError, ValueError):
    """Raised when a tagged string has no boundary between its type and its payload."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Malformed tagged string, no type/payload boundary found: {value!r}")


class UnknownTypeError(PluggableJSONError, LookupError):
    """Raised when a tagged string names a type no registered serializer handles."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"No serializer registered for type '{type_name}'")


class UnsupportedValueError(PluggableJSONError, TypeError):
    """Raised when a value is neither JSON-native nor claimed by any serializer."""


class SerializerError(PluggableJSONError):
    """Raised when a serializer breaks its contract while encoding a value."""


class TextCodecError(PluggableJSONError, ValueError):
    """Raised when input text cannot be parsed into a value tree."""
