"""Recursive encoding and decoding of value trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pluggable_json.exceptions import SerializerError
from pluggable_json.exceptions import UnknownTypeError
from pluggable_json.exceptions import UnsupportedValueError
from pluggable_json.registry import SerializerRegistry
from pluggable_json.tagging import Tagger

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


class TreeCodec:
    """
    Maps value trees to JSON-native trees and back.

    Encoding consults the registry before looking at the shape of a value, so a
    serializer may claim lists or dicts as well as opaque objects. Mapping keys are
    passed through untouched; only values carry tags.

    Cyclic structures are not supported and recurse until the interpreter's recursion
    limit is hit.
    """

    __slots__ = ("_registry", "_tagger")

    def __init__(self, registry: SerializerRegistry, tagger: Tagger) -> None:
        self._registry = registry
        self._tagger = tagger

    def encode(self, value: Any) -> JSONValue:
        """
        Encode *value* into a tree containing only JSON-native values.

        Raises:
            SerializerError: If a serializer returns something other than a string.
            UnsupportedValueError: If a value is neither JSON-native nor claimed by any
                serializer.
        """
        descriptor = self._registry.lookup_by_value(value)
        if descriptor is not None:
            payload = descriptor.serialize(value)
            if not isinstance(payload, str):
                raise SerializerError(
                    f"Serializer '{descriptor.type}' returned {type(payload).__name__}, "
                    f"expected str"
                )
            return self._tagger.encode_tagged(descriptor.type, payload)

        if isinstance(value, (list, tuple)):
            return [self.encode(item) for item in value]

        if isinstance(value, Mapping):
            encoded = {}
            for key, entry in value.items():
                if not isinstance(key, str):
                    raise UnsupportedValueError(
                        f"Mapping keys must be str, got key {key!r} of type "
                        f"{type(key).__qualname__!r}"
                    )
                encoded[key] = self.encode(entry)
            return encoded

        if isinstance(value, str):
            return self._tagger.encode_plain(value)

        if value is None or isinstance(value, (bool, int, float)):
            return value

        raise UnsupportedValueError(
            f"No serializer registered for value of type {type(value).__qualname__!r}"
        )

    def decode(self, value: Any) -> Any:
        """
        Decode a JSON-native tree produced by `encode`.

        Raises:
            FormatError: If a tagged string has no type/payload boundary.
            UnknownTypeError: If a tag names a type missing from the registry.
        """
        if isinstance(value, str):
            tag, payload = self._tagger.decode(value)
            if tag is None:
                return payload
            descriptor = self._registry.lookup_by_type(tag)
            if descriptor is None:
                raise UnknownTypeError(tag)
            return descriptor.deserialize(payload)

        if isinstance(value, list):
            return [self.decode(item) for item in value]

        if isinstance(value, Mapping):
            return {key: self.decode(entry) for key, entry in value.items()}

        return value
