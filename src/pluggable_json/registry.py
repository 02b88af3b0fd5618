"""Validation and lookup of pluggable serializers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from pluggable_json.escaping import ESCAPE_CHAR
from pluggable_json.exceptions import DuplicateTypeError
from pluggable_json.exceptions import InvalidSerializerError
from pluggable_json.exceptions import MissingFieldsError

logger = logging.getLogger(__name__)

REQUIRED_SERIALIZER_FIELDS = ("type", "is_serializable", "serialize", "deserialize")


@runtime_checkable
class Serializer(Protocol):
    """
    Converter between a value JSON cannot represent and a string payload.

    ``is_serializable`` should be as strict as possible: serializers are consulted in
    registration order and the first one claiming a value wins.
    """

    type: str

    def is_serializable(self, value: Any) -> bool: ...

    def serialize(self, value: Any) -> str: ...

    def deserialize(self, payload: str) -> Any: ...


@dataclass(frozen=True)
class SerializerDescriptor:
    """Immutable, validated view of a registered serializer."""

    type: str
    is_serializable: Callable[[Any], bool]
    serialize: Callable[[Any], str]
    deserialize: Callable[[str], Any]

    def __repr__(self) -> str:
        return f"SerializerDescriptor(type={self.type!r})"


def _get_field(serializer: Any, name: str) -> Any:
    if isinstance(serializer, Mapping):
        return serializer.get(name)
    return getattr(serializer, name, None)


def _missing_fields(serializer: Any) -> list[str]:
    return [name for name in REQUIRED_SERIALIZER_FIELDS if _get_field(serializer, name) is None]


def _to_descriptor(index: int, serializer: Any) -> SerializerDescriptor:
    type_name = _get_field(serializer, "type")
    if not isinstance(type_name, str) or not type_name:
        raise InvalidSerializerError(index, f"type must be a non-empty string, got {type_name!r}")
    if type_name.endswith(ESCAPE_CHAR):
        raise InvalidSerializerError(
            index, f"type '{type_name}' must not end with the escape character '{ESCAPE_CHAR}'"
        )

    functions = {}
    for name in REQUIRED_SERIALIZER_FIELDS[1:]:
        func = _get_field(serializer, name)
        if not callable(func):
            raise InvalidSerializerError(index, f"{name} must be callable")
        functions[name] = func

    if isinstance(serializer, SerializerDescriptor):
        return serializer
    return SerializerDescriptor(type=type_name, **functions)


class SerializerRegistry:
    """
    Ordered, read-only collection of serializers.

    The registry is built once from a sequence of serializers and never changes
    afterwards. Validation is all-or-nothing: every serializer is first checked for the
    required members, then types are checked for uniqueness across the whole set.

    Args:
        serializers: Objects or mappings providing ``type``, ``is_serializable``,
            ``serialize`` and ``deserialize``.

    Raises:
        MissingFieldsError: If a serializer lacks one or more required members.
        InvalidSerializerError: If a member is present but unusable.
        DuplicateTypeError: If two serializers declare the same type.
    """

    __slots__ = ("_descriptors", "_by_type")

    def __init__(self, serializers: Iterable[Serializer | Mapping[str, Any]] = ()) -> None:
        serializers = list(serializers)

        for index, serializer in enumerate(serializers):
            if missing := _missing_fields(serializer):
                raise MissingFieldsError(index, missing)

        descriptors = tuple(
            _to_descriptor(index, serializer) for index, serializer in enumerate(serializers)
        )

        by_type: dict[str, SerializerDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.type in by_type:
                raise DuplicateTypeError(descriptor.type)
            by_type[descriptor.type] = descriptor

        self._descriptors = descriptors
        self._by_type = by_type
        logger.debug(f"Built serializer registry with types: {list(by_type)}")

    @property
    def types(self) -> tuple[str, ...]:
        """Registered types in registration order."""
        return tuple(descriptor.type for descriptor in self._descriptors)

    def lookup_by_value(self, value: Any) -> SerializerDescriptor | None:
        """Return the first serializer, in registration order, that claims *value*."""
        for descriptor in self._descriptors:
            if descriptor.is_serializable(value):
                return descriptor
        return None

    def lookup_by_type(self, tag: str) -> SerializerDescriptor | None:
        return self._by_type.get(tag)

    def __iter__(self) -> Iterator[SerializerDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, tag: object) -> bool:
        return tag in self._by_type

    def __repr__(self) -> str:
        return f"SerializerRegistry(types={list(self.types)!r})"
