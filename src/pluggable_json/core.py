"""Public entry point binding the tree codec to a text codec."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Literal, overload

from pluggable_json.codec import JSONValue
from pluggable_json.codec import TreeCodec
from pluggable_json.exceptions import ConfigError
from pluggable_json.registry import Serializer
from pluggable_json.registry import SerializerDescriptor
from pluggable_json.registry import SerializerRegistry
from pluggable_json.settings import get_global_settings
from pluggable_json.tagging import Tagger
from pluggable_json.text import JsonTextCodec
from pluggable_json.text import TextCodec

logger = logging.getLogger(__name__)


class PluggableJSON:
    """
    JSON codec extended with pluggable serializers.

    Values claimed by a serializer are written as tagged strings of the form
    ``<separator><type><separator><payload>``; every other string is escaped so it can
    never be mistaken for a tagged one. Object keys are written as-is.

    Args:
        serializers: Serializers consulted in order; the first one whose
            ``is_serializable`` accepts a value encodes it.
        separator: Single separator character. If None, uses the separator from the
            global settings (``$`` by default).
        text_codec: Codec used to turn trees into text and back. If None, a
            `JsonTextCodec` configured from the global settings is used.

    Raises:
        ConfigError: If a serializer is incomplete or invalid, two serializers share a
            type, or the separator is unusable.

    Examples:
        >>> import math
        >>> infinity = {
        ...     "type": "infinity",
        ...     "is_serializable": lambda v: v == math.inf,
        ...     "serialize": lambda v: "Infinity",
        ...     "deserialize": lambda s: math.inf,
        ... }
        >>> codec = PluggableJSON([infinity])
        >>> codec.serialize({"limit": math.inf, "name": "a$b"})
        '{"limit": "$infinity$Infinity", "name": "a^$b"}'
        >>> codec.deserialize('{"limit": "$infinity$Infinity", "name": "a^$b"}')
        {'limit': inf, 'name': 'a$b'}
    """

    __slots__ = ("_registry", "_tagger", "_tree_codec", "_text_codec")

    def __init__(
        self,
        serializers: Iterable[Serializer | Mapping[str, Any]] = (),
        separator: str | None = None,
        *,
        text_codec: TextCodec | None = None,
    ) -> None:
        if separator is None:
            separator = get_global_settings().separator

        self._registry = SerializerRegistry(serializers)
        self._tagger = Tagger(separator)
        self._tree_codec = TreeCodec(self._registry, self._tagger)
        self._text_codec = text_codec if text_codec is not None else JsonTextCodec.from_settings()

    @classmethod
    def from_plugins(
        cls,
        *serializers: Serializer | Mapping[str, Any],
        separator: str | None = None,
        builtins: bool = True,
        entry_points: bool = True,
        text_codec: TextCodec | None = None,
    ) -> PluggableJSON:
        """
        Create a codec from explicit, builtin and plugin-provided serializers.

        Serializers are consulted in this order: the explicit *serializers*, then the
        builtin serializers, then those contributed by registered plugins.

        Args:
            *serializers: Serializers that take precedence over all others.
            separator: Separator character, see `PluggableJSON`.
            builtins: Whether to include `pluggable_json.serializers.BUILTIN_SERIALIZERS`.
            entry_points: Whether to load plugins from the ``pluggable_json`` entry-point
                group before collecting plugin serializers.
            text_codec: Text codec, see `PluggableJSON`.

        Returns:
            A new codec instance.
        """
        from pluggable_json.plugins.manager import collect_plugin_serializers
        from pluggable_json.plugins.manager import register_plugins_entry_points
        from pluggable_json.serializers import BUILTIN_SERIALIZERS

        combined: list[Any] = list(serializers)
        if builtins:
            combined.extend(BUILTIN_SERIALIZERS)
        if entry_points:
            register_plugins_entry_points()
        plugin_serializers = collect_plugin_serializers()
        combined.extend(plugin_serializers)

        try:
            return cls(combined, separator, text_codec=text_codec)
        except ConfigError:
            if plugin_serializers:
                logger.warning(
                    f"Invalid serializer configuration with {len(plugin_serializers)} "
                    f"plugin-provided serializer(s); serializers from index "
                    f"{len(combined) - len(plugin_serializers)} on come from plugins"
                )
            raise

    @property
    def serializers(self) -> tuple[SerializerDescriptor, ...]:
        return tuple(self._registry)

    @property
    def registry(self) -> SerializerRegistry:
        return self._registry

    @property
    def tagger(self) -> Tagger:
        return self._tagger

    @property
    def text_codec(self) -> TextCodec:
        return self._text_codec

    @property
    def separator(self) -> str:
        return self._tagger.separator

    @property
    def escape_char(self) -> str:
        return self._tagger.escaper.escape_char

    @overload
    def serialize(self, value: Any, *, to_object: Literal[False] = ...) -> str: ...

    @overload
    def serialize(self, value: Any, *, to_object: Literal[True]) -> JSONValue: ...

    def serialize(self, value: Any, *, to_object: bool = False) -> str | JSONValue:
        """
        Serialize *value* to text, or to a JSON-native tree.

        Args:
            value: Value tree to serialize.
            to_object: If True, return the encoded tree instead of text. The tree holds
                only JSON-native values and can be embedded in a larger structure before
                being written out.

        Raises:
            UnsupportedValueError: If a value is neither JSON-native nor claimed by any
                serializer.
            SerializerError: If a serializer returns something other than a string.
        """
        tree = self._tree_codec.encode(value)
        if to_object:
            return tree
        return self._text_codec.stringify(tree)

    def deserialize(self, data: str | bytes | bytearray | JSONValue) -> Any:
        """
        Deserialize text, or an already-parsed tree, back into values.

        Strings and bytes are always treated as text to parse. Anything else is taken to
        be a tree produced by ``serialize(..., to_object=True)``.

        Raises:
            TextCodecError: If text cannot be parsed.
            FormatError: If a tagged string is malformed.
            UnknownTypeError: If a tagged string names an unregistered type.
        """
        if isinstance(data, (str, bytes, bytearray)):
            data = self._text_codec.parse(data)
        return self._tree_codec.decode(data)

    def __repr__(self) -> str:
        return (
            f"PluggableJSON(types={list(self._registry.types)!r}, "
            f"separator={self.separator!r})"
        )
