"""Text codec port and its JSON implementation."""

from __future__ import annotations

import json
from typing import Any, Protocol

from typing_extensions import override

from pluggable_json.exceptions import TextCodecError
from pluggable_json.settings import PluggableJSONSettings
from pluggable_json.settings import get_global_settings


class TextCodec(Protocol):
    """
    Converts between text and JSON-native trees.

    Implementations must be pure and must not interpret tagged strings; they only see
    the already-encoded tree.
    """

    def parse(self, text: str | bytes | bytearray) -> Any:
        """Parse text into a tree of dicts, lists and scalars."""

    def stringify(self, tree: Any) -> str:
        """Render a tree of dicts, lists and scalars as text."""


class JsonTextCodec(TextCodec):
    """
    Standard library `json` implementation of the TextCodec interface.

    Args:
        indent: Indentation for pretty output, or None for compact output.
        sort_keys: Whether object keys are sorted.
        ensure_ascii: Whether non-ASCII characters are escaped.
        allow_nan: Whether bare NaN/Infinity literals are accepted on output.
    """

    def __init__(
        self,
        indent: int | str | None = None,
        sort_keys: bool = False,
        ensure_ascii: bool = True,
        allow_nan: bool = True,
    ) -> None:
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii
        self.allow_nan = allow_nan

    @classmethod
    def from_settings(cls, settings: PluggableJSONSettings | None = None) -> JsonTextCodec:
        """Create a codec from the given settings, or from the global settings."""
        settings = settings or get_global_settings()
        return cls(
            indent=settings.indent,
            sort_keys=settings.sort_keys,
            ensure_ascii=settings.ensure_ascii,
            allow_nan=settings.allow_nan,
        )

    @override
    def parse(self, text: str | bytes | bytearray) -> Any:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TextCodecError(f"Invalid JSON text: {e}") from e

    @override
    def stringify(self, tree: Any) -> str:
        try:
            return json.dumps(
                tree,
                indent=self.indent,
                sort_keys=self.sort_keys,
                ensure_ascii=self.ensure_ascii,
                allow_nan=self.allow_nan,
            )
        except ValueError as e:
            raise TextCodecError(f"Cannot render value tree as JSON: {e}") from e

    def __repr__(self) -> str:
        return f"JsonTextCodec(indent={self.indent!r}, sort_keys={self.sort_keys!r})"
