"""
Tagged string wire representation.

A value produced by a serializer travels as a single string::

    <SEP><escaped type><SEP><escaped payload>

Plain strings are escaped so they never begin with a bare separator, which makes the
leading character the sole discriminator between the two shapes.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from pluggable_json.escaping import DEFAULT_SEPARATOR
from pluggable_json.escaping import Escaper
from pluggable_json.exceptions import FormatError


class TaggedValue(NamedTuple):
    """Result of decoding a wire string."""

    tag: str | None
    """Unescaped type tag, or None for a plain string."""

    value: str
    """Unescaped payload (tagged) or literal (plain)."""


class _ScanState(enum.Enum):
    NORMAL = enum.auto()
    JUST_SAW_ESCAPE = enum.auto()


class Tagger:
    """Builds and parses tagged strings for a fixed separator."""

    __slots__ = ("_escaper",)

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self._escaper = Escaper(separator)

    @property
    def escaper(self) -> Escaper:
        return self._escaper

    @property
    def separator(self) -> str:
        return self._escaper.separator

    def encode_tagged(self, tag: str, payload: str) -> str:
        """Return ``SEP + escape(tag) + SEP + escape(payload)``."""
        sep = self._escaper.separator
        return sep + self._escaper.escape(tag) + sep + self._escaper.escape(payload)

    def encode_plain(self, literal: str) -> str:
        """Return the escaped literal; it never starts with a bare separator."""
        return self._escaper.escape(literal)

    def is_tagged(self, text: str) -> bool:
        return text.startswith(self._escaper.separator)

    def decode(self, text: str) -> TaggedValue:
        """
        Split a wire string into its tag and value.

        Args:
            text: String produced by `encode_tagged` or `encode_plain`.

        Returns:
            A `TaggedValue`; ``tag`` is None for plain strings.

        Raises:
            FormatError: If *text* starts with the separator but has no live separator
                between the type and the payload.
        """
        if not self.is_tagged(text):
            return TaggedValue(None, self._escaper.unescape(text))

        boundary = self._find_boundary(text)
        if boundary is None:
            raise FormatError(text)

        return TaggedValue(
            self._escaper.unescape(text[1:boundary]),
            self._escaper.unescape(text[boundary + 1 :]),
        )

    def _find_boundary(self, text: str) -> int | None:
        """Index of the first separator after position 0 not preceded by the escape char."""
        sep = self._escaper.separator
        esc = self._escaper.escape_char
        state = _ScanState.NORMAL

        for index in range(1, len(text)):
            char = text[index]
            if state is _ScanState.NORMAL:
                if char == sep:
                    return index
                if char == esc:
                    state = _ScanState.JUST_SAW_ESCAPE
            elif char != esc:
                # Escaped separator or ordinary char; either way the escape is consumed.
                state = _ScanState.NORMAL

        return None

    def __repr__(self) -> str:
        return f"Tagger(separator={self.separator!r})"
