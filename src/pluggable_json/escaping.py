"""Escaping of the separator character inside arbitrary text."""

from __future__ import annotations

from pluggable_json.exceptions import ConfigError

ESCAPE_CHAR = "^"
DEFAULT_SEPARATOR = "$"


def validate_separator(separator: object) -> str:
    """
    Checks that a separator can be used by the codec.

    Args:
        separator: Candidate separator.

    Returns:
        The separator, unchanged.

    Raises:
        ConfigError: If the separator is not a single character or collides with the
            escape character.
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise ConfigError(f"Separator must be a single character, got {separator!r}")
    if separator == ESCAPE_CHAR:
        raise ConfigError(f"Separator must differ from the escape character '{ESCAPE_CHAR}'")
    return separator


class Escaper:
    """
    Escapes and unescapes a single reserved separator character.

    Every separator in the input is prefixed with the escape character. The escape
    character itself is left untouched, which keeps ordinary text readable while still
    guaranteeing ``unescape(escape(s)) == s``: each separator in escaped text is
    immediately preceded by an inserted escape character, so the pairs never overlap
    with escape characters that were already present.
    """

    __slots__ = ("_separator", "_escaped_separator")

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self._separator = validate_separator(separator)
        self._escaped_separator = ESCAPE_CHAR + separator

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def escape_char(self) -> str:
        return ESCAPE_CHAR

    def escape(self, text: str) -> str:
        """Replace every separator in *text* with the escape sequence."""
        return text.replace(self._separator, self._escaped_separator)

    def unescape(self, text: str) -> str:
        """Replace every escape sequence in *text* with a bare separator, left to right."""
        return text.replace(self._escaped_separator, self._separator)

    def __repr__(self) -> str:
        return f"Escaper(separator={self._separator!r})"
