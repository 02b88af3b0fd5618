from __future__ import annotations

import threading
from dataclasses import dataclass

_GLOBAL_PLUGGABLE_JSON_SETTINGS: PluggableJSONSettings | None = None
_SETTINGS_LOCK = threading.RLock()


@dataclass(frozen=True)
class PluggableJSONSettings:
    """Configuration settings for pluggable_json."""

    separator: str = "$"
    """
    Separator character used when a codec is created without an explicit separator.

    Must be a single character other than the escape character ``^``.
    """

    indent: int | str | None = None
    """Indentation passed to the JSON encoder. If None, output is compact."""

    sort_keys: bool = False
    """Whether the JSON encoder sorts object keys."""

    ensure_ascii: bool = True
    """Whether the JSON encoder escapes all non-ASCII characters."""

    allow_nan: bool = True
    """
    Whether bare non-finite floats may be written as ``NaN``/``Infinity`` literals.

    Register the ``float`` builtin serializer to encode them as tagged strings instead.
    """


def get_global_settings() -> PluggableJSONSettings:
    """
    Get the global pluggable_json settings instance (thread-safe).

    If no global settings have been set, returns a default instance.
    """
    with _SETTINGS_LOCK:
        global _GLOBAL_PLUGGABLE_JSON_SETTINGS
        if _GLOBAL_PLUGGABLE_JSON_SETTINGS is None:
            _GLOBAL_PLUGGABLE_JSON_SETTINGS = PluggableJSONSettings()
        return _GLOBAL_PLUGGABLE_JSON_SETTINGS


def set_global_settings(settings: PluggableJSONSettings) -> None:
    """
    Set the global pluggable_json settings instance (thread-safe).

    Note: Settings are read when a codec is constructed. Codecs created before the
    change keep the separator and JSON options they were built with.

    Args:
        settings (PluggableJSONSettings): Settings to set as global.
    """
    with _SETTINGS_LOCK:
        global _GLOBAL_PLUGGABLE_JSON_SETTINGS
        _GLOBAL_PLUGGABLE_JSON_SETTINGS = settings


def reset_global_settings() -> None:
    """Discard any global settings so the next lookup returns the defaults."""
    with _SETTINGS_LOCK:
        global _GLOBAL_PLUGGABLE_JSON_SETTINGS
        _GLOBAL_PLUGGABLE_JSON_SETTINGS = None
