"""Utility functions to manage the project-wide plugin configuration."""

import logging
from inspect import isclass
from typing import Any

from pluggy import PluginManager

from .hooks.markers import HOOK_NAMESPACE
from .hooks.specs import SerializerSpec

logger = logging.getLogger(__name__)

_PLUGIN_ENTRY_POINT = "pluggable_json"  # entry-point group to load plugins from
_PLUGIN_MANAGER: PluginManager | None = None


# region API


def register_plugins(*plugins: Any, _plugin_manager: PluginManager | None = None) -> None:
    """Register plugin instances contributing serializers."""
    plugin_manager = _plugin_manager if _plugin_manager else _get_global_plugin_manager()
    for plugin in plugins:
        if not plugin_manager.is_registered(plugin):
            if isclass(plugin):
                raise TypeError(
                    "pluggable_json expects plugins to be registered as instances. "
                    "Have you forgotten the `()` when registering a plugin class?"
                )
            plugin_manager.register(plugin)


def register_plugins_entry_points(_plugin_manager: PluginManager | None = None) -> int:
    """
    Register pluggable_json plugins from Python package entrypoints.

    Returns:
        Number of plugins loaded from entry points.
    """
    plugin_manager = _plugin_manager if _plugin_manager else _get_global_plugin_manager()
    count = plugin_manager.load_setuptools_entrypoints(_PLUGIN_ENTRY_POINT)  # Doesn't use setuptools
    logger.debug(f"Loaded {count} plugin(s) from entry point group '{_PLUGIN_ENTRY_POINT}'")
    return count


def collect_plugin_serializers(_plugin_manager: PluginManager | None = None) -> list[Any]:
    """
    Collect the serializers contributed by every registered plugin.

    Plugins are consulted in registration order, and each plugin's serializers keep the
    order the plugin returned them in.

    Args:
        _plugin_manager: Manager to query. Defaults to the global plugin manager.

    Returns:
        Flat list of serializers, not yet validated.
    """
    plugin_manager = _plugin_manager if _plugin_manager else _get_global_plugin_manager()
    # pluggy calls implementations last-registered first
    results = reversed(plugin_manager.hook.pluggable_json_serializers())

    serializers: list[Any] = []
    for contributed in results:
        if contributed:
            serializers.extend(contributed)

    logger.debug(f"Collected {len(serializers)} serializer(s) from plugins")
    return serializers


def reset_global_plugin_manager() -> None:
    """Discard the global plugin manager; the next use creates a fresh one."""
    global _PLUGIN_MANAGER
    _PLUGIN_MANAGER = None


# region Helpers


def _initialize_plugin_system() -> PluginManager:
    """Initializes the global plugin manager for the pluggable_json library."""
    manager = _create_plugin_manager()
    global _PLUGIN_MANAGER
    _PLUGIN_MANAGER = manager
    return manager


def _get_global_plugin_manager() -> PluginManager:
    """Returns the initialized global plugin manager, creating it on first use."""
    plugin_manager = _PLUGIN_MANAGER
    if plugin_manager is None:
        plugin_manager = _initialize_plugin_system()
    return plugin_manager


def _create_plugin_manager() -> PluginManager:
    """Create a new PluginManager instance and register pluggable_json's hook specs."""
    manager = PluginManager(HOOK_NAMESPACE)
    manager.trace.root.setwriter(
        logger.debug if logger.getEffectiveLevel() == logging.DEBUG else None
    )
    manager.enable_tracing()
    manager.add_hookspecs(SerializerSpec)
    return manager
