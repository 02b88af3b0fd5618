from pluggable_json.plugins.manager import collect_plugin_serializers
from pluggable_json.plugins.manager import register_plugins
from pluggable_json.plugins.manager import register_plugins_entry_points
from pluggable_json.plugins.manager import reset_global_plugin_manager

from .hooks.markers import hook_impl

__all__ = [
    "collect_plugin_serializers",
    "hook_impl",
    "register_plugins",
    "register_plugins_entry_points",
    "reset_global_plugin_manager",
]
