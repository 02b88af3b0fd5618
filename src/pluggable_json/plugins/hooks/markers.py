"""Markers for pluggable_json pluggy hook specifications and implementations."""

import pluggy

HOOK_NAMESPACE = "pluggable_json"

hook_spec = pluggy.HookspecMarker(HOOK_NAMESPACE)
hook_impl = pluggy.HookimplMarker(HOOK_NAMESPACE)
