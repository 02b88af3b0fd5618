"""Conftest for all pytest configuration - fixtures and hooks."""

import pytest

from pluggable_json.plugins.manager import reset_global_plugin_manager
from pluggable_json.settings import reset_global_settings


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset global settings and the global plugin manager around each test."""
    reset_global_settings()
    reset_global_plugin_manager()

    yield

    reset_global_settings()
    reset_global_plugin_manager()
