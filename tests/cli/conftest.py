"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore the ``pluggable_json`` logger after ``--verbose`` runs attach a rich handler."""
    logger = logging.getLogger("pluggable_json")
    saved = (logger.level, logger.handlers[:])

    yield

    logger.setLevel(saved[0])
    logger.handlers = saved[1]


@pytest.fixture
def write_json(tmp_path):
    """Write text to a JSON file and return its path."""

    def _write(text: str, name: str = "payload.json") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
