"""pluggable-json CLI - Command-line interface for pluggable_json."""

from __future__ import annotations

from pluggable_json.cli.base import cli

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
