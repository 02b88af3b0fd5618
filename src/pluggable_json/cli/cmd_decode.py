"""CLI ``decode`` command: pretty print the values in a JSON document."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console
from rich.pretty import Pretty

from pluggable_json.cli._shared import build_codec
from pluggable_json.cli._shared import codec_options
from pluggable_json.exceptions import PluggableJSONError


@click.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@codec_options
def decode(file: Any, separator: str | None, no_builtins: bool, no_plugins: bool) -> None:
    r"""
    Decode a JSON document and pretty print the resulting values.

    FILE is a path to a JSON document, or '-' (the default) to read from stdin.

    Examples:
    \b
    # Decode a file
    pluggable-json decode payload.json

    \b
    # Decode from stdin with a custom separator
    echo '{"when": "~date~2024-01-02"}' | pluggable-json decode -s '~'
    """
    codec = build_codec(separator, no_builtins, no_plugins)

    try:
        value = codec.deserialize(file.read())
    except PluggableJSONError as e:
        raise click.ClickException(f"Cannot decode {file.name}: {e}") from e

    Console().print(Pretty(value))
