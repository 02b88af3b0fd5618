"""CLI ``serializers`` command listing the available serializer types."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from pluggable_json.cli._shared import build_codec


@click.command("serializers")
@click.option("--no-builtins", is_flag=True, help="Do not include the builtin serializers.")
@click.option("--no-plugins", is_flag=True, help="Do not load serializers from installed plugins.")
def list_serializers(no_builtins: bool, no_plugins: bool) -> None:
    r"""
    List the serializer types available to the other commands.

    Types are listed in lookup order: when several serializers accept the same value,
    the one listed first encodes it.

    Examples:
    \b
    # Builtin and plugin serializers
    pluggable-json serializers

    \b
    # Only serializers contributed by installed plugins
    pluggable-json serializers --no-builtins
    """
    codec = build_codec(None, no_builtins, no_plugins)

    if not codec.serializers:
        click.echo("No serializers found.")
        return

    table = Table("#", "Type", "Module")
    for index, descriptor in enumerate(codec.serializers):
        origin = getattr(descriptor.is_serializable, "__module__", None) or "?"
        table.add_row(str(index), descriptor.type, origin)

    Console().print(table)
