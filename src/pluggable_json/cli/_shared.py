"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from pluggable_json.core import PluggableJSON
from pluggable_json.exceptions import PluggableJSONError

F = TypeVar("F", bound=Callable[..., Any])


def codec_options(func: F) -> F:
    """Add the options controlling which serializers a command's codec uses."""
    func = click.option(
        "--no-plugins",
        is_flag=True,
        help="Do not load serializers from installed plugins.",
    )(func)
    func = click.option(
        "--no-builtins",
        is_flag=True,
        help="Do not include the builtin serializers.",
    )(func)
    func = click.option(
        "-s",
        "--separator",
        default=None,
        help="Separator character (defaults to the global setting, '$').",
    )(func)
    return func


def build_codec(separator: str | None, no_builtins: bool, no_plugins: bool) -> PluggableJSON:
    """
    Create the codec for a CLI invocation.

    Raises:
        click.ClickException: If the serializers or the separator are invalid.
    """
    try:
        return PluggableJSON.from_plugins(
            separator=separator,
            builtins=not no_builtins,
            entry_points=not no_plugins,
        )
    except PluggableJSONError as e:
        raise click.ClickException(f"Invalid codec configuration: {e}") from e
