"""CLI ``check`` command: validate tagged strings without decoding payloads."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import click

from pluggable_json.cli._shared import build_codec
from pluggable_json.cli._shared import codec_options
from pluggable_json.core import PluggableJSON
from pluggable_json.exceptions import PluggableJSONError
from pluggable_json.exceptions import UnknownTypeError


def _iter_strings(tree: Any, path: str = "$") -> Iterator[tuple[str, str]]:
    """Yield ``(json_path, string)`` for every string value in *tree*; keys are skipped."""
    if isinstance(tree, str):
        yield path, tree
    elif isinstance(tree, list):
        for index, item in enumerate(tree):
            yield from _iter_strings(item, f"{path}[{index}]")
    elif isinstance(tree, dict):
        for key, entry in tree.items():
            yield from _iter_strings(entry, f"{path}.{key}")


def find_tag_errors(codec: PluggableJSON, tree: Any) -> list[tuple[str, PluggableJSONError]]:
    """
    Checks every tagged string in an encoded tree without deserializing any payload.

    Args:
        codec: Codec whose separator and serializers the tree was written with.
        tree: Parsed JSON tree.

    Returns:
        ``(json_path, error)`` pairs for malformed tags and unknown types, in document order.
    """
    tagger = codec.tagger
    errors: list[tuple[str, PluggableJSONError]] = []
    for path, text in _iter_strings(tree):
        try:
            tag, _ = tagger.decode(text)
        except PluggableJSONError as e:
            errors.append((path, e))
            continue
        if tag is not None and tag not in codec.registry:
            errors.append((path, UnknownTypeError(tag)))
    return errors


@click.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@codec_options
def check(file: Any, separator: str | None, no_builtins: bool, no_plugins: bool) -> None:
    r"""
    Check that every tagged string in a JSON document can be decoded.

    Reports malformed tagged strings and types with no registered serializer. Payloads
    are not deserialized. Exits with status 1 if any problem is found.

    Examples:
    \b
    pluggable-json check payload.json
    """
    codec = build_codec(separator, no_builtins, no_plugins)

    try:
        tree = codec.text_codec.parse(file.read())
    except PluggableJSONError as e:
        raise click.ClickException(f"Cannot parse {file.name}: {e}") from e

    errors = find_tag_errors(codec, tree)
    if not errors:
        click.echo("OK: no problems found.")
        return

    for path, error in errors:
        click.echo(f"{path}: {error}", err=True)
    raise click.ClickException(f"{len(errors)} problem(s) found in {file.name}")
