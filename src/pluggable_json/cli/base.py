from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

import pluggable_json
from pluggable_json.cli.cmd_check import check
from pluggable_json.cli.cmd_decode import decode
from pluggable_json.cli.cmd_serializers import list_serializers


def _configure_logging(verbose: bool) -> None:
    """Route pluggable_json log records through a rich handler when verbose."""
    if not verbose:
        return
    logger = logging.getLogger("pluggable_json")
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False))
    logger.setLevel(logging.DEBUG)


@click.group(context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120})
@click.version_option(version=pluggable_json.__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """pluggable-json - Inspect JSON documents written with pluggable serializers."""
    _configure_logging(verbose)


cli.add_command(list_serializers)
cli.add_command(decode)
cli.add_command(check)
