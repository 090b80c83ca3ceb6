"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager

import click

from ..exceptions import FSError
from ..fs import FS
from ..log import setup_logging


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _get_fs(ctx) -> FS:
    """Return the FS stored on the context by :func:`main`."""
    return ctx.obj["fs"]


@contextmanager
def _handle_errors():
    """Turn library errors into a ClickException with the error message."""
    try:
        yield
    except FSError as exc:
        raise click.ClickException(str(exc))


def _format_option(f):
    """Shared --format text|json option."""
    return click.option(
        "--format", "fmt", type=click.Choice(["text", "json"]), default="text",
        show_default=True, help="Output format.",
    )(f)


def _echo_json(obj) -> None:
    click.echo(json.dumps(obj, indent=2))


def _store_config_dir(ctx, param, value):
    """Click callback: store --config-dir value in the context."""
    ctx.ensure_object(dict)
    if value is not None:
        ctx.obj["config_dir"] = value
    return value


def _config_dir_option(f):
    """Shared --config-dir option for config subcommands."""
    return click.option(
        "--config-dir", "-c", type=click.Path(file_okay=False), envvar="INKFS_CONFIG_DIR",
        help="Application config directory (or set INKFS_CONFIG_DIR).",
        expose_value=False, callback=_store_config_dir, is_eager=True,
    )(f)


def _require_config_dir(ctx) -> str:
    """Get the config dir from context, raising a clear error if missing."""
    path = ctx.obj.get("config_dir")
    if not path:
        raise click.ClickException(
            "No config directory specified. Use --config-dir or set INKFS_CONFIG_DIR."
        )
    return path


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.option("--encoding", default="utf-8", show_default=True,
              help="Text encoding for cat/write.")
@click.pass_context
def main(ctx, verbose, encoding):
    """inkfs: file operations for the notes app, from the shell.

    Paths are ordinary OS paths.  Copy never overwrites: an occupied
    destination gets a "name (copy N)" sibling.  Move and rename never
    overwrite either; they fail instead.

    \b
    Quick start:
      inkfs ls -R ~/notes
      inkfs cp ~/notes/todo.md ~/notes       # -> todo (copy).md
      inkfs mv ~/notes/todo.md ~/archive
      inkfs rm ~/archive/todo.md
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["fs"] = FS(encoding=encoding)
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
