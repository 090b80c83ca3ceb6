"""Config directory commands: themes, plugins, theme-cat, plugin-cat, uninstall-theme, delete-plugin."""

from __future__ import annotations

import click

from ..config import ConfigStore
from ._helpers import (
    main,
    _config_dir_option,
    _echo_json,
    _format_option,
    _get_fs,
    _handle_errors,
    _require_config_dir,
    _status,
)


def _open_config(ctx) -> ConfigStore:
    return ConfigStore(_require_config_dir(ctx), fs=_get_fs(ctx))


@main.group()
@_config_dir_option
@click.pass_context
def config(ctx):
    """Inspect the application config directory (themes and plugins)."""


def _echo_names(names, fmt):
    if fmt == "json":
        _echo_json(names)
    else:
        for name in names:
            click.echo(name)


@config.command()
@_config_dir_option
@_format_option
@click.pass_context
def themes(ctx, fmt):
    """List installed themes."""
    with _handle_errors():
        names = _open_config(ctx).list_themes()
    _echo_names(names, fmt)


@config.command()
@_config_dir_option
@_format_option
@click.pass_context
def plugins(ctx, fmt):
    """List installed community plugins."""
    with _handle_errors():
        names = _open_config(ctx).list_plugins()
    _echo_names(names, fmt)


@config.command("theme-cat")
@_config_dir_option
@click.argument("theme")
@click.argument("file_name", default="manifest.json")
@click.pass_context
def theme_cat(ctx, theme, file_name):
    """Print a theme file (default: manifest.json)."""
    with _handle_errors():
        text = _open_config(ctx).read_theme_file(theme, file_name)
    click.echo(text, nl=False)


@config.command("plugin-cat")
@_config_dir_option
@click.argument("plugin_id")
@click.argument("file_name")
@click.pass_context
def plugin_cat(ctx, plugin_id, file_name):
    """Print a file from a plugin directory."""
    with _handle_errors():
        text = _open_config(ctx).read_plugin_file(plugin_id, file_name)
    click.echo(text, nl=False)


@config.command("uninstall-theme")
@_config_dir_option
@click.argument("theme")
@click.pass_context
def uninstall_theme(ctx, theme):
    """Remove a theme directory."""
    with _handle_errors():
        removed = _open_config(ctx).uninstall_theme(theme)
    _status(ctx, f"Removed theme {theme}" if removed else f"Theme not installed: {theme}")


@config.command("delete-plugin")
@_config_dir_option
@click.argument("plugin_id")
@click.pass_context
def delete_plugin(ctx, plugin_id):
    """Remove a plugin directory."""
    with _handle_errors():
        removed = _open_config(ctx).delete_plugin_dir(plugin_id)
    _status(ctx, f"Removed plugin {plugin_id}" if removed else f"Plugin not installed: {plugin_id}")
