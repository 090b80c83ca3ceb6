"""ConfigStore: config, theme and plugin files under one root directory.

The root is supplied by the host application (platform config dirs are
its business).  Themes live in ``<root>/themes/<name>/`` and community
plugins in ``<root>/plugins/<id>/``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .exceptions import InvalidPathError, io_failure
from .fs import FS

__all__ = ["ConfigStore", "THEMES_DIR", "PLUGINS_DIR", "THEME_MANIFEST"]

logger = logging.getLogger(__name__)

THEMES_DIR = "themes"
PLUGINS_DIR = "plugins"
THEME_MANIFEST = "manifest.json"


def _segment(value: str, what: str, op: str) -> str:
    """Validate a single path segment (theme name, plugin id, file name)."""
    if not value:
        raise InvalidPathError(f"{op}: {what} must not be empty", op=op)
    if value in (".", ".."):
        raise InvalidPathError(f"{op}: invalid {what}: {value!r}", op=op)
    if "/" in value or "\\" in value or os.sep in value or "\0" in value:
        raise InvalidPathError(f"{op}: {what} must be a single path segment: {value!r}", op=op)
    return value


class ConfigStore:
    """Namespaced access to an application's config directory.

    Every method maps a logical name onto a path below *root* and calls
    the matching :class:`~inkfs.fs.FS` primitive.
    """

    def __init__(self, root: str | os.PathLike[str], *, fs: FS | None = None):
        self._root = Path(root)
        self._fs = fs or FS()

    def __repr__(self) -> str:
        return f"ConfigStore({str(self._root)!r})"

    @property
    def root(self) -> Path:
        """The config root directory."""
        return self._root

    def config_dir(self) -> str:
        """Create the root if needed and return it."""
        self._fs.ensure_dir(self._root)
        return str(self._root)

    # --- Config files ---

    def read_config_file(self, file_name: str) -> str:
        """Read ``<root>/<file_name>``."""
        name = _segment(file_name, "file name", "read_config_file")
        return self._fs.read_file(self._root / name)

    def write_config_file(self, file_name: str, content: str) -> None:
        """Write ``<root>/<file_name>``, creating the root if needed."""
        name = _segment(file_name, "file name", "write_config_file")
        self._fs.write_file(self._root / name, content)

    # --- Themes ---

    def _theme_dir(self, theme_name: str, op: str) -> Path:
        return self._root / THEMES_DIR / _segment(theme_name, "theme name", op)

    def list_themes(self) -> list[str]:
        """Return installed theme names; empty if there is no themes dir."""
        return self._list_subdirs(self._root / THEMES_DIR, "list_themes")

    def read_theme_manifest(self, theme_name: str) -> str:
        """Read ``manifest.json`` of *theme_name*."""
        return self._fs.read_file(self._theme_dir(theme_name, "read_theme_manifest") / THEME_MANIFEST)

    def read_theme_css(self, theme_name: str, css_file: str) -> str:
        """Read a stylesheet (e.g. ``dark.css``) of *theme_name*."""
        op = "read_theme_css"
        return self._fs.read_file(self._theme_dir(theme_name, op) / _segment(css_file, "file name", op))

    def read_theme_file(self, theme_name: str, file_name: str) -> str:
        """Read any file of *theme_name*."""
        op = "read_theme_file"
        return self._fs.read_file(self._theme_dir(theme_name, op) / _segment(file_name, "file name", op))

    def install_theme_file(self, theme_name: str, file_name: str, content: str) -> None:
        """Write one file of a community theme, creating the theme dir."""
        op = "install_theme_file"
        path = self._theme_dir(theme_name, op) / _segment(file_name, "file name", op)
        self._fs.write_file(path, content)
        logger.info("installed theme file %s/%s", theme_name, file_name)

    def uninstall_theme(self, theme_name: str) -> bool:
        """Remove a theme directory.  Returns ``False`` if it was not there."""
        return self._remove_dir(self._theme_dir(theme_name, "uninstall_theme"))

    # --- Plugins ---

    def _plugin_dir(self, plugin_id: str, op: str) -> Path:
        return self._root / PLUGINS_DIR / _segment(plugin_id, "plugin id", op)

    def list_plugins(self) -> list[str]:
        """Return installed plugin ids; empty if there is no plugins dir."""
        return self._list_subdirs(self._root / PLUGINS_DIR, "list_plugins")

    def read_plugin_file(self, plugin_id: str, file_name: str) -> str:
        """Read a file from a plugin's directory."""
        op = "read_plugin_file"
        return self._fs.read_file(self._plugin_dir(plugin_id, op) / _segment(file_name, "file name", op))

    def write_plugin_file(self, plugin_id: str, file_name: str, content: str) -> None:
        """Write a file into a plugin's directory, creating it if needed."""
        op = "write_plugin_file"
        self._fs.write_file(self._plugin_dir(plugin_id, op) / _segment(file_name, "file name", op), content)

    def delete_plugin_dir(self, plugin_id: str) -> bool:
        """Remove a plugin directory.  Returns ``False`` if it was not there."""
        return self._remove_dir(self._plugin_dir(plugin_id, "delete_plugin_dir"))

    # --- Helpers ---

    def _list_subdirs(self, parent: Path, op: str) -> list[str]:
        if not parent.is_dir():
            return []
        try:
            names = [e.name for e in os.scandir(parent) if e.is_dir()]
        except OSError as exc:
            raise io_failure(op, exc, parent) from exc
        return sorted(names, key=lambda n: (n.lower(), n))

    def _remove_dir(self, path: Path) -> bool:
        if not self._fs.path_exists(path):
            return False
        self._fs.delete_path(path)
        logger.info("removed %s", path)
        return True
