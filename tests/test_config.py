"""Tests for ConfigStore."""

import pytest

from inkfs import ConfigStore
from inkfs.exceptions import InvalidPathError, PathNotFoundError


@pytest.fixture
def store(tmp_path):
    return ConfigStore(tmp_path / "app")


@pytest.fixture
def populated(store):
    store.install_theme_file("nord", "manifest.json", '{"name": "Nord"}')
    store.install_theme_file("nord", "dark.css", "body { color: #eceff4; }")
    store.install_theme_file("Amber", "manifest.json", '{"name": "Amber"}')
    store.write_plugin_file("word-count", "main.js", "export default {}")
    return store


class TestConfigFiles:
    def test_config_dir_created(self, store):
        assert not store.root.exists()
        assert store.config_dir() == str(store.root)
        assert store.root.is_dir()

    def test_write_and_read(self, store):
        store.write_config_file("settings.json", '{"theme": "nord"}')
        assert store.read_config_file("settings.json") == '{"theme": "nord"}'
        assert (store.root / "settings.json").is_file()

    def test_missing_file(self, store):
        with pytest.raises(PathNotFoundError):
            store.read_config_file("settings.json")

    @pytest.mark.parametrize("bad", ["", ".", "..", "../escape", "a/b", "a\0b"])
    def test_file_name_must_be_single_segment(self, store, bad):
        with pytest.raises(InvalidPathError):
            store.write_config_file(bad, "x")
        assert not store.root.exists()


class TestThemes:
    def test_list_empty_without_themes_dir(self, store):
        assert store.list_themes() == []

    def test_list_sorted(self, populated):
        assert populated.list_themes() == ["Amber", "nord"]

    def test_list_ignores_stray_files(self, populated):
        (populated.root / "themes" / "README").write_text("")
        assert populated.list_themes() == ["Amber", "nord"]

    def test_read_manifest_and_css(self, populated):
        assert populated.read_theme_manifest("nord") == '{"name": "Nord"}'
        assert populated.read_theme_css("nord", "dark.css").startswith("body")
        assert populated.read_theme_file("Amber", "manifest.json") == '{"name": "Amber"}'

    def test_install_overwrites(self, populated):
        populated.install_theme_file("nord", "dark.css", "new")
        assert populated.read_theme_css("nord", "dark.css") == "new"

    def test_uninstall(self, populated):
        assert populated.uninstall_theme("nord") is True
        assert populated.list_themes() == ["Amber"]
        assert populated.uninstall_theme("nord") is False

    def test_theme_name_cannot_escape(self, populated):
        with pytest.raises(InvalidPathError):
            populated.uninstall_theme("..")
        assert populated.root.is_dir()


class TestPlugins:
    def test_list_empty(self, store):
        assert store.list_plugins() == []

    def test_write_read_list(self, populated):
        assert populated.list_plugins() == ["word-count"]
        assert populated.read_plugin_file("word-count", "main.js") == "export default {}"

    def test_delete(self, populated):
        assert populated.delete_plugin_dir("word-count") is True
        assert populated.list_plugins() == []
        assert populated.delete_plugin_dir("word-count") is False

    def test_plugin_id_validated(self, store):
        with pytest.raises(InvalidPathError):
            store.read_plugin_file("a/b", "main.js")
