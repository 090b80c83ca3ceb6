"""Tests for read_directory and FileNode."""

import json
import os

import pytest

from inkfs import FileNode, read_directory
from inkfs.exceptions import IOFailureError, PathNotFoundError, WrongTypeError
from inkfs.tree import walk_nodes


class TestOrdering:
    def test_directories_first_then_case_insensitive(self, notes):
        names = [n.name for n in read_directory(notes)]
        assert names == ["Archive", "drafts", "alpha.txt", "image.png", "readme.md", "Zeta.txt"]

    def test_mixed_case_names(self, tmp_path):
        for name in ("note2.md", "Note.md", "NOTE.txt"):
            (tmp_path / name).write_text("")
        names = [n.name for n in read_directory(tmp_path)]
        assert names == ["Note.md", "NOTE.txt", "note2.md"]

    def test_nested_levels_sorted(self, notes):
        nodes = read_directory(notes, recursive=True)
        drafts = next(n for n in nodes if n.name == "drafts")
        assert [c.name for c in drafts.children] == ["old", "idea.md"]


class TestNodeFields:
    def test_file_node(self, notes):
        node = next(n for n in read_directory(notes) if n.name == "alpha.txt")
        assert node.is_directory is False
        assert node.path == os.path.join(str(notes), "alpha.txt")
        assert node.size == 5
        assert node.children is None
        assert isinstance(node.modified, int)

    def test_directory_node_has_no_size(self, notes):
        for node in read_directory(notes, recursive=True):
            if node.is_directory:
                assert node.size is None

    def test_modified_matches_stat(self, notes):
        os.utime(notes / "alpha.txt", (1_600_000_000, 1_600_000_000))
        node = next(n for n in read_directory(notes) if n.name == "alpha.txt")
        assert node.modified == 1_600_000_000

    def test_modified_before_epoch_is_unknown(self, notes):
        try:
            os.utime(notes / "alpha.txt", (-100, -100))
        except (OSError, OverflowError):
            pytest.skip("filesystem does not store pre-epoch times")
        node = next(n for n in read_directory(notes) if n.name == "alpha.txt")
        assert node.modified is None


class TestRecursion:
    def test_non_recursive_leaves_children_absent(self, notes):
        for node in read_directory(notes):
            assert node.children is None

    def test_recursive_expands_subdirectories(self, notes):
        nodes = read_directory(notes, recursive=True)
        drafts = next(n for n in nodes if n.name == "drafts")
        old = next(c for c in drafts.children if c.name == "old")
        assert [c.name for c in old.children] == ["ancient.md"]

    def test_empty_directory_expanded_to_empty(self, notes):
        nodes = read_directory(notes, recursive=True)
        archive = next(n for n in nodes if n.name == "Archive")
        assert archive.children == ()

    def test_lazy_expansion_matches_recursive(self, notes):
        shallow = read_directory(notes)
        drafts = next(n for n in shallow if n.name == "drafts")
        lazy = read_directory(drafts.path)
        deep = next(n for n in read_directory(notes, recursive=True) if n.name == "drafts")
        assert [c.name for c in lazy] == [c.name for c in deep.children]

    def test_walk_nodes_depth_first(self, notes):
        nodes = read_directory(notes, recursive=True)
        walked = [(d, n.name) for d, n in walk_nodes(nodes)]
        assert walked[:4] == [(0, "Archive"), (0, "drafts"), (1, "old"), (2, "ancient.md")]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
class TestSymlinks:
    def test_symlinked_directory_listed_not_expanded(self, notes, tmp_path):
        os.symlink(notes / "drafts", notes / "link")
        nodes = read_directory(notes, recursive=True)
        link = next(n for n in nodes if n.name == "link")
        assert link.is_directory is True
        assert link.children is None

    def test_symlink_cycle_terminates(self, tmp_path):
        d = tmp_path / "loop"
        d.mkdir()
        os.symlink(d, d / "self")
        nodes = read_directory(d, recursive=True)
        assert [n.name for n in nodes] == ["self"]

    def test_dangling_symlink_listed_as_file(self, notes):
        os.symlink(notes / "missing", notes / "broken")
        nodes = read_directory(notes, recursive=True)
        names = [n.name for n in nodes]
        assert names == ["Archive", "drafts", "alpha.txt", "broken", "image.png", "readme.md", "Zeta.txt"]
        broken = nodes[3]
        assert broken.is_directory is False
        assert broken.children is None
        assert broken.size is not None

    def test_dangling_symlink_in_subdirectory(self, notes):
        os.symlink(notes / "gone", notes / "drafts" / "stale")
        drafts = next(n for n in read_directory(notes, recursive=True) if n.name == "drafts")
        assert [c.name for c in drafts.children] == ["old", "idea.md", "stale"]


class TestErrors:
    def test_missing_path(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            read_directory(tmp_path / "nope")

    def test_file_is_wrong_type(self, notes):
        with pytest.raises(WrongTypeError):
            read_directory(notes / "alpha.txt")

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0,
                        reason="permissions not enforced")
    def test_unreadable_subdirectory_fails_recursive_call(self, notes):
        locked = notes / "drafts" / "old"
        locked.chmod(0)
        try:
            with pytest.raises(IOFailureError):
                read_directory(notes, recursive=True)
        finally:
            locked.chmod(0o755)


class TestToDict:
    def test_children_key_absent_when_not_expanded(self, notes):
        node = next(n for n in read_directory(notes) if n.name == "drafts")
        d = node.to_dict()
        assert "children" not in d
        assert d["size"] is None

    def test_children_empty_list_when_expanded_empty(self, notes):
        node = next(n for n in read_directory(notes, recursive=True) if n.name == "Archive")
        assert node.to_dict()["children"] == []

    def test_json_serializable(self, notes):
        data = [n.to_dict() for n in read_directory(notes, recursive=True)]
        text = json.dumps(data)
        assert "ancient.md" in text

    def test_frozen(self):
        node = FileNode(name="a", path="/a", is_directory=False, size=1)
        with pytest.raises(AttributeError):
            node.name = "b"
