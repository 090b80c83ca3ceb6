"""Shared fixtures for inkfs tests."""

import pytest
from click.testing import CliRunner

from inkfs import FS


@pytest.fixture
def fs():
    return FS()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def notes(tmp_path):
    """A small notes tree.

    Tree:
        notes/readme.md, notes/Zeta.txt, notes/alpha.txt,
        notes/drafts/idea.md, notes/drafts/old/ancient.md,
        notes/Archive/ (empty), notes/image.png
    """
    root = tmp_path / "notes"
    root.mkdir()
    (root / "readme.md").write_text("# Notes\n")
    (root / "Zeta.txt").write_text("zeta")
    (root / "alpha.txt").write_text("alpha")
    (root / "image.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01")

    drafts = root / "drafts"
    drafts.mkdir()
    (drafts / "idea.md").write_text("idea")
    old = drafts / "old"
    old.mkdir()
    (old / "ancient.md").write_text("ancient")

    (root / "Archive").mkdir()
    return root


@pytest.fixture
def tree_dir(tmp_path):
    """Directory D containing a.txt and sub/b.txt."""
    d = tmp_path / "D"
    d.mkdir()
    (d / "a.txt").write_bytes(b"aaa")
    (d / "sub").mkdir()
    (d / "sub" / "b.txt").write_bytes(b"\x00bbb\xff")
    return d
