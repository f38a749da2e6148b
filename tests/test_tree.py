from pathlib import Path

import pytest

from eachfile.tree import FileTree, UnsupportedPathError, build_tree


@pytest.fixture
def sample(tmp_path):
    (tmp_path / "a.in").write_text("1 2")
    (tmp_path / "a.out").write_text("3")
    (tmp_path / "b.txt").write_text("x")
    (tmp_path / "noext").write_text("y")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.in").write_text("4")
    (sub / "d.md").write_text("z")
    return tmp_path


def test_without_extensions_keeps_every_file(sample):
    tree = build_tree(sample)
    assert tree.here == {
        sample / "a.in",
        sample / "a.out",
        sample / "b.txt",
        sample / "noext",
    }
    assert set(tree.children) == {sample / "sub"}
    assert tree.children[sample / "sub"].here == {
        sample / "sub" / "c.in",
        sample / "sub" / "d.md",
    }


def test_with_extensions_filters_and_strips(sample):
    tree = build_tree(sample, ["in", "out"])
    assert tree.here == {sample / "a"}
    sub = tree.children[sample / "sub"]
    assert sub.here == {sample / "sub" / "c"}
    assert sub.children == {}


def test_files_without_extension_are_skipped_when_filtering(tmp_path):
    (tmp_path / "plain").write_text("a")
    (tmp_path / ".hidden").write_text("b")
    tree = build_tree(tmp_path, ["in"])
    assert tree.here == set()


def test_empty_directory(tmp_path):
    assert build_tree(tmp_path) == FileTree()


def test_nested_empty_directories(tmp_path):
    (tmp_path / "x" / "y").mkdir(parents=True)
    tree = build_tree(tmp_path)
    inner = tree.children[tmp_path / "x"]
    assert set(inner.children) == {tmp_path / "x" / "y"}
    assert inner.children[tmp_path / "x" / "y"] == FileTree()


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        build_tree(tmp_path / "missing")


def test_unsupported_entry_raises(tmp_path, monkeypatch):
    (tmp_path / "thing").write_text("a")
    monkeypatch.setattr(Path, "is_file", lambda self: False)
    monkeypatch.setattr(Path, "is_dir", lambda self: False)
    with pytest.raises(UnsupportedPathError, match="Unsupported path"):
        build_tree(tmp_path)