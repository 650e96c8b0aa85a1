"""Unit tests for building the directory tree."""

import os
import sys

import pytest

from mkctx.file_system_tree.tree_builder import build_tree, count_entries


@pytest.fixture
def temp_directory(tmp_path):
    for directory in ["dir1", "dir2/subdir", ".git/objects"]:
        (tmp_path / directory).mkdir(parents=True)
    for file in ["file1.txt", "dir1/file2.go", "dir2/file3.js", "dir2/subdir/file4.yaml", ".git/config"]:
        (tmp_path / file).write_text("test")
    (tmp_path / ".git" / "objects" / "object1").write_text("test")
    return tmp_path


def child_names(entry):
    return [child.name for child in entry.children]


def test_root_entry(temp_directory):
    tree = build_tree(temp_directory)

    assert tree.name == temp_directory.name
    assert tree.is_dir
    assert tree.parent is None


def test_root_named_like_given_path(temp_directory, monkeypatch):
    monkeypatch.chdir(temp_directory)

    assert build_tree(".").name == "."
    assert build_tree("dir2").name == "dir2"
    assert build_tree("dir2/").name == "dir2"
    assert build_tree("dir2/subdir/..").name == "dir2"
    assert child_names(build_tree(".")) == [".git", "dir1", "dir2", "file1.txt"]


def test_directories_before_files_sorted_by_name(temp_directory):
    tree = build_tree(temp_directory)

    assert child_names(tree) == [".git", "dir1", "dir2", "file1.txt"]
    assert child_names(tree.children[2]) == ["subdir", "file3.js"]


def test_sorting_is_by_code_point(tmp_path):
    for name in ["b.txt", "B.txt", "a.txt", "_x.txt"]:
        (tmp_path / name).touch()

    assert child_names(build_tree(tmp_path)) == ["B.txt", "_x.txt", "a.txt", "b.txt"]


def test_git_directory_has_no_children(temp_directory):
    tree = build_tree(temp_directory)
    git = tree.children[0]

    assert git.name == ".git"
    assert git.is_dir
    assert git.children == ()


def test_nested_git_directory_is_scanned(tmp_path):
    (tmp_path / "vendor" / "lib" / ".git").mkdir(parents=True)
    (tmp_path / "vendor" / "lib" / ".git" / "HEAD").write_text("ref: refs/heads/main\n")

    tree = build_tree(tmp_path)
    nested_git = tree.children[0].children[0].children[0]

    assert nested_git.name == ".git"
    assert child_names(nested_git) == ["HEAD"]


def test_empty_directory(tmp_path):
    tree = build_tree(tmp_path)

    assert tree.children == ()
    assert count_entries(tree) == (0, 0)


def test_count_entries(temp_directory):
    # dir1, dir2, dir2/subdir and .git; .git contents are not scanned
    assert count_entries(build_tree(temp_directory)) == (4, 4)


@pytest.mark.skipif(sys.platform == "win32", reason="Symlinks need special permissions on Windows")
def test_symlinks_are_not_followed(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.go").write_text("package main\n")
    os.symlink(tmp_path / "src", tmp_path / "link")
    os.symlink(tmp_path, tmp_path / "src" / "loop")

    tree = build_tree(tmp_path)

    assert child_names(tree) == ["src", "link"]
    link = tree.children[1]
    assert not link.is_dir
    assert link.children == ()
    assert child_names(tree.children[0]) == ["loop", "main.go"]


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="Permissions are not enforced",
)
def test_unreadable_directory_has_no_children(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("hidden")
    locked.chmod(0o000)
    try:
        tree = build_tree(tmp_path)
    finally:
        locked.chmod(0o755)

    assert child_names(tree) == ["locked"]
    assert tree.children[0].is_dir
    assert tree.children[0].children == ()
