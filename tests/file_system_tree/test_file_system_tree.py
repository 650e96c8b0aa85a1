"""Unit tests for the FileSystemTree class."""

from pathlib import Path

import pytest

from mkctx.exceptions import RootDirectoryError
from mkctx.file_system_tree.file_system_tree import FileSystemTree


@pytest.fixture
def temp_directory(tmp_path):
    (tmp_path / "dir1").mkdir()
    (tmp_path / "dir1" / "file1.txt").touch()
    (tmp_path / "dir2").mkdir()
    (tmp_path / "dir2" / "file2.py").touch()
    (tmp_path / "dir2" / "file2.pyc").touch()
    (tmp_path / ".gitignore").write_text("*.pyc\n")
    return tmp_path


def test_file_system_tree_initialization(temp_directory):
    fs_tree = FileSystemTree(str(temp_directory))
    assert fs_tree.root_path == Path(temp_directory)


def test_get_tree(temp_directory):
    tree = FileSystemTree(temp_directory).get_tree()

    assert tree.name == temp_directory.name
    assert [child.name for child in tree.children] == ["dir1", "dir2", ".gitignore"]


def test_tree_is_built_once(temp_directory):
    fs_tree = FileSystemTree(temp_directory)

    assert fs_tree.get_tree() is fs_tree.get_tree()


def test_tree_representation_lists_every_entry(temp_directory):
    # The tree ignores selection rules: .gitignore and .pyc files are shown
    lines = list(FileSystemTree(temp_directory).stream_tree_representation())

    assert lines == [
        f"└── {temp_directory.name}/",
        "    ├── dir1/",
        "    │   └── file1.txt",
        "    ├── dir2/",
        "    │   ├── file2.py",
        "    │   └── file2.pyc",
        "    └── .gitignore",
    ]


def test_stream_tree_representation_yields_lines_without_newlines(temp_directory):
    lines = list(FileSystemTree(temp_directory).stream_tree_representation())

    assert len(lines) == 7
    assert not any(line.endswith("\n") for line in lines)


def test_directory_count(temp_directory):
    fs_tree = FileSystemTree(temp_directory)

    assert fs_tree.get_directory_count() == 2


def test_directory_count_excludes_git_contents(temp_directory):
    (temp_directory / ".git" / "objects").mkdir(parents=True)

    # .git itself is listed but never descended into
    assert FileSystemTree(temp_directory).get_directory_count() == 3


def test_missing_root(tmp_path):
    fs_tree = FileSystemTree(tmp_path / "missing")

    with pytest.raises(RootDirectoryError, match="Cannot access directory"):
        fs_tree.get_tree()


def test_root_is_a_file(tmp_path):
    path = tmp_path / "file.txt"
    path.touch()

    with pytest.raises(RootDirectoryError, match="is not a valid directory"):
        FileSystemTree(path).get_tree()
