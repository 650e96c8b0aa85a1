"""Directory tree model, rendering and content classification.

This package builds the ordered tree of a project directory, renders it as
ASCII art, and decides whether a file's content is binary.
"""

from .binary_detector import BINARY_EXTENSIONS, is_binary_file
from .file_system_tree import FileSystemTree
from .tree_builder import build_tree, count_entries
from .tree_entry import TreeEntry
from .tree_renderer import render_tree

__all__ = [
    "BINARY_EXTENSIONS",
    "FileSystemTree",
    "TreeEntry",
    "build_tree",
    "count_entries",
    "is_binary_file",
    "render_tree",
]
