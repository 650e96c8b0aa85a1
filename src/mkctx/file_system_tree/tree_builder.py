"""Recursive construction of the directory tree."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

from mkctx.config import VCS_DIRECTORY_NAME
from mkctx.types import PathType

from .tree_entry import TreeEntry

logger = logging.getLogger(__name__)


def _sort_key(item: Tuple[str, bool]) -> Tuple[bool, str]:
    name, is_dir = item
    return (not is_dir, name)


def _list_directory(path: Path) -> Optional[List[Tuple[str, bool]]]:
    """Return (name, is_dir) pairs for a directory, or None if it can't be read.

    Symbolic links are reported as non-directories so they are never descended into.
    """
    try:
        with os.scandir(path) as it:
            entries = []
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append((entry.name, is_dir))
    except OSError as e:
        logger.debug("Cannot read directory %s: %s", path, e)
        return None
    return entries


def build_tree(root: PathType, current: Optional[PathType] = None, parent: Optional[TreeEntry] = None) -> TreeEntry:
    """Build the tree of entries below ``current`` (the root by default).

    Directories are listed before files and each group is sorted by name. The
    version-control directory directly under the root is recorded, but its
    contents are not scanned. A directory that can't be read is recorded with
    no children.

    Args:
        root: The root directory of the run.
        current: The directory to scan. Defaults to ``root``.
        parent: Entry to attach the new entry to. Used by the recursion.

    Returns:
        TreeEntry: The entry for ``current``. For the root it is named after the
        last element of ``root`` as given, so ``.`` stays ``.`` and ``/`` stays ``/``.

    Example:
        >>> tree = build_tree("project")  # doctest: +SKIP
        >>> [child.name for child in tree.children]  # doctest: +SKIP
        ['.git', 'src', 'README.md']
    """
    root_path = Path(root)
    current_path = root_path if current is None else Path(current)

    if current_path == root_path:
        name = os.path.basename(os.path.normpath(os.fspath(root))) or os.sep
    else:
        name = current_path.name
    node = TreeEntry(name, is_dir=True, parent=parent)

    if current_path.parent == root_path and current_path.name == VCS_DIRECTORY_NAME:
        return node

    entries = _list_directory(current_path)
    if entries is None:
        return node

    for child_name, is_dir in sorted(entries, key=_sort_key):
        if is_dir:
            build_tree(root_path, current_path / child_name, parent=node)
        else:
            TreeEntry(child_name, is_dir=False, parent=node)

    return node


def count_entries(node: TreeEntry) -> Tuple[int, int]:
    """Count the directories (excluding ``node`` itself) and files below ``node``.

    Example:
        >>> root = TreeEntry("root", is_dir=True)
        >>> sub = TreeEntry("sub", is_dir=True, parent=root)
        >>> _ = TreeEntry("a.txt", parent=sub)
        >>> _ = TreeEntry("b.txt", parent=root)
        >>> count_entries(root)
        (1, 2)
    """
    directories = 0
    files = 0
    for descendant in node.descendants:
        if descendant.is_dir:
            directories += 1
        else:
            files += 1
    return directories, files
