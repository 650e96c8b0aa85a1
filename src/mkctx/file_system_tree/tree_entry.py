"""Node representation for entries in the directory tree."""

from typing import Optional

from anytree import NodeMixin


class TreeEntry(NodeMixin):  # type: ignore
    """A file or directory visited while building the directory tree.

    Extends anytree's NodeMixin so the tree can be traversed with anytree's
    iterators. Children are attached in display order: directories first, then
    files, each group sorted by name.

    Attributes:
        name (str): Base name of the entry.
        is_dir (bool): True for directories.
        parent (Optional[TreeEntry]): The parent entry, None for the root.
        children (tuple[TreeEntry]): Child entries (inherited from NodeMixin).

    Example:
        >>> root = TreeEntry("project", is_dir=True)
        >>> src = TreeEntry("src", is_dir=True, parent=root)
        >>> main = TreeEntry("main.go", parent=src)
        >>> [child.name for child in root.children]
        ['src']
        >>> main.is_dir
        False
        >>> main.children
        ()
    """

    def __init__(self, name: str, is_dir: bool = False, parent: Optional["TreeEntry"] = None) -> None:
        super().__init__()
        self.name = name
        self.is_dir = is_dir
        self.parent = parent

    def __repr__(self) -> str:
        kind = "dir" if self.is_dir else "file"
        return f"TreeEntry({self.name!r}, {kind}, children={len(self.children)})"
