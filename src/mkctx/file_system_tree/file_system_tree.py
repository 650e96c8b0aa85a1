"""Directory tree of a run, built lazily and rendered on demand."""

from pathlib import Path
from typing import Iterator, Optional

from mkctx.config import check_root_directory
from mkctx.types import PathType

from .tree_builder import build_tree, count_entries
from .tree_entry import TreeEntry
from .tree_renderer import render_tree


class FileSystemTree:
    """A tree representation of a directory structure.

    The tree shows every entry under the root, independently of the selection
    policy, except the contents of the version-control directory. It is built on
    first access and cached for the rest of the run.

    Attributes:
        root_path (Path): The root directory.

    Example:
        >>> tree = FileSystemTree("project")  # doctest: +SKIP
        >>> print("\\n".join(tree.stream_tree_representation()))  # doctest: +SKIP
        └── project/
            ├── .git/
            ├── src/
            │   └── main.go
            └── go.mod
    """

    def __init__(self, root_path: PathType) -> None:
        self.root_path = Path(root_path)
        self._tree: Optional[TreeEntry] = None
        self._directory_count = 0

    def get_tree(self) -> TreeEntry:
        """Get the root entry, building the tree if needed.

        Raises:
            RootDirectoryError: If the root is missing or not a directory.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        check_root_directory(self.root_path)
        self._tree = build_tree(self.root_path)
        self._directory_count, _ = count_entries(self._tree)

    def get_directory_count(self) -> int:
        """Number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree representation one line at a time, without newlines."""
        yield from render_tree(self.get_tree())

