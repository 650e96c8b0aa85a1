"""Collection of the files that make up the content listing."""

import logging
import os
from typing import List, Optional

from anytree import PreOrderIter

from mkctx.config import FilterConfiguration
from mkctx.file_system_tree.binary_detector import is_binary_file
from mkctx.file_system_tree.tree_builder import build_tree
from mkctx.file_system_tree.tree_entry import TreeEntry
from mkctx.selection.policy import SelectionPolicy
from mkctx.types import CollectedFile

logger = logging.getLogger(__name__)


def relative_path_of(entry: TreeEntry) -> str:
    """Forward-slash path of an entry relative to the root of its tree.

    Example:
        >>> root = TreeEntry("project", is_dir=True)
        >>> src = TreeEntry("src", is_dir=True, parent=root)
        >>> relative_path_of(TreeEntry("main.go", parent=src))
        'src/main.go'
    """
    return "/".join(node.name for node in entry.path[1:])


class FileCollector:
    """Selects the files to list from the directory tree.

    Every non-directory entry of the tree is checked against the selection
    policy and, if accepted, against the binary detector. The tree never
    descends into symbolic links: a link to a file is read through, a link to a
    directory can't be read as a file and is skipped as binary.

    Attributes:
        config (FilterConfiguration): The run configuration.
        policy (SelectionPolicy): The rules applied to each file.

    Example:
        >>> config = FilterConfiguration.load("project", include_patterns=["*.go"])  # doctest: +SKIP
        >>> [f.relative_path for f in FileCollector(config).collect()]  # doctest: +SKIP
        ['src/main.go', 'src/utils.go']
    """

    def __init__(self, config: FilterConfiguration, policy: Optional[SelectionPolicy] = None) -> None:
        self.config = config
        self.policy = policy if policy is not None else SelectionPolicy.from_config(config)

    def collect(self, tree: Optional[TreeEntry] = None) -> List[CollectedFile]:
        """Return the accepted files, sorted by their OS-native path.

        Args:
            tree: A tree already built for the root directory. Built on demand if omitted.
        """
        root = os.fspath(self.config.root_directory)
        if tree is None:
            tree = build_tree(root)

        collected: List[CollectedFile] = []
        for entry in PreOrderIter(tree):
            if entry.is_dir:
                continue

            relative_path = relative_path_of(entry)
            if not self.policy.accept(relative_path):
                continue

            file_path = os.path.join(root, *relative_path.split("/"))
            if is_binary_file(file_path):
                logger.debug("%s: binary content", relative_path)
                continue

            collected.append(CollectedFile(file_path, relative_path))

        collected.sort(key=lambda f: f.path)
        return collected


def collect_files(config: FilterConfiguration, tree: Optional[TreeEntry] = None) -> List[CollectedFile]:
    """Collect the files to list for a configuration with the default policy."""
    return FileCollector(config).collect(tree)
