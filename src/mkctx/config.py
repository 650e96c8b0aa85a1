"""Run configuration for the selection engine.

This module defines the reserved file names the engine knows about and the
FilterConfiguration that callers resolve once, before any walking starts.
"""

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

from mkctx.exceptions import RootDirectoryError
from mkctx.patterns.gitignore_patterns import load_ignore_file
from mkctx.types import PathType

IGNORE_FILE_NAME = ".gitignore"
INSTRUCTIONS_FILE_NAME = ".mkctx"
VCS_DIRECTORY_NAME = ".git"
SENSITIVE_FILE_NAME = ".env"

# Include patterns that, together with active ignore patterns, let the ignore
# file itself be listed. An empty tuple disables the carve-out.
DEFAULT_IGNORE_FILE_LISTING_PATTERNS: Tuple[str, ...] = ("*.go", "*.md")


@dataclass(frozen=True)
class FilterConfiguration:
    """Resolved filter settings for a single run.

    Attributes:
        root_directory: Directory to process. All matching is relative to it.
        include_patterns: Globs a file must match to be listed. Empty means no include filter.
        exclude_patterns: Globs that remove a file from the listing.
        use_ignore_file: Whether the root ignore file is consulted.
        ignore_patterns: Patterns loaded from the ignore file.
        ignore_file_listing_patterns: Include patterns that enable listing the ignore file itself.

    Example:
        >>> config = FilterConfiguration("src", include_patterns=("*.go",))
        >>> config.include_patterns
        ('*.go',)
        >>> config.ignore_patterns
        ()
    """

    root_directory: PathType
    include_patterns: Tuple[str, ...] = ()
    exclude_patterns: Tuple[str, ...] = ()
    use_ignore_file: bool = False
    ignore_patterns: Tuple[str, ...] = ()
    ignore_file_listing_patterns: Tuple[str, ...] = DEFAULT_IGNORE_FILE_LISTING_PATTERNS

    @classmethod
    def load(
        cls,
        root_directory: PathType,
        include_patterns: Optional[Iterable[str]] = None,
        exclude_patterns: Optional[Iterable[str]] = None,
        use_ignore_file: bool = False,
        ignore_file_listing_patterns: Tuple[str, ...] = DEFAULT_IGNORE_FILE_LISTING_PATTERNS,
    ) -> "FilterConfiguration":
        """Validate the root directory and build a configuration for it.

        When use_ignore_file is set, the ignore file in the root is read. A
        missing or unreadable ignore file leaves ignore_patterns empty.

        Args:
            root_directory: Directory to process.
            include_patterns: Include globs, in command-line order.
            exclude_patterns: Exclude globs, in command-line order.
            use_ignore_file: Whether to read the root ignore file.
            ignore_file_listing_patterns: See the class attribute of the same name.

        Returns:
            FilterConfiguration: The frozen configuration.

        Raises:
            RootDirectoryError: If the root cannot be accessed or is not a directory.
        """
        check_root_directory(root_directory)

        ignore_patterns: Tuple[str, ...] = ()
        if use_ignore_file:
            ignore_patterns = tuple(load_ignore_file(Path(root_directory) / IGNORE_FILE_NAME))

        return cls(
            root_directory=root_directory,
            include_patterns=tuple(include_patterns or ()),
            exclude_patterns=tuple(exclude_patterns or ()),
            use_ignore_file=use_ignore_file,
            ignore_patterns=ignore_patterns,
            ignore_file_listing_patterns=tuple(ignore_file_listing_patterns),
        )


def check_root_directory(root_directory: PathType) -> None:
    """Raise RootDirectoryError unless root_directory is an accessible directory."""
    try:
        mode = os.stat(root_directory).st_mode
    except OSError as e:
        raise RootDirectoryError(str(root_directory), f"Cannot access directory '{root_directory}': {e}") from e
    if not stat.S_ISDIR(mode):
        raise RootDirectoryError(str(root_directory), f"'{root_directory}' is not a valid directory")
