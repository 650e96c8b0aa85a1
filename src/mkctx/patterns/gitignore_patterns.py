"""Matching and loading of ignore-file patterns.

Only a restricted subset of the .gitignore syntax is supported: directory
patterns (trailing ``/``), root-anchored patterns (leading ``/``), patterns with
a path separator, and plain basename globs. Negations (``!pattern``) are dropped
when the file is loaded and ``**`` has no special meaning.
"""

import logging
import posixpath
from pathlib import Path
from typing import List

from mkctx.patterns.glob_patterns import match_path
from mkctx.types import PathType

logger = logging.getLogger(__name__)


def gitignore_match(pattern: str, path: str) -> bool:
    """Check whether a relative path matches a single ignore-file pattern.

    Precedence, first match wins:

    1. ``name/`` matches the entry ``name`` itself and anything inside a
       subdirectory of it. A file directly inside ``name`` does not match.
    2. ``/name`` matches only the exact path ``name`` (no globbing).
    3. A pattern containing ``/`` is globbed against the whole path, one
       component at a time (wildcards never match ``/``).
    4. Anything else is globbed against the basename.

    Args:
        pattern: A pattern line from the ignore file.
        path: Path relative to the root, using forward slashes.

    Returns:
        bool: True if the path matches.

    Example:
        >>> gitignore_match("dir1/", "dir1")
        True
        >>> gitignore_match("dir1/", "dir1/file")
        False
        >>> gitignore_match("dir1/", "dir1/sub/file")
        True
        >>> gitignore_match("/file.txt", "sub/file.txt")
        False
        >>> gitignore_match("*.log", "logs/app.log")
        True
    """
    if pattern.endswith("/"):
        dir_pattern = pattern[:-1]
        if path == dir_pattern:
            return True
        prefix = dir_pattern + "/"
        if path.startswith(prefix):
            # Direct children do not match, deeper descendants do
            return "/" in path[len(prefix) :]  # noqa: E203
        return False

    if pattern.startswith("/"):
        return path == pattern[1:]

    if "/" in pattern:
        return match_path(path, pattern)

    return match_path(posixpath.basename(path), pattern)


def load_ignore_file(ignore_file: PathType) -> List[str]:
    """Read the pattern lines of an ignore file.

    Lines are stripped; blank lines, comments (``#``) and negations (``!``) are
    skipped. Everything else is returned verbatim, in file order.

    A missing, unreadable or undecodable file is not an error: it yields an
    empty list.

    Args:
        ignore_file: Path to the ignore file.

    Returns:
        List[str]: The usable patterns.
    """
    patterns: List[str] = []
    try:
        with open(Path(ignore_file), "r", encoding="utf-8") as f:
            for raw_line in f:
                line = raw_line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("!"):
                    continue
                patterns.append(line)
    except (OSError, UnicodeError) as e:
        logger.debug("Ignoring unreadable ignore file %s: %s", ignore_file, e)
        return []
    return patterns
