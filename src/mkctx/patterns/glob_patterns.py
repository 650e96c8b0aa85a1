"""Glob matching for --include and --exclude patterns."""

import posixpath
from fnmatch import fnmatchcase


def _has_unclosed_bracket(pattern: str) -> bool:
    i = 0
    while i < len(pattern):
        if pattern[i] == "[":
            j = i + 1
            if j < len(pattern) and pattern[j] in "!^":
                j += 1
            if j < len(pattern) and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                return True
            i = close
        i += 1
    return False


def match_path(path: str, pattern: str) -> bool:
    """Match a path against a shell glob whose wildcards never cross ``/``.

    ``*``, ``?`` and ``[...]`` apply within a single path component, so the
    pattern and the path must have the same number of components. ``**`` is
    just two ``*`` wildcards. A malformed pattern (an unclosed ``[``) matches
    nothing.

    Example:
        >>> match_path("src/main.go", "src/*.go")
        True
        >>> match_path("src/sub/main.go", "src/*.go")
        False
        >>> match_path("main.go", "[main.go")
        False
    """
    if _has_unclosed_bracket(pattern):
        return False

    pattern_parts = pattern.split("/")
    path_parts = path.split("/")
    if len(pattern_parts) != len(path_parts):
        return False

    return all(fnmatchcase(name, part) for name, part in zip(path_parts, pattern_parts))


def glob_match(path: str, pattern: str) -> bool:
    """Check whether a relative path matches an include/exclude glob.

    Three forms are recognised, tried in this order:

    - ``dir/*`` matches anything strictly inside ``dir``, at any depth.
    - ``*.ext`` matches any path ending in ``.ext``.
    - Any other pattern is a shell glob (``*``, ``?``, ``[...]``, never matching
      ``/``) matched against the whole path first and then against the
      basename alone.

    Args:
        path: Path relative to the root, using forward slashes.
        pattern: The glob pattern.

    Returns:
        bool: True if the path matches the pattern.

    Example:
        >>> glob_match("vendor/github.com/pkg/pkg.go", "vendor/*")
        True
        >>> glob_match("src/main.go", "*.go")
        True
        >>> glob_match("src/main_test.go", "main_*.go")
        True
        >>> glob_match("src/sub/a.go", "src/*.go")
        False
    """
    if pattern.endswith("/*"):
        return path.startswith(pattern[:-2] + "/")

    if pattern.startswith("*."):
        return path.endswith(pattern[1:])

    if match_path(path, pattern):
        return True

    return match_path(posixpath.basename(path), pattern)
