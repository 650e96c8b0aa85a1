"""Pattern matchers for include/exclude globs and ignore-file patterns."""

from .gitignore_patterns import gitignore_match, load_ignore_file
from .glob_patterns import glob_match

__all__ = [
    "gitignore_match",
    "glob_match",
    "load_ignore_file",
]
