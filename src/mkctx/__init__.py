"""Context generation for LLMs.

This package walks a project directory, selects the files worth showing to a
language model and renders them, together with a tree of the project, into a
single Markdown document.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("mkctx")
except PackageNotFoundError:
    __version__ = "unknown"
