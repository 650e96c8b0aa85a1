from os import PathLike
from typing import NamedTuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class CollectedFile(NamedTuple):
    """A file accepted for the content listing.

    Attributes:
        path: OS-native path of the file (the root joined with the relative path).
        relative_path: Forward-slash path relative to the root directory.
    """

    path: str
    relative_path: str
