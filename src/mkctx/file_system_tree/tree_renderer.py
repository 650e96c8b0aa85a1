"""ASCII rendering of the directory tree."""

from typing import Iterator

from .tree_entry import TreeEntry

LAST_CONNECTOR = "└── "
CONNECTOR = "├── "
LAST_CONTINUATION = "    "
CONTINUATION = "│   "


def render_tree(node: TreeEntry, prefix: str = "", is_last: bool = True) -> Iterator[str]:
    """Render a tree entry and its descendants, one line per entry.

    Output is depth-first, pre-order, in the style of the Unix ``tree`` command.
    Directory names end with ``/``. The entry passed in is rendered with a
    connector too, so a whole tree starts with ``└── root/``.

    Args:
        node: The entry to render.
        prefix: Continuation markers inherited from the ancestors.
        is_last: Whether ``node`` is the last of its siblings.

    Yields:
        Lines of the tree, without trailing newlines.

    Example:
        >>> root = TreeEntry("project", is_dir=True)
        >>> src = TreeEntry("src", is_dir=True, parent=root)
        >>> _ = TreeEntry("main.go", parent=src)
        >>> _ = TreeEntry("go.mod", parent=root)
        >>> print("\\n".join(render_tree(root)))
        └── project/
            ├── src/
            │   └── main.go
            └── go.mod
    """
    connector = LAST_CONNECTOR if is_last else CONNECTOR
    suffix = "/" if node.is_dir else ""
    yield f"{prefix}{connector}{node.name}{suffix}"

    child_prefix = prefix + (LAST_CONTINUATION if is_last else CONTINUATION)
    children = node.children
    for i, child in enumerate(children):
        yield from render_tree(child, child_prefix, i == len(children) - 1)
