from mkctx.file_system_tree.tree_entry import TreeEntry
from mkctx.file_system_tree.tree_renderer import render_tree


def build_sample():
    root = TreeEntry("project", is_dir=True)
    TreeEntry(".git", is_dir=True, parent=root)
    src = TreeEntry("src", is_dir=True, parent=root)
    pkg = TreeEntry("pkg", is_dir=True, parent=src)
    TreeEntry("util.go", parent=pkg)
    TreeEntry("main.go", parent=src)
    TreeEntry("go.mod", parent=root)
    return root


def test_render_tree():
    assert list(render_tree(build_sample())) == [
        "└── project/",
        "    ├── .git/",
        "    ├── src/",
        "    │   ├── pkg/",
        "    │   │   └── util.go",
        "    │   └── main.go",
        "    └── go.mod",
    ]


def test_render_single_entry():
    assert list(render_tree(TreeEntry("empty", is_dir=True))) == ["└── empty/"]
    assert list(render_tree(TreeEntry("file.txt"))) == ["└── file.txt"]


def test_render_with_prefix_and_non_last_entry():
    node = TreeEntry("sub", is_dir=True)
    TreeEntry("a.txt", parent=node)

    assert list(render_tree(node, prefix="    ", is_last=False)) == [
        "    ├── sub/",
        "    │   └── a.txt",
    ]


def test_render_is_lazy():
    lines = render_tree(build_sample())

    assert next(lines) == "└── project/"
    assert next(lines) == "    ├── .git/"
