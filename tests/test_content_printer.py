import pytest

from mkctx.content_printer import FileContentPrinter
from mkctx.types import CollectedFile


def collected(tmp_path, relative_path, content):
    path = tmp_path / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return CollectedFile(str(path), relative_path)


def render(printer):
    return "".join(chunk for _, section in printer.yield_file_contents() for chunk in section)


def test_file_section(tmp_path):
    printer = FileContentPrinter([collected(tmp_path, "src/main.go", "package main\n")])

    assert render(printer) == "## src/main.go\n```\npackage main\n```\n\n"


def test_sections_in_given_order(tmp_path):
    files = [collected(tmp_path, "b.txt", "b\n"), collected(tmp_path, "a.txt", "a\n")]

    output = render(FileContentPrinter(files))

    assert output == "## b.txt\n```\nb\n```\n\n## a.txt\n```\na\n```\n\n"


def test_yields_collected_file_with_section(tmp_path):
    file = collected(tmp_path, "main.go", "package main\n")

    ((yielded, section),) = list(FileContentPrinter([file]).yield_file_contents())

    assert yielded == file
    assert list(section) == ["## main.go\n```\n", "package main\n", "```\n\n"]


def test_missing_trailing_newline(tmp_path):
    printer = FileContentPrinter([collected(tmp_path, "main.go", "package main")])

    assert render(printer) == "## main.go\n```\npackage main\n```\n\n"


def test_empty_file(tmp_path):
    printer = FileContentPrinter([collected(tmp_path, "empty.txt", "")])

    assert render(printer) == "## empty.txt\n```\n```\n\n"


def test_unreadable_file_gets_error_marker(tmp_path):
    missing = CollectedFile(str(tmp_path / "gone.txt"), "gone.txt")
    files = [missing, collected(tmp_path, "ok.txt", "fine\n")]

    output = render(FileContentPrinter(files))

    assert output.startswith("## gone.txt\n```\nError reading file: ")
    assert "No such file or directory" in output
    assert output.endswith("```\n\n## ok.txt\n```\nfine\n```\n\n")


def test_invalid_utf8_is_replaced(tmp_path):
    printer = FileContentPrinter([collected(tmp_path, "latin1.txt", b"caf\xe9\n")])

    assert render(printer) == "## latin1.txt\n```\ncaf\ufffd\n```\n\n"


def test_strict_decoding_reports_error(tmp_path):
    printer = FileContentPrinter([collected(tmp_path, "latin1.txt", b"caf\xe9\n")], errors="strict")

    output = render(printer)

    assert output.startswith("## latin1.txt\n```\nError reading file: 'utf-8' codec can't decode")
    assert output.endswith("```\n\n")


def test_large_file_is_streamed_in_chunks(tmp_path):
    content = "x = 1\n" * 50000
    file = collected(tmp_path, "big.py", content)

    ((_, section),) = list(FileContentPrinter([file]).yield_file_contents())
    chunks = list(section)

    assert len(chunks) > 3
    assert "".join(chunks[1:-1]) == content


def test_invalid_error_handler():
    with pytest.raises(ValueError, match="Invalid error handler"):
        FileContentPrinter([], errors="backslashreplace")


def test_unknown_encoding():
    with pytest.raises(LookupError, match="not available"):
        FileContentPrinter([], encoding="no-such-encoding")
