"""Unit tests for the argument parser module in mkctx CLI."""

from pathlib import Path

import pytest

from mkctx import __version__
from mkctx.cli.argparser import create_parser, validate_args


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args(["project"])

    assert args.directory == Path("project")
    assert args.include == []
    assert args.exclude == []
    assert args.gitignore is False
    assert args.output is None
    assert args.no_tree is False
    assert args.no_contents is False
    assert args.summary is None
    assert args.tokenizer is None
    assert args.verbose is False


def test_repeated_patterns_keep_their_order(parser):
    args = parser.parse_args(["--include", "*.go", "-i", "*.md", "--exclude", "vendor/*", "-x", "*_test.go", "."])

    assert args.include == ["*.go", "*.md"]
    assert args.exclude == ["vendor/*", "*_test.go"]


def test_flags(parser):
    args = parser.parse_args(["-g", "-T", "-C", "-v", "-o", "out.md", "-s", "file", "-t", "gpt-4", "."])

    assert args.gitignore
    assert args.no_tree
    assert args.no_contents
    assert args.verbose
    assert args.output == Path("out.md")
    assert args.summary == "file"
    assert args.tokenizer == "gpt-4"


def test_long_flags(parser):
    args = parser.parse_args(["--gitignore", "--no-tree", "--no-contents", "--summary", "stdout", "."])

    assert args.gitignore and args.no_tree and args.no_contents
    assert args.summary == "stdout"


def test_directory_is_required(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args([])

    assert exc_info.value.code == 2
    assert "directory" in capsys.readouterr().err


def test_invalid_summary_destination(parser):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-s", "printer", "."])

    assert exc_info.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out == f"mkctx version {__version__}\n"


def test_help_mentions_options(parser):
    help_text = parser.format_help()

    assert "mkctx - Context Generator for LLMs" in help_text
    for option in ["--include", "--exclude", "--gitignore", "--version", "--help", "Examples:", ".mkctx"]:
        assert option in help_text


def test_validate_summary_file_requires_output(parser):
    with pytest.raises(ValueError, match="--summary=file requires -o/--output"):
        validate_args(parser.parse_args(["-s", "file", "."]))

    validate_args(parser.parse_args(["-s", "file", "-o", "out.md", "."]))
    validate_args(parser.parse_args(["-s", "stderr", "."]))
