"""Test configuration and fixtures for mkctx."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def _write_files(base_dir: Path, files: dict) -> None:
    """Create files (str or bytes content) below base_dir, making parent directories as needed."""
    for relative_path, content in files.items():
        path = base_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)


@pytest.fixture
def write_files():
    """Helper writing a dict of relative paths to contents below a directory."""
    return _write_files


@pytest.fixture
def sample_project(tmp_path):
    """A small Go project with vendored code, docs, a binary file and VCS metadata."""
    _write_files(
        tmp_path,
        {
            "src/main.go": "package main\n\nfunc main() {}\n",
            "src/utils.go": "package main\n\nfunc util() {}\n",
            "vendor/lib.go": "package vendor\n\nfunc Lib() {}\n",
            "vendor/github.com/pkg/pkg.go": "package pkg\n\nfunc Pkg() {}\n",
            "docs/readme.md": "# Documentation\n",
            "docs/api.md": "# API Documentation\n",
            "Makefile": "all:\n\tgo build\n",
            "image.png": b"\x00\x01\x02\x03",
            ".git/config": "[core]\n\trepositoryformatversion = 0\n",
            ".git/objects/obj": b"\x00\x01\x02\x03",
            ".gitignore": "*.png\ndocs/api.md\n",
        },
    )
    return tmp_path
