"""Command-line argument parsing for mkctx.

This module defines the command-line interface for mkctx,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from mkctx import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with mkctx's options.
    """
    description = """
    mkctx - Context Generator for LLMs

    Produces a single Markdown document describing a project: a tree of the
    directory structure followed by the contents of the selected source files,
    ready to paste into an LLM interface.

    File selection:
    - Include and exclude glob patterns (--include, --exclude)
    - Optional .gitignore patterns from the project root (--gitignore)
    - Binary files are never listed
    - .git contents and .env files are never listed unless explicitly included
    """

    epilog = """
    Examples:
      # Process all files in the current directory
      mkctx .

      # Include only Go files
      mkctx --include "*.go" /path/to/project

      # Include Go files, exclude tests
      mkctx --include "*.go" --exclude "*_test.go" /path/to/project

      # Respect gitignore patterns
      mkctx --gitignore /path/to/project

      # Combine filters
      mkctx --include "*.go" --exclude "vendor/*" --gitignore /path/to/project

      # Write to a file and print a summary with token counts to stderr
      mkctx -o context.md -s stderr -t gpt-4 /path/to/project

    Special files:
      .mkctx    If this file exists in the root directory, its contents are appended
                to the output as instructions for the LLM.
    """

    parser = argparse.ArgumentParser(
        prog="mkctx",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"mkctx version {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to process. All paths in the output are relative to this directory.",
    )
    parser.add_argument(
        "-i",
        "--include",
        metavar="PATTERN",
        action="append",
        default=[],
        help="Include only files matching the glob pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        metavar="PATTERN",
        action="append",
        default=[],
        help="Exclude files matching the glob pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-g",
        "--gitignore",
        action="store_true",
        help="Respect patterns from the .gitignore file in the directory.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-T",
        "--no-tree",
        action="store_true",
        help="Disable the directory structure section.",
    )
    parser.add_argument(
        "-C",
        "--no-contents",
        action="store_true",
        help="Disable the source code files section.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model to use for counting tokens (e.g., gpt-4). Specifying this enables token counting.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and selection decisions to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")
