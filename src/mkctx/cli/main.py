"""Command-line interface for mkctx.

This module is the entry point of the ``mkctx`` command. It parses the command
line, runs the context generator and writes the Markdown document to stdout or
to a file.

Exit Codes:
    0: Successful completion
    1: Runtime error, including an invalid root directory
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (the reader of stdout went away)

Example:
    # Process the current directory
    $ mkctx .

    # Only Go files outside vendor/, honoring .gitignore
    $ mkctx --include "*.go" --exclude "vendor/*" --gitignore .
"""

import logging
import os
import sys
from collections.abc import Mapping
from typing import Optional

from mkctx.cli.argparser import create_parser, validate_args
from mkctx.cli.safe_writer import SafeWriter
from mkctx.exceptions import RootDirectoryError, TokenizerNotAvailableError
from mkctx.mkctx import StreamingMkCtx
from mkctx.token_counter import check_tiktoken_available


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing the summary metrics.

    Returns:
        The counts, one per line. Tokens are included only when counted.

    Example:
        >>> print(format_counts({"directories": 2, "files": 3, "lines": 40, "tokens": None, "characters": 900}))
        Directories: 2
        Files: 3
        Lines: 40
        Characters: 900
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.insert(3, f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _silence_stdout() -> None:
    # Keep the interpreter from reporting the broken pipe again at shutdown
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def main() -> None:
    """Main entry point for the mkctx command-line interface."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        validate_args(args)

        if args.tokenizer and not check_tiktoken_available():
            raise TokenizerNotAvailableError(
                "Token counting was requested with -t/--tokenizer, but the required tiktoken library is not installed."
            )

        generator = StreamingMkCtx(
            args.directory,
            include_patterns=args.include,
            exclude_patterns=args.exclude,
            use_ignore_file=args.gitignore,
            tokenizer_model=args.tokenizer,
        )

        with SafeWriter(args.output) as writer:
            if not args.no_tree:
                for chunk in generator.stream_tree():
                    writer.write(chunk)

            if not args.no_contents:
                for chunk in generator.stream_contents():
                    writer.write(chunk)

            for chunk in generator.stream_instructions():
                writer.write(chunk)

            if args.summary:
                counts = {
                    "directories": generator.directory_count,
                    "files": generator.file_count,
                    "lines": generator.line_count,
                    "tokens": generator.token_count,
                    "characters": generator.character_count,
                }
                count_output_str = format_counts(counts)
                if args.summary in ("stdout", "file"):
                    writer.write("\n" + count_output_str + "\n")
                else:
                    print(count_output_str, file=sys.stderr)

        if args.no_tree and args.no_contents and not generator.has_instructions and not args.summary:
            print("Warning: Both tree and contents printing were disabled. No output generated.", file=sys.stderr)

    except BrokenPipeError:
        if args.output is None:
            _silence_stdout()
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except TokenizerNotAvailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("To enable token counting, install mkctx with the 'token_counting' extra:", file=sys.stderr)
        print('    pip install "mkctx[token_counting]"', file=sys.stderr)
        print("    # or with Poetry:", file=sys.stderr)
        print('    poetry add "mkctx[token_counting]"', file=sys.stderr)
        sys.exit(1)
    except RootDirectoryError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("Use --help for usage information", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
