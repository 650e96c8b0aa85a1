"""File content printer with streaming support.

This module turns the collected files into Markdown file sections, reading each
file in chunks so memory use does not grow with file size.
"""

import codecs
import logging
from typing import Iterator, Sequence, Tuple

from .io.chunked_file_reader import read_chunks
from .markdown import file_section_end, file_section_start, read_error_marker
from .types import CollectedFile

logger = logging.getLogger(__name__)


class FileContentPrinter:
    """Streams the Markdown sections of collected files.

    Each file section is a second-level heading with the relative path followed
    by the content in a fenced block. A file that can't be read gets an inline
    error marker instead of (or after) its content; the remaining files are still
    printed.

    Attributes:
        files (Sequence[CollectedFile]): Files to print, in output order.
        encoding (str): Encoding used to read files.
        errors (str): Decode error handling: "strict", "ignore" or "replace".

    Example:
        >>> printer = FileContentPrinter(collect_files(config))  # doctest: +SKIP
        >>> for collected, section in printer.yield_file_contents():  # doctest: +SKIP
        ...     print("".join(section), end="")
        ## src/main.go
        ```
        package main
        ```
    """

    def __init__(self, files: Sequence[CollectedFile], encoding: str = "utf-8", errors: str = "replace") -> None:
        """Initialize the printer.

        Raises:
            ValueError: If errors is not one of "strict", "ignore" or "replace".
            LookupError: If the encoding is unknown.
        """
        if errors not in ("strict", "ignore", "replace"):
            raise ValueError(f"Invalid error handler '{errors}'. Must be one of: strict, ignore, replace")
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.files = files
        self.encoding = encoding
        self.errors = errors

    def yield_file_contents(self) -> Iterator[Tuple[CollectedFile, Iterator[str]]]:
        """Yield each file with an iterator over the chunks of its Markdown section.

        The section iterator must be consumed before advancing to the next file.
        """
        for collected in self.files:
            yield collected, self._stream_section(collected)

    def _stream_section(self, collected: CollectedFile) -> Iterator[str]:
        yield file_section_start(collected.relative_path)

        ends_with_newline = True
        try:
            with open(collected.path, "r", encoding=self.encoding, errors=self.errors) as f:
                for chunk in read_chunks(f):
                    ends_with_newline = chunk.endswith("\n")
                    yield chunk
        except (OSError, UnicodeError) as e:
            logger.debug("Cannot read %s: %s", collected.path, e)
            if not ends_with_newline:
                yield "\n"
                ends_with_newline = True
            yield read_error_marker(e)

        yield file_section_end(needs_newline=not ends_with_newline)
