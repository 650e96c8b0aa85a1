"""Output writing for the mkctx CLI."""

import errno
import sys
import types
from pathlib import Path
from typing import Optional, TextIO, Type

from mkctx.types import PathType


class SafeWriter:
    """Writes generated text to a file or to standard output.

    A closed pipe on the other end (``mkctx . | head``) is reported as
    BrokenPipeError regardless of how the platform surfaces it.

    Attributes:
        output: The output path, or None for standard output.
    """

    def __init__(self, output: Optional[PathType] = None) -> None:
        self.output = output
        self._closed = False
        self._stream: TextIO
        if output is None:
            self._stream = sys.stdout
            self._owns_stream = False
        else:
            self._stream = Path(output).open("w", encoding="utf-8")
            self._owns_stream = True

    def write(self, data: str) -> None:
        """Write a chunk of output.

        Raises:
            BrokenPipeError: If the reading end of the pipe is gone.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        try:
            self._stream.write(data)
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Flush the output and close it if this writer opened it."""
        if self._closed:
            return
        self._closed = True
        try:
            self._stream.flush()
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise
        finally:
            if self._owns_stream:
                self._stream.close()

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority
            if exc_type is None:
                raise
