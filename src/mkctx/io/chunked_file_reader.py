"""Tools for chunk-based file reading operations."""

from typing import Iterator, TextIO

MINIMUM_CHUNK_SIZE = 4096  # 4 KB


def read_chunks(file_obj: TextIO, chunk_size: int = 65536) -> Iterator[str]:
    """Read an open text file in chunks that end on line boundaries where possible.

    Text after the last newline of a chunk is carried over into the next one, so
    token counting never sees a line split in two. A chunk without any newline
    is yielded as is.

    Args:
        file_obj: An open text file.
        chunk_size: Number of characters read per step. Must be at least 4096.

    Yields:
        Consecutive pieces of the file whose concatenation is the whole content.

    Raises:
        ValueError: If chunk_size is below the minimum.

    Example:
        >>> import io
        >>> list(read_chunks(io.StringIO("one\\ntwo\\nthree"), chunk_size=4096))
        ['one\\ntwo\\n', 'three']
    """
    if chunk_size < MINIMUM_CHUNK_SIZE:
        raise ValueError(f"chunk_size must be at least {MINIMUM_CHUNK_SIZE}, got {chunk_size}")

    carry = ""
    while True:
        chunk = file_obj.read(chunk_size)
        if not chunk:
            break
        content = carry + chunk
        cut = content.rfind("\n")
        if cut == -1:
            carry = ""
            yield content
            continue
        carry = content[cut + 1 :]  # noqa: E203
        yield content[: cut + 1]

    if carry:
        yield carry
