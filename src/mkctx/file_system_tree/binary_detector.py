"""Binary file detection utilities."""

import logging
from pathlib import Path

from mkctx.types import PathType

logger = logging.getLogger(__name__)

# Extensions classified as binary without reading the file
BINARY_EXTENSIONS = frozenset(
    {
        # Images
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".bmp",
        ".ico",
        ".svg",
        # Documents
        ".pdf",
        ".doc",
        ".docx",
        ".xls",
        ".xlsx",
        # Archives
        ".zip",
        ".tar",
        ".gz",
        ".rar",
        # Executables and libraries
        ".so",
        ".dll",
        ".exe",
        ".bin",
        # Database
        ".sqlite",
        ".db",
        ".sqlite3",
    }
)

SNIFF_SIZE = 8000


def is_binary_file(file_path: PathType, sniff_size: int = SNIFF_SIZE) -> bool:
    """Detect if a file is binary using its extension and a null-byte check.

    1. Known binary extensions (case-insensitive) are binary without any I/O.
    2. Otherwise the first ``sniff_size`` bytes are read; a null byte means binary.
    3. An empty file is text.
    4. A file that can't be opened or read is treated as binary, so unreadable
       content never ends up in the output.

    This function never raises for I/O problems.

    Args:
        file_path: Path to the file to check. Can be any path-like object.
        sniff_size: Number of bytes to inspect. Defaults to 8000.

    Returns:
        True if the file should be treated as binary.

    Example:
        >>> is_binary_file("logo.PNG")
        True
        >>> is_binary_file("/path/that/does/not/exist.txt")
        True
    """
    path_obj = Path(file_path)

    if path_obj.suffix.lower() in BINARY_EXTENSIONS:
        return True

    try:
        with open(path_obj, "rb") as file:
            chunk = file.read(sniff_size)
    except OSError as e:
        logger.debug("Treating unreadable file %s as binary: %s", path_obj, e)
        return True

    if not chunk:
        return False

    return b"\0" in chunk
