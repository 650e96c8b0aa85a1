"""Loading of the instructions file appended to the generated context."""

import logging
from pathlib import Path
from typing import Optional

from mkctx.config import INSTRUCTIONS_FILE_NAME
from mkctx.types import PathType

logger = logging.getLogger(__name__)


def read_instructions(root_directory: PathType) -> Optional[str]:
    """Return the content of the instructions file in the root, if it has any.

    The file is optional. A missing file, a directory with that name, an
    unreadable file and a file holding only whitespace all yield None.

    Args:
        root_directory: The root directory of the run.

    Returns:
        Optional[str]: The instructions text, unmodified.
    """
    path = Path(root_directory) / INSTRUCTIONS_FILE_NAME
    if not path.is_file():
        return None
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as e:
        logger.debug("Cannot read instructions file %s: %s", path, e)
        return None
    if not content.strip():
        return None
    return content
