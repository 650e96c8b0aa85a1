"""Markdown layout of the generated context document."""

FENCE = "```"


def tree_section_start() -> str:
    return f"# Directory Structure\n{FENCE}\n"


def tree_section_end() -> str:
    return f"{FENCE}\n\n"


def contents_section_start() -> str:
    return "# Source Code Files\n\n"


def file_section_start(relative_path: str) -> str:
    return f"## {relative_path}\n{FENCE}\n"


def file_section_end(needs_newline: bool = False) -> str:
    """Close a file block; ``needs_newline`` keeps the fence on its own line."""
    return ("\n" if needs_newline else "") + f"{FENCE}\n\n"


def read_error_marker(error: BaseException) -> str:
    return f"Error reading file: {error}\n"


def instructions_section(instructions: str) -> str:
    """Format the user instructions block appended after the file listing.

    Example:
        >>> print(instructions_section("Review the parser."), end="")
        # USER INSTRUCTIONS
        <BLANKLINE>
        ```
        Review the parser.
        ```
    """
    if not instructions.endswith("\n"):
        instructions += "\n"
    return f"# USER INSTRUCTIONS\n\n{FENCE}\n{instructions}{FENCE}\n"
