class RootDirectoryError(Exception):
    """
    Exception raised when the root directory of a run cannot be used.

    This is the only fatal condition of the selection engine. It is raised while
    the configuration is resolved, before any directory is walked.

    Attributes:
        path (str): The root directory that was requested.

    Example:
        >>> error = RootDirectoryError("/nowhere", "Cannot access directory '/nowhere'")
        >>> error.path
        '/nowhere'
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class TokenizerNotAvailableError(Exception):
    """
    Exception raised when token counting is requested but tiktoken is not installed.

    The tiktoken package is an optional dependency provided by the 'token_counting' extra.

    Attributes:
        message (str): Error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        self.message = f"{message} To enable token counting, install mkctx with the 'token_counting' extra: " + (
            "'pip install mkctx[token_counting]' or 'poetry install --extras token_counting'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """Exception raised when the tokenizer fails on a piece of text."""

    pass
