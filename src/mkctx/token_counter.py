"""Counter for tokens, lines, and characters in generated context.

Token counting uses OpenAI's tiktoken library, which is an optional dependency
(the 'token_counting' extra). Without it, or without a model name, only lines
and characters are counted.

The cl100k_base encoding used by gpt-4 is a reasonable approximation for most
current models when the exact tokenizer of the target model isn't available.
"""

import importlib.util
from collections import namedtuple
from typing import Any, Optional

from mkctx.exceptions import TokenizationError, TokenizerNotAvailableError

CountResult = namedtuple("CountResult", ["lines", "tokens", "characters"])


def check_tiktoken_available() -> bool:
    """Return True if the tiktoken library can be imported."""
    return importlib.util.find_spec("tiktoken") is not None


class TokenCounter:
    """Running totals of lines, characters and, optionally, tokens.

    Attributes:
        model (Optional[str]): Model whose tokenizer is used, or None to skip token counting.
        encoder (Optional[Any]): The tiktoken encoding, when token counting is enabled.

    Example:
        >>> counter = TokenCounter()
        >>> counter.count("Hello\\nworld!")
        CountResult(lines=1, tokens=None, characters=12)
        >>> counter.total_lines, counter.total_characters, counter.total_tokens
        (1, 12, None)

    Raises:
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
        ValueError: If tiktoken has no tokenizer for the model.
    """

    def __init__(self, model: Optional[str] = None):
        self.model = model
        self.encoder: Optional[Any] = None

        if model is not None:
            if not check_tiktoken_available():
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder(model)

        self._total_tokens: Optional[int] = None if self.encoder is None else 0
        self._total_lines = 0
        self._total_characters = 0

    @staticmethod
    def _get_encoder(model: str) -> Any:
        # Imported lazily, tiktoken is optional
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Consider using a well-supported model like "
                "'gpt-4' (cl100k_base encoding); its counts are a useful approximation for most models."
            )

    def count(self, text: str) -> CountResult:
        """Count a piece of text and add it to the running totals.

        Lines are counted as newline characters.

        Raises:
            TokenizationError: If the tokenizer fails. Line and character totals are still updated.
        """
        lines = text.count("\n")
        characters = len(text)
        self._total_lines += lines
        self._total_characters += characters

        tokens = None
        if self.encoder is not None:
            try:
                tokens = len(self.encoder.encode(text))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {e}") from e
            self._total_tokens = (self._total_tokens or 0) + tokens

        return CountResult(lines=lines, tokens=tokens, characters=characters)

    @property
    def total_tokens(self) -> Optional[int]:
        """Tokens counted so far, or None when token counting is disabled."""
        return self._total_tokens

    @property
    def total_lines(self) -> int:
        return self._total_lines

    @property
    def total_characters(self) -> int:
        return self._total_characters

    def reset_counts(self) -> None:
        """Reset all running totals, keeping the tokenizer."""
        self._total_tokens = None if self.encoder is None else 0
        self._total_lines = 0
        self._total_characters = 0
