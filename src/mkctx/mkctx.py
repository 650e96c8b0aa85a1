"""Context document generation with streaming support.

This module ties the engine together: it resolves the configuration, builds the
directory tree, collects the files to list and streams the Markdown document
section by section while keeping line, character and token counts.
"""

from typing import Iterable, Iterator, List, Optional

from mkctx.config import FilterConfiguration
from mkctx.content_printer import FileContentPrinter
from mkctx.exceptions import TokenizationError
from mkctx.file_collector import collect_files
from mkctx.file_system_tree.file_system_tree import FileSystemTree
from mkctx.instructions import read_instructions
from mkctx.markdown import contents_section_start, instructions_section, tree_section_end, tree_section_start
from mkctx.token_counter import TokenCounter
from mkctx.types import CollectedFile, PathType


class StreamingMkCtx:
    """Streaming context generator for a project directory.

    The directory tree and the list of files are computed on construction. The
    document itself is produced by three streaming operations, meant to be run in
    order: stream_tree, stream_contents and stream_instructions. Each can run
    only once. Counts reflect what has been streamed so far.

    Attributes:
        config (FilterConfiguration): The resolved run configuration.
        files (List[CollectedFile]): Files selected for the content listing.

    Example:
        >>> generator = StreamingMkCtx("project", include_patterns=["*.go"])  # doctest: +SKIP
        >>> for chunk in generator.stream_tree():  # doctest: +SKIP
        ...     print(chunk, end="")
        # Directory Structure
        ```
        └── project/
            └── main.go
        ```
        <BLANKLINE>

    Raises:
        RootDirectoryError: If the directory is missing or not a directory.
        TokenizerNotAvailableError: If a tokenizer model is given but tiktoken is not installed.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        include_patterns: Optional[Iterable[str]] = None,
        exclude_patterns: Optional[Iterable[str]] = None,
        use_ignore_file: bool = False,
        tokenizer_model: Optional[str] = None,
        encoding: str = "utf-8",
        errors: str = "replace",
    ):
        """Resolve the configuration and prepare the tree and the file list.

        Args:
            directory: Directory to process.
            include_patterns: Globs a file must match to be listed.
            exclude_patterns: Globs that remove files from the listing.
            use_ignore_file: Whether to apply the patterns of the root .gitignore.
            tokenizer_model: Model to count tokens for, or None to disable token counting.
            encoding: Encoding used to read listed files.
            errors: Decode error handling used to read listed files.
        """
        self.config = FilterConfiguration.load(
            directory,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
            use_ignore_file=use_ignore_file,
        )
        self._counter = TokenCounter(model=tokenizer_model)
        self._fs_tree = FileSystemTree(self.config.root_directory)
        self.files: List[CollectedFile] = collect_files(self.config, self._fs_tree.get_tree())
        self._content_printer = FileContentPrinter(self.files, encoding=encoding, errors=errors)
        self._instructions = read_instructions(self.config.root_directory)

        self._directory_count = self._fs_tree.get_directory_count()

        self._tree_complete = False
        self._contents_complete = False
        self._instructions_complete = False

    @property
    def directory_count(self) -> int:
        """Number of directories in the tree, excluding the root."""
        return self._directory_count

    @property
    def file_count(self) -> int:
        """Number of files in the content listing."""
        return len(self.files)

    @property
    def has_instructions(self) -> bool:
        return self._instructions is not None

    @property
    def streaming_complete(self) -> bool:
        return self._tree_complete and self._contents_complete and self._instructions_complete

    @property
    def token_count(self) -> Optional[int]:
        """Tokens streamed so far, or None if token counting is disabled."""
        return self._counter.total_tokens

    @property
    def line_count(self) -> int:
        return self._counter.total_lines

    @property
    def character_count(self) -> int:
        return self._counter.total_characters

    def _count_and_yield(self, text: str) -> str:
        try:
            self._counter.count(text)
        except TokenizationError:
            # Line and character totals are already updated
            pass
        return text

    def stream_tree(self) -> Iterator[str]:
        """Stream the directory structure section, one line per chunk.

        Raises:
            RuntimeError: If the tree has already been streamed.
        """
        if self._tree_complete:
            raise RuntimeError("Tree has already been streamed")

        yield self._count_and_yield(tree_section_start())
        for line in self._fs_tree.stream_tree_representation():
            yield self._count_and_yield(line + "\n")
        yield self._count_and_yield(tree_section_end())
        self._tree_complete = True

    def stream_contents(self) -> Iterator[str]:
        """Stream the Markdown section of every listed file.

        Raises:
            RuntimeError: If the contents have already been streamed.
        """
        if self._contents_complete:
            raise RuntimeError("Contents have already been streamed")

        yield self._count_and_yield(contents_section_start())
        for _, section in self._content_printer.yield_file_contents():
            for chunk in section:
                yield self._count_and_yield(chunk)
        self._contents_complete = True

    def stream_instructions(self) -> Iterator[str]:
        """Stream the user instructions section, if the instructions file has content.

        Raises:
            RuntimeError: If the instructions have already been streamed.
        """
        if self._instructions_complete:
            raise RuntimeError("Instructions have already been streamed")

        if self._instructions is not None:
            yield self._count_and_yield(instructions_section(self._instructions))
        self._instructions_complete = True


class MkCtx(StreamingMkCtx):
    """Context generator that renders the whole document on construction.

    This holds the complete document in memory. Use StreamingMkCtx for large
    projects.

    Example:
        >>> context = MkCtx("project", use_ignore_file=True)  # doctest: +SKIP
        >>> print(context.text)  # doctest: +SKIP
    """

    def __init__(
        self,
        directory: PathType,
        *,
        include_patterns: Optional[Iterable[str]] = None,
        exclude_patterns: Optional[Iterable[str]] = None,
        use_ignore_file: bool = False,
        tokenizer_model: Optional[str] = None,
        encoding: str = "utf-8",
        errors: str = "replace",
    ):
        super().__init__(
            directory,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
            use_ignore_file=use_ignore_file,
            tokenizer_model=tokenizer_model,
            encoding=encoding,
            errors=errors,
        )
        self._tree_string = "".join(self.stream_tree())
        self._content_string = "".join(self.stream_contents())
        self._instructions_string = "".join(self.stream_instructions())

    @property
    def tree_string(self) -> str:
        return self._tree_string

    @property
    def content_string(self) -> str:
        return self._content_string

    @property
    def instructions_string(self) -> str:
        """The instructions section, or an empty string when there are no instructions."""
        return self._instructions_string

    @property
    def text(self) -> str:
        """The complete document."""
        return self._tree_string + self._content_string + self._instructions_string
