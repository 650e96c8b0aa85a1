"""Rules that protect reserved files regardless of user patterns."""

import posixpath
from typing import Optional, Sequence

from mkctx.config import (
    DEFAULT_IGNORE_FILE_LISTING_PATTERNS,
    IGNORE_FILE_NAME,
    INSTRUCTIONS_FILE_NAME,
    SENSITIVE_FILE_NAME,
    VCS_DIRECTORY_NAME,
)
from mkctx.patterns.glob_patterns import glob_match

from .base_rules import Decision, SelectionReason, SelectionRule


class IgnoreFileRule(SelectionRule):
    """Keep the ignore file out of the listing.

    The ignore file is listed only when include patterns are active, contain all
    of ``listing_patterns``, and ignore patterns are in use. That decision is
    final: include, exclude and ignore patterns are not consulted afterwards.
    An empty ``listing_patterns`` disables the carve-out entirely.
    """

    def __init__(
        self,
        include_patterns: Sequence[str],
        ignore_patterns: Sequence[str],
        listing_patterns: Sequence[str] = DEFAULT_IGNORE_FILE_LISTING_PATTERNS,
    ) -> None:
        self.include_patterns = tuple(include_patterns)
        self.ignore_patterns = tuple(ignore_patterns)
        self.listing_patterns = tuple(listing_patterns)

    def _listing_enabled(self) -> bool:
        if not self.listing_patterns or not self.include_patterns or not self.ignore_patterns:
            return False
        return set(self.listing_patterns).issubset(self.include_patterns)

    def evaluate(self, relative_path: str) -> Optional[Decision]:
        if posixpath.basename(relative_path) != IGNORE_FILE_NAME:
            return None
        if self._listing_enabled():
            return Decision.accept(SelectionReason.IGNORE_FILE_LISTED)
        return Decision.reject(SelectionReason.IGNORE_FILE)


class InstructionsFileRule(SelectionRule):
    """The instructions file is appended to the output separately, never listed."""

    def evaluate(self, relative_path: str) -> Optional[Decision]:
        if posixpath.basename(relative_path) == INSTRUCTIONS_FILE_NAME:
            return Decision.reject(SelectionReason.INSTRUCTIONS_FILE)
        return None


class VcsDirectoryRule(SelectionRule):
    """Nothing from the root version-control directory is ever listed."""

    def evaluate(self, relative_path: str) -> Optional[Decision]:
        if relative_path == VCS_DIRECTORY_NAME or relative_path.startswith(VCS_DIRECTORY_NAME + "/"):
            return Decision.reject(SelectionReason.VCS_DIRECTORY)
        return None


class SensitiveFileRule(SelectionRule):
    """Reject environment files unless an include pattern asks for them.

    A path is sensitive when its basename is ``.env`` or it ends in ``.env``. It
    is let through (to the remaining rules) when an include pattern is literally
    ``.env`` or ``*.env``, or glob-matches the path.
    """

    def __init__(self, include_patterns: Sequence[str]) -> None:
        self.include_patterns = tuple(include_patterns)

    def _explicitly_included(self, relative_path: str) -> bool:
        for pattern in self.include_patterns:
            if pattern in (SENSITIVE_FILE_NAME, "*" + SENSITIVE_FILE_NAME) or glob_match(relative_path, pattern):
                return True
        return False

    def evaluate(self, relative_path: str) -> Optional[Decision]:
        is_sensitive = posixpath.basename(relative_path) == SENSITIVE_FILE_NAME or relative_path.endswith(
            SENSITIVE_FILE_NAME
        )
        if is_sensitive and not self._explicitly_included(relative_path):
            return Decision.reject(SelectionReason.SENSITIVE_FILE)
        return None
