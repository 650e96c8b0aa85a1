"""Rules driven by user-supplied include, exclude and ignore-file patterns."""

from typing import Optional, Sequence

from mkctx.patterns.gitignore_patterns import gitignore_match
from mkctx.patterns.glob_patterns import glob_match

from .base_rules import Decision, SelectionReason, SelectionRule


class IncludeRule(SelectionRule):
    """When include patterns are given, a path must match at least one of them."""

    def __init__(self, include_patterns: Sequence[str]) -> None:
        self.include_patterns = tuple(include_patterns)

    def evaluate(self, relative_path: str) -> Optional[Decision]:
        if not self.include_patterns:
            return None
        if any(glob_match(relative_path, pattern) for pattern in self.include_patterns):
            return None
        return Decision.reject(SelectionReason.NOT_INCLUDED)


class ExcludeRule(SelectionRule):
    """Reject paths matching any exclude glob."""

    def __init__(self, exclude_patterns: Sequence[str]) -> None:
        self.exclude_patterns = tuple(exclude_patterns)

    def evaluate(self, relative_path: str) -> Optional[Decision]:
        if any(glob_match(relative_path, pattern) for pattern in self.exclude_patterns):
            return Decision.reject(SelectionReason.EXCLUDED)
        return None


class IgnorePatternRule(SelectionRule):
    """Reject paths matching any ignore-file pattern."""

    def __init__(self, ignore_patterns: Sequence[str]) -> None:
        self.ignore_patterns = tuple(ignore_patterns)

    def evaluate(self, relative_path: str) -> Optional[Decision]:
        if any(gitignore_match(pattern, relative_path) for pattern in self.ignore_patterns):
            return Decision.reject(SelectionReason.IGNORED)
        return None
