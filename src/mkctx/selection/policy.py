"""Ordered selection policy deciding which files are listed."""

import logging
from typing import List, Optional, Sequence

from mkctx.config import DEFAULT_IGNORE_FILE_LISTING_PATTERNS, FilterConfiguration

from .base_rules import Decision, SelectionRule
from .pattern_rules import ExcludeRule, IgnorePatternRule, IncludeRule
from .protective_rules import IgnoreFileRule, InstructionsFileRule, SensitiveFileRule, VcsDirectoryRule

logger = logging.getLogger(__name__)


class SelectionPolicy:
    """Ordered chain of selection rules.

    Rules are evaluated in order and the first one returning a Decision wins. A
    path no rule decides on is accepted. The default chain is:

    1. IgnoreFileRule
    2. InstructionsFileRule
    3. VcsDirectoryRule
    4. SensitiveFileRule
    5. IncludeRule
    6. ExcludeRule
    7. IgnorePatternRule

    Attributes:
        rules (List[SelectionRule]): The rules, in evaluation order.

    Example:
        >>> policy = SelectionPolicy.from_patterns(include_patterns=["*.go"], exclude_patterns=["vendor/*"])
        >>> policy.accept("src/main.go")
        True
        >>> policy.evaluate("vendor/lib.go").reason.value
        'excluded'
        >>> policy.evaluate(".git/config").reason.value
        'vcs_directory'
    """

    def __init__(self, rules: Sequence[SelectionRule]):
        for i, rule in enumerate(rules):
            if not isinstance(rule, SelectionRule):
                raise TypeError(f"Rule at index {i} must implement SelectionRule, got {type(rule)}")
        self.rules: List[SelectionRule] = list(rules)

    @classmethod
    def from_patterns(
        cls,
        include_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
        ignore_patterns: Sequence[str] = (),
        ignore_file_listing_patterns: Sequence[str] = DEFAULT_IGNORE_FILE_LISTING_PATTERNS,
    ) -> "SelectionPolicy":
        """Build the default rule chain for the given patterns."""
        return cls(
            [
                IgnoreFileRule(include_patterns, ignore_patterns, ignore_file_listing_patterns),
                InstructionsFileRule(),
                VcsDirectoryRule(),
                SensitiveFileRule(include_patterns),
                IncludeRule(include_patterns),
                ExcludeRule(exclude_patterns),
                IgnorePatternRule(ignore_patterns),
            ]
        )

    @classmethod
    def from_config(cls, config: FilterConfiguration) -> "SelectionPolicy":
        """Build the default rule chain for a resolved configuration."""
        return cls.from_patterns(
            config.include_patterns,
            config.exclude_patterns,
            config.ignore_patterns,
            config.ignore_file_listing_patterns,
        )

    def evaluate(self, relative_path: str) -> Decision:
        """Return the decision for a path, including the reason code of the deciding rule.

        Args:
            relative_path: Path relative to the root, using forward slashes.

        Returns:
            Decision: Accepted or rejected, with the reason.
        """
        for rule in self.rules:
            decision: Optional[Decision] = rule.evaluate(relative_path)
            if decision is not None:
                logger.debug("%s: %s (%s)", relative_path, decision.reason.value, rule.name)
                return decision
        return Decision.accept()

    def accept(self, relative_path: str) -> bool:
        """Return True if the path belongs in the content listing."""
        return self.evaluate(relative_path).accepted


def accept(
    relative_path: str,
    include_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
    ignore_patterns: Sequence[str] = (),
) -> bool:
    """Decide on a single path with the default rule chain.

    Example:
        >>> accept("src/main.go")
        True
        >>> accept(".env")
        False
        >>> accept(".env", include_patterns=[".env"])
        True
        >>> accept("docs/readme.md", ignore_patterns=["*.md"])
        False
    """
    return SelectionPolicy.from_patterns(include_patterns, exclude_patterns, ignore_patterns).accept(relative_path)
