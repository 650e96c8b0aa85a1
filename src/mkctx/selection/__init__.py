"""Selection policy: the ordered rules deciding which files are listed."""

from .base_rules import Decision, SelectionReason, SelectionRule
from .pattern_rules import ExcludeRule, IgnorePatternRule, IncludeRule
from .policy import SelectionPolicy, accept
from .protective_rules import IgnoreFileRule, InstructionsFileRule, SensitiveFileRule, VcsDirectoryRule

__all__ = [
    "Decision",
    "ExcludeRule",
    "IgnoreFileRule",
    "IgnorePatternRule",
    "IncludeRule",
    "InstructionsFileRule",
    "SelectionPolicy",
    "SelectionReason",
    "SelectionRule",
    "SensitiveFileRule",
    "VcsDirectoryRule",
    "accept",
]
