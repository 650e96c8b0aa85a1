from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SelectionReason(str, Enum):
    """Why a path was accepted or rejected by the selection policy.

    Values:
        IGNORE_FILE: The ignore file itself, not listed
        IGNORE_FILE_LISTED: The ignore file itself, listed through the include carve-out
        INSTRUCTIONS_FILE: The instructions file, read separately from the listing
        VCS_DIRECTORY: Inside the version-control metadata directory
        SENSITIVE_FILE: An environment file that was not explicitly included
        NOT_INCLUDED: Include patterns are active and none matched
        EXCLUDED: An exclude pattern matched
        IGNORED: An ignore-file pattern matched
        ACCEPTED: No rule rejected the path
    """

    IGNORE_FILE = "ignore_file"
    IGNORE_FILE_LISTED = "ignore_file_listed"
    INSTRUCTIONS_FILE = "instructions_file"
    VCS_DIRECTORY = "vcs_directory"
    SENSITIVE_FILE = "sensitive_file"
    NOT_INCLUDED = "not_included"
    EXCLUDED = "excluded"
    IGNORED = "ignored"
    ACCEPTED = "accepted"


@dataclass(frozen=True)
class Decision:
    """Outcome of evaluating a path against the selection policy.

    Attributes:
        accepted: True if the file belongs in the content listing.
        reason: The rule that decided.
    """

    accepted: bool
    reason: SelectionReason

    @classmethod
    def accept(cls, reason: SelectionReason = SelectionReason.ACCEPTED) -> "Decision":
        return cls(True, reason)

    @classmethod
    def reject(cls, reason: SelectionReason) -> "Decision":
        return cls(False, reason)


class SelectionRule(ABC):
    """
    Abstract base class for one step of the selection policy.

    A rule looks at a relative path and either decides (returns a Decision) or
    stays silent (returns None) so that the next rule in the policy is consulted.
    Rules are stateless apart from the patterns they are constructed with.

    Example:
        >>> class NoTmpRule(SelectionRule):
        ...     def evaluate(self, relative_path: str) -> Optional[Decision]:
        ...         if relative_path.endswith(".tmp"):
        ...             return Decision.reject(SelectionReason.EXCLUDED)
        ...         return None
        >>> NoTmpRule().evaluate("build/out.tmp")
        Decision(accepted=False, reason=<SelectionReason.EXCLUDED: 'excluded'>)
        >>> NoTmpRule().evaluate("main.go") is None
        True
        >>> NoTmpRule().name
        'NoTmpRule'
    """

    @property
    def name(self) -> str:
        """Human-readable rule name used in debug output."""
        return self.__class__.__name__

    @abstractmethod
    def evaluate(self, relative_path: str) -> Optional[Decision]:
        """
        Decide on a path, or defer to the next rule.

        Args:
            relative_path (str): Path relative to the root, using forward slashes.

        Returns:
            Optional[Decision]: The decision, or None to let later rules decide.
        """
        pass
