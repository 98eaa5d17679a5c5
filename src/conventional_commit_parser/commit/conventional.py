"""
Conventional Commits data model.

Defines the typed record produced by the parser and its inverse, the
formatter, following the Conventional Commits specification
(https://www.conventionalcommits.org/).

Standard format:

    type(scope)!: summary

    body

    token: content

where:
- type: The kind of change (feat, fix, docs, etc.) or any custom token
- scope: Optional context (subsystem affected)
- !: Optional breaking change marker
- body: Optional free-form text
- footers: Optional trailers, git trailer style
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

BREAKING_CHANGE_TOKENS = frozenset({"BREAKING CHANGE", "BREAKING-CHANGE"})


class CommitType(Enum):
    """Standard conventional commit types."""

    FEATURE = "feat"          # New feature
    BUG_FIX = "fix"           # Bug fix
    CHORE = "chore"           # Maintenance tasks, dependencies
    REVERT = "revert"         # Reverting previous commits
    PERFORMANCE = "perf"      # Performance improvements
    DOCUMENTATION = "docs"    # Documentation only changes
    STYLE = "style"           # Code style/formatting (no logic change)
    REFACTOR = "refactor"     # Code restructuring (no behavior change)
    TEST = "test"             # Adding or updating tests
    BUILD = "build"           # Build system or external dependencies
    CI = "ci"                 # CI/CD configuration changes

    @property
    def description(self) -> str:
        """Get human-readable description of commit type."""
        descriptions = {
            CommitType.FEATURE: "A new feature",
            CommitType.BUG_FIX: "A bug fix",
            CommitType.CHORE: "Changes to build process or auxiliary tools",
            CommitType.REVERT: "Reverts a previous commit",
            CommitType.PERFORMANCE: "A code change that improves performance",
            CommitType.DOCUMENTATION: "Documentation only changes",
            CommitType.STYLE: "Changes that don't affect code meaning (formatting, etc.)",
            CommitType.REFACTOR: "Code change that neither fixes a bug nor adds a feature",
            CommitType.TEST: "Adding missing tests or correcting existing tests",
            CommitType.BUILD: "Changes that affect the build system or dependencies",
            CommitType.CI: "Changes to CI/CD configuration files and scripts",
        }
        return descriptions[self]

    @classmethod
    def from_token(cls, token: str) -> "CommitKind":
        """
        Classify a raw commit type token.

        Matching against the standard types is case-insensitive. Any other
        token becomes a Custom type holding the original text.

        Args:
            token: Commit type token as written in the summary line

        Returns:
            CommitType member or Custom
        """
        try:
            return cls(token.lower())
        except ValueError:
            return Custom(token)


@dataclass(frozen=True)
class Custom:
    """A commit type outside the standard set, e.g. `wip` or `release`."""

    value: str

    @property
    def description(self) -> str:
        return f"Custom commit type '{self.value}'"


CommitKind = Union[CommitType, Custom]


class SeparatorKind(Enum):
    """Footer delimiter syntaxes."""

    COLON_SPACE = ": "
    SPACE_HASH = " #"
    COLON_NEWLINE = ":\n"

    @property
    def literal(self) -> str:
        return self.value


@dataclass(frozen=True)
class Footer:
    """A single `token<separator>content` trailer."""

    token: str
    content: str
    separator: SeparatorKind = SeparatorKind.COLON_SPACE

    @property
    def is_breaking_change(self) -> bool:
        """BREAKING CHANGE must be uppercase; the hyphenated form is a synonym."""
        return self.token in BREAKING_CHANGE_TOKENS

    def format(self) -> str:
        return f"{self.token}{self.separator.literal}{self.content}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "content": self.content,
            "separator": self.separator.name.lower(),
        }


@dataclass(frozen=True)
class ConventionalCommit:
    """Represents a parsed conventional commit message."""

    commit_type: CommitKind
    summary: str
    scope: Optional[str] = None
    body: Optional[str] = None
    footers: Tuple[Footer, ...] = field(default_factory=tuple)
    is_breaking_change: bool = False

    @property
    def has_breaking_change_footer(self) -> bool:
        return any(footer.is_breaking_change for footer in self.footers)

    def format(self) -> str:
        """Format as conventional commit string."""
        # Build header
        header = self.commit_type.value
        if self.scope:
            header += f"({self.scope})"
        if self.is_breaking_change and not self.has_breaking_change_footer:
            header += "!"
        header += f": {self.summary}"

        # Build full message
        parts = [header]
        if self.body:
            parts.append(self.body)
        if self.footers:
            parts.append("\n".join(footer.format() for footer in self.footers))

        return "\n\n".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping of the commit."""
        return {
            "commit_type": self.commit_type.value,
            "is_custom_type": isinstance(self.commit_type, Custom),
            "scope": self.scope,
            "summary": self.summary,
            "body": self.body,
            "footers": [footer.to_dict() for footer in self.footers],
            "is_breaking_change": self.is_breaking_change,
        }


def format_conventional_commit(
    commit_type: CommitKind,
    summary: str,
    scope: Optional[str] = None,
    body: Optional[str] = None,
    footers: Optional[Tuple[Footer, ...]] = None,
    breaking: bool = False
) -> str:
    """
    Format a conventional commit message.

    Args:
        commit_type: Type of commit
        summary: Brief description in imperative mood
        scope: Optional scope
        body: Optional detailed body
        footers: Optional footers (e.g., BREAKING CHANGE, issue refs)
        breaking: Whether this is a breaking change

    Returns:
        Formatted conventional commit message
    """
    footers = tuple(footers or ())
    commit = ConventionalCommit(
        commit_type=commit_type,
        summary=summary,
        scope=scope,
        body=body,
        footers=footers,
        is_breaking_change=breaking or any(f.is_breaking_change for f in footers)
    )
    return commit.format()
