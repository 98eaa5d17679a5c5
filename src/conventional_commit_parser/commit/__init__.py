"""
Conventional commit data model.

Provides the typed record produced by the parser and the formatter that
turns it back into message text.

**Main Components:**
- **conventional**: Commit types, footers and the commit record
- **builder**: Walks a grammar match tree into a ConventionalCommit
"""

from .conventional import (
    BREAKING_CHANGE_TOKENS,
    CommitKind,
    CommitType,
    ConventionalCommit,
    Custom,
    Footer,
    SeparatorKind,
    format_conventional_commit,
)

__all__ = [
    "BREAKING_CHANGE_TOKENS",
    "CommitKind",
    "CommitType",
    "ConventionalCommit",
    "Custom",
    "Footer",
    "SeparatorKind",
    "format_conventional_commit",
]
