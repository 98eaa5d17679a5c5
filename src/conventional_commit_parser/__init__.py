"""
Conventional Commits message parser.

Parses free-form commit message text into a ConventionalCommit: a typed,
optionally scoped summary line, an optional body and zero or more footers,
with breaking change detection from the `!` marker or a BREAKING CHANGE
footer.

**Main Components:**
- **parser**: parse, parse_summary, parse_body, parse_footers
- **commit**: Typed commit model and formatter
- **grammar**: Recursive-descent grammar with failure tracking
- **errors**: Error kinds, classification and formatting
"""

from .commit import (
    CommitKind,
    CommitType,
    ConventionalCommit,
    Custom,
    Footer,
    SeparatorKind,
    format_conventional_commit,
)
from .errors import ParseError, ParseErrorKind, ErrorFormatter, format_error_for_user
from .parser import parse, parse_summary, parse_body, parse_footers

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse",
    "parse_summary",
    "parse_body",
    "parse_footers",
    # Model
    "CommitKind",
    "CommitType",
    "ConventionalCommit",
    "Custom",
    "Footer",
    "SeparatorKind",
    "format_conventional_commit",
    # Errors
    "ParseError",
    "ParseErrorKind",
    "ErrorFormatter",
    "format_error_for_user",
]
