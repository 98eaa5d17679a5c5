"""
Grammar rules and match-tree types.

Every production of the commit message grammar has a Rule member. Some
members only ever appear in failure reports (the "expected" set) and exist
so the error classifier can tell apart why a match stopped.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional


class Rule(Enum):
    """Productions of the commit message grammar."""

    # Roots
    MESSAGE = "message"
    SUMMARY = "summary"
    BODY = "body"
    FOOTERS = "footers"

    # Summary line
    COMMIT_TYPE = "commit_type"
    SCOPE = "scope"
    SCOPE_OPEN = "scope_open"
    SCOPE_CONTENT = "scope_content"
    SCOPE_CLOSE = "scope_close"
    NO_NESTED_PARENTHESIS = "no_nested_parenthesis"
    NO_WHITESPACE_OR_NEWLINE = "no_whitespace_or_newline"
    BREAKING_CHANGE_MARK = "breaking_change_mark"
    TYPE_SEPARATOR = "type_separator"
    WHITESPACE_TERMINAL = "whitespace_terminal"
    SUMMARY_CONTENT = "summary_content"

    # Sections
    BLANK_LINE = "blank_line"
    BODY_CONTENT = "body_content"
    EOI = "eoi"

    # Footers
    FOOTER = "footer"
    FOOTER_TOKEN = "footer_token"
    BREAKING_CHANGE_TOKEN = "breaking_change_token"
    FOOTER_SEPARATOR = "footer_separator"
    FOOTER_CONTENT = "footer_content"


@dataclass
class Pair:
    """
    A node of the match tree: a rule and the input span it matched.

    Children hold the sub-matches in input order.
    """

    rule: Rule
    source: str = field(repr=False)
    start: int
    end: int
    children: List["Pair"] = field(default_factory=list)

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def child(self, rule: Rule) -> Optional["Pair"]:
        """First direct child matching a rule, if any."""
        for pair in self.children:
            if pair.rule == rule:
                return pair
        return None


class GrammarFailure(Exception):
    """
    Raised when the input does not match a grammar root.

    Carries the furthest position the matcher reached and the set of rules
    that would have allowed it to continue there. A failure built with
    `custom_message` is a custom error rather than an expectation mismatch.
    """

    def __init__(
        self,
        source: str,
        position: int,
        expected: FrozenSet[Rule] = frozenset(),
        custom_message: Optional[str] = None
    ):
        self.source = source
        self.position = position
        self.expected = frozenset(expected)
        self.custom_message = custom_message
        super().__init__(self.describe())

    @property
    def is_custom(self) -> bool:
        return self.custom_message is not None

    @property
    def line(self) -> int:
        """1-based line number of the failure position."""
        return self.source.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        """1-based column of the failure position."""
        line_start = self.source.rfind("\n", 0, self.position) + 1
        return self.position - line_start + 1

    @property
    def line_text(self) -> str:
        """The input line holding the failure position, without its newline."""
        line_start = self.source.rfind("\n", 0, self.position) + 1
        line_end = self.source.find("\n", self.position)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end].rstrip("\r")

    def describe(self) -> str:
        if self.is_custom:
            return f"{self.custom_message} at {self.line}:{self.column}"
        names = ", ".join(sorted(rule.value for rule in self.expected)) or "nothing"
        return f"expected {names} at {self.line}:{self.column}"
