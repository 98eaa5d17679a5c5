"""
Exceptions raised by the parse entry points.
"""

from typing import List

from ..grammar.rules import GrammarFailure
from .categories import ParseErrorKind, classify_failure


class ParseError(Exception):
    """
    A commit message did not match the grammar.

    Attributes:
        kind: Classified error kind
        message: Fixed explanation for the kind
        failure: Underlying grammar failure (position and expected rules)
    """

    def __init__(self, kind: ParseErrorKind, failure: GrammarFailure):
        self.kind = kind
        self.message = kind.explanation
        self.failure = failure
        super().__init__(f"{self.message} (line {failure.line}, column {failure.column})")

    @classmethod
    def from_failure(cls, failure: GrammarFailure) -> "ParseError":
        return cls(classify_failure(failure), failure)

    @property
    def line(self) -> int:
        return self.failure.line

    @property
    def column(self) -> int:
        return self.failure.column

    @property
    def expected(self) -> List[str]:
        """Names of the rules expected at the failure position, sorted."""
        return sorted(rule.value for rule in self.failure.expected)
