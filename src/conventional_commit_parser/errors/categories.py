"""
Error classification for grammar failures.
"""

from enum import Enum

from ..grammar.rules import GrammarFailure, Rule


class ParseErrorKind(Enum):
    """Kinds of errors a commit message parse can fail with"""
    MISSING_SEPARATOR = "MissingSeparator"
    MISSING_WHITESPACE = "MissingWhiteSpace"
    UNEXPECTED_PARENTHESIS = "UnexpectedParenthesis"
    UNEXPECTED_WHITESPACE_OR_NEWLINE = "UnexpectedWhitespaceOrNewLine"
    MALFORMED_SCOPE = "MalformedScope"
    MALFORMED_OR_UNEXPECTED_FOOTER_SEPARATOR = "MalformedOrUnexpectedFooterSeparator"
    OTHER = "Other"

    @property
    def explanation(self) -> str:
        """Fixed, human-readable explanation of the error kind."""
        return _EXPLANATIONS[self]


_EXPLANATIONS = {
    ParseErrorKind.MISSING_SEPARATOR: "Missing `:` after commit type",
    ParseErrorKind.MISSING_WHITESPACE: "Missing whitespace terminal after commit type separator `:`",
    ParseErrorKind.UNEXPECTED_PARENTHESIS: "Unexpected parenthesis in commit scope",
    ParseErrorKind.UNEXPECTED_WHITESPACE_OR_NEWLINE: "Unexpected whitespace or new line in commit scope",
    ParseErrorKind.MALFORMED_SCOPE: "Malformed scope",
    ParseErrorKind.MALFORMED_OR_UNEXPECTED_FOOTER_SEPARATOR: "Malformed footer token or unexpected footer separator",
    ParseErrorKind.OTHER: "Unexpected parsing error",
}

_FOOTER_RULES = frozenset({
    Rule.FOOTER,
    Rule.FOOTER_TOKEN,
    Rule.BREAKING_CHANGE_TOKEN,
    Rule.FOOTER_SEPARATOR,
})


def classify_failure(failure: GrammarFailure) -> ParseErrorKind:
    """
    Pick the most specific error kind for a grammar failure.

    The expected sets can overlap, so the checks run in a fixed precedence
    order and the first hit wins.

    Args:
        failure: The grammar failure to classify

    Returns:
        ParseErrorKind
    """
    if failure.is_custom:
        return ParseErrorKind.OTHER

    expected = failure.expected

    if Rule.TYPE_SEPARATOR in expected:
        return ParseErrorKind.MISSING_SEPARATOR

    if Rule.NO_NESTED_PARENTHESIS in expected:
        return ParseErrorKind.UNEXPECTED_PARENTHESIS

    if Rule.NO_WHITESPACE_OR_NEWLINE in expected:
        return ParseErrorKind.UNEXPECTED_WHITESPACE_OR_NEWLINE

    if Rule.WHITESPACE_TERMINAL in expected:
        return ParseErrorKind.MISSING_WHITESPACE

    if Rule.SCOPE_CONTENT in expected:
        return ParseErrorKind.MALFORMED_SCOPE

    if expected & _FOOTER_RULES:
        return ParseErrorKind.MALFORMED_OR_UNEXPECTED_FOOTER_SEPARATOR

    # Default to the catch-all
    return ParseErrorKind.OTHER
