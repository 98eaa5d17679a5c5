"""
Public parse entry points.

Each function selects a grammar root, runs the matcher and either walks the
match tree into typed values or classifies the failure into a ParseError.
"""

from typing import List, Optional

from .commit.builder import body_text, build_commit, build_footers
from .commit.conventional import ConventionalCommit, Footer
from .config import get_settings
from .errors import ParseError
from .grammar import GrammarFailure, Pair, Rule, match
from .logging_config import get_logger

logger = get_logger(__name__)


def _match(rule: Rule, text: str) -> Pair:
    logger.debug(f"Parsing {rule.value} ({len(text)} chars)")
    try:
        return match(rule, text, max_length=get_settings().max_length)
    except GrammarFailure as failure:
        error = ParseError.from_failure(failure)
        logger.debug(
            f"Classified {rule.value} failure as {error.kind.value}: {failure.describe()}",
            extra={"extra_data": {
                "rule": rule.value,
                "kind": error.kind.value,
                "line": failure.line,
                "column": failure.column,
            }},
        )
        raise error from failure


def parse(text: str) -> ConventionalCommit:
    """
    Parse a complete commit message: summary, optional body, optional footers.

    Args:
        text: Commit message

    Returns:
        ConventionalCommit

    Raises:
        ParseError: If the message does not follow the grammar
    """
    return build_commit(_match(Rule.MESSAGE, text))


def parse_summary(text: str) -> ConventionalCommit:
    """
    Parse only a summary line.

    The result has no body and no footers.

    Raises:
        ParseError: If the summary does not follow the grammar
    """
    return build_commit(_match(Rule.SUMMARY, text))


def parse_body(text: str) -> Optional[str]:
    """
    Parse only a commit body.

    Returns None for empty or whitespace-only input.

    Raises:
        ParseError: MalformedOrUnexpectedFooterSeparator when the input holds
            footers instead of body text
    """
    return body_text(_match(Rule.BODY, text))


def parse_footers(text: str) -> List[Footer]:
    """Parse only a footer block. Empty input gives an empty list."""
    return build_footers(_match(Rule.FOOTERS, text))
