"""
Recursive-descent matcher for the commit message grammar.

    message       := summary (blank-line body)? (blank-line footers)? newline* EOI
    summary       := commit-type scope? "!"? ":" " " summary-content
    commit-type   := (!(whitespace | "(" | ")" | ":" | "!") ANY)+
    scope         := "(" scope-content? ")"
    scope-content := (!(whitespace | newline | "(" | ")") ANY)+
    body          := ANY* up to a blank line followed by a footer, or EOI
    footers       := footer+            (see footers.py)

Matching builds a tree of Pair nodes. On failure a GrammarFailure reports the
furthest position reached and the rules tried there.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from .footers import match_boundary, match_footer_block
from .rules import GrammarFailure, Pair, Rule
from .state import (
    MatchState,
    line_end,
    newline_length,
    skip_newlines,
    strip_trailing_newlines,
)

logger = logging.getLogger(__name__)

_COMMIT_TYPE_STOP = frozenset("():!")


def _match_commit_type(state: MatchState, pos: int) -> Optional[Pair]:
    source = state.source
    end = pos
    while end < state.length and not source[end].isspace() and source[end] not in _COMMIT_TYPE_STOP:
        end += 1
    if end == pos:
        state.expect(pos, Rule.COMMIT_TYPE)
        return None
    return Pair(Rule.COMMIT_TYPE, source, pos, end)


def _match_scope(state: MatchState, pos: int) -> Optional[Pair]:
    source = state.source
    if not source.startswith("(", pos):
        state.expect(pos, Rule.SCOPE_OPEN)
        return None

    start = pos + 1
    end = start
    while end < state.length:
        char = source[end]
        if char == ")":
            break
        if char == "(":
            state.expect(end, Rule.NO_NESTED_PARENTHESIS)
            break
        if char.isspace():
            state.expect(end, Rule.NO_WHITESPACE_OR_NEWLINE)
            break
        end += 1

    if not source.startswith(")", end):
        state.expect(end, Rule.SCOPE_CONTENT)
        state.expect(end, Rule.SCOPE_CLOSE)
        return None

    content = Pair(Rule.SCOPE_CONTENT, source, start, end)
    return Pair(Rule.SCOPE, source, pos, end + 1, [content])


def _match_summary(state: MatchState, pos: int) -> Optional[Pair]:
    source = state.source
    start = pos

    commit_type = _match_commit_type(state, pos)
    if commit_type is None:
        return None
    children = [commit_type]
    pos = commit_type.end

    scope = _match_scope(state, pos)
    if scope is not None:
        children.append(scope)
        pos = scope.end

    # Zero-width when the marker is absent
    if source.startswith("!", pos):
        children.append(Pair(Rule.BREAKING_CHANGE_MARK, source, pos, pos + 1))
        pos += 1
    else:
        state.expect(pos, Rule.BREAKING_CHANGE_MARK)
        children.append(Pair(Rule.BREAKING_CHANGE_MARK, source, pos, pos))

    if not source.startswith(":", pos):
        state.expect(pos, Rule.TYPE_SEPARATOR)
        return None
    pos += 1

    if not source.startswith(" ", pos):
        state.expect(pos, Rule.WHITESPACE_TERMINAL)
        return None
    pos += 1

    end = line_end(source, pos)
    if end == pos:
        state.expect(pos, Rule.SUMMARY_CONTENT)
        return None
    children.append(Pair(Rule.SUMMARY_CONTENT, source, pos, end))

    return Pair(Rule.SUMMARY, source, start, end, children)


def _find_footer_block(state: MatchState, pos: int) -> Optional[int]:
    """Start of the first footer that follows a blank line, from `pos` on."""
    source = state.source
    previous_blank = False
    while True:
        if previous_blank and match_boundary(source, pos) is not None:
            return pos
        end = line_end(source, pos)
        if end >= state.length:
            return None
        previous_blank = end == pos
        pos = end + newline_length(source, end)


def _match_body(state: MatchState, pos: int) -> Tuple[Pair, Optional[int]]:
    """
    Match free-form body text starting at `pos`.

    The body never fails: it ends right before a blank line that is followed
    by a footer, or at the end of input. Returns the body and the start of
    the footer block, if there is one.
    """
    block_start = _find_footer_block(state, pos)
    end = block_start if block_start is not None else state.length
    end = strip_trailing_newlines(state.source, pos, end)
    return Pair(Rule.BODY, state.source, pos, end), block_start


def _blank_line_length(source: str, pos: int) -> int:
    first = newline_length(source, pos)
    if not first:
        return 0
    second = newline_length(source, pos + first)
    if not second:
        return 0
    return first + second


def _expect_end(state: MatchState, pos: int, *alternatives: Rule) -> bool:
    """Accept trailing newlines then the end of input."""
    end = skip_newlines(state.source, pos)
    if state.at_end(end):
        return True
    for rule in alternatives:
        state.expect(end, rule)
    state.expect(end, Rule.EOI)
    return False


def _match_message(state: MatchState) -> Optional[Pair]:
    source = state.source
    summary = _match_summary(state, 0)
    if summary is None:
        return None
    children: List[Pair] = [summary]
    pos = summary.end

    separator = _blank_line_length(source, pos)
    if separator and not state.at_end(skip_newlines(source, pos)):
        block_start: Optional[int] = pos + separator
        if match_boundary(source, block_start) is None:
            body, block_start = _match_body(state, block_start)
            children.append(body)
            pos = body.end

        footers = match_footer_block(state, block_start) if block_start is not None else None
        if footers is not None:
            children.append(footers)
            pos = footers.end

    if not _expect_end(state, pos, Rule.BLANK_LINE):
        return None
    return Pair(Rule.MESSAGE, source, 0, len(source), children)


def _match_summary_root(state: MatchState) -> Optional[Pair]:
    summary = _match_summary(state, 0)
    if summary is None or not _expect_end(state, summary.end):
        return None
    return summary


def _match_body_root(state: MatchState) -> Optional[Pair]:
    if match_boundary(state.source, 0) is not None:
        state.expect(0, Rule.BODY_CONTENT)
        state.expect(0, Rule.FOOTER)
        return None
    body, _ = _match_body(state, 0)
    if not _expect_end(state, body.end, Rule.BODY_CONTENT, Rule.FOOTER):
        return None
    return body


def _match_footers_root(state: MatchState) -> Optional[Pair]:
    start = skip_newlines(state.source, 0)
    if state.at_end(start):
        return Pair(Rule.FOOTERS, state.source, start, start)
    footers = match_footer_block(state, start)
    if footers is None or not _expect_end(state, footers.end):
        return None
    return footers


_ROOTS: Dict[Rule, Callable[[MatchState], Optional[Pair]]] = {
    Rule.MESSAGE: _match_message,
    Rule.SUMMARY: _match_summary_root,
    Rule.BODY: _match_body_root,
    Rule.FOOTERS: _match_footers_root,
}


def match(rule: Rule, source: str, max_length: Optional[int] = None) -> Pair:
    """
    Match `source` against one of the grammar roots.

    Args:
        rule: Root rule (MESSAGE, SUMMARY, BODY or FOOTERS)
        source: Input text
        max_length: Optional upper bound on the input length

    Returns:
        Root Pair of the match tree

    Raises:
        GrammarFailure: If the input does not match
    """
    if rule not in _ROOTS:
        raise ValueError(f"{rule.value} is not a grammar root")

    if max_length and len(source) > max_length:
        raise GrammarFailure(
            source,
            max_length,
            custom_message=f"input exceeds the maximum length of {max_length} characters"
        )

    state = MatchState(source)
    pair = _ROOTS[rule](state)
    if pair is None:
        failure = state.failure()
        logger.debug(f"Match of {rule.value} failed: {failure.describe()}")
        raise failure
    return pair
