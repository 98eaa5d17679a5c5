"""
Footer separator resolution.

A footer is `token separator content` at the start of a line. Three separator
forms exist and are tried in this order:

1. `": "`  - standard form
2. `" #"`  - git trailer alternate form
3. `":"` followed by a newline - block form, content starts on the next line

Whatever the form, a footer's content runs until the next line that itself
starts with a valid token/separator pair, or the end of input. Lines that only
look like footers (indented, whitespace in the token, lowercase
`breaking change`) never end a footer; they are absorbed into its content.
"""

from typing import List, NamedTuple, Optional, Tuple

from .rules import Pair, Rule
from .state import MatchState, line_end, newline_length, strip_trailing_newlines

BREAKING_CHANGE_LITERAL = "BREAKING CHANGE"
COLON_SPACE = ": "
SPACE_HASH = " #"

_TOKEN_STOP = frozenset(":-")


class Boundary(NamedTuple):
    """Where a footer's token, separator and content start."""

    start: int
    token: Pair
    separator: Pair
    content_start: int


def _is_word_char(char: str) -> bool:
    return not char.isspace() and char not in _TOKEN_STOP


def _match_word(source: str, pos: int) -> int:
    end = pos
    while end < len(source) and _is_word_char(source[end]):
        end += 1
    return end


def _match_token(source: str, pos: int) -> int:
    """End of a hyphenated word token starting at `pos`, `pos` if there is none."""
    end = _match_word(source, pos)
    if end == pos:
        return pos
    while source.startswith("-", end):
        word_end = _match_word(source, end + 1)
        if word_end == end + 1:
            break
        end = word_end
    return end


def _match_separator(source: str, pos: int) -> int:
    """Length of the footer separator at `pos`, 0 if none of the forms match."""
    if source.startswith(COLON_SPACE, pos):
        return 2
    if source.startswith(SPACE_HASH, pos):
        return 2
    if source.startswith(":", pos):
        length = newline_length(source, pos + 1)
        if length:
            return 1 + length
    return 0


def _boundary_after(state: Optional[MatchState], source: str, pos: int,
                    token_end: int, token_rule: Rule) -> Optional[Boundary]:
    separator_length = _match_separator(source, token_end)
    if not separator_length:
        if state is not None:
            state.expect(token_end, Rule.FOOTER_SEPARATOR)
        return None
    separator_end = token_end + separator_length
    return Boundary(
        start=pos,
        token=Pair(token_rule, source, pos, token_end),
        separator=Pair(Rule.FOOTER_SEPARATOR, source, token_end, separator_end),
        content_start=separator_end,
    )


def match_boundary(source: str, pos: int,
                   state: Optional[MatchState] = None) -> Optional[Boundary]:
    """
    Try to match a footer token and separator at `pos`.

    With a state, misses are reported as expectations. Without one the call
    is a pure lookahead.
    """
    if source.startswith(BREAKING_CHANGE_LITERAL, pos):
        token_end = pos + len(BREAKING_CHANGE_LITERAL)
        boundary = _boundary_after(state, source, pos, token_end, Rule.BREAKING_CHANGE_TOKEN)
        if boundary is not None:
            return boundary

    token_end = _match_token(source, pos)
    if token_end == pos:
        if state is not None:
            state.expect(pos, Rule.FOOTER_TOKEN)
            state.expect(pos, Rule.BREAKING_CHANGE_TOKEN)
        return None
    return _boundary_after(state, source, pos, token_end, Rule.FOOTER_TOKEN)


def _content_end(source: str, boundary: Boundary) -> Tuple[int, Optional[Boundary]]:
    """
    Find where a footer's content ends.

    Returns the content end (trailing newlines excluded) and the boundary of
    the next footer, if one follows.
    """
    pos = boundary.content_start
    # Block form content starts on a line of its own
    if boundary.separator.text not in (COLON_SPACE, SPACE_HASH):
        following = match_boundary(source, pos)
        if following is not None:
            return pos, following

    while True:
        end = line_end(source, pos)
        if end >= len(source):
            return strip_trailing_newlines(source, boundary.content_start, end), None
        pos = end + newline_length(source, end)
        following = match_boundary(source, pos)
        if following is not None:
            return strip_trailing_newlines(source, boundary.content_start, end), following


def match_footer_block(state: MatchState, pos: int) -> Optional[Pair]:
    """
    Match one or more footers starting at `pos`.

    The first footer must start exactly at `pos`; its misses are reported to
    the state. Later footers are found by the content termination rule.
    """
    source = state.source
    boundary = match_boundary(source, pos, state)
    if boundary is None:
        return None

    footers: List[Pair] = []
    while boundary is not None:
        content_end, following = _content_end(source, boundary)
        content = Pair(Rule.FOOTER_CONTENT, source, boundary.content_start, content_end)
        footers.append(Pair(
            Rule.FOOTER, source, boundary.start, content.end,
            [boundary.token, boundary.separator, content]
        ))
        boundary = following

    return Pair(Rule.FOOTERS, source, pos, footers[-1].end, footers)
