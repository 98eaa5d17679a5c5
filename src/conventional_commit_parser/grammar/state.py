"""
Matcher state shared by the grammar productions.
"""

from typing import Set

from .rules import GrammarFailure, Rule


def newline_length(source: str, pos: int) -> int:
    """Length of the newline at `pos` (`\\n` or `\\r\\n`), 0 if there is none."""
    if source.startswith("\n", pos):
        return 1
    if source.startswith("\r\n", pos):
        return 2
    return 0


def line_end(source: str, pos: int) -> int:
    """Index where the line holding `pos` ends, i.e. its newline or end of input."""
    end = source.find("\n", pos)
    if end == -1:
        return len(source)
    if end > pos and source[end - 1] == "\r":
        return end - 1
    return end


def strip_trailing_newlines(source: str, start: int, end: int) -> int:
    """Move `end` back over any newlines, never past `start`."""
    while end > start:
        if source[end - 1] == "\n":
            end -= 1
            if end > start and source[end - 1] == "\r":
                end -= 1
        else:
            break
    return end


def skip_newlines(source: str, pos: int) -> int:
    """Skip any number of consecutive newlines starting at `pos`."""
    while True:
        length = newline_length(source, pos)
        if not length:
            return pos
        pos += length


class MatchState:
    """
    Furthest-failure bookkeeping for a single match attempt.

    Each call to `expect` reports a rule that was tried at a position and did
    not match. Only the rules tried at the furthest position are kept, which
    is where the input stopped making sense.
    """

    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.furthest = -1
        self.expected: Set[Rule] = set()

    def expect(self, pos: int, rule: Rule) -> None:
        if pos > self.furthest:
            self.furthest = pos
            self.expected = {rule}
        elif pos == self.furthest:
            self.expected.add(rule)

    def at_end(self, pos: int) -> bool:
        return pos >= self.length

    def failure(self) -> GrammarFailure:
        return GrammarFailure(self.source, max(self.furthest, 0), frozenset(self.expected))
