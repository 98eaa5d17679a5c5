"""
Semantic assembly of a parsed commit message.

Walks the match tree produced by the grammar and fills in a
ConventionalCommit one rule at a time.
"""

from typing import List, Optional

from ..grammar.rules import Pair, Rule
from .conventional import CommitKind, CommitType, ConventionalCommit, Footer, SeparatorKind


class CommitBuilder:
    """Accumulates the fields of a single commit while walking its match tree."""

    def __init__(self):
        self.commit_type: Optional[CommitKind] = None
        self.scope: Optional[str] = None
        self.summary: str = ""
        self.body: Optional[str] = None
        self.footers: List[Footer] = []
        self.is_breaking_change = False

    def set_commit_type(self, pair: Pair) -> None:
        self.commit_type = CommitType.from_token(pair.text)

    def set_scope(self, pair: Pair) -> None:
        content = pair.child(Rule.SCOPE_CONTENT)
        if content is not None and content.text:
            self.scope = content.text

    def set_breaking_change(self, pair: Pair) -> None:
        if pair.end > pair.start:
            self.is_breaking_change = True

    def set_summary_content(self, pair: Pair) -> None:
        self.summary = pair.text

    def set_commit_body(self, pair: Pair) -> None:
        self.body = body_text(pair)

    def set_footers(self, pair: Pair) -> None:
        for footer in build_footers(pair):
            self.footers.append(footer)
            if footer.is_breaking_change:
                self.is_breaking_change = True

    def walk_summary(self, pair: Pair) -> None:
        for child in pair.children:
            if child.rule == Rule.COMMIT_TYPE:
                self.set_commit_type(child)
            elif child.rule == Rule.SCOPE:
                self.set_scope(child)
            elif child.rule == Rule.BREAKING_CHANGE_MARK:
                self.set_breaking_change(child)
            elif child.rule == Rule.SUMMARY_CONTENT:
                self.set_summary_content(child)

    def walk(self, pair: Pair) -> "CommitBuilder":
        """Walk a MESSAGE or SUMMARY match."""
        if pair.rule == Rule.SUMMARY:
            self.walk_summary(pair)
            return self

        for child in pair.children:
            if child.rule == Rule.SUMMARY:
                self.walk_summary(child)
            elif child.rule == Rule.BODY:
                self.set_commit_body(child)
            elif child.rule == Rule.FOOTERS:
                self.set_footers(child)
        return self

    def build(self) -> ConventionalCommit:
        if self.commit_type is None:
            raise ValueError("cannot build a commit without a commit type")
        return ConventionalCommit(
            commit_type=self.commit_type,
            scope=self.scope,
            summary=self.summary,
            body=self.body,
            footers=tuple(self.footers),
            is_breaking_change=self.is_breaking_change,
        )


def body_text(pair: Pair) -> Optional[str]:
    """Body text, or None when it is empty or whitespace only."""
    text = pair.text
    if not text.strip():
        return None
    return text


def separator_kind(separator: str) -> SeparatorKind:
    """Map matched separator text to its kind; any other colon form is the block form."""
    for kind in (SeparatorKind.COLON_SPACE, SeparatorKind.SPACE_HASH):
        if separator == kind.literal:
            return kind
    return SeparatorKind.COLON_NEWLINE


def build_footers(pair: Pair) -> List[Footer]:
    """Turn a FOOTERS match into Footer records, in input order."""
    footers = []
    for footer in pair.children:
        token, separator, content = footer.children
        footers.append(Footer(
            token=token.text,
            content=content.text,
            separator=separator_kind(separator.text),
        ))
    return footers


def build_commit(pair: Pair) -> ConventionalCommit:
    """Build a commit from a MESSAGE or SUMMARY match."""
    return CommitBuilder().walk(pair).build()
