"""
Conformance with the Conventional Commits rules.

Run with:
    pytest tests/test_conventional_commits.py -v
"""

import pytest

from conventional_commit_parser import (
    CommitType,
    ConventionalCommit,
    Custom,
    Footer,
    ParseError,
    ParseErrorKind,
    SeparatorKind,
    parse,
)


def assert_error(message, expected):
    with pytest.raises(ParseError) as exc_info:
        parse(message)
    assert exc_info.value.kind == expected


# ---------------------------------------------------------------------------
# Commit type, scope, marker and separator
# ---------------------------------------------------------------------------

class TestSummaryLine:
    """Type, optional scope, optional `!`, and the `: ` terminal."""

    def test_feature_type(self):
        commit = parse("feat: toto va à la plage")

        assert commit.commit_type == CommitType.FEATURE
        assert commit.summary == "toto va à la plage"
        assert commit.scope is None
        assert commit.body is None
        assert commit.footers == ()
        assert commit.is_breaking_change is False

    def test_end_to_end_example(self):
        commit = parse("fix(parser): fix parser implementation")

        assert commit == ConventionalCommit(
            commit_type=CommitType.BUG_FIX,
            scope="parser",
            summary="fix parser implementation",
            body=None,
            footers=(),
            is_breaking_change=False,
        )

    @pytest.mark.parametrize("token, expected", [
        ("feat", CommitType.FEATURE),
        ("fix", CommitType.BUG_FIX),
        ("chore", CommitType.CHORE),
        ("revert", CommitType.REVERT),
        ("perf", CommitType.PERFORMANCE),
        ("docs", CommitType.DOCUMENTATION),
        ("style", CommitType.STYLE),
        ("refactor", CommitType.REFACTOR),
        ("test", CommitType.TEST),
        ("build", CommitType.BUILD),
        ("ci", CommitType.CI),
    ])
    def test_standard_types(self, token, expected):
        assert parse(f"{token}: a change").commit_type == expected

    @pytest.mark.parametrize("token", ["Feat", "FEAT", "fEaT"])
    def test_type_is_case_insensitive(self, token):
        assert parse(f"{token}: x").commit_type == parse("feat: x").commit_type == CommitType.FEATURE

    @pytest.mark.parametrize("token", ["wip", "Release", "hotfix-2"])
    def test_custom_type_keeps_original_text(self, token):
        assert parse(f"{token}: x").commit_type == Custom(token)

    def test_custom_types_compare_by_text(self):
        assert Custom("wip") == Custom("wip")
        assert Custom("wip") != Custom("WIP")
        assert hash(Custom("wip")) == hash(Custom("wip"))

    def test_scope(self):
        assert parse("fix(parser): the parser").scope == "parser"

    def test_empty_scope_is_absent(self):
        commit = parse("fix(): the parser")

        assert commit.scope is None
        assert commit.summary == "the parser"

    def test_breaking_change_mark(self):
        commit = parse("feat!: toto va à la plage")

        assert commit.commit_type == CommitType.FEATURE
        assert commit.scope is None
        assert commit.summary == "toto va à la plage"
        assert commit.is_breaking_change is True
        assert commit.footers == ()

    def test_scope_and_breaking_change_mark(self):
        commit = parse("fix(parser)!: the parser")

        assert commit.commit_type == CommitType.BUG_FIX
        assert commit.scope == "parser"
        assert commit.summary == "the parser"
        assert commit.is_breaking_change is True

    def test_summary_is_kept_as_is(self):
        assert parse("docs:  two spaces").summary == " two spaces"

    def test_trailing_newlines_are_accepted(self):
        assert parse("chore: release\n\n").summary == "release"


class TestSummaryErrors:
    """Malformed summary lines fail with a classified error."""

    @pytest.mark.parametrize("message", [
        "feat toto va à la plage",
        "feat toto: va à la plage",
        "feat",
        "fix(parser) the parser",
    ])
    def test_missing_separator(self, message):
        assert_error(message, ParseErrorKind.MISSING_SEPARATOR)

    @pytest.mark.parametrize("message", [
        "feat:toto va à la plage",
        "feat(toto):toto va à la plage",
        "feat(toto)!:toto va à la plage",
    ])
    def test_missing_whitespace(self, message):
        assert_error(message, ParseErrorKind.MISSING_WHITESPACE)

    def test_nested_parenthesis(self):
        assert_error("fix((x): y", ParseErrorKind.UNEXPECTED_PARENTHESIS)

    @pytest.mark.parametrize("message", [
        "fix(x y): z",
        "fix(\n)): the parser",
    ])
    def test_whitespace_in_scope(self, message):
        assert_error(message, ParseErrorKind.UNEXPECTED_WHITESPACE_OR_NEWLINE)

    def test_unclosed_scope(self):
        assert_error("fix(parser", ParseErrorKind.MALFORMED_SCOPE)

    @pytest.mark.parametrize("message", [
        "",
        ": no type",
        "feat: ",
        "feat: summary\nbody without blank line",
    ])
    def test_other(self, message):
        assert_error(message, ParseErrorKind.OTHER)


# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------

class TestBody:
    """A free-form body follows the summary after one blank line."""

    def test_body(self):
        message = (
            "ci(the_scope)!: the fix\n"
            "\n"
            "This is a body containing special char like / and \\ and also\n"
            "Newline. Punctuation and special chars ? , ; ...\n"
            "Number is something you can have to ! 1 2 .. 42"
        )

        commit = parse(message)

        assert commit.body == (
            "This is a body containing special char like / and \\ and also\n"
            "Newline. Punctuation and special chars ? , ; ...\n"
            "Number is something you can have to ! 1 2 .. 42"
        )
        assert commit.footers == ()

    def test_multi_paragraph_body(self):
        commit = parse("fix: x\n\nfirst paragraph\n\nsecond paragraph\n")

        assert commit.body == "first paragraph\n\nsecond paragraph"

    def test_whitespace_only_body_is_absent(self):
        assert parse("fix: x\n\n   ").body is None

    def test_footer_like_line_without_blank_line_stays_in_body(self):
        commit = parse("fix: x\n\nsome text\nRefs: 42")

        assert commit.body == "some text\nRefs: 42"
        assert commit.footers == ()


# ---------------------------------------------------------------------------
# Footers
# ---------------------------------------------------------------------------

class TestFooters:
    """Footers start after a blank line, one per `token<separator>` pair."""

    def test_footer(self):
        commit = parse("feat(friture): the the BIG feature\n\nThis is a body\n\na-token: this is a token")

        assert commit.body == "This is a body"
        assert commit.footers == (Footer("a-token", "this is a token", SeparatorKind.COLON_SPACE),)

    def test_footers_with_both_inline_separators(self):
        commit = parse(
            "feat(friture): the the BIG feature\n"
            "\n"
            "This is a body\n"
            "\n"
            "a-token: this is a token\n"
            "another-token #this is a token with hash separator"
        )

        assert list(commit.footers) == [
            Footer("a-token", "this is a token", SeparatorKind.COLON_SPACE),
            Footer("another-token", "this is a token with hash separator", SeparatorKind.SPACE_HASH),
        ]

    def test_footers_without_body(self):
        commit = parse("chore: a commit\n\nBREAKING CHANGE: message")

        assert commit.body is None
        assert commit.footers == (Footer("BREAKING CHANGE", "message"),)

    def test_footer_content_spans_lines(self):
        commit = parse(
            "chore: a commit\n"
            "\n"
            "BREAKING CHANGE: a long message that describe a footer\n"
            "with multiple new line\n"
            "another-footer: with content"
        )

        assert commit.body is None
        assert list(commit.footers) == [
            Footer("BREAKING CHANGE", "a long message that describe a footer\nwith multiple new line"),
            Footer("another-footer", "with content"),
        ]

    def test_block_footer_absorbs_key_value_lines(self):
        commit = parse(
            "build(deps): bump parser\n"
            "\n"
            "updated-dependencies:\n"
            "- dependency-name: parser\n"
            "  dependency-type: direct:production\n"
            "  update-type: version-update:semver-minor\n"
            "...\n"
            "\n"
            "Signed-off-by: dependabot[bot] <support@github.com>"
        )

        assert commit.body is None
        assert list(commit.footers) == [
            Footer(
                "updated-dependencies",
                "- dependency-name: parser\n"
                "  dependency-type: direct:production\n"
                "  update-type: version-update:semver-minor\n"
                "...",
                SeparatorKind.COLON_NEWLINE,
            ),
            Footer("Signed-off-by", "dependabot[bot] <support@github.com>"),
        ]

    def test_duplicate_tokens_are_kept_in_order(self):
        commit = parse("fix: x\n\nRefs #1\nRefs #2")

        assert [footer.content for footer in commit.footers] == ["1", "2"]


# ---------------------------------------------------------------------------
# Breaking changes
# ---------------------------------------------------------------------------

class TestBreakingChange:
    """The flag comes from the `!` marker or an uppercase BREAKING CHANGE footer."""

    def test_marker_alone(self):
        commit = parse("refactor!: drop python 2")

        assert commit.is_breaking_change is True
        assert commit.footers == ()

    @pytest.mark.parametrize("token", ["BREAKING CHANGE", "BREAKING-CHANGE"])
    def test_footer_alone(self, token):
        commit = parse(f"chore: a commit\n\nThis is a body\n\n{token}: message")

        assert commit.is_breaking_change is True
        assert commit.footers == (Footer(token, "message"),)

    def test_lowercase_footer_is_body_text(self):
        commit = parse("chore: a commit\n\nthe body\n\nbreaking change: oops")

        assert commit.is_breaking_change is False
        assert commit.footers == ()
        assert commit.body == "the body\n\nbreaking change: oops"

    def test_whitespace_token_is_body_text(self):
        commit = parse("chore: a commit\n\nThis is a body\n\ninvalid token : this is a token")

        assert commit.footers == ()
        assert commit.body == "This is a body\n\ninvalid token : this is a token"

    def test_malformed_line_is_absorbed_into_previous_footer(self):
        commit = parse("chore: a commit\n\nRefs: 1\nbreaking change: oops")

        assert commit.is_breaking_change is False
        assert commit.footers == (Footer("Refs", "1\nbreaking change: oops"),)

    @pytest.mark.parametrize("token", ["Breaking-Change", "breaking-change", "BREAKING_CHANGE"])
    def test_other_spellings_do_not_count(self, token):
        commit = parse(f"feat: x\n\n{token}: nope")

        assert commit.is_breaking_change is False
        assert commit.footers == (Footer(token, "nope"),)
