"""
Error message formatting for user-friendly parse reports.
"""

from .categories import ParseErrorKind
from .exceptions import ParseError


class ErrorFormatter:
    """
    Formats parse errors into messages for terminals and API responses.
    """

    # Suggestions for each error kind
    SUGGESTIONS = {
        ParseErrorKind.MISSING_SEPARATOR: [
            "Follow the commit type (and optional scope) with `:`",
            "Commit types cannot contain whitespace, e.g. `feat: add parser`"
        ],
        ParseErrorKind.MISSING_WHITESPACE: [
            "Put a single space after the `:` separator, e.g. `fix: handle empty input`"
        ],
        ParseErrorKind.UNEXPECTED_PARENTHESIS: [
            "Scopes cannot contain nested parentheses, e.g. `fix(parser): ...`"
        ],
        ParseErrorKind.UNEXPECTED_WHITESPACE_OR_NEWLINE: [
            "Scopes cannot contain spaces or new lines",
            "Use `-` to join words, e.g. `feat(commit-parser): ...`"
        ],
        ParseErrorKind.MALFORMED_SCOPE: [
            "Close the scope with `)`, e.g. `feat(api): ...`"
        ],
        ParseErrorKind.MALFORMED_OR_UNEXPECTED_FOOTER_SEPARATOR: [
            "Footer tokens use `-` in place of whitespace, e.g. `Reviewed-by: Z`",
            "Separate the token from its value with `: ` or ` #`",
            "`BREAKING CHANGE` must be uppercase"
        ],
        ParseErrorKind.OTHER: [
            "Check the message follows `type(scope): summary`",
            "Separate summary, body and footers with one blank line"
        ]
    }

    @staticmethod
    def format_error_concise(error: ParseError) -> str:
        """
        Format an error concisely for logs or inline display.

        Args:
            error: The parse error to format

        Returns:
            Concise error string
        """
        return f"{error.kind.value}: {error.message} at {error.line}:{error.column}"

    @staticmethod
    def format_error_detailed(error: ParseError, include_expected: bool = True) -> str:
        """
        Format an error with the offending line and a caret under the failure.

        Args:
            error: The parse error to format
            include_expected: Whether to list the rules expected at the failure

        Returns:
            Multi-line error report
        """
        failure = error.failure
        suggestions = ErrorFormatter.SUGGESTIONS.get(error.kind, [])
        gutter = f"{failure.line} | "

        lines = [
            f"error[{error.kind.value}]: {error.message}",
            f" --> line {failure.line}, column {failure.column}",
            "",
            f"{gutter}{failure.line_text}",
            f"{' ' * (len(gutter) + failure.column - 1)}^",
            ""
        ]

        if failure.is_custom:
            lines.append(f"Reason: {failure.custom_message}")
            lines.append("")
        elif include_expected and failure.expected:
            lines.append(f"Expected: {', '.join(error.expected)}")
            lines.append("")

        # Add suggestions
        if suggestions:
            lines.append("Suggestions:")
            for suggestion in suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines).rstrip("\n")


def format_error_for_user(error: ParseError, format_type: str = "concise") -> str:
    """
    Convenience function to format an error for display to users.

    Args:
        error: The parse error to format
        format_type: Format type ("detailed" or "concise")

    Returns:
        Formatted error message
    """
    if format_type == "detailed":
        return ErrorFormatter.format_error_detailed(error)
    else:
        return ErrorFormatter.format_error_concise(error)
