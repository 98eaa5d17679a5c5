"""
Error handling and formatting for commit message parsing.
"""

from .categories import ParseErrorKind, classify_failure
from .exceptions import ParseError
from .formatter import ErrorFormatter, format_error_for_user

__all__ = [
    "ParseErrorKind",
    "classify_failure",
    "ParseError",
    "ErrorFormatter",
    "format_error_for_user",
]
