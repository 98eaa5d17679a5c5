"""
Commit message grammar.

**Main Components:**
- **rules**: Rule names, match-tree nodes and the failure type
- **matcher**: Recursive-descent matcher for the summary, body and message roots
- **footers**: Footer separator resolution and content termination
"""

from .rules import Rule, Pair, GrammarFailure
from .footers import BREAKING_CHANGE_LITERAL
from .matcher import match

__all__ = [
    "Rule",
    "Pair",
    "GrammarFailure",
    "BREAKING_CHANGE_LITERAL",
    "match",
]
