from .composite import ConjunctiveConstraint, DisjunctiveConstraint, NegateConstraint
from .text import (
    ContainsLetterConstraint,
    ContainsNumberConstraint,
    ContainsSymbolConstraint,
    MinLengthConstraint,
    RegexConstraint,
)

__all__ = [
    "NegateConstraint",
    "ConjunctiveConstraint",
    "DisjunctiveConstraint",
    "RegexConstraint",
    "MinLengthConstraint",
    "ContainsLetterConstraint",
    "ContainsNumberConstraint",
    "ContainsSymbolConstraint",
]
