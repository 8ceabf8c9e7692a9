"""
Matching Core

Pattern kinds, the structural matcher and the dispatcher built on top of it.
"""

from .errors import PatroonError, NoMatchError, InvalidPatternError, InvalidDispatcherError
from .patterns import PatternKind, Wildcard, Predicate, Typed, _, p, t, classify
from .matcher import matches, deep_equal
from .dispatcher import Case, Dispatcher, patroon

__all__ = [
    "PatroonError",
    "NoMatchError",
    "InvalidPatternError",
    "InvalidDispatcherError",
    "PatternKind",
    "Wildcard",
    "Predicate",
    "Typed",
    "_",
    "p",
    "t",
    "classify",
    "matches",
    "deep_equal",
    "Case",
    "Dispatcher",
    "patroon",
]
