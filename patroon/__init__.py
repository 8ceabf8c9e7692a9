"""
patroon - structural pattern matching for Python values

Replaces chains of isinstance/shape checks with an ordered list of
(pattern, handler) pairs:

    from patroon import patroon, _, p, t

    area = patroon(
        t(Circle),            lambda s: 3.14159 * s.r ** 2,
        t(Rect, {"w": _}),    lambda s: s.w * s.h,
        p(lambda s: s == 0),  lambda s: 0,
    )

PUBLIC API:
  - patroon: build a dispatcher from pattern/handler pairs
  - _, p, t: wildcard, predicate and typed patterns
  - NoMatchError: raised when no pattern matches
"""

from .core.errors import PatroonError, NoMatchError, InvalidPatternError, InvalidDispatcherError
from .core.patterns import (
    PatternKind,
    Wildcard,
    Predicate,
    Typed,
    _,
    p,
    t,
    wildcard,
    predicate,
    typed,
    classify,
)
from .core.matcher import matches, deep_equal
from .core.dispatcher import Case, Dispatcher, patroon
from .infra.logger import setup_logging

__version__ = "0.1.0"
__all__ = [
    "patroon",
    "_",
    "p",
    "t",
    "wildcard",
    "predicate",
    "typed",
    "NoMatchError",
    "PatroonError",
    "InvalidPatternError",
    "InvalidDispatcherError",
    "PatternKind",
    "Wildcard",
    "Predicate",
    "Typed",
    "classify",
    "matches",
    "deep_equal",
    "Case",
    "Dispatcher",
    "setup_logging",
]
