"""
Pattern Kinds

Defines the closed set of pattern variants and the rules that recognize them.

Special kinds (wildcard, predicate, typed) are frozen pydantic models built
through dedicated constructors. Plain containers and every other value are
recognized structurally:

    _               → WILDCARD
    p(fn)           → PREDICATE
    t(cls, nested)  → TYPED
    dict / Mapping  → KEYED
    list / tuple    → SEQUENCE
    anything else   → LITERAL
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, ValidationError

from patroon.core.errors import InvalidPatternError
from patroon.infra.logger import log_pattern_invalid


# ═══════════════════════════════════════════════════════════════════════════════
# PATTERN KIND
# ═══════════════════════════════════════════════════════════════════════════════

class PatternKind(Enum):
    """Kinds a pattern argument can be classified as"""
    WILDCARD = "wildcard"
    PREDICATE = "predicate"
    TYPED = "typed"
    SEQUENCE = "sequence"
    KEYED = "keyed"
    LITERAL = "literal"


# ═══════════════════════════════════════════════════════════════════════════════
# MARKER MODELS
# ═══════════════════════════════════════════════════════════════════════════════

class PatternMarker(BaseModel):
    """Base for patterns that are recognized by their type, not their shape"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Wildcard(PatternMarker):
    """Matches any value."""

    def __repr__(self) -> str:
        return "_"


class Predicate(PatternMarker):
    """
    Matches when fn(value) is truthy.

    Attributes:
        fn: Single-argument callable; its result is coerced with bool()
    """
    fn: Callable[[Any], Any]

    def __repr__(self) -> str:
        return f"p({getattr(self.fn, '__qualname__', self.fn)!s})"


class Typed(PatternMarker):
    """
    Matches instances of cls that also satisfy a nested pattern.

    The nested pattern is matched against the instance itself, so
    t(Point, {"x": 0}) means "a Point whose x attribute equals 0".

    Attributes:
        cls: Class the candidate must be an instance of
        pattern: Pattern the same candidate must satisfy
    """
    cls: type
    pattern: Any

    def __repr__(self) -> str:
        return f"t({self.cls.__name__}, {self.pattern!r})"


# The wildcard constant
_ = Wildcard()


# ═══════════════════════════════════════════════════════════════════════════════
# CONSTRUCTORS
# ═══════════════════════════════════════════════════════════════════════════════

def p(fn: Callable[[Any], Any]) -> Predicate:
    """
    Build a predicate pattern.

    Args:
        fn: Single-argument callable

    Returns:
        Predicate pattern

    Raises:
        InvalidPatternError: If fn is not callable

    Examples:
        >>> positive = p(lambda v: v > 0)
    """
    try:
        return Predicate(fn=fn)
    except ValidationError:
        message = f"p() expects a callable, got: {fn!r}"
        log_pattern_invalid("p", message)
        raise InvalidPatternError(message) from None


def t(cls: type, pattern: Any = _) -> Typed:
    """
    Build a typed pattern.

    Args:
        cls: Class the candidate must be an instance of (subclasses match too)
        pattern: Optional pattern matched against the whole candidate

    Returns:
        Typed pattern

    Raises:
        InvalidPatternError: If cls is not a class

    Examples:
        >>> t(int)
        >>> t(Point, {"x": 0, "y": _})
    """
    try:
        return Typed(cls=cls, pattern=pattern)
    except ValidationError:
        message = f"t() expects a class, got: {cls!r}"
        log_pattern_invalid("t", message)
        raise InvalidPatternError(message) from None


# Long-form aliases
wildcard = _
predicate = p
typed = t


# ═══════════════════════════════════════════════════════════════════════════════
# CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════════════

def classify(pattern: Any) -> PatternKind:
    """
    Determine the kind of a pattern argument.

    Never looks at a candidate value; every argument maps to exactly one kind.

    Args:
        pattern: Any value used as a pattern

    Returns:
        PatternKind of the argument
    """
    if isinstance(pattern, Wildcard):
        return PatternKind.WILDCARD
    if isinstance(pattern, Predicate):
        return PatternKind.PREDICATE
    if isinstance(pattern, Typed):
        return PatternKind.TYPED
    if isinstance(pattern, Mapping):
        return PatternKind.KEYED
    if isinstance(pattern, (list, tuple)):
        return PatternKind.SEQUENCE
    return PatternKind.LITERAL
