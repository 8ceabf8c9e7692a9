"""
Structural Matcher

Decides whether a value satisfies a pattern.

matches() is a pure recursive function: it never mutates the pattern or
the value and has no side effects of its own. Predicate functions run
against the candidate and any exception they raise propagates.
"""

from collections.abc import Mapping, Sequence, Set
from numbers import Number
from typing import Any

from patroon import config
from patroon.core.patterns import PatternKind, classify
from patroon.infra.logger import log_match_trace


# Sequences that compare as scalars
_SCALAR_SEQUENCES = (str, bytes, bytearray)


# ═══════════════════════════════════════════════════════════════════════════════
# CONTAINER HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _is_sequence(value: Any) -> bool:
    """Ordered, indexable container that reports a length"""
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def _is_keyed(value: Any) -> bool:
    """
    Candidate that can hold named entries: a mapping or a plain object.

    Scalars and collections never do, so list methods or int attributes
    are not mistaken for keys.
    """
    if value is None:
        return False
    if isinstance(value, Mapping):
        return True
    return not isinstance(value, (Number, Sequence, Set, *_SCALAR_SEQUENCES))


def _has_key(value: Any, key: Any) -> bool:
    """
    Existence test for a key on a candidate.

    Mappings use membership, other objects use attribute existence.
    The associated value is never inspected, so None still counts.
    """
    if isinstance(value, Mapping):
        return key in value
    if isinstance(key, str):
        return hasattr(value, key)
    return False


def _get_key(value: Any, key: Any) -> Any:
    if isinstance(value, Mapping):
        return value[key]
    return getattr(value, key)


# ═══════════════════════════════════════════════════════════════════════════════
# DEEP EQUALITY
# ═══════════════════════════════════════════════════════════════════════════════

def deep_equal(a: Any, b: Any) -> bool:
    """
    Structural equality used by literal patterns.

    Sequences need the same length and equal elements, mappings the
    same key set and equal values, both checked recursively. Everything
    else falls back to ==.

    Args:
        a: Pattern data
        b: Candidate value

    Returns:
        True if both values are structurally equal

    Examples:
        >>> deep_equal([1, {"a": (2, 3)}], [1, {"a": [2, 3]}])
        True
        >>> deep_equal([1, 2], [1, 2, 3])
        False
    """
    if a is b:
        return True

    if _is_sequence(a) and _is_sequence(b):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        for key in a:
            if key not in b:
                return False
            if not deep_equal(a[key], b[key]):
                return False
        return True

    return bool(a == b)


# ═══════════════════════════════════════════════════════════════════════════════
# MATCHING
# ═══════════════════════════════════════════════════════════════════════════════

def _match_sequence(pattern: Sequence, value: Any) -> bool:
    if not _is_sequence(value):
        return False
    if len(value) < len(pattern):
        return False
    # Prefix semantics: elements past the pattern's length are ignored
    for index, sub_pattern in enumerate(pattern):
        if not matches(sub_pattern, value[index]):
            return False
    return True


def _match_keyed(pattern: Mapping, value: Any) -> bool:
    if not _is_keyed(value):
        return False
    for key in pattern:
        if not _has_key(value, key):
            return False
    for key, sub_pattern in pattern.items():
        if not matches(sub_pattern, _get_key(value, key)):
            return False
    return True


def matches(pattern: Any, value: Any) -> bool:
    """
    Check whether a value satisfies a pattern.

    Args:
        pattern: Any pattern (see patroon.core.patterns for the kinds)
        value: Candidate value

    Returns:
        True if the value matches

    Examples:
        >>> matches([_, 2], [1, 2, 3])
        True
        >>> matches({"a": _}, {"a": None})
        True
        >>> matches(t(int, p(lambda v: v > 0)), -1)
        False
    """
    kind = classify(pattern)

    if kind is PatternKind.WILDCARD:
        result = True
    elif kind is PatternKind.PREDICATE:
        result = bool(pattern.fn(value))
    elif kind is PatternKind.TYPED:
        # Nested pattern sees the whole value, not a field of it
        result = isinstance(value, pattern.cls) and matches(pattern.pattern, value)
    elif kind is PatternKind.SEQUENCE:
        result = _match_sequence(pattern, value)
    elif kind is PatternKind.KEYED:
        result = _match_keyed(pattern, value)
    else:
        result = deep_equal(pattern, value)

    if config.TRACE_MATCHING:
        log_match_trace(kind.value, pattern, value, result, config.MAX_REPR_LENGTH)

    return result
