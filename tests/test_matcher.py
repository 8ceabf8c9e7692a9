"""
Test suite for the structural matcher
"""

import sys
from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from patroon import _, p, t, matches, deep_equal


class A:
    pass


class B:
    pass


class SubA(A):
    pass


def make(cls, **fields):
    instance = cls()
    for name, value in fields.items():
        setattr(instance, name, value)
    return instance


# ═══════════════════════════════════════════════════════════════════════════
# DEEP EQUALITY
# ═══════════════════════════════════════════════════════════════════════════

def test_deep_equal():
    """Test structural equality used for literals."""

    print("Testing deep_equal...")

    # Scalars
    assert deep_equal(1, 1)
    assert deep_equal("a", "a")
    assert deep_equal(None, None)
    assert not deep_equal(1, 2)
    assert not deep_equal("a", "b")

    # Sequences need equal length
    assert deep_equal([1, 2], [1, 2])
    assert deep_equal((1, 2), [1, 2])
    assert not deep_equal([1, 2], [1, 2, 3])
    assert not deep_equal([1, 2, 3], [1, 2])

    # Mappings need equal key sets
    assert deep_equal({"a": 1}, {"a": 1})
    assert not deep_equal({"a": 1}, {"a": 1, "b": 2})
    assert not deep_equal({"a": 1}, {"b": 1})

    # Nested
    assert deep_equal({"a": [1, {"b": (2, 3)}]}, {"a": [1, {"b": [2, 3]}]})
    assert not deep_equal({"a": [1, {"b": (2, 3)}]}, {"a": [1, {"b": [2, 4]}]})

    # Strings are not sequences of characters
    assert not deep_equal("ab", ["a", "b"])

    print("✓ deep_equal tests passed")


# ═══════════════════════════════════════════════════════════════════════════
# PATTERN KINDS
# ═══════════════════════════════════════════════════════════════════════════

def test_wildcard():
    """Test that the wildcard matches anything."""

    for value in (None, 0, "", [], {}, A(), object()):
        assert matches(_, value)


def test_predicate():
    """Test predicate patterns."""

    print("Testing predicate patterns...")

    gt2 = p(lambda v: v > 2)
    assert matches(gt2, 4)
    assert not matches(gt2, 1)

    # Truthiness, not identity with True
    assert matches(p(lambda v: v), [1])
    assert not matches(p(lambda v: v), [])

    # The predicate receives the candidate itself
    spy = MagicMock(return_value=True)
    candidate = {"a": 1}
    assert matches(p(spy), candidate)
    spy.assert_called_once_with(candidate)

    print("✓ predicate tests passed")


def test_predicate_errors_propagate():
    """Test that predicate faults are not swallowed."""

    def boom(value):
        raise ValueError("boom")

    with pytest.raises(ValueError):
        matches(p(boom), 1)


def test_typed():
    """Test typed patterns."""

    print("Testing typed patterns...")

    assert matches(t(A), A())
    assert matches(t(A), SubA())
    assert not matches(t(B), A())
    assert matches(t(int), 3)
    assert not matches(t(int), "3")

    # Nested pattern must also match the whole value
    assert not matches(t(A, {"a": _}), A())
    assert matches(t(A, {"a": _}), make(A, a=None))
    assert matches(t(int, p(lambda v: v > 0)), 5)
    assert not matches(t(int, p(lambda v: v > 0)), -5)

    print("✓ typed tests passed")


def test_typed_and_shape():
    """Test conjunction of type and field values."""

    print("Testing typed + shape conjunction...")

    pattern = t(A, {"value": 20})
    assert matches(pattern, make(A, value=20))
    assert not matches(pattern, make(A, value=30))
    assert not matches(pattern, make(B, value=20))

    print("✓ typed + shape tests passed")


def test_typed_short_circuits():
    """Test that the nested pattern only runs after the type check passes."""

    spy = MagicMock(return_value=True)
    assert not matches(t(A, p(spy)), B())
    spy.assert_not_called()


def test_sequence():
    """Test sequence patterns."""

    print("Testing sequence patterns...")

    assert matches([_, 20], [10, 20])
    assert not matches([_, 10], [10, 20])

    # Prefix semantics
    assert matches([1, 2], [1, 2, 3, 4])
    assert matches([], [])
    assert matches([], [1, 2])
    assert not matches([_, _], [1])
    assert not matches([_], [])

    # Tuples and lists are interchangeable
    assert matches((1, _), [1, 2])
    assert matches([1, _], (1, 2))

    # Not sequences
    assert not matches([_], "abc")
    assert not matches([_], b"abc")
    assert not matches([_], {"0": 1})
    assert not matches([_], 5)
    assert not matches([], None)

    # Nested
    assert matches([[1, _], {"a": _}], [[1, 2, 3], {"a": 1, "b": 2}])
    assert not matches([[1, _], {"a": _}], [[1], {"a": 1}])

    print("✓ sequence tests passed")


def test_keyed():
    """Test keyed patterns."""

    print("Testing keyed patterns...")

    assert matches({"a": 1}, {"a": 1})
    assert matches({"a": 1}, {"a": 1, "b": 2})
    assert not matches({"a": 1}, {"a": 2})
    assert matches({}, {"a": 1})

    # Existence is independent of the value
    assert matches({"a": _}, {"a": None})
    assert not matches({"c": _}, {"a": None})

    # Attributes on plain objects
    assert matches({"a": _}, make(A, a=None))
    assert not matches({"c": _}, make(A, a=None))

    # Non-keyed candidates
    assert not matches({"a": _}, None)
    assert not matches({"a": _}, 5)
    assert not matches({0: _}, [1])

    # Nested
    assert matches({"error": {"value": _}}, {"error": {"value": 20}})
    assert not matches({"ok": {"value": 20}}, {"error": {"value": 20}})

    print("✓ keyed tests passed")


def test_keyed_rejects_scalars_and_collections():
    """Test that only mappings and plain objects are keyed candidates."""

    print("Testing keyed candidate kinds...")

    # Scalars have no named entries, not even for an empty pattern
    assert not matches({}, 5)
    assert not matches({}, 2.5)
    assert not matches({}, True)
    assert not matches({}, "abc")
    assert not matches({}, b"abc")

    # Collection methods are not keys
    assert not matches({"index": _}, [1])
    assert not matches({"count": _}, (1, 2))
    assert not matches({"union": _}, {1, 2})
    assert not matches({"real": _}, 3)
    assert not matches({"upper": _}, "abc")

    # Mappings and plain objects still are
    assert matches({}, {})
    assert matches({}, A())
    assert matches({"index": _}, {"index": 0})

    print("✓ keyed candidate kind tests passed")


def test_literal():
    """Test literal patterns."""

    assert matches(1, 1)
    assert not matches(1, 2)
    assert matches("abc", "abc")
    assert not matches("abc", ["a", "b", "c"])
    assert matches(None, None)
    assert not matches(None, 0)
    assert matches({1, 2}, {2, 1})


def test_matches_does_not_mutate():
    """Test that neither argument is changed."""

    pattern = {"a": [1, _], "b": {"c": _}}
    value = {"a": [1, 2, 3], "b": {"c": None, "d": 4}}
    pattern_before = repr(pattern)
    value_before = repr(value)

    assert matches(pattern, value)
    assert repr(pattern) == pattern_before
    assert repr(value) == value_before


def test_trace_logging():
    """Test that matcher decisions are traced only when enabled."""

    with patch("patroon.core.matcher.log_match_trace") as trace:
        matches([_], [1])
        trace.assert_not_called()

    with patch("patroon.config.TRACE_MATCHING", True), \
            patch("patroon.core.matcher.log_match_trace") as trace:
        matches([_], [1])
        # One call for the sequence, one for its element
        assert trace.call_count == 2
        kinds = [call.args[0] for call in trace.call_args_list]
        assert kinds == ["wildcard", "sequence"]


def run_all_tests():
    """Run all test functions."""
    print("\n" + "="*60)
    print("Running Structural Matcher Tests")
    print("="*60 + "\n")

    try:
        test_deep_equal()
        test_wildcard()
        test_predicate()
        test_predicate_errors_propagate()
        test_typed()
        test_typed_and_shape()
        test_typed_short_circuits()
        test_sequence()
        test_keyed()
        test_keyed_rejects_scalars_and_collections()
        test_literal()
        test_matches_does_not_mutate()
        test_trace_logging()

        print("\n" + "="*60)
        print("✅ ALL TESTS PASSED!")
        print("="*60 + "\n")

    except AssertionError as e:
        print("\n" + "="*60)
        print("❌ TEST FAILED!")
        print("="*60)
        print(f"Error: {e}\n")
        import traceback
        traceback.print_exc()
        raise


if __name__ == "__main__":
    run_all_tests()
