"""
Dispatcher

Builds a callable from ordered (pattern, handler) cases.

On each call the cases are tried in declaration order; the handler of the
first matching pattern receives the original value and its result is
returned. When nothing matches, NoMatchError is raised.

Example:
    >>> to_pairs = patroon(
    ...     [_, _], lambda v, acc=(): to_pairs(v[2:], [*acc, list(v[:2])]),
    ...     _,      lambda v, acc=(): list(acc),
    ... )
    >>> to_pairs([1, 2, 3, 4])
    [[1, 2], [3, 4]]
"""

from collections.abc import Iterable
from typing import Any, Callable, Iterator, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from patroon import config
from patroon.core.errors import InvalidDispatcherError, NoMatchError
from patroon.core.matcher import matches
from patroon.infra.logger import (
    log_dispatcher_built,
    log_dispatcher_invalid,
    log_dispatch_match,
    log_dispatch_no_match,
)


# ═══════════════════════════════════════════════════════════════════════════════
# CASE RECORD
# ═══════════════════════════════════════════════════════════════════════════════

class Case(BaseModel):
    """
    One pattern/handler pair of a dispatcher.

    Attributes:
        pattern: Pattern tested against the candidate
        handler: Callable invoked with the original candidate on a match
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    pattern: Any
    handler: Callable[..., Any]


CaseLike = Union[Case, Tuple[Any, Callable[..., Any]]]


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════════════════════

def _fail(message: str):
    log_dispatcher_invalid(message)
    raise InvalidDispatcherError(message) from None


def _build_case(position: int, pattern: Any, handler: Any) -> Case:
    try:
        return Case(pattern=pattern, handler=handler)
    except ValidationError:
        _fail(f"Handler of case {position} is not callable: {handler!r}")


def _coerce_case(position: int, entry: Any) -> Case:
    if isinstance(entry, Case):
        return entry
    if isinstance(entry, tuple) and len(entry) == 2:
        return _build_case(position, entry[0], entry[1])
    _fail(f"Case {position} must be a Case or a (pattern, handler) tuple, got: {entry!r}")


# ═══════════════════════════════════════════════════════════════════════════════
# DISPATCHER
# ═══════════════════════════════════════════════════════════════════════════════

class Dispatcher:
    """
    Immutable, ordered collection of cases exposed as a callable.

    Holds no state between calls, so one dispatcher can be shared freely
    across threads and re-entered from its own handlers.
    """

    __slots__ = ("_cases",)

    def __init__(self, cases: Iterable[CaseLike]):
        """
        Args:
            cases: Ordered Case records or (pattern, handler) tuples

        Raises:
            InvalidDispatcherError: If cases is not iterable, is empty or
                holds a malformed entry
        """
        if not isinstance(cases, Iterable):
            _fail(f"Cases must be an iterable of (pattern, handler) pairs, got: {cases!r}")

        built = tuple(_coerce_case(position, entry) for position, entry in enumerate(cases))
        if not built:
            _fail("A dispatcher needs at least one case")

        self._cases: Tuple[Case, ...] = built
        log_dispatcher_built(len(built))

    @classmethod
    def from_cases(cls, cases: Iterable[CaseLike]) -> "Dispatcher":
        """Build a dispatcher from an explicit ordered list of cases"""
        return cls(cases)

    @property
    def cases(self) -> Tuple[Case, ...]:
        return self._cases

    def __call__(self, value: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Run the handler of the first case whose pattern matches value.

        Extra arguments are passed through to the handler untouched;
        only value takes part in matching.

        Args:
            value: Candidate value

        Returns:
            Result of the selected handler

        Raises:
            NoMatchError: If no pattern matches value
        """
        for index, case in enumerate(self._cases):
            if matches(case.pattern, value):
                log_dispatch_match(index, case.handler, value, config.MAX_REPR_LENGTH)
                return case.handler(value, *args, **kwargs)

        log_dispatch_no_match(len(self._cases), value, config.MAX_REPR_LENGTH)
        raise NoMatchError(value)

    def __len__(self) -> int:
        return len(self._cases)

    def __iter__(self) -> Iterator[Case]:
        return iter(self._cases)

    def __repr__(self) -> str:
        patterns = ", ".join(repr(case.pattern) for case in self._cases)
        return f"Dispatcher({patterns})"


# ═══════════════════════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════════

def patroon(*args: Any) -> Dispatcher:
    """
    Build a dispatcher from alternating pattern and handler arguments.

    Args:
        *args: pattern, handler, pattern, handler, ...

    Returns:
        Dispatcher trying the cases in the given order

    Raises:
        InvalidDispatcherError: If args is empty, has an odd length or
            holds a non-callable in a handler position

    Examples:
        >>> describe = patroon(
        ...     {"error": _}, lambda r: "failed",
        ...     {"ok": _},    lambda r: "done",
        ... )
        >>> describe({"ok": 1})
        'done'
    """
    if not args:
        _fail("patroon() needs at least one pattern/handler pair")
    if len(args) % 2 != 0:
        _fail(f"patroon() expects pattern/handler pairs, got {len(args)} arguments")

    cases = [
        _build_case(position, args[i], args[i + 1])
        for position, i in enumerate(range(0, len(args), 2))
    ]
    return Dispatcher(cases)
