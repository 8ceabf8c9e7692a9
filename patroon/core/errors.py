"""
Matching Errors

NoMatchError is the only error raised while a dispatcher runs. The other
errors are raised while patterns and dispatchers are being built and
signal programming mistakes in the calling code.

Exceptions raised by predicates or handlers are never wrapped.
"""

from typing import Any

from patroon import config


class PatroonError(Exception):
    """Base class for every error raised by the library"""
    pass


class NoMatchError(PatroonError):
    """
    Raised by a dispatcher when no case matches the candidate.

    Attributes:
        value: The candidate that was not matched
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        # Built on demand; the candidate is only repr'd when the message is read
        return f"No pattern matched value: {config.truncate_repr(self.value)}"


class InvalidPatternError(PatroonError):
    """Raised when p() or t() receive arguments they cannot wrap"""
    pass


class InvalidDispatcherError(PatroonError):
    """Raised when a dispatcher is built from malformed cases"""
    pass
