"""Outcome: value-based error handling with a raise/capture boundary.

Example:
    >>> from outcomecase.monads import failure, success
    >>>
    >>> def halve(n: int):
    ...     return success(n // 2) if n % 2 == 0 else failure(ValueError(f"{n} is odd"))
    >>>
    >>> success(8).flat_map(halve).flat_map(halve).map(str).unwrap()
    '2'
"""

from .collections import collect_outcomes, sequence, traverse
from .outcome import (
    Failure,
    Outcome,
    Success,
    catching,
    failure,
    from_throwing,
    from_throwing_async,
    success,
)

__all__ = [
    # Core types
    "Outcome", "Success", "Failure",
    # Constructors
    "success", "failure",
    # Raise/capture boundary
    "from_throwing", "from_throwing_async", "catching",
    # Collection operations
    "sequence", "traverse", "collect_outcomes",
]
