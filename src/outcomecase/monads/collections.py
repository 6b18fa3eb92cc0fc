"""Operations over many Outcomes."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .outcome import Failure, Outcome, Success

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


def sequence(outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """[Outcome[T, E]] -> Outcome[[T], E]. Fail-fast on the first Failure."""
    values: list[T] = []
    for o in outcomes:
        if not o._is_success:
            return Failure(o._value)  # type: ignore[arg-type]
        values.append(o._value)  # type: ignore[arg-type]
    return Success(values)


def traverse(items: Iterable[T], f: Callable[[T], Outcome[U, E]]) -> Outcome[list[U], E]:
    """Map f over items and sequence the results. f is not called past the first Failure."""
    values: list[U] = []
    for item in items:
        o = f(item)
        if not o._is_success:
            return Failure(o._value)  # type: ignore[arg-type]
        values.append(o._value)  # type: ignore[arg-type]
    return Success(values)


def collect_outcomes(
    outcomes: Iterable[Outcome[T, Any]],
    message: str = "multiple failures",
) -> Outcome[list[T], BaseExceptionGroup]:
    """Collect every Outcome, accumulating all errors into one exception group (not fail-fast)."""
    values: list[T] = []
    errors: list[BaseException] = []
    for o in outcomes:
        (values if o._is_success else errors).append(o._value)  # type: ignore[arg-type]
    return Failure(BaseExceptionGroup(message, errors)) if errors else Success(values)
