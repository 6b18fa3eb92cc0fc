"""Outcome: a two-variant success/failure value.

An Outcome is either Success(value) or Failure(error), where error is an
exception. Failures travel as data through map/flat_map chains and only turn
back into raised exceptions at unwrap(). from_throwing() is the opposite
boundary: it runs raising code and captures the exception into a Failure.

Example:
    >>> def parse_int(s: str) -> Outcome[int, ValueError]:
    ...     return from_throwing(lambda: int(s), catch=ValueError)
    >>> parse_int("21").map(lambda n: n * 2).unwrap()
    42
    >>> parse_int("x").map(lambda n: n * 2).is_failure()
    True

Pattern matching works on the variants:
    >>> match success(3):
    ...     case Success(value): print(value)
    ...     case Failure(error): print(error)
    3
"""

from __future__ import annotations

import asyncio
import inspect as _inspect
import logging
from functools import wraps
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    ClassVar,
    Generic,
    NoReturn,
    ParamSpec,
    TypeVar,
)

from outcomecase.foundation.config import get_settings
from outcomecase.foundation.errors import ErrorReport

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E", bound=BaseException)  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F", bound=BaseException)  # Mapped error type
P = ParamSpec("P")

ExcTypes = type[BaseException] | tuple[type[BaseException], ...]

logger = logging.getLogger("outcomecase.boundary")


def _check_error(error: object) -> None:
    if not isinstance(error, BaseException):
        raise TypeError(f"Failure requires an exception, got {type(error).__name__}: {error!r}")


class Outcome(Generic[T, E]):
    """Discriminated union of Success (a value) and Failure (an exception).

    Immutable: every operation returns a new Outcome. Construct with
    success()/failure() or the Success/Failure classes directly.
    """

    __slots__ = ("_value",)
    _is_success: ClassVar[bool]

    def __init__(self, value: T | E) -> None:
        if type(self) is Outcome:
            raise TypeError("Outcome is abstract; use success() or failure()")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def from_throwing(operation: Callable[[], T], *, catch: ExcTypes = Exception) -> Outcome[T, Any]:
        """Same as the module-level from_throwing()."""
        return from_throwing(operation, catch=catch)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        """Check if this is the Success variant."""
        return self._is_success

    def is_failure(self) -> bool:
        """Check if this is the Failure variant."""
        return not self._is_success

    @property
    def value(self) -> T | None:
        """Success value, or None on Failure."""
        return self._value if self._is_success else None  # type: ignore[return-value]

    @property
    def error(self) -> E | None:
        """Failure error, or None on Success."""
        return None if self._is_success else self._value  # type: ignore[return-value]

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Return the Success value. On Failure, raise the contained exception itself."""
        if self._is_success:
            return self._value  # type: ignore[return-value]
        raise self._value  # type: ignore[misc]

    get = unwrap

    def unwrap_error(self) -> E:
        """Return the Failure error. Raises RuntimeError on Success."""
        if not self._is_success:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_error() on Success: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        """Success value, or default on Failure."""
        return self._value if self._is_success else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Success value, or f(error) on Failure."""
        return self._value if self._is_success else f(self._value)  # type: ignore[return-value,arg-type]

    # ─── Transformations ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Outcome[U, E]:
        """Success(v) -> Success(f(v)). Failure passes through; f is not called."""
        if self._is_success:
            return Success(f(self._value))  # type: ignore[arg-type]
        return Failure(self._value)  # type: ignore[arg-type]

    def flat_map(self, f: Callable[[T], Outcome[U, E]]) -> Outcome[U, E]:
        """Success(v) -> f(v), returned as is. Failure passes through; f is not called.

        Chains steps that each may fail without nesting Outcome[Outcome[...]]:
            >>> success(4).flat_map(lambda n: success(n // 2) if n % 2 == 0 else failure(ValueError("odd")))
            Success(2)
        """
        if self._is_success:
            return f(self._value)  # type: ignore[arg-type]
        return Failure(self._value)  # type: ignore[arg-type]

    and_then = flat_map

    def map_error(self, f: Callable[[E], F]) -> Outcome[T, F]:
        """Failure(e) -> Failure(f(e)). Success passes through; f is not called."""
        if self._is_success:
            return Success(self._value)  # type: ignore[arg-type]
        return Failure(f(self._value))  # type: ignore[arg-type]

    def flat_map_error(self, f: Callable[[E], Outcome[T, F]]) -> Outcome[T, F]:
        """Failure(e) -> f(e), returned as is. Success passes through; f is not called."""
        if self._is_success:
            return Success(self._value)  # type: ignore[arg-type]
        return f(self._value)  # type: ignore[arg-type]

    or_else = flat_map_error

    def flatten(self: Outcome[Outcome[T, E], E]) -> Outcome[T, E]:
        """Outcome[Outcome[T, E], E] -> Outcome[T, E]."""
        return self.flat_map(lambda inner: inner)

    # ─── Inspection ──────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], object]) -> Outcome[T, E]:
        """Call f with the Success value for side effects, return self."""
        if self._is_success:
            f(self._value)  # type: ignore[arg-type]
        return self

    def inspect_error(self, f: Callable[[E], object]) -> Outcome[T, E]:
        """Call f with the Failure error for side effects, return self."""
        if not self._is_success:
            f(self._value)  # type: ignore[arg-type]
        return self

    def match(self, *, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        """Exhaustive fold: exactly one of the two callables runs."""
        return success(self._value) if self._is_success else failure(self._value)  # type: ignore[arg-type]

    def to_tuple(self) -> tuple[T | None, E | None]:
        """(value, None) on Success, (None, error) on Failure."""
        return (self._value, None) if self._is_success else (None, self._value)  # type: ignore[return-value]

    def report(self, *, include_traceback: bool | None = None) -> ErrorReport | None:
        """ErrorReport for a Failure, None for a Success."""
        if self._is_success:
            return None
        if include_traceback is None:
            include_traceback = get_settings().capture.include_traceback
        return ErrorReport.from_exception(self._value, include_traceback=include_traceback)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_success

    def __iter__(self) -> Iterator[T]:
        """Yields the value on Success, nothing on Failure."""
        if self._is_success:
            yield self._value  # type: ignore[misc]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_success, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._value,))


class Success(Outcome[T, E]):
    """Success variant."""

    __slots__ = ()
    __match_args__ = ("value",)
    _is_success = True


class Failure(Outcome[T, E]):
    """Failure variant. The payload must be an exception."""

    __slots__ = ()
    __match_args__ = ("error",)
    _is_success = False

    def __init__(self, error: E) -> None:
        _check_error(error)
        super().__init__(error)


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Outcome[T, Any]:
    """Construct the Success variant."""
    return Success(value)


def failure(error: E) -> Outcome[Any, E]:
    """Construct the Failure variant. Raises TypeError if error is not an exception."""
    return Failure(error)


# ═══════════════════════════════════════════════════════════════════════════════
# Raise/Capture Boundary
# ═══════════════════════════════════════════════════════════════════════════════


def _log_captured(exc: BaseException, operation: object) -> None:
    capture = get_settings().capture
    if not capture.log_failures:
        return
    level = logging.getLevelName(capture.log_level)
    if not logger.isEnabledFor(level):
        return
    # Reporting must never replace the captured exception
    try:
        report = ErrorReport.from_exception(exc, include_traceback=capture.include_traceback)
    except Exception:
        logger.warning("could not report captured %s", type(exc).__name__, exc_info=True)
        return
    logger.log(
        level,
        "captured %s from %s: %s",
        report.error_type,
        getattr(operation, "__qualname__", repr(operation)),
        report.description,
        extra={"error_type": report.error_type, "error_code": report.code.value},
    )


def from_throwing(operation: Callable[[], T], *, catch: ExcTypes = Exception) -> Outcome[T, Any]:
    """Run operation; return Success(result) or Failure(exc) for exceptions matching catch.

    Exceptions outside catch are not captured and propagate to the caller.

    Example:
        >>> from_throwing(lambda: 1 // 0)
        Failure(ZeroDivisionError('integer division or modulo by zero'))
    """
    try:
        value = operation()
    except catch as exc:
        _log_captured(exc, operation)
        return Failure(exc)
    return Success(value)


async def from_throwing_async(
    operation: Callable[[], T] | Callable[[], Awaitable[T]],
    *,
    catch: ExcTypes = Exception,
) -> Outcome[T, Any]:
    """Async from_throwing. Coroutine functions are awaited, plain callables run in a thread.

    An awaitable returned by a plain callable (``lambda: fetch(url)``) is awaited too.
    """
    try:
        if _inspect.iscoroutinefunction(operation):
            value = await operation()
        else:
            value = await asyncio.to_thread(operation)
            if _inspect.isawaitable(value):
                value = await value
    except catch as exc:
        _log_captured(exc, operation)
        return Failure(exc)
    return Success(value)  # type: ignore[arg-type]


def catching(*exc_types: type[BaseException]) -> Callable[[Callable[P, T]], Callable[P, Outcome[T, Any]]]:
    """Decorator: make a raising function return an Outcome instead.

    With no arguments, captures Exception.

        >>> @catching(ValueError)
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("7")
        Success(7)
    """
    catch: ExcTypes = exc_types or Exception

    def decorator(func: Callable[P, T]) -> Callable[P, Outcome[T, Any]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T, Any]:
            return from_throwing(lambda: func(*args, **kwargs), catch=catch)
        return wrapper

    return decorator
