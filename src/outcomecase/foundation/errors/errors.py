"""Error capability and classification for values carried by Failure.

Any exception can sit inside a Failure. Errors that also expose a
``description`` satisfy the Describable protocol; DescribedError is the
convenient base for caller-defined error variants.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from functools import lru_cache
from typing import ClassVar, Protocol, Self, runtime_checkable

from pydantic import BaseModel


class ErrorCode(StrEnum):
    """Coarse classification of a failure."""
    INVALID_VALUE = "INVALID_VALUE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    PARSE_ERROR = "PARSE_ERROR"
    NOT_FOUND = "NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNKNOWN = "UNKNOWN"


@runtime_checkable
class Describable(Protocol):
    """Anything exposing a human-readable description."""

    @property
    def description(self) -> str: ...


def describe(error: BaseException) -> str:
    """Human-readable description: a non-empty string ``description``, else str(), else the type name."""
    description = getattr(error, "description", None) if isinstance(error, Describable) else None
    if isinstance(description, str) and description:
        return description
    return str(error) or type(error).__name__


class DescribedError(Exception):
    """Base for domain error variants.

    Subclasses set ``code`` and ``default_description``. Instances compare
    equal when they share a type and args, so ``IsPrimeError() == IsPrimeError()``.

    Example:
        >>> class EmptyInput(DescribedError):
        ...     code = ErrorCode.INVALID_VALUE
        ...     default_description = "input was empty"
        >>> EmptyInput().description
        'input was empty'
    """

    code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN
    default_description: ClassVar[str] = ""

    def __init__(self, description: str | None = None) -> None:
        super().__init__(description or self.default_description or type(self).__name__)

    @property
    def description(self) -> str:
        return self.args[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DescribedError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


# Checked in order; first isinstance hit wins
_TYPE_CODES: tuple[tuple[type[BaseException], ErrorCode], ...] = (
    (TimeoutError, ErrorCode.TIMEOUT),
    (PermissionError, ErrorCode.PERMISSION_DENIED),
    (ConnectionError, ErrorCode.NETWORK_ERROR),
    (FileNotFoundError, ErrorCode.NOT_FOUND),
    (LookupError, ErrorCode.NOT_FOUND),
    (UnicodeError, ErrorCode.PARSE_ERROR),
    (OverflowError, ErrorCode.OUT_OF_RANGE),
    (ValueError, ErrorCode.INVALID_VALUE),
    (TypeError, ErrorCode.INVALID_VALUE),
)

_PATTERN_CODES: dict[str, ErrorCode] = {
    "timeout": ErrorCode.TIMEOUT,
    "connection": ErrorCode.NETWORK_ERROR,
    "network": ErrorCode.NETWORK_ERROR,
    "url": ErrorCode.NETWORK_ERROR,
    "permission": ErrorCode.PERMISSION_DENIED,
    "forbidden": ErrorCode.PERMISSION_DENIED,
    "parse": ErrorCode.PARSE_ERROR,
    "decode": ErrorCode.PARSE_ERROR,
    "range": ErrorCode.OUT_OF_RANGE,
    "minimum": ErrorCode.OUT_OF_RANGE,
    "maximum": ErrorCode.OUT_OF_RANGE,
    "notfound": ErrorCode.NOT_FOUND,
    "invalid": ErrorCode.INVALID_VALUE,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES)


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map an exception to an ErrorCode: own code, then builtin type, then name/message keywords."""
    if isinstance(exc, DescribedError) and exc.code is not ErrorCode.UNKNOWN:
        return exc.code
    for exc_type, code in _TYPE_CODES:
        if isinstance(exc, exc_type):
            return code
    return _classify_cached(f"{type(exc).__name__} {exc}")


class ErrorReport(BaseModel):
    """Serializable snapshot of a failure, for logs and display."""

    model_config = {"frozen": True}

    error_type: str
    description: str
    code: ErrorCode = ErrorCode.UNKNOWN
    details: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_traceback: bool = False) -> Self:
        """Build a report; ``include_traceback`` renders the exception's own traceback into details."""
        details = None
        if include_traceback and exc.__traceback__ is not None:
            details = "".join(traceback.format_exception(exc)).rstrip()
        return cls(
            error_type=type(exc).__name__,
            description=describe(exc),
            code=classify_exception(exc),
            details=details,
        )

    def render(self) -> str:
        """One-line summary, followed by details when present."""
        head = f"{self.error_type} [{self.code}]: {self.description}"
        return f"{head}\n{self.details}" if self.details else head

    __str__ = render
