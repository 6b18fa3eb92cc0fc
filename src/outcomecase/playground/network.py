"""Unread-message fetching with a completion callback.

Nothing is fetched: a valid URL always reports five unread messages. The
point is handing an Outcome to the callback instead of raising.

A URL counts as valid only with both a scheme and a host, so a bare
``www.example.com`` is rejected as BadURLError. This is stricter than
lenient URL parsers that also accept relative references.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

from outcomecase.foundation.errors import DescribedError, ErrorCode, describe
from outcomecase.monads import Failure, Outcome, Success, failure, success

logger = logging.getLogger("outcomecase.playground.network")

SIMULATED_UNREAD_COUNT = 5


class NetworkError(DescribedError):
    code = ErrorCode.NETWORK_ERROR


class BadURLError(NetworkError):
    code = ErrorCode.INVALID_VALUE
    default_description = "the URL is not valid"


def _is_valid_url(url: str) -> bool:
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc) and not any(ch.isspace() for ch in url)


def fetch_unread_count(url: str, completion: Callable[[Outcome[int, NetworkError]], object]) -> None:
    """Call completion with the unread count for url, or BadURLError."""
    if not _is_valid_url(url):
        completion(failure(BadURLError()))
        return
    logger.info("Fetching %s...", url)
    completion(success(SIMULATED_UNREAD_COUNT))


def unread_message_summary(outcome: Outcome[int, Any]) -> str:
    """Unread-count sentence on success, the error description on failure."""
    match outcome:
        case Success(count):
            return f"{count} unread messages."
        case Failure(error):
            return describe(error)
    raise TypeError(f"not an Outcome: {outcome!r}")


def unread_count_or_none(outcome: Outcome[int, Any]) -> int | None:
    """The count, or None when the fetch failed for any reason."""
    return outcome.value
