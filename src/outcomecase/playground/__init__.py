"""Worked scenarios built on Outcome."""

from .factors import (
    BelowMinimumError,
    FactorError,
    IsPrimeError,
    calculate_factors,
    count_random_factors,
    describe_random_number,
    generate_random_number,
)
from .network import (
    BadURLError,
    NetworkError,
    fetch_unread_count,
    unread_count_or_none,
    unread_message_summary,
)

__all__ = [
    # Factors
    "FactorError", "BelowMinimumError", "IsPrimeError",
    "generate_random_number", "calculate_factors", "describe_random_number", "count_random_factors",
    # Network
    "NetworkError", "BadURLError",
    "fetch_unread_count", "unread_message_summary", "unread_count_or_none",
]
