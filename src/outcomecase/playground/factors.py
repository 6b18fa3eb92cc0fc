"""Random numbers and their factors, as a chain of fallible steps.

Two things can go wrong: asking for a random number below zero, and the
number turning out to be prime. Both are failures carried as data.

    >>> calculate_factors(4)
    Success(3)
    >>> generate_random_number(-1).flat_map(calculate_factors)
    Failure(BelowMinimumError('number must not be below the minimum'))
"""

from __future__ import annotations

import random
from typing import Any

from outcomecase.foundation.errors import DescribedError, ErrorCode
from outcomecase.monads import Outcome, failure, success


class FactorError(DescribedError):
    """Failures of the factoring playground."""


class BelowMinimumError(FactorError):
    code = ErrorCode.OUT_OF_RANGE
    default_description = "number must not be below the minimum"


class IsPrimeError(FactorError):
    code = ErrorCode.INVALID_VALUE
    default_description = "number is prime"


def generate_random_number(maximum: int, *, rng: random.Random | None = None) -> Outcome[int, FactorError]:
    """Random integer in [0, maximum], or BelowMinimumError when maximum < 0."""
    if maximum < 0:
        return failure(BelowMinimumError())
    return success((rng or random).randint(0, maximum))


def calculate_factors(number: int) -> Outcome[int, FactorError]:
    """Count the positive divisors of number.

    Primes (exactly two divisors) fail with IsPrimeError. Numbers below 1 have
    no divisor range and fail with BelowMinimumError.
    """
    if number < 1:
        return failure(BelowMinimumError())
    count = sum(1 for candidate in range(1, number + 1) if number % candidate == 0)
    if count == 2:
        return failure(IsPrimeError())
    return success(count)


def describe_random_number(outcome: Outcome[int, Any]) -> Outcome[str, Any]:
    """Map a random number to a sentence; failures pass through."""
    return outcome.map(lambda n: f"The random number is: {n}.")


def count_random_factors(maximum: int, *, rng: random.Random | None = None) -> Outcome[int, FactorError]:
    """Generate a random number and count its factors; the first failure wins."""
    return generate_random_number(maximum, rng=rng).flat_map(calculate_factors)
