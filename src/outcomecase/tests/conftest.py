"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from outcomecase.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Reread settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


class Counting:
    """Wraps a function and counts how often it is called."""

    def __init__(self, fn: Callable[[Any], Any]) -> None:
        self.fn = fn
        self.calls: list[Any] = []

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.fn(arg)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting() -> type[Counting]:
    return Counting
