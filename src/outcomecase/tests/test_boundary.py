"""Tests for the raise/capture boundary: from_throwing, catching, unwrap."""

from __future__ import annotations

import asyncio
import logging

import pytest

from outcomecase import Failure, Outcome, catching, failure, from_throwing, from_throwing_async, success
from outcomecase.playground import IsPrimeError


# ═════════════════════════════════════════════════════════════════════════════
# from_throwing
# ═════════════════════════════════════════════════════════════════════════════


def test_from_throwing_normal_return() -> None:
    assert from_throwing(lambda: 41 + 1) == success(42)


def test_from_throwing_captures_exact_exception() -> None:
    """The raised instance itself ends up in the Failure."""
    err = IsPrimeError()

    def raise_it() -> int:
        raise err

    result = from_throwing(raise_it)
    assert result == failure(IsPrimeError())
    assert result.error is err


def test_from_throwing_classmethod() -> None:
    assert Outcome.from_throwing(lambda: "x") == success("x")
    assert isinstance(Outcome.from_throwing(lambda: int("x")), Failure)


def test_from_throwing_respects_catch() -> None:
    """Exceptions outside catch propagate."""
    assert from_throwing(lambda: int("x"), catch=ValueError).is_failure()
    with pytest.raises(KeyError):
        from_throwing(lambda: {}["missing"], catch=ValueError)


def test_from_throwing_catch_tuple() -> None:
    result = from_throwing(lambda: {}["missing"], catch=(ValueError, KeyError))
    assert isinstance(result.error, KeyError)


def test_from_throwing_does_not_capture_base_exceptions() -> None:
    def interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        from_throwing(interrupt)


def test_unwrap_round_trip() -> None:
    """from_throwing then unwrap re-raises the same instance."""
    err = ValueError("bad")

    def raise_it() -> int:
        raise err

    with pytest.raises(ValueError) as info:
        from_throwing(raise_it).unwrap()
    assert info.value is err
    assert from_throwing(lambda: 3).unwrap() == 3


def test_from_throwing_inside_chain() -> None:
    """Raising steps are turned into data and then short-circuit."""
    result = (
        success("12")
        .flat_map(lambda s: from_throwing(lambda: int(s)))
        .map(lambda n: n * 2)
    )
    assert result == success(24)

    bad = success("twelve").flat_map(lambda s: from_throwing(lambda: int(s))).map(lambda n: n * 2)
    assert isinstance(bad.error, ValueError)


# ═════════════════════════════════════════════════════════════════════════════
# catching decorator
# ═════════════════════════════════════════════════════════════════════════════


def test_catching_decorator() -> None:
    @catching(ValueError)
    def parse(s: str) -> int:
        """Parse an int."""
        return int(s)

    assert parse("7") == success(7)
    assert isinstance(parse("x").error, ValueError)
    assert parse.__name__ == "parse"
    assert parse.__doc__ == "Parse an int."


def test_catching_without_arguments_catches_exception() -> None:
    @catching()
    def divide(a: int, b: int) -> float:
        return a / b

    assert divide(6, b=3) == success(2.0)
    assert isinstance(divide(1, 0).error, ZeroDivisionError)


def test_catching_lets_other_exceptions_through() -> None:
    @catching(ValueError)
    def lookup(key: str) -> int:
        return {"a": 1}[key]

    with pytest.raises(KeyError):
        lookup("b")


# ═════════════════════════════════════════════════════════════════════════════
# Async
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_from_throwing_async_coroutine() -> None:
    async def fetch() -> int:
        await asyncio.sleep(0)
        return 5

    async def fail() -> int:
        await asyncio.sleep(0)
        raise TimeoutError("slow")

    assert await from_throwing_async(fetch) == success(5)
    result = await from_throwing_async(fail)
    assert isinstance(result.error, TimeoutError)


@pytest.mark.asyncio
async def test_from_throwing_async_sync_callable() -> None:
    assert await from_throwing_async(lambda: 2 + 2) == success(4)
    result = await from_throwing_async(lambda: int("x"), catch=ValueError)
    assert isinstance(result.error, ValueError)


@pytest.mark.asyncio
async def test_from_throwing_async_respects_catch() -> None:
    async def fail() -> int:
        raise KeyError("k")

    with pytest.raises(KeyError):
        await from_throwing_async(fail, catch=ValueError)


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_captured_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="outcomecase.boundary")

    from_throwing(lambda: int("x"))

    records = [r for r in caplog.records if r.name == "outcomecase.boundary"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert records[0].error_type == "ValueError"
    assert records[0].error_code == "INVALID_VALUE"
    assert "captured ValueError" in records[0].getMessage()


def test_capture_logging_can_be_disabled(caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTCOMECASE_CAPTURE_LOG_FAILURES", "false")
    caplog.set_level(logging.DEBUG, logger="outcomecase.boundary")

    from_throwing(lambda: int("x"))

    assert not [r for r in caplog.records if r.name == "outcomecase.boundary"]


def test_capture_log_level_is_configurable(caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTCOMECASE_CAPTURE_LOG_LEVEL", "warning")
    caplog.set_level(logging.WARNING, logger="outcomecase.boundary")

    from_throwing(lambda: 1 // 0)

    records = [r for r in caplog.records if r.name == "outcomecase.boundary"]
    assert [r.levelno for r in records] == [logging.WARNING]


def test_success_is_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="outcomecase.boundary")
    from_throwing(lambda: 1)
    assert not [r for r in caplog.records if r.name == "outcomecase.boundary"]


class HttpishError(Exception):
    """Exception type whose description attribute may be unset."""

    description: str | None = None


def test_unset_description_does_not_escape_with_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    """With DEBUG capture logging on, the Failure is still returned."""
    caplog.set_level(logging.DEBUG, logger="outcomecase.boundary")
    err = HttpishError("boom")

    def raise_it() -> int:
        raise err

    result = from_throwing(raise_it)

    assert result.error is err
    records = [r for r in caplog.records if r.name == "outcomecase.boundary"]
    assert len(records) == 1
    assert records[0].getMessage().endswith(": boom")


def test_failing_report_does_not_replace_captured_error(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A broken report is logged as a warning; the original error is still returned."""
    from outcomecase.foundation.errors import ErrorReport

    def broken(*args: object, **kwargs: object) -> ErrorReport:
        raise RuntimeError("report failed")

    monkeypatch.setattr(ErrorReport, "from_exception", broken)
    caplog.set_level(logging.DEBUG, logger="outcomecase.boundary")

    result = from_throwing(lambda: int("x"))

    assert isinstance(result.error, ValueError)
    warnings = [r for r in caplog.records if r.name == "outcomecase.boundary" and r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "could not report captured ValueError" in warnings[0].getMessage()


@pytest.mark.asyncio
async def test_unset_description_does_not_escape_async(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="outcomecase.boundary")

    async def fail() -> int:
        raise HttpishError("boom")

    result = await from_throwing_async(fail)
    assert isinstance(result.error, HttpishError)


@pytest.mark.asyncio
async def test_from_throwing_async_lambda_returning_coroutine() -> None:
    """Arguments bound with a lambda still get awaited."""
    async def fetch(n: int) -> int:
        await asyncio.sleep(0)
        return n

    assert await from_throwing_async(lambda: fetch(5)) == success(5)


@pytest.mark.asyncio
async def test_from_throwing_async_lambda_returning_raising_coroutine() -> None:
    async def fetch(n: int) -> int:
        await asyncio.sleep(0)
        raise TimeoutError(f"slow {n}")

    result = await from_throwing_async(lambda: fetch(5))
    assert isinstance(result.error, TimeoutError)
    assert str(result.error) == "slow 5"
