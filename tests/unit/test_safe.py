"""Unit tests for execute, wrap and their always-async forms."""

from __future__ import annotations

import asyncio
import inspect

import pytest

from safe_invoke import (
    Outcome,
    OutcomeAssertions,
    execute,
    execute_async,
    is_pending,
    wrap,
    wrap_async,
)
from tests.conftest import PaymentDeclined


def add(a: int, b: int) -> int:
    """Add two numbers."""
    return a + b


async def add_later(a: int, b: int) -> int:
    """Add two numbers on the next loop iteration."""
    await asyncio.sleep(0)
    return a + b


def divide(a: int, b: int) -> float:
    return a / b


def charge(amount: int, *, currency: str = "EUR") -> str:
    if amount > 100:
        raise PaymentDeclined("over limit", amount)
    return f"{amount} {currency}"


class TestExecute:
    def test_zero_argument_thunk(self):
        assert execute(lambda: 5) == (None, 5)

    def test_positional_arguments(self):
        assert execute(add, 2, 3) == (None, 5)

    def test_keyword_arguments(self):
        assert execute(charge, 10, currency="USD") == (None, "10 USD")

    def test_failure(self):
        error = OutcomeAssertions.assert_failure(execute(divide, 1, 0), ZeroDivisionError)
        assert "division" in str(error)

    def test_custom_fault_identity(self):
        outcome = execute(charge, 500)
        error = OutcomeAssertions.assert_failure(outcome, PaymentDeclined)
        assert error.amount == 500

    def test_wrong_arity_is_captured(self):
        OutcomeAssertions.assert_failure(execute(add, 1), TypeError)

    @pytest.mark.asyncio
    async def test_async_callback_returns_pending_outcome(self):
        pending = execute(add_later, 2, 3)
        assert is_pending(pending)
        assert await pending == (None, 5)

    @pytest.mark.asyncio
    async def test_async_callback_failure(self):
        async def boom() -> None:
            raise RuntimeError("boom")

        outcome = await execute(boom)
        assert isinstance(outcome.error, RuntimeError)
        assert str(outcome.error) == "boom"


class TestWrap:
    def test_wrapped_sync_callable(self):
        safe_add = wrap(add)
        assert safe_add(2, 3) == (None, 5)

    def test_wrapped_callable_is_reusable(self):
        safe_divide = wrap(divide)
        assert safe_divide(6, 3) == (None, 2.0)
        assert isinstance(safe_divide(1, 0).error, ZeroDivisionError)
        assert safe_divide(9, 3) == (None, 3.0)

    def test_keyword_arguments_are_forwarded(self):
        assert wrap(charge)(5, currency="GBP") == (None, "5 GBP")

    def test_preserves_metadata(self):
        safe_add = wrap(add)
        assert safe_add.__name__ == "add"
        assert safe_add.__doc__ == "Add two numbers."
        assert safe_add.__wrapped__ is add

    def test_as_decorator(self):
        @wrap
        def parse_port(raw: str) -> int:
            return int(raw)

        assert parse_port("8080") == (None, 8080)
        OutcomeAssertions.assert_failure(parse_port("http"), ValueError)

    def test_sync_callable_is_not_marked_coroutine_function(self):
        assert not inspect.iscoroutinefunction(wrap(add))

    def test_async_callable_stays_coroutine_function(self):
        assert inspect.iscoroutinefunction(wrap(add_later))

    @pytest.mark.asyncio
    async def test_wrapped_async_callable(self):
        assert await wrap(add_later)(2, 3) == (None, 5)

    @pytest.mark.asyncio
    async def test_wrapped_async_callable_with_bad_arguments_is_awaitable(self):
        """A coroutine function that fails before creating a coroutine still resolves."""
        pending = wrap(add_later)(1)  # type: ignore[call-arg]
        assert is_pending(pending)
        OutcomeAssertions.assert_failure(await pending, TypeError)

    @pytest.mark.asyncio
    async def test_detection_runs_on_every_call(self):
        def sometimes_async(flag: bool):
            if flag:
                return add_later(1, 1)
            return 2

        safe = wrap(sometimes_async)
        assert safe(False) == (None, 2)
        assert await safe(True) == (None, 2)

    def test_double_wrap_nests_outcomes(self):
        inner = wrap(divide)
        outer = wrap(inner)
        error, value = outer(1, 0)
        assert error is None
        assert isinstance(value, Outcome)
        assert isinstance(value.error, ZeroDivisionError)

    def test_double_wrap_success(self):
        assert wrap(wrap(add))(2, 3) == (None, (None, 5))

    @pytest.mark.asyncio
    async def test_double_wrap_async(self):
        outcome = await wrap(wrap(add_later))(2, 3)
        assert outcome == (None, (None, 5))


class TestExecuteAsync:
    @pytest.mark.asyncio
    async def test_sync_callback_is_awaitable(self):
        assert await execute_async(add, 2, 3) == (None, 5)

    @pytest.mark.asyncio
    async def test_async_callback(self):
        assert await execute_async(add_later, 2, 3) == (None, 5)

    @pytest.mark.asyncio
    async def test_sync_failure(self):
        outcome = await execute_async(divide, 1, 0)
        assert isinstance(outcome.error, ZeroDivisionError)

    def test_returns_coroutine_without_running_callback(self):
        calls: list[int] = []

        coro = execute_async(lambda: calls.append(1))
        assert inspect.iscoroutine(coro)
        assert calls == []
        coro.close()


class TestWrapAsync:
    @pytest.mark.asyncio
    async def test_sync_callable(self):
        assert await wrap_async(add)(2, 3) == (None, 5)

    @pytest.mark.asyncio
    async def test_async_failure(self):
        async def boom() -> None:
            raise PaymentDeclined("nope", 1)

        outcome = await wrap_async(boom)()
        assert isinstance(outcome.error, PaymentDeclined)

    def test_always_coroutine_function(self):
        safe_add = wrap_async(add)
        assert inspect.iscoroutinefunction(safe_add)
        assert safe_add.__name__ == "add"
