"""
Safe-invoke — the one primitive behind execute, wrap and their async forms.

    call() ──raises e──────────────────────────→ Outcome(fault(e), None)
      │
      └─returns v ── awaitable? ──no──────────→ Outcome(None, v)
                          │
                          yes → coroutine: await v ──resolves r──→ Outcome(None, r)
                                                   └─raises e───→ Outcome(fault(e), None)

Pending detection runs only after call() returned without raising, so a
callback that raises before producing an awaitable always takes the
synchronous failure path, whatever it was meant to be.

The awaitable branch never blocks: safe_invoke hands back an unstarted
coroutine immediately and the Outcome materializes on the event loop when
the caller awaits it. Awaiting that coroutine never raises an Exception;
rejection is converted into a failed Outcome.

Only Exception subclasses are captured. KeyboardInterrupt, SystemExit and
asyncio.CancelledError keep propagating so interrupts and task
cancellation still work around a safe call.
"""

from __future__ import annotations

import contextlib
import inspect
from typing import Any, Awaitable, Callable, Literal, TypeAlias, TypeVar

import structlog

from safe_invoke.config import get_settings
from safe_invoke.outcome import Outcome

T = TypeVar("T")

Mode: TypeAlias = Literal["sync", "async"]


def is_pending(value: object) -> bool:
    """True when `value` can be awaited (coroutine, Future, Task, any __await__)."""
    return inspect.isawaitable(value)


def safe_invoke(call: Callable[[], Any]) -> Outcome[Any] | Awaitable[Outcome[Any]]:
    """
    Invoke a zero-argument callable and normalize its outcome.

    Returns an Outcome when `call` completes synchronously (by returning or
    raising) and a coroutine resolving to an Outcome when `call` returns an
    awaitable.
    """
    try:
        result = call()
    except Exception as e:
        return _capture(e, "sync")

    if is_pending(result):
        return _settle(result)
    return Outcome(None, result)


async def settle_async(call: Callable[[], Any]) -> Outcome[Any]:
    """
    Invoke `call` and always resolve to an Outcome, even for plain values.

    Awaits the callback's result only when it is pending.
    """
    outcome = safe_invoke(call)
    if isinstance(outcome, Outcome):
        return outcome
    return await outcome


async def _settle(pending: Awaitable[T]) -> Outcome[T]:
    try:
        value = await pending
    except Exception as e:
        return _capture(e, "async")
    return Outcome(None, value)


def _capture(error: BaseException | None, mode: Mode) -> Outcome[Any]:
    outcome: Outcome[Any] = Outcome.failure(error)
    _report(outcome.error, mode)
    return outcome


def _report(fault: BaseException | None, mode: Mode) -> None:
    # Logging must never turn a captured fault into a raise.
    with contextlib.suppress(Exception):
        if not get_settings().log_faults:
            return
        structlog.get_logger().debug(
            "safe_invoke.fault_captured",
            mode=mode,
            fault_type=type(fault).__name__,
            fault=str(fault),
        )
