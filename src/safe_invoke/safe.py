"""
Public entry points — execute a callback now, or wrap it for later.

                    │ zero-arg thunk        │ arbitrary arguments
    ────────────────┼───────────────────────┼──────────────────────────────
    run now         │ execute(fn)           │ execute(fn, *args, **kwargs)
    run later       │ wrap(fn)()            │ wrap(fn)(*args, **kwargs)

All of them reduce to safe_invoke, which detects per call whether the
callback produced a value or an awaitable:

    error, config = execute(json.loads, raw)               # Outcome
    error, user = await execute(fetch_user, user_id)       # awaitable Outcome

    @wrap
    async def fetch_user(user_id: int) -> User: ...

    error, user = await fetch_user(7)

execute_async / wrap_async always hand back an awaitable, whether or not
the callback itself is asynchronous. Useful when the caller is already a
coroutine and does not want to branch on the callback's nature.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar, overload

from safe_invoke.invoke import safe_invoke, settle_async
from safe_invoke.outcome import Outcome

P = ParamSpec("P")
T = TypeVar("T")


# ──────────────────────── Run now ────────────────────────


@overload
def execute(
    callback: Callable[P, Awaitable[T]], *args: P.args, **kwargs: P.kwargs
) -> Awaitable[Outcome[T]]: ...


@overload
def execute(callback: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Outcome[T]: ...


def execute(callback: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Call `callback(*args, **kwargs)` and return its outcome instead of raising.

    Returns an Outcome for synchronous results and an awaitable Outcome when
    the callback returns something awaitable.

        >>> execute(int, "42")
        Outcome(error=None, value=42)
        >>> execute(int, "x").error
        ValueError("invalid literal for int() with base 10: 'x'")
    """
    return safe_invoke(lambda: callback(*args, **kwargs))


async def execute_async(
    callback: Callable[P, Awaitable[T] | T], *args: P.args, **kwargs: P.kwargs
) -> Outcome[T]:
    """Like execute, but always awaitable, even for a synchronous callback."""
    return await settle_async(lambda: callback(*args, **kwargs))


# ──────────────────────── Run later ────────────────────────


@overload
def wrap(callback: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Outcome[T]]]: ...


@overload
def wrap(callback: Callable[P, T]) -> Callable[P, Outcome[T]]: ...


def wrap(callback: Callable[..., Any]) -> Callable[..., Any]:
    """
    Return a callable that runs `callback` through execute on every call.

    Works as a decorator. The wrapper keeps the callback's name, docstring
    and __wrapped__. A coroutine function gets a coroutine-function wrapper
    that always resolves to an Outcome, even when the call fails before a
    coroutine exists (wrong arguments, for instance). Wrapping a wrapped
    callable nests: the outer Outcome's value is the inner Outcome.
    """
    if inspect.iscoroutinefunction(callback):
        return wrap_async(callback)

    @functools.wraps(callback)
    def safe_callback(*args: Any, **kwargs: Any) -> Any:
        return execute(callback, *args, **kwargs)

    return safe_callback


def wrap_async(
    callback: Callable[P, Awaitable[T] | T],
) -> Callable[P, Awaitable[Outcome[T]]]:
    """Like wrap, but the returned callable is always a coroutine function."""

    @functools.wraps(callback)
    async def safe_callback(*args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
        return await execute_async(callback, *args, **kwargs)

    return safe_callback
