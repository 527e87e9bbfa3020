"""
Outcome — the two-slot (error, value) result of every safe call.

    ┌──────────────┐
    │   callback   │──returns v──────→ Outcome(None, v)
    │              │
    └──────┬───────┘
           │ raises e
           └──────────────────────→ Outcome(normalize_fault(e), None)

Exactly one slot is populated. Consumers branch on a single condition:

    error, user = execute(load_user, user_id)
    if error is not None:
        ...
    print(user.name)

Outcome is a NamedTuple rather than a dataclass so that it unpacks like a
plain pair, compares equal to one, and supports positional match/case:

    match execute(json.loads, raw):
        case Outcome(None, payload):
            ...
        case Outcome(error, _):
            ...
"""

from __future__ import annotations

from typing import Callable, Generic, NamedTuple, TypeVar

from safe_invoke.faults import normalize_fault

T = TypeVar("T")
R = TypeVar("R")


class Outcome(NamedTuple, Generic[T]):
    """
    Immutable (error, value) pair.

    - Success: error is None, value holds the callback's return value
      (which may itself be None for callbacks with nothing to return).
    - Failure: error holds the fault, value is None.
    """

    error: BaseException | None
    value: T | None

    # ──────────────────────── Factories ────────────────────────

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        """Create a successful Outcome wrapping the given value."""
        return cls(None, value)

    @classmethod
    def failure(cls, error: BaseException | None) -> Outcome[T]:
        """
        Create a failed Outcome.

        The error is normalized, so Outcome.failure(None) carries a
        SentinelFault rather than leaving both slots empty.
        """
        return cls(normalize_fault(error), None)

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        return self.error is None

    def is_failure(self) -> bool:
        return self.error is not None

    # ──────────────────────── Destructors ────────────────────────

    def either(
        self,
        on_success: Callable[[T | None], R],
        on_failure: Callable[[BaseException], R],
    ) -> R:
        """
        Apply one of two functions depending on which slot is populated.

            execute(fetch_user, 7).either(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda err: f"Error: {err}",
            )
        """
        if self.error is not None:
            return on_failure(self.error)
        return on_success(self.value)

    def get_or_else(self, default: T) -> T | None:
        """Extract the value, or return `default` on failure."""
        if self.error is not None:
            return default
        return self.value
