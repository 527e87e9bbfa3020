"""
Test assertions for Outcome values.

Provides expressive assert methods that produce clear failure messages:

    from safe_invoke import OutcomeAssertions

    def test_parse_config():
        outcome = execute(json.loads, '{"debug": true}')
        config = OutcomeAssertions.assert_success(outcome)
        assert config["debug"] is True

    def test_parse_garbage():
        outcome = execute(json.loads, "garbage")
        OutcomeAssertions.assert_failure(outcome, json.JSONDecodeError)
"""

from __future__ import annotations

from typing import Any, TypeVar

from safe_invoke.faults import SentinelFault
from safe_invoke.outcome import Outcome

T = TypeVar("T")


def _describe(error: BaseException) -> str:
    return f"{type(error).__name__}: {str(error)!r}"


class OutcomeAssertions:
    """Expressive test assertions for Outcome values."""

    @staticmethod
    def assert_success(outcome: Outcome[T], message: str = "") -> T | None:
        """
        Assert the Outcome is a success and return its value.

            value = OutcomeAssertions.assert_success(outcome)
        """
        context = f" — {message}" if message else ""
        assert isinstance(outcome, Outcome), f"Expected an Outcome but got {outcome!r}{context}"
        assert outcome.error is None, (
            f"Expected Success but got Failure({_describe(outcome.error)}){context}"
        )
        return outcome.value

    @staticmethod
    def assert_failure(
        outcome: Outcome[T],
        expected_type: type[BaseException] | None = None,
        message: str = "",
    ) -> BaseException:
        """
        Assert the Outcome is a failure, optionally checking the fault type.

            error = OutcomeAssertions.assert_failure(outcome, KeyError)
        """
        context = f" — {message}" if message else ""
        assert isinstance(outcome, Outcome), f"Expected an Outcome but got {outcome!r}{context}"
        assert outcome.error is not None, (
            f"Expected Failure but got Success({outcome.value!r}){context}"
        )
        assert outcome.value is None, (
            f"Failure must not carry a value, got {outcome.value!r}{context}"
        )
        if expected_type is not None:
            assert isinstance(outcome.error, expected_type), (
                f"Expected fault of type {expected_type.__name__} "
                f"but got {_describe(outcome.error)}{context}"
            )
        return outcome.error

    @staticmethod
    def assert_success_value(outcome: Outcome[T], expected_value: Any) -> None:
        """Assert the Outcome is a success with the specific value."""
        value = OutcomeAssertions.assert_success(outcome)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_sentinel_fault(outcome: Outcome[T]) -> None:
        """Assert the Outcome failed with a SentinelFault (the failure value was None)."""
        OutcomeAssertions.assert_failure(outcome, SentinelFault)
