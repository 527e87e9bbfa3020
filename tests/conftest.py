"""
Shared test fixtures for the safe_invoke test suite.

Every test starts from pristine settings and the default structlog
configuration, so environment tweaks and configure_structlog() calls
cannot leak between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from safe_invoke.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture()
def log_faults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable fault logging for the duration of a test."""
    monkeypatch.setenv("SAFE_INVOKE_LOG_FAULTS", "true")
    get_settings.cache_clear()


class PaymentDeclined(Exception):
    """Custom fault carrying extra attributes, for pass-through identity checks."""

    def __init__(self, reason: str, amount: int) -> None:
        super().__init__(reason)
        self.reason = reason
        self.amount = amount
