"""
Fault normalization — every failure becomes a non-None fault object.

The fault slot of an Outcome is either None (success) or an inspectable
object. The only value that cannot live in that slot is None itself, so
the normalizer swaps it for a SentinelFault and passes everything else
through untouched. Identity matters: callers narrow on their own
exception classes with isinstance / except-style checks, so the original
object must come back exactly as it was raised.

    >>> normalize_fault(None)
    SentinelFault('null')
    >>> err = ValueError("bad")
    >>> normalize_fault(err) is err
    True
"""

from __future__ import annotations

from typing import overload


class SentinelFault(Exception):
    """
    Fault substituted when the failure value was None.

    Carries no state beyond its class and the fixed message "null".
    Check for it with isinstance rather than by inspecting fields.
    """

    def __init__(self) -> None:
        super().__init__("null")


@overload
def normalize_fault(error: None) -> SentinelFault: ...


@overload
def normalize_fault(error: BaseException) -> BaseException: ...


def normalize_fault(error: BaseException | None) -> BaseException:
    """Return a non-None fault: a new SentinelFault for None, else `error` itself."""
    if error is None:
        return SentinelFault()
    return error
