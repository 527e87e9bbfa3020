"""
safe_invoke — exceptions in, (error, value) tuples out.

Calls a function, catches whatever it raises, and hands back an Outcome
pair instead. Works the same for plain functions and for coroutines:

    import json
    from safe_invoke import execute, wrap

    error, payload = execute(json.loads, '{"foo": "bar"}')
    if error is not None:
        ...

    safe_fetch = wrap(fetch_user)
    error, user = await safe_fetch(user_id)

Exactly one slot of an Outcome is populated. A fault is never None: a
None failure value is replaced by SentinelFault, every other fault is
handed back as the very object that was raised.
"""

from safe_invoke.faults import SentinelFault, normalize_fault
from safe_invoke.outcome import Outcome
from safe_invoke.invoke import is_pending, safe_invoke
from safe_invoke.safe import execute, execute_async, wrap, wrap_async
from safe_invoke.assertions import OutcomeAssertions

__all__ = [
    "Outcome",
    "SentinelFault",
    "normalize_fault",
    "is_pending",
    "safe_invoke",
    "execute",
    "execute_async",
    "wrap",
    "wrap_async",
    "OutcomeAssertions",
]

__version__ = "0.1.0"
