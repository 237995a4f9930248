"""Hedged requests: race a second attempt against a slow first one."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, List, Optional, TypeVar

from stoutcall.hooks import Hooks

T = TypeVar("T")


def _discard_outcome(task: "asyncio.Future[Any]") -> None:
    # Retrieve the outcome of an abandoned attempt so asyncio does not
    # complain about an exception that was never looked at.
    if not task.cancelled():
        task.exception()


async def _first_success(
    primary: "asyncio.Future[T]",
    hedge: "asyncio.Future[T]",
    hooks: Hooks,
) -> T:
    """Return the first successful result; if both fail, raise the first error."""
    pending = {primary, hedge}
    first_error: Optional[BaseException] = None
    while pending:
        done, pending = await asyncio.wait(
            pending, return_when=asyncio.FIRST_COMPLETED
        )
        for task in (primary, hedge):
            if task not in done:
                continue
            error = task.exception()
            if error is None:
                if task is hedge:
                    hooks.emit_hedge_won()
                return task.result()
            if first_error is None:
                first_error = error
    assert first_error is not None
    raise first_error


async def do_hedge(
    fn: Callable[[], Awaitable[T]],
    delay: float,
    hooks: Optional[Hooks] = None,
) -> T:
    """Run ``fn``; if it has not finished after ``delay`` seconds, run it again.

    The first successful attempt wins and the other is cancelled. If the
    first attempt finishes (successfully or not) before the delay, its
    outcome is returned without hedging. When both attempts fail, the error
    that arrived first is raised. Cancelling the caller cancels both attempts.
    """
    hooks = hooks if hooks is not None else Hooks()
    primary = asyncio.ensure_future(fn())
    attempts: List["asyncio.Future[T]"] = [primary]
    try:
        done, _ = await asyncio.wait({primary}, timeout=delay)
        if done:
            return primary.result()

        hooks.emit_hedge_triggered()
        hedge = asyncio.ensure_future(fn())
        attempts.append(hedge)
        return await _first_success(primary, hedge, hooks)
    finally:
        for attempt in attempts:
            if not attempt.done():
                attempt.cancel()
                attempt.add_done_callback(_discard_outcome)