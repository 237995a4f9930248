"""Lifecycle callbacks emitted by the resilience patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

RetryCallback = Callable[[int, BaseException], None]
ErrorCallback = Callable[[BaseException], None]
EventCallback = Callable[[], None]


@dataclass(frozen=True)
class Hooks:
    """Optional observers for resilience pattern events.

    Every callback defaults to ``None``; set only the ones of interest.
    Instances are immutable, so emitting from several threads is safe.
    """

    on_retry: Optional[RetryCallback] = None
    on_circuit_open: Optional[EventCallback] = None
    on_circuit_close: Optional[EventCallback] = None
    on_circuit_half_open: Optional[EventCallback] = None
    on_rate_limited: Optional[EventCallback] = None
    on_bulkhead_full: Optional[EventCallback] = None
    on_bulkhead_acquired: Optional[EventCallback] = None
    on_bulkhead_released: Optional[EventCallback] = None
    on_timeout: Optional[EventCallback] = None
    on_hedge_triggered: Optional[EventCallback] = None
    on_hedge_won: Optional[EventCallback] = None
    on_fallback_used: Optional[ErrorCallback] = None

    @staticmethod
    def _fire(callback: Optional[Callable[..., None]], *args: object) -> None:
        if callback is not None:
            callback(*args)

    def emit_retry(self, attempt: int, err: BaseException) -> None:
        """Report that attempt number ``attempt`` failed with ``err``."""
        self._fire(self.on_retry, attempt, err)

    def emit_circuit_open(self) -> None:
        """Report that the circuit breaker opened."""
        self._fire(self.on_circuit_open)

    def emit_circuit_close(self) -> None:
        """Report that the circuit breaker closed."""
        self._fire(self.on_circuit_close)

    def emit_circuit_half_open(self) -> None:
        """Report that the circuit breaker moved to half-open."""
        self._fire(self.on_circuit_half_open)

    def emit_rate_limited(self) -> None:
        """Report that a call was rejected by the rate limiter."""
        self._fire(self.on_rate_limited)

    def emit_bulkhead_full(self) -> None:
        """Report that a call was rejected by a full bulkhead."""
        self._fire(self.on_bulkhead_full)

    def emit_bulkhead_acquired(self) -> None:
        """Report that a bulkhead slot was taken."""
        self._fire(self.on_bulkhead_acquired)

    def emit_bulkhead_released(self) -> None:
        """Report that a bulkhead slot was given back."""
        self._fire(self.on_bulkhead_released)

    def emit_timeout(self) -> None:
        """Report that a call timed out."""
        self._fire(self.on_timeout)

    def emit_hedge_triggered(self) -> None:
        """Report that a hedged second attempt was started."""
        self._fire(self.on_hedge_triggered)

    def emit_hedge_won(self) -> None:
        """Report that the hedged attempt finished first."""
        self._fire(self.on_hedge_won)

    def emit_fallback_used(self, err: BaseException) -> None:
        """Report that a fallback replaced the failure ``err``."""
        self._fire(self.on_fallback_used, err)