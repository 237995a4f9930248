"""Policies that compose resilience patterns and report their health."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Iterable, List, Optional, Protocol, runtime_checkable

from stoutcall.middleware import chain
from stoutcall.order import PatternEntry, sort_patterns


class Criticality(IntEnum):
    """How an unhealthy pattern affects readiness."""

    NONE = 0
    DEGRADED = 1
    CRITICAL = 2

    @classmethod
    def _missing_(cls, value: object) -> "Criticality":
        return cls.NONE

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class PolicyStatus:
    """A snapshot of a policy's health, including its dependencies."""

    name: str
    state: str = "healthy"
    criticality: Criticality = Criticality.NONE
    healthy: bool = True
    dependencies: List["PolicyStatus"] = field(default_factory=list)


@runtime_checkable
class HealthReporter(Protocol):
    """Anything with a name that can report a :class:`PolicyStatus`."""

    name: str

    def health_status(self) -> PolicyStatus:
        ...


class _CircuitBreakerView(Protocol):
    state: str


class _RateLimiterView(Protocol):
    saturated: bool


class _BulkheadView(Protocol):
    full: bool


class Policy:
    """A named chain of resilience patterns around a call.

    Pattern entries are ordered by priority, lowest outermost. The optional
    circuit breaker, rate limiter and bulkhead are consulted only for health
    reporting: a breaker exposes ``state`` (``"closed"``, ``"open"`` or
    ``"half_open"``), a rate limiter ``saturated`` and a bulkhead ``full``.
    """

    def __init__(
        self,
        name: str,
        *entries: PatternEntry,
        circuit_breaker: Optional[_CircuitBreakerView] = None,
        rate_limiter: Optional[_RateLimiterView] = None,
        bulkhead: Optional[_BulkheadView] = None,
        depends_on: Iterable[HealthReporter] = (),
    ) -> None:
        for entry in entries:
            if not isinstance(entry, PatternEntry):
                raise TypeError(f"expected PatternEntry, got {type(entry).__name__}")
        self.name = name
        self.entries = tuple(entries)
        self.circuit_breaker = circuit_breaker
        self.rate_limiter = rate_limiter
        self.bulkhead = bulkhead
        self.dependencies = tuple(depends_on)
        self._wrap = chain(*sort_patterns(self.entries))

    async def call(self, fn: Callable[[], Any]) -> Any:
        """Run ``fn`` through the composed patterns and return its result."""
        outcome = self._wrap(fn)()
        if inspect.isawaitable(outcome):
            return await outcome
        return outcome

    def health_status(self) -> PolicyStatus:
        """Derive the current health from the stateful patterns and dependencies."""
        state = "healthy"
        healthy = True
        criticality = Criticality.NONE

        if self.circuit_breaker is not None:
            breaker_state = self.circuit_breaker.state
            if breaker_state == "open":
                healthy = False
                criticality = Criticality.CRITICAL
                state = "circuit_open"
            elif breaker_state == "half_open":
                state = "circuit_half_open"

        if self.rate_limiter is not None and self.rate_limiter.saturated:
            criticality = max(criticality, Criticality.DEGRADED)
            if healthy:
                state = "rate_limited"

        if self.bulkhead is not None and self.bulkhead.full:
            criticality = max(criticality, Criticality.DEGRADED)
            if healthy and state == "healthy":
                state = "bulkhead_full"

        dependencies = []
        for dependency in self.dependencies:
            dep_status = dependency.health_status()
            dependencies.append(dep_status)
            if dep_status.criticality == Criticality.CRITICAL and not dep_status.healthy:
                criticality = max(criticality, Criticality.DEGRADED)

        return PolicyStatus(
            name=self.name,
            state=state,
            criticality=criticality,
            healthy=healthy,
            dependencies=dependencies,
        )