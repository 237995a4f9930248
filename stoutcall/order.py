"""Priority-based ordering of resilience middlewares."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List

from stoutcall.middleware import Middleware


class Priority(IntEnum):
    """Position of a pattern in the chain; lower values wrap the others."""

    FALLBACK = 0
    TIMEOUT = 1
    CIRCUIT_BREAKER = 2
    RATE_LIMITER = 3
    BULKHEAD = 4
    RETRY = 5
    HEDGE = 6


@dataclass(frozen=True)
class PatternEntry:
    """A middleware together with its name and ordering priority."""

    middleware: Middleware
    name: str
    priority: int


def sort_patterns(entries: Iterable[PatternEntry]) -> List[Middleware]:
    """Return the middlewares ordered by priority, outermost first.

    The sort is stable, so entries of equal priority keep their order.
    The input is left untouched.
    """
    return [entry.middleware for entry in sorted(entries, key=lambda e: e.priority)]