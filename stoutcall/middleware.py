"""Composable call wrappers."""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Call = Callable[..., T]
Middleware = Callable[[Callable[..., Any]], Callable[..., Any]]


def chain(*middlewares: Middleware) -> Middleware:
    """Compose middlewares into one; the first given is the outermost.

    ``chain(a, b, c)(fn)`` is ``a(b(c(fn)))``. With no middlewares the
    result returns ``fn`` unchanged.
    """
    layers = tuple(middlewares)

    def composed(final: Callable[..., Any]) -> Callable[..., Any]:
        return reduce(lambda inner, mw: mw(inner), reversed(layers), final)

    return composed