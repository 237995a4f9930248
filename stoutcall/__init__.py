"""Resilience building blocks: hooks, ordered middleware, hedging, health reporting and a TTL cache."""

__version__ = "0.1.0"

__all__ = ["cache", "hedge", "health", "hooks", "middleware", "order"]