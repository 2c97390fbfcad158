"""Custom exceptions for the redis_map package.

Errors raised by the store client itself (``redis.exceptions.*``) are not
wrapped; they reach the caller unchanged.
"""

from __future__ import annotations


class RedisMapError(Exception):
    """Base exception for all redis_map errors."""


class ViewClosedError(RedisMapError):
    """Raised when an operation is attempted on a view that has been closed."""

    def __init__(self, namespace: str, operation: str) -> None:
        self.namespace = namespace
        self.operation = operation
        super().__init__(f"View for namespace '{namespace}' is closed; cannot run '{operation}'")
