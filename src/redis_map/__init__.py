"""redis_map — a Redis namespace exposed as a map of strings.

Every key goes to the server as ``"<namespace>:<key>"`` and comes back
without the prefix.  No caching, no retries: each call is a live round trip.
"""

from __future__ import annotations

from redis_map.config import ViewConfig
from redis_map.exceptions import RedisMapError, ViewClosedError
from redis_map.stores import InMemoryView, KeyValueView, RedisMapView


def open_view(config: ViewConfig) -> RedisMapView:
    """Connect a :class:`RedisMapView` described by *config*.

    Raises:
        redis.exceptions.ConnectionError: If the server is unreachable.
    """
    return RedisMapView.from_config(config)


__all__ = [
    "InMemoryView",
    "KeyValueView",
    "RedisMapError",
    "RedisMapView",
    "ViewClosedError",
    "ViewConfig",
    "open_view",
]
