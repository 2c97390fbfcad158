"""RedisMapView — a namespaced string map living in a Redis server, via redis-py."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

try:
    import redis
except ImportError as exc:
    raise ImportError(
        "RedisMapView requires the 'redis' package. Install it with: pip install redis-map"
    ) from exc

from redis_map._internal.keys import check_value, full_key, key_pattern, logical_key
from redis_map.exceptions import ViewClosedError
from redis_map.stores.base import KeyValueView

if TYPE_CHECKING:
    from redis_map.config import ViewConfig

logger = logging.getLogger(__name__)


class RedisMapView(KeyValueView):
    """Map of ``str`` to ``str`` stored under ``<namespace>:*`` in Redis.

    The connection is opened (and checked with ``PING``) by the constructor
    and belongs to the view until :meth:`close`.  Every method is one or
    more blocking round trips, issued one after another; nothing is cached,
    batched or retried, and errors raised by redis-py reach the caller
    unchanged.  The client is not locked, so callers sharing a view across
    threads must coordinate themselves.

    Parameters:
        host: Redis server hostname.
        port: Redis server port.
        namespace: Prefix for every key this view manages.
        client: Already-built client to use instead of connecting to
                ``host``/``port``.  The view takes ownership of it.
                Useful for testing.

    Raises:
        redis.exceptions.ConnectionError: If the server is unreachable.
    """

    def __init__(
        self,
        host: str,
        port: int,
        namespace: str,
        *,
        client: redis.Redis | None = None,
    ) -> None:
        self._namespace = namespace
        self._pattern = key_pattern(namespace)
        if client is None:
            client = redis.Redis(host=host, port=port, decode_responses=True)
        self._client: redis.Redis | None = client
        try:
            self._client.ping()
        except Exception:
            self._client.close()
            self._client = None
            raise
        logger.info("Connected to %s:%s for namespace '%s'", host, port, namespace)

    @classmethod
    def from_config(cls, config: ViewConfig) -> RedisMapView:
        """Connect using a validated :class:`~redis_map.config.ViewConfig`."""
        return cls(config.host, config.port, config.namespace)

    def _conn(self, operation: str) -> redis.Redis:
        if self._client is None:
            raise ViewClosedError(self._namespace, operation)
        return self._client

    def _full_keys(self, operation: str) -> list[str]:
        return list(self._conn(operation).keys(self._pattern))

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("Closed connection for namespace '%s'", self._namespace)

    @property
    def closed(self) -> bool:
        return self._client is None

    # ── KeyValueView protocol ────────────────────────────────

    @property
    def namespace(self) -> str:
        return self._namespace

    def size(self) -> int:
        return len(self._full_keys("size"))

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains_key(self, key: str) -> bool:
        conn = self._conn("contains_key")
        return conn.exists(full_key(self._namespace, key)) > 0

    def contains_value(self, value: Any) -> bool:
        conn = self._conn("contains_value")
        for stored_key in conn.keys(self._pattern):
            if conn.get(stored_key) == value:
                return True
        return False

    def get(self, key: str) -> str | None:
        conn = self._conn("get")
        value: str | None = conn.get(full_key(self._namespace, key))
        return value

    def put(self, key: str, value: str) -> Any:
        """Overwrite *key* with *value*.

        Returns whatever redis-py returns for ``SET`` (``True``), not the
        previous value.
        """
        conn = self._conn("put")
        return conn.set(full_key(self._namespace, key), check_value(value))

    def remove(self, key: str) -> None:
        """Delete *key*.  Returns ``None`` whether or not the key existed."""
        conn = self._conn("remove")
        conn.delete(full_key(self._namespace, key))
        return None

    def put_all(self, mapping: Mapping[str, str]) -> None:
        logger.debug("put_all: writing %d keys to '%s'", len(mapping), self._namespace)
        for key, value in mapping.items():
            self.put(key, value)

    def clear(self) -> None:
        conn = self._conn("clear")
        stored_keys = conn.keys(self._pattern)
        logger.debug("clear: deleting %d keys from '%s'", len(stored_keys), self._namespace)
        for stored_key in stored_keys:
            conn.delete(stored_key)

    def key_set(self) -> set[str]:
        return {logical_key(self._namespace, k) for k in self._full_keys("key_set")}

    def values(self) -> set[str]:
        """Return the distinct values in the namespace.

        One ``GET`` per key, after the key listing.  A key deleted in between
        contributes ``None``.
        """
        conn = self._conn("values")
        return {conn.get(k) for k in conn.keys(self._pattern)}

    def entry_set(self) -> set[tuple[str, str]]:
        """Return all ``(key, value)`` pairs.

        Same round trips and the same caveat about concurrent deletes as
        :meth:`values`: such a key shows up as ``(key, None)``.
        """
        conn = self._conn("entry_set")
        return {(logical_key(self._namespace, k), conn.get(k)) for k in conn.keys(self._pattern)}
