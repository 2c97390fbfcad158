"""View backends: the KeyValueView contract and its implementations."""

from redis_map.stores.base import KeyValueView
from redis_map.stores.memory import InMemoryView
from redis_map.stores.redis import RedisMapView

__all__ = ["InMemoryView", "KeyValueView", "RedisMapView"]
