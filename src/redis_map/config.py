"""Connection configuration for namespaced views."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ViewConfig(BaseModel):
    """Everything a :class:`~redis_map.stores.RedisMapView` needs to connect.

    All three options are required and no others are recognised.

    Attributes:
        host: Hostname or IP address of the Redis server
        port: TCP port of the Redis server
        namespace: Prefix applied to every key the view manages
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    host: str
    port: int
    namespace: str
