"""InMemoryView — zero-config, dict-backed view for development and testing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from redis_map._internal.keys import SEPARATOR, check_value, full_key, logical_key
from redis_map.exceptions import ViewClosedError
from redis_map.stores.base import KeyValueView


class InMemoryView(KeyValueView):
    """In-memory view over a plain dict of full keys.  Data is lost on process exit.

    Views built on the same *data* dict behave like views on one store:
    each sees only its own namespace.  Return values follow
    :class:`~redis_map.stores.RedisMapView` (``put`` returns ``True``,
    ``remove`` returns ``None``).
    """

    def __init__(self, namespace: str, data: dict[str, str] | None = None) -> None:
        self._namespace = namespace
        self._prefix = namespace + SEPARATOR
        self._data: dict[str, str] | None = data if data is not None else {}

    def _store(self, operation: str) -> dict[str, str]:
        if self._data is None:
            raise ViewClosedError(self._namespace, operation)
        return self._data

    def _full_keys(self, operation: str) -> list[str]:
        return [k for k in self._store(operation) if k.startswith(self._prefix)]

    def close(self) -> None:
        self._data = None

    @property
    def namespace(self) -> str:
        return self._namespace

    def size(self) -> int:
        return len(self._full_keys("size"))

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains_key(self, key: str) -> bool:
        return full_key(self._namespace, key) in self._store("contains_key")

    def contains_value(self, value: Any) -> bool:
        data = self._store("contains_value")
        return any(data[k] == value for k in self._full_keys("contains_value"))

    def get(self, key: str) -> str | None:
        return self._store("get").get(full_key(self._namespace, key))

    def put(self, key: str, value: str) -> Any:
        self._store("put")[full_key(self._namespace, key)] = check_value(value)
        return True

    def remove(self, key: str) -> None:
        self._store("remove").pop(full_key(self._namespace, key), None)
        return None

    def put_all(self, mapping: Mapping[str, str]) -> None:
        for key, value in mapping.items():
            self.put(key, value)

    def clear(self) -> None:
        data = self._store("clear")
        for k in self._full_keys("clear"):
            del data[k]

    def key_set(self) -> set[str]:
        return {logical_key(self._namespace, k) for k in self._full_keys("key_set")}

    def values(self) -> set[str]:
        data = self._store("values")
        return {data[k] for k in self._full_keys("values")}

    def entry_set(self) -> set[tuple[str, str]]:
        data = self._store("entry_set")
        return {(logical_key(self._namespace, k), data[k]) for k in self._full_keys("entry_set")}
