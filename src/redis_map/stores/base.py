"""KeyValueView protocol — a namespaced string map backed by a key-value store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from types import TracebackType
from typing import Any


class KeyValueView(ABC):
    """Abstract base for every namespaced view.

    A view exposes the keys of one *namespace* (``"sessions"``, ``"cache:v2"``)
    as a map of ``str`` to ``str``.  The store holds the full key
    ``"<namespace>:<key>"``; callers only ever see the part after the colon.
    Views keep no local state, so every call reads or writes the store.

    The abstract methods are the whole contract.  The dunder methods below
    are plain aliases so a view can be used with ``len()``, ``in``,
    ``for`` and ``with``.
    """

    @property
    @abstractmethod
    def namespace(self) -> str:
        """The prefix shared by every key in this view."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of keys in the namespace."""
        ...

    @abstractmethod
    def is_empty(self) -> bool:
        """Return ``True`` if the namespace holds no keys."""
        ...

    @abstractmethod
    def contains_key(self, key: str) -> bool:
        """Return ``True`` if *key* exists in the namespace."""
        ...

    @abstractmethod
    def contains_value(self, value: Any) -> bool:
        """Return ``True`` if some key in the namespace maps to exactly *value*."""
        ...

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or ``None`` if absent."""
        ...

    @abstractmethod
    def put(self, key: str, value: str) -> Any:
        """Create or overwrite *key*.

        Returns the store's acknowledgement, **not** the previous value.
        """
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*.  Always returns ``None``; no-op if the key is absent."""
        ...

    @abstractmethod
    def put_all(self, mapping: Mapping[str, str]) -> None:
        """``put`` every entry of *mapping* in iteration order.  Not atomic."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Delete every key in the namespace, one at a time.  Not atomic."""
        ...

    @abstractmethod
    def key_set(self) -> set[str]:
        """Return all logical keys in the namespace."""
        ...

    @abstractmethod
    def values(self) -> set[str]:
        """Return the distinct values in the namespace.

        Equal values held by different keys collapse into one element.
        Backends that list keys before fetching values may include ``None``
        for a key deleted in between.
        """
        ...

    @abstractmethod
    def entry_set(self) -> set[tuple[str, str]]:
        """Return all ``(key, value)`` pairs in the namespace.

        As with :meth:`values`, a key deleted during enumeration may appear
        as ``(key, None)``.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the underlying connection.  Safe to call more than once."""
        ...

    # ── mapping sugar ────────────────────────────────────────

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        return iter(self.key_set())

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: str) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def __enter__(self) -> KeyValueView:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r})"
