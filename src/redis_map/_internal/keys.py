"""Full-key construction shared by every view backend."""

from __future__ import annotations

import re
from typing import Any

SEPARATOR = ":"

_GLOB_SPECIAL = re.compile(r"([\\*?\[\]])")


def full_key(namespace: str, key: Any) -> str:
    """Return ``"<namespace>:<key>"``.

    Raises:
        TypeError: If *key* is not a ``str``.
    """
    if not isinstance(key, str):
        raise TypeError(f"keys must be str, not {type(key).__name__}")
    return namespace + SEPARATOR + key


def logical_key(namespace: str, stored_key: str) -> str:
    """Strip the namespace and its separator from a key read back from the store."""
    return stored_key[len(namespace) + len(SEPARATOR) :]


def key_pattern(namespace: str) -> str:
    """Glob pattern matching every key of *namespace* and nothing else.

    The namespace is escaped so characters like ``*`` or ``[`` in it match
    literally; the trailing ``*`` covers any logical key.
    """
    return _GLOB_SPECIAL.sub(r"\\\1", namespace) + SEPARATOR + "*"


def check_value(value: Any) -> str:
    """Return *value* unchanged if it is a ``str``.

    Raises:
        TypeError: If *value* is not a ``str``.
    """
    if not isinstance(value, str):
        raise TypeError(f"values must be str, not {type(value).__name__}")
    return value
