"""Test doubles shared across the suite."""

from __future__ import annotations

import re

import redis


def _glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a Redis glob (``*``, ``?``, ``[...]``, ``\\`` escapes) to a regex."""
    out = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\" and i + 1 < len(pattern):
            out.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if ch == "*":
            out.append(".*")
        elif ch == "?":
            out.append(".")
        elif ch == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                out.append(re.escape(ch))
            else:
                out.append("[" + pattern[i + 1 : end] + "]")
                i = end
        else:
            out.append(re.escape(ch))
        i += 1
    return re.compile("".join(out) + r"\Z", re.DOTALL)


class FakeRedis:
    """In-process stand-in for ``redis.Redis(decode_responses=True)``.

    Supports the handful of commands the views issue and records each call
    in ``commands`` so tests can count round trips.
    """

    def __init__(self, reachable: bool = True) -> None:
        self.data: dict[str, str] = {}
        self.commands: list[str] = []
        self.reachable = reachable
        self.closed = False

    def _call(self, name: str) -> None:
        if not self.reachable:
            raise redis.exceptions.ConnectionError("Error 111 connecting to localhost:6379.")
        self.commands.append(name)

    def ping(self) -> bool:
        self._call("PING")
        return True

    def get(self, name: str) -> str | None:
        self._call("GET")
        return self.data.get(name)

    def set(self, name: str, value: str) -> bool:
        self._call("SET")
        self.data[name] = value
        return True

    def delete(self, *names: str) -> int:
        self._call("DEL")
        return sum(self.data.pop(n, None) is not None for n in names)

    def exists(self, *names: str) -> int:
        self._call("EXISTS")
        return sum(n in self.data for n in names)

    def keys(self, pattern: str = "*") -> list[str]:
        self._call("KEYS")
        regex = _glob_to_regex(pattern)
        return [k for k in self.data if regex.match(k)]

    def close(self) -> None:
        self.closed = True
