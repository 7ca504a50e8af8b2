"""Hash commands."""

from __future__ import annotations

from typing import Any

from .command import Command, Commander, ReplyKind, append_args


class HashCommands(Commander):
    """Commands on hash values."""

    def hdel(self, key: str, *args: str) -> Command:
        return self._run(ReplyKind.INT, "hdel", key, *args)

    def hexists(self, key: str, field: str) -> Command:
        return self._run(ReplyKind.BOOL, "hexists", key, field)

    def hget(self, key: str, field: str) -> Command:
        return self._run(ReplyKind.STRING, "hget", key, field)

    def hgetall(self, key: str) -> Command:
        return self._run(ReplyKind.MAP_STRING_STRING, "hgetall", key)

    def hincrby(self, key: str, field: str, incr: int) -> Command:
        return self._run(ReplyKind.INT, "hincrby", key, field, incr)

    def hincrbyfloat(self, key: str, field: str, incr: float) -> Command:
        return self._run(ReplyKind.FLOAT, "hincrbyfloat", key, field, incr)

    def hkeys(self, key: str) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "hkeys", key)

    def hlen(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "hlen", key)

    def hmget(self, key: str, *args: str) -> Command:
        """Values of the given fields; missing fields come back as nil."""
        return self._run(ReplyKind.SLICE, "hmget", key, *args)

    def hset(self, key: str, *args: Any) -> Command:
        """HSET from pairs, a flat list, a mapping or a tagged dataclass."""
        return self._run(ReplyKind.INT, *append_args(["hset", key], args))

    def hmset(self, key: str, *args: Any) -> Command:
        """The older form of :meth:`hset`, kept for old servers."""
        return self._run(ReplyKind.BOOL, *append_args(["hmset", key], args))

    def hsetnx(self, key: str, field: str, value: Any) -> Command:
        return self._run(ReplyKind.BOOL, "hsetnx", key, field, value)

    def hvals(self, key: str) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "hvals", key)

    def hrandfield(self, key: str, count: int) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "hrandfield", key, count)

    def hrandfield_with_values(self, key: str, count: int) -> Command:
        return self._run(
            ReplyKind.KEY_VALUE_SLICE, "hrandfield", key, count, "withvalues"
        )

    def hscan(self, key: str, cursor: int, match: str = "", count: int = 0) -> Command:
        args: list[Any] = ["hscan", key, cursor]
        if match:
            args += ["match", match]
        if count > 0:
            args += ["count", count]
        return self._run(ReplyKind.SCAN, *args)