"""Set commands."""

from __future__ import annotations

from typing import Any

from .command import Command, Commander, ReplyKind, append_args


class SetCommands(Commander):
    """Commands on set values."""

    def sadd(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT, *append_args(["sadd", key], args))

    def scard(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "scard", key)

    def sdiff(self, *args: str) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "sdiff", *args)

    def sdiffstore(self, destination: str, *args: str) -> Command:
        return self._run(ReplyKind.INT, "sdiffstore", destination, *args)

    def sinter(self, *args: str) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "sinter", *args)

    def sintercard(self, limit: int, *args: str) -> Command:
        return self._run(
            ReplyKind.INT, "sintercard", len(args), *args, "limit", limit
        )

    def sinterstore(self, destination: str, *args: str) -> Command:
        return self._run(ReplyKind.INT, "sinterstore", destination, *args)

    def sismember(self, key: str, member: Any) -> Command:
        return self._run(ReplyKind.BOOL, "sismember", key, member)

    def smismember(self, key: str, *args: Any) -> Command:
        """SMISMEMBER key member [member ...]."""
        return self._run(ReplyKind.BOOL_SLICE, *append_args(["smismember", key], args))

    def smembers(self, key: str) -> Command:
        """SMEMBERS with the reply as a list."""
        return self._run(ReplyKind.STRING_SLICE, "smembers", key)

    def smembers_map(self, key: str) -> Command:
        """SMEMBERS with the reply as a set-like mapping."""
        return self._run(ReplyKind.STRING_STRUCT_MAP, "smembers", key)

    def smove(self, source: str, destination: str, member: Any) -> Command:
        return self._run(ReplyKind.BOOL, "smove", source, destination, member)

    def spop(self, key: str) -> Command:
        return self._run(ReplyKind.STRING, "spop", key)

    def spop_n(self, key: str, count: int) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "spop", key, count)

    def srandmember(self, key: str) -> Command:
        return self._run(ReplyKind.STRING, "srandmember", key)

    def srandmember_n(self, key: str, count: int) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "srandmember", key, count)

    def srem(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT, *append_args(["srem", key], args))

    def sunion(self, *args: str) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "sunion", *args)

    def sunionstore(self, destination: str, *args: str) -> Command:
        return self._run(ReplyKind.INT, "sunionstore", destination, *args)

    def sscan(self, key: str, cursor: int, match: str = "", count: int = 0) -> Command:
        args: list[Any] = ["sscan", key, cursor]
        if match:
            args += ["match", match]
        if count > 0:
            args += ["count", count]
        return self._run(ReplyKind.SCAN, *args)