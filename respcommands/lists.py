"""List commands."""

from __future__ import annotations

import dataclasses
import datetime
from typing import Any

from .command import Command, Commander, ReplyKind, append_args, format_sec


@dataclasses.dataclass
class LPosArgs:
    """Optional RANK and MAXLEN arguments of LPOS; zero leaves them out."""

    rank: int = 0
    max_len: int = 0

    def _args(self) -> list[Any]:
        args: list[Any] = []
        if self.rank != 0:
            args += ["rank", self.rank]
        if self.max_len != 0:
            args += ["maxlen", self.max_len]
        return args


class ListCommands(Commander):
    """Commands on list values."""

    def blpop(self, timeout: datetime.timedelta, *args: str) -> Command:
        return self._run(
            ReplyKind.STRING_SLICE,
            "blpop",
            *args,
            format_sec(timeout),
            read_timeout=timeout,
        )

    def blmpop(
        self, timeout: datetime.timedelta, direction: str, count: int, *args: str
    ) -> Command:
        """Blocking LMPOP over ``args`` keys; ``direction`` is left or right."""
        return self._run(
            ReplyKind.KEY_VALUES,
            "blmpop",
            format_sec(timeout),
            len(args),
            *args,
            direction.lower(),
            "count",
            count,
            read_timeout=timeout,
        )

    def brpop(self, timeout: datetime.timedelta, *args: str) -> Command:
        return self._run(
            ReplyKind.STRING_SLICE,
            "brpop",
            *args,
            format_sec(timeout),
            read_timeout=timeout,
        )

    def brpoplpush(
        self, source: str, destination: str, timeout: datetime.timedelta
    ) -> Command:
        return self._run(
            ReplyKind.STRING,
            "brpoplpush",
            source,
            destination,
            format_sec(timeout),
            read_timeout=timeout,
        )

    def lindex(self, key: str, index: int) -> Command:
        return self._run(ReplyKind.STRING, "lindex", key, index)

    def linsert(self, key: str, op: str, pivot: Any, value: Any) -> Command:
        return self._run(ReplyKind.INT, "linsert", key, op, pivot, value)

    def linsert_before(self, key: str, pivot: Any, value: Any) -> Command:
        return self._run(ReplyKind.INT, "linsert", key, "before", pivot, value)

    def linsert_after(self, key: str, pivot: Any, value: Any) -> Command:
        return self._run(ReplyKind.INT, "linsert", key, "after", pivot, value)

    def llen(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "llen", key)

    def lmpop(self, direction: str, count: int, *args: str) -> Command:
        """Pop up to ``count`` elements from the first non-empty list of ``args``."""
        return self._run(
            ReplyKind.KEY_VALUES,
            "lmpop",
            len(args),
            *args,
            direction.lower(),
            "count",
            count,
        )

    def lpop(self, key: str) -> Command:
        return self._run(ReplyKind.STRING, "lpop", key)

    def lpop_count(self, key: str, count: int) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "lpop", key, count)

    def lpos(self, key: str, value: str, args: LPosArgs | None = None) -> Command:
        opts = args if args is not None else LPosArgs()
        return self._run(ReplyKind.INT, "lpos", key, value, *opts._args())

    def lpos_count(
        self, key: str, value: str, count: int, args: LPosArgs | None = None
    ) -> Command:
        opts = args if args is not None else LPosArgs()
        return self._run(
            ReplyKind.INT_SLICE, "lpos", key, value, "count", count, *opts._args()
        )

    def lpush(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT, *append_args(["lpush", key], args))

    def lpushx(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT, *append_args(["lpushx", key], args))

    def lrange(self, key: str, start: int, stop: int) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "lrange", key, start, stop)

    def lrem(self, key: str, count: int, value: Any) -> Command:
        return self._run(ReplyKind.INT, "lrem", key, count, value)

    def lset(self, key: str, index: int, value: Any) -> Command:
        return self._run(ReplyKind.STATUS, "lset", key, index, value)

    def ltrim(self, key: str, start: int, stop: int) -> Command:
        return self._run(ReplyKind.STATUS, "ltrim", key, start, stop)

    def rpop(self, key: str) -> Command:
        return self._run(ReplyKind.STRING, "rpop", key)

    def rpop_count(self, key: str, count: int) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "rpop", key, count)

    def rpoplpush(self, source: str, destination: str) -> Command:
        return self._run(ReplyKind.STRING, "rpoplpush", source, destination)

    def rpush(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT, *append_args(["rpush", key], args))

    def rpushx(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT, *append_args(["rpushx", key], args))

    def lmove(self, source: str, destination: str, srcpos: str, destpos: str) -> Command:
        return self._run(
            ReplyKind.STRING, "lmove", source, destination, srcpos, destpos
        )

    def blmove(
        self,
        source: str,
        destination: str,
        srcpos: str,
        destpos: str,
        timeout: datetime.timedelta,
    ) -> Command:
        return self._run(
            ReplyKind.STRING,
            "blmove",
            source,
            destination,
            srcpos,
            destpos,
            format_sec(timeout),
            read_timeout=timeout,
        )