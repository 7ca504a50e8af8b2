"""Sorted set commands."""

from __future__ import annotations

import dataclasses
import datetime
from typing import Any

from .command import Command, Commander, ReplyKind, append_args, format_sec


@dataclasses.dataclass
class Z:
    """A sorted set member with its score."""

    score: float = 0.0
    member: Any = None


@dataclasses.dataclass
class ZWithKey(Z):
    """A sorted set member together with the key it was popped from."""

    key: str = ""


@dataclasses.dataclass
class ZStore:
    """Keys, weights and aggregation for ZINTER and ZUNION and their STORE forms.

    ``aggregate`` may be ``"SUM"``, ``"MIN"`` or ``"MAX"``.
    """

    keys: list[str] = dataclasses.field(default_factory=list)
    weights: list[float] = dataclasses.field(default_factory=list)
    aggregate: str = ""

    def _args(self) -> list[Any]:
        args: list[Any] = list(self.keys)
        if self.weights:
            args += ["weights", *self.weights]
        if self.aggregate:
            args += ["aggregate", self.aggregate]
        return args


@dataclasses.dataclass
class ZAddArgs:
    """Options of ZADD. GT, LT and NX exclude each other; NX wins, then GT."""

    nx: bool = False
    xx: bool = False
    lt: bool = False
    gt: bool = False
    ch: bool = False
    members: list[Z] = dataclasses.field(default_factory=list)

    def _args(self, key: str, incr: bool) -> list[Any]:
        args: list[Any] = ["zadd", key]
        if self.nx:
            args.append("nx")
        else:
            if self.xx:
                args.append("xx")
            if self.gt:
                args.append("gt")
            elif self.lt:
                args.append("lt")
        if self.ch:
            args.append("ch")
        if incr:
            args.append("incr")
        for z in self.members:
            args += [z.score, z.member]
        return args


@dataclasses.dataclass
class ZRangeArgs:
    """Every option of ZRANGE.

    ``start`` and ``stop`` are indexes by default, scores with ``by_score``
    (``"(3"`` for an open bound) and lexical bounds with ``by_lex``.
    ``by_score`` and ``by_lex`` exclude each other.
    """

    key: str = ""
    start: Any = 0
    stop: Any = 0
    by_score: bool = False
    by_lex: bool = False
    rev: bool = False
    offset: int = 0
    count: int = 0

    def _args(self) -> list[Any]:
        if self.rev and (self.by_score or self.by_lex):
            args: list[Any] = [self.key, self.stop, self.start]
        else:
            args = [self.key, self.start, self.stop]
        if self.by_score:
            args.append("byscore")
        elif self.by_lex:
            args.append("bylex")
        if self.rev:
            args.append("rev")
        if self.offset != 0 or self.count != 0:
            args += ["limit", self.offset, self.count]
        return args


@dataclasses.dataclass
class ZRangeBy:
    """Bounds and limit of the ZRANGEBYSCORE and ZRANGEBYLEX families."""

    min: str = ""
    max: str = ""
    offset: int = 0
    count: int = 0

    def _limit(self) -> list[Any]:
        if self.offset != 0 or self.count != 0:
            return ["limit", self.offset, self.count]
        return []


def _single_count(command: str, key: str, counts: tuple[int, ...]) -> list[Any]:
    if len(counts) > 1:
        raise ValueError("too many arguments")
    return [command, key, *counts]


class SortedSetCommands(Commander):
    """Commands on sorted set values."""

    def bzpopmax(self, timeout: datetime.timedelta, *args: str) -> Command:
        """BZPOPMAX key [key ...] timeout."""
        return self._run(
            ReplyKind.Z_WITH_KEY,
            "bzpopmax",
            *args,
            format_sec(timeout),
            read_timeout=timeout,
        )

    def bzpopmin(self, timeout: datetime.timedelta, *args: str) -> Command:
        """BZPOPMIN key [key ...] timeout."""
        return self._run(
            ReplyKind.Z_WITH_KEY,
            "bzpopmin",
            *args,
            format_sec(timeout),
            read_timeout=timeout,
        )

    def bzmpop(
        self, timeout: datetime.timedelta, order: str, count: int, *args: str
    ) -> Command:
        """Blocking ZMPOP; a zero timeout blocks indefinitely."""
        return self._run(
            ReplyKind.Z_SLICE_WITH_KEY,
            "bzmpop",
            format_sec(timeout),
            len(args),
            *args,
            order.lower(),
            "count",
            count,
            read_timeout=timeout,
        )

    def zadd(self, key: str, *args: Z) -> Command:
        return self.zadd_args(key, ZAddArgs(members=list(args)))

    def zadd_lt(self, key: str, *args: Z) -> Command:
        return self.zadd_args(key, ZAddArgs(lt=True, members=list(args)))

    def zadd_gt(self, key: str, *args: Z) -> Command:
        return self.zadd_args(key, ZAddArgs(gt=True, members=list(args)))

    def zadd_nx(self, key: str, *args: Z) -> Command:
        return self.zadd_args(key, ZAddArgs(nx=True, members=list(args)))

    def zadd_xx(self, key: str, *args: Z) -> Command:
        return self.zadd_args(key, ZAddArgs(xx=True, members=list(args)))

    def zadd_args(self, key: str, args: ZAddArgs) -> Command:
        return self._run(ReplyKind.INT, *args._args(key, False))

    def zadd_args_incr(self, key: str, args: ZAddArgs) -> Command:
        return self._run(ReplyKind.FLOAT, *args._args(key, True))

    def zcard(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "zcard", key)

    def zcount(self, key: str, min_value: str, max_value: str) -> Command:
        return self._run(ReplyKind.INT, "zcount", key, min_value, max_value)

    def zlexcount(self, key: str, min_value: str, max_value: str) -> Command:
        return self._run(ReplyKind.INT, "zlexcount", key, min_value, max_value)

    def zincrby(self, key: str, increment: float, member: str) -> Command:
        return self._run(ReplyKind.FLOAT, "zincrby", key, increment, member)

    def zinter(self, store: ZStore) -> Command:
        return self._run(
            ReplyKind.STRING_SLICE,
            "zinter",
            len(store.keys),
            *store._args(),
            first_key_pos=2,
        )

    def zinter_with_scores(self, store: ZStore) -> Command:
        return self._run(
            ReplyKind.Z_SLICE,
            "zinter",
            len(store.keys),
            *store._args(),
            "withscores",
            first_key_pos=2,
        )

    def zintercard(self, limit: int, *args: str) -> Command:
        return self._run(ReplyKind.INT, "zintercard", len(args), *args, "limit", limit)

    def zinterstore(self, destination: str, store: ZStore) -> Command:
        return self._run(
            ReplyKind.INT,
            "zinterstore",
            destination,
            len(store.keys),
            *store._args(),
            first_key_pos=3,
        )

    def zmpop(self, order: str, count: int, *args: str) -> Command:
        """Pop from the first non-empty set; ``order`` is max or min."""
        return self._run(
            ReplyKind.Z_SLICE_WITH_KEY,
            "zmpop",
            len(args),
            *args,
            order.lower(),
            "count",
            count,
        )

    def zmscore(self, key: str, *args: str) -> Command:
        return self._run(ReplyKind.FLOAT_SLICE, "zmscore", key, *args)

    def zpopmax(self, key: str, *args: int) -> Command:
        """ZPOPMAX key [count]."""
        return self._run(ReplyKind.Z_SLICE, *_single_count("zpopmax", key, args))

    def zpopmin(self, key: str, *args: int) -> Command:
        """ZPOPMIN key [count]."""
        return self._run(ReplyKind.Z_SLICE, *_single_count("zpopmin", key, args))

    def zrange(self, key: str, start: int, stop: int) -> Command:
        return self.zrange_args(ZRangeArgs(key=key, start=start, stop=stop))

    def zrange_with_scores(self, key: str, start: int, stop: int) -> Command:
        return self.zrange_args_with_scores(ZRangeArgs(key=key, start=start, stop=stop))

    def _zrange_by(self, command: str, key: str, opt: ZRangeBy) -> Command:
        return self._run(
            ReplyKind.STRING_SLICE, command, key, opt.min, opt.max, *opt._limit()
        )

    def zrange_by_score(self, key: str, opt: ZRangeBy) -> Command:
        return self._zrange_by("zrangebyscore", key, opt)

    def zrange_by_lex(self, key: str, opt: ZRangeBy) -> Command:
        return self._zrange_by("zrangebylex", key, opt)

    def zrange_by_score_with_scores(self, key: str, opt: ZRangeBy) -> Command:
        return self._run(
            ReplyKind.Z_SLICE,
            "zrangebyscore",
            key,
            opt.min,
            opt.max,
            "withscores",
            *opt._limit(),
        )

    def zrange_args(self, args: ZRangeArgs) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "zrange", *args._args())

    def zrange_args_with_scores(self, args: ZRangeArgs) -> Command:
        return self._run(ReplyKind.Z_SLICE, "zrange", *args._args(), "withscores")

    def zrangestore(self, dst: str, args: ZRangeArgs) -> Command:
        return self._run(ReplyKind.INT, "zrangestore", dst, *args._args())

    def zrank(self, key: str, member: str) -> Command:
        return self._run(ReplyKind.INT, "zrank", key, member)

    def zrank_with_score(self, key: str, member: str) -> Command:
        """ZRANK with WITHSCORE; nil when the member or key is missing."""
        return self._run(ReplyKind.RANK_WITH_SCORE, "zrank", key, member, "withscore")

    def zrem(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT, *append_args(["zrem", key], args))

    def zremrangebyrank(self, key: str, start: int, stop: int) -> Command:
        return self._run(ReplyKind.INT, "zremrangebyrank", key, start, stop)

    def zremrangebyscore(self, key: str, min_value: str, max_value: str) -> Command:
        return self._run(ReplyKind.INT, "zremrangebyscore", key, min_value, max_value)

    def zremrangebylex(self, key: str, min_value: str, max_value: str) -> Command:
        return self._run(ReplyKind.INT, "zremrangebylex", key, min_value, max_value)

    def zrevrange(self, key: str, start: int, stop: int) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "zrevrange", key, start, stop)

    def zrevrange_with_scores(self, key: str, start: int, stop: int) -> Command:
        return self._run(
            ReplyKind.Z_SLICE, "zrevrange", key, start, stop, "withscores"
        )

    def _zrevrange_by(self, command: str, key: str, opt: ZRangeBy) -> Command:
        return self._run(
            ReplyKind.STRING_SLICE, command, key, opt.max, opt.min, *opt._limit()
        )

    def zrevrange_by_score(self, key: str, opt: ZRangeBy) -> Command:
        return self._zrevrange_by("zrevrangebyscore", key, opt)

    def zrevrange_by_lex(self, key: str, opt: ZRangeBy) -> Command:
        return self._zrevrange_by("zrevrangebylex", key, opt)

    def zrevrange_by_score_with_scores(self, key: str, opt: ZRangeBy) -> Command:
        return self._run(
            ReplyKind.Z_SLICE,
            "zrevrangebyscore",
            key,
            opt.max,
            opt.min,
            "withscores",
            *opt._limit(),
        )

    def zrevrank(self, key: str, member: str) -> Command:
        return self._run(ReplyKind.INT, "zrevrank", key, member)

    def zrevrank_with_score(self, key: str, member: str) -> Command:
        return self._run(
            ReplyKind.RANK_WITH_SCORE, "zrevrank", key, member, "withscore"
        )

    def zscore(self, key: str, member: str) -> Command:
        return self._run(ReplyKind.FLOAT, "zscore", key, member)

    def zunion(self, store: ZStore) -> Command:
        return self._run(
            ReplyKind.STRING_SLICE,
            "zunion",
            len(store.keys),
            *store._args(),
            first_key_pos=2,
        )

    def zunion_with_scores(self, store: ZStore) -> Command:
        return self._run(
            ReplyKind.Z_SLICE,
            "zunion",
            len(store.keys),
            *store._args(),
            "withscores",
            first_key_pos=2,
        )

    def zunionstore(self, dest: str, store: ZStore) -> Command:
        return self._run(
            ReplyKind.INT,
            "zunionstore",
            dest,
            len(store.keys),
            *store._args(),
            first_key_pos=3,
        )

    def zrandmember(self, key: str, count: int) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "zrandmember", key, count)

    def zrandmember_with_scores(self, key: str, count: int) -> Command:
        return self._run(ReplyKind.Z_SLICE, "zrandmember", key, count, "withscores")

    def zdiff(self, *args: str) -> Command:
        return self._run(
            ReplyKind.STRING_SLICE, "zdiff", len(args), *args, first_key_pos=2
        )

    def zdiff_with_scores(self, *args: str) -> Command:
        return self._run(
            ReplyKind.Z_SLICE,
            "zdiff",
            len(args),
            *args,
            "withscores",
            first_key_pos=2,
        )

    def zdiffstore(self, destination: str, *args: str) -> Command:
        return self._run(ReplyKind.INT, "zdiffstore", destination, len(args), *args)

    def zscan(self, key: str, cursor: int, match: str = "", count: int = 0) -> Command:
        args: list[Any] = ["zscan", key, cursor]
        if match:
            args += ["match", match]
        if count > 0:
            args += ["count", count]
        return self._run(ReplyKind.SCAN, *args)