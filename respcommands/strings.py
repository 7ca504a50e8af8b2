"""String and bitmap commands."""

from __future__ import annotations

import dataclasses
import datetime
from typing import Any

from .command import (
    KEEP_TTL,
    Command,
    Commander,
    ReplyKind,
    append_args,
    format_ms,
    format_sec,
    use_precise,
)

_ZERO = datetime.timedelta(0)
_MICROSECOND = datetime.timedelta(microseconds=1)
_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def _unix_seconds(tm: datetime.datetime) -> int:
    if tm.tzinfo is None:
        tm = tm.astimezone()
    return ((tm - _EPOCH) // _MICROSECOND) // 1_000_000


def _expiry_args(expiration: datetime.timedelta) -> list[Any]:
    if use_precise(expiration):
        return ["px", format_ms(expiration)]
    return ["ex", format_sec(expiration)]


@dataclasses.dataclass
class SetArgs:
    """Every option of the SET command.

    ``mode`` is ``"NX"``, ``"XX"`` or empty. A zero ``ttl`` and no
    ``expire_at`` leave the key without expiration.
    """

    mode: str = ""
    ttl: datetime.timedelta = _ZERO
    expire_at: datetime.datetime | None = None
    get: bool = False
    keep_ttl: bool = False


@dataclasses.dataclass
class BitCount:
    """Byte range for BITCOUNT."""

    start: int = 0
    end: int = 0


class StringCommands(Commander):
    """Commands on string values and bitmaps."""

    def append(self, key: str, value: str) -> Command:
        return self._run(ReplyKind.INT, "append", key, value)

    def decr(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "decr", key)

    def decr_by(self, key: str, decrement: int) -> Command:
        return self._run(ReplyKind.INT, "decrby", key, decrement)

    def get(self, key: str) -> Command:
        """GET key; the reply is nil when the key does not exist."""
        return self._run(ReplyKind.STRING, "get", key)

    def get_range(self, key: str, start: int, end: int) -> Command:
        return self._run(ReplyKind.STRING, "getrange", key, start, end)

    def get_set(self, key: str, value: Any) -> Command:
        return self._run(ReplyKind.STRING, "getset", key, value)

    def get_ex(self, key: str, expiration: datetime.timedelta) -> Command:
        """GETEX; a zero expiration removes the key's TTL."""
        args: list[Any] = ["getex", key]
        if expiration > _ZERO:
            args += _expiry_args(expiration)
        elif expiration == _ZERO:
            args.append("persist")
        return self._run(ReplyKind.STRING, *args)

    def get_del(self, key: str) -> Command:
        return self._run(ReplyKind.STRING, "getdel", key)

    def incr(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "incr", key)

    def incr_by(self, key: str, value: int) -> Command:
        return self._run(ReplyKind.INT, "incrby", key, value)

    def incr_by_float(self, key: str, value: float) -> Command:
        return self._run(ReplyKind.FLOAT, "incrbyfloat", key, value)

    def mget(self, *args: str) -> Command:
        return self._run(ReplyKind.SLICE, "mget", *args)

    def mset(self, *args: Any) -> Command:
        """MSET from pairs, a flat list, a mapping or a tagged dataclass."""
        return self._run(ReplyKind.STATUS, *append_args(["mset"], args))

    def msetnx(self, *args: Any) -> Command:
        return self._run(ReplyKind.BOOL, *append_args(["msetnx"], args))

    def set(
        self, key: str, value: Any, expiration: datetime.timedelta = _ZERO
    ) -> Command:
        """SET; zero means no expiration, ``KEEP_TTL`` keeps the existing one."""
        args: list[Any] = ["set", key, value]
        if expiration > _ZERO:
            args += _expiry_args(expiration)
        elif expiration == KEEP_TTL:
            args.append("keepttl")
        return self._run(ReplyKind.STATUS, *args)

    def set_args(self, key: str, value: Any, args: SetArgs) -> Command:
        out: list[Any] = ["set", key, value]
        if args.keep_ttl:
            out.append("keepttl")
        if args.expire_at is not None:
            out += ["exat", _unix_seconds(args.expire_at)]
        if args.ttl > _ZERO:
            out += _expiry_args(args.ttl)
        if args.mode:
            out.append(args.mode)
        if args.get:
            out.append("get")
        return self._run(ReplyKind.STATUS, *out)

    def set_ex(self, key: str, value: Any, expiration: datetime.timedelta) -> Command:
        return self._run(ReplyKind.STATUS, "setex", key, format_sec(expiration), value)

    def _set_conditional(
        self, key: str, value: Any, expiration: datetime.timedelta, cond: str
    ) -> Command:
        if expiration == KEEP_TTL:
            return self._run(ReplyKind.BOOL, "set", key, value, "keepttl", cond)
        return self._run(
            ReplyKind.BOOL, "set", key, value, *_expiry_args(expiration), cond
        )

    def set_nx(
        self, key: str, value: Any, expiration: datetime.timedelta = _ZERO
    ) -> Command:
        if expiration == _ZERO:
            # Plain SETNX works with old servers too.
            return self._run(ReplyKind.BOOL, "setnx", key, value)
        return self._set_conditional(key, value, expiration, "nx")

    def set_xx(
        self, key: str, value: Any, expiration: datetime.timedelta = _ZERO
    ) -> Command:
        if expiration == _ZERO:
            return self._run(ReplyKind.BOOL, "set", key, value, "xx")
        return self._set_conditional(key, value, expiration, "xx")

    def set_range(self, key: str, offset: int, value: str) -> Command:
        return self._run(ReplyKind.INT, "setrange", key, offset, value)

    def strlen(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "strlen", key)

    def get_bit(self, key: str, offset: int) -> Command:
        return self._run(ReplyKind.INT, "getbit", key, offset)

    def set_bit(self, key: str, offset: int, value: int) -> Command:
        return self._run(ReplyKind.INT, "setbit", key, offset, value)

    def bit_count(self, key: str, bit_count: BitCount | None = None) -> Command:
        args: list[Any] = ["bitcount", key]
        if bit_count is not None:
            args += [bit_count.start, bit_count.end]
        return self._run(ReplyKind.INT, *args)

    def _bit_op(self, op: str, dest_key: str, *keys: str) -> Command:
        return self._run(ReplyKind.INT, "bitop", op, dest_key, *keys)

    def bit_op_and(self, dest_key: str, *args: str) -> Command:
        return self._bit_op("and", dest_key, *args)

    def bit_op_or(self, dest_key: str, *args: str) -> Command:
        return self._bit_op("or", dest_key, *args)

    def bit_op_xor(self, dest_key: str, *args: str) -> Command:
        return self._bit_op("xor", dest_key, *args)

    def bit_op_not(self, dest_key: str, key: str) -> Command:
        return self._bit_op("not", dest_key, key)

    def bit_pos(self, key: str, bit: int, *args: int) -> Command:
        """BITPOS key bit [start [end]]."""
        if len(args) > 2:
            raise ValueError("too many arguments")
        return self._run(ReplyKind.INT, "bitpos", key, bit, *args)

    def bit_pos_span(
        self, key: str, bit: int, start: int, end: int, span: str
    ) -> Command:
        """BITPOS with an explicit ``"byte"`` or ``"bit"`` range unit."""
        return self._run(ReplyKind.INT, "bitpos", key, bit, start, end, span)

    def bit_field(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT_SLICE, "bitfield", key, *args)