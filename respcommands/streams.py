"""Stream commands."""

from __future__ import annotations

import dataclasses
import datetime
from typing import Any

from .command import Command, Commander, ReplyKind, append_arg, format_ms

_ZERO = datetime.timedelta(0)
_MILLISECOND = datetime.timedelta(milliseconds=1)


def _millis(dur: datetime.timedelta) -> int:
    """Whole milliseconds in ``dur``, truncated toward zero."""
    whole = abs(dur) // _MILLISECOND
    return whole if dur >= _ZERO else -whole


def _blocks(block: datetime.timedelta | None) -> bool:
    return block is not None and block >= _ZERO


@dataclasses.dataclass
class XAddArgs:
    """Options of XADD.

    ``values`` may be a flat list of fields and values, a mapping or a
    tagged dataclass. ``max_len`` and ``min_id`` are exclusive; ``max_len``
    wins when both are set. ``approx`` trims with ``~`` instead of ``=``.
    """

    stream: str = ""
    no_mk_stream: bool = False
    max_len: int = 0
    min_id: str = ""
    approx: bool = False
    limit: int = 0
    id: str = ""
    values: Any = None


@dataclasses.dataclass
class XReadArgs:
    """Options of XREAD; ``streams`` lists the stream names and then their ids.

    A negative or ``None`` ``block`` leaves the BLOCK option out.
    """

    streams: list[str] = dataclasses.field(default_factory=list)
    count: int = 0
    block: datetime.timedelta | None = _ZERO


@dataclasses.dataclass
class XReadGroupArgs:
    """Options of XREADGROUP; ``streams`` lists the stream names and then their ids."""

    group: str = ""
    consumer: str = ""
    streams: list[str] = dataclasses.field(default_factory=list)
    count: int = 0
    block: datetime.timedelta | None = _ZERO
    no_ack: bool = False


@dataclasses.dataclass
class XPendingExtArgs:
    """Options of the extended form of XPENDING."""

    stream: str = ""
    group: str = ""
    idle: datetime.timedelta = _ZERO
    start: str = ""
    end: str = ""
    count: int = 0
    consumer: str = ""


@dataclasses.dataclass
class XAutoClaimArgs:
    """Options of XAUTOCLAIM."""

    stream: str = ""
    group: str = ""
    min_idle: datetime.timedelta = _ZERO
    start: str = ""
    count: int = 0
    consumer: str = ""

    def _args(self) -> list[Any]:
        args: list[Any] = [
            "xautoclaim",
            self.stream,
            self.group,
            self.consumer,
            format_ms(self.min_idle),
            self.start,
        ]
        if self.count > 0:
            args += ["count", self.count]
        return args


@dataclasses.dataclass
class XClaimArgs:
    """Options of XCLAIM."""

    stream: str = ""
    group: str = ""
    consumer: str = ""
    min_idle: datetime.timedelta = _ZERO
    messages: list[str] = dataclasses.field(default_factory=list)

    def _args(self) -> list[Any]:
        return [
            "xclaim",
            self.stream,
            self.group,
            self.consumer,
            _millis(self.min_idle),
            *self.messages,
        ]


class StreamCommands(Commander):
    """Commands on stream values."""

    def xadd(self, args: XAddArgs) -> Command:
        out: list[Any] = ["xadd", args.stream]
        if args.no_mk_stream:
            out.append("nomkstream")
        if args.max_len > 0:
            out += ["maxlen", "~", args.max_len] if args.approx else ["maxlen", args.max_len]
        elif args.min_id:
            out += ["minid", "~", args.min_id] if args.approx else ["minid", args.min_id]
        if args.limit > 0:
            out += ["limit", args.limit]
        out.append(args.id or "*")
        out = append_arg(out, args.values)
        return self._run(ReplyKind.STRING, *out)

    def xdel(self, stream: str, *args: str) -> Command:
        return self._run(ReplyKind.INT, "xdel", stream, *args)

    def xlen(self, stream: str) -> Command:
        return self._run(ReplyKind.INT, "xlen", stream)

    def xrange(self, stream: str, start: str, stop: str) -> Command:
        return self._run(ReplyKind.XMESSAGE_SLICE, "xrange", stream, start, stop)

    def xrange_n(self, stream: str, start: str, stop: str, count: int) -> Command:
        return self._run(
            ReplyKind.XMESSAGE_SLICE, "xrange", stream, start, stop, "count", count
        )

    def xrevrange(self, stream: str, start: str, stop: str) -> Command:
        return self._run(ReplyKind.XMESSAGE_SLICE, "xrevrange", stream, start, stop)

    def xrevrange_n(self, stream: str, start: str, stop: str, count: int) -> Command:
        return self._run(
            ReplyKind.XMESSAGE_SLICE, "xrevrange", stream, start, stop, "count", count
        )

    def xread(self, args: XReadArgs) -> Command:
        out: list[Any] = ["xread"]
        if args.count > 0:
            out += ["count", args.count]
        blocking = _blocks(args.block)
        if blocking:
            out += ["block", args.block // _MILLISECOND]
        out.append("streams")
        key_pos = len(out)
        out += args.streams
        return self._run(
            ReplyKind.XSTREAM_SLICE,
            *out,
            first_key_pos=key_pos,
            read_timeout=args.block if blocking else None,
        )

    def xread_streams(self, *args: str) -> Command:
        """Non-blocking XREAD of the given stream names and ids."""
        return self.xread(XReadArgs(streams=list(args), block=None))

    def xgroup_create(self, stream: str, group: str, start: str) -> Command:
        return self._run(ReplyKind.STATUS, "xgroup", "create", stream, group, start)

    def xgroup_create_mkstream(self, stream: str, group: str, start: str) -> Command:
        return self._run(
            ReplyKind.STATUS, "xgroup", "create", stream, group, start, "mkstream"
        )

    def xgroup_set_id(self, stream: str, group: str, start: str) -> Command:
        return self._run(ReplyKind.STATUS, "xgroup", "setid", stream, group, start)

    def xgroup_destroy(self, stream: str, group: str) -> Command:
        return self._run(ReplyKind.INT, "xgroup", "destroy", stream, group)

    def xgroup_create_consumer(self, stream: str, group: str, consumer: str) -> Command:
        return self._run(
            ReplyKind.INT, "xgroup", "createconsumer", stream, group, consumer
        )

    def xgroup_del_consumer(self, stream: str, group: str, consumer: str) -> Command:
        return self._run(ReplyKind.INT, "xgroup", "delconsumer", stream, group, consumer)

    def xreadgroup(self, args: XReadGroupArgs) -> Command:
        out: list[Any] = ["xreadgroup", "group", args.group, args.consumer]
        if args.count > 0:
            out += ["count", args.count]
        blocking = _blocks(args.block)
        if blocking:
            out += ["block", args.block // _MILLISECOND]
        if args.no_ack:
            out.append("noack")
        out.append("streams")
        key_pos = len(out)
        out += args.streams
        return self._run(
            ReplyKind.XSTREAM_SLICE,
            *out,
            first_key_pos=key_pos,
            read_timeout=args.block if blocking else None,
        )

    def xack(self, stream: str, group: str, *args: str) -> Command:
        return self._run(ReplyKind.INT, "xack", stream, group, *args)

    def xpending(self, stream: str, group: str) -> Command:
        return self._run(ReplyKind.XPENDING, "xpending", stream, group)

    def xpending_ext(self, args: XPendingExtArgs) -> Command:
        out: list[Any] = ["xpending", args.stream, args.group]
        if args.idle != _ZERO:
            out += ["idle", format_ms(args.idle)]
        out += [args.start, args.end, args.count]
        if args.consumer:
            out.append(args.consumer)
        return self._run(ReplyKind.XPENDING_EXT, *out)

    def xautoclaim(self, args: XAutoClaimArgs) -> Command:
        return self._run(ReplyKind.XAUTOCLAIM, *args._args())

    def xautoclaim_just_id(self, args: XAutoClaimArgs) -> Command:
        return self._run(ReplyKind.XAUTOCLAIM_JUST_ID, *args._args(), "justid")

    def xclaim(self, args: XClaimArgs) -> Command:
        return self._run(ReplyKind.XMESSAGE_SLICE, *args._args())

    def xclaim_just_id(self, args: XClaimArgs) -> Command:
        return self._run(ReplyKind.STRING_SLICE, *args._args(), "justid")

    def _xtrim(
        self, key: str, strategy: str, approx: bool, threshold: Any, limit: int
    ) -> Command:
        out: list[Any] = ["xtrim", key, strategy]
        if approx:
            out.append("~")
        out.append(threshold)
        if limit > 0:
            out += ["limit", limit]
        return self._run(ReplyKind.INT, *out)

    def xtrim_max_len(self, key: str, max_len: int) -> Command:
        """XTRIM key MAXLEN max_len, exact and without LIMIT."""
        return self._xtrim(key, "maxlen", False, max_len, 0)

    def xtrim_max_len_approx(self, key: str, max_len: int, limit: int) -> Command:
        return self._xtrim(key, "maxlen", True, max_len, limit)

    def xtrim_min_id(self, key: str, min_id: str) -> Command:
        return self._xtrim(key, "minid", False, min_id, 0)

    def xtrim_min_id_approx(self, key: str, min_id: str, limit: int) -> Command:
        return self._xtrim(key, "minid", True, min_id, limit)

    def xinfo_stream_full(self, key: str, count: int = 0) -> Command:
        """XINFO STREAM key FULL [COUNT count]."""
        out: list[Any] = ["xinfo", "stream", key, "full"]
        if count > 0:
            out += ["count", count]
        return self._run(ReplyKind.XINFO_STREAM_FULL, *out)