"""Command objects and the shared helpers that build argument lists."""

from __future__ import annotations

import dataclasses
import datetime
import enum
import ipaddress
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Iterator

_log = logging.getLogger(__name__)

_SECOND = datetime.timedelta(seconds=1)
_MILLISECOND = datetime.timedelta(milliseconds=1)
_MICROSECOND = datetime.timedelta(microseconds=1)

#: Expiration value asking the server to keep the key's existing TTL.
KEEP_TTL = datetime.timedelta(microseconds=-1)

# Commands whose second argument names a subcommand.
_CONTAINER_COMMANDS = frozenset(
    {
        "acl",
        "client",
        "cluster",
        "command",
        "config",
        "debug",
        "function",
        "memory",
        "module",
        "object",
        "pubsub",
        "script",
        "slowlog",
        "xgroup",
        "xinfo",
    }
)

# Values sent as a single argument even though they might look like containers.
_SCALAR_TYPES = (
    str,
    bytes,
    bytearray,
    memoryview,
    datetime.datetime,
    datetime.date,
    datetime.timedelta,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
)


class ReplyKind(enum.Enum):
    """The shape of reply a command expects from the server."""

    GENERIC = "generic"
    STATUS = "status"
    INT = "int"
    BOOL = "bool"
    STRING = "string"
    FLOAT = "float"
    DURATION = "duration"
    TIME = "time"
    SLICE = "slice"
    STRING_SLICE = "string_slice"
    INT_SLICE = "int_slice"
    BOOL_SLICE = "bool_slice"
    FLOAT_SLICE = "float_slice"
    MAP_STRING_STRING = "map_string_string"
    MAP_STRING_INT = "map_string_int"
    MAP_STRING_INTERFACE = "map_string_interface"
    STRING_STRUCT_MAP = "string_struct_map"
    KEY_VALUE_SLICE = "key_value_slice"
    KEY_VALUES = "key_values"
    KEY_FLAGS = "key_flags"
    SCAN = "scan"
    COMMANDS_INFO = "commands_info"
    LCS = "lcs"
    XMESSAGE_SLICE = "xmessage_slice"
    XSTREAM_SLICE = "xstream_slice"
    XPENDING = "xpending"
    XPENDING_EXT = "xpending_ext"
    XAUTOCLAIM = "xautoclaim"
    XAUTOCLAIM_JUST_ID = "xautoclaim_just_id"
    XINFO_CONSUMERS = "xinfo_consumers"
    XINFO_GROUPS = "xinfo_groups"
    XINFO_STREAM = "xinfo_stream"
    XINFO_STREAM_FULL = "xinfo_stream_full"
    Z_WITH_KEY = "z_with_key"
    Z_SLICE = "z_slice"
    Z_SLICE_WITH_KEY = "z_slice_with_key"
    RANK_WITH_SCORE = "rank_with_score"
    CLIENT_INFO = "client_info"
    SLOWLOG = "slowlog"
    FUNCTION_LIST = "function_list"
    FUNCTION_STATS = "function_stats"
    CLUSTER_SLOTS = "cluster_slots"
    CLUSTER_SHARDS = "cluster_shards"
    CLUSTER_LINKS = "cluster_links"
    ACL_LOG = "acl_log"


@dataclasses.dataclass
class Command:
    """A single command: its arguments, expected reply and outcome."""

    args: list[Any]
    kind: ReplyKind = ReplyKind.GENERIC
    first_key_pos: int | None = None
    read_timeout: datetime.timedelta | None = None
    precision: datetime.timedelta | None = None
    val: Any = None
    err: BaseException | None = None

    def name(self) -> str:
        """The lower-cased command name, or an empty string."""
        if not self.args:
            return ""
        first = self.args[0]
        if isinstance(first, (bytes, bytearray)):
            first = bytes(first).decode("utf-8", "replace")
        return str(first).lower()

    def full_name(self) -> str:
        """The command name, followed by its subcommand where it has one."""
        name = self.name()
        if name in _CONTAINER_COMMANDS and len(self.args) > 1:
            sub = self.args[1]
            if isinstance(sub, str):
                return f"{name} {sub}"
        return name

    def result(self) -> Any:
        """Return the reply value, raising the stored error if there is one."""
        if self.err is not None:
            raise self.err
        return self.val


class Commander:
    """Base for command groups: builds commands and hands them to ``process``.

    ``process`` receives each :class:`Command` and is expected to fill in
    ``val`` or ``err``. An exception it raises is stored on the command.
    """

    def __init__(self, process: Callable[[Command], Any]) -> None:
        self._process = process

    def _run(
        self,
        kind: ReplyKind,
        *args: Any,
        first_key_pos: int | None = None,
        read_timeout: datetime.timedelta | None = None,
        precision: datetime.timedelta | None = None,
    ) -> Command:
        cmd = Command(
            list(args),
            kind,
            first_key_pos=first_key_pos,
            read_timeout=read_timeout,
            precision=precision,
        )
        return self._send(cmd)

    def _send(self, cmd: Command) -> Command:
        try:
            self._process(cmd)
        except Exception as exc:  # the command carries its own error
            if cmd.err is None:
                cmd.err = exc
        return cmd


def _truncate(dur: datetime.timedelta, unit: datetime.timedelta) -> int:
    micros = dur // _MICROSECOND
    unit_micros = unit // _MICROSECOND
    whole = abs(micros) // unit_micros
    return whole if micros >= 0 else -whole


def use_precise(dur: datetime.timedelta) -> bool:
    """True when the duration needs millisecond precision."""
    return dur < _SECOND or dur % _SECOND != datetime.timedelta(0)


def format_ms(dur: datetime.timedelta) -> int:
    """Whole milliseconds in ``dur``; positive values below 1ms become 1."""
    if datetime.timedelta(0) < dur < _MILLISECOND:
        _log.warning(
            "specified duration is %s, but minimal supported value is %s - truncating to 1ms",
            dur,
            _MILLISECOND,
        )
        return 1
    return _truncate(dur, _MILLISECOND)


def format_sec(dur: datetime.timedelta) -> int:
    """Whole seconds in ``dur``; positive values below 1s become 1."""
    if datetime.timedelta(0) < dur < _SECOND:
        _log.warning(
            "specified duration is %s, but minimal supported value is %s - truncating to 1s",
            dur,
            _SECOND,
        )
        return 1
    return _truncate(dur, _SECOND)


def append_args(dst: Sequence[Any], src: Sequence[Any]) -> list[Any]:
    """Return ``dst`` extended by ``src``; a lone value in ``src`` is expanded."""
    if len(src) == 1:
        return append_arg(dst, src[0])
    return [*dst, *src]


def append_arg(dst: Sequence[Any], arg: Any) -> list[Any]:
    """Return ``dst`` extended by ``arg``, flattening lists, mappings and dataclasses."""
    out = list(dst)
    if arg is None:
        return out
    if isinstance(arg, _SCALAR_TYPES):
        out.append(arg)
    elif isinstance(arg, (list, tuple)):
        out.extend(arg)
    elif isinstance(arg, Mapping):
        for key, value in arg.items():
            out.extend((key, value))
    elif dataclasses.is_dataclass(arg) and not isinstance(arg, type):
        for name, value in _struct_fields(arg):
            out.extend((name, value))
    else:
        out.append(arg)
    return out


def _struct_fields(obj: Any) -> Iterator[tuple[str, Any]]:
    for field in dataclasses.fields(obj):
        tag = field.metadata.get("redis", "")
        if tag in ("", "-"):
            continue
        name, _, opts = tag.partition(",")
        if not name or field.name.startswith("_"):
            continue
        value = getattr(obj, field.name)
        if "omitempty" in opts.split(",") and _is_empty(value):
            continue
        yield name, value


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False