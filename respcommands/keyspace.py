"""Connection, generic key and HyperLogLog commands."""

from __future__ import annotations

import dataclasses
import datetime
from typing import Any

from .command import (
    Command,
    Commander,
    ReplyKind,
    append_args,
    format_ms,
    format_sec,
)

_SECOND = datetime.timedelta(seconds=1)
_MILLISECOND = datetime.timedelta(milliseconds=1)
_MICROSECOND = datetime.timedelta(microseconds=1)
_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def _whole(dur: datetime.timedelta, unit: datetime.timedelta) -> int:
    """Whole units in ``dur``, truncated toward zero."""
    micros = dur // _MICROSECOND
    whole = abs(micros) // (unit // _MICROSECOND)
    return whole if micros >= 0 else -whole


def _epoch_micros(tm: datetime.datetime) -> int:
    if tm.tzinfo is None:
        tm = tm.astimezone()
    return (tm - _EPOCH) // _MICROSECOND


def _unix_seconds(tm: datetime.datetime) -> int:
    return _epoch_micros(tm) // 1_000_000


def _unix_millis(tm: datetime.datetime) -> int:
    micros = _epoch_micros(tm)
    whole = abs(micros) // 1000
    return whole if micros >= 0 else -whole


@dataclasses.dataclass
class FilterBy:
    """Filter for ``COMMAND LIST``; the first non-empty field is used."""

    module: str = ""
    acl_cat: str = ""
    pattern: str = ""


@dataclasses.dataclass
class Sort:
    """Options of the SORT family of commands."""

    by: str = ""
    offset: int = 0
    count: int = 0
    get: list[str] = dataclasses.field(default_factory=list)
    order: str = ""
    alpha: bool = False

    def args(self, command: str, key: str) -> list[Any]:
        """The argument list for ``command`` applied to ``key``."""
        args: list[Any] = [command, key]
        if self.by:
            args += ["by", self.by]
        if self.offset != 0 or self.count != 0:
            args += ["limit", self.offset, self.count]
        for pattern in self.get:
            args += ["get", pattern]
        if self.order:
            args.append(self.order)
        if self.alpha:
            args.append("alpha")
        return args


class ConnectionCommands(Commander):
    """Commands that concern the connection itself."""

    def auth(self, password: str) -> Command:
        return self._run(ReplyKind.STATUS, "auth", password)

    def auth_acl(self, username: str, password: str) -> Command:
        """Authenticate as an ACL user."""
        return self._run(ReplyKind.STATUS, "auth", username, password)

    def select(self, index: int) -> Command:
        return self._run(ReplyKind.STATUS, "select", index)

    def swap_db(self, index1: int, index2: int) -> Command:
        return self._run(ReplyKind.STATUS, "swapdb", index1, index2)

    def client_set_name(self, name: str) -> Command:
        """Assign a name to the connection."""
        return self._run(ReplyKind.BOOL, "client", "setname", name)

    def hello(self, ver: int, username: str, password: str, client_name: str) -> Command:
        """Switch protocol version, optionally authenticating and naming the connection."""
        args: list[Any] = ["hello", ver]
        if password:
            args += ["auth", username or "default", password]
        if client_name:
            args += ["setname", client_name]
        return self._run(ReplyKind.MAP_STRING_INTERFACE, *args)

    def command(self) -> Command:
        return self._run(ReplyKind.COMMANDS_INFO, "command")

    def command_list(self, filter_by: FilterBy | None = None) -> Command:
        args: list[Any] = ["command", "list"]
        if filter_by is not None:
            if filter_by.module:
                args += ["filterby", "module", filter_by.module]
            elif filter_by.acl_cat:
                args += ["filterby", "aclcat", filter_by.acl_cat]
            elif filter_by.pattern:
                args += ["filterby", "pattern", filter_by.pattern]
        return self._run(ReplyKind.STRING_SLICE, *args)

    def command_get_keys(self, *args: Any) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "command", "getkeys", *args)

    def command_get_keys_and_flags(self, *args: Any) -> Command:
        return self._run(ReplyKind.KEY_FLAGS, "command", "getkeysandflags", *args)

    def client_get_name(self) -> Command:
        """Return the name of the connection."""
        return self._run(ReplyKind.STRING, "client", "getname")

    def echo(self, message: Any) -> Command:
        return self._run(ReplyKind.STRING, "echo", message)

    def ping(self) -> Command:
        return self._run(ReplyKind.STATUS, "ping")


class KeyCommands(Commander):
    """Commands that act on keys regardless of their type."""

    def delete(self, *args: str) -> Command:
        return self._run(ReplyKind.INT, "del", *args)

    def unlink(self, *args: str) -> Command:
        return self._run(ReplyKind.INT, "unlink", *args)

    def dump(self, key: str) -> Command:
        return self._run(ReplyKind.STRING, "dump", key)

    def exists(self, *args: str) -> Command:
        return self._run(ReplyKind.INT, "exists", *args)

    def _expire(self, key: str, expiration: datetime.timedelta, mode: str) -> Command:
        args: list[Any] = ["expire", key, format_sec(expiration)]
        if mode:
            args.append(mode)
        return self._run(ReplyKind.BOOL, *args)

    def expire(self, key: str, expiration: datetime.timedelta) -> Command:
        return self._expire(key, expiration, "")

    def expire_nx(self, key: str, expiration: datetime.timedelta) -> Command:
        return self._expire(key, expiration, "NX")

    def expire_xx(self, key: str, expiration: datetime.timedelta) -> Command:
        return self._expire(key, expiration, "XX")

    def expire_gt(self, key: str, expiration: datetime.timedelta) -> Command:
        return self._expire(key, expiration, "GT")

    def expire_lt(self, key: str, expiration: datetime.timedelta) -> Command:
        return self._expire(key, expiration, "LT")

    def expire_at(self, key: str, tm: datetime.datetime) -> Command:
        return self._run(ReplyKind.BOOL, "expireat", key, _unix_seconds(tm))

    def expire_time(self, key: str) -> Command:
        return self._run(ReplyKind.DURATION, "expiretime", key, precision=_SECOND)

    def keys(self, pattern: str) -> Command:
        return self._run(ReplyKind.STRING_SLICE, "keys", pattern)

    def migrate(
        self, host: str, port: str, key: str, db: int, timeout: datetime.timedelta
    ) -> Command:
        return self._run(
            ReplyKind.STATUS,
            "migrate",
            host,
            port,
            key,
            db,
            format_ms(timeout),
            read_timeout=timeout,
        )

    def move(self, key: str, db: int) -> Command:
        return self._run(ReplyKind.BOOL, "move", key, db)

    def object_ref_count(self, key: str) -> Command:
        return self._run(ReplyKind.INT, "object", "refcount", key)

    def object_encoding(self, key: str) -> Command:
        return self._run(ReplyKind.STRING, "object", "encoding", key)

    def object_idle_time(self, key: str) -> Command:
        return self._run(
            ReplyKind.DURATION, "object", "idletime", key, precision=_SECOND
        )

    def persist(self, key: str) -> Command:
        return self._run(ReplyKind.BOOL, "persist", key)

    def pexpire(self, key: str, expiration: datetime.timedelta) -> Command:
        return self._run(ReplyKind.BOOL, "pexpire", key, format_ms(expiration))

    def pexpire_at(self, key: str, tm: datetime.datetime) -> Command:
        return self._run(ReplyKind.BOOL, "pexpireat", key, _unix_millis(tm))

    def pexpire_time(self, key: str) -> Command:
        return self._run(
            ReplyKind.DURATION, "pexpiretime", key, precision=_MILLISECOND
        )

    def pttl(self, key: str) -> Command:
        return self._run(ReplyKind.DURATION, "pttl", key, precision=_MILLISECOND)

    def random_key(self) -> Command:
        return self._run(ReplyKind.STRING, "randomkey")

    def rename(self, key: str, newkey: str) -> Command:
        return self._run(ReplyKind.STATUS, "rename", key, newkey)

    def rename_nx(self, key: str, newkey: str) -> Command:
        return self._run(ReplyKind.BOOL, "renamenx", key, newkey)

    def restore(self, key: str, ttl: datetime.timedelta, value: str) -> Command:
        return self._run(ReplyKind.STATUS, "restore", key, format_ms(ttl), value)

    def restore_replace(self, key: str, ttl: datetime.timedelta, value: str) -> Command:
        return self._run(
            ReplyKind.STATUS, "restore", key, format_ms(ttl), value, "replace"
        )

    def sort(self, key: str, sort: Sort) -> Command:
        return self._run(ReplyKind.STRING_SLICE, *sort.args("sort", key))

    def sort_ro(self, key: str, sort: Sort) -> Command:
        return self._run(ReplyKind.STRING_SLICE, *sort.args("sort_ro", key))

    def sort_store(self, key: str, store: str, sort: Sort) -> Command:
        args = sort.args("sort", key)
        if store:
            args += ["store", store]
        return self._run(ReplyKind.INT, *args)

    def sort_interfaces(self, key: str, sort: Sort) -> Command:
        return self._run(ReplyKind.SLICE, *sort.args("sort", key))

    def touch(self, *args: str) -> Command:
        return self._run(ReplyKind.INT, "touch", *args)

    def ttl(self, key: str) -> Command:
        return self._run(ReplyKind.DURATION, "ttl", key, precision=_SECOND)

    def type(self, key: str) -> Command:
        return self._run(ReplyKind.STATUS, "type", key)

    def copy(self, source_key: str, dest_key: str, db: int, replace: bool) -> Command:
        args: list[Any] = ["copy", source_key, dest_key, "DB", db]
        if replace:
            args.append("REPLACE")
        return self._run(ReplyKind.INT, *args)

    def scan(self, cursor: int, match: str = "", count: int = 0) -> Command:
        return self.scan_type(cursor, match, count, "")

    def scan_type(
        self, cursor: int, match: str = "", count: int = 0, key_type: str = ""
    ) -> Command:
        args: list[Any] = ["scan", cursor]
        if match:
            args += ["match", match]
        if count > 0:
            args += ["count", count]
        if key_type:
            args += ["type", key_type]
        return self._run(ReplyKind.SCAN, *args)

    def wait(self, num_slaves: int, timeout: datetime.timedelta) -> Command:
        return self._run(
            ReplyKind.INT,
            "wait",
            num_slaves,
            _whole(timeout, _MILLISECOND),
            read_timeout=timeout,
        )


class HyperLogLogCommands(Commander):
    """HyperLogLog commands."""

    def pf_add(self, key: str, *args: Any) -> Command:
        return self._run(ReplyKind.INT, *append_args(["pfadd", key], args))

    def pf_count(self, *args: str) -> Command:
        return self._run(ReplyKind.INT, "pfcount", *args)

    def pf_merge(self, dest: str, *args: str) -> Command:
        return self._run(ReplyKind.STATUS, "pfmerge", dest, *args)