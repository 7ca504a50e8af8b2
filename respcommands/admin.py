"""Server administration commands and the combined command set."""

from __future__ import annotations

import dataclasses
import datetime
from typing import Any

from .cluster import ClusterCommands, PubSubCommands
from .command import Command, Commander, ReplyKind, format_ms
from .hashes import HashCommands
from .keyspace import ConnectionCommands, HyperLogLogCommands, KeyCommands
from .lists import ListCommands
from .scripting import ScriptingCommands
from .sets import SetCommands
from .sortedsets import SortedSetCommands
from .streams import StreamCommands
from .strings import StringCommands


@dataclasses.dataclass
class ModuleLoadexConfig:
    """Arguments of MODULE LOADEX path [CONFIG name value ...] [ARGS args ...]."""

    path: str = ""
    conf: dict[str, Any] = dataclasses.field(default_factory=dict)
    args: list[Any] = dataclasses.field(default_factory=list)

    def to_args(self) -> list[Any]:
        """The full argument list of the command."""
        out: list[Any] = ["MODULE", "LOADEX", self.path]
        for name, value in self.conf.items():
            out += ["CONFIG", name, value]
        for arg in self.args:
            out += ["ARGS", arg]
        return out


class ServerCommands(Commander):
    """Server, client, configuration and ACL commands."""

    def bg_rewrite_aof(self) -> Command:
        return self._run(ReplyKind.STATUS, "bgrewriteaof")

    def bg_save(self) -> Command:
        return self._run(ReplyKind.STATUS, "bgsave")

    def client_kill(self, ip_port: str) -> Command:
        return self._run(ReplyKind.STATUS, "client", "kill", ip_port)

    def client_kill_by_filter(self, *args: str) -> Command:
        """CLIENT KILL <option> [value] ... <option> [value]."""
        return self._run(ReplyKind.INT, "client", "kill", *args)

    def client_list(self) -> Command:
        return self._run(ReplyKind.STRING, "client", "list")

    def client_info(self) -> Command:
        return self._run(ReplyKind.CLIENT_INFO, "client", "info")

    def client_pause(self, dur: datetime.timedelta) -> Command:
        return self._run(ReplyKind.BOOL, "client", "pause", format_ms(dur))

    def client_unpause(self) -> Command:
        return self._run(ReplyKind.BOOL, "client", "unpause")

    def client_id(self) -> Command:
        return self._run(ReplyKind.INT, "client", "id")

    def client_unblock(self, client_id: int) -> Command:
        return self._run(ReplyKind.INT, "client", "unblock", client_id)

    def client_unblock_with_error(self, client_id: int) -> Command:
        return self._run(ReplyKind.INT, "client", "unblock", client_id, "error")

    def config_get(self, parameter: str) -> Command:
        return self._run(ReplyKind.MAP_STRING_STRING, "config", "get", parameter)

    def config_reset_stat(self) -> Command:
        return self._run(ReplyKind.STATUS, "config", "resetstat")

    def config_set(self, parameter: str, value: str) -> Command:
        return self._run(ReplyKind.STATUS, "config", "set", parameter, value)

    def config_rewrite(self) -> Command:
        return self._run(ReplyKind.STATUS, "config", "rewrite")

    def dbsize(self) -> Command:
        return self._run(ReplyKind.INT, "dbsize")

    def flush_all(self) -> Command:
        return self._run(ReplyKind.STATUS, "flushall")

    def flush_all_async(self) -> Command:
        return self._run(ReplyKind.STATUS, "flushall", "async")

    def flush_db(self) -> Command:
        return self._run(ReplyKind.STATUS, "flushdb")

    def flush_db_async(self) -> Command:
        return self._run(ReplyKind.STATUS, "flushdb", "async")

    def info(self, *args: str) -> Command:
        return self._run(ReplyKind.STRING, "info", *args)

    def last_save(self) -> Command:
        return self._run(ReplyKind.INT, "lastsave")

    def save(self) -> Command:
        return self._run(ReplyKind.STATUS, "save")

    def _shutdown(self, modifier: str) -> Command:
        args = ["shutdown", modifier] if modifier else ["shutdown"]
        cmd = self._run(ReplyKind.STATUS, *args)
        if cmd.err is not None:
            if isinstance(cmd.err, EOFError):
                # The server closed the connection: it quit as asked.
                cmd.err = None
        else:
            # The server stayed up; its reply gives the reason.
            cmd.err = RuntimeError(cmd.val)
            cmd.val = ""
        return cmd

    def shutdown(self) -> Command:
        return self._shutdown("")

    def shutdown_save(self) -> Command:
        return self._shutdown("save")

    def shutdown_no_save(self) -> Command:
        return self._shutdown("nosave")

    def slaveof(self, host: str, port: str) -> Command:
        return self._run(ReplyKind.STATUS, "slaveof", host, port)

    def slowlog_get(self, num: int) -> Command:
        return self._run(ReplyKind.SLOWLOG, "slowlog", "get", num)

    def time(self) -> Command:
        return self._run(ReplyKind.TIME, "time")

    def debug_object(self, key: str) -> Command:
        return self._run(ReplyKind.STRING, "debug", "object", key)

    def read_only(self) -> Command:
        return self._run(ReplyKind.STATUS, "readonly")

    def read_write(self) -> Command:
        return self._run(ReplyKind.STATUS, "readwrite")

    def memory_usage(self, key: str, *args: int) -> Command:
        """MEMORY USAGE key [SAMPLES count]."""
        out: list[Any] = ["memory", "usage", key]
        if args:
            if len(args) != 1:
                raise ValueError("MemoryUsage expects single sample count")
            out += ["SAMPLES", args[0]]
        return self._run(ReplyKind.INT, *out, first_key_pos=2)

    def acl_dry_run(self, username: str, *args: Any) -> Command:
        return self._run(ReplyKind.STRING, "acl", "dryrun", username, *args)

    def acl_log(self, count: int = 0) -> Command:
        out: list[Any] = ["acl", "log"]
        if count > 0:
            out.append(count)
        return self._run(ReplyKind.ACL_LOG, *out)

    def acl_log_reset(self) -> Command:
        return self._run(ReplyKind.STATUS, "acl", "log", "reset")

    def module_loadex(self, conf: ModuleLoadexConfig) -> Command:
        return self._run(ReplyKind.STRING, *conf.to_args())


class Commands(
    ConnectionCommands,
    KeyCommands,
    StringCommands,
    HashCommands,
    ListCommands,
    SetCommands,
    SortedSetCommands,
    StreamCommands,
    HyperLogLogCommands,
    ScriptingCommands,
    PubSubCommands,
    ClusterCommands,
    ServerCommands,
):
    """Every command group behind a single ``process`` callable."""