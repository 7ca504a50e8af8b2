"""Lua scripting and server function commands."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Any

from .command import Command, Commander, ReplyKind, append_args


@dataclasses.dataclass
class FunctionListQuery:
    """Query for FUNCTION LIST.

    An empty ``library_name_pattern`` matches every library; a glob pattern
    or a full name narrows the list. ``with_code`` includes library code.
    """

    library_name_pattern: str = ""
    with_code: bool = False


class ScriptingCommands(Commander):
    """EVAL, SCRIPT and FUNCTION commands."""

    def _eval(
        self, name: str, payload: str, keys: Sequence[str] | None, args: tuple[Any, ...]
    ) -> Command:
        keys = list(keys or ())
        out = append_args([name, payload, len(keys), *keys], args)
        # Arguments may be given without any key.
        return self._run(
            ReplyKind.GENERIC, *out, first_key_pos=3 if keys else None
        )

    def eval(self, script: str, keys: Sequence[str] | None, *args: Any) -> Command:
        return self._eval("eval", script, keys, args)

    def eval_ro(self, script: str, keys: Sequence[str] | None, *args: Any) -> Command:
        return self._eval("eval_ro", script, keys, args)

    def evalsha(self, sha1: str, keys: Sequence[str] | None, *args: Any) -> Command:
        return self._eval("evalsha", sha1, keys, args)

    def evalsha_ro(self, sha1: str, keys: Sequence[str] | None, *args: Any) -> Command:
        return self._eval("evalsha_ro", sha1, keys, args)

    def script_exists(self, *args: str) -> Command:
        return self._run(ReplyKind.BOOL_SLICE, "script", "exists", *args)

    def script_flush(self) -> Command:
        return self._run(ReplyKind.STATUS, "script", "flush")

    def script_kill(self) -> Command:
        return self._run(ReplyKind.STATUS, "script", "kill")

    def script_load(self, script: str) -> Command:
        return self._run(ReplyKind.STRING, "script", "load", script)

    def function_load(self, code: str) -> Command:
        return self._run(ReplyKind.STRING, "function", "load", code)

    def function_load_replace(self, code: str) -> Command:
        return self._run(ReplyKind.STRING, "function", "load", "replace", code)

    def function_delete(self, lib_name: str) -> Command:
        return self._run(ReplyKind.STRING, "function", "delete", lib_name)

    def function_flush(self) -> Command:
        return self._run(ReplyKind.STRING, "function", "flush")

    def function_kill(self) -> Command:
        return self._run(ReplyKind.STRING, "function", "kill")

    def function_flush_async(self) -> Command:
        return self._run(ReplyKind.STRING, "function", "flush", "async")

    def function_list(self, query: FunctionListQuery | None = None) -> Command:
        query = query if query is not None else FunctionListQuery()
        out: list[Any] = ["function", "list"]
        if query.library_name_pattern:
            out += ["libraryname", query.library_name_pattern]
        if query.with_code:
            out.append("withcode")
        return self._run(ReplyKind.FUNCTION_LIST, *out)

    def function_dump(self) -> Command:
        return self._run(ReplyKind.STRING, "function", "dump")

    def function_restore(self, lib_dump: str) -> Command:
        return self._run(ReplyKind.STRING, "function", "restore", lib_dump)

    def function_stats(self) -> Command:
        return self._run(ReplyKind.FUNCTION_STATS, "function", "stats")

    def _fcall(
        self, command: str, function: str, keys: Sequence[str] | None, args: tuple[Any, ...]
    ) -> Command:
        keys = list(keys or ())
        return self._run(
            ReplyKind.GENERIC,
            command,
            function,
            len(keys),
            *keys,
            *args,
            first_key_pos=3 if keys else None,
        )

    def fcall(self, function: str, keys: Sequence[str] | None, *args: Any) -> Command:
        return self._fcall("fcall", function, keys, args)

    def fcall_ro(self, function: str, keys: Sequence[str] | None, *args: Any) -> Command:
        return self._fcall("fcall_ro", function, keys, args)