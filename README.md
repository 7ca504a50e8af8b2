# respcommands

`respcommands` builds Redis commands. Every method turns its Python arguments
into the exact argument list the server expects, tags the command with the
kind of reply it expects (a `ReplyKind`), and hands it to a callable you
supply. How the command travels to a server is up to you.

## What it does not do

The package opens no connections, speaks no wire protocol and parses no
replies. A `Command` carries `args`, `kind`, `first_key_pos`, `read_timeout`
and `precision`; filling in its `val` or `err` is the job of the callable you
pass in.

## Installation

```
pip install respcommands
```

Python 3.10 or later is required; the package has no dependencies.

## Sending commands

`respcommands.admin.Commands` gathers every command family: connection, keys,
strings and bitmaps, hashes, lists, sets, sorted sets, streams, HyperLogLog,
scripting and functions, pub/sub, cluster and server administration. Give it
a function that takes a `Command`; each method builds the command, calls your
function with it and returns it. If your function raises, the exception is
stored on `cmd.err`; `cmd.result()` returns `cmd.val` or raises that error.

```python
import datetime

from respcommands.admin import Commands
from respcommands.cmdstring import cmd_string

sent = []
client = Commands(sent.append)

client.set("greeting", "hello")
client.expire("greeting", datetime.timedelta(seconds=90))
client.hset("user:1", {"name": "Ada", "lang": "en"})

for cmd in sent:
    print(cmd.full_name(), "->", cmd_string(cmd))
```

Durations are `datetime.timedelta` values. A positive duration below the
resolution a command accepts becomes its minimum (one second or one
millisecond), and `set`, `set_nx`, `set_xx`, `get_ex` and `set_args` send
`PX` instead of `EX` when the duration is under a second or not a whole
number of seconds. `respcommands.command.KEEP_TTL` passed as the expiration
of `set`, `set_nx` or `set_xx` sends `KEEPTTL`.

Each family can also be used on its own, for example
`respcommands.strings.StringCommands` or `respcommands.streams.StreamCommands`,
constructed the same way with the callable that processes commands.

Methods that take several values (`hset`, `mset`, `lpush`, `sadd`, `zrem` and
others) accept them as separate arguments, as one list, as one mapping, or as
one dataclass whose fields carry a `redis` name in their metadata
(`field(metadata={"redis": "name,omitempty"})`).

## Option objects

Commands with many options take small dataclasses:

```python
import datetime

from respcommands.keyspace import Sort
from respcommands.sortedsets import Z, ZRangeArgs, ZStore
from respcommands.streams import XAddArgs, XReadArgs
from respcommands.strings import SetArgs

client.xadd(XAddArgs(stream="events", values={"kind": "login"}))
client.xread(XReadArgs(streams=["events", "0"], count=10))
client.zadd("board", Z(score=10, member="ada"), Z(score=7, member="bob"))
client.zrange_args(ZRangeArgs(key="board", start=0, stop=-1, rev=True))
client.zunionstore("total", ZStore(keys=["a", "b"], weights=[1, 2]))
client.sort("items", Sort(order="desc", alpha=True))
client.set_args("lock", "1", SetArgs(mode="nx", ttl=datetime.timedelta(seconds=30)))
```

Authentication follows the same pattern:

```python
password = "password"
client.auth(password)
```

`shutdown`, `shutdown_save` and `shutdown_no_save` treat an `EOFError` from
your callable as success; if the server answers instead, the reply is stored
as a `RuntimeError` on `cmd.err`.

## Errors

`respcommands.errors` classifies errors the way a client needs to when
deciding what to do next:

- `RedisError` is an error reply from the server; `has_error_prefix` checks
  its message, ignoring a leading `ERR `.
- `should_retry(err, retry_timeout)` is true for `EOFError`, other `OSError`s,
  `LOADING`, `READONLY`, `CLUSTERDOWN` and `TRYAGAIN` replies and a full
  server, and for `TimeoutError` only when `retry_timeout` is set.
- `is_bad_conn(err, allow_timeout, addr)` says whether the connection should
  be dropped.
- `is_moved_error(err)` returns a `Redirect(moved, ask, addr)` for `MOVED`
  and `ASK` replies.
- `is_loading_error`, `is_read_only_error` and `is_moved_same_conn_addr`
  check single conditions.
- `ClientClosedError` is the error for work on a closed client.

## Readable command strings

`respcommands.cmdstring` renders commands for logs and traces.
`cmd_string(cmd)` gives one line: the first 33 arguments, each cut to 64
bytes, shown as hex when they contain bytes outside printable ASCII, and the
error appended after `": "`. `cmds_string(cmds)` returns a summary of up to
ten distinct command names and the rendered commands, one per line, for the
first 101 commands. `format_arg(value)` renders a single argument.

## Running the tests

```
pip install respcommands[test]
pytest
```