import datetime

import pytest

from respcommands.command import KEEP_TTL, ReplyKind
from respcommands.errors import RedisError
from respcommands.strings import BitCount, SetArgs, StringCommands

td = datetime.timedelta


@pytest.fixture
def rec():
    sent = []

    def process(cmd):
        sent.append(cmd)
        cmd.val = "OK"

    return StringCommands(process), sent


def test_set_plain(rec):
    cmds, sent = rec
    cmd = cmds.set("k", "v")
    assert cmd.args == ["set", "k", "v"]
    assert cmd.kind is ReplyKind.STATUS
    assert sent == [cmd]
    assert cmd.result() == "OK"


def test_set_seconds_and_millis(rec):
    cmds, _ = rec
    assert cmds.set("k", "v", td(seconds=10)).args == ["set", "k", "v", "ex", 10]
    assert cmds.set("k", "v", td(milliseconds=1500)).args == ["set", "k", "v", "px", 1500]


def test_set_keep_ttl(rec):
    cmds, _ = rec
    assert cmds.set("k", "v", KEEP_TTL).args == ["set", "k", "v", "keepttl"]


def test_set_nx_variants(rec):
    cmds, _ = rec
    assert cmds.set_nx("k", "v").args == ["setnx", "k", "v"]
    assert cmds.set_nx("k", "v", KEEP_TTL).args == ["set", "k", "v", "keepttl", "nx"]
    assert cmds.set_nx("k", "v", td(seconds=3)).args == ["set", "k", "v", "ex", 3, "nx"]
    assert cmds.set_nx("k", "v").kind is ReplyKind.BOOL


def test_set_xx_variants(rec):
    cmds, _ = rec
    assert cmds.set_xx("k", "v").args == ["set", "k", "v", "xx"]
    assert cmds.set_xx("k", "v", td(milliseconds=250)).args == [
        "set", "k", "v", "px", 250, "xx",
    ]


def test_set_args_order(rec):
    cmds, _ = rec
    args = SetArgs(mode="NX", ttl=td(seconds=5), get=True, keep_ttl=True)
    assert cmds.set_args("k", "v", args).args == [
        "set", "k", "v", "keepttl", "ex", 5, "NX", "get",
    ]


def test_set_args_expire_at(rec):
    cmds, _ = rec
    when = datetime.datetime(1970, 1, 1, 0, 0, 42, tzinfo=datetime.timezone.utc)
    assert cmds.set_args("k", "v", SetArgs(expire_at=when)).args == [
        "set", "k", "v", "exat", 42,
    ]


def test_get_ex(rec):
    cmds, _ = rec
    assert cmds.get_ex("k", td(0)).args == ["getex", "k", "persist"]
    assert cmds.get_ex("k", td(seconds=2)).args == ["getex", "k", "ex", 2]
    assert cmds.get_ex("k", td(seconds=-2)).args == ["getex", "k"]


def test_set_ex(rec):
    cmds, _ = rec
    assert cmds.set_ex("k", "v", td(seconds=7)).args == ["setex", "k", 7, "v"]


def test_mset_forms_agree(rec):
    cmds, _ = rec
    flat = cmds.mset("a", "1", "b", "2").args
    assert cmds.mset(["a", "1", "b", "2"]).args == flat
    assert cmds.mset({"a": "1", "b": "2"}).args == flat
    assert flat[0] == "mset"
    assert cmds.msetnx({"a": "1"}).args == ["msetnx", "a", "1"]


def test_incr_family(rec):
    cmds, _ = rec
    assert cmds.incr("k").args == ["incr", "k"]
    assert cmds.incr_by("k", 3).args == ["incrby", "k", 3]
    assert cmds.decr_by("k", 3).args == ["decrby", "k", 3]
    cmd = cmds.incr_by_float("k", 0.5)
    assert cmd.args == ["incrbyfloat", "k", 0.5]
    assert cmd.kind is ReplyKind.FLOAT


def test_bit_count(rec):
    cmds, _ = rec
    assert cmds.bit_count("k").args == ["bitcount", "k"]
    assert cmds.bit_count("k", BitCount(1, 2)).args == ["bitcount", "k", 1, 2]


def test_bit_ops(rec):
    cmds, _ = rec
    assert cmds.bit_op_and("d", "a", "b").args == ["bitop", "and", "d", "a", "b"]
    assert cmds.bit_op_not("d", "a").args == ["bitop", "not", "d", "a"]


def test_bit_pos(rec):
    cmds, _ = rec
    assert cmds.bit_pos("k", 1).args == ["bitpos", "k", 1]
    assert cmds.bit_pos("k", 1, 2, 4).args == ["bitpos", "k", 1, 2, 4]
    with pytest.raises(ValueError):
        cmds.bit_pos("k", 1, 2, 3, 4)
    assert cmds.bit_pos_span("k", 0, 1, 5, "bit").args == ["bitpos", "k", 0, 1, 5, "bit"]


def test_bit_field(rec):
    cmds, _ = rec
    cmd = cmds.bit_field("k", "get", "u8", 0)
    assert cmd.args == ["bitfield", "k", "get", "u8", 0]
    assert cmd.kind is ReplyKind.INT_SLICE


def test_error_is_stored_on_command():
    def process(cmd):
        raise RedisError("WRONGTYPE bad")

    cmd = StringCommands(process).get("k")
    assert isinstance(cmd.err, RedisError)
    with pytest.raises(RedisError):
        cmd.result()