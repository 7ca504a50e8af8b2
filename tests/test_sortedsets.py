import datetime

import pytest

from respcommands.command import ReplyKind
from respcommands.sortedsets import (
    SortedSetCommands,
    Z,
    ZAddArgs,
    ZRangeArgs,
    ZRangeBy,
    ZStore,
    ZWithKey,
)


@pytest.fixture
def sent():
    return []


@pytest.fixture
def zs(sent):
    return SortedSetCommands(sent.append)


def test_zadd_plain(zs):
    cmd = zs.zadd("k", Z(1.5, "a"), Z(2, "b"))
    assert cmd.args == ["zadd", "k", 1.5, "a", 2, "b"]
    assert cmd.kind is ReplyKind.INT


@pytest.mark.parametrize(
    "method, flag",
    [("zadd_lt", "lt"), ("zadd_gt", "gt"), ("zadd_nx", "nx"), ("zadd_xx", "xx")],
)
def test_zadd_flags(zs, method, flag):
    cmd = getattr(zs, method)("k", Z(1, "a"))
    assert cmd.args == ["zadd", "k", flag, 1, "a"]


def test_zadd_args_nx_excludes_others(zs):
    cmd = zs.zadd_args("k", ZAddArgs(nx=True, xx=True, gt=True, ch=True, members=[Z(1, "m")]))
    assert cmd.args == ["zadd", "k", "nx", "ch", 1, "m"]


def test_zadd_args_gt_wins_over_lt(zs):
    cmd = zs.zadd_args("k", ZAddArgs(xx=True, gt=True, lt=True, members=[Z(1, "m")]))
    assert cmd.args == ["zadd", "k", "xx", "gt", 1, "m"]


def test_zadd_args_incr(zs):
    cmd = zs.zadd_args_incr("k", ZAddArgs(members=[Z(3, "m")]))
    assert cmd.args == ["zadd", "k", "incr", 3, "m"]
    assert cmd.kind is ReplyKind.FLOAT


def test_blocking_pops(zs):
    cmd = zs.bzpopmax(datetime.timedelta(seconds=2), "a", "b")
    assert cmd.args == ["bzpopmax", "a", "b", 2]
    assert cmd.read_timeout == datetime.timedelta(seconds=2)
    assert cmd.kind is ReplyKind.Z_WITH_KEY
    assert zs.bzpopmin(datetime.timedelta(seconds=2), "a").args == ["bzpopmin", "a", 2]


def test_bzmpop_lowers_order(zs):
    cmd = zs.bzmpop(datetime.timedelta(seconds=0), "MAX", 1, "set")
    assert cmd.args == ["bzmpop", 0, 1, "set", "max", "count", 1]


def test_zmpop(zs):
    cmd = zs.zmpop("Min", 5, "s1", "s2")
    assert cmd.args == ["zmpop", 2, "s1", "s2", "min", "count", 5]


def test_zinter_family(zs):
    store = ZStore(keys=["a", "b"], weights=[2, 3], aggregate="SUM")
    cmd = zs.zinter(store)
    assert cmd.args == ["zinter", 2, "a", "b", "weights", 2, 3, "aggregate", "SUM"]
    assert cmd.first_key_pos == 2
    ws = zs.zinter_with_scores(store)
    assert ws.args[-1] == "withscores"
    st = zs.zinterstore("dst", ZStore(keys=["a"]))
    assert st.args == ["zinterstore", "dst", 1, "a"]
    assert st.first_key_pos == 3


def test_zunion_family(zs):
    store = ZStore(keys=["a", "b"])
    assert zs.zunion(store).args == ["zunion", 2, "a", "b"]
    assert zs.zunion_with_scores(store).args == ["zunion", 2, "a", "b", "withscores"]
    st = zs.zunionstore("dst", store)
    assert st.args == ["zunionstore", "dst", 2, "a", "b"]
    assert st.first_key_pos == 3


def test_zintercard(zs):
    assert zs.zintercard(10, "a", "b").args == ["zintercard", 2, "a", "b", "limit", 10]


def test_zpop_counts(zs):
    assert zs.zpopmax("k").args == ["zpopmax", "k"]
    assert zs.zpopmin("k", 3).args == ["zpopmin", "k", 3]
    with pytest.raises(ValueError):
        zs.zpopmax("k", 1, 2)


def test_zrange_and_args(zs):
    assert zs.zrange("k", 0, -1).args == ["zrange", "k", 0, -1]
    ws = zs.zrange_with_scores("k", 0, -1)
    assert ws.args == ["zrange", "k", 0, -1, "withscores"]
    assert ws.kind is ReplyKind.Z_SLICE


def test_zrange_args_rev_by_score_swaps_bounds(zs):
    args = ZRangeArgs(key="k", start="(3", stop=8, by_score=True, rev=True, offset=1, count=2)
    cmd = zs.zrange_args(args)
    assert cmd.args == ["zrange", "k", 8, "(3", "byscore", "rev", "limit", 1, 2]


def test_zrange_args_by_lex(zs):
    cmd = zs.zrange_args(ZRangeArgs(key="k", start="[abc", stop="(def", by_lex=True))
    assert cmd.args == ["zrange", "k", "[abc", "(def", "bylex"]


def test_zrangestore(zs):
    cmd = zs.zrangestore("dst", ZRangeArgs(key="k", start=0, stop=1))
    assert cmd.args == ["zrangestore", "dst", "k", 0, 1]


def test_zrange_by(zs):
    opt = ZRangeBy(min="-inf", max="+inf", offset=0, count=5)
    assert zs.zrange_by_score("k", opt).args == ["zrangebyscore", "k", "-inf", "+inf", "limit", 0, 5]
    assert zs.zrange_by_lex("k", ZRangeBy(min="-", max="+")).args == ["zrangebylex", "k", "-", "+"]
    ws = zs.zrange_by_score_with_scores("k", opt)
    assert ws.args == ["zrangebyscore", "k", "-inf", "+inf", "withscores", "limit", 0, 5]


def test_zrevrange_by_swaps(zs):
    opt = ZRangeBy(min="-inf", max="+inf")
    assert zs.zrevrange_by_score("k", opt).args == ["zrevrangebyscore", "k", "+inf", "-inf"]
    assert zs.zrevrange_by_lex("k", ZRangeBy(min="-", max="+")).args == ["zrevrangebylex", "k", "+", "-"]
    ws = zs.zrevrange_by_score_with_scores("k", opt)
    assert ws.args == ["zrevrangebyscore", "k", "+inf", "-inf", "withscores"]


def test_ranks(zs):
    assert zs.zrank_with_score("k", "m").args == ["zrank", "k", "m", "withscore"]
    assert zs.zrevrank_with_score("k", "m").kind is ReplyKind.RANK_WITH_SCORE
    assert zs.zrevrank("k", "m").args == ["zrevrank", "k", "m"]


def test_zrem_flattens_list(zs):
    assert zs.zrem("k", ["a", "b"]).args == ["zrem", "k", "a", "b"]


def test_zdiff_family(zs):
    d = zs.zdiff("a", "b")
    assert d.args == ["zdiff", 2, "a", "b"]
    assert d.first_key_pos == 2
    assert zs.zdiff_with_scores("a").args == ["zdiff", 1, "a", "withscores"]
    st = zs.zdiffstore("dst", "a", "b")
    assert st.args == ["zdiffstore", "dst", 2, "a", "b"]
    assert st.first_key_pos is None


def test_zscan(zs):
    assert zs.zscan("k", 0, "m*", 10).args == ["zscan", "k", 0, "match", "m*", "count", 10]
    assert zs.zscan("k", 7).args == ["zscan", "k", 7]


def test_commands_are_processed(sent, zs):
    cmd = zs.zcard("k")
    assert sent == [cmd]


def test_zwithkey_carries_key():
    z = ZWithKey(1.0, "m", "k")
    assert (z.score, z.member, z.key) == (1.0, "m", "k")