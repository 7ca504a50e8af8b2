import datetime

import pytest

from respcommands.admin import Commands, ModuleLoadexConfig, ServerCommands
from respcommands.command import ReplyKind
from respcommands.sortedsets import Z


@pytest.fixture
def sent():
    return []


@pytest.fixture
def srv(sent):
    return ServerCommands(sent.append)


def test_module_loadex_config_to_args():
    conf = ModuleLoadexConfig(path="/m.so", conf={"a": 1}, args=["x", "y"])
    assert conf.to_args() == ["MODULE", "LOADEX", "/m.so", "CONFIG", "a", 1, "ARGS", "x", "ARGS", "y"]


def test_module_loadex_sends_args(srv):
    cmd = srv.module_loadex(ModuleLoadexConfig(path="/m.so"))
    assert cmd.args == ["MODULE", "LOADEX", "/m.so"]
    assert cmd.kind is ReplyKind.STRING


def test_client_commands(srv):
    assert srv.client_kill("1.2.3.4:5").args == ["client", "kill", "1.2.3.4:5"]
    assert srv.client_kill_by_filter("type", "normal").args == ["client", "kill", "type", "normal"]
    assert srv.client_unblock_with_error(7).args == ["client", "unblock", 7, "error"]
    assert srv.client_info().kind is ReplyKind.CLIENT_INFO


def test_client_pause_uses_milliseconds(srv):
    cmd = srv.client_pause(datetime.timedelta(milliseconds=250))
    assert cmd.args == ["client", "pause", 250]


def test_flush_variants(srv):
    assert srv.flush_all_async().args == ["flushall", "async"]
    assert srv.flush_db().args == ["flushdb"]


def test_info_sections(srv):
    assert srv.info().args == ["info"]
    assert srv.info("server", "clients").args == ["info", "server", "clients"]


def test_memory_usage(srv):
    cmd = srv.memory_usage("k", 5)
    assert cmd.args == ["memory", "usage", "k", "SAMPLES", 5]
    assert cmd.first_key_pos == 2
    assert srv.memory_usage("k").args == ["memory", "usage", "k"]
    with pytest.raises(ValueError, match="single sample count"):
        srv.memory_usage("k", 1, 2)


def test_acl_commands(srv):
    assert srv.acl_log(0).args == ["acl", "log"]
    assert srv.acl_log(3).args == ["acl", "log", 3]
    assert srv.acl_log_reset().args == ["acl", "log", "reset"]
    assert srv.acl_dry_run("u", "get", "k").args == ["acl", "dryrun", "u", "get", "k"]


def test_shutdown_eof_means_success():
    def process(cmd):
        raise EOFError()

    cmd = ServerCommands(process).shutdown_save()
    assert cmd.args == ["shutdown", "save"]
    assert cmd.err is None


def test_shutdown_reply_becomes_error():
    def process(cmd):
        cmd.val = "refused"

    cmd = ServerCommands(process).shutdown()
    assert cmd.args == ["shutdown"]
    assert cmd.val == ""
    with pytest.raises(RuntimeError, match="refused"):
        cmd.result()


def test_shutdown_keeps_other_errors():
    def process(cmd):
        raise ConnectionResetError("reset")

    cmd = ServerCommands(process).shutdown_no_save()
    assert isinstance(cmd.err, ConnectionResetError)
    assert cmd.args == ["shutdown", "nosave"]


def test_slowlog_and_time(srv):
    assert srv.slowlog_get(10).args == ["slowlog", "get", 10]
    assert srv.time().kind is ReplyKind.TIME


def test_commands_combines_groups(sent):
    rdb = Commands(sent.append)
    rdb.ping()
    rdb.zadd("k", Z(1, "a"))
    rdb.dbsize()
    assert [c.args for c in sent] == [["ping"], ["zadd", "k", 1, "a"], ["dbsize"]]


def test_commands_result_from_process():
    def process(cmd):
        cmd.val = "PONG"

    assert Commands(process).ping().result() == "PONG"