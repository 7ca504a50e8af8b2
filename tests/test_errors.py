import asyncio

import pytest

from respcommands.errors import (
    ClientClosedError,
    RedisError,
    has_error_prefix,
    is_bad_conn,
    is_loading_error,
    is_moved_error,
    is_moved_same_conn_addr,
    is_read_only_error,
    is_redis_error,
    should_retry,
)


def test_has_error_prefix_strips_err():
    assert has_error_prefix(RedisError("ERR WRONGTYPE bad"), "WRONGTYPE") is True
    assert has_error_prefix(RedisError("NOSCRIPT no"), "NOSCRIPT") is True


def test_has_error_prefix_requires_redis_error():
    assert has_error_prefix(ValueError("NOSCRIPT no"), "NOSCRIPT") is False
    assert has_error_prefix(None, "X") is False


@pytest.mark.parametrize(
    "err",
    [
        EOFError(),
        ConnectionResetError(),
        RedisError("ERR max number of clients reached"),
        RedisError("LOADING dataset"),
        RedisError("READONLY replica"),
        RedisError("CLUSTERDOWN down"),
        RedisError("TRYAGAIN later"),
    ],
)
def test_should_retry_true(err):
    assert should_retry(err, False) is True


@pytest.mark.parametrize(
    "err",
    [None, asyncio.CancelledError(), RedisError("ERR unknown"), RedisError("LOADING")],
)
def test_should_retry_false(err):
    assert should_retry(err, True) is False


def test_should_retry_timeout_follows_flag():
    assert should_retry(TimeoutError(), True) is True
    assert should_retry(TimeoutError(), False) is False


def test_is_redis_error():
    assert is_redis_error(RedisError("x")) is True
    assert is_redis_error(ValueError("x")) is False


def test_is_moved_error_moved():
    result = is_moved_error(RedisError("MOVED 3999 127.0.0.1:6381"))
    assert result == (True, False, "127.0.0.1:6381")


def test_is_moved_error_ask():
    result = is_moved_error(RedisError("ASK 3999 127.0.0.1:6381"))
    assert result.ask is True
    assert result.moved is False
    assert result.addr == "127.0.0.1:6381"


def test_is_moved_error_other():
    assert is_moved_error(RedisError("ERR x")) == (False, False, "")
    assert is_moved_error(ValueError("MOVED 1 a:1")) == (False, False, "")


def test_is_loading_and_read_only():
    assert is_loading_error(RedisError("LOADING x")) is True
    assert is_loading_error(RedisError("ERR x")) is False
    assert is_read_only_error(RedisError("READONLY x")) is True
    assert is_read_only_error(RedisError("LOADING x")) is False


def test_is_moved_same_conn_addr():
    err = RedisError("MOVED 1 host:6379")
    assert is_moved_same_conn_addr(err, "host:6379") is True
    assert is_moved_same_conn_addr(err, "other:6379") is False
    assert is_moved_same_conn_addr(RedisError("ASK 1 host:6379"), "host:6379") is False


def test_is_bad_conn():
    assert is_bad_conn(None, False, "a:1") is False
    assert is_bad_conn(asyncio.CancelledError(), False, "a:1") is True
    assert is_bad_conn(RedisError("ERR x"), False, "a:1") is False
    assert is_bad_conn(RedisError("READONLY x"), False, "a:1") is True
    assert is_bad_conn(RedisError("MOVED 1 a:1"), False, "a:1") is True
    assert is_bad_conn(RedisError("MOVED 1 b:1"), False, "a:1") is False


def test_is_bad_conn_timeout():
    assert is_bad_conn(TimeoutError(), True, "a:1") is False
    assert is_bad_conn(TimeoutError(), False, "a:1") is True
    assert is_bad_conn(ConnectionResetError(), True, "a:1") is True


def test_client_closed_error_is_exception():
    with pytest.raises(ClientClosedError):
        raise ClientClosedError()
    assert is_redis_error(ClientClosedError()) is False