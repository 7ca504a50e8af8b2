"""Error types and the checks that classify errors from a server connection."""

from __future__ import annotations

import asyncio
from typing import NamedTuple


class RedisError(Exception):
    """An error reply sent by the server."""


class ClientClosedError(Exception):
    """Raised for any operation on a closed client."""

    def __init__(self, message: str = "client is closed") -> None:
        super().__init__(message)


class Redirect(NamedTuple):
    """Result of :func:`is_moved_error`."""

    moved: bool
    ask: bool
    addr: str


_RETRY_PREFIXES = ("LOADING ", "READONLY ", "CLUSTERDOWN ", "TRYAGAIN ")


def has_error_prefix(err: BaseException | None, prefix: str) -> bool:
    """True if ``err`` is a server error whose message starts with ``prefix``."""
    if not isinstance(err, RedisError):
        return False
    return str(err).removeprefix("ERR ").startswith(prefix)


def should_retry(err: BaseException | None, retry_timeout: bool) -> bool:
    """Whether a command that failed with ``err`` may be sent again."""
    if isinstance(err, EOFError):
        return True
    if err is None or isinstance(err, asyncio.CancelledError):
        return False
    if isinstance(err, TimeoutError):
        return retry_timeout
    if isinstance(err, OSError):
        return True
    message = str(err)
    if message == "ERR max number of clients reached":
        return True
    return message.startswith(_RETRY_PREFIXES)


def is_redis_error(err: BaseException | None) -> bool:
    """True if ``err`` is an error reply from the server."""
    return isinstance(err, RedisError)


def is_bad_conn(err: BaseException | None, allow_timeout: bool, addr: str) -> bool:
    """Whether the connection that produced ``err`` should be discarded."""
    if err is None:
        return False
    if isinstance(err, asyncio.CancelledError):
        return True
    if is_redis_error(err):
        return is_read_only_error(err) or is_moved_same_conn_addr(err, addr)
    if allow_timeout and isinstance(err, TimeoutError):
        return False
    return True


def is_moved_error(err: BaseException | None) -> Redirect:
    """Detect MOVED and ASK redirections and the address they point to."""
    if not is_redis_error(err):
        return Redirect(False, False, "")
    message = str(err)
    if message.startswith("MOVED "):
        moved, ask = True, False
    elif message.startswith("ASK "):
        moved, ask = False, True
    else:
        return Redirect(False, False, "")
    return Redirect(moved, ask, message.rsplit(" ", 1)[-1])


def is_loading_error(err: BaseException) -> bool:
    """True if the server is still loading its dataset."""
    return str(err).startswith("LOADING ")


def is_read_only_error(err: BaseException) -> bool:
    """True if the server refused a write because it is read only."""
    return str(err).startswith("READONLY ")


def is_moved_same_conn_addr(err: BaseException, addr: str) -> bool:
    """True if ``err`` redirects to the address of the current connection."""
    message = str(err)
    if not message.startswith("MOVED "):
        return False
    return message.endswith(" " + addr)