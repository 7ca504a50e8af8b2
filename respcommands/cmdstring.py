"""Short, log-friendly text renderings of commands."""

from __future__ import annotations

import datetime
import math
from decimal import Decimal
from itertools import islice
from typing import Any, Iterable

from .command import Command

_NUM_ARG_LIMIT = 32
_ARG_LEN_LIMIT = 64
_NUM_CMD_LIMIT = 100
_NUM_NAME_LIMIT = 10


def cmd_string(cmd: Command) -> str:
    """Render one command with its arguments and any error."""
    text = " ".join(format_arg(arg) for arg in islice(cmd.args, _NUM_ARG_LIMIT + 1))
    if cmd.err is not None:
        text += ": " + str(cmd.err)
    return text


def cmds_string(cmds: Iterable[Command]) -> tuple[str, str]:
    """Return a summary of distinct command names and the rendered commands."""
    names: list[str] = []
    lines: list[str] = []
    for cmd in islice(cmds, _NUM_CMD_LIMIT + 1):
        lines.append(cmd_string(cmd))
        if len(names) >= _NUM_NAME_LIMIT:
            continue
        name = cmd.full_name()
        if name not in names:
            names.append(name)
    return " ".join(names), "\n".join(lines)


def format_arg(value: Any) -> str:
    """Render one argument; non-printable text is shown as hex."""
    if value is None:
        return "<nil>"
    if isinstance(value, str):
        return _format_bytes(value.encode("utf-8")[:_ARG_LEN_LIMIT])
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _format_bytes(bytes(value)[:_ARG_LEN_LIMIT])
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, datetime.datetime):
        return _format_time(value)
    return str(value)


def _format_bytes(data: bytes) -> str:
    if all(0x21 <= byte <= 0x7E for byte in data):
        return data.decode("ascii")
    return data.hex()


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_time(value: datetime.datetime) -> str:
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    fraction = f"{value.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    offset = value.utcoffset()
    if not offset:
        return text + "Z"
    sign = "+" if offset >= datetime.timedelta(0) else "-"
    minutes = abs(offset) // datetime.timedelta(minutes=1)
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"