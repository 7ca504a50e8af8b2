"""Builders for Redis commands, reply kinds, command strings and error classification."""

__version__ = "0.1.0"