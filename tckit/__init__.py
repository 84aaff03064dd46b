"""Byte buffers, microsecond time utilities and a pluggable logging framework."""

__version__ = "0.1.0"