"""Builders for the endpoint strings that the booking transport accepts."""

from __future__ import annotations

import sys

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 50051
DEFAULT_SOCKET = "/tmp/booking.sock"


def tcp(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> str:
    """Return a TCP endpoint of the form ``host:port``."""
    return f"{host}:{port}"


def ipc(path: str = DEFAULT_SOCKET) -> str:
    """Return a ``unix:<path>`` socket URI, or an empty string on Windows."""
    if sys.platform == "win32":
        return ""
    return f"unix:{path}"