"""Datagram transport to the local logging daemon.

The connection is modelled as a tagged variant instead of a nullable
socket, so every code path has to say what it does in each state::

    Disconnected ──connect──▶ Connected ──send fails──▶ Disconnected
         │                        │
         └─────────close──────────┴──────────▶ Closed   (terminal)
"""
from __future__ import annotations

import contextlib
import dataclasses
import socket

from sysdlog.errors import ConnectionError
from sysdlog.settings import SysdlogSettings


@dataclasses.dataclass(frozen=True, slots=True)
class Disconnected:
    """No usable socket; the next write must reconnect first."""


@dataclasses.dataclass(frozen=True, slots=True)
class Connected:
    """An open socket, believed healthy until a send says otherwise."""

    sock: socket.socket


@dataclasses.dataclass(frozen=True, slots=True)
class Closed:
    """Explicitly closed by the owner. Nothing may reopen it."""


ConnectionState = Disconnected | Connected | Closed


def open_connection(settings: SysdlogSettings) -> socket.socket:
    """Open a datagram socket connected to ``settings.address``.

    Raises :class:`~sysdlog.errors.ConnectionError` when the path is missing
    or nothing is listening on it.  The socket is never returned half-open.
    """
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    try:
        if settings.timeout is not None:
            sock.settimeout(settings.timeout)
        sock.connect(settings.address)
    except OSError as exc:
        sock.close()
        raise ConnectionError(settings.address, cause=exc) from exc
    return sock


def discard(sock: socket.socket) -> None:
    """Close a socket that is already considered broken."""
    with contextlib.suppress(OSError):
        sock.close()


__all__ = [
    "Closed",
    "Connected",
    "ConnectionState",
    "Disconnected",
    "discard",
    "open_connection",
]
