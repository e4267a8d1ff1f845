"""Sysdlog – severity-tagged writer for the local syslog/journald socket.

A :class:`Sysdlog` owns one ``AF_UNIX``/``SOCK_DGRAM`` connection to the
daemon (``/dev/log`` by default) and writes one datagram per message::

    <6> [app] hello\\n

Timestamp, hostname and pid are left out; the daemon adds them.

Usage::

    from sysdlog import Sysdlog

    with Sysdlog("[billing] ") as log:
        log.info("invoice sent")
        log.warningf("retrying %s in %ds", "payment-42", 5)

The daemon tends to strip prefixes shaped like ``"name: "`` or
``"[name]: "``; prefer ``"[name] "`` or ``"<name> "``.
"""
from __future__ import annotations

import socket
import threading
from types import TracebackType
from typing import Any

from sysdlog.errors import LoggerClosedError, WriteError
from sysdlog.frame import ERRORS, encode_frame, encode_text, format_message
from sysdlog.settings import SysdlogSettings
from sysdlog.severity import Severity
from sysdlog.transport import (
    Closed,
    Connected,
    ConnectionState,
    Disconnected,
    discard,
    open_connection,
)


class Sysdlog:
    """Connection to the local logging daemon.

    Parameters
    ----------
    prefix:
        Text placed between the severity tag and every message.  Passed
        through verbatim; include any spacing or brackets you want.
    settings:
        Endpoint address, socket timeout and encoding.  Defaults to
        :class:`SysdlogSettings` (``/dev/log``, blocking, UTF-8).

    The connection is opened eagerly: construction raises
    :class:`~sysdlog.errors.ConnectionError` when the daemon is unreachable.

    Instances are thread-safe.  One lock covers the whole
    check → reconnect → send sequence, so concurrent writers never
    interleave frames or race each other to reconnect.

    The object is also a minimal text/binary stream (:meth:`write`,
    :meth:`flush`) and can back a :class:`logging.StreamHandler`.
    """

    def __init__(self, prefix: str = "", settings: SysdlogSettings | None = None) -> None:
        self._prefix = prefix
        self._settings = settings or SysdlogSettings()
        self._lock = threading.Lock()
        self._state: ConnectionState = Connected(open_connection(self._settings))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def settings(self) -> SysdlogSettings:
        return self._settings

    @property
    def closed(self) -> bool:
        return isinstance(self._state, Closed)

    # ------------------------------------------------------------------
    # Core write path
    # ------------------------------------------------------------------

    def log_at(self, severity: Severity, message: str) -> int:
        """Send *message* tagged with *severity* as a single datagram.

        Returns the number of encoded message bytes (tag, prefix and any
        appended newline excluded).

        A broken connection is replaced at most once per call: one send on
        the current socket, one reconnect, one more send.  Raises
        :class:`~sysdlog.errors.ConnectionError` when the reconnect fails,
        :class:`~sysdlog.errors.WriteError` when the send on the fresh
        socket fails and :class:`~sysdlog.errors.LoggerClosedError` after
        :meth:`close`.
        """
        severity = Severity(severity)
        frame = encode_frame(severity, self._prefix, message, self._settings.encoding)
        size = len(encode_text(message, self._settings.encoding))

        with self._lock:
            match self._state:
                case Closed():
                    raise LoggerClosedError(self._settings.address)
                case Connected(sock=sock):
                    try:
                        self._send(sock, frame)
                        return size
                    except (OSError, WriteError):
                        discard(sock)
                        self._state = Disconnected()
                case Disconnected():
                    pass

            sock = open_connection(self._settings)
            self._state = Connected(sock)
            try:
                self._send(sock, frame)
            except OSError as exc:
                raise WriteError(self._settings.address, cause=exc) from exc
            return size

    def _send(self, sock: socket.socket, frame: bytes) -> None:
        sent = sock.send(frame)
        if sent != len(frame):
            raise WriteError(
                self._settings.address,
                f"Short write to '{self._settings.address}': {sent} of {len(frame)} bytes",
            )

    # ------------------------------------------------------------------
    # Per-severity helpers
    # ------------------------------------------------------------------

    def emerg(self, message: str) -> None:
        self.log_at(Severity.EMERG, message)

    def alert(self, message: str) -> None:
        self.log_at(Severity.ALERT, message)

    def crit(self, message: str) -> None:
        self.log_at(Severity.CRIT, message)

    def err(self, message: str) -> None:
        self.log_at(Severity.ERR, message)

    def warning(self, message: str) -> None:
        self.log_at(Severity.WARNING, message)

    def notice(self, message: str) -> None:
        self.log_at(Severity.NOTICE, message)

    def info(self, message: str) -> None:
        self.log_at(Severity.INFO, message)

    def debug(self, message: str) -> None:
        self.log_at(Severity.DEBUG, message)

    def emergf(self, fmt: str, *args: Any) -> None:
        self.log_at(Severity.EMERG, format_message(fmt, args))

    def alertf(self, fmt: str, *args: Any) -> None:
        self.log_at(Severity.ALERT, format_message(fmt, args))

    def critf(self, fmt: str, *args: Any) -> None:
        self.log_at(Severity.CRIT, format_message(fmt, args))

    def errf(self, fmt: str, *args: Any) -> None:
        self.log_at(Severity.ERR, format_message(fmt, args))

    def warningf(self, fmt: str, *args: Any) -> None:
        self.log_at(Severity.WARNING, format_message(fmt, args))

    def noticef(self, fmt: str, *args: Any) -> None:
        self.log_at(Severity.NOTICE, format_message(fmt, args))

    def infof(self, fmt: str, *args: Any) -> None:
        self.log_at(Severity.INFO, format_message(fmt, args))

    def debugf(self, fmt: str, *args: Any) -> None:
        self.log_at(Severity.DEBUG, format_message(fmt, args))

    # ------------------------------------------------------------------
    # Stream interface
    # ------------------------------------------------------------------

    def write(self, data: bytes | str) -> int:
        """Log *data* at :attr:`Severity.ERR` and return ``len(data)``.

        The stream protocol carries no severity, so everything written
        through it is tagged as an error.  The count excludes framing: for
        ``bytes`` it is the number of bytes, for ``str`` the number of
        characters, as :class:`io.TextIOBase.write` reports.
        """
        if isinstance(data, (bytes, bytearray, memoryview)):
            text = bytes(data).decode(self._settings.encoding, ERRORS)
        else:
            text = data
        self.log_at(Severity.ERR, text)
        return len(data)

    def flush(self) -> None:
        """Datagrams are never buffered; present for stream compatibility."""

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the connection.  Every later write raises
        :class:`~sysdlog.errors.LoggerClosedError`.  Safe to call twice."""
        with self._lock:
            if isinstance(self._state, Connected):
                discard(self._state.sock)
            self._state = Closed()

    def __enter__(self) -> Sysdlog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self._prefix!r}, "
            f"address={self._settings.address!r}, state={type(self._state).__name__})"
        )


__all__ = ["Sysdlog"]
