"""Unit tests for open_connection and the connection state values."""
from __future__ import annotations

import socket

import pytest

from sysdlog import SysdlogSettings
from sysdlog.errors import ConnectionError
from sysdlog.testing import FakeSyslogDaemon
from sysdlog.transport import Closed, Connected, Disconnected, discard, open_connection


class TestOpenConnection:
    def test_timeout_applied(self, syslog_daemon: FakeSyslogDaemon) -> None:
        sock = open_connection(syslog_daemon.settings(timeout=0.5))
        try:
            assert sock.gettimeout() == 0.5
        finally:
            sock.close()

    def test_no_timeout_stays_blocking(self, syslog_daemon: FakeSyslogDaemon) -> None:
        sock = open_connection(syslog_daemon.settings(timeout=None))
        try:
            assert sock.gettimeout() is None
            assert sock.getblocking()
        finally:
            sock.close()

    def test_datagram_socket_connected_to_address(self, syslog_daemon: FakeSyslogDaemon) -> None:
        sock = open_connection(syslog_daemon.settings())
        try:
            assert sock.family == socket.AF_UNIX
            assert sock.type == socket.SOCK_DGRAM
            assert sock.getpeername() == syslog_daemon.address
        finally:
            sock.close()

    def test_missing_path_raises_connection_error(self) -> None:
        with pytest.raises(ConnectionError) as exc_info:
            open_connection(SysdlogSettings(address="/nonexistent-sysdlog-dir/log.sock"))
        assert isinstance(exc_info.value.cause, FileNotFoundError)


class TestConnectionState:
    def test_variants_are_distinct_values(self) -> None:
        assert Disconnected() == Disconnected()
        assert Closed() != Disconnected()

    def test_connected_holds_socket(self, syslog_daemon: FakeSyslogDaemon) -> None:
        sock = open_connection(syslog_daemon.settings())
        state = Connected(sock)
        assert state.sock is sock
        discard(sock)
        discard(sock)
        assert sock.fileno() == -1
