"""Testing fixtures – pytest fixtures around :class:`FakeSyslogDaemon`.

Enable with ``pytest_plugins = ["sysdlog.testing.fixtures"]``.
"""
from __future__ import annotations

import os
import shutil
import tempfile

try:
    import pytest

    @pytest.fixture
    def syslog_daemon():
        """Pytest fixture: a running FakeSyslogDaemon on a private socket path.

        The path lives in a short ``mkdtemp`` directory because ``AF_UNIX``
        paths are limited to ~100 bytes, which pytest's ``tmp_path`` can exceed.
        """
        from sysdlog.testing.fakes import FakeSyslogDaemon

        directory = tempfile.mkdtemp(prefix="sysdlog-")
        daemon = FakeSyslogDaemon(os.path.join(directory, "log.sock"))
        try:
            yield daemon
        finally:
            daemon.close()
            shutil.rmtree(directory, ignore_errors=True)

    @pytest.fixture
    def syslog_settings(syslog_daemon):
        """Pytest fixture: SysdlogSettings pointing at ``syslog_daemon``."""
        return syslog_daemon.settings()

except ImportError:
    pass

__all__ = ["syslog_daemon", "syslog_settings"]
