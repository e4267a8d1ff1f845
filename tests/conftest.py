"""Shared fixtures: a fake syslog daemon per test."""
from __future__ import annotations

from sysdlog.testing.fixtures import syslog_daemon, syslog_settings  # noqa: F401
