"""Testing helpers – a fake daemon and pytest fixtures."""
from sysdlog.testing.fakes import FakeSyslogDaemon

__all__ = ["FakeSyslogDaemon"]
