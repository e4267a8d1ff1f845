"""
sysdlog – write to the local syslog/journald socket.

Import path convention::

    from sysdlog import Sysdlog, Severity
    from sysdlog.errors import ConnectionError, WriteError
    from sysdlog.logging import SysdlogHandler, new_logger
"""

from sysdlog.errors import (
    ConnectionError,
    LoggerClosedError,
    SysdlogError,
    WriteError,
)
from sysdlog.logger import Sysdlog
from sysdlog.logging import new_logger
from sysdlog.settings import DEFAULT_ADDRESS, SysdlogSettings
from sysdlog.severity import Severity

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_ADDRESS",
    "ConnectionError",
    "LoggerClosedError",
    "Severity",
    "Sysdlog",
    "SysdlogError",
    "SysdlogSettings",
    "WriteError",
    "__version__",
    "new_logger",
]
