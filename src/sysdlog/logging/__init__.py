"""Logging – stdlib and structlog front ends for :class:`~sysdlog.Sysdlog`."""
from sysdlog.logging.factory import SysdlogLoggerFactory, new_logger
from sysdlog.logging.handler import SysdlogHandler
from sysdlog.logging.structured import (
    SysdlogStructLogger,
    SysdlogStructLoggerFactory,
    render_event,
)

__all__ = [
    "SysdlogHandler",
    "SysdlogLoggerFactory",
    "SysdlogStructLogger",
    "SysdlogStructLoggerFactory",
    "new_logger",
    "render_event",
]
