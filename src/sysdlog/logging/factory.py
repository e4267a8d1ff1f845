"""Logging – ready-made front ends wired to a fresh :class:`Sysdlog`."""
from __future__ import annotations

import logging

import structlog

from sysdlog.logger import Sysdlog
from sysdlog.logging.structured import SysdlogStructLoggerFactory, render_event
from sysdlog.settings import SysdlogSettings


def new_logger(
    name: str = "sysdlog",
    level: int = logging.NOTSET,
    fmt: str = "%(message)s",
    datefmt: str | None = None,
    settings: SysdlogSettings | None = None,
) -> logging.Logger:
    """Return a stdlib logger whose only output is a new, unprefixed
    :class:`Sysdlog`.

    The logger is created directly rather than through
    :func:`logging.getLogger`, so each call yields an independent instance
    that does not propagate to the root logger.  Records go through a
    :class:`logging.StreamHandler`, hence all of them are tagged ``ERR``;
    use :class:`~sysdlog.logging.handler.SysdlogHandler` for per-level
    severities.

    Raises :class:`~sysdlog.errors.ConnectionError` if the daemon is not
    reachable.
    """
    sink = Sysdlog("", settings)
    handler = logging.StreamHandler(sink)
    handler.setFormatter(logging.Formatter(fmt, datefmt))
    logger = logging.Logger(name, level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


class SysdlogLoggerFactory:
    """Configure structlog to write through a :class:`Sysdlog`."""

    @staticmethod
    def configure(
        prefix: str = "",
        level: int = logging.INFO,
        settings: SysdlogSettings | None = None,
    ) -> Sysdlog:
        """Point structlog at a new connection and return that connection.

        No timestamp or level is rendered: the severity travels in the frame
        tag and the daemon stamps time, host and pid.  The caller owns the
        returned :class:`Sysdlog` and should close it on shutdown.
        """
        sysdlog = Sysdlog(prefix, settings)
        structlog.configure(
            processors=[
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                render_event,
            ],
            logger_factory=SysdlogStructLoggerFactory(sysdlog),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            cache_logger_on_first_use=True,
        )
        return sysdlog


__all__ = ["SysdlogLoggerFactory", "new_logger"]
