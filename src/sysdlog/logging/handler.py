"""Logging – SysdlogHandler.

A :class:`logging.Handler` that forwards each record to the daemon with a
severity derived from the record's level, unlike the plain stream route
(:func:`~sysdlog.logging.factory.new_logger`) which tags everything
``ERR``.
"""
from __future__ import annotations

import logging

from sysdlog.logger import Sysdlog
from sysdlog.settings import SysdlogSettings
from sysdlog.severity import Severity


class SysdlogHandler(logging.Handler):
    """Send stdlib log records to the local logging daemon.

    Typical usage::

        handler = SysdlogHandler(prefix="[worker] ")
        handler.setFormatter(logging.Formatter("%(name)s %(message)s"))
        logging.getLogger().addHandler(handler)

    Parameters
    ----------
    sysdlog:
        An existing connection to share.  When omitted the handler opens its
        own (using *prefix* and *settings*) and closes it in :meth:`close`.
    prefix:
        Prefix for a handler-owned connection.
    settings:
        Settings for a handler-owned connection.
    level:
        Log level filter (same as any :class:`logging.Handler`).
    """

    def __init__(
        self,
        sysdlog: Sysdlog | None = None,
        *,
        prefix: str = "",
        settings: SysdlogSettings | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self._owns_sysdlog = sysdlog is None
        self._sysdlog = sysdlog if sysdlog is not None else Sysdlog(prefix, settings)

    @property
    def sysdlog(self) -> Sysdlog:
        return self._sysdlog

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self._sysdlog.log_at(Severity.from_logging_level(record.levelno), msg)
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def close(self) -> None:
        try:
            if self._owns_sysdlog:
                self._sysdlog.close()
        finally:
            super().close()


__all__ = ["SysdlogHandler"]
