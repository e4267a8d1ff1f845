"""Logging – structlog wrapped logger backed by :class:`Sysdlog`.

structlog hands the rendered event to ``getattr(logger, method_name)``;
:class:`SysdlogStructLogger` turns that method name into a severity, the
same way ``structlog.PrintLogger`` turns it into a ``print``.
"""
from __future__ import annotations

from typing import Any

from sysdlog.logger import Sysdlog
from sysdlog.severity import Severity


class SysdlogStructLogger:
    """structlog "wrapped logger" writing to a :class:`Sysdlog`."""

    def __init__(self, sysdlog: Sysdlog) -> None:
        self._sysdlog = sysdlog

    @property
    def sysdlog(self) -> Sysdlog:
        return self._sysdlog

    def _emit(self, severity: Severity, message: str) -> None:
        self._sysdlog.log_at(severity, message)

    def emerg(self, message: str) -> None:
        self._emit(Severity.EMERG, message)

    def alert(self, message: str) -> None:
        self._emit(Severity.ALERT, message)

    def critical(self, message: str) -> None:
        self._emit(Severity.CRIT, message)

    def error(self, message: str) -> None:
        self._emit(Severity.ERR, message)

    def warning(self, message: str) -> None:
        self._emit(Severity.WARNING, message)

    def notice(self, message: str) -> None:
        self._emit(Severity.NOTICE, message)

    def info(self, message: str) -> None:
        self._emit(Severity.INFO, message)

    def debug(self, message: str) -> None:
        self._emit(Severity.DEBUG, message)

    fatal = critical
    err = exception = failure = error
    warn = warning
    msg = log = info

    def __repr__(self) -> str:
        return f"<SysdlogStructLogger(sysdlog={self._sysdlog!r})>"


class SysdlogStructLoggerFactory:
    """structlog ``logger_factory`` producing loggers that share one connection."""

    def __init__(self, sysdlog: Sysdlog) -> None:
        self._sysdlog = sysdlog

    def __call__(self, *args: Any) -> SysdlogStructLogger:  # noqa: ARG002
        return SysdlogStructLogger(self._sysdlog)


def render_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:  # noqa: ARG001
    """Final structlog processor: emit the event text only.

    Stack and exception text rendered by earlier processors are appended on
    their own lines.  Other keys are dropped; the daemon records metadata
    itself.
    """
    parts = [str(event_dict.get("event", ""))]
    for key in ("stack", "exception"):
        value = event_dict.get(key)
        if value:
            parts.append(str(value))
    return "\n".join(parts)


__all__ = [
    "SysdlogStructLogger",
    "SysdlogStructLoggerFactory",
    "render_event",
]
