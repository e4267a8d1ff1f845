"""sysdlog error hierarchy.

Hierarchy::

    SysdlogError
    ├── ConfigError
    │   └── InvalidSettingValueError
    └── TransportError
        ├── ConnectionError
        ├── WriteError
        └── LoggerClosedError
"""

from __future__ import annotations

import json
from typing import Any


class SysdlogError(Exception):
    """Root of the sysdlog error hierarchy.

    ``code`` is a machine-readable slug fixed per class; ``cause`` is the
    low-level exception (usually an :class:`OSError`) that triggered it.
    """

    code: str = "sysdlog_error"

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Single-line JSON, safe to hand to any log sink."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class ConfigError(SysdlogError):
    """Raised when settings are invalid."""

    code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A :class:`~sysdlog.settings.SysdlogSettings` field failed validation."""

    code = "invalid_setting_value"

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"{field}={value!r} rejected: {reason}")
        self.field = field
        self.value = value
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["field"] = self.field
        return base


class TransportError(SysdlogError):
    """Failure talking to the local logging endpoint."""

    code = "transport_error"

    def __init__(
        self,
        address: str,
        message: str | None = None,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message or f"Transport failure on '{address}'", cause=cause)
        self.address = address

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["address"] = self.address
        return base


class ConnectionError(TransportError):  # noqa: A001
    """The local logging endpoint could not be opened."""

    code = "connection_error"

    def __init__(
        self, address: str, message: str | None = None, *, cause: BaseException | None = None
    ) -> None:
        super().__init__(address, message or f"Could not connect to '{address}'", cause=cause)


class WriteError(TransportError):
    """A frame could not be handed to an open connection."""

    code = "write_error"

    def __init__(
        self, address: str, message: str | None = None, *, cause: BaseException | None = None
    ) -> None:
        super().__init__(address, message or f"Could not write to '{address}'", cause=cause)


class LoggerClosedError(TransportError):
    """The logger was used after :meth:`Sysdlog.close`."""

    code = "logger_closed"

    def __init__(
        self, address: str, message: str | None = None, *, cause: BaseException | None = None
    ) -> None:
        super().__init__(address, message or f"Logger for '{address}' is closed", cause=cause)


__all__ = [
    "ConfigError",
    "ConnectionError",
    "InvalidSettingValueError",
    "LoggerClosedError",
    "SysdlogError",
    "TransportError",
    "WriteError",
]
