"""Syslog severities and their wire tags."""
from __future__ import annotations

import enum
import logging


class Severity(enum.IntEnum):
    """Standard syslog severity, ordered from most to least urgent.

    The value is the numeric code the daemon expects; :attr:`tag` is the
    bracketed token written at the start of every frame.
    """

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def tag(self) -> str:
        return f"<{self.value}>"

    @classmethod
    def from_logging_level(cls, levelno: int) -> Severity:
        """Map a stdlib ``logging`` level number onto the nearest severity."""
        if levelno >= logging.CRITICAL:
            return cls.CRIT
        if levelno >= logging.ERROR:
            return cls.ERR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


__all__ = ["Severity"]
