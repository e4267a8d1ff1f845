"""Connection settings for :class:`~sysdlog.logger.Sysdlog`."""
from __future__ import annotations

import codecs
import dataclasses

from sysdlog.errors import InvalidSettingValueError

DEFAULT_ADDRESS = "/dev/log"


@dataclasses.dataclass(frozen=True)
class SysdlogSettings:
    """Where and how to reach the local logging daemon.

    Parameters
    ----------
    address:
        Filesystem path of the daemon's datagram socket.
    timeout:
        Seconds a single connect/send may block.  ``None`` keeps the
        socket fully blocking.
    encoding:
        Codec used to turn frames into bytes.
    """

    address: str = DEFAULT_ADDRESS
    timeout: float | None = None
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not self.address:
            raise InvalidSettingValueError("address", self.address, "must be a non-empty path")
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive or None")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise InvalidSettingValueError("encoding", self.encoding, "unknown codec") from exc


__all__ = ["DEFAULT_ADDRESS", "SysdlogSettings"]
