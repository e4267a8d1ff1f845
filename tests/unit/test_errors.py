"""Unit tests for the sysdlog error hierarchy."""
from __future__ import annotations

import json

import pytest

from sysdlog.errors import (
    ConfigError,
    ConnectionError,
    InvalidSettingValueError,
    LoggerClosedError,
    SysdlogError,
    TransportError,
    WriteError,
)


class TestSysdlogError:
    def test_defaults(self) -> None:
        err = SysdlogError("boom")
        assert err.message == "boom"
        assert err.code == "sysdlog_error"
        assert err.cause is None

    def test_to_dict_without_cause(self) -> None:
        assert SysdlogError("boom").to_dict() == {"code": "sysdlog_error", "message": "boom"}

    def test_cause_is_chained(self) -> None:
        cause = OSError("nope")
        err = SysdlogError("boom", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_str_is_json(self) -> None:
        payload = json.loads(str(SysdlogError("boom")))
        assert payload["message"] == "boom"

    def test_repr(self) -> None:
        assert repr(SysdlogError("boom")) == "SysdlogError(code='sysdlog_error', message='boom')"


class TestTransportErrors:
    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (ConnectionError, "connection_error"),
            (WriteError, "write_error"),
            (LoggerClosedError, "logger_closed"),
        ],
    )
    def test_codes_and_hierarchy(self, cls: type[TransportError], code: str) -> None:
        err = cls("/dev/log")
        assert isinstance(err, TransportError)
        assert isinstance(err, SysdlogError)
        assert err.code == code
        assert err.address == "/dev/log"

    def test_default_messages_name_the_address(self) -> None:
        assert "/run/x.sock" in ConnectionError("/run/x.sock").message
        assert "/run/x.sock" in WriteError("/run/x.sock").message
        assert "/run/x.sock" in LoggerClosedError("/run/x.sock").message

    def test_custom_message(self) -> None:
        assert WriteError("/dev/log", "short write").message == "short write"

    def test_to_dict_includes_address(self) -> None:
        d = ConnectionError("/dev/log").to_dict()
        assert d["address"] == "/dev/log"
        assert d["code"] == "connection_error"

    def test_cause_is_kept(self) -> None:
        cause = FileNotFoundError(2, "No such file")
        err = ConnectionError("/dev/log", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_not_builtin_connection_error(self) -> None:
        import builtins

        assert not issubclass(ConnectionError, builtins.ConnectionError)


class TestConfigErrors:
    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("timeout", -1, "must be positive")
        assert isinstance(err, ConfigError)
        assert err.field == "timeout"
        assert err.value == -1
        assert err.reason == "must be positive"
        assert err.message == "timeout=-1 rejected: must be positive"
        assert err.to_dict()["field"] == "timeout"

