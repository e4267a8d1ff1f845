"""Frame encoding and printf-style message formatting."""
from __future__ import annotations

from typing import Any

from sysdlog.severity import Severity

#: Error handler used for both directions so raw bytes survive a
#: decode/encode round trip unchanged.
ERRORS = "surrogateescape"

#: Used when ``ERRORS`` cannot represent a character (lone surrogates
#: outside U+DC80..U+DCFF, or text the codec has no mapping for).
FALLBACK_ERRORS = "backslashreplace"


def render_frame(severity: Severity, prefix: str, message: str) -> str:
    """Return ``"<N> " + prefix + message`` with exactly one trailing newline."""
    newline = "" if message.endswith("\n") else "\n"
    return f"{severity.tag} {prefix}{message}{newline}"


def encode_text(text: str, encoding: str = "utf-8") -> bytes:
    """Encode *text*; never raises :class:`UnicodeEncodeError`."""
    try:
        return text.encode(encoding, ERRORS)
    except UnicodeEncodeError:
        return text.encode(encoding, FALLBACK_ERRORS)


def encode_frame(severity: Severity, prefix: str, message: str, encoding: str = "utf-8") -> bytes:
    return encode_text(render_frame(severity, prefix, message), encoding)


def format_message(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply ``%``-style substitution, printf style.

    Substitution always runs, so ``"100%%"`` becomes ``"100%"`` even with no
    arguments.  A format string that does not match its arguments is
    rendered literally with the arguments appended, rather than raising.
    """
    if len(args) == 1 and isinstance(args[0], dict) and args[0]:
        args = args[0]  # type: ignore[assignment]
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        extra = args.values() if isinstance(args, dict) else args
        return " ".join([fmt, *(str(a) for a in extra)])


__all__ = ["ERRORS", "FALLBACK_ERRORS", "encode_frame", "encode_text", "format_message", "render_frame"]
