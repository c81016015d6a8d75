"""Tagged, coloured console logging."""

from __future__ import annotations

import sys
from typing import Any

from littleengine.timing import Time

_DEFAULT = "\x1b[0m"
_INFO = "\x1b[37m"
_WARNING = "\x1b[93m"
_ERROR = "\x1b[91m"

_HRESULT_MESSAGES = {
    0x00000000: "The operation completed successfully.",
    0x00000001: "Incorrect function.",
    0x80004001: "Not implemented",
    0x80004002: "No such interface supported",
    0x80004003: "Invalid pointer",
    0x80004004: "Operation aborted",
    0x80004005: "Unspecified error",
    0x8000FFFF: "Catastrophic failure",
    0x80070005: "Access is denied.",
    0x80070006: "The handle is invalid.",
    0x8007000E: "Not enough memory resources are available to complete this operation.",
    0x80070057: "The parameter is incorrect.",
}


def _emit(colour: str, tag: str, fmt: str, args: tuple, kwargs: dict) -> None:
    message = fmt.format(*args, **kwargs) if args or kwargs else fmt
    stamp = Time.instance().current_time_formatted()
    stream = sys.stdout
    coloured = stream.isatty()
    line = f"[{stamp}][{tag}]: {message}"
    if coloured:
        line = f"{colour}{line}{_DEFAULT}"
    print(line, file=stream, flush=True)


def log_info(tag: str, fmt: str, *args: Any, **kwargs: Any) -> None:
    """Log an informational message under ``tag``."""
    _emit(_INFO, tag, fmt, args, kwargs)


def log_warning(tag: str, fmt: str, *args: Any, **kwargs: Any) -> None:
    """Log a warning under ``tag``."""
    _emit(_WARNING, tag, fmt, args, kwargs)


def log_error(tag: str, fmt: str, *args: Any, **kwargs: Any) -> None:
    """Log an error under ``tag``."""
    _emit(_ERROR, tag, fmt, args, kwargs)


def hresult_to_string(hr: int) -> str:
    """Describe an HRESULT code, given in signed or unsigned form."""
    code = hr & 0xFFFFFFFF
    message = _HRESULT_MESSAGES.get(code)
    if message is None:
        signed = code - 0x100000000 if code & 0x80000000 else code
        return f"Unknown message code: {signed}"
    return message.rstrip("\r\n")