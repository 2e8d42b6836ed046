"""Message loggers that route collected text to the application's log outputs."""

from __future__ import annotations

from typing import Optional, Union

from .application import get_app
from .debug import Debug, MessageHandler, NoDebug

MSG_TYPE_MIN = 1
MSG_TYPE_MAX = 31

MSG_TYPE_DEBUG = 1
MSG_TYPE_INFO = 2
MSG_TYPE_WARNING = 3
MSG_TYPE_ERROR = 4

COLOR_NORMAL = "#595959"
COLOR_BLUE = "#1079FF"
COLOR_RED = "#FF0000"


class MessageLogger:
    """Builds message streams whose text goes to one handler."""

    def __init__(self, handler: Optional[MessageHandler] = None) -> None:
        self.handler = handler

    @classmethod
    def for_level(cls, level: int) -> MessageLogger:
        """A logger printing through the application at a log level."""
        return cls(lambda text: get_app().log_message_print(text, level))

    @classmethod
    def for_type(cls, log_type: str, color: str) -> MessageLogger:
        """A logger sending text of a log type to the application's log service."""
        return cls(lambda text: get_app().sys_message_print(text, log_type, color))

    @classmethod
    def for_dut(cls, dut: int, color: str) -> MessageLogger:
        """A logger sending text for a device under test to the log service."""
        return cls(lambda text: get_app().dut_message_print(text, dut, color))

    def debug(self) -> Debug:
        """A stream handing its text to this logger's handler, or to stdout."""
        if self.handler is not None:
            return Debug(self.handler)
        return Debug()

    def no_debug(self) -> NoDebug:
        """A stream that discards everything."""
        return NoDebug()


def log_debug() -> Debug:
    """A stream for debug-level messages."""
    return MessageLogger.for_level(MSG_TYPE_DEBUG).debug()


def log_info() -> Debug:
    """A stream for info-level messages."""
    return MessageLogger.for_level(MSG_TYPE_INFO).debug()


def log_error() -> Debug:
    """A stream for error-level messages."""
    return MessageLogger.for_level(MSG_TYPE_ERROR).debug()


def sys_error() -> Debug:
    """A stream for system errors sent to the log service."""
    return MessageLogger.for_type("SYSTEM", COLOR_NORMAL).debug()


def sys_info() -> Debug:
    """A stream for system information sent to the log service."""
    return MessageLogger.for_type("SYSTEM", COLOR_NORMAL).debug()


def warning() -> Debug:
    """A stream for warnings sent to the log service."""
    return MessageLogger.for_type("WARNING", COLOR_RED).debug()


def _dlog(dut: Union[int, str], color: str) -> Debug:
    if isinstance(dut, str):
        return MessageLogger.for_type(dut, color).debug()
    return MessageLogger.for_dut(dut, color).debug()


def dlog_normal(dut: Union[int, str]) -> Debug:
    """A stream for a device (or log type) in the normal colour."""
    return _dlog(dut, COLOR_NORMAL)


def dlog_blue(dut: Union[int, str]) -> Debug:
    """A stream for a device (or log type) in blue."""
    return _dlog(dut, COLOR_BLUE)


def dlog_red(dut: Union[int, str]) -> Debug:
    """A stream for a device (or log type) in red."""
    return _dlog(dut, COLOR_RED)