"""Message and error reporting through replaceable handler lists."""

from __future__ import annotations

import errno as _errno
import os
import sys
from collections.abc import Callable
from typing import Any

try:
    import syslog as _syslog
except ImportError:  # pragma: no cover - platforms without syslog
    _syslog = None

__all__ = [
    "FatalError",
    "debug",
    "notice",
    "sysnotice",
    "warn",
    "syswarn",
    "die",
    "sysdie",
    "message_handlers_debug",
    "message_handlers_notice",
    "message_handlers_warn",
    "message_handlers_die",
    "message_handlers_reset",
    "set_program_name",
    "set_fatal_cleanup",
    "message_log_stdout",
    "message_log_stderr",
    "message_log_syslog_debug",
    "message_log_syslog_info",
    "message_log_syslog_notice",
    "message_log_syslog_warning",
    "message_log_syslog_err",
    "message_log_syslog_crit",
]

Handler = Callable[[int, str, int], Any]


class FatalError(SystemExit):
    """Raised by :func:`die` and :func:`sysdie` after the handlers have run.

    ``status`` is the exit status: the fatal cleanup's return value if one is
    set, otherwise 1.
    """

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(status)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


class _State:
    program_name: str | None = None
    fatal_cleanup: Callable[[], int] | None = None
    debug: tuple[Handler, ...] = ()
    notice: tuple[Handler, ...] = ()
    warn: tuple[Handler, ...] = ()
    die: tuple[Handler, ...] = ()


_state = _State()


def _with_error(message: str, err: int) -> str:
    return f"{message}: {os.strerror(err)}" if err else message


def _current_errno() -> int:
    """Return the error number of the exception being handled, if any."""
    exc = sys.exc_info()[1]
    if isinstance(exc, OSError) and exc.errno:
        return exc.errno
    if isinstance(exc, MemoryError):
        return _errno.ENOMEM
    return 0


def _prefixed(message: str, err: int) -> str:
    text = _with_error(message, err)
    if _state.program_name is not None:
        text = f"{_state.program_name}: {text}"
    return text


def message_log_stdout(length: int, message: str, err: int) -> None:
    """Write the message to standard output."""
    sys.stdout.write(_prefixed(message, err) + "\n")


def message_log_stderr(length: int, message: str, err: int) -> None:
    """Flush standard output, then write the message to standard error."""
    sys.stdout.flush()
    sys.stderr.write(_prefixed(message, err) + "\n")


def _log_syslog(priority: str, message: str, err: int) -> None:
    text = _with_error(message, err)
    if _syslog is None:
        sys.stderr.write(text + "\n")
    else:
        _syslog.syslog(getattr(_syslog, priority), text)


def message_log_syslog_debug(length: int, message: str, err: int) -> None:
    """Send the message to syslog at debug priority."""
    _log_syslog("LOG_DEBUG", message, err)


def message_log_syslog_info(length: int, message: str, err: int) -> None:
    """Send the message to syslog at info priority."""
    _log_syslog("LOG_INFO", message, err)


def message_log_syslog_notice(length: int, message: str, err: int) -> None:
    """Send the message to syslog at notice priority."""
    _log_syslog("LOG_NOTICE", message, err)


def message_log_syslog_warning(length: int, message: str, err: int) -> None:
    """Send the message to syslog at warning priority."""
    _log_syslog("LOG_WARNING", message, err)


def message_log_syslog_err(length: int, message: str, err: int) -> None:
    """Send the message to syslog at error priority."""
    _log_syslog("LOG_ERR", message, err)


def message_log_syslog_crit(length: int, message: str, err: int) -> None:
    """Send the message to syslog at critical priority."""
    _log_syslog("LOG_CRIT", message, err)


def _checked(handlers: tuple[Any, ...]) -> tuple[Handler, ...]:
    for handler in handlers:
        if not callable(handler):
            raise TypeError(f"message handler {handler!r} is not callable")
    return handlers


def message_handlers_debug(*handlers: Handler) -> None:
    """Replace the handlers that receive debug messages."""
    _state.debug = _checked(handlers)


def message_handlers_notice(*handlers: Handler) -> None:
    """Replace the handlers that receive notices."""
    _state.notice = _checked(handlers)


def message_handlers_warn(*handlers: Handler) -> None:
    """Replace the handlers that receive warnings."""
    _state.warn = _checked(handlers)


def message_handlers_die(*handlers: Handler) -> None:
    """Replace the handlers that receive fatal messages."""
    _state.die = _checked(handlers)


def message_handlers_reset() -> None:
    """Restore every handler list to its default."""
    _state.debug = ()
    _state.notice = (message_log_stdout,)
    _state.warn = (message_log_stderr,)
    _state.die = (message_log_stderr,)


def set_program_name(name: str | None) -> None:
    """Set the name prepended to stdout and stderr messages, or clear it."""
    _state.program_name = name


def set_fatal_cleanup(cleanup: Callable[[], int] | None) -> None:
    """Set the function whose return value becomes the fatal exit status."""
    _state.fatal_cleanup = cleanup


def _dispatch(handlers: tuple[Handler, ...], fmt: str, args: tuple[Any, ...], err: int) -> str:
    message = fmt % args
    for handler in handlers:
        handler(len(message), message, err)
    return message


def debug(fmt: str, *args: Any) -> None:
    """Report a debug message; nothing is formatted when no handler is set."""
    if _state.debug:
        _dispatch(_state.debug, fmt, args, 0)


def notice(fmt: str, *args: Any) -> None:
    """Report a notice."""
    _dispatch(_state.notice, fmt, args, 0)


def sysnotice(fmt: str, *args: Any) -> None:
    """Report a notice with the error of the exception being handled."""
    _dispatch(_state.notice, fmt, args, _current_errno())


def warn(fmt: str, *args: Any) -> None:
    """Report a warning."""
    _dispatch(_state.warn, fmt, args, 0)


def syswarn(fmt: str, *args: Any) -> None:
    """Report a warning with the error of the exception being handled."""
    _dispatch(_state.warn, fmt, args, _current_errno())


def _fatal(message: str) -> FatalError:
    cleanup = _state.fatal_cleanup
    status = cleanup() if cleanup is not None else 1
    return FatalError(message, status)


def die(fmt: str, *args: Any) -> None:
    """Report a fatal message and raise :class:`FatalError`."""
    raise _fatal(_dispatch(_state.die, fmt, args, 0))


def sysdie(fmt: str, *args: Any) -> None:
    """Report a fatal message with the current error and raise :class:`FatalError`."""
    raise _fatal(_dispatch(_state.die, fmt, args, _current_errno()))


message_handlers_reset()