"""Allocation and string helpers that hand failures to a replaceable handler."""

from __future__ import annotations

import inspect
import sys
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from primeprobe.messages import sysdie

__all__ = [
    "xmalloc_fail",
    "set_error_handler",
    "reset_error_handler",
    "xmalloc",
    "xcalloc",
    "xrealloc",
    "xreallocarray",
    "xstrdup",
    "xstrndup",
    "xasprintf",
    "xvasprintf",
]

ErrorHandler = Callable[[str, int, str, int], Any]
_T = TypeVar("_T")
_Text = TypeVar("_Text", str, bytes, bytearray)


def xmalloc_fail(function: str, size: int, file: str, line: int) -> None:
    """Report an allocation failure fatally through :func:`sysdie`."""
    if size == 0:
        sysdie("failed to format output with %s at %s line %d", function, file, line)
    else:
        sysdie("failed to %s %d bytes at %s line %d", function, size, file, line)


class _HandlerSlot:
    handler: ErrorHandler = staticmethod(xmalloc_fail)


_slot = _HandlerSlot()


def set_error_handler(handler: ErrorHandler) -> None:
    """Use ``handler`` for allocation failures; if it returns, the allocation is retried."""
    if not callable(handler):
        raise TypeError(f"error handler {handler!r} is not callable")
    _slot.handler = handler


def reset_error_handler() -> None:
    """Restore the default handler, :func:`xmalloc_fail`."""
    _slot.handler = xmalloc_fail


def _caller() -> tuple[str, int]:
    frame = inspect.currentframe()
    target = frame.f_back.f_back if frame and frame.f_back else None
    if target is None:
        return ("<unknown>", 0)
    return (target.f_code.co_filename, target.f_lineno)


def _retry(function: str, size: int, where: tuple[str, int], attempt: Callable[[], _T]) -> _T:
    while True:
        try:
            return attempt()
        except MemoryError:
            _slot.handler(function, size, *where)


def _check_size(*sizes: int) -> None:
    for size in sizes:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")


def _allocate(size: int) -> bytearray:
    if size > sys.maxsize:
        raise MemoryError(size)
    return bytearray(size)


def _resized(buffer: bytes | bytearray, size: int) -> bytearray:
    new = _allocate(size)
    keep = min(len(buffer), size)
    new[:keep] = buffer[:keep]
    return new


def _truncate_at_nul(s: _Text) -> _Text:
    sep: Any = b"\0" if isinstance(s, (bytes, bytearray)) else "\0"
    return s.split(sep, 1)[0]


def xmalloc(size: int) -> bytearray:
    """Return a buffer of ``size`` bytes; a request for 0 bytes gets 1."""
    _check_size(size)
    where = _caller()
    return _retry("malloc", size, where, lambda: _allocate(max(size, 1)))


def xcalloc(n: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``n`` elements of ``size`` bytes, each at least 1."""
    _check_size(n, size)
    where = _caller()
    n = max(n, 1)
    size = max(size, 1)
    return _retry("calloc", n * size, where, lambda: _allocate(n * size))


def xrealloc(buffer: bytes | bytearray, size: int) -> bytearray:
    """Return a copy of ``buffer`` resized to ``size`` bytes, zero-filled when grown."""
    _check_size(size)
    if size == 0:
        return bytearray()
    where = _caller()
    return _retry("realloc", size, where, lambda: _resized(buffer, size))


def xreallocarray(buffer: bytes | bytearray, n: int, size: int) -> bytearray:
    """Like :func:`xrealloc` for ``n`` elements of ``size`` bytes."""
    _check_size(n, size)
    if n == 0 or size == 0:
        return bytearray()
    where = _caller()
    return _retry("reallocarray", n * size, where, lambda: _resized(buffer, n * size))


def xstrdup(s: _Text) -> _Text:
    """Return a copy of ``s`` up to its first NUL character."""
    where = _caller()
    return _retry("strdup", len(s) + 1, where, lambda: _truncate_at_nul(s))


def xstrndup(s: _Text, size: int) -> _Text:
    """Return at most ``size`` characters of ``s``, stopping at a NUL."""
    _check_size(size)
    where = _caller()
    copy = _truncate_at_nul(s[:size])
    return _retry("strndup", len(copy) + 1, where, lambda: copy[:])


def xasprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` formatted with ``args`` in printf style."""
    where = _caller()
    return _retry("asprintf", 0, where, lambda: fmt % args)


def xvasprintf(fmt: str, args: Sequence[Any]) -> str:
    """Return ``fmt`` formatted with the sequence ``args`` in printf style."""
    where = _caller()
    values = tuple(args)
    return _retry("vasprintf", 0, where, lambda: fmt % values)