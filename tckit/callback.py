"""Copyable callable holders: a general function slot and a self-passing operation."""

from __future__ import annotations

from typing import Any, Callable, Optional


def _unwrap(handler: Any) -> Optional[Callable[..., Any]]:
    if isinstance(handler, Function):
        return handler._handler
    if handler is not None and not callable(handler):
        raise TypeError(f"{type(handler).__name__} object is not callable")
    return handler


class Function:
    """Holds a callable; calling an empty holder returns ``default``.

    Building one from another ``Function`` shares the same handler.
    """

    def __init__(self, handler: Any = None, default: Any = None) -> None:
        self._handler = _unwrap(handler)
        if isinstance(handler, Function) and default is None:
            default = handler._default
        self._default = default

    def assign(self, handler: Any) -> "Function":
        """Replace the held callable; assigning a ``Function`` shares its handler."""
        self._handler = _unwrap(handler)
        return self

    def swap(self, other: "Function") -> None:
        if not isinstance(other, Function):
            raise TypeError("can only swap with another Function")
        self._handler, other._handler = other._handler, self._handler
        self._default, other._default = other._default, self._default

    def __call__(self, *args: Any) -> Any:
        if self._handler is None:
            return self._default
        return self._handler(*args)

    def __bool__(self) -> bool:
        return self._handler is not None

    def __repr__(self) -> str:
        return f"Function({self._handler!r})"


class Operation:
    """A callable slot whose handler receives the operation itself."""

    def __init__(self, handler: Optional[Callable[["Operation"], Any]] = None) -> None:
        self._handler = self._checked(handler)

    @staticmethod
    def _checked(handler: Any) -> Optional[Callable[["Operation"], Any]]:
        if isinstance(handler, Operation):
            return handler._handler
        if handler is not None and not callable(handler):
            raise TypeError(f"{type(handler).__name__} object is not callable")
        return handler

    def assign(self, handler: Any) -> "Operation":
        """Replace the handler; assigning an ``Operation`` copies its handler."""
        self._handler = self._checked(handler)
        return self

    def __call__(self) -> None:
        if self._handler is not None:
            self._handler(self)