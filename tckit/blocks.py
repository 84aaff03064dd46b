"""Byte storage blocks: owned, reference-counted and caller-provided."""

from __future__ import annotations

from typing import Optional


def _check_same_type(block: object, other: object) -> None:
    if type(block) is not type(other):
        raise TypeError(
            f"cannot swap {type(block).__name__} with {type(other).__name__}"
        )


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


class SimpleBlock:
    """A block that owns its bytes; copies are deep."""

    def __init__(self, size: int = 0) -> None:
        self._data: Optional[bytearray] = None
        self._size = 0
        self.reserve(size)

    def data(self) -> Optional[bytearray]:
        """The storage, or None when nothing is allocated."""
        return self._data

    def size(self) -> int:
        return self._size

    def reserve(self, size: int) -> None:
        """Grow the storage to ``size`` bytes; never shrinks."""
        _check_size(size)
        if size > self._size:
            grown = bytearray(size)
            if self._data is not None:
                grown[: self._size] = self._data[: self._size]
            self._data = grown
            self._size = size

    def cleanup(self) -> None:
        self._data = None
        self._size = 0

    def swap(self, other: "SimpleBlock") -> None:
        _check_same_type(self, other)
        self._data, other._data = other._data, self._data
        self._size, other._size = other._size, self._size

    def copy(self) -> "SimpleBlock":
        """An independent block holding the same bytes."""
        clone = SimpleBlock()
        clone.reserve(self._size)
        if self._data is not None and clone._data is not None:
            clone._data[:] = self._data
        return clone

    def take(self) -> "SimpleBlock":
        """Move the storage into a new block, leaving this one empty."""
        moved = SimpleBlock()
        moved.swap(self)
        return moved


class _Shared:
    __slots__ = ("data", "refs")

    def __init__(self, size: int) -> None:
        self.data = bytearray(size)
        self.refs = 1


class RcBlock:
    """A block whose storage is shared between copies and counted."""

    def __init__(self, size: Optional[int] = None) -> None:
        self._shared: Optional[_Shared] = None
        self._size = 0
        if size is not None:
            self.reserve(size)

    def data(self) -> Optional[bytearray]:
        """The shared storage, or None when nothing is attached."""
        return None if self._shared is None else self._shared.data

    def size(self) -> int:
        return self._size

    def ref_count(self) -> int:
        """Number of blocks sharing the storage; 0 when detached."""
        return 0 if self._shared is None else self._shared.refs

    def reserve(self, size: int) -> None:
        """Ensure ``size`` bytes; shared storage is first copied out."""
        _check_size(size)
        if self.ref_count() != 1:
            fresh = _Shared(size)
            if self._shared is not None:
                count = min(self._size, size)
                fresh.data[:count] = self._shared.data[:count]
                self.release()
            self._shared = fresh
            self._size = size
            return
        if size > self._size:
            assert self._shared is not None
            grown = bytearray(size)
            grown[: self._size] = self._shared.data[: self._size]
            self._shared.data = grown
            self._size = size

    def cleanup(self) -> None:
        self.release()

    def swap(self, other: "RcBlock") -> None:
        _check_same_type(self, other)
        self._shared, other._shared = other._shared, self._shared
        self._size, other._size = other._size, self._size

    def copy(self) -> "RcBlock":
        """A block sharing this storage; the count goes up by one."""
        clone = RcBlock()
        clone._shared = self._shared
        clone._size = self._size
        clone.add_ref()
        return clone

    def take(self) -> "RcBlock":
        """Move the storage into a new block without touching the count."""
        moved = RcBlock()
        moved.swap(self)
        return moved

    def add_ref(self) -> None:
        if self._shared is not None:
            self._shared.refs += 1

    def release(self) -> None:
        """Drop this block's reference and detach from the storage."""
        if self._shared is None:
            return
        self._shared.refs -= 1
        self._shared = None
        self._size = 0

    def __del__(self) -> None:
        if getattr(self, "_shared", None) is not None:
            self.release()


class ExternalBlock:
    """A block over a writable buffer owned by the caller; never grows."""

    def __init__(self, buffer, size: Optional[int] = None) -> None:
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise ValueError("external storage must be writable")
        if size is None:
            size = len(view)
        if size < 0 or size > len(view):
            raise ValueError("size does not fit the given buffer")
        self._data: Optional[memoryview] = view[:size]
        self._size = size

    def data(self) -> Optional[memoryview]:
        return self._data

    def size(self) -> int:
        return self._size

    def reserve(self, size: int) -> None:
        """Validate ``size``; external storage keeps its fixed size."""
        _check_size(size)

    def cleanup(self) -> None:
        self._data = None
        self._size = 0

    def swap(self, other: "ExternalBlock") -> None:
        _check_same_type(self, other)
        self._data, other._data = other._data, self._data
        self._size, other._size = other._size, self._size

    def take(self) -> "ExternalBlock":
        """Move the view into a new block, leaving this one empty."""
        moved = ExternalBlock(bytearray(0))
        moved.swap(self)
        return moved