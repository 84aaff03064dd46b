"""A byte buffer with independent read and write positions over a block."""

from __future__ import annotations

from dataclasses import dataclass

from tckit.blocks import ExternalBlock, RcBlock


@dataclass
class Position:
    """Read and write offsets into a block."""

    read: int = 0
    write: int = 0

    def swap(self, other: "Position") -> None:
        self.read, other.read = other.read, self.read
        self.write, other.write = other.write, self.write


def _as_bytes_view(data) -> memoryview:
    return memoryview(data).cast("B")


class ByteBuffer:
    """Reads consume from the front, writes append after the data."""

    def __init__(self, size=None, block_type=RcBlock, buffer=None) -> None:
        if buffer is not None:
            self._block = ExternalBlock(buffer, size or None)
        elif size is None:
            self._block = block_type()
        else:
            self._block = block_type(size)
        self._pos = Position()

    @classmethod
    def _wrap(cls, block, pos: Position) -> "ByteBuffer":
        obj = cls.__new__(cls)
        obj._block = block
        obj._pos = Position(pos.read, pos.write)
        return obj

    @classmethod
    def from_buffer(cls, other: "ByteBuffer", block_type=RcBlock) -> "ByteBuffer":
        """A new buffer holding a copy of ``other``'s readable bytes."""
        result = cls(other.length(), block_type)
        result.write(other.readable())
        return result

    def copy(self) -> "ByteBuffer":
        """A copy with the same positions, copying the block its own way."""
        if not hasattr(self._block, "copy"):
            raise TypeError(f"{type(self._block).__name__} cannot be copied")
        return self._wrap(self._block.copy(), self._pos)

    def _view(self) -> memoryview:
        data = self._block.data()
        return memoryview(b"") if data is None else memoryview(data)

    def readable(self) -> memoryview:
        """A view of the bytes between the read and write positions."""
        return self._view()[self._pos.read : self._pos.write]

    def writable(self) -> memoryview:
        """A view of the free space after the write position."""
        return self._view()[self._pos.write : self._block.size()]

    def move_read(self, move: int) -> int:
        """Move the read position, clamped to the data; returns the move made."""
        if move >= 0:
            real = min(move, self.length())
        else:
            real = max(move, -self._pos.read)
        self._pos.read += real
        return real

    def move_write(self, move: int) -> int:
        """Move the write position, clamped to space and data; returns the move made."""
        if move >= 0:
            real = min(move, self.space())
        else:
            real = max(move, -self.length())
        self._pos.write += real
        return real

    def length(self) -> int:
        return self._pos.write - self._pos.read

    def space(self) -> int:
        return self._block.size() - self._pos.write

    def capacity(self) -> int:
        return self._block.size()

    def clear(self) -> None:
        self._pos.read = self._pos.write = 0

    def reserve(self, size: int) -> None:
        self._block.reserve(size)

    def read(self, size: int) -> bytes:
        """Take up to ``size`` bytes from the front."""
        data = self.peek(size)
        self.move_read(len(data))
        return data

    def peek(self, size: int) -> bytes:
        """Return up to ``size`` bytes from the front without consuming them."""
        count = min(size, self.length())
        return bytes(self.readable()[:count])

    def write(self, data) -> int:
        """Append as much of ``data`` as fits; returns the number of bytes written."""
        src = _as_bytes_view(data)
        count = min(len(src), self.space())
        if count:
            start = self._pos.write
            self._view()[start : start + count] = src[:count]
        return self.move_write(count)

    def fit(self, buffer_fit: bool = False) -> None:
        """Move unread data to the front, or with ``buffer_fit`` shrink to it."""
        if buffer_fit:
            if isinstance(self._block, ExternalBlock):
                raise TypeError("external storage cannot be reallocated")
            fitted = ByteBuffer(self.length(), type(self._block))
            fitted.write(self.readable())
            self.swap(fitted)
            return
        self.reserve(self._block.size())
        length = self.length()
        if length:
            chunk = bytes(self.readable())
            self._view()[:length] = chunk
        self._pos.read = 0
        self._pos.write = length

    def swap(self, other: "ByteBuffer") -> None:
        if type(self._block) is not type(other._block):
            raise TypeError("cannot swap buffers over different block types")
        self._block.swap(other._block)
        self._pos.swap(other._pos)