"""Encoders that turn records into bytes and writers that emit them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tckit.byte_buffer import ByteBuffer
from tckit.chrono import localtime_offset
from tckit.civil import DateTime
from tckit.log_record import Record


class Encoder(ABC):
    """Formats a record into a byte buffer."""

    @abstractmethod
    def name(self) -> str:
        """The name this encoder is registered under."""

    @abstractmethod
    def encode(self, record: Record, out: ByteBuffer) -> bool:
        """Fill ``out`` with the encoded record; returns whether it succeeded."""


class Writer(ABC):
    """Sends encoded records somewhere."""

    @abstractmethod
    def name(self) -> str:
        """The name this writer is registered under."""

    @abstractmethod
    def write(self, record: Record, data: ByteBuffer) -> None:
        """Emit the readable bytes of ``data`` for ``record``."""


class SimpleEncoder(Encoder):
    """One line per record: local time, level, tag, message and location."""

    def name(self) -> str:
        return self.class_name()

    def encode(self, record: Record, out: ByteBuffer) -> bool:
        out.clear()
        dt = DateTime.from_timestamp(record.ts + localtime_offset())
        tag = record.tag
        line = (
            f"[{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
            f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}]"
            f"[{record.type_acronym()}][{tag.name}][{record.message}]"
            f"[{tag.file}:{tag.function}:{tag.line}]\r\n"
        )
        payload = line.encode("utf-8")
        out.reserve(len(payload))
        out.write(payload)
        return True

    @classmethod
    def class_name(cls) -> str:
        return "simple_encoder"