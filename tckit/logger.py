"""A logger that routes records through encoder sinks to writers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from tckit.byte_buffer import ByteBuffer
from tckit.log_record import LogType, Record, Tag
from tckit.sinks import Encoder, Writer
from tckit.spinlock import SpinLock

_MESSAGE_LIMIT = 4096
_BUFFER_SIZE = 4096


@dataclass
class _Sink:
    encoder: Encoder
    writers: List[Writer] = field(default_factory=list)


class Logger:
    """Filters by level, encodes once per encoder and hands bytes to its writers."""

    def __init__(self) -> None:
        self._lock = SpinLock()
        self._level = int(LogType.ALL)
        self._sinks: Dict[str, _Sink] = {}

    def _log(self, log_type: LogType, tag: Tag, msg: str, args: tuple) -> None:
        if not self._level & int(log_type):
            return
        message = msg % args if args else msg
        message = message[: _MESSAGE_LIMIT - 1]
        if not message:
            return
        self.write(Record(log_type, tag, message))

    def trace(self, tag: Tag, msg: str, *args) -> None:
        self._log(LogType.TRACE, tag, msg, args)

    def debug(self, tag: Tag, msg: str, *args) -> None:
        self._log(LogType.DEBUG, tag, msg, args)

    def info(self, tag: Tag, msg: str, *args) -> None:
        self._log(LogType.INFO, tag, msg, args)

    def warn(self, tag: Tag, msg: str, *args) -> None:
        self._log(LogType.WARN, tag, msg, args)

    def error(self, tag: Tag, msg: str, *args) -> None:
        self._log(LogType.ERROR, tag, msg, args)

    def fatal(self, tag: Tag, msg: str, *args) -> None:
        self._log(LogType.FATAL, tag, msg, args)

    def write(self, record: Record) -> None:
        """Encode ``record`` for every sink with writers, in encoder-name order."""
        with self._lock:
            for name in sorted(self._sinks):
                sink = self._sinks[name]
                if not sink.writers:
                    continue
                buf = ByteBuffer(_BUFFER_SIZE)
                if sink.encoder.encode(record, buf):
                    for writer in sink.writers:
                        writer.write(record, buf)

    def add_encoder(self, encoder: Encoder) -> None:
        """Add a sink for ``encoder``, replacing any with the same name."""
        with self._lock:
            self._sinks[encoder.name()] = _Sink(encoder)

    def add_writer(self, encoder_name: str, writer: Writer) -> None:
        """Attach ``writer`` to the named encoder's sink; ignored if there is none."""
        sink = self._sinks.get(encoder_name)
        if sink is not None:
            sink.writers.append(writer)

    def enable(self, log_type: LogType) -> None:
        self._level |= int(log_type)

    def disable(self, log_type: LogType) -> None:
        self._level &= ~int(log_type)

    def levels(self) -> LogType:
        """The enabled levels as a flag set."""
        return LogType(self._level & int(LogType.ALL))