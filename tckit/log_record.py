"""Log levels, source tags and log records."""

from __future__ import annotations

import enum
import inspect
from dataclasses import dataclass, field

from tckit.chrono import Timestamp
from tckit.spinlock import current_thread_id


def bit(index: int) -> int:
    """A 32-bit flag with only bit ``index`` set."""
    index = int(index)
    if not 0 <= index < 32:
        raise ValueError("bit index must be in 0..31")
    return 1 << index


class LogType(enum.IntFlag):
    OFF = 0
    TRACE = bit(0)
    DEBUG = bit(1)
    INFO = bit(2)
    WARN = bit(3)
    ERROR = bit(4)
    FATAL = bit(5)
    ALL = TRACE | DEBUG | INFO | WARN | ERROR | FATAL


_ACRONYMS = {
    int(LogType.TRACE): "T",
    int(LogType.DEBUG): "D",
    int(LogType.INFO): "I",
    int(LogType.WARN): "W",
    int(LogType.ERROR): "E",
    int(LogType.FATAL): "F",
    int(LogType.ALL): "A",
}


@dataclass(frozen=True)
class Tag:
    """A log tag with the source location it was made at."""

    name: str
    file: str = ""
    function: str = ""
    line: int = 0

    @classmethod
    def here(cls, name: str) -> "Tag":
        """A tag carrying the caller's file, function and line."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        try:
            if caller is None:
                return cls(name)
            code = caller.f_code
            return cls(name, code.co_filename, code.co_name, caller.f_lineno)
        finally:
            del frame, caller


@dataclass
class Record:
    """One log event."""

    type: LogType
    tag: Tag
    message: str = ""
    ts: Timestamp = field(default_factory=Timestamp.now)
    tid: int = field(default_factory=current_thread_id)

    def type_acronym(self) -> str:
        """One letter for the level, or "!" for anything else."""
        return _ACRONYMS.get(int(self.type), "!")