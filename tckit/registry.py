"""Shared instances of encoders, writers and loggers, looked up by id."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from tckit.sinks import Encoder, Writer
from tckit.spinlock import SpinLock

if TYPE_CHECKING:
    from tckit.logger import Logger


class Registry:
    """Thread-safe maps of named encoders, writers and loggers."""

    _instance: Optional["Registry"] = None

    def __init__(self) -> None:
        self._lock = SpinLock()
        self._encoders: Dict[str, Encoder] = {}
        self._writers: Dict[str, Writer] = {}
        self._loggers: Dict[str, "Logger"] = {}

    @classmethod
    def instance(cls) -> "Registry":
        """The process-wide registry."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def encoder(self, id: str) -> Optional[Encoder]:
        with self._lock:
            return self._encoders.get(id)

    def add_encoder(self, id: str, encoder: Encoder) -> None:
        with self._lock:
            self._encoders[id] = encoder

    def writer(self, id: str) -> Optional[Writer]:
        with self._lock:
            return self._writers.get(id)

    def add_writer(self, id: str, writer: Writer) -> None:
        with self._lock:
            self._writers[id] = writer

    def logger(self, id: str) -> Optional["Logger"]:
        with self._lock:
            return self._loggers.get(id)

    def add_logger(self, id: str, logger: "Logger") -> None:
        with self._lock:
            self._loggers[id] = logger