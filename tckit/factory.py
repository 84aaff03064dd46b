"""Named constructors for encoders and writers."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Type, TypeVar

from tckit.sinks import Encoder, Writer

T = TypeVar("T")

EncoderCreator = Callable[[str], Optional[Encoder]]
WriterCreator = Callable[[str], Optional[Writer]]


def creator_no_param(cls: Type[T]) -> Callable[[str], T]:
    """A creator that ignores its parameter and builds ``cls()``."""

    def create(param: str) -> T:
        return cls()

    return create


class Factory:
    """Maps names to creators; each creator takes a parameter string."""

    _instance: Optional["Factory"] = None

    def __init__(self) -> None:
        self._encoders: Dict[str, EncoderCreator] = {}
        self._writers: Dict[str, WriterCreator] = {}

    @classmethod
    def instance(cls) -> "Factory":
        """The process-wide factory."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def create_encoder(self, name: str, param: str = "") -> Optional[Encoder]:
        """A new encoder from the creator named ``name``, or None if unknown."""
        creator = self._encoders.get(name)
        return None if creator is None else creator(param)

    def create_writer(self, name: str, param: str = "") -> Optional[Writer]:
        """A new writer from the creator named ``name``, or None if unknown."""
        creator = self._writers.get(name)
        return None if creator is None else creator(param)

    def register_encoder(self, name: str, creator: EncoderCreator) -> None:
        if not callable(creator):
            raise TypeError("encoder creator must be callable")
        self._encoders[name] = creator

    def register_writer(self, name: str, creator: WriterCreator) -> None:
        if not callable(creator):
            raise TypeError("writer creator must be callable")
        self._writers[name] = creator