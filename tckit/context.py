"""Logger configuration contexts and library initialisation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from tckit.factory import Factory, creator_no_param
from tckit.log_record import LogType
from tckit.logger import Logger
from tckit.registry import Registry
from tckit.sinks import SimpleEncoder

_DEFAULT_LOGGER = "logger"
_FROM_FACTORY = "factory"


@dataclass
class Config:
    """Identifies an encoder or writer and where to get it from."""

    id: str = ""
    param: str = ""
    source: str = ""


@dataclass
class SinkConfig:
    encoder: Config = field(default_factory=Config)
    writers: List[Config] = field(default_factory=list)


@dataclass
class LoggerConfig:
    levels: int = 0
    sinks: List[SinkConfig] = field(default_factory=list)


class Context(ABC):
    """Hands out loggers by name; one context is installed process-wide."""

    _instance: Optional["Context"] = None

    @abstractmethod
    def logger(self, name: str) -> Logger:
        """The logger for ``name``."""

    @classmethod
    def instance(cls) -> "Context":
        """The installed context; raises RuntimeError when none is installed."""
        if Context._instance is None:
            raise RuntimeError("no logging context installed")
        return Context._instance

    @classmethod
    def install(cls, ctx: Optional["Context"]) -> None:
        Context._instance = ctx


def _resolve(config: Config, from_registry, to_registry, create):
    if config.source == _FROM_FACTORY:
        return create(config.id, config.param)
    found = from_registry(config.id)
    if found is None:
        found = create(config.id, config.param)
        if found is not None:
            to_registry(config.id, found)
    return found


class XmlContext(Context):
    """A context built from logger configurations; always has a default ``logger``."""

    def __init__(self, xml: str = "") -> None:
        self.xml = xml
        self.loggers: List[Logger] = []
        self.configs: Dict[str, LoggerConfig] = {}
        if _DEFAULT_LOGGER not in self.configs:
            self.configs[_DEFAULT_LOGGER] = LoggerConfig(levels=int(LogType.ALL))

    def load_logger_from_config(self, name: str) -> Optional[Logger]:
        """Build and register the logger configured as ``name``, or None."""
        cfg = self.configs.get(name)
        if cfg is None:
            return None
        registry = Registry.instance()
        factory = Factory.instance()
        logger = Logger()
        logger.disable(LogType.ALL)
        logger.enable(LogType(cfg.levels & int(LogType.ALL)))
        for sink in cfg.sinks:
            encoder = _resolve(
                sink.encoder,
                registry.encoder,
                registry.add_encoder,
                factory.create_encoder,
            )
            if encoder is None:
                continue
            logger.add_encoder(encoder)
            for wcfg in sink.writers:
                writer = _resolve(
                    wcfg, registry.writer, registry.add_writer, factory.create_writer
                )
                if writer is not None:
                    logger.add_writer(encoder.name(), writer)
        registry.add_logger(name, logger)
        self.loggers.append(logger)
        return logger

    def logger(self, name: str) -> Logger:
        """The named logger, falling back to the default ``logger``."""
        registry = Registry.instance()
        found = registry.logger(name) or self.load_logger_from_config(name)
        if found is not None:
            return found
        found = registry.logger(_DEFAULT_LOGGER) or self.load_logger_from_config(
            _DEFAULT_LOGGER
        )
        if found is None:
            raise LookupError("no default logger configured")
        return found


def init() -> bool:
    """Register the simple encoder with the factory and the registry."""
    name = SimpleEncoder.class_name()
    factory = Factory.instance()
    factory.register_encoder(name, creator_no_param(SimpleEncoder))
    Registry.instance().add_encoder(name, factory.create_encoder(name, ""))
    return True