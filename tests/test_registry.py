from tckit.logger import Logger
from tckit.registry import Registry
from tckit.sinks import SimpleEncoder, Writer


class _NullWriter(Writer):
    def name(self):
        return "null"

    def write(self, record, data):
        pass


def test_instance_is_shared():
    encoder = SimpleEncoder()
    Registry.instance().add_encoder("shared_instance_encoder", encoder)
    assert Registry.instance().encoder("shared_instance_encoder") is encoder


def test_missing_ids_return_none():
    registry = Registry()
    assert registry.encoder("x") is None
    assert registry.writer("x") is None
    assert registry.logger("x") is None


def test_encoder_round_trip():
    registry = Registry()
    encoder = SimpleEncoder()
    registry.add_encoder("e", encoder)
    assert registry.encoder("e") is encoder


def test_writer_round_trip_and_overwrite():
    registry = Registry()
    first, second = _NullWriter(), _NullWriter()
    registry.add_writer("w", first)
    assert registry.writer("w") is first
    registry.add_writer("w", second)
    assert registry.writer("w") is second


def test_logger_round_trip():
    registry = Registry()
    logger = Logger()
    registry.add_logger("l", logger)
    assert registry.logger("l") is logger


def test_separate_registries_are_independent():
    one, two = Registry(), Registry()
    one.add_encoder("e", SimpleEncoder())
    assert two.encoder("e") is None