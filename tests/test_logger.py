from tckit.log_record import LogType, Tag
from tckit.logger import Logger
from tckit.sinks import Encoder, SimpleEncoder, Writer


class _Collect(Writer):
    def __init__(self, label="collect", sink=None):
        self.label = label
        self.items = [] if sink is None else sink

    def name(self):
        return "collect"

    def write(self, record, data):
        self.items.append((self.label, record, bytes(data.readable())))


class _CountingEncoder(Encoder):
    def __init__(self, label="counting", result=True):
        self.label = label
        self.result = result
        self.calls = 0

    def name(self):
        return self.label

    def encode(self, record, out):
        self.calls += 1
        out.clear()
        out.write(record.message.encode())
        return self.result


def _logger_with_writer():
    logger = Logger()
    writer = _Collect()
    logger.add_encoder(SimpleEncoder())
    logger.add_writer(SimpleEncoder.class_name(), writer)
    return logger, writer


def test_default_levels_all():
    assert Logger().levels() == LogType.ALL


def test_info_is_encoded_and_written():
    logger, writer = _logger_with_writer()
    logger.info(Tag("Tag"), "Msg %d", 42)
    assert len(writer.items) == 1
    _, record, data = writer.items[0]
    assert record.type == LogType.INFO
    assert record.message == "Msg 42"
    assert b"[I][Tag][Msg 42]" in data
    assert data.endswith(b"\r\n")


def test_disabled_levels_are_dropped():
    logger, writer = _logger_with_writer()
    logger.disable(LogType.DEBUG)
    logger.disable(LogType.TRACE)
    logger.trace(Tag("Tag"), "Msg %d", 42)
    logger.debug(Tag("Tag"), "Msg %d", 42)
    logger.info(Tag("Tag"), "Msg %d", 42)
    logger.warn(Tag("Tag"), "Msg %d", 42)
    logger.error(Tag("Tag"), "Msg %d", 42)
    logger.fatal(Tag("Tag"), "Msg %d", 42)
    types = [record.type for _, record, _ in writer.items]
    assert types == [LogType.INFO, LogType.WARN, LogType.ERROR, LogType.FATAL]


def test_enable_restores_level():
    logger, writer = _logger_with_writer()
    logger.disable(LogType.ALL)
    assert logger.levels() == LogType.OFF
    logger.enable(LogType.WARN)
    logger.warn(Tag("t"), "w")
    logger.error(Tag("t"), "e")
    assert [r.message for _, r, _ in writer.items] == ["w"]


def test_empty_message_not_written():
    logger, writer = _logger_with_writer()
    logger.info(Tag("t"), "")
    assert writer.items == []


def test_long_message_truncated():
    logger, writer = _logger_with_writer()
    logger.info(Tag("t"), "x" * 5000)
    assert len(writer.items[0][1].message) == 4095


def test_writer_for_unknown_encoder_is_ignored():
    logger = Logger()
    writer = _Collect()
    logger.add_writer("nothing", writer)
    logger.info(Tag("t"), "hello")
    assert writer.items == []


def test_sink_without_writers_skips_encoding():
    logger = Logger()
    encoder = _CountingEncoder()
    logger.add_encoder(encoder)
    logger.info(Tag("t"), "hello")
    assert encoder.calls == 0


def test_failed_encode_skips_writers():
    logger = Logger()
    encoder = _CountingEncoder(result=False)
    writer = _Collect()
    logger.add_encoder(encoder)
    logger.add_writer(encoder.name(), writer)
    logger.info(Tag("t"), "hello")
    assert encoder.calls == 1
    assert writer.items == []


def test_sinks_run_in_encoder_name_order():
    logger = Logger()
    shared = []
    for label in ("b", "a"):
        enc = _CountingEncoder(label)
        logger.add_encoder(enc)
        logger.add_writer(label, _Collect(label, shared))
    logger.info(Tag("t"), "payload")
    assert [label for label, _, _ in shared] == ["a", "b"]
    assert all(data == b"payload" for _, _, data in shared)