# tckit

tckit is a small library with four parts.

- **Byte buffers.** `tckit.byte_buffer.ByteBuffer` keeps separate read and write positions over a storage block. The block types are in `tckit.blocks`:
  - `SimpleBlock` owns its bytes. Its `copy()` is a deep copy.
  - `RcBlock` shares its bytes between copies and counts the references. `reserve()` on a shared block first copies the bytes into a block of its own.
  - `ExternalBlock` wraps a writable buffer that you supply. It never grows.
- **Time.**
  - `tckit.chrono` has `Timespan`, a signed duration in microseconds, and `Timestamp`, a UTC instant in microseconds since 1970-01-01. It also keeps a process-wide local-time offset, read with `localtime_offset()` and set with `set_localtime_offset()`.
  - `tckit.civil` has `DateTime.from_timestamp()`, which breaks a timestamp down into year, month, day, hour, minute, second, millisecond and day of week.
- **Callables.** `tckit.callback` has two holders:
  - `Function` holds a callable. Calling an empty `Function` returns its `default`.
  - `Operation` holds a handler and passes itself to that handler when called.
- **Logging.** A leveled `Logger` (`tckit.logger`) sends each record to its sinks. A sink is one encoder together with its writers. Encoders and writers can be built through `Factory` and shared through `Registry`. Loggers can be handed out by name through a `Context`.

`tckit.spinlock` provides `SpinLock`, a non-reentrant lock that can be used as a context manager, and `current_thread_id()`.

## Install

```
pip install .
```

## Byte buffers

```python
from tckit.byte_buffer import ByteBuffer
from tckit.blocks import SimpleBlock

buf = ByteBuffer(16)            # an RcBlock by default
assert buf.write(b"hello") == 5
assert buf.peek(2) == b"he"
assert buf.read(5) == b"hello"
buf.fit()                       # move unread data to the front

copy = ByteBuffer.from_buffer(buf, SimpleBlock)

storage = bytearray(128)
external = ByteBuffer(buffer=storage)   # writes go straight into `storage`
```

A write stores only as many bytes as fit in the free space, and it returns that count. `move_read()` and `move_write()` clamp the moves they are given, and they return the move that was actually made.

## Time

```python
from tckit.chrono import Timestamp, Timespan
from tckit.civil import DateTime

ts = Timestamp(0) + Timespan.hours(9)
dt = DateTime.from_timestamp(ts)
print(dt.year, dt.month, dt.day, dt.hour, dt.wday.label())
```

## Logging

```python
from tckit.context import init
from tckit.registry import Registry
from tckit.log_record import Tag, LogType
from tckit.logger import Logger
from tckit.sinks import SimpleEncoder, Writer


class PrintWriter(Writer):
    def name(self):
        return "print_writer"

    def write(self, record, data):
        print(data.peek(data.length()).decode(errors="replace"), end="")


init()  # registers SimpleEncoder with the factory and the registry

logger = Logger()
logger.add_encoder(Registry.instance().encoder(SimpleEncoder.class_name()))
logger.add_writer(SimpleEncoder.class_name(), PrintWriter())
logger.disable(LogType.DEBUG)

logger.info(Tag.here("app"), "value %d", 42)
```

Messages are formatted with `%` and the extra arguments. An empty message is dropped. `SimpleEncoder` writes one line per record, ending in `\r\n`:

```
[YYYY-MM-DD hh:mm:ss][I][tag][message][file:function:line]
```

The time on the line is the record's timestamp shifted by the offset set with `set_localtime_offset()`.

### Configuring through a context

1. Register creators with `Factory.instance().register_encoder()` and `Factory.instance().register_writer()`. `creator_no_param(cls)` builds a creator that ignores its parameter.
2. Install a context with `Context.install(XmlContext(""))`.
3. Get loggers with `Context.instance().logger(name)`.

`XmlContext.configs` maps logger names to `LoggerConfig` entries. Each `LoggerConfig` holds `SinkConfig` entries, and each of those holds `Config` entries. An encoder or writer whose `source` is `"factory"` is always created fresh. Any other encoder or writer is looked up in the registry first, and if it is missing it is created and then registered.

If no logger is configured under the name you ask for, you get the default logger, named `"logger"`. `Context.instance()` raises `RuntimeError` when no context is installed.

## What it does not do

- `XmlContext` does not read its `xml` argument. You configure it by filling `configs` in code.
- The default `"logger"` configuration has no sinks, so it writes nowhere until you give it some.
- No writers come with the package. To send output to a console, a file or anywhere else, subclass `Writer`.