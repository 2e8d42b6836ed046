# genesis

A compact application framework for Python programs. It provides:

- an **event loop** with typed events, registered handlers and repeating or one-shot timers (`genesis.eventloop.EventLoop`, with `genesis.event.Event` and `EventTimer`);
- **signals and slots** for decoupled notification (`genesis.observer.Signal`, `connect`);
- a **core application** object holding command-line arguments, modules, timers, background worker threads and message routing (`genesis.application.CoreApplication`, `get_app`, `get_service`, `get_config_manager`);
- an **object and service registry** with factories and modules (`genesis.objects.ObjectManager`, `ObjectFactory`, `ClassFactory`, `GenObject`, `Module`);
- **message streams** that collect text with `<<` and hand it to a handler (`genesis.debug.Debug`, `NoDebug`, `format_value`) and loggers that route it through the application (`genesis.messagelogger`);
- a priority **task scheduler** (`genesis.scheduler.Task`, `TaskScheduler`);
- small utilities: strings (`genesis.strings`), checksums (`genesis.hashing`), JSON merging and loading (`genesis.jsonutil`), files, bits and sleeping (`genesis.utils`) and millisecond timestamps (`genesis.datetime.DateTime`).

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Quick look

Signals and slots:

```python
from genesis.observer import Signal

class Printer:
    def show(self, value):
        print("got", value)

signal = Signal()
printer = Printer()
signal.add_slot(printer, Printer.show)
signal(42)          # prints: got 42
```

`Signal.remove_slot(receiver)` disconnects every slot whose receiver has the same type; `connect(sender, "name", receiver, method)` connects to the signal attribute `name` of `sender`.

Event loop with a timer:

```python
from genesis.eventloop import EventLoop

loop = EventLoop()
loop.add_timer(100, False, lambda event: loop.quit())
loop.loop(-1, 20)   # runs until quit(); waits up to 20 ms per iteration
```

Events can be queued with `add_event(event_type, json_data, event_data, handler)`; without a handler, the one registered with `add_event_handler` is used, and `LookupError` is raised when there is none.

Application and logging:

```python
from genesis.application import CoreApplication
from genesis.messagelogger import log_info

with CoreApplication(["/opt/tool/run.py", "mode=fast"]) as app:
    app.application_name()      # 'run'
    app.arg_value("mode")       # 'fast'
    with log_info() as out:
        out << "started " << [1, 2]
    # prints "[<timestamp>] started list(1, 2)" unless a handler is set
```

Only one `CoreApplication` may exist at a time; `close()` (or leaving the `with` block) releases it.

Utilities:

```python
from genesis.strings import split, join, to_hex
from genesis.hashing import crc16, crc32, md5

split("a,,b,c", ",")      # ['a', 'b', 'c']
join(["a", "b"], "-")     # 'a-b'
to_hex(255)               # '0x000000ff'
crc32(b"123456789")       # 0xCBF43926
md5(b"hello")             # 32 upper-case hex characters
```

`md5` writes each 4-byte word of the digest with its bytes reversed, so its output differs from `hashlib.md5(...).hexdigest().upper()`.

Task scheduling by priority:

```python
from genesis.scheduler import Task, TaskScheduler

scheduler = TaskScheduler()
scheduler.add_task(Task("backup", 2, 0))
scheduler.add_task(Task("alert", 5, 0))
scheduler.run_all_tasks()   # runs "alert" first
```

## Demo

A small signal/slot demonstration is installed as a command:

```
genesis-demo
```

## What it does not do

`genesis.api.ConfigManager` and `genesis.api.Logger` are abstract interfaces only; the package ships no configuration store and no log service. `CoreApplication.sys_message_print` and `dut_message_print`, and the `sys_error`, `sys_info`, `warning` and `dlog_*` streams, send nothing unless a `Logger` is registered with the object manager under `genesis.api.HTTP_LOGGER_SERVICE`, and `get_config_manager()` returns None until a `ConfigManager` is registered.