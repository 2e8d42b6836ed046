"""The core application: arguments, modules, event loop, workers and logging."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import Any, Optional

from .api import CONFIG_MANAGER_SERVICE, HTTP_LOGGER_SERVICE, ConfigManager, Logger
from .datetime import DateTime
from .event import Event
from .eventloop import EventLoop
from .objects import GenObject, Module, ObjectManager
from .strings import trim

LogHandler = Callable[[str, int], Any]

_LEVEL_COUNT = 32
_WORKER_SWEEP_INTERVAL = 1000
_LOOP_TIMEOUT = 20

_app: Optional[CoreApplication] = None
_app_lock = threading.Lock()


class _Worker:
    """Runs one function on its own thread."""

    def __init__(self, fn: Callable[[], Any]) -> None:
        self.finished = threading.Event()
        self.thread = threading.Thread(target=self._run, args=(fn,), daemon=True)
        self.thread.start()

    def _run(self, fn: Callable[[], Any]) -> None:
        try:
            fn()
        finally:
            self.finished.set()

    def join(self) -> None:
        self.thread.join()


def _check_level(level: int) -> None:
    if not 0 <= level < _LEVEL_COUNT:
        raise ValueError(f"log level out of range 0..31: {level}")


class CoreApplication(GenObject):
    """The single application instance of a process."""

    def __init__(
        self,
        argv: Optional[Sequence[str]] = None,
        object_manager: Optional[ObjectManager] = None,
    ) -> None:
        global _app
        with _app_lock:
            if _app is not None:
                raise RuntimeError("Only one CoreApplication instance allowed!")
            _app = self
        super().__init__(None)
        self.type_code = "Gen.CoreApplication"
        self.object_manager = object_manager if object_manager is not None else ObjectManager()
        self._arguments = list(sys.argv if argv is None else argv)
        self._loop = EventLoop()
        self._modules: dict[str, Module] = {}
        self._lock = threading.Lock()
        self._workers: list[_Worker] = []
        self._workers_lock = threading.Lock()
        self._log_mask = 0xFFFFFFFF
        self._log_handlers: list[Optional[LogHandler]] = [None] * _LEVEL_COUNT
        self._logger: Optional[Logger] = None

    def argc(self) -> int:
        return len(self._arguments)

    def argv(self) -> list[str]:
        return list(self._arguments)

    def arg(self, index: int) -> str:
        """The argument at ``index``; raises IndexError when out of range."""
        return self._arguments[index]

    def arg_value(self, name: str) -> str:
        """The trimmed value of the first ``name=value`` argument, or ''."""
        prefix = name + "="
        for argument in self._arguments:
            if argument.startswith(prefix):
                return trim(argument[len(prefix):])
        return ""

    def add_module(self, module: Module) -> int:
        """Add and initialise a module; return the number of modules.

        Raises ValueError for a module name already added.
        """
        name = module.module_name()
        if name in self._modules:
            raise ValueError(f"duplicate module: {name}")
        self._modules[name] = module
        module.initialize(self.object_manager)
        return len(self._modules)

    def execute(self) -> int:
        """Run the event loop until :meth:`quit`."""
        self._loop.add_timer(_WORKER_SWEEP_INTERVAL, True, lambda event: self._clear_workers())
        self._loop.loop(-1, _LOOP_TIMEOUT)
        return 0

    def quit(self) -> None:
        self._loop.quit()

    def close(self) -> None:
        """Stop the loop, wait for the workers and release the instance."""
        global _app
        self.quit()
        with self._workers_lock:
            workers, self._workers = self._workers, []
        for worker in workers:
            worker.join()
        with _app_lock:
            if _app is self:
                _app = None

    def application_dir_path(self) -> str:
        """The directory part of the program path, or ''."""
        path = self._program_path()
        for separator in ("/", "\\"):
            position = path.rfind(separator)
            if position >= 0:
                return path[:position]
        return ""

    def application_name(self) -> str:
        """The program file name without directory and extension."""
        name = self._program_path()
        for separator in ("/", "\\"):
            name = name[name.rfind(separator) + 1:]
        position = name.rfind(".")
        return name[:position] if position >= 0 else name

    def _program_path(self) -> str:
        if not self._arguments:
            raise ValueError("application has no arguments")
        return self._arguments[0]

    def app_data_path(self) -> str:
        return "/data"

    def temp_data_path(self) -> str:
        return "/tmp"

    def set_timer(self, interval: int, repeat: bool, callback: Callable[[Event], Any]) -> int:
        """Add a timer to the application's loop; return its id."""
        return self._loop.add_timer(interval, repeat, callback)

    def locked(self) -> threading.Lock:
        """The application lock, for use in a ``with`` statement."""
        return self._lock

    def execute_in_worker(self, fn: Callable[[], Any]) -> int:
        """Run ``fn`` on a new thread; return the number of live workers."""
        worker = _Worker(fn)
        with self._workers_lock:
            self._workers.append(worker)
            return len(self._workers)

    def _clear_workers(self) -> None:
        with self._workers_lock:
            finished = [worker for worker in self._workers if worker.finished.is_set()]
            self._workers = [worker for worker in self._workers if not worker.finished.is_set()]
        for worker in finished:
            worker.join()

    def log_message_print(self, text: str, level: int) -> None:
        """Pass a message to the level's handler, the level-0 handler or stdout."""
        _check_level(level)
        if not self._log_mask & (1 << level):
            return
        handler = self._log_handlers[level] or self._log_handlers[0]
        if handler is not None:
            handler(text, level)
            return
        print(f"[{DateTime.current()}] {text}")

    def _http_logger(self) -> Optional[Logger]:
        if self._logger is None:
            self._logger = self.get_service(HTTP_LOGGER_SERVICE, Logger)
        return self._logger

    def sys_message_print(self, text: str, log_type: str, color: str) -> None:
        """Send a message of a log type to the HTTP logger service, if any."""
        logger = self._http_logger()
        if logger is not None:
            logger.add_log_data(log_type, text, color)

    def dut_message_print(self, text: str, dut: int, color: str) -> None:
        """Send a message for a device under test to the HTTP logger service, if any."""
        logger = self._http_logger()
        if logger is not None:
            logger.add_log_data(dut, text, color)

    def set_message_filter(self, mask: int) -> None:
        """Set the bit mask of levels that are printed."""
        self._log_mask = mask

    def set_message_handler(self, level: int, handler: Optional[LogHandler]) -> None:
        """Set the handler for a level; level 0 is the fallback for all."""
        _check_level(level)
        self._log_handlers[level] = handler

    def __enter__(self) -> CoreApplication:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def get_app() -> CoreApplication:
    """The current application; raises RuntimeError when there is none."""
    app = _app
    if app is None:
        raise RuntimeError("CoreApplication not initialized!")
    return app


def get_service(service_name: str, kind: Optional[type] = None) -> Any:
    """Look up a service through the current application."""
    return get_app().get_service(service_name, kind)


def get_config_manager() -> Optional[ConfigManager]:
    """The configuration manager service of the current application."""
    return get_service(CONFIG_MANAGER_SERVICE, ConfigManager)