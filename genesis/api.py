"""Service interfaces for configuration and logging, and their names."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Union

CONFIG_MANAGER_SERVICE = "Gen.S.ConfigManager"
MAIN_CONFIG_NAME = "app"

LOGGER_SERVICE = "Gen.S.Logger"
FILE_LOGGER_SERVICE = "Gen.S.FileLogger"
HTTP_LOGGER_SERVICE = "Gen.S.HttpLogger"

LT_TEST = "test"
LT_RUNNING = "running"
LT_SYSTEM = "SYSTEM"
LT_WARNING = "WARNING"
LT_MONITOR = "MONITOR"


class ConfigManager(ABC):
    """Named JSON configurations loaded from and saved to files."""

    @abstractmethod
    def load_json_as(self, file_path: str, name: str) -> bool:
        """Load a JSON file and keep it under ``name``."""

    @abstractmethod
    def load(self, file_path: str) -> dict:
        """Load and return a JSON object from a file."""

    @abstractmethod
    def get_config_data(self, name: str) -> dict:
        """Return the configuration kept under ``name``."""

    @abstractmethod
    def get_item(self, name: str, item: str) -> Any:
        """Return one item of a configuration."""

    def get_string(self, name: str, item: str) -> str:
        """Return an item when it is a string, otherwise an empty string."""
        value = self.get_item(name, item)
        return value if isinstance(value, str) else ""

    @abstractmethod
    def set_item(self, name: str, item: str, value: Any) -> int:
        """Set one item of a configuration."""

    @abstractmethod
    def add_config_data(self, name: str, config_data: dict) -> int:
        """Keep ``config_data`` under ``name``."""

    @abstractmethod
    def save_config_data(self, name: str) -> int:
        """Write the configuration kept under ``name`` back to its file."""


class Logger(ABC):
    """Receives log lines for a log type or for a device under test."""

    @abstractmethod
    def add_log_data(
        self, target: Union[str, int], text: str, color: Optional[str] = None
    ) -> None:
        """Log ``text`` for a log type (str) or a device number (int)."""