import pytest

from genesis.api import CONFIG_MANAGER_SERVICE, ConfigManager, Logger
from genesis.objects import GenObject, ObjectManager

HTTP_LOGGER_SERVICE = "Gen.S.HttpLogger"


class DictConfig(ConfigManager):
    def __init__(self):
        self.data = {}

    def load_json_as(self, file_path, name):
        return False

    def load(self, file_path):
        return {}

    def get_config_data(self, name):
        return self.data.get(name, {})

    def get_item(self, name, item):
        return self.data.get(name, {}).get(item)

    def set_item(self, name, item, value):
        self.data.setdefault(name, {})[item] = value
        return 0

    def add_config_data(self, name, config_data):
        self.data[name] = dict(config_data)
        return 0

    def save_config_data(self, name):
        return 0


class ListLogger(Logger):
    def __init__(self):
        self.lines = []

    def add_log_data(self, target, text, color=None):
        self.lines.append((target, text, color))


def _owner():
    owner = GenObject()
    owner.object_manager = ObjectManager()
    return owner


def test_interfaces_are_abstract():
    with pytest.raises(TypeError):
        ConfigManager()
    with pytest.raises(TypeError):
        Logger()


def test_incomplete_config_manager_cannot_be_created():
    class Partial(ConfigManager):
        def load(self, file_path):
            return {}

    with pytest.raises(TypeError):
        Partial()
    complete = DictConfig()
    complete.add_config_data("app", {"title": "demo"})
    assert ConfigManager.get_string(complete, "app", "title") == "demo"


def test_get_string_returns_string_items():
    config = DictConfig()
    config.add_config_data("app", {"title": "demo", "count": 3})
    assert ConfigManager.get_string(config, "app", "title") == "demo"


def test_get_string_is_empty_for_other_items():
    config = DictConfig()
    config.add_config_data("app", {"count": 3})
    assert ConfigManager.get_string(config, "app", "count") == ""
    assert ConfigManager.get_string(config, "app", "missing") == ""


def test_services_found_by_interface():
    owner = _owner()
    config = DictConfig()
    owner.object_manager.register_service(CONFIG_MANAGER_SERVICE, config)
    assert owner.get_service(CONFIG_MANAGER_SERVICE, ConfigManager) is config
    assert owner.get_service(CONFIG_MANAGER_SERVICE, Logger) is None


def test_logger_accepts_type_and_dut_targets():
    owner = _owner()
    owner.object_manager.register_service(HTTP_LOGGER_SERVICE, ListLogger())
    logger = owner.get_service(HTTP_LOGGER_SERVICE, Logger)
    assert owner.get_service(HTTP_LOGGER_SERVICE, ConfigManager) is None
    logger.add_log_data("SYSTEM", "boot", "#FF0000")
    logger.add_log_data(3, "pass")
    assert logger.lines == [("SYSTEM", "boot", "#FF0000"), (3, "pass", None)]