"""Objects, factories, services and modules managed by an object manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Optional

TYPECODE_KEY = "typeCode"
OBJNAME_KEY = "name"


class ObjectFactory(ABC):
    """Creates objects of one type code."""

    @abstractmethod
    def create(self) -> Any:
        """Return a new object."""


class ClassFactory(ObjectFactory):
    """A factory that creates objects by calling a class with no arguments."""

    def __init__(self, cls: Callable[[], Any]) -> None:
        self.cls = cls

    def create(self) -> Any:
        return self.cls()


class ObjectManager:
    """Keeps the factories by type code and the services by name."""

    def __init__(self) -> None:
        self._factories: dict[str, ObjectFactory] = {}
        self._services: dict[str, Any] = {}

    def add_factory(self, type_code: str, factory: ObjectFactory) -> None:
        """Register the factory for a type code.

        Raises ValueError when the type code already has one.
        """
        if type_code in self._factories:
            raise ValueError(f"duplicate factory for type code {type_code!r}")
        self._factories[type_code] = factory

    def remove_factory(self, type_code: str) -> Optional[ObjectFactory]:
        """Unregister and return a factory, or None when there is none."""
        return self._factories.pop(type_code, None)

    def create_object(self, type_code: str) -> Any:
        """Create an object with the factory registered for ``type_code``.

        Raises KeyError when no factory is registered.
        """
        try:
            factory = self._factories[type_code]
        except KeyError:
            raise KeyError(f"no factory for type code {type_code!r}") from None
        return factory.create()

    def register_service(self, service_name: str, service: Any) -> None:
        """Register a service under a name.

        Raises ValueError when the name is already taken.
        """
        if service_name in self._services:
            raise ValueError(f"duplicate service {service_name!r}")
        self._services[service_name] = service

    def remove_service(self, service_name: str) -> Any:
        """Unregister and return a service, or None when there is none."""
        return self._services.pop(service_name, None)

    def get_service(self, service_name: str) -> Any:
        """Return a registered service, or None when there is none."""
        return self._services.get(service_name)


class GenObject:
    """Base object that reaches services and factories through its manager."""

    def __init__(self, parent: Optional[GenObject] = None) -> None:
        self.parent = parent
        self.object_manager: Optional[ObjectManager] = (
            parent.object_manager if parent is not None else None
        )
        self.type_code = "Gen.Object"
        self.object_name = ""

    def _manager(self) -> ObjectManager:
        if self.object_manager is None:
            raise RuntimeError("object has no object manager")
        return self.object_manager

    def get_service(self, service_name: str, kind: Optional[type] = None) -> Any:
        """Look up a service; None when missing or not an instance of ``kind``."""
        service = self._manager().get_service(service_name)
        if kind is not None and not isinstance(service, kind):
            return None
        return service

    def create_object(self, type_code: str, kind: Optional[type] = None) -> Any:
        """Create an object; None when it is not an instance of ``kind``."""
        created = self._manager().create_object(type_code)
        if kind is not None and not isinstance(created, kind):
            return None
        return created


class Module(GenObject, ABC):
    """A pluggable unit that the application initialises with its manager."""

    @abstractmethod
    def module_name(self) -> str:
        """The unique name of the module."""

    @abstractmethod
    def version(self) -> str:
        """The module's version."""

    @abstractmethod
    def initialize(self, manager: Optional[ObjectManager]) -> None:
        """Register the module's factories and services."""

    @abstractmethod
    def terminate(self) -> None:
        """Release what the module holds."""