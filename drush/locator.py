"""Process-wide access to the service container.

This exists for legacy code paths that cannot have their dependencies
injected. New code should take the services it needs as arguments instead.
"""
import logging
from typing import Any
from .exceptions import ContainerNotInitializedError
from .services import ServiceContainer

class ServiceLocator:

    def __init__(self, container: ServiceContainer | None=None) -> None:
        self._container = container

    def set_container(self, container: ServiceContainer) -> None:
        self._container = container

    def unset_container(self) -> None:
        self._container = None

    def get_container(self) -> ServiceContainer:
        if self._container is None:
            raise ContainerNotInitializedError('The service container is not initialized yet. set_container() must be called with a real container.')
        return self._container

    def has_container(self) -> bool:
        return self._container is not None

    def service(self, service_id: str) -> Any:
        return self.get_container().get(service_id)

    def has_service(self, service_id: str) -> bool:
        # has_container() first so an absent container yields False, not an error
        return self.has_container() and self.get_container().has(service_id)

    def try_service(self, service_id: str, default: Any=None) -> Any:
        if not self.has_container():
            return default
        container = self.get_container()
        if not container.has(service_id):
            return default
        return container.get(service_id)

    def logger(self) -> logging.Logger:
        return self.service('logger')

    def config(self) -> Any:
        return self.service('config')
_locator = ServiceLocator()

def get_locator() -> ServiceLocator:
    return _locator

def set_container(container: ServiceContainer) -> None:
    _locator.set_container(container)

def unset_container() -> None:
    _locator.unset_container()

def get_container() -> ServiceContainer:
    return _locator.get_container()

def has_container() -> bool:
    return _locator.has_container()

def service(service_id: str) -> Any:
    return _locator.service(service_id)

def has_service(service_id: str) -> bool:
    return _locator.has_service(service_id)

def try_service(service_id: str, default: Any=None) -> Any:
    return _locator.try_service(service_id, default)

def logger() -> logging.Logger:
    return _locator.logger()

def config() -> Any:
    return _locator.config()
