import logging
from dataclasses import dataclass, field
from typing import Any, Callable
from .exceptions import ServiceNotFoundError
logger = logging.getLogger(__name__)

@dataclass
class ServiceContainer:
    """Registry mapping service ids to instances or lazy zero-argument providers.

    A provider runs on the first ``get`` of its id and the result is shared
    by every later lookup.
    """
    services: dict[str, Any] = field(default_factory=dict)
    providers: dict[str, Callable[[], Any]] = field(default_factory=dict)

    def set(self, service_id: str, instance: Any) -> None:
        self.providers.pop(service_id, None)
        self.services[service_id] = instance

    def register(self, service_id: str, provider: Callable[[], Any]) -> None:
        self.services.pop(service_id, None)
        self.providers[service_id] = provider

    def has(self, service_id: str) -> bool:
        return service_id in self.services or service_id in self.providers

    def get(self, service_id: str) -> Any:
        if service_id in self.services:
            return self.services[service_id]
        provider = self.providers.get(service_id)
        if provider is None:
            raise ServiceNotFoundError(f"You have requested a non-existent service '{service_id}'.", {'id': service_id, 'known': self.ids()})
        logger.debug('Instantiating service %s', service_id)
        instance = provider()
        self.services[service_id] = instance
        del self.providers[service_id]
        return instance

    def ids(self) -> list[str]:
        return sorted(set(self.services) | set(self.providers))
