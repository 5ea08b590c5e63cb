from .locator import ServiceLocator, config, get_container, has_container, has_service, logger, service, set_container, try_service, unset_container
from .services import ServiceContainer
from .version import get_major_version, get_minor_version, get_version
__all__ = ['ServiceContainer', 'ServiceLocator', 'config', 'get_container', 'get_major_version', 'get_minor_version', 'get_version', 'has_container', 'has_service', 'logger', 'service', 'set_container', 'try_service', 'unset_container']
