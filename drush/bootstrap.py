import logging
from .config import DrushConfig, Settings, get_settings
from .locator import set_container, unset_container
from .log import configure_logging, get_logger
from .services import ServiceContainer
from .version import VersionInfo, get_version_info
logger = logging.getLogger(__name__)

def build_container(config: DrushConfig | None=None, settings: Settings | None=None) -> ServiceContainer:
    settings = settings or get_settings()
    container = ServiceContainer()
    container.set('settings', settings)
    container.set('logger', get_logger())
    if config is not None:
        container.set('config', config)
    else:
        container.register('config', DrushConfig.from_environment)
    if settings.info_path is not None:
        container.register('version', lambda: VersionInfo(settings.info_path))
    else:
        container.register('version', get_version_info)
    return container

def boot(config: DrushConfig | None=None, settings: Settings | None=None) -> ServiceContainer:
    settings = settings or get_settings()
    configure_logging(settings.effective_log_level)
    container = build_container(config, settings)
    set_container(container)
    logger.debug('Service container initialized with %s', ', '.join(container.ids()))
    return container

def shutdown() -> None:
    unset_container()
    logger.debug('Service container released')
