import logging
from pathlib import Path
from typing import Any
from .. import filesystem
from .environment import Environment, get_environment
from .overlay import Config, ConfigOverlay
logger = logging.getLogger(__name__)
ENVIRONMENT_CONTEXT = 'environment'

class DrushConfig(ConfigOverlay):
    """Accessors for common configuration keys."""

    @classmethod
    def from_environment(cls, environment: Environment | None=None) -> 'DrushConfig':
        environment = environment or get_environment()
        config = cls()
        config.add_context(ENVIRONMENT_CONTEXT, Config(environment.export()))
        return config

    def cwd(self) -> Any:
        return self.get('env.cwd')

    def home(self) -> Any:
        return self.get('env.home')

    def user(self) -> Any:
        return self.get('env.user')

    def is_windows(self) -> Any:
        return self.get('env.is-windows')

    def tmp(self) -> Any:
        return self.get('env.tmp')

    def cache_candidates(self) -> list[str]:
        return [str(Path(self.home(), '.drush', 'cache')), str(Path(self.tmp(), f'drush-{self.user()}', 'cache'))]

    def cache(self) -> str | None:
        for candidate in self.cache_candidates():
            if filesystem.mkdir(candidate):
                return candidate
            logger.debug('Cache directory candidate %s is not usable', candidate)
        logger.warning('No usable cache directory; caching is disabled')
        return None
