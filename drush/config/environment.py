import getpass
import logging
import os
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from ..exceptions import ConfigurationError
logger = logging.getLogger(__name__)

def _default_home() -> str:
    return str(Path.home())

def _default_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError) as e:
        logger.debug('Could not determine current user: %s', e)
        return 'nobody'

def _default_is_windows() -> bool:
    return os.name == 'nt'

class Environment(BaseSettings):
    """Values describing the host the tool runs on.

    Each field may be overridden with a ``DRUSH_`` prefixed environment
    variable, e.g. ``DRUSH_HOME`` or ``DRUSH_TMP``.
    """
    model_config = SettingsConfigDict(env_prefix='DRUSH_', extra='ignore')
    cwd: Annotated[str, Field(description='Current working directory')] = Field(default_factory=os.getcwd)
    home: Annotated[str, Field(description='Home directory of the current user')] = Field(default_factory=_default_home)
    user: Annotated[str, Field(description='Name of the current user')] = Field(default_factory=_default_user)
    tmp: Annotated[str, Field(description='System temporary directory')] = Field(default_factory=tempfile.gettempdir)
    is_windows: Annotated[bool, Field(description='Running on a Windows host')] = Field(default_factory=_default_is_windows)

    def export(self) -> dict[str, Any]:
        return {'env': {'cwd': self.cwd, 'home': self.home, 'user': self.user, 'tmp': self.tmp, 'is-windows': self.is_windows}}

def load_environment(**overrides: object) -> Environment:
    try:
        return Environment(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f'Invalid environment: {e}', {'errors': e.errors()}) from e

@lru_cache
def get_environment() -> Environment:
    return load_environment()
