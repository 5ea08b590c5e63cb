import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from ..exceptions import ConfigurationError

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='DRUSH_', env_file='.env', env_file_encoding='utf-8', extra='ignore')
    log_level: Annotated[str, Field(description='Logging level name')] = 'INFO'
    debug: Annotated[bool, Field(description='Enable debug logging')] = False
    info_path: Annotated[Path | None, Field(description='Override for the drush.info file')] = None

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {value!r}')
        return level

    @property
    def effective_log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.getLevelName(self.log_level)

def load_settings(**overrides: object) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f'Invalid settings: {e}', {'errors': e.errors()}) from e

@lru_cache
def get_settings() -> Settings:
    return load_settings()
