from .drush_config import DrushConfig
from .environment import Environment, get_environment, load_environment
from .overlay import Config, ConfigOverlay
from .settings import Settings, get_settings, load_settings
__all__ = ['Config', 'ConfigOverlay', 'DrushConfig', 'Environment', 'Settings', 'get_environment', 'get_settings', 'load_environment', 'load_settings']
