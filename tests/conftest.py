"""
Shared fixtures for the drush runtime tests
"""
from pathlib import Path

import pytest

from drush.config import DrushConfig, Environment, get_environment, get_settings
from drush.locator import unset_container
from drush.version import reset_version_info


def _reset_runtime():
    unset_container()
    reset_version_info()
    get_settings.cache_clear()
    get_environment.cache_clear()


@pytest.fixture(autouse=True)
def clean_runtime(monkeypatch):
    """Every test starts without a container and with fresh cached settings"""
    for name in ('DRUSH_HOME', 'DRUSH_TMP', 'DRUSH_USER', 'DRUSH_CWD', 'DRUSH_IS_WINDOWS', 'DRUSH_LOG_LEVEL', 'DRUSH_DEBUG', 'DRUSH_INFO_PATH'):
        monkeypatch.delenv(name, raising=False)
    _reset_runtime()
    yield
    _reset_runtime()


@pytest.fixture
def environment(tmp_path: Path) -> Environment:
    return Environment(
        cwd=str(tmp_path),
        home=str(tmp_path / 'home'),
        user='tester',
        tmp=str(tmp_path / 'tmp'),
        is_windows=False,
    )


@pytest.fixture
def drush_config(environment) -> DrushConfig:
    return DrushConfig.from_environment(environment)


@pytest.fixture
def info_file(tmp_path: Path) -> Path:
    path = tmp_path / 'drush.info'
    path.write_text('; Drush info\nname = Drush\ndrush_version = 9.3.1\n', encoding='utf-8')
    return path
