import logging
from pathlib import Path
from .exceptions import VersionInfoError
logger = logging.getLogger(__name__)
VERSION_KEY = 'drush_version'

def _default_info_path() -> Path:
    return Path(__file__).resolve().parent / 'drush.info'

def read_info_file(path: Path) -> dict[str, str]:
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise VersionInfoError(f'Failed to read info file {path}: {e}', {'path': str(path)}) from e
    info: dict[str, str] = {}
    for line_num, line in enumerate(text.splitlines(), 1):
        raw = line.strip()
        if not raw or raw.startswith((';', '#')) or (raw.startswith('[') and raw.endswith(']')):
            continue
        if '=' not in raw:
            raise VersionInfoError(f'Malformed line {line_num} in info file {path}: {raw!r}', {'path': str(path), 'line': line_num})
        key, value = raw.split('=', 1)
        key = key.strip()
        if not key:
            raise VersionInfoError(f'Empty key on line {line_num} in info file {path}', {'path': str(path), 'line': line_num})
        info[key] = value.strip().strip("'").strip('"')
    return info

class VersionInfo:
    """Memoized view of the version recorded in the drush.info file.

    Nothing is cached until a read succeeds, so a failed lookup can be
    retried once the info file is fixed.
    """

    def __init__(self, info_path: Path | None=None) -> None:
        self.info_path = info_path or _default_info_path()
        self.reads = 0
        self._version: str | None = None
        self._major: str | None = None
        self._minor: str | None = None

    def _read(self) -> dict[str, str]:
        self.reads += 1
        logger.debug('Reading version info from %s', self.info_path)
        return read_info_file(self.info_path)

    def get_version(self) -> str:
        if self._version is None:
            info = self._read()
            version = info.get(VERSION_KEY, '')
            if not version:
                raise VersionInfoError(f'No {VERSION_KEY} found in {self.info_path}', {'path': str(self.info_path)})
            self._version = version
        return self._version

    def _segment(self, index: int) -> str:
        parts = self.get_version().split('.')
        if len(parts) <= index or not parts[index]:
            raise VersionInfoError(f'Version {self._version!r} has no segment {index}', {'version': self._version})
        return parts[index]

    def get_major_version(self) -> str:
        if self._major is None:
            self._major = self._segment(0)
        return self._major

    def get_minor_version(self) -> str:
        if self._minor is None:
            self._minor = self._segment(1)
        return self._minor

    def reset(self) -> None:
        self._version = None
        self._major = None
        self._minor = None
_version_info: VersionInfo | None = None

def get_version_info() -> VersionInfo:
    global _version_info
    if _version_info is None:
        _version_info = VersionInfo()
    return _version_info

def reset_version_info() -> None:
    global _version_info
    _version_info = None

def get_version() -> str:
    return get_version_info().get_version()

def get_major_version() -> str:
    return get_version_info().get_major_version()

def get_minor_version() -> str:
    return get_version_info().get_minor_version()
