"""
Tests for the memoized version reader
"""
import pytest

from drush import version as version_module
from drush.exceptions import VersionInfoError
from drush.version import VersionInfo, read_info_file


class TestReadInfoFile:

    def test_parses_keys_and_skips_comments(self, tmp_path):
        path = tmp_path / 'drush.info'
        path.write_text('[drush]\n# comment\n; another\n\nname = "Drush"\ndrush_version = \'9.3.1\'\n', encoding='utf-8')
        assert read_info_file(path) == {'name': 'Drush', 'drush_version': '9.3.1'}

    def test_missing_file(self, tmp_path):
        with pytest.raises(VersionInfoError):
            read_info_file(tmp_path / 'absent.info')

    def test_malformed_line(self, tmp_path):
        path = tmp_path / 'drush.info'
        path.write_text('drush_version 9.3.1\n', encoding='utf-8')
        with pytest.raises(VersionInfoError) as excinfo:
            read_info_file(path)
        assert excinfo.value.details['line'] == 1


class TestVersionInfo:

    def test_version_is_read_once(self, info_file):
        info = VersionInfo(info_file)
        assert info.get_version() == '9.3.1'
        assert info.get_version() == '9.3.1'
        assert info.reads == 1

    def test_major_and_minor(self, info_file):
        info = VersionInfo(info_file)
        assert info.get_major_version() == '9'
        assert info.get_minor_version() == '3'
        assert info.reads == 1

    def test_segments_consistent_with_version(self, info_file):
        info = VersionInfo(info_file)
        parts = info.get_version().split('.')
        assert [info.get_major_version(), info.get_minor_version()] == parts[:2]

    def test_segments_memoized_after_file_changes(self, info_file):
        info = VersionInfo(info_file)
        assert info.get_minor_version() == '3'
        info_file.write_text('drush_version = 10.0.0\n', encoding='utf-8')
        assert info.get_version() == '9.3.1'
        assert info.get_major_version() == '9'
        assert info.reads == 1

    def test_failure_is_not_memoized(self, tmp_path):
        path = tmp_path / 'drush.info'
        info = VersionInfo(path)
        with pytest.raises(VersionInfoError):
            info.get_version()
        path.write_text('drush_version = 8.1.0\n', encoding='utf-8')
        assert info.get_version() == '8.1.0'
        assert info.reads == 2

    def test_missing_version_key(self, tmp_path):
        path = tmp_path / 'drush.info'
        path.write_text('name = Drush\n', encoding='utf-8')
        with pytest.raises(VersionInfoError):
            VersionInfo(path).get_version()

    def test_version_without_minor_segment(self, tmp_path):
        path = tmp_path / 'drush.info'
        path.write_text('drush_version = 9\n', encoding='utf-8')
        info = VersionInfo(path)
        assert info.get_major_version() == '9'
        with pytest.raises(VersionInfoError):
            info.get_minor_version()

    def test_reset(self, info_file):
        info = VersionInfo(info_file)
        info.get_major_version()
        info.reset()
        info.get_major_version()
        assert info.reads == 2


class TestBundledVersion:

    def test_bundled_info_file(self):
        version = version_module.get_version()
        assert version
        assert version_module.get_major_version() == version.split('.')[0]
        assert version_module.get_minor_version() == version.split('.')[1]

    def test_process_wide_instance_is_shared(self):
        assert version_module.get_version_info() is version_module.get_version_info()
