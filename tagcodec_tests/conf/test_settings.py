import os
import tempfile
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from tagcodec.conf import (
    DEFAULT_CRATE_ROOT,
    DEFAULT_SETTINGS_FILEPATH,
    UNITTESTS_SETTINGS_FILEPATH,
    CodegenSettings,
    get_global_settings,
    reset_global_settings,
)
from tagcodec.conf.get_settings import CONFIG_YAML_ENV_VAR, get_settings_source


@pytest.fixture
def fresh_settings():
    reset_global_settings()
    yield
    reset_global_settings()


def test_defaults() -> None:
    settings = CodegenSettings()
    assert settings.CRATE_ROOT == DEFAULT_CRATE_ROOT == 'tagcodec'
    assert settings.DUMP_DIR is None


def test_from_yaml_files() -> None:
    assert CodegenSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH) == CodegenSettings()
    assert CodegenSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH) == CodegenSettings()


def test_extended_yaml() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        base = os.path.join(tmpdir, 'base.yml')
        with open(base, 'w') as fp:
            fp.write('CRATE_ROOT: my.runtime\nDUMP_DIR: /tmp/base\n')
        child = os.path.join(tmpdir, 'child.yml')
        with open(child, 'w') as fp:
            fp.write('extends: base.yml\nDUMP_DIR: /tmp/child\n')
        settings = CodegenSettings.from_yaml(filepath=child)
    assert settings.CRATE_ROOT == 'my.runtime'
    assert settings.DUMP_DIR == '/tmp/child'


@pytest.mark.parametrize('crate_root', ['', 'my-runtime', '1runtime', 'a.', '.a'])
def test_invalid_crate_root(crate_root: str) -> None:
    with pytest.raises(ValidationError):
        CodegenSettings(CRATE_ROOT=crate_root)


def test_unknown_key() -> None:
    with pytest.raises(ValidationError):
        CodegenSettings(CRATE=None)  # type: ignore[call-arg]


def test_frozen() -> None:
    settings = CodegenSettings()
    with pytest.raises(ValidationError):
        settings.DUMP_DIR = '/tmp'  # type: ignore[misc]


def test_global_settings_from_env(fresh_settings) -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, 'settings.yml')
        with open(path, 'w') as fp:
            fp.write('CRATE_ROOT: vendored.codec\n')
        with patch.dict(os.environ, {CONFIG_YAML_ENV_VAR: path}):
            settings = get_global_settings()
            assert settings.CRATE_ROOT == 'vendored.codec'
            assert get_global_settings() is settings
            assert get_settings_source() == path


def test_global_settings_without_env(fresh_settings) -> None:
    with patch.dict(os.environ, clear=True):
        assert get_global_settings() == CodegenSettings()
        assert get_settings_source() is None


def test_source_cannot_change(fresh_settings) -> None:
    with patch.dict(os.environ, {CONFIG_YAML_ENV_VAR: UNITTESTS_SETTINGS_FILEPATH}):
        get_global_settings()
    with patch.dict(os.environ, {CONFIG_YAML_ENV_VAR: DEFAULT_SETTINGS_FILEPATH}):
        with pytest.raises(Exception, match='different file'):
            get_global_settings()
