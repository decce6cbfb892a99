"""Tests for Config, EnvHelper and ViewSettings."""

import os
import sys

import pytest

from sanicview.support import Config, ConfigObject, EnvHelper
from sanicview.view import ViewSettings


def test_missing_config_returns_default():
    assert Config.get('view.VIEW_CONFIG.nothing', 'fallback') == 'fallback'


def test_runtime_override_is_case_insensitive():
    Config.set('View.View_Config.Cache', False)

    assert Config.get('view.VIEW_CONFIG.cache') is False
    assert Config.has('VIEW.view_config.CACHE')


def test_clear_runtime_overrides():
    Config.set('view.flag', True)
    Config.clear_runtime_overrides()

    assert Config.get('view.flag') is None


def test_as_object():
    Config.set('view.options', {'cache': True, 'nested': {'depth': 3}})

    options = Config.as_object('view.options')

    assert isinstance(options, ConfigObject)
    assert options.cache is True
    assert options.nested.depth == 3
    with pytest.raises(AttributeError):
        options.missing


def test_config_reads_application_module(tmp_path, monkeypatch):
    package = tmp_path / 'config'
    package.mkdir()
    (package / '__init__.py').write_text('')
    (package / 'view.py').write_text(
        "VIEW_CONFIG = {'cache': False, 'Autoescape': True, 'varname': 'data,h'}\n"
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    for name in ('config', 'config.view'):
        monkeypatch.delitem(sys.modules, name, raising=False)
    Config.reload('view')

    try:
        assert Config.get('view.VIEW_CONFIG.cache') is False
        assert Config.get('VIEW.view_config.autoescape') is True
        assert Config.all('view').VIEW_CONFIG['varname'] == 'data,h'

        settings = ViewSettings.from_config()
        assert settings.cache is False
        assert settings.autoescape is True
        assert settings.names == ('data', 'h')
    finally:
        Config.reload('view')
        sys.modules.pop('config.view', None)
        sys.modules.pop('config', None)


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv('VIEW_CACHE', raising=False)

    settings = ViewSettings.from_config()

    assert settings.cache is True
    assert settings.varname == 'it,helpers'
    assert settings.autoescape is False
    assert settings.layout_regex.search('{{## _layout: ../main.html #}}').group(1) == '../main.html'


def test_settings_cache_from_environment(monkeypatch):
    monkeypatch.setenv('VIEW_CACHE', 'false')

    assert ViewSettings.from_config().cache is False


def test_settings_config_wins_over_environment(monkeypatch):
    monkeypatch.setenv('VIEW_CACHE', 'false')
    Config.set('view.VIEW_CONFIG.cache', True)

    assert ViewSettings.from_config().cache is True


def test_settings_copy_is_independent():
    settings = ViewSettings(varname='d,h')
    copy = settings.copy()
    copy.cache = False

    assert settings.cache is True
    assert copy.varname == 'd,h'


@pytest.mark.parametrize("value, expected", [
    ('true', True), ('1', True), ('YES', True), ('on', True),
    ('false', False), ('0', False), ('nope', False),
])
def test_env_helper_get_bool(monkeypatch, value, expected):
    monkeypatch.setenv('SANICVIEW_TEST_FLAG', value)

    assert EnvHelper.get_bool('SANICVIEW_TEST_FLAG') is expected


def test_env_helper_get_bool_default(monkeypatch):
    monkeypatch.delenv('SANICVIEW_TEST_FLAG', raising=False)

    assert EnvHelper.get_bool('SANICVIEW_TEST_FLAG', True) is True
    assert EnvHelper.has('SANICVIEW_TEST_FLAG') is False


def test_env_helper_load(tmp_path, monkeypatch):
    monkeypatch.delenv('SANICVIEW_TEST_KEY', raising=False)
    env_file = tmp_path / '.env'
    env_file.write_text('SANICVIEW_TEST_KEY=hello\n')

    try:
        assert EnvHelper.load(env_file) is True
        assert EnvHelper.get('SANICVIEW_TEST_KEY') == 'hello'
        assert EnvHelper.is_loaded()
    finally:
        os.environ.pop('SANICVIEW_TEST_KEY', None)


def test_env_helper_load_missing_file(tmp_path):
    assert EnvHelper.load(tmp_path / 'missing.env') is False
