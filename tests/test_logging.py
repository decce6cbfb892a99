"""Tests for logging setup and view-layer log events."""

import io
import json
import logging
import sys

from sanicview.logging import JSONFormatter, LoggerConfig, getLogger
from sanicview.support import Config
from sanicview.view import TemplateCache


def make_record(msg='hello', exc_info=None, **extra):
    record = logging.LogRecord('sanicview.test', logging.INFO, __file__, 10, msg, None, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    output = json.loads(JSONFormatter().format(make_record(path='/views/home.html')))

    assert output['message'] == 'hello'
    assert output['level'] == 'INFO'
    assert output['logger'] == 'sanicview.test'
    assert output['path'] == '/views/home.html'


def test_json_formatter_includes_exception():
    try:
        raise ValueError('boom')
    except ValueError:
        record = make_record(exc_info=sys.exc_info())

    output = json.loads(JSONFormatter().format(record))

    assert 'ValueError: boom' in output['exception']


def test_get_logger_keeps_module_names():
    assert getLogger('sanicview.view.view').name == 'sanicview.view.view'


def test_get_logger_maps_unknown_bare_names_to_root():
    assert getLogger('random') is logging.getLogger()


def test_get_logger_allows_configured_names():
    Config.set('view.LOGGING_HANDLERS', {'views': {'name': 'sanicview'}})

    assert getLogger('sanicview').name == 'sanicview'


def test_setup_logger_text_stream():
    stream = io.StringIO()
    logger = LoggerConfig.setup_logger('sanicview', format_type='text', level=logging.DEBUG, stream=stream)

    getLogger('sanicview.view.cache').debug('Template cache miss')

    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert 'DEBUG - Template cache miss' in stream.getvalue()


def test_setup_logger_json_with_file(tmp_path):
    stream = io.StringIO()
    log_file = tmp_path / 'views.log'
    logger = LoggerConfig.setup_logger('sanicview', level=logging.INFO, file_name=str(log_file), stream=stream)

    logger.info('rendered', extra={'path': '/views/home.html'})
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert json.loads(stream.getvalue())['path'] == '/views/home.html'
    assert json.loads(log_file.read_text())['message'] == 'rendered'


def test_level_by_environment():
    assert LoggerConfig.get_level_by_environment('production') == logging.WARNING
    assert LoggerConfig.get_level_by_environment('Development') == logging.DEBUG
    assert LoggerConfig.get_level_by_environment('testing') == logging.ERROR
    assert LoggerConfig.get_level_by_environment('local') == logging.INFO


def test_cache_logs_hits_and_misses(caplog):
    caplog.set_level(logging.DEBUG, logger='sanicview.view.cache')
    cache = TemplateCache()

    cache.get('/views/home.html')
    cache.put('/views/home.html', object())
    cache.get('/views/home.html')

    messages = [record.getMessage() for record in caplog.records]
    assert messages == ['Template cache miss', 'Template cached', 'Template cache hit']
