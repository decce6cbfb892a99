"""Test configuration for sanicview."""

import logging

import pytest

from sanicview.support import Config
from sanicview.view import FileStore, TemplateCache, TemplateCompiler, View, ViewEngine


class CountingCompiler(TemplateCompiler):
    """Compiler that counts compile() calls."""

    def __init__(self):
        super().__init__()
        self.compiled = 0

    def compile(self, source, settings, defines=None):
        self.compiled += 1
        return super().compile(source, settings, defines)


class CountingFileStore(FileStore):
    """File store that records every path read."""

    def __init__(self):
        super().__init__()
        self.reads = []

    def read(self, path):
        self.reads.append(str(path))
        return super().read(path)


@pytest.fixture(autouse=True)
def reset_config_and_logging():
    """Drop runtime config overrides and logger setup between tests."""
    yield
    Config.clear_runtime_overrides()
    Config.reload('view')

    logger = logging.getLogger('sanicview')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_template(tmp_path):
    """Write a template under tmp_path and return its path."""

    def write(relative, content):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path

    return write


@pytest.fixture
def cache():
    return TemplateCache()


@pytest.fixture
def compiler():
    return CountingCompiler()


@pytest.fixture
def file_store():
    return CountingFileStore()


@pytest.fixture
def make_view(cache, compiler, file_store):
    """Build views wired to the per-test cache, compiler and file store."""

    def make(path=None, file=None, data=None, **kwargs):
        return View(
            str(path) if path is not None else None,
            file,
            data,
            cache=cache,
            compiler=compiler,
            file_store=file_store,
            **kwargs
        )

    return make


@pytest.fixture
def engine(cache, compiler, file_store):
    return ViewEngine(cache=cache, compiler=compiler, file_store=file_store)
