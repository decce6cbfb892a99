"""
sanicview
Light weight view layer: layouts, helpers and a compiled-template cache
"""
from sanicview.view import (
    View,
    ViewEngine,
    ViewSettings,
    RenderResult,
    FileStore,
    TemplateCompiler,
    CompiledTemplate,
    TemplateCache,
    shared_cache,
    default_engine,
    render_file,
    try_render_file,
    render_file_callback,
)
from sanicview.helpers import truncate, money, DEFAULT_HELPERS
from sanicview.exceptions import (
    ViewException,
    TemplateNotFoundException,
    TemplateCompileException,
    LayoutCycleException,
)

__version__ = '1.0.0'

__all__ = [
    'View',
    'ViewEngine',
    'ViewSettings',
    'RenderResult',
    'FileStore',
    'TemplateCompiler',
    'CompiledTemplate',
    'TemplateCache',
    'shared_cache',
    'default_engine',
    'render_file',
    'try_render_file',
    'render_file_callback',
    'truncate',
    'money',
    'DEFAULT_HELPERS',
    'ViewException',
    'TemplateNotFoundException',
    'TemplateCompileException',
    'LayoutCycleException',
]
