"""
View Package
Views, layouts, the template compiler and its cache
"""
from sanicview.view.settings import ViewSettings
from sanicview.view.file_store import FileStore
from sanicview.view.compiler import TemplateCompiler, CompiledTemplate
from sanicview.view.cache import TemplateCache, shared_cache
from sanicview.view.view import View
from sanicview.view.engine import (
    ViewEngine,
    RenderResult,
    default_engine,
    render_file,
    try_render_file,
    render_file_callback,
)

__all__ = [

    # Core
    'View',
    'ViewEngine',
    'ViewSettings',
    'RenderResult',

    # Collaborators
    'FileStore',
    'TemplateCompiler',
    'CompiledTemplate',
    'TemplateCache',
    'shared_cache',

    # Adapter functions
    'default_engine',
    'render_file',
    'try_render_file',
    'render_file_callback',
]
