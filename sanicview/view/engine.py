"""
View Engine
Rendering service that owns the template cache and builds views

Two entry points render a template file with an options mapping:

    html = engine.render_file('/app/views/home.html', {'title': 'Home'})

    result = engine.try_render_file('/app/views/home.html', {'title': 'Home'})
    if result.ok:
        ...

render_file_callback() adapts the second form to an (error, html) callback.
"""
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from sanicview.logging import getLogger
from sanicview.view.cache import TemplateCache, shared_cache
from sanicview.view.compiler import TemplateCompiler
from sanicview.view.file_store import FileStore
from sanicview.view.settings import ViewSettings
from sanicview.view.view import View

logger = getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of a wrapped render: html on success, error on failure"""
    html: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ViewEngine:
    """
    Unified view rendering engine
    """

    def __init__(
        self,
        settings: Optional[ViewSettings] = None,
        cache: Optional[TemplateCache] = None,
        compiler: Optional[TemplateCompiler] = None,
        file_store: Optional[FileStore] = None
    ):
        """
        Initialize view engine

        Args:
            settings: Base settings; every view gets its own copy
            cache: Compiled-template cache shared by all views of this engine
            compiler: Template compiler
            file_store: Template file reader
        """
        self.settings = settings or ViewSettings()
        self.cache = cache if cache is not None else TemplateCache()
        self.compiler = compiler or TemplateCompiler()
        self.file_store = file_store or FileStore(self.settings.encoding)

    def make_view(
        self,
        path: Optional[str] = None,
        file: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        discover_layout: bool = True
    ) -> View:
        """Create a view wired to this engine's cache, compiler and file store"""
        return View(
            path,
            file,
            data,
            settings=self.settings.copy(),
            cache=self.cache,
            compiler=self.compiler,
            file_store=self.file_store,
            discover_layout=discover_layout,
        )

    def view_for(self, template_path: str) -> View:
        """Create a view from a full template path incl. file name"""
        return self.make_view(os.path.dirname(template_path), os.path.basename(template_path))

    def build_view(self, template_path: str, options: Optional[Dict[str, Any]] = None) -> View:
        """
        Create a view and apply an options mapping

        Options:
            layout: View instance or template path
            defines: Mapping merged into the view's defines
            helpers: Mapping merged into the view's helpers
            cache: Toggle the compiled-template cache
            anything else: template data
        """
        view = self.view_for(template_path)
        data = {}
        layout = None

        for key, value in (options or {}).items():
            if key == 'layout':
                layout = value
            elif key == 'defines' and isinstance(value, dict):
                view.define(value)
            elif key == 'helpers' and isinstance(value, dict):
                view.add_helpers(value)
            elif key == 'cache':
                view.settings.cache = bool(value)
            else:
                data[key] = value

        if layout is not None:
            if not isinstance(layout, View):
                layout = view.spawn(str(layout))
            view.layout(layout)

        return view.assign(data)

    def render_file(self, template_path: str, options: Optional[Dict[str, Any]] = None) -> str:
        """
        Render a template file; errors propagate to the caller

        Example:
            html = engine.render_file('/app/views/home.html', {
                'layout': 'layouts/main.html',
                'title': 'Home',
            })
        """
        return self.build_view(template_path, options).render()

    def try_render_file(self, template_path: str, options: Optional[Dict[str, Any]] = None) -> RenderResult:
        """Render a template file, capturing any error in the result"""
        try:
            return RenderResult(html=self.render_file(template_path, options))
        except Exception as e:
            logger.error(f"Render error for {template_path}: {e}", exc_info=True)
            return RenderResult(error=e)

    def render_file_callback(
        self,
        template_path: str,
        options: Optional[Dict[str, Any]],
        callback: Callable[[Optional[Exception], Optional[str]], Any]
    ) -> Any:
        """
        Render a template file and report through callback(error, html)

        Returns:
            Whatever the callback returns
        """
        result = self.try_render_file(template_path, options)
        return callback(result.error, result.html)

    def clear_cache(self):
        """Clear the engine's compiled-template cache"""
        self.cache.clear()


_default_engine: Optional[ViewEngine] = None


def default_engine() -> ViewEngine:
    """Engine built from config/view.py settings and the process-wide cache"""
    global _default_engine
    if _default_engine is None:
        _default_engine = ViewEngine(settings=ViewSettings.from_config(), cache=shared_cache())
    return _default_engine


def render_file(template_path: str, options: Optional[Dict[str, Any]] = None) -> str:
    return default_engine().render_file(template_path, options)


def try_render_file(template_path: str, options: Optional[Dict[str, Any]] = None) -> RenderResult:
    return default_engine().try_render_file(template_path, options)


def render_file_callback(
    template_path: str,
    options: Optional[Dict[str, Any]],
    callback: Callable[[Optional[Exception], Optional[str]], Any]
) -> Any:
    return default_engine().render_file_callback(template_path, options, callback)
