"""
View
A template location paired with data, defines, helpers and an optional layout
"""
import os
from typing import Any, Callable, Dict, List, Optional, Set

from sanicview.defaults import DEFAULT_CONTENT_KEY, DEFAULT_INCLUDE_DEFINE, DEFAULT_STATUS
from sanicview.exceptions import LayoutCycleException, TemplateNotFoundException, ViewException
from sanicview.helpers import DEFAULT_HELPERS
from sanicview.logging import getLogger
from sanicview.view.cache import TemplateCache, shared_cache
from sanicview.view.compiler import CompiledTemplate, TemplateCompiler
from sanicview.view.file_store import FileStore
from sanicview.view.settings import ViewSettings

logger = getLogger(__name__)


class View:
    """
    Light weight view class

    For quick use, the most important properties can be set in the constructor:

        view = View('/app/views', 'home.html', {'title': 'Home'})
        view.assign({'user': user}).define({'footer': '<footer>..</footer>'})
        html = view.render()

    A template may declare its own layout with a marker line:

        {{## _layout: ../layouts/main.html #}}

    The layout template splices the child html in with {{#def._content}}.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        file: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        *,
        settings: Optional[ViewSettings] = None,
        cache: Optional[TemplateCache] = None,
        compiler: Optional[TemplateCompiler] = None,
        file_store: Optional[FileStore] = None,
        helpers: Optional[Dict[str, Callable]] = None,
        discover_layout: bool = True
    ):
        """
        Initialize view

        Args:
            path: Directory containing the template file
            file: Template file name
            data: Initial template data
            settings: Rendering settings (default: ViewSettings())
            cache: Compiled-template cache (default: the process-wide cache)
            compiler: Template compiler
            file_store: Template file reader
            helpers: Helper mapping (default: a copy of DEFAULT_HELPERS)
            discover_layout: Look for a layout marker right away when a file is given
        """
        self.path = path
        self.file = file
        self.data: Dict[str, Any] = {}
        self.defines: Dict[str, Any] = {}
        self.helpers: Dict[str, Callable] = helpers if helpers is not None else dict(DEFAULT_HELPERS)
        self.enabled = True
        self.layout_view: Optional['View'] = None

        self.settings = settings or ViewSettings()
        self.cache = cache if cache is not None else shared_cache()
        self.compiler = compiler or TemplateCompiler()
        self.file_store = file_store or FileStore(self.settings.encoding)

        self._layout_explicit = False
        self._layout_discovered = False

        self.assign(data)

        if file and discover_layout:
            self.layout()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def assign(self, data: Optional[Dict[str, Any]] = None) -> 'View':
        """Merge template data (later keys overwrite earlier ones)"""
        for key, value in (data or {}).items():
            self.data[key] = value
        return self

    def define(self, defines: Optional[Dict[str, Any]] = None) -> 'View':
        """
        Merge compile-time defines like sub-templates

        Example:
            view.define({'foo': '<div>{{ it.bar }} foobar?</div>'})
            # template: {{#def.foo}}
        """
        for name, value in (defines or {}).items():
            self.defines[name] = value
        return self

    def add_helpers(self, helpers: Optional[Dict[str, Callable]] = None) -> 'View':
        """Add or override helper functions for this view"""
        for name, helper in (helpers or {}).items():
            self.helpers[name] = helper
        return self

    def toggle(self, enabled: Optional[bool] = None) -> 'View':
        """Flip the enabled flag, or set it to the truthiness of enabled"""
        self.enabled = (not self.enabled) if enabled is None else bool(enabled)
        return self

    def clear_cache(self) -> 'View':
        """Clear the compiled templates cache"""
        self.cache.clear()
        return self

    # ------------------------------------------------------------------
    # Paths & layouts
    # ------------------------------------------------------------------

    def resolve_path(self, path: str) -> str:
        """Absolute paths are kept, relative ones resolve against this view's directory"""
        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.path or os.curdir, path))

    def full_path(self, file: Optional[str] = None) -> str:
        file = file or self.file
        if not file:
            raise ViewException("No template file set for view")
        return os.path.abspath(os.path.join(self.path or os.curdir, file))

    def layout(self, view: Optional['View'] = None) -> Optional['View']:
        """
        Get or set the layout view

        Setting a layout always wins over a marker in the template. When
        no layout was set, the template is scanned once for a marker.
        """
        if isinstance(view, View):
            self._check_cycle(view)
            self.layout_view = view
            self._layout_explicit = True
            return self.layout_view

        if self.layout_view is None and self.file and not self._layout_discovered:
            self.layout_view = self._discover_layout()
            self._layout_discovered = True

        return self.layout_view

    def layout_chain(self) -> List['View']:
        """Layouts from the nearest outward"""
        chain = []
        views, files = {id(self)}, set()
        layout = self._next_layout(views, files)
        while layout is not None:
            chain.append(layout)
            layout = layout._next_layout(views, files)
        return chain

    def _next_layout(self, views: Set[int], files: Set[str]) -> Optional['View']:
        """
        Follow one layout link, refusing to revisit a view instance or a
        template whose layout comes from its own marker
        """
        layout = self.layout()
        if layout is None:
            return None

        if id(layout) in views:
            raise LayoutCycleException(layout.full_path())
        views.add(id(layout))

        if not self._layout_explicit:
            # Discovered links are fixed by the file, so a repeat loops forever
            full_path = self.full_path()
            if full_path in files:
                raise LayoutCycleException(full_path)
            files.add(full_path)

        return layout

    def _check_cycle(self, view: 'View'):
        current = view
        while current is not None:
            if current is self:
                raise LayoutCycleException(
                    self.full_path() if self.file else repr(self),
                    "A view cannot be its own layout"
                )
            current = current.layout_view

    def _discover_layout(self) -> Optional['View']:
        full_path = self.full_path()
        try:
            source = self.file_store.read(full_path)
        except TemplateNotFoundException:
            logger.debug("Layout discovery skipped, template missing", extra={'path': full_path})
            return None

        match = self.settings.layout_regex.search(source)
        if match is None:
            return None

        layout_path = self.resolve_path(match.group(1))
        logger.debug("Layout discovered", extra={'path': full_path, 'layout': layout_path})
        return self.spawn(layout_path)

    def spawn(self, template_path: str, data: Optional[Dict[str, Any]] = None) -> 'View':
        """
        Create a view for another template sharing this view's settings,
        helpers, cache, compiler and file store
        """
        template_path = self.resolve_path(template_path)
        return View(
            os.path.dirname(template_path),
            os.path.basename(template_path),
            data,
            settings=self.settings,
            cache=self.cache,
            compiler=self.compiler,
            file_store=self.file_store,
            helpers=self.helpers,
            discover_layout=False,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, file: Optional[str] = None) -> str:
        """
        Render the template file to a string, wrapped in its layouts

        Args:
            file: Template file to render (optional when already set)
        """
        if file and file != self.file:
            self.file = file
            if not self._layout_explicit:
                self.layout_view = None
                self._layout_discovered = False

        return self._render({id(self)}, set())

    def _render(self, views: Set[int], files: Set[str]) -> str:
        template = self._template(self.full_path())
        html = template(self.data, self.helpers, self.defines)

        layout = self._next_layout(views, files)
        if layout is not None:
            layout.define({DEFAULT_CONTENT_KEY: html})
            return layout._render(views, files)
        return html

    def _template(self, full_path: str) -> CompiledTemplate:
        if not self.settings.cache:
            return self._compile(full_path)

        template = self.cache.get(full_path)
        if template is None:
            template = self._compile(full_path)
            self.cache.put(full_path, template)
        return template

    def _compile(self, full_path: str) -> CompiledTemplate:
        source = self.file_store.read(full_path)
        defines = dict(self.defines)
        if DEFAULT_INCLUDE_DEFINE not in defines:
            defines[DEFAULT_INCLUDE_DEFINE] = self._include
        return self.compiler.compile(source, self.settings, defines)

    def _include(self, path: str) -> str:
        return self.file_store.read(self.resolve_path(path))

    def display(self, response, file: Optional[str] = None, status: int = DEFAULT_STATUS):
        """
        Render and send the html through a response sink

        Args:
            response: Object with status(code) returning something with send(body)
            file: The template file to render
            status: The HTTP status
        """
        return response.status(status or DEFAULT_STATUS).send(self.render(file))

    def __repr__(self):
        return f'View(path={self.path!r}, file={self.file!r})'
