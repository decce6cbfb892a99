"""
Template Cache
Memory cache for compiled template functions, keyed by absolute file path
"""
from typing import Dict, Optional, Any

from sanicview.logging import getLogger
from sanicview.view.compiler import CompiledTemplate

logger = getLogger(__name__)


class TemplateCache:
    """
    Compiled-template cache

    Entries are never invalidated automatically; edits to a template
    file are only picked up after clear()/forget() or with caching
    disabled in the view settings.

    Usage:
        cache = TemplateCache()
        template = cache.get(path)
        if template is None:
            template = compiler.compile(source, settings, defines)
            cache.put(path, template)
    """

    def __init__(self):
        self._templates: Dict[str, CompiledTemplate] = {}
        self.hits = 0
        self.misses = 0

    def get(self, path: str) -> Optional[CompiledTemplate]:
        """Get the compiled template for a path, or None"""
        template = self._templates.get(path)
        if template is None:
            self.misses += 1
            logger.debug("Template cache miss", extra={'path': path})
        else:
            self.hits += 1
            logger.debug("Template cache hit", extra={'path': path})
        return template

    def put(self, path: str, template: CompiledTemplate):
        """Store a compiled template (overwrites)"""
        self._templates[path] = template
        logger.debug("Template cached", extra={'path': path})

    def has(self, path: str) -> bool:
        return path in self._templates

    def forget(self, path: str) -> bool:
        """Remove one entry. Returns True if it was cached"""
        return self._templates.pop(path, None) is not None

    def clear(self):
        """Drop every compiled template"""
        self._templates.clear()
        logger.debug("Template cache cleared")

    def get_stats(self) -> Dict[str, Any]:
        return {
            'size': len(self._templates),
            'hits': self.hits,
            'misses': self.misses,
            'paths': sorted(self._templates),
        }

    def __contains__(self, path: str) -> bool:
        return self.has(path)

    def __len__(self) -> int:
        return len(self._templates)


# Process-wide cache used by views that are not given one explicitly
_shared_cache = TemplateCache()


def shared_cache() -> TemplateCache:
    """Get the process-wide template cache"""
    return _shared_cache
