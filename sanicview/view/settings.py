"""
View Settings
Rendering configuration shared by a view and the layouts it discovers
"""
import re
from typing import Pattern, Tuple

from sanicview.defaults import (
    DEFAULT_VARNAME,
    DEFAULT_CACHE_ENABLED,
    DEFAULT_LAYOUT_PATTERN,
    DEFAULT_AUTOESCAPE,
    DEFAULT_STRICT_UNDEFINED,
    DEFAULT_TEMPLATE_ENCODING,
)


class ViewSettings:
    """
    Rendering configuration

    Attributes:
        varname: Comma separated names for the data and helper mappings ('it,helpers')
        cache: Use the compiled-template cache
        layout_pattern: Regex capturing the layout path of an in-template marker
        autoescape: HTML-escape interpolated values
        strict_undefined: Raise on undefined template variables
        encoding: Encoding used to read template files
    """

    FIELDS = ('varname', 'cache', 'layout_pattern', 'autoescape', 'strict_undefined', 'encoding')

    def __init__(
        self,
        varname: str = DEFAULT_VARNAME,
        cache: bool = DEFAULT_CACHE_ENABLED,
        layout_pattern: str = DEFAULT_LAYOUT_PATTERN,
        autoescape: bool = DEFAULT_AUTOESCAPE,
        strict_undefined: bool = DEFAULT_STRICT_UNDEFINED,
        encoding: str = DEFAULT_TEMPLATE_ENCODING
    ):
        self.varname = varname
        self.cache = cache
        self.layout_pattern = layout_pattern
        self.autoescape = autoescape
        self.strict_undefined = strict_undefined
        self.encoding = encoding

    @classmethod
    def from_config(cls) -> 'ViewSettings':
        """
        Build settings from config/view.py (VIEW_CONFIG) and the environment

        Example:
            # config/view.py
            VIEW_CONFIG = {'cache': False, 'autoescape': True}

            settings = ViewSettings.from_config()
        """
        from sanicview.support import Config, EnvHelper

        defaults = cls()
        values = {
            field: Config.get(f'view.VIEW_CONFIG.{field}', getattr(defaults, field))
            for field in cls.FIELDS
        }
        if not Config.has('view.VIEW_CONFIG.cache'):
            values['cache'] = EnvHelper.get_bool('VIEW_CACHE', DEFAULT_CACHE_ENABLED)

        return cls(**values)

    @property
    def names(self) -> Tuple[str, str]:
        """(data name, helpers name) taken from varname"""
        parts = [part.strip() for part in self.varname.split(',')]
        data_name = parts[0] or 'it'
        helpers_name = parts[1] if len(parts) > 1 and parts[1] else 'helpers'
        return data_name, helpers_name

    @property
    def layout_regex(self) -> Pattern:
        return re.compile(self.layout_pattern)

    def copy(self) -> 'ViewSettings':
        return ViewSettings(**{field: getattr(self, field) for field in self.FIELDS})

    def __repr__(self):
        attrs = ', '.join(f'{field}={getattr(self, field)!r}' for field in self.FIELDS)
        return f'ViewSettings({attrs})'
