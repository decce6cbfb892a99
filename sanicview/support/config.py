"""
Config Manager - dot notation access to application config modules
Views read their settings from config/view.py through this class
"""

import importlib
import threading
from typing import Any, Optional, Dict

_MISSING = object()


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        cache = Config.get('view.VIEW_CONFIG.cache')

        # With default
        varname = Config.get('view.VIEW_CONFIG.varname', 'it,helpers')

        # Set runtime value
        Config.set('view.VIEW_CONFIG.cache', False)

        # Check existence
        if Config.has('view.LOGGING_HANDLERS'):
            ...

    Config files live in the application's config/ package:
        config/
        ├── __init__.py
        └── view.py
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'view.VIEW_CONFIG.cache')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)
        if value is None:
            return default

        for part in parts[1:]:
            value = cls._find(value, part)
            if value is _MISSING:
                return default

        return value

    @staticmethod
    def _find(container: Any, part: str) -> Any:
        """Case-insensitive lookup of one segment in a module, object or dict"""
        if isinstance(container, dict):
            for dict_key in container.keys():
                if str(dict_key).lower() == part:
                    return container[dict_key]
            return _MISSING

        if hasattr(container, '__dict__'):
            for attr_name in dir(container):
                if attr_name.lower() == part:
                    return getattr(container, attr_name)

        return _MISSING

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config module from the config package

        Args:
            file_name: Config module name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'config.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('view.VIEW_CONFIG.cache', False)
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """
        Get a whole config module

        Example:
            view_config = Config.all('view')
            print(view_config.VIEW_CONFIG)
        """
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        return cls._loaded.get(file_name)

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name, None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()

    @classmethod
    def as_object(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration as an object with attribute access

        Example:
            config = Config.as_object('view.VIEW_CONFIG')
            if config.cache:
                ...
        """
        value = cls.get(key, default)

        if isinstance(value, dict):
            return ConfigObject(**value)

        return value


class ConfigObject:
    """
    Simple object wrapper for dict configs
    Allows attribute access to config values
    """

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            if isinstance(value, dict):
                setattr(self, key, ConfigObject(**value))
            else:
                setattr(self, key, value)

    def __repr__(self):
        attrs = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'ConfigObject({attrs})'

    def __getattr__(self, name):
        raise AttributeError(f"Config has no attribute '{name}'")
