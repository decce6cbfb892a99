"""
EnvHelper - Read environment variables with .env support
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, Union
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with optional .env file loading

    Usage:
        # Load .env from the working directory (missing file is fine)
        EnvHelper.load()

        # Read
        value = EnvHelper.get('VIEW_CACHE', 'true')
        cache = EnvHelper.get_bool('VIEW_CACHE', True)
    """

    _lock = threading.Lock()
    _loaded: bool = False

    @classmethod
    def load(cls, env_path: Optional[Union[str, Path]] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a file was loaded
        """
        with cls._lock:
            env_path = Path(env_path) if env_path else Path(os.getcwd()) / '.env'
            cls._loaded = True

            if not env_path.exists():
                return False

            return load_dotenv(env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            env = EnvHelper.get('APP_ENV', 'production')
        """
        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            cache = EnvHelper.get_bool('VIEW_CACHE', True)
        """
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if environment variable exists"""
        return key in os.environ

    @classmethod
    def is_loaded(cls) -> bool:
        return cls._loaded
