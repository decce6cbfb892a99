"""
Support Classes
"""

from sanicview.support.config import Config, ConfigObject
from sanicview.support.env_helper import EnvHelper

__all__ = [
    'Config',
    'ConfigObject',
    'EnvHelper',
]
