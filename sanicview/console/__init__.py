"""
Console Package
"""
from sanicview.console.command import Command
from sanicview.console.cli import Cli, main

__all__ = [
    'Command',
    'Cli',
    'main',
]
