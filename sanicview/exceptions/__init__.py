"""
Exceptions Package
"""
from sanicview.exceptions.custom import (
    ViewException,
    TemplateNotFoundException,
    TemplateCompileException,
    LayoutCycleException,
)

__all__ = [
    'ViewException',
    'TemplateNotFoundException',
    'TemplateCompileException',
    'LayoutCycleException',
]
