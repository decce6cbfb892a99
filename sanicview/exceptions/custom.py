"""
Custom Exception Classes
View-layer exceptions with HTTP status codes
"""
from typing import Optional


class ViewException(Exception):
    """Base exception for all view exceptions"""
    status_code = 500
    message = "View error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class TemplateNotFoundException(ViewException):
    """
    Template file missing or unreadable

    Raised by the file store; the underlying OSError is chained as __cause__

    Example:
        raise TemplateNotFoundException('/views/home.html') from err
    """
    message = "Template not found"

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Template not found: {path}")


class TemplateCompileException(ViewException):
    """
    Malformed define directive or define nesting too deep

    Example:
        raise TemplateCompileException("Unsupported define expression: foo()")
    """
    message = "Template compilation failed"


class LayoutCycleException(ViewException):
    """
    Layout chain leads back to a template already in the chain

    Example:
        raise LayoutCycleException('/views/layouts/main.html')
    """
    message = "Layout cycle detected"

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Layout cycle detected at: {path}")
