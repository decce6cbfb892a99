"""
HTTP Package
"""
from sanicview.http.response import HtmlResponse, view_response

__all__ = [
    'HtmlResponse',
    'view_response',
]
