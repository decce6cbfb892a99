"""
HTML Response Sink
Fluent builder that turns rendered html into a Sanic HTTPResponse
"""
from typing import Any, Dict, Optional

from sanic.response import HTTPResponse, html

from sanicview.defaults import DEFAULT_STATUS


class HtmlResponse:
    """
    Response sink used by View.display()

    Example:
        @app.get('/')
        async def home(request):
            view = engine.view_for('/app/views/home.html').assign({'title': 'Home'})
            return view.display(HtmlResponse().header('X-Frame-Options', 'DENY'))
    """

    def __init__(self):
        self._status = DEFAULT_STATUS
        self._headers: Dict[str, str] = {}
        self.response: Optional[HTTPResponse] = None

    def status(self, code: int) -> 'HtmlResponse':
        """Set status code (chainable)"""
        self._status = code
        return self

    def header(self, key: str, value: str) -> 'HtmlResponse':
        """Add a header (chainable)"""
        self._headers[key] = value
        return self

    def headers(self, headers: Dict[str, str]) -> 'HtmlResponse':
        """Add multiple headers (chainable)"""
        self._headers.update(headers)
        return self

    def send(self, body: str) -> HTTPResponse:
        """Build the Sanic HTTPResponse for the rendered html"""
        self.response = html(body, status=self._status, headers=dict(self._headers))
        return self.response


def view_response(
    template_path: str,
    options: Optional[Dict[str, Any]] = None,
    status: int = DEFAULT_STATUS,
    engine=None,
    headers: Optional[Dict[str, str]] = None
) -> HTTPResponse:
    """
    Render a template file into a Sanic response

    Example:
        @app.get('/orders/<order_id>')
        async def order(request, order_id):
            return view_response(VIEWS / 'orders/show.html', {'order': await load(order_id)})
    """
    from sanicview.view.engine import default_engine

    engine = engine or default_engine()
    view = engine.build_view(str(template_path), options)
    return view.display(HtmlResponse().headers(headers or {}), status=status)
