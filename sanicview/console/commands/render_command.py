"""
Render Command
Render a template file to stdout
"""
import json

from sanicview.console.command import Command


class RenderCommand(Command):
    """Render a template with JSON data"""

    name = "view:render"
    description = "Render a template file to stdout"
    signature = "view:render <template> [--data=<json>] [--data-file=<path>] [--layout=<path>] [--no-cache]"

    def __init__(self, engine=None):
        super().__init__()
        self.engine = engine

    async def handle(self, template: str = None, *args, **kwargs):
        if not template:
            self.error("Missing template path")
            return 1

        from sanicview.view.engine import default_engine
        engine = self.engine or default_engine()

        try:
            options = self._options(kwargs)
        except (OSError, ValueError) as e:
            self.error(f"Invalid template data: {e}")
            return 1

        try:
            html = engine.render_file(template, options)
        except Exception as e:
            self.error(f"Failed to render {template}: {e}")
            return 1

        self.line(html)
        return 0

    def _options(self, kwargs) -> dict:
        options = {}

        data_file = kwargs.get('data-file')
        if data_file:
            with open(data_file, 'r', encoding='utf-8') as f:
                options.update(json.load(f))

        data = kwargs.get('data')
        if data:
            parsed = json.loads(data)
            if not isinstance(parsed, dict):
                raise ValueError("--data must be a JSON object")
            options.update(parsed)

        if kwargs.get('layout'):
            options['layout'] = kwargs['layout']

        if kwargs.get('no-cache'):
            options['cache'] = False

        return options
