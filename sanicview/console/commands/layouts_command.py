"""
Layouts Command
Show the layout chain a template resolves to
"""
from sanicview.console.command import Command
from sanicview.exceptions import ViewException


class LayoutsCommand(Command):
    """Print the resolved layout chain of a template"""

    name = "view:layouts"
    description = "Show the layout chain of a template"
    signature = "view:layouts <template>"

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
            view = engine.view_for(template)
            chain = view.layout_chain()
        except ViewException as e:
            self.error(str(e))
            return 1

        self.line(view.full_path())
        for depth, layout in enumerate(chain, 1):
            self.line(f"{'  ' * depth}└─ {layout.full_path()}")

        if not chain:
            self.info("No layout")
        return 0
