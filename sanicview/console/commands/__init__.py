from sanicview.console.commands.render_command import RenderCommand
from sanicview.console.commands.layouts_command import LayoutsCommand

__all__ = [
    'RenderCommand',
    'LayoutsCommand',
]
