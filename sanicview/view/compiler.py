"""
Template Compiler
Turns template source plus compile-time defines into a render function

Template bodies use Jinja2 syntax. Before Jinja2 sees the source,
define directives are resolved:

    {{## name: body #}}          declare a define (first declaration wins)
    {{#def.name}}                expand a define (callables are called)
    {{#def.include('x.html')}}   call a define with literal arguments
    {{#def._content}}            child html handed over by a layout's child
"""
import ast
import re
from typing import Any, Callable, Dict, Optional, Tuple, Union

from jinja2 import Environment, StrictUndefined, Template, Undefined
from markupsafe import Markup

from sanicview.defaults import DEFAULT_CONTENT_KEY, DEFAULT_DEFINE_DEPTH
from sanicview.exceptions import TemplateCompileException
from sanicview.logging import getLogger

logger = getLogger(__name__)

DEFINE_DECLARATION = re.compile(r'\{\{##\s*([\w.$]+)\s*(:|=)([\s\S]+?)#\}\}')
DEFINE_USE = re.compile(r'\{\{#([\s\S]+?)\}\}')
DEFINE_EXPRESSION = re.compile(r'^def\.([\w$]+)\s*(?:\(([\s\S]*)\))?$')

# Jinja2 variable the content define is bound to at render time
CONTENT_VARIABLE = '_content'

DefineValue = Union[str, Callable[..., Any]]


class CompiledTemplate:
    """
    Render function produced by TemplateCompiler.compile()

    Example:
        html = compiled(view.data, view.helpers, view.defines)
    """

    def __init__(self, template: Template, data_name: str, helpers_name: str):
        self.template = template
        self.data_name = data_name
        self.helpers_name = helpers_name

    def __call__(
        self,
        data: Dict[str, Any],
        helpers: Dict[str, Callable],
        defines: Optional[Dict[str, DefineValue]] = None
    ) -> str:
        content = (defines or {}).get(DEFAULT_CONTENT_KEY) or ''
        return self.template.render({
            self.data_name: data,
            self.helpers_name: helpers,
            CONTENT_VARIABLE: Markup(content),
        })


class TemplateCompiler:
    """
    Compiles template source into CompiledTemplate instances

    One Jinja2 environment is kept per (autoescape, strict_undefined)
    combination so compiled templates share filters and globals.
    """

    def __init__(self, max_depth: int = DEFAULT_DEFINE_DEPTH):
        self.max_depth = max_depth
        self._environments: Dict[Tuple[bool, bool], Environment] = {}

    def compile(self, source: str, settings, defines: Optional[Dict[str, DefineValue]] = None) -> CompiledTemplate:
        """
        Compile template source

        Args:
            source: Raw template text
            settings: ViewSettings
            defines: Compile-time defines (not mutated)

        Raises:
            TemplateCompileException: malformed define directive
            jinja2.TemplateSyntaxError: malformed template body
        """
        resolved = self.resolve_defines(source, dict(defines or {}))
        template = self.environment(settings).from_string(resolved)
        data_name, helpers_name = settings.names
        logger.debug("Template compiled", extra={'data_name': data_name, 'helpers_name': helpers_name})
        return CompiledTemplate(template, data_name, helpers_name)

    def environment(self, settings) -> Environment:
        key = (bool(settings.autoescape), bool(settings.strict_undefined))
        if key not in self._environments:
            self._environments[key] = Environment(
                autoescape=key[0],
                undefined=StrictUndefined if key[1] else Undefined,
                keep_trailing_newline=True,
            )
        return self._environments[key]

    def resolve_defines(self, source: str, defines: Dict[str, DefineValue], depth: int = 0) -> str:
        """Expand define declarations and uses, recursing into expanded text"""
        if depth > self.max_depth:
            raise TemplateCompileException(
                f"Define expansion nested deeper than {self.max_depth} levels"
            )

        source = DEFINE_DECLARATION.sub(lambda m: self._declare(m, defines), source)
        return DEFINE_USE.sub(lambda m: self._expand(m, defines, depth), source)

    def _declare(self, match, defines: Dict[str, DefineValue]) -> str:
        name, operator, value = match.groups()
        if name.startswith('def.'):
            name = name[4:]
        if name not in defines:
            defines[name] = value if operator == ':' else value.strip()
        return ''

    def _expand(self, match, defines: Dict[str, DefineValue], depth: int) -> str:
        expression = match.group(1).strip()
        parsed = DEFINE_EXPRESSION.match(expression)
        if parsed is None:
            raise TemplateCompileException(f"Unsupported define expression: {expression}")

        name, arguments = parsed.groups()
        if name == DEFAULT_CONTENT_KEY:
            return '{{ ' + CONTENT_VARIABLE + ' }}'

        if name not in defines:
            logger.debug("Unknown define expanded to empty string", extra={'define': name})
            return ''

        value = defines[name]
        if callable(value):
            value = value(*self._parse_arguments(arguments))

        if value is None:
            return ''
        return self.resolve_defines(str(value), defines, depth + 1)

    @staticmethod
    def _parse_arguments(arguments: Optional[str]) -> tuple:
        if not arguments or not arguments.strip():
            return ()
        try:
            return ast.literal_eval(f'({arguments},)')
        except (ValueError, SyntaxError) as e:
            raise TemplateCompileException(f"Invalid define arguments: {arguments}") from e
