"""
termdecl - declarative terminal interface templates

Compile an indentation-based template into a widget tree and render it:

    from termdecl import compile_template, render

    root = compile_template(text)
    canvas = render(root, {"hello": "Hello, "})
"""

__version__ = "0.3.0"

from .exceptions import RenderError, TemplateParserError, TermdeclError
from .render import Canvas, Region, render, render_to_console
from .template import compile_file, compile_template
from .widgets import WidgetNode, WidgetRegistry, widget_registry

__all__ = [
    "Canvas",
    "Region",
    "RenderError",
    "TemplateParserError",
    "TermdeclError",
    "WidgetNode",
    "WidgetRegistry",
    "__version__",
    "compile_file",
    "compile_template",
    "render",
    "render_to_console",
    "widget_registry",
]
