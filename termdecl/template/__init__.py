"""
Template compiler: scanning, parsing, loading and serializing.

Example usage:
    from termdecl.template import compile_template

    root = compile_template(text)
"""

from .loader import compile_file, load_substitutions, load_template, parse_assignments
from .parser import TemplateParser, compile_template
from .scanner import Line, scan_lines
from .serializer import serialize

__all__ = [
    "Line",
    "TemplateParser",
    "compile_file",
    "compile_template",
    "load_substitutions",
    "load_template",
    "parse_assignments",
    "scan_lines",
    "serialize",
]
