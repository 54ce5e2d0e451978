"""
Layout and rendering of compiled widget trees.

Example usage:
    from termdecl.render import Canvas, render

    canvas = render(root, {"hello": "Hello, "}, Canvas(80, 24))
"""

from .engine import render, render_to_console
from .geometry import Direction, Region, equal_shares, split_region
from .target import Canvas, DrawCall, RenderTarget, console_canvas
from .text import interpolate, placeholders, render_text, strip_quotes

__all__ = [
    "Canvas",
    "Direction",
    "DrawCall",
    "Region",
    "RenderTarget",
    "console_canvas",
    "equal_shares",
    "interpolate",
    "placeholders",
    "render",
    "render_text",
    "render_to_console",
    "split_region",
    "strip_quotes",
]
