"""
Render entry points.

``render`` draws a compiled tree onto a target in one synchronous,
depth-first pass. Nothing is kept between calls.
"""

import logging
from typing import TYPE_CHECKING, Mapping, Optional

from rich.console import Console

from ..config.settings import get_render_size
from ..exceptions import RenderError, TermdeclError
from .target import Canvas, RenderTarget, console_canvas

if TYPE_CHECKING:
    from ..widgets.base import WidgetNode

logger = logging.getLogger(__name__)


def render(
    root: "WidgetNode",
    substitutions: Optional[Mapping[str, str]] = None,
    target: Optional[RenderTarget] = None,
) -> RenderTarget:
    """Render ``root`` onto ``target``.

    Args:
        root: Compiled root widget
        substitutions: Placeholder key to replacement text
        target: Where to draw; a canvas of the configured default size when None

    Returns:
        The target drawn on

    Raises:
        RenderError: If drawing fails anywhere in the tree
    """
    if target is None:
        width, height = get_render_size()
        target = Canvas(width, height)

    substitutions = substitutions or {}
    area = target.area
    logger.debug(f"Rendering {root.kind} into {area.width}x{area.height}")

    try:
        root.render(None, substitutions, target)
    except TermdeclError:
        raise
    except Exception as e:
        raise RenderError(f"Render failed: {e}", kind=root.kind) from e

    return target


def render_to_console(
    root: "WidgetNode",
    substitutions: Optional[Mapping[str, str]] = None,
    console: Optional[Console] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Canvas:
    """Render ``root`` and print the result to a rich console.

    The canvas matches the console size unless ``width``/``height`` are given.
    """
    console = console or Console()
    if width is None and height is None:
        canvas = console_canvas(console)
    else:
        console_width, console_height = console.size
        canvas = Canvas(width or console_width, height or console_height)

    render(root, substitutions, canvas)
    console.print(canvas.to_text(), soft_wrap=True, highlight=False, markup=False)
    return canvas
