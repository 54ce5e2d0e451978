"""
Render targets.

The engine draws through the small ``RenderTarget`` protocol so that the
compiled tree never depends on a concrete terminal backend. ``Canvas`` is an
in-memory character grid used for tests, the CLI and console output.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from rich.console import Console
from rich.text import Text

from ..config.constants import CANVAS_FILL_CHARACTER
from ..exceptions import RenderError
from .geometry import Region

logger = logging.getLogger(__name__)


@runtime_checkable
class RenderTarget(Protocol):
    """Protocol that drawing backends implement."""

    @property
    def area(self) -> Region:
        """The full drawable region of the target."""
        ...

    def draw_text(self, region: Region, text: str) -> None:
        """Draw ``text`` into ``region``."""
        ...


@dataclass(frozen=True)
class DrawCall:
    """One recorded ``draw_text`` call."""

    region: Region
    text: str


class Canvas:
    """A fixed-size grid of characters.

    Text is drawn line by line from the region's top-left corner. Each line
    is clipped to the region width and lines past the region height are
    dropped.

    Usage:
        canvas = Canvas(40, 10)
        render(root, {"name": "World"}, canvas)
        print("\\n".join(canvas.lines()))
    """

    def __init__(self, width: int, height: int, fill: str = CANVAS_FILL_CHARACTER) -> None:
        if width < 0 or height < 0:
            raise ValueError("Canvas size must be non-negative")
        self.width = width
        self.height = height
        self.fill = fill
        self._grid: List[List[str]] = [[fill] * width for _ in range(height)]
        self.draw_calls: List[DrawCall] = []

    @property
    def area(self) -> Region:
        return Region(0, 0, self.width, self.height)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def draw_text(self, region: Region, text: str) -> None:
        if not self.area.contains(region):
            raise RenderError(
                "Region lies outside the canvas",
                region=(region.x, region.y, region.width, region.height),
                canvas=self.size,
            )
        self.draw_calls.append(DrawCall(region, text))
        if region.is_empty():
            return

        for row, line in enumerate(text.splitlines()[: region.height]):
            for column, char in enumerate(line[: region.width]):
                self._grid[region.y + row][region.x + column] = char

    def clear(self) -> None:
        self._grid = [[self.fill] * self.width for _ in range(self.height)]
        self.draw_calls.clear()

    def lines(self) -> List[str]:
        return ["".join(row) for row in self._grid]

    def text_at(self, region: Region) -> List[str]:
        """Return the characters inside ``region``, one string per row."""
        return [
            "".join(self._grid[y][region.x : region.right])
            for y in range(region.y, region.bottom)
        ]

    def to_text(self) -> Text:
        """The canvas as rich ``Text`` with trailing fill trimmed per line."""
        return Text("\n".join(line.rstrip(self.fill) for line in self.lines()))


def console_canvas(console: Optional[Console] = None) -> Canvas:
    """Create a canvas matching the size of a rich console."""
    console = console or Console()
    width, height = console.size
    logger.debug(f"Console canvas {width}x{height}")
    return Canvas(width, height)
