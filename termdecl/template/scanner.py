"""
Line scanner for templates.

Turns raw template text into the significant lines the parser consumes.
Blank lines and ``//`` comment lines are dropped wherever they appear.
Indentation is the number of leading spaces; tabs are ordinary characters.
"""

from dataclasses import dataclass
from typing import Iterator

from ..config.constants import COMMENT_MARKER


@dataclass(frozen=True)
class Line:
    """A significant template line.

    Attributes:
        text: The line with surrounding whitespace trimmed
        indent: Number of leading space characters
        line_number: 1-based position in the source
        raw: The line exactly as written
    """

    text: str
    indent: int
    line_number: int
    raw: str = ""


def indentation_of(line: str) -> int:
    """Count leading spaces.

    Examples:
        >>> indentation_of("    text: hi")
        4
        >>> indentation_of("\\tLayout:")
        0
    """
    return len(line) - len(line.lstrip(" "))


def is_ignored(stripped: str) -> bool:
    """Whether a trimmed line is blank or a comment."""
    return not stripped or stripped.startswith(COMMENT_MARKER)


def scan_lines(source: str) -> Iterator[Line]:
    """Yield the significant lines of ``source`` in order.

    The generator is cheap to recreate; call again to restart.
    """
    for number, raw in enumerate(source.splitlines(), start=1):
        stripped = raw.strip()
        if is_ignored(stripped):
            continue
        yield Line(text=stripped, indent=indentation_of(raw), line_number=number, raw=raw)
