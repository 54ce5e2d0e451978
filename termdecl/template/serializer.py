"""Write a widget tree back out as canonical template text."""

from typing import List

from ..config.constants import DECLARATION_SUFFIX, INDENT_STEP
from ..widgets.base import WidgetNode


def serialize(root: WidgetNode) -> str:
    """Serialize ``root`` using four-space steps, attributes before children.

    Compiling the result yields an equivalent tree.
    """
    lines: List[str] = []

    def visit(node: WidgetNode, depth: int) -> None:
        pad = " " * (INDENT_STEP * depth)
        lines.append(f"{pad}{node.kind}{DECLARATION_SUFFIX}")
        for key, value in node.explicit_attributes.items():
            lines.append(f"{pad}{' ' * INDENT_STEP}{key}{DECLARATION_SUFFIX} {value}")

    root.walk(visit)
    return "\n".join(lines) + "\n"
