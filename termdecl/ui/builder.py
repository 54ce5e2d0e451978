"""
Builds Textual widget trees from compiled templates.

Containers become ``Horizontal``/``Vertical`` containers whose children
share the split axis equally (``1fr`` each); leaves become static text with
placeholders filled in.
"""

import logging
from typing import Dict, List, Mapping, Optional

from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Static

from ..render.geometry import Direction
from ..widgets.base import ContainerWidget, LeafWidget, WidgetNode

logger = logging.getLogger(__name__)

ROOT_ID = "template-root"


class LeafView(Static):
    """Static text produced by a leaf widget."""

    def __init__(self, text: str, kind: str, **kwargs) -> None:
        super().__init__(text, markup=False, **kwargs)
        self.leaf_text = text
        self.leaf_kind = kind


class TemplateBuilder:
    """Converts a compiled widget tree into Textual widgets."""

    def __init__(self, substitutions: Optional[Mapping[str, str]] = None) -> None:
        self.substitutions: Dict[str, str] = dict(substitutions or {})
        self._built: List[Widget] = []

    def build(self, root: WidgetNode) -> Widget:
        """Build the whole tree; the returned widget has id ``template-root``."""
        self._built.clear()
        widget = self._build_node(root)
        widget.id = ROOT_ID
        self._apply_size(widget, None)
        return widget

    def _build_node(self, node: WidgetNode) -> Widget:
        if isinstance(node, ContainerWidget):
            widget = self._build_container(node)
        elif isinstance(node, LeafWidget):
            widget = LeafView(node.content(self.substitutions), node.kind)
        else:
            logger.warning(f"No textual view for widget kind {node.kind}")
            widget = Static(f"<{node.kind}>", markup=False)

        widget.add_class(f"kind-{node.kind.lower()}")
        self._built.append(widget)
        return widget

    def _build_container(self, node: ContainerWidget) -> Widget:
        ContainerClass = Horizontal if node.direction is Direction.HORIZONTAL else Vertical

        children = []
        for child in node.children:
            child_widget = self._build_node(child)
            self._apply_size(child_widget, node.direction)
            children.append(child_widget)

        return ContainerClass(*children)

    def _apply_size(self, widget: Widget, direction: Optional[Direction]) -> None:
        """Give ``widget`` an equal share along the parent's split axis.

        The cross axis always fills the parent.
        """
        if direction is Direction.HORIZONTAL:
            widget.styles.width = "1fr"
            widget.styles.height = "100%"
        elif direction is Direction.VERTICAL:
            widget.styles.height = "1fr"
            widget.styles.width = "100%"
        else:
            widget.styles.width = "100%"
            widget.styles.height = "100%"

    def get_built_widgets(self) -> List[Widget]:
        """Widgets created by the last build; children come before their parents."""
        return list(self._built)
