"""
Widget kinds for compiled templates.

Built-in kinds:
- ``Layout``: container splitting its area horizontally or vertically
- ``Paragraph``: leaf drawing text with ``{{key}}`` placeholders

Adding a kind:
    from termdecl.widgets import LeafWidget, widget_registry

    @widget_registry.decorator("Banner")
    class BannerWidget(LeafWidget):
        kind = "Banner"
        ...
"""

from .base import AttributeSpec, ContainerWidget, LeafWidget, WidgetNode
from .layout import LayoutWidget
from .paragraph import ParagraphWidget
from .registry import (
    WidgetRegistration,
    WidgetRegistry,
    register_builtin_widgets,
    widget_registry,
)

register_builtin_widgets()

__all__ = [
    # Node model
    "AttributeSpec",
    "ContainerWidget",
    "LeafWidget",
    "WidgetNode",
    # Built-in kinds
    "LayoutWidget",
    "ParagraphWidget",
    # Registry
    "WidgetRegistration",
    "WidgetRegistry",
    "register_builtin_widgets",
    "widget_registry",
]
