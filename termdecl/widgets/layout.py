"""The Layout container widget."""

from ..render.geometry import Direction
from .base import AttributeSpec, ContainerWidget


class LayoutWidget(ContainerWidget):
    """Container that splits its region equally among its children.

    Template usage::

        Layout:
            direction: horizontal
            Paragraph:
                text: "left"
            Paragraph:
                text: "right"
    """

    kind = "Layout"
    attribute_specs = {
        "direction": AttributeSpec(
            "direction",
            choices=Direction.values(),
            default=Direction.VERTICAL.value,
            description="Split axis: horizontal (side by side) or vertical (stacked)",
        ),
    }

    @property
    def direction(self) -> Direction:
        return Direction(self.attributes["direction"])
