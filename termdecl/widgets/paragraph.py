"""The Paragraph leaf widget."""

from typing import Mapping

from ..render.text import render_text
from .base import AttributeSpec, LeafWidget


class ParagraphWidget(LeafWidget):
    """Leaf that draws interpolated text.

    The ``text`` attribute is stored exactly as written, quotes included;
    placeholders are filled and quotes stripped at render time.
    """

    kind = "Paragraph"
    attribute_specs = {
        "text": AttributeSpec("text", default="", description="Text to draw; supports {{key}} placeholders"),
    }

    @property
    def text(self) -> str:
        return self.attributes["text"]

    def content(self, substitutions: Mapping[str, str]) -> str:
        return render_text(self.text, substitutions)
