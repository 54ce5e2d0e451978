"""
Textual app previewing a compiled template.

When started with a template path, ``r`` recompiles the file. A template
that no longer compiles leaves the previous tree on screen and shows the
error as a notification.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional

from textual.app import App, ComposeResult

from ..exceptions import TemplateFileError, TemplateParserError
from ..template.loader import compile_file
from ..widgets.base import WidgetNode
from .builder import ROOT_ID, TemplateBuilder

logger = logging.getLogger(__name__)


class TemplateApp(App):
    """Full-screen preview of a widget tree."""

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("escape", "quit", "Quit"),
        ("r", "reload", "Reload"),
    ]

    def __init__(
        self,
        root: WidgetNode,
        substitutions: Optional[Mapping[str, str]] = None,
        template_path: Optional[Path] = None,
    ) -> None:
        super().__init__()
        self.template_root = root
        self.template_path = template_path
        self.builder = TemplateBuilder(substitutions)
        if template_path is not None:
            self.title = str(template_path)

    def compose(self) -> ComposeResult:
        yield self.builder.build(self.template_root)

    async def action_reload(self) -> None:
        """Recompile the template file and swap in the new tree."""
        if self.template_path is None:
            self.notify("No template file to reload", severity="warning")
            return

        try:
            root = compile_file(self.template_path)
        except (TemplateParserError, TemplateFileError) as e:
            logger.info(f"Keeping previous tree: {e}")
            self.notify(str(e), title="Template error", severity="error", timeout=8)
            return

        self.template_root = root
        await self.query_one(f"#{ROOT_ID}").remove()
        await self.mount(self.builder.build(root))
        self.notify("Template reloaded")
