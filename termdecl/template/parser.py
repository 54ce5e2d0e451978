"""
Structural parser for templates.

Indentation is the only nesting signal: a declaration ``Kind:`` opens a
block whose body is indented exactly one step (four spaces) deeper. Inside a
block, ``key: value`` attributes come first, followed by child
declarations. The document has exactly one top-level declaration and it must
be a container kind.

Example:
    Layout:
        direction: horizontal
        // comments and blank lines are ignored anywhere
        Paragraph:
            text: "{{greeting}}"
"""

import logging
from typing import List, Optional

from ..config.constants import DECLARATION_SUFFIX, INDENT_STEP
from ..exceptions import (
    InvalidContextError,
    InvalidIndentationError,
    InvalidRootWidgetError,
    InvalidWidgetDeclarationError,
    LateAttributeError,
    NoRootsError,
    TooManyRootsError,
)
from ..widgets.base import WidgetNode
from ..widgets.registry import WidgetRegistry, widget_registry
from .scanner import Line, scan_lines

logger = logging.getLogger(__name__)


def is_declaration(text: str) -> bool:
    return text.endswith(DECLARATION_SUFFIX)


def is_attribute(text: str) -> bool:
    return DECLARATION_SUFFIX in text and not is_declaration(text)


def declared_kind(text: str) -> str:
    """The kind name of a ``Kind:`` declaration."""
    return text[: -len(DECLARATION_SUFFIX)].strip()


class TemplateParser:
    """Recursive-descent parser over scanned template lines.

    The cursor only advances when a line is consumed, so a block that meets
    a shallower line simply returns and leaves it for an enclosing block.
    """

    def __init__(self, source: str, registry: Optional[WidgetRegistry] = None) -> None:
        self.lines: List[Line] = list(scan_lines(source))
        self.pos: int = 0
        self.registry = registry if registry is not None else widget_registry

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------
    def _peek(self) -> Optional[Line]:
        """Return the current line without consuming it."""
        if self.pos < len(self.lines):
            return self.lines[self.pos]
        return None

    def _advance(self) -> Line:
        """Return the current line and move the cursor forward."""
        line = self.lines[self.pos]
        self.pos += 1
        return line

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------
    def parse(self) -> WidgetNode:
        """Parse the whole document and return its root widget."""
        line = self._peek()
        if line is None:
            raise NoRootsError()
        if line.indent != 0:
            raise InvalidIndentationError(line.line_number, 0, line.raw)

        root = self._parse_root(self._advance())

        # Blocks only hand back lines at a shallower, on-step indentation,
        # so anything left here sits at the top level.
        line = self._peek()
        if line is not None:
            if not is_declaration(line.text):
                raise InvalidWidgetDeclarationError(line.line_number, line.raw)
            raise TooManyRootsError(
                [root.kind] + self._remaining_root_kinds(),
                line_number=line.line_number,
                text=line.raw,
            )

        logger.debug(f"Compiled template with root {root.kind} ({len(self.lines)} lines)")
        return root

    def _parse_root(self, line: Line) -> WidgetNode:
        if not is_declaration(line.text):
            raise InvalidWidgetDeclarationError(line.line_number, line.raw)

        kind = declared_kind(line.text)
        root = self.registry.resolve(kind, line.line_number)
        if not self.registry.is_container(kind):
            raise InvalidRootWidgetError(line.line_number, kind, text=line.raw)

        self._parse_block(root, INDENT_STEP)
        return root

    def _remaining_root_kinds(self) -> List[str]:
        """Kinds of the top-level declarations not yet consumed."""
        return [
            declared_kind(line.text)
            for line in self.lines[self.pos:]
            if line.indent == 0 and is_declaration(line.text)
        ]

    def _parse_declaration(self, line: Line, indent: int) -> WidgetNode:
        """Create the widget declared on ``line`` and fill in its block."""
        node = self.registry.resolve(declared_kind(line.text), line.line_number)
        self._parse_block(node, indent + INDENT_STEP)
        return node

    def _parse_block(self, parent: WidgetNode, indent: int) -> None:
        """Consume the lines belonging to ``parent``'s block.

        Args:
            parent: The widget receiving attributes and children
            indent: Indentation every line of this block must have
        """
        child_added = False

        while True:
            line = self._peek()
            if line is None:
                return

            if line.indent < indent:
                if line.indent % INDENT_STEP:
                    raise InvalidIndentationError(line.line_number, indent, line.raw)
                return
            if line.indent != indent:
                raise InvalidIndentationError(line.line_number, indent, line.raw)

            self._advance()

            if is_declaration(line.text):
                child = self._parse_declaration(line, indent)
                parent.accept_child(child, line.line_number)
                child_added = True
            elif is_attribute(line.text):
                if child_added:
                    raise LateAttributeError(line.line_number, line.raw)
                key, value = line.text.split(DECLARATION_SUFFIX, 1)
                parent.accept_attribute(key.strip(), value.strip(), line.line_number)
            else:
                raise InvalidContextError(line.line_number, line.raw)


def compile_template(source: str, registry: Optional[WidgetRegistry] = None) -> WidgetNode:
    """Compile template text into a widget tree.

    Args:
        source: Template text
        registry: Widget kinds to resolve against (defaults to the global one)

    Returns:
        The root widget

    Raises:
        TemplateParserError: On any malformed input; no partial tree is returned
    """
    return TemplateParser(source, registry).parse()
