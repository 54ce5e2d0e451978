"""
Centralized constants for termdecl.

Grammar and rendering defaults live here so the scanner, parser and
renderer agree on them.
"""

# =============================================================================
# TEMPLATE GRAMMAR
# =============================================================================

INDENT_STEP = 4  # Spaces per nesting level
COMMENT_MARKER = "//"  # Lines starting with this (after trimming) are ignored
DECLARATION_SUFFIX = ":"  # "Layout:" opens a block, "key: value" sets an attribute
PLACEHOLDER_PATTERN = r"\{\{(.*?)\}\}"  # {{key}} in leaf text
QUOTE_CHARACTERS = ('"', "'")

TEMPLATE_SUFFIX = ".tdl"
TEMPLATE_ENCODING = "utf-8"

# =============================================================================
# RENDERING
# =============================================================================

DEFAULT_RENDER_WIDTH = 80  # Columns when no target is supplied
DEFAULT_RENDER_HEIGHT = 24  # Rows when no target is supplied
CANVAS_FILL_CHARACTER = " "

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "TERMDECL_WIDTH": {
        "description": "Default render width in columns",
        "default": str(DEFAULT_RENDER_WIDTH),
        "valid_values": None,
    },
    "TERMDECL_HEIGHT": {
        "description": "Default render height in rows",
        "default": str(DEFAULT_RENDER_HEIGHT),
        "valid_values": None,
    },
    "TERMDECL_LOG_LEVEL": {
        "description": "Log level for the termdecl package",
        "default": "WARNING",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    },
}
