"""Custom exception hierarchy for termdecl.

Every failure the compiler or renderer can report is a subclass of
``TermdeclError``. Parser errors carry the 1-based source line number and the
offending raw text so callers can produce precise diagnostics.

Exception Hierarchy:
    TermdeclError (base)
    ├── TemplateParserError - anything that aborts a compile
    │   ├── TemplateStructureError
    │   │   ├── NoRootsError
    │   │   ├── TooManyRootsError
    │   │   ├── InvalidIndentationError
    │   │   ├── InvalidWidgetDeclarationError
    │   │   ├── InvalidContextError
    │   │   ├── LateAttributeError
    │   │   ├── CannotContainChildrenError
    │   │   └── InvalidRootWidgetError
    │   └── WidgetDefinitionError
    │       ├── InvalidWidgetTypeError
    │       ├── UnknownAttributeError
    │       └── InvalidAttributeValueError
    ├── RenderError - drawing a compiled tree failed
    ├── TemplateFileError - reading a template from disk failed
    └── ConfigurationError - settings/substitution input issues

Usage:
    from termdecl.exceptions import TemplateParserError

    try:
        root = compile_template(text)
    except TemplateParserError as e:
        console.print(f"line {e.line_number}: {e.message}")
"""

from typing import Any, Optional, Sequence


class TermdeclError(Exception):
    """Base exception for all termdecl errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (line, kind, path...)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Template Parser Errors
# =============================================================================


class TemplateParserError(TermdeclError):
    """Base exception for errors that abort a template compile."""

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        text: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.line_number = line_number
        self.text = text
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message, **context)


class TemplateStructureError(TemplateParserError):
    """The template's shape (roots, indentation, ordering) is malformed."""

    pass


class WidgetDefinitionError(TemplateParserError):
    """A widget kind or attribute could not be resolved."""

    pass


class NoRootsError(TemplateStructureError):
    """The template declares no top-level widget."""

    def __init__(self, message: str = "Template must contain exactly one root widget") -> None:
        super().__init__(message)


class TooManyRootsError(TemplateStructureError):
    """A second widget was declared at the top indentation level."""

    def __init__(
        self,
        roots: Sequence[str],
        *,
        line_number: Optional[int] = None,
        text: Optional[str] = None,
    ) -> None:
        self.roots = list(roots)
        super().__init__(
            f"Template must contain exactly one root widget, found: {', '.join(self.roots)}",
            line_number=line_number,
            text=text,
        )


class InvalidIndentationError(TemplateStructureError):
    """A line is indented off-step or more than one step too deep."""

    def __init__(self, line_number: int, expected_indent: int, text: str) -> None:
        self.expected_indent = expected_indent
        super().__init__(
            f"Expected indentation level {expected_indent}, but found this instead: {text!r}",
            line_number=line_number,
            text=text,
        )


class InvalidWidgetDeclarationError(TemplateStructureError):
    """A line that must declare a widget does not end with ':'."""

    def __init__(self, line_number: int, text: str) -> None:
        super().__init__(
            f"Expected widget declaration ending with ':', but found this instead: {text!r}",
            line_number=line_number,
            text=text,
        )


class InvalidContextError(TemplateStructureError):
    """A line is neither a widget declaration nor an attribute."""

    def __init__(self, line_number: int, text: str) -> None:
        super().__init__(
            "Expected a widget declaration ending with ':' or an attribute "
            f"declaration 'key: value', but found this instead: {text!r}",
            line_number=line_number,
            text=text,
        )


class LateAttributeError(TemplateStructureError):
    """An attribute follows a child widget within the same block."""

    def __init__(self, line_number: int, text: str) -> None:
        super().__init__(
            f"Attributes must come before child widgets: {text!r}",
            line_number=line_number,
            text=text,
        )


class CannotContainChildrenError(TemplateStructureError):
    """A widget was nested under a leaf kind."""

    def __init__(self, line_number: int, kind: str, text: Optional[str] = None) -> None:
        self.kind = kind
        super().__init__(
            f"Widget '{kind}' cannot contain child widgets",
            line_number=line_number,
            text=text,
        )


class InvalidRootWidgetError(TemplateStructureError):
    """The root declaration names a kind that is not a container."""

    def __init__(self, line_number: int, kind: str, text: Optional[str] = None) -> None:
        self.kind = kind
        super().__init__(
            f"Root widget must be a container, but '{kind}' is not",
            line_number=line_number,
            text=text,
        )


class InvalidWidgetTypeError(WidgetDefinitionError):
    """A declaration names a widget kind the registry does not know."""

    def __init__(self, line_number: Optional[int], name: str, text: Optional[str] = None) -> None:
        self.name = name
        super().__init__(
            f"Invalid widget type '{name}'",
            line_number=line_number,
            text=text if text is not None else name,
        )


class UnknownAttributeError(WidgetDefinitionError):
    """The attribute key is not recognised by the widget kind."""

    def __init__(self, line_number: Optional[int], kind: str, key: str, value: str) -> None:
        self.kind = kind
        self.key = key
        self.value = value
        super().__init__(
            f"Widget '{kind}' has no attribute '{key}'",
            line_number=line_number,
            text=f"{key}: {value}",
        )


class InvalidAttributeValueError(WidgetDefinitionError):
    """The attribute value does not parse into the expected domain."""

    def __init__(
        self,
        line_number: Optional[int],
        kind: str,
        key: str,
        value: str,
        allowed: Optional[Sequence[str]] = None,
    ) -> None:
        self.kind = kind
        self.key = key
        self.value = value
        self.allowed = list(allowed) if allowed else []
        message = f"Invalid value {value!r} for attribute '{key}' of widget '{kind}'"
        if self.allowed:
            message += f"; expected one of: {', '.join(self.allowed)}"
        super().__init__(message, line_number=line_number, text=f"{key}: {value}")


# =============================================================================
# Render Errors
# =============================================================================


class RenderError(TermdeclError):
    """Drawing a compiled widget tree failed."""

    def __init__(
        self,
        message: str = "Render failed",
        *,
        kind: Optional[str] = None,
        **context: Any,
    ) -> None:
        if kind:
            context["kind"] = kind
        super().__init__(message, **context)


# =============================================================================
# File and Configuration Errors
# =============================================================================


class TemplateFileError(TermdeclError):
    """A template or substitution file could not be read."""

    def __init__(
        self,
        message: str = "Failed to read template file",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class ConfigurationError(TermdeclError):
    """Configuration, settings or substitution input error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
