"""Error handling utilities for CLI commands."""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from ..exceptions import (
    ConfigurationError,
    RenderError,
    TemplateFileError,
    TemplateParserError,
    TermdeclError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_cli_error(
    operation: str,
    console: Optional[Console] = None,
    exit_code: int = 1,
    log_traceback: bool = False,
) -> Callable[[F], F]:
    """Decorator for consistent CLI command error handling.

    Args:
        operation: Description of the operation for error messages
        console: Rich Console instance for output (creates a stderr one if not provided)
        exit_code: Exit code to use on error (default: 1)
        log_traceback: Whether to log the full traceback

    Usage:
        @app.command()
        @handle_cli_error("compiling template")
        def check(path: Path):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            _console = console or Console(stderr=True)
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except TemplateParserError as e:
                _console.print(f"[red]Template error: {escape(e.message)}[/red]", highlight=False)
                if e.text:
                    _console.print(f"[dim]  {escape(e.text)}[/dim]", highlight=False)
                raise typer.Exit(exit_code) from e
            except TemplateFileError as e:
                _console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
                raise typer.Exit(exit_code) from e
            except ConfigurationError as e:
                _console.print(f"[red]Configuration error: {escape(str(e))}[/red]", highlight=False)
                raise typer.Exit(exit_code) from e
            except RenderError as e:
                _console.print(f"[red]Render error: {escape(str(e))}[/red]", highlight=False)
                if log_traceback:
                    logger.error(f"Render error during {operation}: {e}", exc_info=True)
                raise typer.Exit(exit_code) from e
            except TermdeclError as e:
                _console.print(f"[red]Error {operation}: {escape(e.message)}[/red]", highlight=False)
                if log_traceback:
                    logger.error(f"Error during {operation}: {e}", exc_info=True)
                raise typer.Exit(exit_code) from e

        return wrapper  # type: ignore[return-value]

    return decorator
