#!/usr/bin/env python3
"""
Main CLI entry point for termdecl
"""

from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from termdecl import __version__
from termdecl.config.settings import get_log_level, validate_all_env_vars
from termdecl.exceptions import ConfigurationError
from termdecl.render.engine import render_to_console
from termdecl.render.text import placeholders
from termdecl.template.loader import compile_file, load_substitutions, parse_assignments
from termdecl.template.serializer import serialize
from termdecl.utils.error_handling import handle_cli_error
from termdecl.utils.logging import configure_logging
from termdecl.utils.output import console, error_console
from termdecl.widgets.base import WidgetNode
from termdecl.widgets.registry import widget_registry

app = typer.Typer(help="Compile and render declarative terminal interface templates.")

TemplateArgument = typer.Argument(..., exists=True, dir_okay=False, help="Template file")


def _substitutions(assignments: Optional[List[str]], values: Optional[Path]) -> Dict[str, str]:
    """Merge --values file and --set assignments; --set wins."""
    substitutions: Dict[str, str] = {}
    if values is not None:
        substitutions.update(load_substitutions(values))
    substitutions.update(parse_assignments(assignments or []))
    return substitutions


def _build_tree(node: WidgetNode, tree: Tree) -> None:
    for child in node.children:
        _build_tree(child, tree.add(_describe(child)))


def _describe(node: WidgetNode) -> str:
    label = f"[bold cyan]{escape(node.kind)}[/bold cyan]"
    if node.attributes:
        attrs = ", ".join(f"{key}={value}" for key, value in node.attributes.items())
        label += f" [dim]{escape(attrs)}[/dim]"
    return label


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    termdecl - declarative terminal interface templates

    [bold]Examples:[/bold]

    Validate a template:
        [cyan]termdecl check hello.tdl[/cyan]

    Render with substitutions:
        [cyan]termdecl render hello.tdl --set hello="Hello, " --set world=World![/cyan]
    """
    for error in validate_all_env_vars():
        error_console.print(f"[yellow]Warning: {escape(error)}[/yellow]")
    configure_logging(verbose, None if verbose else _safe_log_level())


def _safe_log_level() -> str:
    try:
        return get_log_level()
    except ConfigurationError:
        return "WARNING"


@app.command()
@handle_cli_error("checking template")
def check(template: Path = TemplateArgument):
    """Compile a template and report any error and the placeholder keys it uses"""
    root = compile_file(template)
    count = 0
    keys: List[str] = []

    def visit(node: WidgetNode, depth: int) -> None:
        nonlocal count
        count += 1
        for value in node.explicit_attributes.values():
            for key in placeholders(value):
                if key not in keys:
                    keys.append(key)

    root.walk(visit)
    console.print(
        f"[green]✅ {escape(str(template))}: {count} widgets, root {escape(root.kind)}[/green]",
        soft_wrap=True,
    )
    if keys:
        console.print(f"Placeholders: {escape(', '.join(keys))}", soft_wrap=True, highlight=False)


@app.command()
@handle_cli_error("showing template tree")
def tree(template: Path = TemplateArgument):
    """Print the compiled widget tree"""
    root = compile_file(template)
    rich_tree = Tree(_describe(root))
    _build_tree(root, rich_tree)
    console.print(rich_tree)


@app.command()
@handle_cli_error("rendering template")
def render(
    template: Path = TemplateArgument,
    assignments: Optional[List[str]] = typer.Option(
        None, "--set", "-s", help="Substitution as key=value (repeatable)"
    ),
    values: Optional[Path] = typer.Option(
        None, "--values", help="YAML file of substitutions", exists=True, dir_okay=False
    ),
    width: Optional[int] = typer.Option(None, "--width", min=1, help="Render width"),
    height: Optional[int] = typer.Option(None, "--height", min=1, help="Render height"),
):
    """Render a template to the terminal"""
    root = compile_file(template)
    render_to_console(root, _substitutions(assignments, values), console, width, height)


@app.command()
@handle_cli_error("previewing template")
def preview(
    template: Path = TemplateArgument,
    assignments: Optional[List[str]] = typer.Option(
        None, "--set", "-s", help="Substitution as key=value (repeatable)"
    ),
    values: Optional[Path] = typer.Option(
        None, "--values", help="YAML file of substitutions", exists=True, dir_okay=False
    ),
):
    """Open an interactive preview (r reloads, q quits)"""
    from termdecl.ui.app import TemplateApp

    root = compile_file(template)
    TemplateApp(root, _substitutions(assignments, values), template_path=template).run()


@app.command("format")
@handle_cli_error("formatting template")
def format_template(
    template: Path = TemplateArgument,
    write: bool = typer.Option(False, "--write", help="Rewrite the file in place"),
):
    """Print a template in canonical form (comments are dropped)"""
    text = serialize(compile_file(template))
    if write:
        template.write_text(text, encoding="utf-8")
        console.print(f"[green]Formatted {escape(str(template))}[/green]", soft_wrap=True)
    else:
        typer.echo(text, nl=False)


@app.command()
def kinds():
    """List registered widget kinds"""
    table = Table(title="Widget Kinds")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Children", style="green")
    table.add_column("Description")

    for registration in widget_registry.list_registrations():
        table.add_row(
            registration.kind,
            "yes" if registration.container else "no",
            escape(registration.description),
        )

    console.print(table)


@app.command()
def version():
    """Show termdecl version"""
    typer.echo(f"termdecl version {__version__}")


if __name__ == "__main__":
    app()
