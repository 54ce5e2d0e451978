"""Shared console output utilities."""

from rich.console import Console

# Shared console instance for all CLI output
console = Console()

# Errors go to stderr so rendered output stays clean on stdout
error_console = Console(stderr=True)
