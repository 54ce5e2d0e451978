"""Shared pytest fixtures for termdecl tests."""

from pathlib import Path
from textwrap import dedent

import pytest

from termdecl.config.constants import TEMPLATE_SUFFIX
from termdecl.render.target import Canvas
from termdecl.widgets.registry import WidgetRegistry, register_builtin_widgets

from template_samples import HELLO_TEMPLATE


@pytest.fixture
def registry():
    """An isolated registry with only the built-in kinds."""
    return register_builtin_widgets(WidgetRegistry())


@pytest.fixture
def canvas():
    """A small canvas to render into."""
    return Canvas(40, 10)


@pytest.fixture
def template_file(tmp_path: Path):
    """Write template text to a temporary .tdl file and return its path."""

    def _write(text: str = HELLO_TEMPLATE, name: str = f"template{TEMPLATE_SUFFIX}") -> Path:
        path = tmp_path / name
        path.write_text(dedent(text), encoding="utf-8")
        return path

    return _write
