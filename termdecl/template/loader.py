"""
Loading templates and substitution mappings from disk.

Templates are plain UTF-8 text. Substitution mappings come from YAML files
or ``key=value`` command-line assignments.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import yaml

from ..config.constants import TEMPLATE_ENCODING
from ..exceptions import ConfigurationError, TemplateFileError
from ..widgets.base import WidgetNode
from ..widgets.registry import WidgetRegistry
from .parser import compile_template

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_template(path: PathLike) -> str:
    """Read template text from ``path``.

    Raises:
        TemplateFileError: If the file is missing or unreadable
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=TEMPLATE_ENCODING)
    except FileNotFoundError as e:
        raise TemplateFileError("Template file not found", path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateFileError(f"Could not read template file: {e}", path=str(path)) from e

    logger.debug(f"Loaded template {path} ({len(text)} chars)")
    return text


def compile_file(path: PathLike, registry: Optional[WidgetRegistry] = None) -> WidgetNode:
    """Load and compile the template at ``path``."""
    return compile_template(load_template(path), registry)


def load_substitutions(path: PathLike) -> Dict[str, str]:
    """Read a YAML mapping of placeholder keys to replacement text.

    Scalar values are converted with ``str``; an empty file is an empty
    mapping.

    Raises:
        TemplateFileError: If the file cannot be read
        ConfigurationError: If the YAML is invalid or not a flat mapping
    """
    path = Path(path)
    try:
        with open(path, encoding=TEMPLATE_ENCODING) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise TemplateFileError("Substitutions file not found", path=str(path)) from e
    except OSError as e:
        raise TemplateFileError(f"Could not read substitutions file: {e}", path=str(path)) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in substitutions file: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Substitutions file must contain a mapping", path=str(path))

    substitutions: Dict[str, str] = {}
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            raise ConfigurationError(
                "Substitution values must be scalars", path=str(path), key=str(key)
            )
        substitutions[str(key)] = "" if value is None else str(value)
    return substitutions


def parse_assignments(assignments: Iterable[str]) -> Dict[str, str]:
    """Parse ``key=value`` strings into a mapping; later keys win.

    Raises:
        ConfigurationError: If an entry has no ``=`` or an empty key
    """
    substitutions: Dict[str, str] = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep or not key:
            raise ConfigurationError(
                f"Expected key=value, got {assignment!r}", setting="--set"
            )
        substitutions[key] = value
    return substitutions
