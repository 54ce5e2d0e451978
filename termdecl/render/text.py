"""Placeholder substitution for leaf text."""

import re
from typing import List, Mapping

from ..config.constants import PLACEHOLDER_PATTERN, QUOTE_CHARACTERS

_PLACEHOLDER_RE = re.compile(PLACEHOLDER_PATTERN)


def interpolate(text: str, substitutions: Mapping[str, str]) -> str:
    """Replace every ``{{key}}`` in ``text`` with ``substitutions[key]``.

    Keys missing from the mapping are left verbatim. Replacement text is not
    scanned again, so values may safely contain braces.

    Examples:
        >>> interpolate("{{hello}}{{world}}", {"hello": "Hello, ", "world": "World!"})
        'Hello, World!'
        >>> interpolate("{{missing}}", {})
        '{{missing}}'
    """
    return _PLACEHOLDER_RE.sub(
        lambda match: substitutions.get(match.group(1), match.group(0)),
        text,
    )


def strip_quotes(text: str) -> str:
    """Remove one matching pair of surrounding quotes, if present."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in QUOTE_CHARACTERS:
        return text[1:-1]
    return text


def render_text(text: str, substitutions: Mapping[str, str]) -> str:
    """Strip the literal's own surrounding quotes, then interpolate.

    Quotes inside substituted values are drawn as given.
    """
    return interpolate(strip_quotes(text), substitutions)


def placeholders(text: str) -> List[str]:
    """List the placeholder keys used in ``text``, in order of appearance."""
    return _PLACEHOLDER_RE.findall(text)
