"""Textual preview of compiled templates."""

from .app import TemplateApp
from .builder import ROOT_ID, LeafView, TemplateBuilder

__all__ = [
    "LeafView",
    "ROOT_ID",
    "TemplateApp",
    "TemplateBuilder",
]
