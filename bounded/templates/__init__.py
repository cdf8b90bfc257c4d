"""Placeholder rendering."""

from __future__ import annotations

from bounded.templates.renderers import DefaultRenderer, TemplateRenderer

__all__ = ["TemplateRenderer", "DefaultRenderer"]
