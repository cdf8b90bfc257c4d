"""Placeholder rendering for messages and pages.

This module provides the base rendering interface and a simple default
implementation that replaces ``{name}`` placeholders. It is used for
validation failure messages and for the greeting page. Anything more
elaborate should be implemented as a custom renderer.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{(\w[\w.]*)\}")


class TemplateRenderer(ABC):
    """Base class for template renderers.

    Custom renderers should subclass this and implement the render() method.

    Examples
    --------
    >>> from bounded.templates.renderers import TemplateRenderer
    >>> class UpperRenderer(TemplateRenderer):
    ...     def render(self, template_string, values):
    ...         return DefaultRenderer().render(template_string, values).upper()
    """

    @abstractmethod
    def render(self, template_string: str, values: Mapping[str, object]) -> str:
        """Render a template with placeholder values.

        Parameters
        ----------
        template_string : str
            Template string with {name} placeholders.
        values : Mapping[str, object]
            Mapping from placeholder names to the values that fill them.

        Returns
        -------
        str
            Rendered text with placeholders replaced.
        """
        ...


class DefaultRenderer(TemplateRenderer):
    """Default renderer using simple placeholder substitution.

    Values are converted with ``str()`` and substituted in a single pass, so
    placeholders inside values stay literal. Placeholders without a value are
    left untouched, and braces that are not placeholders are never
    interpreted, so templates may contain arbitrary text.

    Examples
    --------
    >>> renderer = DefaultRenderer()
    >>> renderer.render("between '{min}' and '{max}'", {"min": 1, "max": 10})
    "between '1' and '10'"
    >>> renderer.render("{unknown} stays", {})
    '{unknown} stays'
    """

    def render(self, template_string: str, values: Mapping[str, object]) -> str:
        """Render template with simple placeholder substitution.

        Parameters
        ----------
        template_string : str
            Template string with {name} placeholders.
        values : Mapping[str, object]
            Mapping from placeholder names to values.

        Returns
        -------
        str
            Rendered text.
        """

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in values:
                return str(values[name])
            return match.group(0)

        return _PLACEHOLDER.sub(substitute, template_string)
