"""Greeting page built from a scoped configuration value.

The page builder reads one message from a scoped configuration store, logs
it, and places it in a named region of a page. The configuration reader,
logger and renderer are passed in by the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from bounded.config.models import GreetingConfig
from bounded.errors import GreetingError
from bounded.templates.renderers import DefaultRenderer, TemplateRenderer

DEFAULT_SCOPE_NAME = "default"

_logger = logging.getLogger(__name__)


@runtime_checkable
class ScopedConfigReader(Protocol):
    """Read configuration values by path and scope."""

    def get_value(self, path: str, scope: str) -> str | None:
        """Return the value stored at ``path`` for ``scope``, if any."""
        ...


class ScopedConfigStore:
    """In-memory scoped configuration store.

    Lookups fall back to the ``default`` scope when the requested scope has
    no value for the path.

    Parameters
    ----------
    values : Mapping[str, Mapping[str, str]] | None
        Values as scope -> path -> value.

    Examples
    --------
    >>> store = ScopedConfigStore({"default": {"greeting/settings/message": "Hi"}})
    >>> store.get_value("greeting/settings/message", "store")
    'Hi'
    >>> store.get_value("missing/path", "store") is None
    True
    """

    def __init__(self, values: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._values: dict[str, dict[str, str]] = {
            scope: dict(paths) for scope, paths in (values or {}).items()
        }

    def get_value(self, path: str, scope: str) -> str | None:
        scoped = self._values.get(scope, {})
        if path in scoped:
            return scoped[path]
        return self._values.get(DEFAULT_SCOPE_NAME, {}).get(path)

    def set_value(self, path: str, value: str, scope: str = DEFAULT_SCOPE_NAME) -> None:
        """Store a value for a path in a scope."""
        self._values.setdefault(scope, {})[path] = value


class GreetingPage(BaseModel):
    """A page with a title and named content regions.

    Attributes
    ----------
    title : str
        Page title.
    regions : dict[str, str]
        Content keyed by region name.

    Examples
    --------
    >>> page = GreetingPage(title="Greeting Message", regions={"greeting.block": "Hi"})
    >>> page.render("<h1>{title}</h1><p>{greeting.block}</p>")
    '<h1>Greeting Message</h1><p>Hi</p>'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    regions: dict[str, str] = Field(default_factory=dict)

    def render(
        self, template_string: str, renderer: TemplateRenderer | None = None
    ) -> str:
        """Render the page into a template.

        Parameters
        ----------
        template_string : str
            Template with ``{title}`` and ``{<region>}`` placeholders.
        renderer : TemplateRenderer | None
            Renderer to use. Defaults to ``DefaultRenderer``.

        Returns
        -------
        str
            Rendered page.
        """
        renderer = renderer if renderer is not None else DefaultRenderer()
        return renderer.render(template_string, {"title": self.title, **self.regions})


def build_greeting_page(
    reader: ScopedConfigReader,
    logger: logging.Logger | None = None,
    *,
    config: GreetingConfig | None = None,
) -> GreetingPage:
    """Build the greeting page from a scoped configuration value.

    Parameters
    ----------
    reader : ScopedConfigReader
        Source of the greeting message.
    logger : logging.Logger | None
        Logger for load and error messages. Defaults to the module logger.
    config : GreetingConfig | None
        Path, scope, title and target region. Defaults to ``GreetingConfig()``.

    Returns
    -------
    GreetingPage
        Page with the message in the configured region.

    Raises
    ------
    GreetingError
        If the message is missing or the reader fails.

    Examples
    --------
    >>> store = ScopedConfigStore({"store": {"greeting/settings/message": "Hello"}})
    >>> build_greeting_page(store).regions
    {'greeting.block': 'Hello'}
    """
    logger = logger if logger is not None else _logger
    config = config if config is not None else GreetingConfig()

    try:
        message = reader.get_value(config.path, config.scope)
        if message is None:
            raise LookupError(f"no value for {config.path!r} in scope {config.scope!r}")
        logger.info("Greeting message loaded: %s", message)
    except Exception as e:
        logger.error("Error loading greeting message: %s", e)
        raise GreetingError("Unable to load greeting message.") from e

    return GreetingPage(title=config.title, regions={config.block: message})
