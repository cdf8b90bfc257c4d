"""Test template renderers."""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from bounded.templates.renderers import DefaultRenderer, TemplateRenderer


def test_default_renderer_is_template_renderer() -> None:
    """Test that DefaultRenderer is a TemplateRenderer."""
    renderer = DefaultRenderer()
    assert isinstance(renderer, TemplateRenderer)


def test_default_renderer_simple_template() -> None:
    """Test DefaultRenderer with simple template."""
    renderer = DefaultRenderer()

    result = renderer.render(
        "The input is not between '{min}' and '{max}'", {"min": 1, "max": 10}
    )

    assert result == "The input is not between '1' and '10'"


def test_default_renderer_repeated_placeholder() -> None:
    """Test that every occurrence of a placeholder is replaced."""
    renderer = DefaultRenderer()
    assert renderer.render("{x} and {x}", {"x": "a"}) == "a and a"


def test_default_renderer_missing_value() -> None:
    """Test that placeholders without values are left untouched."""
    renderer = DefaultRenderer()
    assert renderer.render("{min} to {max}", {"min": 0}) == "0 to {max}"


def test_default_renderer_literal_braces() -> None:
    """Test that braces in the template or values are not interpreted."""
    renderer = DefaultRenderer()
    assert renderer.render("{ {value} }", {"value": "{min}"}) == "{ {min} }"


def test_default_renderer_single_pass() -> None:
    """Test that substituted values are not rendered again."""
    renderer = DefaultRenderer()
    values = {"min": "{value}", "max": "{min}", "value": "x"}
    assert renderer.render("{min}|{max}|{value}", values) == "{value}|{min}|x"


def test_default_renderer_dotted_names() -> None:
    """Test placeholders with dotted names."""
    renderer = DefaultRenderer()
    assert renderer.render("<p>{greeting.block}</p>", {"greeting.block": "Hi"}) == (
        "<p>Hi</p>"
    )


def test_default_renderer_empty_values() -> None:
    """Test rendering with no values."""
    renderer = DefaultRenderer()
    assert renderer.render("plain text", {}) == "plain text"


def test_template_renderer_is_abstract() -> None:
    """Test that TemplateRenderer cannot be instantiated."""
    with pytest.raises(TypeError):
        TemplateRenderer()  # type: ignore[abstract]


def test_custom_renderer_subclass() -> None:
    """Test that custom renderers can extend the base class."""

    class BracketRenderer(TemplateRenderer):
        def render(self, template_string: str, values: Mapping[str, object]) -> str:
            return DefaultRenderer().render(
                template_string, {k: f"[{v}]" for k, v in values.items()}
            )

    assert BracketRenderer().render("{min}-{max}", {"min": 1, "max": 2}) == "[1]-[2]"
