"""HTML rendering of fields and their trailing annotations.

Rendering is a pure projection: the field's ``trailing`` list is turned
into plain node records, then into HTML by a kida template. Nothing here
mutates a field.
"""

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kida import Environment

from formcheck.config import ValidatorConfig
from formcheck.forms.markers import Decoration, Marker, MarkerKind
from formcheck.forms.model import Field, FormView

if TYPE_CHECKING:
    from kida.template import Template

_NODE = (
    "<{{ node.tag }}"
    '{% if node.css_class %} class="{{ node.css_class }}"{% end %}'
    '{% if node.style %} style="{{ node.style }}"{% end %}'
    ">{{ node.text }}</{{ node.tag }}>"
)

_FIELD = (
    '<input type="text" id="{{ field.id }}" name="{{ field.name }}" value="{{ field.value }}">'
    "{% for node in field.nodes %}" + _NODE + "{% end %}"
)

_FORM = (
    '<form{% if action %} action="{{ action }}"{% end %} method="post">'
    "{% for field in fields %}" + _FIELD + "{% end %}"
    "</form>"
)


@dataclass(frozen=True, slots=True)
class RenderedNode:
    """One annotation as it will appear in HTML."""

    tag: str
    text: str
    css_class: str = ""
    style: str = ""


@dataclass(frozen=True, slots=True)
class RenderedField:
    id: str
    name: str
    value: str
    nodes: tuple[RenderedNode, ...]


@functools.cache
def _environment() -> Environment:
    """Bare autoescaping kida Environment shared by every render call."""
    return Environment(autoescape=True)


@functools.cache
def _template(source: str) -> Template:
    return _environment().from_string(source)


def project_node(node: Marker | Decoration, config: ValidatorConfig) -> RenderedNode:
    """Map one annotation to its rendered form."""
    if isinstance(node, Marker):
        css_class = (
            config.diagnostic_class
            if node.kind is MarkerKind.DIAGNOSTIC
            else config.marker_class
        )
        return RenderedNode(
            tag=config.marker_tag,
            text=node.message,
            css_class=css_class,
            style=config.marker_style,
        )
    return RenderedNode(tag="span", text=node.text, css_class=node.css_class)


def project_field(field: Field, config: ValidatorConfig) -> RenderedField:
    return RenderedField(
        id=field.id,
        name=getattr(field, "name", field.id),
        value=field.value,
        nodes=tuple(project_node(node, config) for node in field.trailing),
    )


def render_field(field: Field, config: ValidatorConfig | None = None) -> str:
    """Render one field followed by its trailing annotations."""
    config = config or ValidatorConfig()
    return _template(_FIELD).render({"field": project_field(field, config)})


def render_form(form: FormView, config: ValidatorConfig | None = None) -> str:
    """Render a whole form, markers included."""
    config = config or ValidatorConfig()
    return _template(_FORM).render(
        {
            "action": getattr(form, "action", ""),
            "fields": [project_field(f, config) for f in form.fields],
        }
    )
