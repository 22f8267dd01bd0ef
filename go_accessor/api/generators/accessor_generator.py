"""Getter and setter method rendering."""

from dataclasses import dataclass

from jinja2 import TemplateError

from go_accessor.errors import RenderError
from go_accessor.templates import env

GETTER_TEMPLATE = "getter.go.jinja"
SETTER_TEMPLATE = "setter.go.jinja"


@dataclass(frozen=True)
class AccessorContext:
    """Everything an accessor template interpolates."""
    receiver: str
    struct: str
    field: str
    type: str


def receiver_name(record_type: str) -> str:
    """Lower-cased first character of the struct name."""
    return record_type[:1].lower()


def accessor_context(record_type: str, field_name: str, type_text: str) -> AccessorContext:
    """
    Build the template context for one accessor.

    `record_type` is the receiver type as written, so a generic struct is
    passed as "List[T]".
    """
    return AccessorContext(
        receiver=receiver_name(record_type),
        struct=record_type,
        field=field_name,
        type=type_text,
    )


def _render(template_name: str, ctx: AccessorContext) -> str:
    try:
        template = env.get_template(template_name)
        return template.render(ctx=ctx)
    except TemplateError as e:
        raise RenderError(f"rendering {template_name}: {e}") from e


def render_getter(record_type: str, field_name: str, type_text: str) -> str:
    """func (p *Point) GetX() int { return p.X }, one statement per line."""
    return _render(GETTER_TEMPLATE, accessor_context(record_type, field_name, type_text))


def render_setter(record_type: str, field_name: str, type_text: str) -> str:
    """func (p *Point) SetX(param int) { p.X = param }, one statement per line."""
    return _render(SETTER_TEMPLATE, accessor_context(record_type, field_name, type_text))
