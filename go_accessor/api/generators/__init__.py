"""
Code generators for go-accessor.

- accessor_generator: getter/setter methods rendered from Jinja templates
"""

from .accessor_generator import (
    AccessorContext,
    accessor_context,
    receiver_name,
    render_getter,
    render_setter,
)

__all__ = [
    "AccessorContext",
    "accessor_context",
    "receiver_name",
    "render_getter",
    "render_setter",
]
