"""
Processors module for go-accessor.

This module contains textX object processors that run during model
construction to perform the semantic checks a Go type checker would reject.
"""

from go_accessor.processors.object_processors import (
    get_obj_processors,
    struct_type_obj_processor,
    type_params_obj_processor,
)

__all__ = [
    "get_obj_processors",
    "struct_type_obj_processor",
    "type_params_obj_processor",
]
