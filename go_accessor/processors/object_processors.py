"""
textX object processors for go-accessor.

Object processors run while a Go file's model is constructed. They reject
declarations the Go compiler would refuse, so a package that loads here has
at least well-formed struct declarations.
"""

from textx import get_location, TextXSemanticError


BLANK_IDENTIFIER = "_"


# ------------------------------------------------------------------------------
# Field naming helpers

def _field_names(field):
    """
    Names a struct field declares.
    Embedded fields are named after their type, without qualifier or pointer.
    """
    if type(field).__name__ == "EmbeddedField":
        return [field.type.name]
    return list(field.names)


# ------------------------------------------------------------------------------
# Processors

def struct_type_obj_processor(struct):
    """Reject duplicate field names inside one struct type."""
    seen = set()
    for field in getattr(struct, "fields", []) or []:
        for name in _field_names(field):
            if name == BLANK_IDENTIFIER:
                continue
            if name in seen:
                raise TextXSemanticError(
                    f"duplicate field {name}",
                    **get_location(field),
                )
            seen.add(name)


def type_params_obj_processor(type_params):
    """Reject a type parameter list that declares the same name twice."""
    seen = set()
    for decl in type_params.params:
        for name in decl.names:
            if name == BLANK_IDENTIFIER:
                continue
            if name in seen:
                raise TextXSemanticError(
                    f"{name} redeclared in this block",
                    **get_location(type_params),
                )
            seen.add(name)


def get_obj_processors():
    """Return object processor configuration for the metamodel."""
    return {
        "StructType": struct_type_obj_processor,
        "TypeParams": type_params_obj_processor,
    }
