"""Model extraction utilities."""

from .access_resolver import (
    ACCESS_TAG_NAME,
    AccessKind,
    AccessPolicy,
    EMIT_ORDER,
    READ_ONLY,
    READ_WRITE,
    convention_access,
    resolve_access,
)
from .type_printer import type_to_string, type_param_names, type_params_to_string
from .struct_extractor import (
    FieldDescriptor,
    RecordType,
    TagErrorMode,
    extract_record,
    extract_structs,
)

__all__ = [
    "ACCESS_TAG_NAME",
    "AccessKind",
    "AccessPolicy",
    "EMIT_ORDER",
    "READ_ONLY",
    "READ_WRITE",
    "convention_access",
    "resolve_access",
    "type_to_string",
    "type_param_names",
    "type_params_to_string",
    "FieldDescriptor",
    "RecordType",
    "TagErrorMode",
    "extract_record",
    "extract_structs",
]
