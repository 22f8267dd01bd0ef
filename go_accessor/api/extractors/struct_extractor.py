"""
Struct declaration extraction.

Walks the top-level type declarations of one parsed Go file and turns every
struct type into a RecordType holding one FieldDescriptor per named field.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from go_accessor.api.gen_logging import get_logger
from go_accessor.errors import TagSyntaxError
from go_accessor.language import get_type_specs
from go_accessor.lib.structtag import unquote

from .access_resolver import ACCESS_TAG_NAME, AccessPolicy, format_policy, resolve_access
from .type_printer import type_to_string, type_param_names, type_params_to_string

logger = get_logger(__name__)


class TagErrorMode(str, Enum):
    """What the walker does with a field whose struct tag does not parse."""
    SKIP_FIELD = "skip-field"
    SKIP_RECORD = "skip-record"
    FAIL = "fail"


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    type: str
    access: AccessPolicy


@dataclass
class RecordType:
    """A named struct type and its named fields, in declaration order."""
    name: str
    type_params: Tuple[str, ...] = ()
    fields: List[FieldDescriptor] = field(default_factory=list)

    @property
    def receiver_type(self) -> str:
        """The type as written in a method receiver: List or List[K, V]."""
        if not self.type_params:
            return self.name
        return f"{self.name}[{', '.join(self.type_params)}]"

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]


# ------------------------------------------------------------------------------
# Field extraction

def _extract_field(node, struct_name: str, tag_key: str) -> Optional[FieldDescriptor]:
    """
    Build the descriptor for one field node.
    Returns None for embedded fields. Raises TagSyntaxError for a malformed tag.
    """
    if type(node).__name__ == "EmbeddedField":
        logger.debug(f"  [SKIP] {struct_name}: embedded {type_to_string(node.type)}")
        return None

    # Only the first name of a group such as "A, B int" is used.
    name = node.names[0]
    type_text = type_to_string(node.type)

    try:
        raw_tag = unquote(node.tag) if node.tag else None
        access = resolve_access(raw_tag, name, tag_key)
    except TagSyntaxError as e:
        raise TagSyntaxError(e.args[0], tag=node.tag, struct=struct_name, field=name) from e

    logger.debug(f"  [FIELD] {struct_name}.{name} {type_text} access={format_policy(access)}")
    return FieldDescriptor(name=name, type=type_text, access=access)


def extract_record(spec, tag_key: str = ACCESS_TAG_NAME,
                   on_tag_error: TagErrorMode = TagErrorMode.SKIP_FIELD) -> Optional[RecordType]:
    """
    Build the RecordType for a struct TypeSpec.

    Returns None when the TypeSpec is not a struct declaration, or when a
    malformed tag abandons the record in SKIP_RECORD mode.
    """
    if spec.alias or type(spec.type).__name__ != "StructType":
        return None

    record = RecordType(name=spec.name, type_params=type_param_names(spec.type_params))
    logger.debug(f"[WALK] struct {spec.name}{type_params_to_string(spec.type_params)}")

    for node in spec.type.fields:
        try:
            descriptor = _extract_field(node, record.name, tag_key)
        except TagSyntaxError as e:
            if on_tag_error == TagErrorMode.FAIL:
                raise
            if on_tag_error == TagErrorMode.SKIP_RECORD:
                logger.warning(f"[SKIP] {e}: dropping struct {record.name}")
                return None
            logger.warning(f"[SKIP] {e}: dropping field")
            continue
        if descriptor is not None:
            record.fields.append(descriptor)

    return record


def extract_structs(source_file, tag_key: str = ACCESS_TAG_NAME,
                    on_tag_error: TagErrorMode = TagErrorMode.SKIP_FIELD) -> Dict[str, RecordType]:
    """
    Collect every top-level struct declaration of a parsed file, keyed by name.

    Declarations are visited in source order; a later declaration of the same
    name replaces an earlier one.
    """
    on_tag_error = TagErrorMode(on_tag_error)
    structs: Dict[str, RecordType] = {}

    for spec in get_type_specs(source_file):
        if spec.alias:
            logger.debug(f"[SKIP] alias {spec.name}")
            continue
        if type(spec.type).__name__ != "StructType":
            continue
        record = extract_record(spec, tag_key, on_tag_error)
        if record is None:
            # An abandoned record leaves any earlier declaration in place.
            continue
        structs[spec.name] = record

    return structs
