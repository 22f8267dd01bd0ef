"""Access policy resolution for struct fields."""

from enum import Enum
from typing import FrozenSet, Optional

from go_accessor.lib.structtag import parse_tags, lookup


ACCESS_TAG_NAME = "access"


class AccessKind(Enum):
    """The two accessor kinds a field can ask for."""
    READ = "r"
    WRITE = "w"


AccessPolicy = FrozenSet[AccessKind]

READ_ONLY: AccessPolicy = frozenset({AccessKind.READ})
READ_WRITE: AccessPolicy = frozenset({AccessKind.READ, AccessKind.WRITE})

# Setter is emitted before getter.
EMIT_ORDER = (AccessKind.WRITE, AccessKind.READ)

_TOKENS = {kind.value: kind for kind in AccessKind}


def convention_access(field_name: str) -> AccessPolicy:
    """Exported (upper-case) names are read/write, everything else is read-only."""
    if field_name[:1].isupper():
        return READ_WRITE
    return READ_ONLY


def policy_from_tokens(*tokens: str) -> AccessPolicy:
    """Keep the tokens that name an access kind, drop everything else."""
    return frozenset(_TOKENS[token] for token in tokens if token in _TOKENS)


def resolve_access(raw_tag: Optional[str], field_name: str, tag_key: str = ACCESS_TAG_NAME) -> AccessPolicy:
    """
    Resolve the access policy for one struct field.

    Args:
        raw_tag: The field's struct tag, already unquoted, or None when the
            field has no tag.
        field_name: The field's declared name.
        tag_key: Struct tag key that carries the policy.

    Returns:
        The policy named by the tag entry (its name plus options, restricted
        to "r" and "w"; possibly empty), or the naming convention when there
        is no entry for `tag_key`.

    Raises:
        TagSyntaxError: The tag is not in key:"value" form.
    """
    if raw_tag:
        entry = lookup(parse_tags(raw_tag), tag_key)
        if entry is not None:
            return policy_from_tokens(entry.name, *entry.options)
    return convention_access(field_name)


def format_policy(policy: AccessPolicy) -> str:
    """Short form for logs, e.g. "rw", "r" or "-"."""
    text = "".join(kind.value for kind in AccessKind if kind in policy)
    return text or "-"
