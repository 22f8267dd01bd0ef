"""
Unit tests for access policy resolution.
"""

import pytest

from go_accessor.api.extractors import (
    AccessKind,
    EMIT_ORDER,
    READ_ONLY,
    READ_WRITE,
    convention_access,
    resolve_access,
)
from go_accessor.api.extractors.access_resolver import format_policy, policy_from_tokens
from go_accessor.errors import TagSyntaxError


class TestConvention:
    """Test the naming-convention fallback."""

    def test_exported_name_is_read_write(self):
        assert convention_access("Name") == READ_WRITE

    def test_unexported_name_is_read_only(self):
        assert convention_access("name") == READ_ONLY

    def test_blank_and_underscore_names_are_read_only(self):
        assert convention_access("_") == READ_ONLY
        assert convention_access("_Hidden") == READ_ONLY


class TestResolveAccess:
    """Test policy resolution from struct tags."""

    @pytest.mark.parametrize("tag, expected", [
        ('access:"r,w"', READ_WRITE),
        ('access:"w,r"', READ_WRITE),
        ('access:"r"', READ_ONLY),
        ('access:"w"', frozenset({AccessKind.WRITE})),
        ('access:""', frozenset()),
        ('access:"rw"', frozenset()),
        ('access:"r,x,w"', READ_WRITE),
    ])
    def test_tag_decides(self, tag, expected):
        assert resolve_access(tag, "y") == expected

    def test_tag_overrides_convention(self):
        assert resolve_access('access:"r"', "Exported") == READ_ONLY
        assert resolve_access('access:"w"', "hidden") == frozenset({AccessKind.WRITE})

    def test_no_tag_uses_convention(self):
        assert resolve_access(None, "X") == READ_WRITE
        assert resolve_access(None, "y") == READ_ONLY
        assert resolve_access("", "y") == READ_ONLY

    def test_tag_without_access_key_uses_convention(self):
        assert resolve_access('json:"x"', "X") == READ_WRITE
        assert resolve_access('json:"x"', "x") == READ_ONLY

    def test_custom_tag_key(self):
        assert resolve_access('gen:"w" access:"r"', "y", tag_key="gen") == frozenset({AccessKind.WRITE})

    def test_malformed_tag_raises(self):
        with pytest.raises(TagSyntaxError):
            resolve_access("access:r", "X")


class TestPolicyHelpers:
    """Test token conversion, formatting and emission order."""

    def test_setter_is_emitted_before_getter(self):
        assert EMIT_ORDER == (AccessKind.WRITE, AccessKind.READ)

    def test_policy_from_tokens(self):
        assert policy_from_tokens("r", "r") == READ_ONLY
        assert policy_from_tokens("R", "W") == frozenset()

    def test_format_policy(self):
        assert format_policy(READ_WRITE) == "rw"
        assert format_policy(READ_ONLY) == "r"
        assert format_policy(frozenset()) == "-"
