"""
Unit tests for printing parsed Go types back to source text.
"""

import pytest

from go_accessor.api.extractors import type_to_string, type_param_names, type_params_to_string


class TestTypePrinter:
    """Test type_to_string on field types."""

    @pytest.mark.parametrize("source, expected", [
        ("int", "int"),
        ("*pkg.Thing", "*pkg.Thing"),
        ("[]map[string][]*int", "[]map[string][]*int"),
        ("[ 4 ]byte", "[4]byte"),
        ("[N*2]byte", "[N*2]byte"),
        ("chan int", "chan int"),
        ("<-chan int", "<-chan int"),
        ("chan<- int", "chan<- int"),
        ("chan (<-chan int)", "chan (<-chan int)"),
        ("Pair[string, *Node]", "Pair[string, *Node]"),
        ("pkg.List[int]", "pkg.List[int]"),
    ])
    def test_simple_types(self, parse_go_field_type, source, expected):
        assert type_to_string(parse_go_field_type(source)) == expected

    @pytest.mark.parametrize("source, expected", [
        ("func()", "func()"),
        ("func(int, string) error", "func(int, string) error"),
        ("func(a, b int) (n int, err error)", "func(a, b int) (n int, err error)"),
        ("func(format string, args ...any)", "func(format string, args ...any)"),
        ("func(...string)", "func(...string)"),
        ("func() (int, error)", "func() (int, error)"),
        ("func() (int)", "func() int"),
        ("func(func(int) bool) []int", "func(func(int) bool) []int"),
    ])
    def test_function_types(self, parse_go_field_type, source, expected):
        assert type_to_string(parse_go_field_type(source)) == expected

    def test_empty_struct_and_interface(self, parse_go_field_type):
        assert type_to_string(parse_go_field_type("struct{}")) == "struct{}"
        assert type_to_string(parse_go_field_type("interface{}")) == "interface{}"

    def test_inline_struct_is_printed_on_one_line(self, parse_go_type):
        node = parse_go_type('struct {\n\tA, B int\n\tc string `json:"c"`\n\t*Base\n}')
        assert type_to_string(node) == 'struct{ A, B int; c string `json:"c"`; *Base }'

    def test_inline_interface(self, parse_go_field_type):
        node = parse_go_field_type("interface{ String() string; fmt.Stringer }")
        assert type_to_string(node) == "interface{ String() string; fmt.Stringer }"

    def test_union_interface_elements(self, parse_go_type):
        node = parse_go_type("interface {\n\t~int | ~int64 | string\n}")
        assert type_to_string(node) == "interface{ ~int | ~int64 | string }"

    def test_unsupported_node(self):
        with pytest.raises(TypeError, match="Unsupported type node"):
            type_to_string(object())


class TestTypeParameters:
    """Test printing of type parameter lists."""

    def test_none(self):
        assert type_params_to_string(None) == ""
        assert type_param_names(None) == ()

    def test_parameter_list(self, build_go_file):
        model = build_go_file("package p\n\ntype M[K comparable, V any, N ~int | ~float64] struct{}\n")
        params = model.decls[0].specs[0].type_params
        assert type_params_to_string(params) == "[K comparable, V any, N ~int | ~float64]"
        assert type_param_names(params) == ("K", "V", "N")

    def test_grouped_parameter_names(self, build_go_file):
        model = build_go_file("package p\n\ntype P[A, B any] struct{}\n")
        params = model.decls[0].specs[0].type_params
        assert type_params_to_string(params) == "[A, B any]"
        assert type_param_names(params) == ("A", "B")
