"""
Pytest configuration and shared fixtures for the go-accessor test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from go_accessor.language import build_file_str


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for Go sources and generated code."""
    temp_dir = tempfile.mkdtemp(prefix="accessor_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def point_go_source():
    """The canonical example: one tagged exported field, one untagged unexported field."""
    return """package geom

type Point struct {
	X int `access:"r,w"`
	y int
}
"""


@pytest.fixture
def write_go_file(temp_output_dir):
    """Factory fixture to write Go source to a file in the temporary directory."""
    def _write(content: str, filename: str = "model.go") -> Path:
        file_path = temp_output_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def build_go_file():
    """Factory fixture to parse Go source text into a SourceFile model."""
    def _build(content: str):
        return build_file_str(content)
    return _build


@pytest.fixture
def parse_go_type(build_go_file):
    """Factory fixture returning the parsed type node of `type T <expr>`."""
    def _parse(type_expr: str):
        model = build_go_file(f"package p\n\ntype T {type_expr}\n")
        return model.decls[0].specs[0].type
    return _parse


@pytest.fixture
def parse_go_field_type(build_go_file):
    """Factory fixture returning the parsed type node of a struct field `F <expr>`."""
    def _parse(type_expr: str):
        model = build_go_file(f"package p\n\ntype T struct {{\n\tF {type_expr}\n}}\n")
        return model.decls[0].specs[0].type.fields[0].type
    return _parse


# Test data fixtures for common scenarios

@pytest.fixture
def shapes_go_source():
    """A file mixing imports, functions, variables, grouped and generic types."""
    return """// Package shapes has a bit of everything.
package shapes

import (
	"fmt"
	str "strings"
)

const Pi = 3.14159

var registry = map[string]func() Shape{
	"circle": func() Shape { return &Circle{} },
}

type Shape interface {
	Area() float64
	fmt.Stringer
}

type (
	Circle struct {
		Radius float64 `json:"radius" access:"r"`
		center Point
	}

	Label string
)

type Point struct {
	X, Y  int
	Tags  []string `access:"w"`
	Meta  map[string]*Circle
	owner *Circle
}

type Box[T any] struct {
	Items []T
	limit int `access:"r,w"`
}

func (c *Circle) Area() float64 {
	if c.Radius <= 0 { // braces in comments are fine: {
		return 0
	}
	return Pi * c.Radius * c.Radius
}

func (c *Circle) String() string {
	return fmt.Sprintf("circle{%v}", str.TrimSpace("}"))
}
"""
