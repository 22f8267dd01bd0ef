"""Utility functions for the generator."""

from .headers import GENERATOR_NAME, format_command_line, build_file_header
from .paths import source_dir, output_path

__all__ = [
    "GENERATOR_NAME",
    "format_command_line",
    "build_file_header",
    "source_dir",
    "output_path",
]
