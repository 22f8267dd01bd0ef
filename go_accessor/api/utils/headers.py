"""Generated file header utilities."""

from typing import Sequence

GENERATOR_NAME = "accessor"


def format_command_line(args: Sequence[str]) -> str:
    """Join the invocation arguments the way they are recorded in the header."""
    return " ".join(args)


def build_file_header(command_line: str, package_name: str) -> str:
    """
    DO-NOT-EDIT marker naming the invocation, then the package clause.
    Both are followed by a blank line.
    """
    invocation = " ".join(part for part in (GENERATOR_NAME, command_line) if part)
    return (
        f'// Code generated by "{invocation}"; DO NOT EDIT.\n'
        "\n"
        f"package {package_name}\n"
        "\n"
    )
