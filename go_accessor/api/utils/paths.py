"""Source and output path utilities."""

from pathlib import Path
from typing import Sequence


def source_dir(patterns: Sequence[str]) -> Path:
    """
    Directory generated files go to by default: the single directory
    argument, else the directory holding the first file argument.
    """
    patterns = list(patterns) or ["."]
    first = Path(patterns[0])
    if len(patterns) == 1 and first.is_dir():
        return first
    return first.parent


def output_path(override: str, directory: Path, type_name: str) -> Path:
    """Explicit output file if given, else <directory>/<type>_accessor.go in lower case."""
    if override:
        return Path(override)
    return Path(directory) / f"{type_name}_accessor.go".lower()
