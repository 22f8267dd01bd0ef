"""
Main entry point for accessor generation.

This module orchestrates the run: every file of the loaded package is walked
for struct declarations, the fields of each requested struct are rendered to
getter/setter methods, and the methods are buffered per requested type behind
a generated-file header before being written out.

Architecture:
    - extractors/: struct walking, access policy resolution, type printing
    - generators/: Jinja-backed accessor rendering
    - utils/: header and path helpers
"""

import io
from pathlib import Path
from typing import Dict, List, Sequence

from go_accessor.errors import WriteError
from go_accessor.language import GoFile, GoPackage

from .extractors import (
    ACCESS_TAG_NAME,
    AccessKind,
    EMIT_ORDER,
    RecordType,
    TagErrorMode,
    extract_structs,
)
from .gen_logging import get_logger
from .generators import render_getter, render_setter
from .utils import build_file_header, output_path

logger = get_logger(__name__)


class Generator:
    """
    Holds the state of one run: the package being scanned, the accumulated
    output per requested type and the struct declarations found per file.
    """

    def __init__(
        self,
        package: GoPackage,
        command_line: str = "",
        tag_key: str = ACCESS_TAG_NAME,
        on_tag_error: TagErrorMode = TagErrorMode.SKIP_FIELD,
    ) -> None:
        self.package = package
        self.command_line = command_line
        self.tag_key = tag_key
        self.on_tag_error = TagErrorMode(on_tag_error)
        self.buf: Dict[str, io.StringIO] = {}
        self._structs: Dict[int, Dict[str, RecordType]] = {}

    def printf(self, type_name: str, text: str) -> None:
        """Append text to the output buffer of `type_name`, creating it on first use."""
        buf = self.buf.get(type_name)
        if buf is None:
            buf = io.StringIO()
            self.buf[type_name] = buf
        buf.write(text)

    def structs_in(self, go_file: GoFile) -> Dict[str, RecordType]:
        """Struct declarations of one file; each file is walked once per run."""
        key = id(go_file)
        if key not in self._structs:
            self._structs[key] = extract_structs(go_file.model, self.tag_key, self.on_tag_error)
        return self._structs[key]

    def generate(self, type_name: str) -> str:
        """
        Produce the accessor source for `type_name` and return it.

        The header and package clause are always written, so a type that is
        not declared anywhere yields a file without accessors. Fields are
        emitted in declaration order, setter before getter.
        """
        self.buf.pop(type_name, None)
        self.printf(type_name, build_file_header(self.command_line, self.package.name))

        count = 0
        for go_file in self.package.files:
            record = self.structs_in(go_file).get(type_name)
            if record is None:
                continue
            logger.debug(f"[GEN] {type_name} from {go_file.path}: {', '.join(record.field_names())}")
            for field in record.fields:
                for kind in EMIT_ORDER:
                    if kind not in field.access:
                        continue
                    if kind == AccessKind.WRITE:
                        text = render_setter(record.receiver_type, field.name, field.type)
                    else:
                        text = render_getter(record.receiver_type, field.name, field.type)
                    self.printf(type_name, f"{text}\n")
                    count += 1

        if count == 0:
            logger.debug(f"[GEN] {type_name}: no accessors generated")
        return self.source(type_name)

    def source(self, type_name: str) -> str:
        buf = self.buf.get(type_name)
        return buf.getvalue() if buf is not None else ""

    def write(self, type_name: str, path: Path) -> Path:
        """Write the buffer of `type_name` to `path` in one piece."""
        path = Path(path)
        try:
            path.write_text(self.source(type_name), encoding="utf-8")
        except OSError as e:
            raise WriteError(f"writing output: {e}") from e
        logger.info(f"[GENERATED] {path}")
        return path


def generate_accessors(
    package: GoPackage,
    type_names: Sequence[str],
    directory: Path,
    output: str = "",
    command_line: str = "",
    tag_key: str = ACCESS_TAG_NAME,
    on_tag_error: TagErrorMode = TagErrorMode.SKIP_FIELD,
) -> List[Path]:
    """
    Generate and write one accessor file per requested type.

    Files are written as each type is generated; a failed write aborts the run
    and leaves the files already written in place.
    """
    generator = Generator(
        package,
        command_line=command_line,
        tag_key=tag_key,
        on_tag_error=on_tag_error,
    )
    written = []
    for type_name in type_names:
        generator.generate(type_name)
        written.append(generator.write(type_name, output_path(output, directory, type_name)))
    return written
