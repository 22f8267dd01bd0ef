"""
Core metamodel and package loader for go-accessor.

This module provides the entry points for turning Go source files into textX
models: the automatic-semicolon pre-pass, single file builders, and
`load_package`, which resolves command line patterns to exactly one checked
Go package. Semantic checks are registered as object processors from the
processors/ package.
"""

from dataclasses import dataclass, field
from os.path import join, dirname, abspath
from pathlib import Path
from typing import List, Optional, Sequence

from textx import metamodel_from_file, TextXError

from go_accessor.api.gen_logging import get_logger
from go_accessor.errors import PackageLoadError
from go_accessor.processors import get_obj_processors

logger = get_logger(__name__)


# ------------------------------------------------------------------------------
# Constants
THIS_DIR = dirname(abspath(__file__))
GRAMMAR_DIR = join(THIS_DIR, "grammar")

GO_KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
})

# Keywords after which a newline terminates the statement.
_TERMINATING_KEYWORDS = frozenset({"break", "continue", "fallthrough", "return"})


# ------------------------------------------------------------------------------
# Package model

@dataclass
class GoFile:
    """One parsed Go source file."""
    path: Path
    model: object


@dataclass
class GoPackage:
    """A loaded Go package: its clause name, directory and files in name order."""
    name: str
    directory: Path
    files: List[GoFile] = field(default_factory=list)


# ------------------------------------------------------------------------------
# Semicolon insertion

def _scan_quoted(source: str, start: int) -> int:
    """Return the index just past the string, raw string or rune literal at `start`."""
    quote = source[start]
    n = len(source)
    i = start + 1
    if quote == "`":
        end = source.find("`", i)
        return n if end == -1 else end + 1
    while i < n:
        ch = source[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            # Unterminated; leave it for the parser to report.
            return i
        i += 1
    return n


def insert_semicolons(source: str) -> str:
    """
    Apply Go's automatic semicolon insertion.

    A ';' is inserted right after the final token of each line when that
    token is an identifier, a basic literal, one of the keywords break,
    continue, fallthrough or return, or one of ++ -- ) ] }. Only ';'
    characters are added, so line numbers in parse errors still match the
    original file.
    """
    out: List[str] = []
    needs_semi = False
    token_end = 0
    i = 0
    n = len(source)

    def terminate():
        out.insert(token_end, ";")

    while i < n:
        ch = source[i]

        if ch == "\n":
            if needs_semi:
                terminate()
                needs_semi = False
            out.append(ch)
            i += 1
            continue

        if ch in " \t\r\f\v":
            out.append(ch)
            i += 1
            continue

        if source.startswith("//", i):
            end = source.find("\n", i)
            end = n if end == -1 else end
            if needs_semi:
                terminate()
                needs_semi = False
            out.append(source[i:end])
            i = end
            continue

        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            end = n if end == -1 else end + 2
            comment = source[i:end]
            # A general comment containing newlines acts like a newline.
            if needs_semi and "\n" in comment:
                terminate()
                needs_semi = False
            out.append(comment)
            i = end
            continue

        if ch in "\"'`":
            end = _scan_quoted(source, i)
            out.append(source[i:end])
            needs_semi = True
            i = end
        elif ch.isalnum() or ch == "_":
            j = i
            while j < n and (source[j].isalnum() or source[j] in "_."):
                j += 1
            word = source[i:j]
            if word in GO_KEYWORDS:
                needs_semi = word in _TERMINATING_KEYWORDS
            else:
                needs_semi = True
            out.append(word)
            i = j
        elif source.startswith("++", i) or source.startswith("--", i):
            out.append(source[i:i + 2])
            needs_semi = True
            i += 2
        else:
            needs_semi = ch in ")]}"
            out.append(ch)
            i += 1
        token_end = len(out)

    if needs_semi:
        terminate()

    return "".join(out)


# ------------------------------------------------------------------------------
# Public model builders

def build_file_str(source: str, file_name: Optional[str] = None):
    """Parse Go source text into a SourceFile model."""
    return GoMetaModel.model_from_str(insert_semicolons(source), file_name=file_name)


def build_file(path) -> object:
    """Parse a Go file from disk into a SourceFile model."""
    path = Path(path)
    return build_file_str(path.read_text(encoding="utf-8"), file_name=str(path))


# ------------------------------------------------------------------------------
# Model element getters

def get_type_specs(model):
    """Return every top-level TypeSpec in declaration order."""
    specs = []
    for decl in getattr(model, "decls", []) or []:
        if type(decl).__name__ == "TypeDecl":
            specs.extend(decl.specs)
    return specs


# ------------------------------------------------------------------------------
# Package loading

def _is_package_file(path: Path) -> bool:
    """Mirror the go tool: skip tests and files starting with '_' or '.'."""
    name = path.name
    return (
        name.endswith(".go")
        and not name.endswith("_test.go")
        and not name.startswith(("_", "."))
    )


def _collect_files(patterns: Sequence[str]) -> List[Path]:
    files: List[Path] = []
    for pattern in patterns:
        path = Path(pattern)
        if not path.exists():
            raise PackageLoadError(f"stat {pattern}: no such file or directory")
        if path.is_dir():
            found = sorted(p for p in path.iterdir() if p.is_file() and _is_package_file(p))
            if not found:
                raise PackageLoadError(f"no Go files in {path.resolve()}")
            files.extend(found)
        else:
            if path.suffix != ".go":
                raise PackageLoadError(f"{pattern}: not a Go source file")
            files.append(path)
    return files


def _format_textx_error(path: Path, err: TextXError) -> str:
    message = getattr(err, "message", None) or (err.args[0] if err.args else str(err))
    if isinstance(message, bytes):
        message = message.decode("utf-8")
    line = getattr(err, "line", None)
    col = getattr(err, "col", None)
    if line:
        return f"{path}:{line}:{col}: {message}"
    return f"{path}: {message}"


def load_package(patterns: Sequence[str]) -> GoPackage:
    """
    Parse and check the single package named by `patterns`.

    Patterns are either one or more directories or a list of files; no
    patterns means the current directory. Raises PackageLoadError when any
    file fails to parse or check, or when the files do not form exactly one
    package.
    """
    patterns = list(patterns) or ["."]
    files = _collect_files(patterns)

    groups = {}
    for path in files:
        logger.debug(f"[LOAD] Parsing {path}")
        try:
            model = build_file(path)
        except TextXError as e:
            raise PackageLoadError(_format_textx_error(path, e)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise PackageLoadError(f"{path}: {e}") from e
        key = (path.resolve().parent, model.name)
        groups.setdefault(key, []).append(GoFile(path=path, model=model))

    if len(groups) != 1:
        names = ", ".join(sorted(f"{name} ({directory})" for directory, name in groups))
        raise PackageLoadError(f"error: {len(groups)} packages found: {names}")

    (directory, name), go_files = next(iter(groups.items()))
    logger.debug(f"[LOAD] Package {name}: {len(go_files)} file(s)")
    return GoPackage(name=name, directory=directory, files=go_files)


# ------------------------------------------------------------------------------
# Metamodel creation

def get_metamodel(debug: bool = False):
    """
    Load the textX metamodel from grammar/go.tx.
    Registers the object processors that perform semantic checks.
    """
    mm = metamodel_from_file(
        join(GRAMMAR_DIR, "go.tx"),
        autokwd=True,
        auto_init_attributes=True,
        debug=debug,
    )

    # Object processors run during model construction
    mm.register_obj_processors(get_obj_processors())

    return mm


# Create the global metamodel instance
GoMetaModel = get_metamodel(debug=False)
