"""
Error taxonomy for go-accessor.

Field-local problems (a malformed struct tag) are recoverable and handled by
the struct walker according to the configured tag-error mode. Everything else
is fatal for the run and is reported by the CLI.
"""


class AccessorError(Exception):
    """Base class for all go-accessor errors."""


class PackageLoadError(AccessorError):
    """The target package could not be parsed, checked or resolved to exactly one package."""


class TagSyntaxError(AccessorError, ValueError):
    """A struct tag is not in the conventional key:"value" form."""

    def __init__(self, message: str, *, tag: str = "", struct: str = "", field: str = ""):
        super().__init__(message)
        self.tag = tag
        self.struct = struct
        self.field = field

    def __str__(self) -> str:
        base = super().__str__()
        if self.struct and self.field:
            return f"{self.struct}.{self.field}: {base}"
        return base


class RenderError(AccessorError):
    """An accessor template failed to render. Indicates a broken template, not bad input."""


class WriteError(AccessorError):
    """A generated file could not be written."""
