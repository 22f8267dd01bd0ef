import sys
import click

from datetime import date
from rich.console import Console
from rich.markup import escape

from go_accessor.api.extractors import ACCESS_TAG_NAME, TagErrorMode
from go_accessor.api.gen_logging import configure_gen_logging
from go_accessor.api.generator import generate_accessors
from go_accessor.api.utils import format_command_line, source_dir
from go_accessor.errors import AccessorError
from go_accessor.language import load_package

console = Console(stderr=True)

USAGE = """\
Usage of accessor:
\taccessor [flags] -type T [directory]
\taccessor [flags] -type T files... # Must be a single package
"""


class AccessorCommand(click.Command):
    """Prints the accessor usage lines ahead of click's option help."""

    def format_usage(self, ctx, formatter):
        formatter.write(USAGE)


@click.command("accessor", cls=AccessorCommand, help="Generate getter and setter methods for Go struct types.")
@click.pass_context
@click.option("-type", "--type", "type_names", required=True,
              help="comma-separated list of type names; must be set")
@click.option("-output", "--output", "output", default="",
              help="output file name; default srcdir/<type>_accessor.go")
@click.option("-tag", "--tag", "tag_key", default=ACCESS_TAG_NAME, show_default=True,
              help="struct tag key holding the access policy")
@click.option(
    "--tag-errors",
    type=click.Choice([mode.value for mode in TagErrorMode], case_sensitive=False),
    default=TagErrorMode.SKIP_FIELD.value,
    show_default=True,
    help="what to do with a field whose struct tag does not parse",
)
@click.option("-v", "--verbose", is_flag=True, help="log every file and field visited")
@click.option("-q", "--quiet", is_flag=True, help="only log warnings and errors")
@click.argument("patterns", nargs=-1)
def main(context, type_names, output, tag_key, tag_errors, verbose, quiet, patterns):
    if not type_names.strip():
        raise click.UsageError("-type must be set", ctx=context)

    configure_gen_logging(verbose=verbose, quiet=quiet)
    types = type_names.split(",")

    # We accept either one directory or a list of files.
    # Default: process whole package in current directory.
    args = list(patterns) or ["."]

    try:
        package = load_package(args)
        generate_accessors(
            package,
            types,
            directory=source_dir(args),
            output=output,
            command_line=format_command_line(sys.argv[1:]),
            tag_key=tag_key,
            on_tag_error=TagErrorMode(tag_errors.lower()),
        )
    except AccessorError as e:
        console.print(
            f"[{date.today().strftime('%Y-%m-%d')}] Generate failed with error(s): {escape(str(e))}",
            style="red",
        )
        context.exit(1)
    else:
        context.exit(0)


if __name__ == "__main__":
    main()
