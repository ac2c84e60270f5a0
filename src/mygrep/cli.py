"""Command-line interface: ``mygrep [-n] [-v] PATTERN FILE``.

Option handling follows getopts conventions rather than Click's defaults:
``--help`` is only honoured as the very first argument, options stop at the
first positional argument, and every diagnostic is a single ``Error: ...``
line on stderr followed by a hint to run ``--help``.
"""

import io
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import click
import typer
from typer.core import TyperCommand

from .errors import InputAccessError, UsageError
from .line_source import FileLineSource
from .output import print_plain
from .scanner import SearchConfig, scan
from .utils import fatal

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Usage: {prog} [-n] [-v] PATTERN FILE
       {prog} --help

Search for PATTERN in FILE case-insensitively.

Options:
  -n        Prefix each line of output with the 1-based line number
            within its input file.
  -v        Invert the sense of matching, to select non-matching lines.
  --help    Display this help message and exit.

Arguments:
  PATTERN   The string to search for (case-insensitive).
  FILE      The input text file to search within.

Examples:
  {prog} hello input.txt       # Find lines containing 'hello'
  {prog} -n hello input.txt    # Find lines containing 'hello' with line numbers
  {prog} -nv hello input.txt   # Find lines NOT containing 'hello' with line numbers"""


def help_hint(prog: str) -> str:
    """Return the line printed after every usage error."""
    return f"Run '{prog} --help' for usage information."


def split_arguments(arguments: list[str]) -> tuple[str, Path]:
    """Unpack the positional arguments into pattern and file path."""
    if len(arguments) == 0:
        raise UsageError("Missing search pattern and filename.")
    if len(arguments) == 1:
        raise UsageError("Missing search pattern or filename.", f"Perhaps you meant to search for '{arguments[0]}' in a file?")
    if len(arguments) > 2:  # noqa: PLR2004 — PATTERN and FILE
        raise UsageError("Too many arguments provided.")
    pattern, filename = arguments
    return pattern, Path(filename)


def _prog_name(ctx: click.Context) -> str:
    return ctx.find_root().info_name or "mygrep"


class GrepCommand(TyperCommand):
    """TyperCommand with getopts-style ``--help`` and invalid-option reporting."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Handle a leading ``--help`` first, then report unknown options as usage errors."""
        prog = _prog_name(ctx)
        if args and args[0] == "--help":
            print_plain(HELP_TEXT.format(prog=prog))
            ctx.exit(0)
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            # like getopts, name only the first unrecognised character: "-x", or "--" for long options
            fatal(f"Invalid option: -{e.option_name[1]}", help_hint(prog))


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)

_CONTEXT_SETTINGS: dict[str, Any] = {"allow_interspersed_args": False}


@app.command(cls=GrepCommand, add_help_option=False, context_settings=_CONTEXT_SETTINGS)
def main(
    ctx: typer.Context,
    arguments: Annotated[list[str] | None, typer.Argument(metavar="PATTERN FILE", show_default=False)] = None,
    line_numbers: Annotated[bool, typer.Option("-n", help="Prefix output lines with their line number.")] = False,
    invert_match: Annotated[bool, typer.Option("-v", help="Select non-matching lines.")] = False,
) -> None:
    """Search for PATTERN in FILE case-insensitively."""
    try:
        pattern, path = split_arguments(list(arguments or []))
    except UsageError as e:
        fatal(e.message, *e.notes, help_hint(_prog_name(ctx)))

    source = FileLineSource.load_or_exit(path)
    config = SearchConfig(pattern=pattern, show_line_numbers=line_numbers, invert_match=invert_match)

    # undecodable input bytes travel as surrogates and must be written back unchanged
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")

    output, result = scan(config, source)
    selected = 0
    try:
        for line in output:
            print_plain(line)
            selected += 1
    except InputAccessError as e:
        fatal(e.message, *e.notes)

    logger.debug("selected %d lines from %s", selected, path)
    raise typer.Exit(0 if result.any_output else 1)
