"""Small helpers shared by the CLI layer."""

import sys
from typing import NoReturn

import typer

from .output import print_plain


def fatal(message: str, *notes: str, code: int = 1) -> NoReturn:
    """Print ``Error: <message>`` and any follow-up notes to stderr, then exit."""
    print_plain(f"Error: {message}", file=sys.stderr)
    for note in notes:
        print_plain(note, file=sys.stderr)
    raise typer.Exit(code)
