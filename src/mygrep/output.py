"""Plain output helpers."""

# ruff: noqa: T201 -- output layer

import sys
from typing import TextIO


def print_plain(*messages: object, file: TextIO | None = None) -> None:
    """Print messages as-is, without markup processing or wrapping."""
    print(*messages, file=file or sys.stdout)
