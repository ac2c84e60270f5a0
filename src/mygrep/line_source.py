"""Line sources: split text streams and files into line contents."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Self, TextIO

from mm_result import Result

from .errors import InputAccessError
from .utils import fatal

logger = logging.getLogger(__name__)

FILE_NOT_FOUND = "file_not_found"
FILE_NOT_READABLE = "file_not_readable"


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield each line of an open text stream without its trailing newline.

    A last line lacking a newline is still yielded; an empty stream yields nothing.
    """
    for raw in stream:
        yield raw.removesuffix("\n")


class FileLineSource:
    """Lines of a text file, streamed from disk on each iteration.

    Only ``\\n`` ends a line, and any other character (including ``\\r``) stays
    part of the line. Bytes that are not valid UTF-8 are kept as surrogate escapes,
    so lines written back with ``errors="surrogateescape"`` are byte-identical.
    """

    def __init__(self, path: Path, *, encoding: str = "utf-8") -> None:
        """Wrap a path without touching the filesystem; use ``load`` to validate first."""
        self.path = path
        self.encoding = encoding

    @classmethod
    def load(cls, path: Path) -> Result[Self]:
        """Validate that path is an existing, readable regular file."""
        if not path.is_file():
            return Result.err(FILE_NOT_FOUND, context={"path": str(path)})
        if not os.access(path, os.R_OK):
            return Result.err(FILE_NOT_READABLE, context={"path": str(path)})
        return Result.ok(cls(path))

    @classmethod
    def load_or_exit(cls, path: Path) -> Self:
        """Validate path. Print error and exit(1) on failure."""
        result = cls.load(path)
        if result.is_ok():
            return result.unwrap()
        if result.error == FILE_NOT_READABLE:
            fatal(f"File '{path}' is not readable. Check permissions.")
        fatal(f"File '{path}' not found.")

    def __iter__(self) -> Iterator[str]:
        """Open the file and yield its lines one at a time."""
        count = 0
        try:
            with self.path.open(encoding=self.encoding, errors="surrogateescape", newline="\n") as f:
                logger.debug("reading %s", self.path)
                for line in iter_lines(f):
                    count += 1
                    yield line
        except OSError as e:
            raise InputAccessError(f"Can't read file '{self.path}': {e.strerror or e}") from e
        logger.debug("read %d lines from %s", count, self.path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"
