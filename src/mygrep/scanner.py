"""Line scanner: case-insensitive literal matching, invert, and line numbering.

The scanner is pure. It takes a ``SearchConfig`` and any iterable of line
contents (without terminators) and lazily yields formatted output lines::

    output, result = scan(SearchConfig(pattern="hello", show_line_numbers=True), lines)
    for line in output:
        print(line)
    exit_code = 0 if result.any_output else 1

Case folding is injectable. The default, ``ascii_lower``, only maps ``A-Z``;
pass ``str.lower`` or ``str.casefold`` for Unicode-aware folding.
"""

import string
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, SkipValidation

type Fold = Callable[[str], str]

_ASCII_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class SearchConfig(BaseModel):
    """What to search for and how to present selected lines."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # argv carries undecodable bytes as surrogate escapes, which str validation rejects
    pattern: SkipValidation[str]
    show_line_numbers: bool = False
    invert_match: bool = False


@dataclass(frozen=True, slots=True)
class LineRecord:
    """A single input line and its 1-based position."""

    number: int
    text: str


@dataclass(slots=True)
class ScanResult:
    """Accumulated outcome of a scan. Final once the output iterator is exhausted."""

    any_output: bool = False


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only; every other character is left as is."""
    return text.translate(_ASCII_LOWER_TABLE)


def case_insensitive_contains(haystack: str, needle: str, fold: Fold = ascii_lower) -> bool:
    """Check whether ``needle`` occurs in ``haystack`` after folding both. An empty needle always matches."""
    return fold(needle) in fold(haystack)


def select_lines(config: SearchConfig, lines: Iterable[str], *, fold: Fold = ascii_lower) -> Iterator[LineRecord]:
    """Yield the records chosen by the match/invert decision, numbered from 1 over all lines."""
    for number, text in enumerate(lines, start=1):
        is_match = case_insensitive_contains(text, config.pattern, fold)
        if is_match != config.invert_match:
            yield LineRecord(number=number, text=text)


def format_line(record: LineRecord, *, show_line_numbers: bool) -> str:
    """Render a selected record as an output line."""
    if show_line_numbers:
        return f"{record.number}:{record.text}"
    return record.text


def scan(config: SearchConfig, lines: Iterable[str], *, fold: Fold = ascii_lower) -> tuple[Iterator[str], ScanResult]:
    """Scan lines and return the lazy formatted output together with its result.

    Args:
        config: Pattern and presentation flags.
        lines: Line contents in input order, without line terminators.
        fold: Case-folding function applied to both the pattern and each line.

    Returns:
        An iterator over output lines in input order, and a ``ScanResult`` whose
        ``any_output`` is set as soon as the first line is emitted.

    """
    result = ScanResult()

    def _output() -> Iterator[str]:
        for record in select_lines(config, lines, fold=fold):
            result.any_output = True
            yield format_line(record, show_line_numbers=config.show_line_numbers)

    return _output(), result
