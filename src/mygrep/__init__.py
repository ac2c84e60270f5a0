"""Case-insensitive literal line search."""

from .errors import InputAccessError as InputAccessError
from .errors import MygrepError as MygrepError
from .errors import UsageError as UsageError
from .line_source import FileLineSource as FileLineSource
from .line_source import iter_lines as iter_lines
from .output import print_plain as print_plain
from .scanner import LineRecord as LineRecord
from .scanner import ScanResult as ScanResult
from .scanner import SearchConfig as SearchConfig
from .scanner import ascii_lower as ascii_lower
from .scanner import case_insensitive_contains as case_insensitive_contains
from .scanner import format_line as format_line
from .scanner import scan as scan
from .scanner import select_lines as select_lines
from .utils import fatal as fatal
