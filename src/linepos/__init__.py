"""linepos - line and column positions for forward cursors.

A lightweight line-tracking cursor adapter plus utilities that recover the
line start, the current line and the tab-expanded column from any pair of
cursors. Meant for lexers and parsers that report "line:column" locations
without storing column state at every position.

Public API:
    LinePosCursor - Cursor adapter tracking the current line in O(1)
    SourceCursor - Cursor over an in-memory str, bytes or sequence
    StreamCursor - Cursor over an iterable or stream of unknown length
    ForwardCursor - Protocol accepted by every utility
    LineRange - Half-open [first, last) cursor range
    get_line, get_line_start, get_line_end, get_current_line, get_column
    format_position, get_error_context - Error reporting helpers

Exceptions:
    LinePosError - Base exception class
    UnpositionedCursorError - Default LinePosCursor was used

Submodules:
    linepos.constants - Line break units and defaults
    linepos.diagnostics - Diagnostic codes and message templates
"""

from .constants import DEFAULT_TAB_WIDTH
from .cursor import ForwardCursor, SourceCursor, StreamCursor
from .diagnostics import LinePosError, UnpositionedCursorError
from .line_pos_cursor import LinePosCursor
from .position import (
    LineRange,
    format_position,
    get_column,
    get_current_line,
    get_error_context,
    get_line,
    get_line_end,
    get_line_start,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("linepos")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_TAB_WIDTH",
    "ForwardCursor",
    "LinePosCursor",
    "LinePosError",
    "LineRange",
    "SourceCursor",
    "StreamCursor",
    "UnpositionedCursorError",
    "__version__",
    "format_position",
    "get_column",
    "get_current_line",
    "get_error_context",
    "get_line",
    "get_line_end",
    "get_line_start",
]
