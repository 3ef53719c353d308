"""Position utilities for any forward cursor.

Recover line numbers, line boundaries and columns for error reporting:
    - get_line: O(1) line number from a LinePosCursor (None otherwise)
    - get_line_start / get_line_end: rescan to the edges of the current line
    - get_current_line: the current line as a half-open LineRange
    - get_column: 1-based column with tab stop expansion

The rescans treat every CR and every LF as a separate line start; they do
NOT collapse CRLF the way LinePosCursor does. Positions sitting ON a CR or
LF unit give results that do not match the visually containing line.

Bounds are never checked: callers pass lower_bound <= current <=
upper_bound from the same sequence.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from linepos.constants import DEFAULT_TAB_WIDTH, NEWLINES, TABS
from linepos.cursor import ForwardCursor
from linepos.diagnostics import ErrorTemplate
from linepos.line_pos_cursor import LinePosCursor

__all__ = [
    "LineRange",
    "format_position",
    "get_column",
    "get_current_line",
    "get_error_context",
    "get_line",
    "get_line_end",
    "get_line_start",
]

logger = logging.getLogger(__name__)


def _unit_text(unit: object) -> str:
    """Render a unit as text (bytes iterate as ints)."""
    if isinstance(unit, str):
        return unit
    if isinstance(unit, int):
        return chr(unit)
    return str(unit)


@dataclass(frozen=True, slots=True)
class LineRange[C: ForwardCursor[Any]]:
    """Half-open range [first, last) of cursor positions.

    Example:
        >>> from linepos.cursor import SourceCursor
        >>> source = "abc\\ndef"
        >>> line = LineRange(SourceCursor(source, 4), SourceCursor(source, 7))
        >>> line.text()
        'def'
    """

    first: C
    last: C

    def __iter__(self) -> Iterator[Any]:
        i = self.first
        while i != self.last:
            yield i.current
            i = i.advance()

    @property
    def is_empty(self) -> bool:
        return self.first == self.last

    def units(self) -> tuple[Any, ...]:
        return tuple(self)

    def text(self) -> str:
        """Range contents as a string; integer units become chr(unit)."""
        return "".join(_unit_text(unit) for unit in self)


def get_line(cursor: object) -> int | None:
    """Get the line position.

    Args:
        cursor: Any cursor

    Returns:
        The 1-based line of a LinePosCursor, or None (unknown line) for any
        other cursor

    Example:
        >>> from linepos.cursor import SourceCursor
        >>> get_line(LinePosCursor(SourceCursor("x", 0)))
        1
        >>> get_line(SourceCursor("x", 0)) is None
        True
    """
    if isinstance(cursor, LinePosCursor):
        return cursor.position()
    logger.debug("Line unknown for untracked cursor %s", type(cursor).__name__)
    return None


def get_line_start[C: ForwardCursor[Any]](lower_bound: C, current: C) -> C:
    """Get a cursor to the beginning of the line containing current.

    Scans [lower_bound, current); the position after the last CR or LF
    found is the line start.

    Args:
        lower_bound: Earliest position to rescan from
        current: Queried position

    Returns:
        Cursor at the line start, or lower_bound if no line break precedes
        current within the bounds

    Example:
        >>> from linepos.cursor import SourceCursor
        >>> source = "ab\\ncd"
        >>> get_line_start(SourceCursor(source, 0), SourceCursor(source, 4)).pos
        3
    """
    latest = lower_bound
    prev_was_newline = False
    i = lower_bound
    while i != current:
        if prev_was_newline:
            latest = i
        prev_was_newline = i.current in NEWLINES
        i = i.advance()
    if prev_was_newline:
        latest = current
    return latest


def get_line_end[C: ForwardCursor[Any]](current: C, upper_bound: C) -> C:
    """Get a cursor to the first CR or LF at or after current.

    Returns:
        Cursor at the line break, or upper_bound if none is found
    """
    i = current
    while i != upper_bound:
        if i.current in NEWLINES:
            return i
        i = i.advance()
    return upper_bound


def get_current_line[C: ForwardCursor[Any]](
    lower_bound: C, current: C, upper_bound: C
) -> LineRange[C]:
    """Get the range holding the line that contains current.

    Args:
        lower_bound: Earliest position to rescan from
        current: Queried position (must not be on a CR or LF unit)
        upper_bound: Latest position to rescan to

    Returns:
        LineRange from the line start to the line end (exclusive of the
        line break)

    Example:
        >>> from linepos.cursor import SourceCursor
        >>> source = "abc\\ndef\\nghi"
        >>> start, end = SourceCursor(source, 0), SourceCursor(source, len(source))
        >>> get_current_line(start, SourceCursor(source, 5), end).text()
        'def'
    """
    first = get_line_start(lower_bound, current)
    last = get_line_end(current, upper_bound)
    return LineRange(first, last)


def get_column[C: ForwardCursor[Any]](
    lower_bound: C, current: C, tab_width: int = DEFAULT_TAB_WIDTH
) -> int:
    """Get the current column (1-based).

    Each unit advances the column by one; a tab advances it to the next tab
    stop (columns 1, 1 + tab_width, 1 + 2 * tab_width, ...).

    Args:
        lower_bound: Earliest position to rescan from
        current: Queried position
        tab_width: Distance between tab stops

    Returns:
        1-based column of current

    Raises:
        ValueError: If tab_width < 1

    Example:
        >>> from linepos.cursor import SourceCursor
        >>> source = "ab\\tc"
        >>> get_column(SourceCursor(source, 0), SourceCursor(source, 3))
        5
    """
    if tab_width < 1:
        raise ValueError(ErrorTemplate.invalid_tab_width(tab_width).message)

    column = 1
    i = get_line_start(lower_bound, current)
    while i != current:
        if i.current in TABS:
            column += tab_width - (column - 1) % tab_width
        else:
            column += 1
        i = i.advance()
    return column


def format_position[C: ForwardCursor[Any]](
    lower_bound: C, current: C, tab_width: int = DEFAULT_TAB_WIDTH
) -> str:
    """Format position as human-readable line:column string.

    The line comes from get_line(), so it is only known for a LinePosCursor;
    an unknown line is rendered as "?".

    Example:
        >>> from linepos.cursor import SourceCursor
        >>> source = "ab\\ncd"
        >>> format_position(SourceCursor(source, 0), SourceCursor(source, 4))
        '?:2'
    """
    line = get_line(current)
    column = get_column(lower_bound, current, tab_width)
    return f"{'?' if line is None else line}:{column}"


def get_error_context[C: ForwardCursor[Any]](
    lower_bound: C,
    current: C,
    upper_bound: C,
    marker: str = "^",
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> str:
    """Get the current line with a marker under the current column.

    Tabs in the line are expanded with the same tab stops get_column uses,
    so the marker lines up with the reported column.

    Args:
        lower_bound: Earliest position to rescan from
        current: Position to mark
        upper_bound: Latest position to rescan to
        marker: String placed under the current column
        tab_width: Distance between tab stops

    Returns:
        Two lines: the expanded line text, then the marker line

    Example:
        >>> from linepos.cursor import SourceCursor
        >>> source = "x = 1\\ny = ?\\nz = 3"
        >>> start, end = SourceCursor(source, 0), SourceCursor(source, len(source))
        >>> print(get_error_context(start, SourceCursor(source, 10), end))
        y = ?
            ^
    """
    column = get_column(lower_bound, current, tab_width)
    line_range = get_current_line(lower_bound, current, upper_bound)

    expanded: list[str] = []
    width = 0
    for unit in line_range:
        if unit in TABS:
            step = tab_width - width % tab_width
            expanded.append(" " * step)
            width += step
        else:
            expanded.append(_unit_text(unit))
            width += 1

    logger.debug("Rendering error context at column %d", column)
    return "".join(expanded) + "\n" + " " * (column - 1) + marker
