"""Shared constants for linepos.

Constants are grouped by domain:
- Line break units: the character units treated as CR, LF, and tab
- Tracking: sentinel values used by LinePosCursor
- Columns: tab stop configuration
- Streams: buffering for StreamCursor

Units are matched both as ``str`` characters and as integer code units, so
the same constants work for ``str``, ``bytes`` and sequences of code points.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Line break units
    "CARRIAGE_RETURNS",
    "LINE_FEEDS",
    "NEWLINES",
    "TABS",
    # Tracking
    "NO_PREVIOUS_UNIT",
    # Columns
    "DEFAULT_TAB_WIDTH",
    # Streams
    "DEFAULT_STREAM_CHUNK_SIZE",
]

# ============================================================================
# LINE BREAK UNITS
# ============================================================================

# CR as a str character and as a code unit (bytes iterate as ints).
CARRIAGE_RETURNS: frozenset[object] = frozenset(("\r", 0x0D))

# LF as a str character and as a code unit.
LINE_FEEDS: frozenset[object] = frozenset(("\n", 0x0A))

# Every unit that starts a new line for the rescanning utilities.
NEWLINES: frozenset[object] = CARRIAGE_RETURNS | LINE_FEEDS

# Horizontal tab as a str character and as a code unit.
TABS: frozenset[object] = frozenset(("\t", 0x09))

# ============================================================================
# TRACKING
# ============================================================================

# Initial "previous unit" of a LinePosCursor. Zero is neither CR nor LF in
# either representation, so the first unit read is never treated as the
# second half of a CRLF or LFCR pair.
NO_PREVIOUS_UNIT: int = 0

# ============================================================================
# COLUMNS
# ============================================================================

# Tab stops every 4 columns unless the caller asks otherwise.
DEFAULT_TAB_WIDTH: int = 4

# ============================================================================
# STREAMS
# ============================================================================

# Units requested per read() from a file-like object wrapped by StreamCursor.
DEFAULT_STREAM_CHUNK_SIZE: int = 4096
