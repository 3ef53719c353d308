"""Lightweight line-tracking cursor adapter.

LinePosCursor wraps any ForwardCursor and stores only the current line
number, nothing else. It does not store the column and never needs an end
cursor: the column can be computed on demand with
linepos.position.get_column().

Line Ending Support:
    - LF (\\n), CR (\\r), CRLF (\\r\\n) and LFCR (\\n\\r) each count as ONE
      line break
    - LF+LF and CR+CR count as TWO line breaks (the second is a blank line)
    - Only one unit of history is kept, so CRLF+CRLF counts as ONE break:
      the LF+CR in the middle reads as a pair

    The rescanning utilities in linepos.position treat every CR and every
    LF as its own line start instead. Both behaviours are intentional:
    tracking is incremental and cheap, rescans are exact per unit.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Any

from linepos.constants import CARRIAGE_RETURNS, LINE_FEEDS, NO_PREVIOUS_UNIT
from linepos.cursor import ForwardCursor
from linepos.diagnostics import ErrorTemplate, UnpositionedCursorError

__all__ = ["LinePosCursor"]


@dataclass(frozen=True, slots=True, eq=False)
class LinePosCursor[C: ForwardCursor[Any]]:
    """Cursor adapter that counts the lines it has moved across.

    Dereferencing, equality, hashing, distance and any other attribute are
    delegated to the wrapped cursor; only advance() is intercepted.

    Attributes:
        base: The wrapped cursor (None for the unpositioned placeholder)
        line: Current line, 1-based
        prev: Unit read by the previous advance()

    Example:
        >>> from linepos.cursor import SourceCursor
        >>> cursor = LinePosCursor(SourceCursor("a\\r\\nb", 0))
        >>> for _ in range(3):
        ...     cursor = cursor.advance()
        >>> cursor.current, cursor.position()
        ('b', 2)
    """

    base: C | None = None
    line: int = 1
    prev: object = NO_PREVIOUS_UNIT

    def _require_base(self, operation: str) -> C:
        if self.base is None:
            raise UnpositionedCursorError(ErrorTemplate.unpositioned_cursor(operation))
        return self.base

    @property
    def current(self) -> Any:
        """Unit at the wrapped cursor's position.

        Raises:
            UnpositionedCursorError: If the cursor has no base
        """
        return self._require_base("dereference").current

    def advance(self) -> "LinePosCursor[C]":
        """Return the cursor one unit further, counting a crossed line break.

        The unit being left behind is compared with the one left behind by
        the previous advance; a CR or LF starts a new line unless it
        completes a CRLF or LFCR pair.

        Raises:
            UnpositionedCursorError: If the cursor has no base
        """
        base = self._require_base("advance")
        ref = base.current
        line = self.line
        if (self.prev not in LINE_FEEDS and ref in CARRIAGE_RETURNS) or (
            self.prev not in CARRIAGE_RETURNS and ref in LINE_FEEDS
        ):
            line += 1
        return LinePosCursor(base.advance(), line, ref)

    def position(self) -> int:
        """Current line number (1-based). O(1)."""
        return self.line

    def __getattr__(self, name: str) -> Any:
        # Only reached for names the adapter does not define itself.
        if name.startswith("_") or name in ("base", "line", "prev"):
            raise AttributeError(name)
        base = self.base
        if base is None:
            msg = f"Unpositioned LinePosCursor has no attribute '{name}'"
            raise AttributeError(msg)
        return getattr(base, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinePosCursor):
            return NotImplemented
        return bool(self.base == other.base)

    def __hash__(self) -> int:
        return hash(self.base)

    def __sub__(self, other: "LinePosCursor[C]") -> int:
        """Distance in units, delegated to the wrapped cursors."""
        if not isinstance(other, LinePosCursor):
            return NotImplemented
        return self.base - other.base  # type: ignore[operator]
