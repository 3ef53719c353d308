"""Forward cursors over sequences of character units.

A cursor is an immutable position in a sequence: it can be dereferenced
(``current``), moved forward by one unit (``advance()``, which returns a NEW
cursor) and compared for equality. LinePosCursor and the position utilities
accept anything that satisfies the ForwardCursor protocol.

Two concrete cursors are provided:
    - SourceCursor: over an in-memory sequence (str, bytes, list of units)
    - StreamCursor: over an iterable or readable file-like object whose
      length is not known in advance; units are pulled lazily and kept in a
      buffer shared by every cursor derived from the same stream

Units:
    A str source yields 1-character strings, a bytes source yields ints.
    Nothing here decodes or groups multi-byte sequences.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Protocol, Self

from linepos.constants import DEFAULT_STREAM_CHUNK_SIZE
from linepos.diagnostics import ErrorTemplate

__all__ = ["ForwardCursor", "SourceCursor", "StreamCursor"]

logger = logging.getLogger(__name__)


class ForwardCursor[U](Protocol):
    """Minimal forward-traversal contract.

    Implementations must be immutable values: ``advance()`` returns a new
    cursor and leaves the receiver untouched, so holding on to a cursor is
    the same as copying it. Equality must identify positions in the same
    sequence.
    """

    @property
    def current(self) -> U:
        """Unit at this position."""
        ...

    def advance(self) -> Self:
        """Return the cursor one unit further."""
        ...


@dataclass(frozen=True, slots=True, eq=False)
class SourceCursor[U]:
    """Immutable cursor into an in-memory sequence.

    Example:
        >>> cursor = SourceCursor("hi\\n", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'i'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> SourceCursor(b"hi", 1).current  # bytes yield code units
        105
        >>> SourceCursor("hi", 2).current
        Traceback (most recent call last):
        ...
        EOFError: Unexpected EOF at position 2
    """

    source: Sequence[U]
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> U:
        """Get current unit.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> U | None:
        """Unit at position + offset, or None if beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "SourceCursor[U]":
        """Return new cursor advanced by count positions, clamped at EOF."""
        new_pos = min(self.pos + count, len(self.source))
        return SourceCursor(self.source, new_pos)

    def slice_to(self, end: "int | SourceCursor[U]") -> Sequence[U]:
        """Units from this position up to end (exclusive).

        Example:
            >>> start = SourceCursor("hello world", 0)
            >>> start.slice_to(start.advance(5))
            'hello'
        """
        end_pos = end.pos if isinstance(end, SourceCursor) else end
        return self.source[self.pos : end_pos]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SourceCursor):
            return NotImplemented
        # Identity first: comparing long sources element-wise on every step
        # of a scan would make the utilities quadratic.
        return self.pos == other.pos and (
            self.source is other.source or self.source == other.source
        )

    def __hash__(self) -> int:
        return hash(self.pos)

    def __sub__(self, other: "SourceCursor[U]") -> int:
        """Distance in units from other to self."""
        if not isinstance(other, SourceCursor):
            return NotImplemented
        return self.pos - other.pos


class _StreamBuffer:
    """Units read so far from one stream, shared by all its cursors."""

    __slots__ = ("_chunk_size", "_iterator", "_read", "exhausted", "units")

    def __init__(self, data: object, chunk_size: int) -> None:
        read = getattr(data, "read", None)
        if callable(read):
            self._read = read
            self._iterator = None
        elif isinstance(data, Iterable):
            self._read = None
            self._iterator = iter(data)
        else:
            msg = f"Expected an iterable or a readable stream, got {type(data).__name__}"
            raise TypeError(msg)
        self._chunk_size = chunk_size
        self.units: list[object] = []
        self.exhausted = False

    def fill_to(self, index: int) -> bool:
        """Read until units[index] exists or input ends. Return availability."""
        while len(self.units) <= index and not self.exhausted:
            if self._read is not None:
                chunk = self._read(self._chunk_size)
            else:
                chunk = list(islice(self._iterator, self._chunk_size))  # type: ignore[arg-type]
            if chunk:
                self.units.extend(chunk)
            else:
                self.exhausted = True
                logger.debug("Stream exhausted after %d units", len(self.units))
        return index < len(self.units)


@dataclass(frozen=True, slots=True, eq=False)
class StreamCursor[U]:
    """Immutable cursor over input of unknown length.

    Create the first cursor with StreamCursor.over(); every cursor derived
    from it shares the same buffer, so an earlier cursor can be scanned
    again after later ones have moved on. The buffer is never trimmed.

    Example:
        >>> start = StreamCursor.over(iter("ab\\ncd"))
        >>> start.advance().advance().current
        '\\n'
        >>> start.current  # Still readable after the stream moved on
        'a'

    Thread Safety:
        Not thread-safe. The shared buffer is filled without locking, so
        read one stream from one thread.
    """

    buffer: _StreamBuffer
    pos: int = 0

    @classmethod
    def over(
        cls, data: object, chunk_size: int = DEFAULT_STREAM_CHUNK_SIZE
    ) -> "StreamCursor[U]":
        """Cursor at the start of data.

        Args:
            data: Any iterable of units, or an object with a read(size)
                method returning str or bytes (an empty result means EOF)
            chunk_size: Units pulled per read

        Raises:
            ValueError: If chunk_size < 1
            TypeError: If data is neither iterable nor readable
        """
        if chunk_size < 1:
            msg = f"Chunk size must be >= 1, got {chunk_size}"
            raise ValueError(msg)
        return cls(_StreamBuffer(data, chunk_size), 0)

    @property
    def is_eof(self) -> bool:
        """True if the stream has no unit at this position (may read input)."""
        return not self.buffer.fill_to(self.pos)

    @property
    def current(self) -> U:
        """Get current unit.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.buffer.units[self.pos]  # type: ignore[return-value]

    def advance(self, count: int = 1) -> "StreamCursor[U]":
        """Return new cursor advanced by count positions, clamped at EOF."""
        self.buffer.fill_to(self.pos + count - 1)
        new_pos = min(self.pos + count, len(self.buffer.units))
        return StreamCursor(self.buffer, new_pos)

    def slice_to(self, end: "int | StreamCursor[U]") -> list[U]:
        """Units from this position up to end (exclusive)."""
        end_pos = end.pos if isinstance(end, StreamCursor) else end
        self.buffer.fill_to(end_pos - 1)
        return self.buffer.units[self.pos : end_pos]  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StreamCursor):
            return NotImplemented
        return self.buffer is other.buffer and self.pos == other.pos

    def __hash__(self) -> int:
        return hash((id(self.buffer), self.pos))

    def __sub__(self, other: "StreamCursor[U]") -> int:
        """Distance in units from other to self."""
        if not isinstance(other, StreamCursor):
            return NotImplemented
        return self.pos - other.pos
