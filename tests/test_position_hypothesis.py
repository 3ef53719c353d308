"""Hypothesis-based property tests for the position utilities.

Checks the rescanning utilities against plain string operations, and
pins down where they deliberately differ from LinePosCursor: the rescans
treat every CR and LF as its own line break, the tracking cursor collapses
CRLF and LFCR pairs.
"""

import re

from hypothesis import assume, given
from hypothesis import strategies as st

from linepos import (
    LinePosCursor,
    SourceCursor,
    get_column,
    get_current_line,
    get_line,
    get_line_end,
    get_line_start,
)

# ============================================================================
# STRATEGIES
# ============================================================================

line_text = st.text(alphabet="ab \t\r\n", max_size=60)
flat_text = st.text(alphabet="abc ", max_size=60)


@st.composite
def text_and_position(draw, text_strategy=line_text):
    """Generate (text, pos) with 0 <= pos <= len(text)."""
    text = draw(text_strategy)
    pos = draw(st.integers(min_value=0, max_value=len(text)))
    return text, pos


def _line_start_index(text: str, pos: int) -> int:
    return max(text.rfind("\r", 0, pos), text.rfind("\n", 0, pos)) + 1


# ============================================================================
# GET_LINE
# ============================================================================


class TestGetLineProperties:
    """Property tests for get_line."""

    @given(text_and_position())
    def test_plain_cursor_always_unknown(self, case):
        """PROPERTY: untracked cursors never have a known line."""
        text, pos = case

        assert get_line(SourceCursor(text, pos)) is None


# ============================================================================
# GET_LINE_START / GET_LINE_END
# ============================================================================


class TestLineBoundaryProperties:
    """Property tests for get_line_start and get_line_end."""

    @given(text_and_position(flat_text))
    def test_no_newlines_returns_lower_bound(self, case):
        """PROPERTY: without line breaks the start is the lower bound."""
        text, pos = case
        lower = SourceCursor(text, 0)

        assert get_line_start(lower, SourceCursor(text, pos)) == lower

    @given(text_and_position())
    def test_line_start_after_last_break(self, case):
        """PROPERTY: line start is one past the last CR or LF before pos."""
        text, pos = case

        start = get_line_start(SourceCursor(text, 0), SourceCursor(text, pos))

        assert start.pos == _line_start_index(text, pos)

    @given(text_and_position())
    def test_line_end_at_first_break(self, case):
        """PROPERTY: line end is the first CR or LF at or after pos."""
        text, pos = case
        match = re.compile(r"[\r\n]").search(text, pos)

        end = get_line_end(SourceCursor(text, pos), SourceCursor(text, len(text)))

        assert end.pos == (match.start() if match else len(text))

    @given(text_and_position())
    def test_bounds_are_ordered(self, case):
        """INVARIANT: lower_bound <= line start <= pos <= line end <= upper_bound."""
        text, pos = case
        lower, upper = SourceCursor(text, 0), SourceCursor(text, len(text))
        current = SourceCursor(text, pos)

        start = get_line_start(lower, current)
        end = get_line_end(current, upper)

        assert 0 <= start - lower <= current - lower
        assert 0 <= end - current <= upper - current


# ============================================================================
# GET_CURRENT_LINE
# ============================================================================


class TestCurrentLineProperties:
    """Round trip between the rescans and splitting the text."""

    @given(text_and_position())
    def test_matches_split_on_every_break(self, case):
        """PROPERTY: the current line equals the segment of the text split
        on every CR and every LF that contains pos."""
        text, pos = case
        assume(pos == len(text) or text[pos] not in "\r\n")
        segments = re.split(r"[\r\n]", text)
        index = len(re.findall(r"[\r\n]", text[:pos]))

        line = get_current_line(
            SourceCursor(text, 0), SourceCursor(text, pos), SourceCursor(text, len(text))
        )

        assert line.text() == segments[index]

    @given(text_and_position())
    def test_tracked_cursor_reproduces_same_range(self, case):
        """PROPERTY: the range does not depend on whether the cursors are
        tracked; only the line numbers differ."""
        text, pos = case
        assume(pos == len(text) or text[pos] not in "\r\n")

        tracked = [LinePosCursor(SourceCursor(text, 0))]
        for _ in range(len(text)):
            tracked.append(tracked[-1].advance())

        tracked_line = get_current_line(tracked[0], tracked[pos], tracked[-1])
        plain_line = get_current_line(
            SourceCursor(text, 0), SourceCursor(text, pos), SourceCursor(text, len(text))
        )

        assert tracked_line.text() == plain_line.text()
        assert tracked_line.first.pos == plain_line.first.pos

    @given(text_and_position(st.text(alphabet="ab\n", max_size=60)))
    def test_lf_only_line_numbers_agree(self, case):
        """PROPERTY: with LF-only text both policies number lines the same."""
        text, pos = case
        tracked = LinePosCursor(SourceCursor(text, 0))
        for _ in range(pos):
            tracked = tracked.advance()

        assert tracked.position() == 1 + len(re.findall(r"[\r\n]", text[:pos]))

    @given(st.lists(st.text(alphabet="ab", max_size=5), min_size=2, max_size=8))
    def test_crlf_policies_differ(self, parts):
        """PROPERTY: for CRLF-joined text the tracking cursor counts one
        break per CRLF, the rescans see two separators per CRLF."""
        assume(all(parts[1:-1]))
        text = "\r\n".join(parts)

        tracked = LinePosCursor(SourceCursor(text, 0))
        for _ in range(len(text)):
            tracked = tracked.advance()

        assert tracked.position() == len(parts)
        assert len(re.split(r"[\r\n]", text)) == 2 * len(parts) - 1


# ============================================================================
# GET_COLUMN
# ============================================================================


class TestColumnProperties:
    """Property tests for get_column."""

    @given(text_and_position())
    def test_tab_width_one_counts_units(self, case):
        """PROPERTY: with tab_width=1 the column is 1 + units since line start."""
        text, pos = case

        column = get_column(SourceCursor(text, 0), SourceCursor(text, pos), tab_width=1)

        assert column == 1 + pos - _line_start_index(text, pos)

    @given(text_and_position(), st.integers(min_value=1, max_value=8))
    def test_matches_expandtabs(self, case, tab_width):
        """PROPERTY: the column matches str.expandtabs on the line prefix."""
        text, pos = case
        prefix = text[_line_start_index(text, pos) : pos]

        column = get_column(SourceCursor(text, 0), SourceCursor(text, pos), tab_width)

        assert column == 1 + len(prefix.expandtabs(tab_width))

    @given(text_and_position(), st.integers(min_value=1, max_value=8))
    def test_column_never_below_one(self, case, tab_width):
        """INVARIANT: columns are 1-based."""
        text, pos = case

        assert get_column(SourceCursor(text, 0), SourceCursor(text, pos), tab_width) >= 1
