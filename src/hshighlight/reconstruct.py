"""Span reconstruction: turn line/column spans back into slices of the source.

The lexer reports where tokens are, as 2-D display-column spans. This module
walks the source text once, front to back, and cuts it into
``HighlightToken(category, text)`` pieces: one per span, plus one SPACE
token for every non-empty gap between the cursor and the next span.

Contract:
    The output is lazy, finite, forward-only and cannot be restarted.
    Concatenating the texts gives a prefix of the source that reaches the
    end of the last span. Text after the last span is never emitted: a
    trailing newline or comment-free whitespace at end of file is dropped.
    Callers that render the whole file must append ``source[len(joined):]``
    themselves (see hshighlight.highlighting).

Column rule:
    A cursor advancing toward (line, col) keeps consuming characters while
    the position reached *after* the character satisfies
    ``new_line < line or new_col <= col``. Line equality is not checked
    before comparing columns. A span that ends right before a newline
    therefore also takes the newline and the leading characters of the next
    line up to the span's end column. Downstream consumers rely on this
    exact slicing, so it stays as is.

Example:
    >>> from hshighlight.categories import TokenCategory as C
    >>> from hshighlight.location import Span
    >>> list(reconstruct("f  x", [(C.VARIABLE, Span.of(1, 1, 1, 2)),
    ...                           (C.VARIABLE, Span.of(1, 4, 1, 5))]))
    [(VARIABLE, 'f'), (SPACE, '  '), (VARIABLE, 'x')]

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from hshighlight.categories import HighlightToken, TokenCategory
from hshighlight.errors import SpanError
from hshighlight.location import SourceLocation, Span, next_position


@dataclass(frozen=True, slots=True)
class Cursor:
    """Traversal state: a display position plus an offset into the source.

    ``line``/``col`` is where the engine believes it is; ``pos`` is how much
    of ``source`` has been consumed. Cursors are values: :func:`advance`
    returns a new one and never mutates its argument.

    Attributes:
        line: Current line (1-indexed)
        col: Current display column (1-indexed)
        source: The full source text
        pos: Offset of the first unconsumed character

    """

    line: int
    col: int
    source: str
    pos: int = 0

    @classmethod
    def start(cls, source: str) -> Cursor:
        """Cursor at line 1, column 1 of ``source``."""
        return cls(1, 1, source, 0)

    @property
    def remaining(self) -> str:
        """Unconsumed text."""
        return self.source[self.pos :]

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.line, self.col)


def advance(cursor: Cursor, line: int, col: int) -> tuple[Cursor, str]:
    """Consume characters from ``cursor`` toward (line, col).

    Characters are taken one at a time while the position after each one
    satisfies ``new_line < line or new_col <= col``. The returned cursor is
    placed at (line, col) and its offset skips exactly the consumed chunk.

    Args:
        cursor: Cursor to advance (left untouched)
        line: Target line
        col: Target display column

    Returns:
        (new cursor, consumed text); the text is empty if nothing was consumed
    """
    source = cursor.source
    source_len = len(source)
    start = pos = cursor.pos
    cur_line = cursor.line
    cur_col = cursor.col

    while pos < source_len:
        next_line, next_col = next_position(cur_line, cur_col, source[pos])
        if not (next_line < line or next_col <= col):
            break
        cur_line, cur_col = next_line, next_col
        pos += 1

    return Cursor(line, col, source, pos), source[start:pos]


def _line_end_column(text: str) -> int:
    """Display column just past the last character of one line of text."""
    col = 1
    for char in text:
        _, col = next_position(1, col, char)
    return col


def _check_span(
    span: Span,
    previous_end: SourceLocation,
    lines: list[str],
    widths: dict[int, int],
) -> None:
    start, end = span.start, span.end
    if start.line < 1 or start.col < 1:
        raise SpanError(span, "locations are 1-indexed")
    if end < start:
        raise SpanError(span, "span ends before it starts")
    if start < previous_end:
        raise SpanError(span, f"span overlaps previous span ending at {previous_end}")
    if end.line > len(lines):
        raise SpanError(span, f"span ends past the last line ({len(lines)})")
    line_end = widths.get(start.line)
    if line_end is None:
        line_end = widths[start.line] = _line_end_column(lines[start.line - 1])
    if start.col > line_end:
        msg = f"span starts past the end of line {start.line} (column {line_end})"
        raise SpanError(span, msg)


def reconstruct(
    source: str,
    spans: Iterable[tuple[TokenCategory, Span]],
) -> Iterator[HighlightToken]:
    """Slice ``source`` along ``spans``, synthesizing SPACE tokens for gaps.

    Spans must be ordered, non-overlapping and inside ``source``; violations
    raise SpanError when the offending span is reached.

    Args:
        source: The text the spans were computed from
        spans: (category, span) pairs in source order

    Yields:
        HighlightToken for every gap and every span, in order
    """
    cursor = Cursor.start(source)
    lines = source.split("\n")
    widths: dict[int, int] = {}
    previous_end = SourceLocation(1, 1)

    for category, span in spans:
        _check_span(span, previous_end, lines, widths)
        previous_end = span.end
        start, end = span.start, span.end

        # A gap is consumed as one chunk, then the same span is examined again.
        while True:
            moved, gap = advance(cursor, start.line, start.col)
            if not gap:
                break
            cursor = moved
            yield HighlightToken(TokenCategory.SPACE, gap)

        cursor, chunk = advance(cursor, end.line, end.col)
        yield HighlightToken(category, chunk)
