"""Source locations and spans in display-column coordinates.

Columns are display columns, not character offsets: a tab advances the
column to the next tab stop (multiples of 8, 1-indexed), every other
character advances it by one, and a newline resets it to 1 on the next line.
Both the lexer and the reconstruction engine use :func:`next_position` so
their coordinates always agree.

Thread Safety:
SourceLocation and Span are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

TAB_WIDTH = 8


def next_position(line: int, col: int, char: str) -> tuple[int, int]:
    """Return the (line, col) reached after consuming ``char`` at (line, col)."""
    if char == "\n":
        return line + 1, 1
    if char == "\t":
        return line, col + TAB_WIDTH - (col - 1) % TAB_WIDTH
    return line, col + 1


@dataclass(frozen=True, slots=True, order=True)
class SourceLocation:
    """A 1-indexed line/display-column position.

    Locations order lexicographically, line first.

    Examples:
        >>> SourceLocation(1, 9) < SourceLocation(2, 1)
        True
        >>> str(SourceLocation(3, 5))
        '3:5'

    """

    line: int
    col: int

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source region: ``end`` is the location just past the last character.

    Attributes:
        start: Location of the first character
        end: Location immediately after the last character

    """

    start: SourceLocation
    end: SourceLocation

    @classmethod
    def of(cls, start_line: int, start_col: int, end_line: int, end_col: int) -> Span:
        """Build a span from four raw coordinates."""
        return cls(SourceLocation(start_line, start_col), SourceLocation(end_line, end_col))

    @property
    def is_empty(self) -> bool:
        """True for zero-width spans."""
        return self.start == self.end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
