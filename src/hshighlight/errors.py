"""Exception classes for hshighlight.

Provides standardized exceptions for error handling throughout hshighlight.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hshighlight.location import Span


class HighlightError(Exception):
    """Base exception for all hshighlight errors.

    Subclass this for specific error categories.
    """

    pass


class LexerError(HighlightError):
    """The lexical engine could not tokenize the input.

    Tokenization is all-or-nothing: when this is raised no token from the
    same input is ever handed to the caller.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_name: str | None = None,
    ) -> None:
        """Initialize lexer error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Display column where error occurred (1-indexed)
            source_name: Name of the source unit (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_name = source_name

        # Build formatted message
        location = ""
        if source_name:
            location = f"{source_name}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class SpanError(HighlightError):
    """A span handed to the reconstruction engine breaks its preconditions.

    Spans must be well-formed, monotonic, and inside the source text. A
    correct lexer never triggers this.
    """

    def __init__(self, span: Span, message: str) -> None:
        """Initialize span error.

        Args:
            span: The offending span
            message: Which precondition was violated
        """
        self.span = span
        super().__init__(f"Span {span}: {message}")
