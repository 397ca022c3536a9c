"""Line comment, block comment and Haddock comment scanner mixin."""

from __future__ import annotations

from hshighlight.config import Extension, LexerConfig
from hshighlight.errors import LexerError
from hshighlight.lexer.charsets import is_symbol_char
from hshighlight.location import SourceLocation
from hshighlight.tokens import RawToken, RawTokenKind

# Haddock markers following "-- " or "{- "
DOC_MARKERS: dict[str, RawTokenKind] = {
    "|": RawTokenKind.DOC_COMMENT_NEXT,
    "^": RawTokenKind.DOC_COMMENT_PREV,
    "$": RawTokenKind.DOC_COMMENT_NAMED,
    "*": RawTokenKind.DOC_SECTION,
}

# Doc comments that absorb the plain line comments directly below them
CONTINUED_DOC_KINDS = frozenset(
    {
        RawTokenKind.DOC_COMMENT_NEXT,
        RawTokenKind.DOC_COMMENT_PREV,
        RawTokenKind.DOC_COMMENT_NAMED,
    }
)


class CommentScannerMixin:
    """Mixin providing comment scanning.

    A line comment is two or more dashes not followed by a symbol character
    ("-->" is an operator). Block comments nest. With Haddock enabled,
    "-- |", "-- ^", "-- $name" and "-- *" (and their "{-" forms) become doc
    comments, and a multi-line doc comment spans every plain line comment
    that directly follows it.

    """

    _source: str
    _source_len: int
    _pos: int
    _config: LexerConfig

    def _advance(self) -> str:
        """Advance one character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_to(self, end: int) -> None:
        """Advance to offset. Implemented by Lexer."""
        raise NotImplementedError

    def _line_end(self, pos: int) -> int:
        """Find end of line. Implemented by Lexer."""
        raise NotImplementedError

    def _token_start(self) -> SourceLocation:
        """Start of current lexeme. Implemented by Lexer."""
        raise NotImplementedError

    def _emit(self, kind: RawTokenKind) -> RawToken:
        """Create token for current lexeme. Implemented by Lexer."""
        raise NotImplementedError

    def _error(self, message: str, location: SourceLocation | None = None) -> LexerError:
        """Build a LexerError. Implemented by Lexer."""
        raise NotImplementedError

    def _at_line_comment(self, pos: int) -> bool:
        """Check if a line comment starts at pos."""
        source = self._source
        source_len = self._source_len
        end = pos
        while end < source_len and source[end] == "-":
            end += 1
        if end - pos < 2:
            return False
        return end >= source_len or not is_symbol_char(source[end])

    def _doc_kind_at(self, pos: int) -> RawTokenKind | None:
        """Doc comment kind for a marker at pos (after optional blanks), if any."""
        if not self._config.enabled(Extension.HADDOCK):
            return None
        source = self._source
        source_len = self._source_len
        while pos < source_len and source[pos] in " \t":
            pos += 1
        if pos >= source_len:
            return None
        return DOC_MARKERS.get(source[pos])

    def _scan_line_comment(self) -> RawToken:
        """Scan a line comment up to (not including) the newline.

        Returns:
            LINE_COMMENT or one of the DOC_* kinds
        """
        kind = RawTokenKind.LINE_COMMENT
        pos = self._pos
        # "--- |" is a plain comment
        if self._source[pos + 2 : pos + 3] != "-":
            kind = self._doc_kind_at(pos + 2) or kind

        self._advance_to(self._line_end(pos))
        if kind in CONTINUED_DOC_KINDS:
            while (next_start := self._doc_continuation()) is not None:
                self._advance_to(self._line_end(next_start))
        return self._emit(kind)

    def _doc_continuation(self) -> int | None:
        """Start of a plain line comment on the next line, if there is one."""
        source = self._source
        source_len = self._source_len
        pos = self._pos
        if pos >= source_len or source[pos] != "\n":
            return None
        pos += 1
        while pos < source_len and source[pos] in " \t":
            pos += 1
        if not self._at_line_comment(pos):
            return None
        if source[pos + 2 : pos + 3] != "-" and self._doc_kind_at(pos + 2) is not None:
            return None
        return pos

    def _scan_block_comment(self) -> RawToken:
        """Scan a (nested) block comment starting with "{-".

        Raises:
            LexerError: If the comment is not closed before end of input
        """
        start = self._token_start()
        kind = self._doc_kind_at(self._pos + 2) or RawTokenKind.BLOCK_COMMENT
        self._advance_to(self._pos + 2)
        self._skip_nested_comment(start)
        return self._emit(kind)

    def _skip_nested_comment(self, start: SourceLocation) -> None:
        """Consume through the "-}" that closes the comment opened at start."""
        source = self._source
        depth = 1
        while depth:
            pos = self._pos
            if pos >= self._source_len:
                raise self._error("unterminated `{-'", start)
            if source.startswith("{-", pos):
                self._advance_to(pos + 2)
                depth += 1
            elif source.startswith("-}", pos):
                self._advance_to(pos + 2)
                depth -= 1
            else:
                self._advance()
