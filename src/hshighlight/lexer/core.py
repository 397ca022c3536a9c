"""Single-pass Haskell lexer with display-column location tracking.

Scans the source front to back exactly once. Each lexeme is recognized by
looking at its first one or two characters and dispatching to a scanner
mixin; scanners only ever move the position forward.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from hshighlight.config import Extension, LexerConfig, LexerWarning, get_lexer_config
from hshighlight.errors import LexerError
from hshighlight.lexer.charsets import (
    DECIMAL_DIGITS,
    OPENING_CHARS,
    SPECIAL_CHARS,
    is_control_char,
    is_ident_char,
    is_ident_start,
    is_symbol_char,
    is_whitespace,
)
from hshighlight.lexer.layout import LayoutMixin
from hshighlight.lexer.scanners import (
    CommentScannerMixin,
    IdentifierScannerMixin,
    LiteralScannerMixin,
    NumericScannerMixin,
    PragmaScannerMixin,
    SymbolScannerMixin,
)
from hshighlight.location import SourceLocation, Span, next_position
from hshighlight.tokens import RawToken, RawTokenKind
from hshighlight.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Scanners (one lexeme family each)
    CommentScannerMixin,
    PragmaScannerMixin,
    IdentifierScannerMixin,
    NumericScannerMixin,
    LiteralScannerMixin,
    SymbolScannerMixin,
    # Virtual braces
    LayoutMixin,
):
    """Haskell lexer producing RawTokens with display-column spans.

    Usage:
        >>> lexer = Lexer("f = 1")
        >>> for token in lexer.tokenize():
        ...     print(token)
        RawToken(VARID, 'f', 1:1)
        RawToken(EQUAL, '=', 1:3)
        RawToken(INTEGER, '1', 1:5)
        RawToken(EOF, '', 1:6)

    Raises:
        LexerError: from tokenize() when the source cannot be tokenized. Tokens
            already yielded for the same source must be discarded.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_line",
        "_col",
        "_config",
        # Start of the lexeme being scanned
        "_start_pos",
        "_start_line",
        "_start_col",
        # Pragma state
        "_in_pragma",
        "_pragma_start",
        # Layout state
        "_layout_stack",  # (column, opener) pairs; column 0 = explicit braces
        "_layout_pending",  # Layout keyword waiting for its block
        "_last_line",  # End line of the last layout-relevant token
        # Tab diagnostics
        "_tab_count",
        "_first_tab",
    )

    def __init__(self, source: str, config: LexerConfig | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Haskell source text
            config: Lexer configuration (defaults to the active context config)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._line = 1
        self._col = 1
        self._config = config if config is not None else get_lexer_config()

        self._start_pos = 0
        self._start_line = 1
        self._start_col = 1

        self._in_pragma = False
        self._pragma_start: SourceLocation | None = None

        self._layout_stack: list[tuple[int, RawTokenKind]] = []
        self._layout_pending: RawTokenKind | None = None
        self._last_line = 0

        self._tab_count = 0
        self._first_tab: SourceLocation | None = None

    def tokenize(self) -> Iterator[RawToken]:
        """Tokenize source into a token stream terminated by EOF.

        Yields:
            RawToken objects one at a time

        Raises:
            LexerError: If the source contains a lexical error

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while True:
            self._skip_whitespace()
            if self._pos >= source_len:
                break
            token = self._scan_token()
            yield from self._apply_layout(token)

        if self._in_pragma:
            raise self._error("unterminated pragma", self._pragma_start)

        yield from self._close_layout()
        self._report_tabs()

        here = SourceLocation(self._line, self._col)
        yield RawToken(RawTokenKind.EOF, Span(here, here))

    def _scan_token(self) -> RawToken:
        """Scan one lexeme starting at the current (non-whitespace) position."""
        char = self._source[self._pos]
        nxt = self._peek(1)
        self._begin()

        if char == "{" and nxt == "-":
            if self._peek(2) == "#":
                return self._scan_pragma()
            return self._scan_block_comment()
        if char == "-" and nxt == "-" and self._at_line_comment(self._pos):
            return self._scan_line_comment()
        if self._in_pragma and self._source.startswith("#-}", self._pos):
            return self._scan_pragma_close()
        if char in SPECIAL_CHARS:
            return self._scan_special(char)
        if char == '"':
            return self._scan_string()
        if char == "'":
            return self._scan_quote()
        if char in DECIMAL_DIGITS:
            return self._scan_number()
        if is_ident_start(char):
            return self._scan_name()
        if char == "-" and nxt in DECIMAL_DIGITS and self._negative_literal_allowed():
            self._advance()
            return self._scan_number()
        if is_symbol_char(char):
            return self._scan_symbol()
        if is_control_char(char):
            raise self._error(f"lexical error at character {char!r}")

        self._advance()
        return self._emit(RawTokenKind.UNKNOWN)

    def _negative_literal_allowed(self) -> bool:
        if not self._config.enabled(Extension.NEGATIVE_LITERALS):
            return False
        if self._pos == 0:
            return True
        prev = self._source[self._pos - 1]
        return is_whitespace(prev) or prev in OPENING_CHARS

    # =========================================================================
    # Character navigation
    # =========================================================================

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character without advancing.

        Returns:
            The character at pos + offset, or empty string past the end.
        """
        index = self._pos + offset
        if index >= self._source_len:
            return ""
        return self._source[index]

    def _advance(self) -> str:
        """Advance position by one character, updating line and display column.

        Returns:
            The consumed character.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        if char == "\t":
            self._tab_count += 1
            if self._first_tab is None:
                self._first_tab = SourceLocation(self._line, self._col)
        self._pos += 1
        self._line, self._col = next_position(self._line, self._col, char)
        return char

    def _advance_to(self, end: int) -> None:
        """Advance until position reaches end."""
        while self._pos < end:
            self._advance()

    def _skip_whitespace(self) -> None:
        source = self._source
        source_len = self._source_len
        while self._pos < source_len and is_whitespace(source[self._pos]):
            self._advance()

    def _word_end(self, pos: int) -> int:
        """Offset just past the name characters starting at pos."""
        source = self._source
        source_len = self._source_len
        while pos < source_len and is_ident_char(source[pos]):
            pos += 1
        return pos

    def _symbol_end(self, pos: int) -> int:
        """Offset just past the symbol characters starting at pos."""
        source = self._source
        source_len = self._source_len
        while pos < source_len and is_symbol_char(source[pos]):
            pos += 1
        return pos

    def _line_end(self, pos: int) -> int:
        """Offset of the newline ending the line containing pos, or EOF."""
        idx = self._source.find("\n", pos)
        return idx if idx != -1 else self._source_len

    # =========================================================================
    # Token construction
    # =========================================================================

    def _begin(self) -> None:
        """Mark the current position as the start of a lexeme."""
        self._start_pos = self._pos
        self._start_line = self._line
        self._start_col = self._col

    def _token_start(self) -> SourceLocation:
        return SourceLocation(self._start_line, self._start_col)

    def _emit(self, kind: RawTokenKind) -> RawToken:
        """Create a RawToken from the marked start to the current position."""
        return RawToken(
            kind,
            Span(
                SourceLocation(self._start_line, self._start_col),
                SourceLocation(self._line, self._col),
            ),
            self._source[self._start_pos : self._pos],
        )

    def _error(self, message: str, location: SourceLocation | None = None) -> LexerError:
        """Build a LexerError at location (default: start of the current lexeme)."""
        where = location if location is not None else self._token_start()
        return LexerError(
            message,
            lineno=where.line,
            col_offset=where.col,
            source_name=self._config.source_name or None,
        )

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def _report_tabs(self) -> None:
        if self._tab_count and self._config.warns(LexerWarning.TABS):
            name = self._config.source_name or "<source>"
            logger.warning(
                "%s:%s: tab character found (%d in total)",
                name,
                self._first_tab,
                self._tab_count,
            )
