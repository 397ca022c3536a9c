"""Pragma scanner mixin."""

from __future__ import annotations

from hshighlight.config import Extension, LexerConfig, LexerWarning
from hshighlight.errors import LexerError
from hshighlight.lexer.charsets import is_whitespace
from hshighlight.lexer.reserved import PRAGMA_OPENERS, PRAGMA_PAIRS, WHOLE_PRAGMAS
from hshighlight.location import SourceLocation
from hshighlight.tokens import RawToken, RawTokenKind
from hshighlight.utils.logger import get_logger

logger = get_logger(__name__)


class PragmaScannerMixin:
    """Mixin providing "{-# ... #-}" scanning.

    Three shapes:
    - Whole pragmas (OPTIONS_GHC, INCLUDE, OPTIONS_HADDOCK) are one token.
    - Known pragmas emit an opener token covering "{-# NAME"; the body is
      lexed normally and "#-}" becomes CLOSE_PRAGMA.
    - Unknown pragmas are block comments.

    """

    _source: str
    _source_len: int
    _pos: int
    _config: LexerConfig
    _in_pragma: bool
    _pragma_start: SourceLocation | None

    def _advance_to(self, end: int) -> None:
        """Advance to offset. Implemented by Lexer."""
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

    def _pragma_word(self, pos: int, *, skip_newlines: bool) -> tuple[int, int]:
        """Locate the word after pos, skipping blanks.

        Returns:
            (word_start, word_end); equal when there is no word
        """
        source = self._source
        source_len = self._source_len
        while pos < source_len and (
            is_whitespace(source[pos]) if skip_newlines else source[pos] in " \t"
        ):
            pos += 1
        end = pos
        while end < source_len and (source[end].isalnum() or source[end] == "_"):
            end += 1
        return pos, end

    def _scan_pragma(self) -> RawToken:
        """Scan a pragma starting at "{-#"."""
        source = self._source
        start = self._token_start()
        name_start, name_end = self._pragma_word(self._pos + 3, skip_newlines=True)
        name = source[name_start:name_end].upper()

        whole = WHOLE_PRAGMAS.get(name)
        if whole is RawTokenKind.DOC_OPTIONS and not self._config.enabled(Extension.HADDOCK):
            whole = RawTokenKind.BLOCK_COMMENT
        if whole is not None:
            self._skip_to_pragma_end(start)
            return self._emit(whole)

        kind = PRAGMA_OPENERS.get(name)
        if kind is None:
            if self._config.warns(LexerWarning.UNRECOGNISED_PRAGMAS):
                logger.warning(
                    "%s:%s: unrecognised pragma %r",
                    self._config.source_name or "<source>",
                    start,
                    source[name_start:name_end],
                )
            self._skip_to_pragma_end(start)
            return self._emit(RawTokenKind.BLOCK_COMMENT)

        end = name_end
        second_start, second_end = self._pragma_word(name_end, skip_newlines=False)
        pair = PRAGMA_PAIRS.get((name, source[second_start:second_end].upper()))
        if pair is not None:
            kind = pair
            end = second_end

        self._advance_to(end)
        self._in_pragma = True
        self._pragma_start = start
        return self._emit(kind)

    def _scan_pragma_close(self) -> RawToken:
        """Scan the "#-}" that closes an opened pragma."""
        self._advance_to(self._pos + 3)
        self._in_pragma = False
        self._pragma_start = None
        return self._emit(RawTokenKind.CLOSE_PRAGMA)

    def _skip_to_pragma_end(self, start: SourceLocation) -> None:
        end = self._source.find("#-}", self._pos + 3)
        if end == -1:
            raise self._error("unterminated pragma", start)
        self._advance_to(end + 3)
