"""Identifier, keyword and qualified-name scanner mixin."""

from __future__ import annotations

from hshighlight.config import Extension, LexerConfig
from hshighlight.lexer.charsets import is_symbol_char, is_upper_start, is_varid_start
from hshighlight.lexer.reserved import REC_EXTENSIONS, RESERVED_OPS, RESERVED_WORDS
from hshighlight.tokens import RawToken, RawTokenKind


class IdentifierScannerMixin:
    """Mixin providing name scanning.

    Handles plain and qualified names (``Data.Map.insert``, ``M.Just``,
    ``Prelude.+``), reserved words gated by extension, and MagicHash
    suffixes (``I#``, ``plusInt#``).

    """

    _source: str
    _source_len: int
    _pos: int
    _config: LexerConfig
    _in_pragma: bool

    def _advance_to(self, end: int) -> None:
        """Advance to offset. Implemented by Lexer."""
        raise NotImplementedError

    def _word_end(self, pos: int) -> int:
        """End of name characters. Implemented by Lexer."""
        raise NotImplementedError

    def _symbol_end(self, pos: int) -> int:
        """End of symbol characters. Implemented by Lexer."""
        raise NotImplementedError

    def _emit(self, kind: RawTokenKind) -> RawToken:
        """Create token for current lexeme. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_name(self) -> RawToken:
        """Scan a name starting with a letter or underscore."""
        source = self._source
        source_len = self._source_len
        start = self._pos
        end = self._word_end(start)

        if not is_upper_start(source[start]):
            end = self._hash_end(end)
            word = source[start:end]
            self._advance_to(end)
            if word == "_":
                return self._emit(RawTokenKind.UNDERSCORE)
            return self._emit(self._keyword_kind(word) or RawTokenKind.VARID)

        # Walk the module prefix: Conid(.Conid)*
        qualified = False
        while end + 1 < source_len and source[end] == ".":
            nxt = source[end + 1]
            if is_upper_start(nxt):
                end = self._word_end(end + 1)
                qualified = True
                continue
            if is_varid_start(nxt):
                name_end = self._hash_end(self._word_end(end + 1))
                if self._keyword_kind(source[end + 1 : name_end]) is not None:
                    break
                self._advance_to(name_end)
                return self._emit(RawTokenKind.QVARID)
            if is_symbol_char(nxt):
                sym_end = self._symbol_end(end + 1)
                symbol = source[end + 1 : sym_end]
                if symbol != "." and symbol in RESERVED_OPS:
                    break
                self._advance_to(sym_end)
                if symbol.startswith(":"):
                    return self._emit(RawTokenKind.QCONSYM)
                return self._emit(RawTokenKind.QVARSYM)
            break

        if qualified:
            # "A.B" followed by something else: the last conid is the name
            end = self._hash_end(end)
            self._advance_to(end)
            return self._emit(RawTokenKind.QCONID)
        end = self._hash_end(end)
        self._advance_to(end)
        return self._emit(RawTokenKind.CONID)

    def _hash_end(self, pos: int) -> int:
        """Extend pos over MagicHash "#" suffixes."""
        if not self._config.enabled(Extension.MAGIC_HASH):
            return pos
        source = self._source
        source_len = self._source_len
        while pos < source_len and source[pos] == "#":
            if self._in_pragma and source.startswith("#-}", pos):
                break
            pos += 1
        return pos

    def _keyword_kind(self, word: str) -> RawTokenKind | None:
        """Reserved-word kind for word, honouring extension gating."""
        entry = RESERVED_WORDS.get(word)
        if entry is None:
            return None
        kind, extension = entry
        if extension is None:
            return kind
        if kind is RawTokenKind.REC:
            if any(self._config.enabled(ext) for ext in REC_EXTENSIONS):
                return kind
            return None
        return kind if self._config.enabled(extension) else None
