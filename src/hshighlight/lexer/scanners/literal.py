"""String and character literal scanner mixin."""

from __future__ import annotations

from hshighlight.config import Extension, LexerConfig
from hshighlight.errors import LexerError
from hshighlight.lexer.charsets import (
    DECIMAL_DIGITS,
    HEX_DIGITS,
    OCTAL_DIGITS,
    is_control_char,
    is_whitespace,
)
from hshighlight.lexer.reserved import ASCII_ESCAPES, CHAR_ESCAPES, CONTROL_ESCAPES, MAX_CODE_POINT
from hshighlight.location import SourceLocation
from hshighlight.tokens import RawToken, RawTokenKind


class LiteralScannerMixin:
    """Mixin providing string and character literal scanning.

    Strings may contain escapes and gaps (a backslash, whitespace including
    newlines, and a closing backslash) but no raw newline. A quote that does
    not begin a valid character literal is a Template Haskell name quote
    when that extension is on, and a lexical error otherwise.

    """

    _source: str
    _source_len: int
    _pos: int
    _config: LexerConfig

    def _advance_to(self, end: int) -> None:
        """Advance to offset. Implemented by Lexer."""
        raise NotImplementedError

    def _emit(self, kind: RawTokenKind) -> RawToken:
        """Create token for current lexeme. Implemented by Lexer."""
        raise NotImplementedError

    def _error(self, message: str, location: SourceLocation | None = None) -> LexerError:
        """Build a LexerError. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_string(self) -> RawToken:
        """Scan a string literal starting at '"'.

        Raises:
            LexerError: On a raw newline, control character, bad escape,
                or end of input before the closing quote
        """
        source = self._source
        source_len = self._source_len
        pos = self._pos + 1
        while True:
            if pos >= source_len:
                raise self._error("lexical error in string/character literal at end of input")
            char = source[pos]
            if char == '"':
                pos += 1
                break
            if char == "\\":
                if is_whitespace(source[pos + 1 : pos + 2]):
                    pos = self._gap_end(pos + 1)
                else:
                    pos = self._escape_end(pos + 1, in_string=True)
            elif char in "\n\r\f\v" or is_control_char(char):
                raise self._error(f"lexical error in string/character literal at character {char!r}")
            else:
                pos += 1

        kind = RawTokenKind.STRING
        if self._config.enabled(Extension.MAGIC_HASH) and source[pos : pos + 1] == "#":
            kind = RawTokenKind.PRIMSTRING
            pos += 1
        self._advance_to(pos)
        return self._emit(kind)

    def _gap_end(self, pos: int) -> int:
        """Skip a string gap whose whitespace starts at pos."""
        source = self._source
        source_len = self._source_len
        while pos < source_len and is_whitespace(source[pos]):
            pos += 1
        if source[pos : pos + 1] != "\\":
            raise self._error("lexical error in string gap")
        return pos + 1

    def _escape_end(self, pos: int, *, in_string: bool) -> int:
        """Offset just past the escape whose body starts at pos (after the backslash).

        Raises:
            LexerError: For an unknown escape or a code point above 0x10FFFF
        """
        source = self._source
        char = source[pos : pos + 1]
        if char in CHAR_ESCAPES or (in_string and char == "&"):
            return pos + 1
        if char == "^":
            if source[pos + 1 : pos + 2] in CONTROL_ESCAPES:
                return pos + 2
        elif char in DECIMAL_DIGITS:
            return self._numeric_escape_end(pos, DECIMAL_DIGITS, 10)
        elif char == "x":
            return self._numeric_escape_end(pos + 1, HEX_DIGITS, 16)
        elif char == "o":
            return self._numeric_escape_end(pos + 1, OCTAL_DIGITS, 8)
        else:
            for name in ASCII_ESCAPES:
                if source.startswith(name, pos):
                    return pos + len(name)
        raise self._error(f"lexical error in string/character literal at character {char!r}")

    def _numeric_escape_end(self, pos: int, digits: frozenset[str], base: int) -> int:
        source = self._source
        source_len = self._source_len
        end = pos
        while end < source_len and source[end] in digits:
            end += 1
        if end == pos:
            raise self._error("lexical error in string/character literal: missing digits")
        if int(source[pos:end], base) > MAX_CODE_POINT:
            raise self._error("numeric escape sequence out of range")
        return end

    def _scan_quote(self) -> RawToken:
        """Scan a character literal or a Template Haskell quote at "'"."""
        source = self._source
        pos = self._pos
        char = source[pos + 1 : pos + 2]
        template_haskell = self._config.enabled(Extension.TEMPLATE_HASKELL)

        end = -1
        if char == "\\":
            end = self._escape_end(pos + 2, in_string=False)
        elif char and char != "'" and char != "\n":
            end = pos + 2

        if end != -1 and source[end : end + 1] == "'":
            if is_control_char(char):
                raise self._error(f"lexical error in string/character literal at character {char!r}")
            end += 1
            kind = RawTokenKind.CHAR
            if self._config.enabled(Extension.MAGIC_HASH) and source[end : end + 1] == "#":
                kind = RawTokenKind.PRIMCHAR
                end += 1
            self._advance_to(end)
            return self._emit(kind)

        if template_haskell:
            if char == "'":
                self._advance_to(pos + 2)
                return self._emit(RawTokenKind.TY_QUOTE)
            self._advance_to(pos + 1)
            return self._emit(RawTokenKind.SIMPLE_QUOTE)
        raise self._error("lexical error in string/character literal")
