"""Numeric literal scanner mixin."""

from __future__ import annotations

from hshighlight.config import Extension, LexerConfig
from hshighlight.lexer.charsets import BINARY_DIGITS, DECIMAL_DIGITS, HEX_DIGITS, OCTAL_DIGITS
from hshighlight.tokens import RawToken, RawTokenKind

_RADIX_DIGITS: dict[str, frozenset[str]] = {
    "x": HEX_DIGITS,
    "X": HEX_DIGITS,
    "o": OCTAL_DIGITS,
    "O": OCTAL_DIGITS,
    "b": BINARY_DIGITS,
    "B": BINARY_DIGITS,
}


class NumericScannerMixin:
    """Mixin providing integer and floating literal scanning.

    Integers: decimal, ``0x``/``0o`` and (BinaryLiterals) ``0b``.
    Rationals: a fraction, an exponent, or both.
    MagicHash suffixes select the primitive kinds: ``1#`` PRIMINT,
    ``1##`` PRIMWORD, ``1.0#`` PRIMFLOAT, ``1.0##`` PRIMDOUBLE.

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

    def _digits_end(self, pos: int, digits: frozenset[str]) -> int:
        """End of a digit run starting at pos (pos itself if there is none).

        With NumericUnderscores, underscores may separate digits but may
        not trail the run.
        """
        source = self._source
        source_len = self._source_len
        underscores = self._config.enabled(Extension.NUMERIC_UNDERSCORES)
        end = cursor = pos
        while cursor < source_len:
            char = source[cursor]
            if char in digits:
                cursor += 1
                end = cursor
            elif underscores and char == "_" and end > pos:
                cursor += 1
            else:
                break
        return end

    def _scan_number(self) -> RawToken:
        """Scan a numeric literal starting at a decimal digit."""
        source = self._source
        pos = self._pos

        radix = source[pos + 1 : pos + 2]
        if source[pos] == "0" and radix in _RADIX_DIGITS:
            binary = radix in ("b", "B")
            if not binary or self._config.enabled(Extension.BINARY_LITERALS):
                end = self._digits_end(pos + 2, _RADIX_DIGITS[radix])
                if end > pos + 2:
                    return self._finish_number(end, rational=False)

        end = self._digits_end(pos, DECIMAL_DIGITS)
        rational = False

        # Fraction requires a digit after the dot ("1..2" is an enumeration)
        if source[end : end + 1] == "." and source[end + 1 : end + 2] in DECIMAL_DIGITS:
            end = self._digits_end(end + 1, DECIMAL_DIGITS)
            rational = True

        exp_end = self._exponent_end(end)
        if exp_end != end:
            end = exp_end
            rational = True

        return self._finish_number(end, rational=rational)

    def _exponent_end(self, pos: int) -> int:
        source = self._source
        if source[pos : pos + 1] not in ("e", "E"):
            return pos
        digits = pos + 1
        if source[digits : digits + 1] in ("+", "-"):
            digits += 1
        end = self._digits_end(digits, DECIMAL_DIGITS)
        return end if end > digits else pos

    def _finish_number(self, end: int, *, rational: bool) -> RawToken:
        """Consume a MagicHash suffix and emit the literal ending at end."""
        kind = RawTokenKind.RATIONAL if rational else RawTokenKind.INTEGER
        if self._config.enabled(Extension.MAGIC_HASH) and self._source[end : end + 1] == "#":
            double = self._source[end + 1 : end + 2] == "#"
            if rational:
                kind = RawTokenKind.PRIMDOUBLE if double else RawTokenKind.PRIMFLOAT
            else:
                kind = RawTokenKind.PRIMWORD if double else RawTokenKind.PRIMINT
            end += 2 if double else 1
        self._advance_to(end)
        return self._emit(kind)
