"""Special character, operator and Template Haskell bracket scanner mixin."""

from __future__ import annotations

from hshighlight.config import Extension, LexerConfig
from hshighlight.errors import LexerError
from hshighlight.lexer.charsets import (
    OPENING_CHARS,
    is_symbol_char,
    is_upper_start,
    is_varid_start,
    is_whitespace,
)
from hshighlight.lexer.reserved import RESERVED_OPS
from hshighlight.location import SourceLocation
from hshighlight.tokens import RawToken, RawTokenKind

K = RawTokenKind
X = Extension

SPECIAL_KINDS: dict[str, RawTokenKind] = {
    "(": K.OPAREN,
    ")": K.CPAREN,
    ",": K.COMMA,
    ";": K.SEMI,
    "[": K.OBRACK,
    "]": K.CBRACK,
    "`": K.BACKQUOTE,
    "{": K.OCURLY,
    "}": K.CCURLY,
}

# Longest first: "[||" before "[|", "[e||" before "[e|"
QUOTE_OPENERS: tuple[tuple[str, RawTokenKind], ...] = (
    ("[||", K.OPEN_TEXP_QUOTE),
    ("[e||", K.OPEN_TEXP_QUOTE),
    ("[|", K.OPEN_EXP_QUOTE),
    ("[e|", K.OPEN_EXP_QUOTE),
    ("[p|", K.OPEN_PAT_QUOTE),
    ("[d|", K.OPEN_DEC_QUOTE),
    ("[t|", K.OPEN_TYP_QUOTE),
)

# Closing brackets that start with a symbol character
SYMBOL_CLOSERS: tuple[tuple[str, RawTokenKind, Extension], ...] = (
    ("||]", K.CLOSE_TEXP_QUOTE, X.TEMPLATE_HASKELL),
    ("|]", K.CLOSE_QUOTE, X.TEMPLATE_HASKELL),
    ("|)", K.CPARENBAR, X.ARROWS),
    ("#)", K.CUBXPAREN, X.UNBOXED_TUPLES),
    (":]", K.CPABRACK, X.PARALLEL_ARRAYS),
)

# "$x" / "$(" and the typed "$$" forms
SPLICES: dict[str, tuple[RawTokenKind, RawTokenKind]] = {
    "$": (K.ID_ESCAPE, K.PAREN_ESCAPE),
    "$$": (K.ID_TY_ESCAPE, K.PAREN_TY_ESCAPE),
}


class SymbolScannerMixin:
    """Mixin providing special-character and operator scanning.

    An operator is the longest run of symbol characters. The run is then
    checked, in order, against extension brackets (``|]``, ``#)``),
    prefix forms (``$x``, ``?x``, ``#x``, ``\\case``) and reserved
    operators; anything left is VARSYM, or CONSYM when it starts with ":".

    """

    _source: str
    _source_len: int
    _pos: int
    _config: LexerConfig

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

    def _error(self, message: str, location: SourceLocation | None = None) -> LexerError:
        """Build a LexerError. Implemented by Lexer."""
        raise NotImplementedError

    def _emit_to(self, end: int, kind: RawTokenKind) -> RawToken:
        self._advance_to(end)
        return self._emit(kind)

    # =========================================================================
    # Special characters
    # =========================================================================

    def _scan_special(self, char: str) -> RawToken:
        """Scan a special character, or a bracket that starts with one."""
        source = self._source
        pos = self._pos
        config = self._config
        after = source[pos + 2 : pos + 3]

        if char == "(":
            nxt = source[pos + 1 : pos + 2]
            if nxt == "#" and config.enabled(X.UNBOXED_TUPLES) and not is_symbol_char(after):
                return self._emit_to(pos + 2, K.OUBXPAREN)
            if nxt == "|" and config.enabled(X.ARROWS) and not is_symbol_char(after):
                return self._emit_to(pos + 2, K.OPARENBAR)
        elif char == "[":
            if config.enabled(X.TEMPLATE_HASKELL):
                for opener, kind in QUOTE_OPENERS:
                    if source.startswith(opener, pos):
                        return self._emit_to(pos + len(opener), kind)
            if config.enabled(X.QUASI_QUOTES):
                token = self._scan_quasi_quote()
                if token is not None:
                    return token
            if source[pos + 1 : pos + 2] == ":" and config.enabled(X.PARALLEL_ARRAYS):
                return self._emit_to(pos + 2, K.OPABRACK)

        return self._emit_to(pos + 1, SPECIAL_KINDS[char])

    def _scan_quasi_quote(self) -> RawToken | None:
        """Scan "[quoter|...|]" (quoter optionally qualified), if one starts here.

        Raises:
            LexerError: If the quasi-quotation is never closed
        """
        source = self._source
        pos = self._pos + 1
        qualified = False
        while is_upper_start(source[pos : pos + 1]):
            pos = self._word_end(pos)
            if source[pos : pos + 1] != ".":
                return None
            pos += 1
            qualified = True
        if not is_varid_start(source[pos : pos + 1]):
            return None
        pos = self._word_end(pos)
        if source[pos : pos + 1] != "|":
            return None

        close = source.find("|]", pos + 1)
        if close == -1:
            raise self._error("unterminated quasi-quotation")
        return self._emit_to(close + 2, K.QQ_QUASI_QUOTE if qualified else K.QUASI_QUOTE)

    # =========================================================================
    # Operators
    # =========================================================================

    def _scan_symbol(self) -> RawToken:
        """Scan an operator or a bracket/prefix form starting with a symbol char."""
        source = self._source
        pos = self._pos
        config = self._config

        for closer, kind, extension in SYMBOL_CLOSERS:
            if source.startswith(closer, pos) and config.enabled(extension):
                return self._emit_to(pos + len(closer), kind)

        end = self._symbol_end(pos)
        run = source[pos:end]
        after = source[end : end + 1]

        prefixed = self._scan_prefix_form(run, end, after)
        if prefixed is not None:
            return prefixed

        entry = RESERVED_OPS.get(run)
        if entry is not None:
            kind, extension = entry
            if extension is None or config.enabled(extension):
                if kind is K.AT and self._is_type_application(after):
                    kind = K.TYPE_APP
                return self._emit_to(end, kind)

        return self._emit_to(end, K.CONSYM if run.startswith(":") else K.VARSYM)

    def _scan_prefix_form(self, run: str, end: int, after: str) -> RawToken | None:
        """Splices, implicit parameters, labels and "\\case"."""
        config = self._config
        splice = SPLICES.get(run)
        if splice is not None and config.enabled(X.TEMPLATE_HASKELL):
            id_kind, paren_kind = splice
            if after == "(":
                return self._emit_to(end + 1, paren_kind)
            if is_varid_start(after):
                return self._emit_to(self._word_end(end), id_kind)
            return None

        if not is_varid_start(after):
            return None
        if run == "?" and config.enabled(X.IMPLICIT_PARAMS):
            return self._emit_to(self._word_end(end), K.DUPIPVARID)
        if run == "#" and config.enabled(X.OVERLOADED_LABELS):
            return self._emit_to(self._word_end(end), K.LABELVARID)
        if (
            run == "\\"
            and config.enabled(X.LAMBDA_CASE)
            and self._source.startswith("case", end)
            and self._word_end(end) == end + 4
        ):
            return self._emit_to(end + 4, K.LCASE)
        return None

    def _is_type_application(self, after: str) -> bool:
        """An "@" is a type application when prefix: loose before, tight after."""
        if not self._config.enabled(X.TYPE_APPLICATIONS):
            return False
        if not after or is_whitespace(after):
            return False
        pos = self._pos
        if pos == 0:
            return True
        prev = self._source[pos - 1]
        return is_whitespace(prev) or prev in OPENING_CHARS
