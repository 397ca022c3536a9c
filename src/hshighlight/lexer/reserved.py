"""Reserved words, reserved operators and pragma names.

Each entry pairs a RawTokenKind with the extension that enables it; ``None``
means the entry is always active. A disabled entry falls back to the
ordinary lexeme (a variable name, an operator, a block comment).
"""

from __future__ import annotations

from hshighlight.config import Extension as X
from hshighlight.tokens import RawTokenKind as K

RESERVED_WORDS: dict[str, tuple[K, X | None]] = {
    "as": (K.AS, None),
    "case": (K.CASE, None),
    "class": (K.CLASS, None),
    "data": (K.DATA, None),
    "default": (K.DEFAULT, None),
    "deriving": (K.DERIVING, None),
    "do": (K.DO, None),
    "else": (K.ELSE, None),
    "hiding": (K.HIDING, None),
    "foreign": (K.FOREIGN, None),
    "if": (K.IF, None),
    "import": (K.IMPORT, None),
    "in": (K.IN, None),
    "infix": (K.INFIX, None),
    "infixl": (K.INFIXL, None),
    "infixr": (K.INFIXR, None),
    "instance": (K.INSTANCE, None),
    "let": (K.LET, None),
    "module": (K.MODULE, None),
    "newtype": (K.NEWTYPE, None),
    "of": (K.OF, None),
    "qualified": (K.QUALIFIED, None),
    "then": (K.THEN, None),
    "type": (K.TYPE, None),
    "where": (K.WHERE, None),
    "forall": (K.FORALL, X.EXPLICIT_FORALL),
    "mdo": (K.MDO, X.RECURSIVE_DO),
    "rec": (K.REC, X.RECURSIVE_DO),
    "proc": (K.PROC, X.ARROWS),
    "family": (K.FAMILY, X.TYPE_FAMILIES),
    "role": (K.ROLE, X.ROLE_ANNOTATIONS),
    "pattern": (K.PATTERN, X.PATTERN_SYNONYMS),
    "static": (K.STATIC, X.STATIC_POINTERS),
    "stock": (K.STOCK, X.DERIVING_STRATEGIES),
    "anyclass": (K.ANYCLASS, X.DERIVING_STRATEGIES),
    "group": (K.GROUP, X.TRANSFORM_LIST_COMP),
    "by": (K.BY, X.TRANSFORM_LIST_COMP),
    "using": (K.USING, X.TRANSFORM_LIST_COMP),
    "export": (K.EXPORT, X.FFI),
    "label": (K.LABEL, X.FFI),
    "dynamic": (K.DYNAMIC, X.FFI),
    "safe": (K.SAFE, X.FFI),
    "interruptible": (K.INTERRUPTIBLE, X.FFI),
    "unsafe": (K.UNSAFE, X.FFI),
    "stdcall": (K.STDCALLCONV, X.FFI),
    "ccall": (K.CCALLCONV, X.FFI),
    "capi": (K.CAPICONV, X.FFI),
    "prim": (K.PRIMCALLCONV, X.FFI),
    "javascript": (K.JAVASCRIPTCALLCONV, X.FFI),
    "unit": (K.UNIT, X.BACKPACK),
    "signature": (K.SIGNATURE, X.BACKPACK),
    "dependency": (K.DEPENDENCY, X.BACKPACK),
    "requires": (K.REQUIRES, X.BACKPACK),
}

# "rec" is also a keyword under Arrows
REC_EXTENSIONS: frozenset[X] = frozenset({X.RECURSIVE_DO, X.ARROWS})

RESERVED_OPS: dict[str, tuple[K, X | None]] = {
    "..": (K.DOTDOT, None),
    ":": (K.COLON, None),
    "::": (K.DCOLON, None),
    "=": (K.EQUAL, None),
    "\\": (K.LAM, None),
    "|": (K.VBAR, None),
    "<-": (K.LARROW, None),
    "->": (K.RARROW, None),
    "@": (K.AT, None),
    "~": (K.TILDE, None),
    "=>": (K.DARROW, None),
    "-": (K.MINUS, None),
    "!": (K.BANG, None),
    ".": (K.DOT, None),
    "~#": (K.TILDEHSH, X.MAGIC_HASH),
    "-<": (K.LARROWTAIL, X.ARROWS),
    ">-": (K.RARROWTAIL, X.ARROWS),
    "-<<": (K.LARROWTAIL_DOUBLE, X.ARROWS),
    ">>-": (K.RARROWTAIL_DOUBLE, X.ARROWS),
    "∷": (K.DCOLON, X.UNICODE_SYNTAX),
    "⇒": (K.DARROW, X.UNICODE_SYNTAX),
    "→": (K.RARROW, X.UNICODE_SYNTAX),
    "←": (K.LARROW, X.UNICODE_SYNTAX),
    "∀": (K.FORALL, X.UNICODE_SYNTAX),
    "⤙": (K.LARROWTAIL, X.UNICODE_SYNTAX),
    "⤚": (K.RARROWTAIL, X.UNICODE_SYNTAX),
    "⤛": (K.LARROWTAIL_DOUBLE, X.UNICODE_SYNTAX),
    "⤜": (K.RARROWTAIL_DOUBLE, X.UNICODE_SYNTAX),
}

# Pragmas lexed as an opener token; the body is lexed normally up to "#-}".
PRAGMA_OPENERS: dict[str, K] = {
    "INLINE": K.INLINE_PRAGMA,
    "NOINLINE": K.INLINE_PRAGMA,
    "NOTINLINE": K.INLINE_PRAGMA,
    "INLINABLE": K.INLINE_PRAGMA,
    "INLINEABLE": K.INLINE_PRAGMA,
    "SPECIALISE": K.SPEC_PRAGMA,
    "SPECIALIZE": K.SPEC_PRAGMA,
    "SOURCE": K.SOURCE_PRAGMA,
    "RULES": K.RULES_PRAGMA,
    "WARNING": K.WARNING_PRAGMA,
    "DEPRECATED": K.DEPRECATED_PRAGMA,
    "LINE": K.LINE_PRAGMA,
    "COLUMN": K.COLUMN_PRAGMA,
    "SCC": K.SCC_PRAGMA,
    "GENERATED": K.GENERATED_PRAGMA,
    "CORE": K.CORE_PRAGMA,
    "UNPACK": K.UNPACK_PRAGMA,
    "NOUNPACK": K.NOUNPACK_PRAGMA,
    "ANN": K.ANN_PRAGMA,
    "COMPLETE": K.COMPLETE_PRAGMA,
    "LANGUAGE": K.LANGUAGE_PRAGMA,
    "VECTORISE": K.VECT_PRAGMA,
    "VECTORIZE": K.VECT_PRAGMA,
    "NOVECTORISE": K.NOVECT_PRAGMA,
    "NOVECTORIZE": K.NOVECT_PRAGMA,
    "MINIMAL": K.MINIMAL_PRAGMA,
    "OVERLAPPABLE": K.OVERLAPPABLE_PRAGMA,
    "OVERLAPPING": K.OVERLAPPING_PRAGMA,
    "OVERLAPS": K.OVERLAPS_PRAGMA,
    "INCOHERENT": K.INCOHERENT_PRAGMA,
    "CTYPE": K.CTYPE_PRAGMA,
}

# Two-word openers: (first word, second word) -> kind
PRAGMA_PAIRS: dict[tuple[str, str], K] = {
    ("SPECIALISE", "INLINE"): K.SPEC_INLINE_PRAGMA,
    ("SPECIALIZE", "INLINE"): K.SPEC_INLINE_PRAGMA,
    ("SPECIALISE", "NOINLINE"): K.SPEC_INLINE_PRAGMA,
    ("SPECIALIZE", "NOINLINE"): K.SPEC_INLINE_PRAGMA,
    ("VECTORISE", "SCALAR"): K.VECT_SCALAR_PRAGMA,
    ("VECTORIZE", "SCALAR"): K.VECT_SCALAR_PRAGMA,
}

# Pragmas lexed as a single token from "{-#" through "#-}".
WHOLE_PRAGMAS: dict[str, K] = {
    "OPTIONS": K.OPTIONS_PRAGMA,
    "OPTIONS_GHC": K.OPTIONS_PRAGMA,
    "OPTIONS_JHC": K.OPTIONS_PRAGMA,
    "OPTIONS_HUGS": K.OPTIONS_PRAGMA,
    "OPTIONS_NHC98": K.OPTIONS_PRAGMA,
    "INCLUDE": K.INCLUDE_PRAGMA,
    "OPTIONS_HADDOCK": K.DOC_OPTIONS,
}

# ASCII control-code escapes, e.g. "\NUL"; matched longest first
ASCII_ESCAPES: tuple[str, ...] = tuple(
    sorted(
        (
            "NUL", "SOH", "STX", "ETX", "EOT", "ENQ", "ACK", "BEL", "BS", "HT",
            "LF", "VT", "FF", "CR", "SO", "SI", "DLE", "DC1", "DC2", "DC3",
            "DC4", "NAK", "SYN", "ETB", "CAN", "EM", "SUB", "ESC", "FS", "GS",
            "RS", "US", "SP", "DEL",
        ),
        key=len,
        reverse=True,
    )
)  # fmt: skip

# Single-character escapes; "&" (empty string) is valid in strings only
CHAR_ESCAPES: frozenset[str] = frozenset("abfnrtv\\\"'")

# Characters allowed after "\^"
CONTROL_ESCAPES: frozenset[str] = frozenset("@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_")

MAX_CODE_POINT = 0x10FFFF
