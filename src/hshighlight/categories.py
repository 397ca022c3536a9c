"""Presentation categories and the raw-identity classification table.

Every RawTokenKind maps to exactly one TokenCategory. The mapping is a flat
table rather than a cascade of conditionals; tests assert that the table
covers the whole RawTokenKind enum so a new identity cannot be added without
a category.

Thread Safety:
The table is a read-only MappingProxyType built at import time.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from hshighlight.tokens import RawTokenKind as K


class TokenCategory(Enum):
    """Presentation categories used as tags for highlighted spans of code."""

    KEYWORD = "keyword"
    PRAGMA = "pragma"
    SYMBOL = "symbol"  # punctuation that is not an operator
    VARIABLE = "variable"  # term-level name
    CONSTRUCTOR = "constructor"  # data/type constructor
    OPERATOR = "operator"
    CHAR = "char"
    STRING = "string"
    INTEGER = "integer"
    RATIONAL = "rational"
    COMMENT = "comment"  # including Haddock
    SPACE = "space"  # filler between tokens
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class HighlightToken:
    """A category paired with an exact, contiguous slice of the input.

    Unpacks as a pair:

        >>> category, text = HighlightToken(TokenCategory.VARIABLE, "f")

    """

    category: TokenCategory
    text: str

    def __iter__(self) -> Iterator[TokenCategory | str]:
        yield self.category
        yield self.text

    def __repr__(self) -> str:
        return f"({self.category.name}, {self.text!r})"


_KEYWORDS = (
    K.AS, K.CASE, K.CLASS, K.DATA, K.DEFAULT, K.DERIVING, K.DO, K.ELSE,
    K.HIDING, K.FOREIGN, K.IF, K.IMPORT, K.IN, K.INFIX, K.INFIXL, K.INFIXR,
    K.INSTANCE, K.LET, K.MODULE, K.NEWTYPE, K.OF, K.QUALIFIED, K.THEN,
    K.TYPE, K.WHERE, K.FORALL, K.EXPORT, K.LABEL, K.DYNAMIC, K.SAFE,
    K.INTERRUPTIBLE, K.UNSAFE, K.STDCALLCONV, K.CCALLCONV, K.CAPICONV,
    K.PRIMCALLCONV, K.JAVASCRIPTCALLCONV, K.MDO, K.FAMILY, K.ROLE, K.GROUP,
    K.BY, K.USING, K.PATTERN, K.STATIC, K.STOCK, K.ANYCLASS, K.UNIT,
    K.SIGNATURE, K.DEPENDENCY, K.REQUIRES,
    # Arrow notation
    K.PROC, K.REC,
)  # fmt: skip

_PRAGMAS = (
    K.INLINE_PRAGMA, K.SPEC_PRAGMA, K.SPEC_INLINE_PRAGMA, K.SOURCE_PRAGMA,
    K.RULES_PRAGMA, K.WARNING_PRAGMA, K.DEPRECATED_PRAGMA, K.LINE_PRAGMA,
    K.COLUMN_PRAGMA, K.SCC_PRAGMA, K.GENERATED_PRAGMA, K.CORE_PRAGMA,
    K.UNPACK_PRAGMA, K.NOUNPACK_PRAGMA, K.ANN_PRAGMA, K.COMPLETE_PRAGMA,
    K.CLOSE_PRAGMA, K.OPTIONS_PRAGMA, K.INCLUDE_PRAGMA, K.LANGUAGE_PRAGMA,
    K.VECT_PRAGMA, K.VECT_SCALAR_PRAGMA, K.NOVECT_PRAGMA, K.MINIMAL_PRAGMA,
    K.OVERLAPPABLE_PRAGMA, K.OVERLAPPING_PRAGMA, K.OVERLAPS_PRAGMA,
    K.INCOHERENT_PRAGMA, K.CTYPE_PRAGMA,
)  # fmt: skip

_SYMBOLS = (
    # Reserved symbols
    K.DOTDOT, K.COLON, K.DCOLON, K.EQUAL, K.LAM, K.LCASE, K.VBAR, K.LARROW,
    K.RARROW, K.AT, K.TILDE, K.TILDEHSH, K.DARROW, K.BANG, K.BIGLAM,
    K.OCURLY, K.CCURLY, K.VOCURLY, K.VCCURLY, K.OBRACK, K.OPABRACK,
    K.CPABRACK, K.CBRACK, K.OPAREN, K.CPAREN, K.OUBXPAREN, K.CUBXPAREN,
    K.SEMI, K.COMMA, K.UNDERSCORE, K.BACKQUOTE, K.SIMPLE_QUOTE,
    # Template Haskell
    K.OPEN_EXP_QUOTE, K.OPEN_PAT_QUOTE, K.OPEN_DEC_QUOTE, K.OPEN_TYP_QUOTE,
    K.CLOSE_QUOTE, K.OPEN_TEXP_QUOTE, K.CLOSE_TEXP_QUOTE, K.ID_ESCAPE,
    K.PAREN_ESCAPE, K.ID_TY_ESCAPE, K.PAREN_TY_ESCAPE, K.TY_QUOTE,
    K.QUASI_QUOTE, K.QQ_QUASI_QUOTE,
    # Arrow notation
    K.OPARENBAR, K.CPARENBAR, K.LARROWTAIL, K.RARROWTAIL,
    K.LARROWTAIL_DOUBLE, K.RARROWTAIL_DOUBLE,
    # Type application
    K.TYPE_APP,
)  # fmt: skip

# The lexer reports these as reserved symbols; they read as operators.
_RESERVED_OPERATORS = (K.MINUS, K.DOT)

_VARIABLES = (K.VARID, K.QVARID, K.DUPIPVARID, K.LABELVARID)
_CONSTRUCTORS = (K.CONID, K.QCONID)
_OPERATORS = (K.VARSYM, K.CONSYM, K.QVARSYM, K.QCONSYM)

_COMMENTS = (
    K.DOC_COMMENT_NEXT, K.DOC_COMMENT_PREV, K.DOC_COMMENT_NAMED,
    K.DOC_SECTION, K.DOC_OPTIONS, K.LINE_COMMENT, K.BLOCK_COMMENT,
)  # fmt: skip


def _build_table() -> dict[K, TokenCategory]:
    groups: tuple[tuple[tuple[K, ...], TokenCategory], ...] = (
        (_KEYWORDS, TokenCategory.KEYWORD),
        (_PRAGMAS, TokenCategory.PRAGMA),
        (_SYMBOLS, TokenCategory.SYMBOL),
        (_RESERVED_OPERATORS, TokenCategory.OPERATOR),
        (_VARIABLES, TokenCategory.VARIABLE),
        (_CONSTRUCTORS, TokenCategory.CONSTRUCTOR),
        (_OPERATORS, TokenCategory.OPERATOR),
        ((K.CHAR, K.PRIMCHAR), TokenCategory.CHAR),
        ((K.STRING, K.PRIMSTRING), TokenCategory.STRING),
        ((K.INTEGER, K.PRIMINT, K.PRIMWORD), TokenCategory.INTEGER),
        ((K.RATIONAL, K.PRIMFLOAT, K.PRIMDOUBLE), TokenCategory.RATIONAL),
        (_COMMENTS, TokenCategory.COMMENT),
        ((K.UNKNOWN, K.EOF), TokenCategory.OTHER),
    )
    table: dict[K, TokenCategory] = {}
    for kinds, category in groups:
        for kind in kinds:
            if kind in table:
                raise ValueError(f"{kind.name} listed under both {table[kind].name} and {category.name}")
            table[kind] = category
    return table


CATEGORY_TABLE = MappingProxyType(_build_table())


def classify(kind: K) -> TokenCategory:
    """Classify a raw token identity into its presentation category.

    Args:
        kind: Raw token identity reported by the lexer

    Returns:
        The presentation category (total over RawTokenKind)
    """
    return CATEGORY_TABLE[kind]


__all__ = [
    "CATEGORY_TABLE",
    "HighlightToken",
    "TokenCategory",
    "classify",
]
