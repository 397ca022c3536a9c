"""RawToken and RawTokenKind definitions for the hshighlight lexer.

The lexer produces a stream of RawToken objects that the driver consumes.
Each RawToken has a kind, the raw source text, and a span in display
columns. Tokens synthesized by the layout algorithm have no real source
position and carry ``span=None``.

Thread Safety:
RawToken is frozen (immutable) and safe to share across threads.
RawTokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from hshighlight.location import Span


class RawTokenKind(Enum):
    """Token identities produced by the lexer.

    Organized by category for clarity:
    - Reserved words and extension keywords
    - Pragmas
    - Reserved symbols and special punctuation
    - Identifiers and literals
    - Template Haskell, arrow notation, type application
    - Comments and documentation
    - Special (UNKNOWN, EOF)

    """

    # Reserved words
    AS = auto()
    CASE = auto()
    CLASS = auto()
    DATA = auto()
    DEFAULT = auto()
    DERIVING = auto()
    DO = auto()
    ELSE = auto()
    HIDING = auto()
    FOREIGN = auto()
    IF = auto()
    IMPORT = auto()
    IN = auto()
    INFIX = auto()
    INFIXL = auto()
    INFIXR = auto()
    INSTANCE = auto()
    LET = auto()
    MODULE = auto()
    NEWTYPE = auto()
    OF = auto()
    QUALIFIED = auto()
    THEN = auto()
    TYPE = auto()
    WHERE = auto()

    # Extension keywords
    FORALL = auto()  # forall, ∀
    EXPORT = auto()  # FFI
    LABEL = auto()
    DYNAMIC = auto()
    SAFE = auto()
    INTERRUPTIBLE = auto()
    UNSAFE = auto()
    STDCALLCONV = auto()
    CCALLCONV = auto()
    CAPICONV = auto()
    PRIMCALLCONV = auto()
    JAVASCRIPTCALLCONV = auto()
    MDO = auto()  # RecursiveDo
    FAMILY = auto()  # TypeFamilies
    ROLE = auto()  # RoleAnnotations
    GROUP = auto()  # TransformListComp
    BY = auto()
    USING = auto()
    PATTERN = auto()  # PatternSynonyms
    STATIC = auto()  # StaticPointers
    STOCK = auto()  # DerivingStrategies
    ANYCLASS = auto()
    UNIT = auto()  # Backpack
    SIGNATURE = auto()
    DEPENDENCY = auto()
    REQUIRES = auto()

    # Pragmas
    INLINE_PRAGMA = auto()  # {-# INLINE, NOINLINE, INLINABLE
    SPEC_PRAGMA = auto()  # {-# SPECIALISE
    SPEC_INLINE_PRAGMA = auto()  # {-# SPECIALISE INLINE
    SOURCE_PRAGMA = auto()
    RULES_PRAGMA = auto()
    WARNING_PRAGMA = auto()
    DEPRECATED_PRAGMA = auto()
    LINE_PRAGMA = auto()
    COLUMN_PRAGMA = auto()
    SCC_PRAGMA = auto()
    GENERATED_PRAGMA = auto()
    CORE_PRAGMA = auto()
    UNPACK_PRAGMA = auto()
    NOUNPACK_PRAGMA = auto()
    ANN_PRAGMA = auto()
    COMPLETE_PRAGMA = auto()
    CLOSE_PRAGMA = auto()  # #-}
    OPTIONS_PRAGMA = auto()  # whole {-# OPTIONS_GHC ... #-}
    INCLUDE_PRAGMA = auto()
    LANGUAGE_PRAGMA = auto()
    VECT_PRAGMA = auto()
    VECT_SCALAR_PRAGMA = auto()
    NOVECT_PRAGMA = auto()
    MINIMAL_PRAGMA = auto()
    OVERLAPPABLE_PRAGMA = auto()
    OVERLAPPING_PRAGMA = auto()
    OVERLAPS_PRAGMA = auto()
    INCOHERENT_PRAGMA = auto()
    CTYPE_PRAGMA = auto()

    # Reserved symbols
    DOTDOT = auto()  # ..
    COLON = auto()  # :
    DCOLON = auto()  # ::
    EQUAL = auto()  # =
    LAM = auto()  # \
    LCASE = auto()  # \case
    VBAR = auto()  # |
    LARROW = auto()  # <-
    RARROW = auto()  # ->
    AT = auto()  # @
    TILDE = auto()  # ~
    TILDEHSH = auto()  # ~#
    DARROW = auto()  # =>
    MINUS = auto()  # -
    BANG = auto()  # !
    DOT = auto()  # .
    BIGLAM = auto()  # /\

    # Special punctuation
    OCURLY = auto()  # {
    CCURLY = auto()  # }
    VOCURLY = auto()  # virtual {, inserted by layout
    VCCURLY = auto()  # virtual }, inserted by layout
    OBRACK = auto()  # [
    OPABRACK = auto()  # [:
    CPABRACK = auto()  # :]
    CBRACK = auto()  # ]
    OPAREN = auto()  # (
    CPAREN = auto()  # )
    OUBXPAREN = auto()  # (#
    CUBXPAREN = auto()  # #)
    SEMI = auto()  # ;
    COMMA = auto()  # ,
    UNDERSCORE = auto()  # _
    BACKQUOTE = auto()  # `
    SIMPLE_QUOTE = auto()  # '

    # Identifiers
    VARID = auto()
    CONID = auto()
    VARSYM = auto()
    CONSYM = auto()
    QVARID = auto()
    QCONID = auto()
    QVARSYM = auto()
    QCONSYM = auto()
    DUPIPVARID = auto()  # ?x
    LABELVARID = auto()  # #x

    # Literals
    CHAR = auto()
    STRING = auto()
    INTEGER = auto()
    RATIONAL = auto()
    PRIMCHAR = auto()  # 'x'#
    PRIMSTRING = auto()  # "x"#
    PRIMINT = auto()  # 1#
    PRIMWORD = auto()  # 1##
    PRIMFLOAT = auto()  # 1.0#
    PRIMDOUBLE = auto()  # 1.0##

    # Template Haskell
    OPEN_EXP_QUOTE = auto()  # [| or [e|
    OPEN_PAT_QUOTE = auto()  # [p|
    OPEN_DEC_QUOTE = auto()  # [d|
    OPEN_TYP_QUOTE = auto()  # [t|
    CLOSE_QUOTE = auto()  # |]
    OPEN_TEXP_QUOTE = auto()  # [|| or [e||
    CLOSE_TEXP_QUOTE = auto()  # ||]
    ID_ESCAPE = auto()  # $x
    PAREN_ESCAPE = auto()  # $(
    ID_TY_ESCAPE = auto()  # $$x
    PAREN_TY_ESCAPE = auto()  # $$(
    TY_QUOTE = auto()  # ''
    QUASI_QUOTE = auto()  # [name| ... |]
    QQ_QUASI_QUOTE = auto()  # [M.name| ... |]

    # Arrow notation
    PROC = auto()
    REC = auto()
    OPARENBAR = auto()  # (|
    CPARENBAR = auto()  # |)
    LARROWTAIL = auto()  # -<
    RARROWTAIL = auto()  # >-
    LARROWTAIL_DOUBLE = auto()  # -<<
    RARROWTAIL_DOUBLE = auto()  # >>-

    # Type application
    TYPE_APP = auto()  # prefix @

    # Special
    UNKNOWN = auto()
    EOF = auto()

    # Documentation annotations and comments
    DOC_COMMENT_NEXT = auto()  # -- |
    DOC_COMMENT_PREV = auto()  # -- ^
    DOC_COMMENT_NAMED = auto()  # -- $name
    DOC_SECTION = auto()  # -- *
    DOC_OPTIONS = auto()  # {-# OPTIONS_HADDOCK ... #-}
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()


@dataclass(frozen=True, slots=True)
class RawToken:
    """A token produced by the lexer.

    Attributes:
        kind: The token identity (from RawTokenKind)
        span: Source span in display columns, or None for tokens the lexer
            synthesized without a real source position (layout braces).
            EOF carries a zero-width span at the end of input.
        value: The raw source text of the token ("" for synthesized tokens)

    """

    kind: RawTokenKind
    span: Span | None
    value: str = ""

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        where = str(self.span.start) if self.span is not None else "-"
        return f"RawToken({self.kind.name}, {val!r}, {where})"

    @property
    def is_located(self) -> bool:
        """True if the token has a real source position."""
        return self.span is not None
