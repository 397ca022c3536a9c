"""Scanner mixins for the Haskell lexer.

Each mixin recognizes one family of lexemes; Lexer composes them.
"""

from hshighlight.lexer.scanners.comment import CommentScannerMixin
from hshighlight.lexer.scanners.identifier import IdentifierScannerMixin
from hshighlight.lexer.scanners.literal import LiteralScannerMixin
from hshighlight.lexer.scanners.numeric import NumericScannerMixin
from hshighlight.lexer.scanners.pragma import PragmaScannerMixin
from hshighlight.lexer.scanners.symbol import SymbolScannerMixin

__all__ = [
    "CommentScannerMixin",
    "IdentifierScannerMixin",
    "LiteralScannerMixin",
    "NumericScannerMixin",
    "PragmaScannerMixin",
    "SymbolScannerMixin",
]
