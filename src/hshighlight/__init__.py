"""
hshighlight: Haskell Syntax Highlighting Tokenizer

Splits Haskell source into (category, text) pairs for syntax highlighting.
A built-in lexer reports tokens as display-column spans; the reconstruction
engine slices the original text back out along those spans and fills the
gaps with SPACE tokens.

Quick Start:
    >>> from hshighlight import tokenize_haskell
    >>> tokenize_haskell("f = 1")
    [(VARIABLE, 'f'), (SPACE, ' '), (SYMBOL, '='), (SPACE, ' '), (INTEGER, '1')]

    >>> # Sources that do not lex give None, never a partial list
    >>> tokenize_haskell("{- unterminated") is None
    True

    >>> # HTML with one CSS class per category
    >>> from hshighlight import highlight
    >>> html = highlight("main = pure ()", "haskell")

Installation:
    pip install hshighlight          # Zero runtime dependencies
"""

from hshighlight.categories import CATEGORY_TABLE, HighlightToken, TokenCategory, classify
from hshighlight.config import (
    Extension,
    LexerConfig,
    LexerWarning,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from hshighlight.driver import lex_spans, tokenize, tokenize_haskell
from hshighlight.errors import HighlightError, LexerError, SpanError
from hshighlight.highlighting import HaskellHighlighter, Highlighter, highlight
from hshighlight.lexer import Lexer
from hshighlight.location import SourceLocation, Span
from hshighlight.profiling import TokenizeAccumulator, get_tokenize_accumulator, profiled_tokenize
from hshighlight.reconstruct import Cursor, advance, reconstruct
from hshighlight.serialization import from_dict, from_json, to_dict, to_json
from hshighlight.tokens import RawToken, RawTokenKind

__version__ = "0.1.0"

__all__ = [
    "CATEGORY_TABLE",
    "Cursor",
    "Extension",
    "HaskellHighlighter",
    "HighlightError",
    "HighlightToken",
    "Highlighter",
    "Lexer",
    "LexerConfig",
    "LexerError",
    "LexerWarning",
    "RawToken",
    "RawTokenKind",
    "SourceLocation",
    "Span",
    "SpanError",
    "TokenCategory",
    "TokenizeAccumulator",
    "__version__",
    "advance",
    "classify",
    "from_dict",
    "from_json",
    "get_lexer_config",
    "get_tokenize_accumulator",
    "highlight",
    "lex_spans",
    "lexer_config_context",
    "profiled_tokenize",
    "reconstruct",
    "reset_lexer_config",
    "set_lexer_config",
    "to_dict",
    "to_json",
    "tokenize",
    "tokenize_haskell",
]
