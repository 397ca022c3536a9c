"""Haskell lexer for hshighlight.

Produces RawTokens whose spans are measured in display columns (tabs
advance to the next multiple-of-8 stop plus one). The lexer either yields
a complete stream ending in EOF or raises LexerError; a partial stream is
never meaningful.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, run
├── core.py              # Lexer class (mixin composition + navigation)
├── charsets.py          # Character classification
├── reserved.py          # Keywords, reserved operators, pragma names
├── layout.py            # Virtual braces (span=None)
└── scanners/            # One mixin per lexeme family
    ├── comment.py       # Line/block/Haddock comments
    ├── pragma.py        # {-# ... #-}
    ├── identifier.py    # Names, qualified names, keywords
    ├── numeric.py       # Integer and rational literals
    ├── literal.py       # Strings and characters
    └── symbol.py        # Special characters, operators, TH brackets

Usage:
    >>> from hshighlight.lexer import run
    >>> [token.kind.name for token in run("main = pure ()")]
    ['VARID', 'EQUAL', 'VARID', 'OPAREN', 'CPAREN', 'EOF']

"""

from __future__ import annotations

from hshighlight.config import LexerConfig
from hshighlight.lexer.core import Lexer
from hshighlight.tokens import RawToken

__all__ = ["Lexer", "run"]


def run(source: str, config: LexerConfig | None = None) -> list[RawToken]:
    """Lex source completely.

    Raises:
        LexerError: If any part of the source fails to lex
    """
    return list(Lexer(source, config).tokenize())
