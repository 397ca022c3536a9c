"""Lexical driver: run the lexer, classify, and reconstruct.

The lexer is run to completion before anything is classified, so a lexical
error anywhere in the source means no tokens at all. Tokens without a
source position (layout braces) and the EOF marker are dropped; only
located tokens reach the reconstruction engine.

Example:
    >>> from hshighlight import tokenize_haskell
    >>> tokenize_haskell("f = 1")
    [(VARIABLE, 'f'), (SPACE, ' '), (SYMBOL, '='), (SPACE, ' '), (INTEGER, '1')]
    >>> tokenize_haskell('x = "unterminated') is None
    True

"""

from __future__ import annotations

from hshighlight.categories import HighlightToken, TokenCategory, classify
from hshighlight.config import LexerConfig
from hshighlight.errors import LexerError
from hshighlight.lexer import run
from hshighlight.location import Span
from hshighlight.profiling import get_tokenize_accumulator
from hshighlight.reconstruct import reconstruct
from hshighlight.tokens import RawTokenKind
from hshighlight.utils.logger import get_logger

logger = get_logger(__name__)


def lex_spans(
    source: str,
    config: LexerConfig | None = None,
) -> list[tuple[TokenCategory, Span]]:
    """Lex source and classify every located token.

    Raises:
        LexerError: If the source cannot be lexed
    """
    raw = run(source, config)
    spans: list[tuple[TokenCategory, Span]] = []
    dropped = 0
    for token in raw:
        if token.kind is RawTokenKind.EOF:
            continue
        if token.span is None:
            dropped += 1
            continue
        spans.append((classify(token.kind), token.span))
    if dropped:
        logger.debug("Dropped %d token(s) without a source position", dropped)
    return spans


def tokenize(source: str, config: LexerConfig | None = None) -> list[HighlightToken]:
    """Tokenize Haskell source into highlight tokens.

    Args:
        source: Haskell source text
        config: Lexer configuration (defaults to the active context config)

    Returns:
        Tokens whose texts concatenate to a prefix of source

    Raises:
        LexerError: If the source cannot be lexed
    """
    acc = get_tokenize_accumulator()
    try:
        spans = lex_spans(source, config)
    except LexerError:
        if acc is not None:
            acc.record_failure(len(source))
        raise
    tokens = list(reconstruct(source, spans))
    if acc is not None:
        acc.record_tokenize(len(source), len(tokens))
    return tokens


def tokenize_haskell(source: str) -> list[HighlightToken] | None:
    """Tokenize Haskell source, or return None if it does not lex.

    Never returns a partial list.
    """
    try:
        return tokenize(source)
    except LexerError as e:
        logger.debug("Lexing failed: %s", e)
        return None
