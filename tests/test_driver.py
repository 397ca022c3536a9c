"""Tests for the lexical driver (lex_spans, tokenize, tokenize_haskell)."""

import logging

import pytest

from hshighlight import lex_spans, tokenize, tokenize_haskell
from hshighlight.categories import TokenCategory
from hshighlight.config import ALL_EXTENSIONS, Extension, LexerConfig, lexer_config_context
from hshighlight.errors import LexerError
from hshighlight.lexer import run
from hshighlight.location import Span

C = TokenCategory


def pairs(tokens) -> list[tuple[TokenCategory, str]]:
    return [(t.category, t.text) for t in tokens]


class TestLexSpans:
    def test_classified_spans(self) -> None:
        assert lex_spans("f = 1") == [
            (C.VARIABLE, Span.of(1, 1, 1, 2)),
            (C.SYMBOL, Span.of(1, 3, 1, 4)),
            (C.INTEGER, Span.of(1, 5, 1, 6)),
        ]

    def test_eof_is_dropped(self) -> None:
        assert lex_spans("") == []

    def test_unlocatable_tokens_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        source = "f = do x"
        assert len(run(source)) == 7
        with caplog.at_level(logging.DEBUG, logger="hshighlight"):
            spans = lex_spans(source)
        assert [c for c, _ in spans] == [C.VARIABLE, C.SYMBOL, C.KEYWORD, C.VARIABLE]
        assert "Dropped 2 token(s)" in caplog.text

    def test_tab_start_column(self) -> None:
        assert lex_spans("\tfoo") == [(C.VARIABLE, Span.of(1, 9, 1, 12))]


class TestTokenize:
    def test_raises_on_lexical_error(self) -> None:
        with pytest.raises(LexerError):
            tokenize('x = "oops')

    def test_explicit_config(self) -> None:
        config = LexerConfig(extensions=ALL_EXTENSIONS - {Extension.EXPLICIT_FORALL})
        assert pairs(tokenize("forall", config)) == [(C.VARIABLE, "forall")]

    def test_context_config(self) -> None:
        config = LexerConfig(extensions=ALL_EXTENSIONS - {Extension.EXPLICIT_FORALL})
        with lexer_config_context(config):
            assert pairs(tokenize("forall")) == [(C.VARIABLE, "forall")]
        assert pairs(tokenize("forall")) == [(C.KEYWORD, "forall")]

    def test_source_name_in_error(self) -> None:
        config = LexerConfig(source_name="Main.hs")
        with pytest.raises(LexerError, match=r"^Main\.hs:1:5 "):
            tokenize('x = "oops', config)

    def test_declaration(self) -> None:
        assert pairs(tokenize("data T = A | B")) == [
            (C.KEYWORD, "data"),
            (C.SPACE, " "),
            (C.CONSTRUCTOR, "T"),
            (C.SPACE, " "),
            (C.SYMBOL, "="),
            (C.SPACE, " "),
            (C.CONSTRUCTOR, "A"),
            (C.SPACE, " "),
            (C.SYMBOL, "|"),
            (C.SPACE, " "),
            (C.CONSTRUCTOR, "B"),
        ]

    def test_operators_and_literals(self) -> None:
        assert pairs(tokenize("xs ++ ['a', \"b\"] . 2.5")) == [
            (C.VARIABLE, "xs"),
            (C.SPACE, " "),
            (C.OPERATOR, "++"),
            (C.SPACE, " "),
            (C.SYMBOL, "["),
            (C.CHAR, "'a'"),
            (C.SYMBOL, ","),
            (C.SPACE, " "),
            (C.STRING, '"b"'),
            (C.SYMBOL, "]"),
            (C.SPACE, " "),
            (C.OPERATOR, "."),
            (C.SPACE, " "),
            (C.RATIONAL, "2.5"),
        ]

    def test_comment_and_pragma(self) -> None:
        assert pairs(tokenize("{-# INLINE f #-} -- c")) == [
            (C.PRAGMA, "{-# INLINE"),
            (C.SPACE, " "),
            (C.VARIABLE, "f"),
            (C.SPACE, " "),
            (C.PRAGMA, "#-}"),
            (C.SPACE, " "),
            (C.COMMENT, "-- c"),
        ]


class TestTokenizeHaskell:
    def test_success(self) -> None:
        assert pairs(tokenize_haskell("f = 1")) == [
            (C.VARIABLE, "f"),
            (C.SPACE, " "),
            (C.SYMBOL, "="),
            (C.SPACE, " "),
            (C.INTEGER, "1"),
        ]

    @pytest.mark.parametrize(
        "source",
        ['x = "oops', "{- never closed", "{-# INLINE f", "'\\q'", "[q|open", "x = \x01"],
    )
    def test_failure_returns_none(self, source: str) -> None:
        assert tokenize_haskell(source) is None

    def test_failure_after_valid_prefix_gives_no_tokens(self) -> None:
        assert tokenize_haskell("main = pure ()\nbad = \"") is None

    def test_empty_source(self) -> None:
        assert tokenize_haskell("") == []

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="hshighlight"):
            tokenize_haskell("{- x")
        assert "Lexing failed" in caplog.text
