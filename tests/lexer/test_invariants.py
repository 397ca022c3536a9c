"""Property-based tests for lexer and pipeline invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from hshighlight import tokenize_haskell
from hshighlight.categories import TokenCategory
from hshighlight.errors import LexerError
from hshighlight.lexer import run
from hshighlight.tokens import RawToken, RawTokenKind

# Characters that never fail to lex and never form a multi-line token
SAFE_LINE = st.text(alphabet="abXY01 =+()", max_size=60)

# Haskell-flavoured text with the characters most likely to hit edge cases
HASKELLISH = st.text(
    alphabet="abcxyzMN019_'\"\\ \t\n-{}#|[]()$@?:.=<>`,;",
    max_size=200,
)


def _run_or_none(source: str) -> list[RawToken] | None:
    try:
        return run(source)
    except LexerError:
        return None


class TestLexerInvariants:
    """Invariants of the raw token stream."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_only_lexer_errors_escape(self, source: str) -> None:
        """Arbitrary text either lexes or raises LexerError, nothing else."""
        _run_or_none(source)

    @given(HASKELLISH)
    @settings(max_examples=300)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every successful tokenization ends with exactly one EOF token."""
        tokens = _run_or_none(source)
        if tokens is None:
            return
        assert tokens[-1].kind is RawTokenKind.EOF
        assert sum(1 for t in tokens if t.kind is RawTokenKind.EOF) == 1

    @given(HASKELLISH)
    @settings(max_examples=300)
    def test_located_tokens_are_monotonic(self, source: str) -> None:
        """Located tokens never overlap and never run backwards."""
        tokens = _run_or_none(source)
        if tokens is None:
            return
        previous = None
        for token in tokens:
            if token.span is None:
                continue
            assert token.span.start <= token.span.end
            if previous is not None:
                assert previous.end <= token.span.start
            previous = token.span

    @given(HASKELLISH)
    @settings(max_examples=200)
    def test_deterministic(self, source: str) -> None:
        """Lexing the same text twice gives the same stream."""
        assert _run_or_none(source) == _run_or_none(source)


class TestPipelineInvariants:
    """Invariants of the highlight token list."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_output_is_prefix_of_input(self, source: str) -> None:
        tokens = tokenize_haskell(source)
        if tokens is None:
            return
        assert source.startswith("".join(t.text for t in tokens))

    @given(HASKELLISH)
    @settings(max_examples=300)
    def test_output_is_prefix_of_haskellish_input(self, source: str) -> None:
        tokens = tokenize_haskell(source)
        if tokens is None:
            return
        assert source.startswith("".join(t.text for t in tokens))

    @given(SAFE_LINE)
    @settings(max_examples=300)
    def test_single_line_partition(self, source: str) -> None:
        """On one line the tokens cover everything up to trailing blanks."""
        tokens = tokenize_haskell(source)
        assert tokens is not None
        assert "".join(t.text for t in tokens) == source.rstrip(" ")
        assert all(t.text for t in tokens)

    @given(SAFE_LINE)
    @settings(max_examples=200)
    def test_one_space_token_per_gap(self, source: str) -> None:
        tokens = tokenize_haskell(source)
        assert tokens is not None
        for first, second in zip(tokens, tokens[1:]):
            assert not (
                first.category is TokenCategory.SPACE and second.category is TokenCategory.SPACE
            )
        for token in tokens:
            if token.category is TokenCategory.SPACE:
                assert token.text.strip(" ") == ""
