"""Tests for virtual braces inserted around layout blocks.

Virtual braces carry no span; they exist so the driver can show that
unlocatable tokens are dropped rather than highlighted.
"""

from hshighlight.lexer import run
from hshighlight.tokens import RawTokenKind as K


def kinds(source: str) -> list[K]:
    return [t.kind for t in run(source)]


class TestImplicitBlocks:
    def test_do_block_closed_at_end_of_input(self) -> None:
        assert kinds("f = do x") == [
            K.VARID,
            K.EQUAL,
            K.DO,
            K.VOCURLY,
            K.VARID,
            K.VCCURLY,
            K.EOF,
        ]

    def test_where_block_closed_by_dedent(self) -> None:
        source = "f = x\n  where\n    x = 1\ng = 2"
        assert kinds(source) == [
            K.VARID,
            K.EQUAL,
            K.VARID,
            K.WHERE,
            K.VOCURLY,
            K.VARID,
            K.EQUAL,
            K.INTEGER,
            K.VCCURLY,
            K.VARID,
            K.EQUAL,
            K.INTEGER,
            K.EOF,
        ]

    def test_let_closed_by_in(self) -> None:
        assert kinds("let x = 1 in x") == [
            K.LET,
            K.VOCURLY,
            K.VARID,
            K.EQUAL,
            K.INTEGER,
            K.VCCURLY,
            K.IN,
            K.VARID,
            K.EOF,
        ]

    def test_keyword_at_end_of_input_opens_empty_block(self) -> None:
        assert kinds("x where") == [K.VARID, K.WHERE, K.VOCURLY, K.VCCURLY, K.EOF]

    def test_comments_do_not_open_blocks(self) -> None:
        assert kinds("do -- c\n  x") == [
            K.DO,
            K.LINE_COMMENT,
            K.VOCURLY,
            K.VARID,
            K.VCCURLY,
            K.EOF,
        ]


class TestExplicitBraces:
    def test_explicit_block_has_no_virtual_braces(self) -> None:
        assert kinds("do { x }") == [K.DO, K.OCURLY, K.VARID, K.CCURLY, K.EOF]

    def test_closing_brace_closes_inner_implicit_blocks(self) -> None:
        assert kinds("{ do x }") == [
            K.OCURLY,
            K.DO,
            K.VOCURLY,
            K.VARID,
            K.VCCURLY,
            K.CCURLY,
            K.EOF,
        ]


class TestVirtualTokens:
    def test_virtual_tokens_have_no_span(self) -> None:
        virtual = [t for t in run("f = do x") if t.kind in (K.VOCURLY, K.VCCURLY)]
        assert len(virtual) == 2
        assert all(t.span is None and not t.is_located for t in virtual)
        assert all(t.value == "" for t in virtual)
