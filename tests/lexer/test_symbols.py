"""Tests for special characters, operators and extension brackets."""

import pytest

from hshighlight.config import ALL_EXTENSIONS, Extension, LexerConfig
from hshighlight.errors import LexerError
from hshighlight.lexer import run
from hshighlight.tokens import RawTokenKind as K


def located(source: str, config: LexerConfig | None = None) -> list[tuple[K, str]]:
    return [(t.kind, t.value) for t in run(source, config) if t.span is not None and t.kind is not K.EOF]


def kinds(source: str, config: LexerConfig | None = None) -> list[K]:
    return [kind for kind, _ in located(source, config)]


def without(*extensions: Extension) -> LexerConfig:
    return LexerConfig(extensions=ALL_EXTENSIONS - set(extensions))


class TestSpecialCharacters:
    def test_all_specials(self) -> None:
        assert kinds("(,);[]`{}") == [
            K.OPAREN,
            K.COMMA,
            K.CPAREN,
            K.SEMI,
            K.OBRACK,
            K.CBRACK,
            K.BACKQUOTE,
            K.OCURLY,
            K.CCURLY,
        ]

    def test_unboxed_tuple(self) -> None:
        assert located("(# x #)") == [(K.OUBXPAREN, "(#"), (K.VARID, "x"), (K.CUBXPAREN, "#)")]

    def test_unboxed_tuple_needs_extension(self) -> None:
        assert kinds("(# x #)", without(Extension.UNBOXED_TUPLES)) == [
            K.OPAREN,
            K.VARSYM,
            K.VARID,
            K.VARSYM,
            K.CPAREN,
        ]

    def test_parallel_array(self) -> None:
        assert kinds("[: x :]") == [K.OPABRACK, K.VARID, K.CPABRACK]


class TestOperators:
    """Reserved and user-defined operators."""

    def test_type_signature(self) -> None:
        assert kinds("x :: Int -> Int") == [K.VARID, K.DCOLON, K.CONID, K.RARROW, K.CONID]

    @pytest.mark.parametrize(
        "source,kind",
        [
            ("<$>", K.VARSYM),
            (">>=", K.VARSYM),
            ("==", K.VARSYM),
            (":|", K.CONSYM),
            ("..", K.DOTDOT),
            ("=>", K.DARROW),
            ("<-", K.LARROW),
            ("|", K.VBAR),
            ("~", K.TILDE),
            ("!", K.BANG),
            ("-", K.MINUS),
            ("⊕", K.VARSYM),
        ],
    )
    def test_single_operator(self, source: str, kind: K) -> None:
        assert located(f"a {source} b")[1] == (kind, source)

    def test_lambda(self) -> None:
        assert kinds("\\x -> x") == [K.LAM, K.VARID, K.RARROW, K.VARID]

    def test_lambda_case(self) -> None:
        assert located("\\case")[0] == (K.LCASE, "\\case")

    def test_lambda_case_needs_whole_word(self) -> None:
        assert kinds("\\cases") == [K.LAM, K.VARID]

    def test_unicode_syntax(self) -> None:
        assert kinds("x ∷ Int → Int") == [K.VARID, K.DCOLON, K.CONID, K.RARROW, K.CONID]

    def test_unicode_syntax_needs_extension(self) -> None:
        assert kinds("x ∷ Int", without(Extension.UNICODE_SYNTAX)) == [K.VARID, K.VARSYM, K.CONID]


class TestTypeApplication:
    def test_prefix_at_is_type_application(self) -> None:
        assert kinds("show @Int") == [K.VARID, K.TYPE_APP, K.CONID]

    def test_as_pattern(self) -> None:
        assert kinds("xs@(x:_)") == [
            K.VARID,
            K.AT,
            K.OPAREN,
            K.VARID,
            K.COLON,
            K.UNDERSCORE,
            K.CPAREN,
        ]

    def test_loose_at_is_as_pattern(self) -> None:
        assert kinds("xs @ ys") == [K.VARID, K.AT, K.VARID]


class TestTemplateHaskell:
    def test_expression_quote(self) -> None:
        assert located("[| x |]") == [(K.OPEN_EXP_QUOTE, "[|"), (K.VARID, "x"), (K.CLOSE_QUOTE, "|]")]

    @pytest.mark.parametrize(
        "opener,kind",
        [
            ("[e|", K.OPEN_EXP_QUOTE),
            ("[p|", K.OPEN_PAT_QUOTE),
            ("[d|", K.OPEN_DEC_QUOTE),
            ("[t|", K.OPEN_TYP_QUOTE),
        ],
    )
    def test_named_quotes(self, opener: str, kind: K) -> None:
        assert located(f"{opener} x |]")[0] == (kind, opener)

    def test_typed_quote(self) -> None:
        assert kinds("[||x||]") == [K.OPEN_TEXP_QUOTE, K.VARID, K.CLOSE_TEXP_QUOTE]

    def test_splices(self) -> None:
        assert located("$(foo) $x $$y $$(z)") == [
            (K.PAREN_ESCAPE, "$("),
            (K.VARID, "foo"),
            (K.CPAREN, ")"),
            (K.ID_ESCAPE, "$x"),
            (K.ID_TY_ESCAPE, "$$y"),
            (K.PAREN_TY_ESCAPE, "$$("),
            (K.VARID, "z"),
            (K.CPAREN, ")"),
        ]

    def test_dollar_is_operator_without_extension(self) -> None:
        assert kinds("f $x", without(Extension.TEMPLATE_HASKELL)) == [K.VARID, K.VARSYM, K.VARID]

    def test_spaced_dollar_is_operator(self) -> None:
        assert kinds("f $ x") == [K.VARID, K.VARSYM, K.VARID]


class TestQuasiQuotes:
    def test_quasi_quote_is_one_token(self) -> None:
        assert located("[sql|SELECT 1|]") == [(K.QUASI_QUOTE, "[sql|SELECT 1|]")]

    def test_qualified_quoter(self) -> None:
        assert located("[Db.sql|x|]") == [(K.QQ_QUASI_QUOTE, "[Db.sql|x|]")]

    def test_body_may_span_lines(self) -> None:
        tokens = [t for t in run("[r|a\nb|]") if t.kind is K.QUASI_QUOTE]
        assert tokens[0].span.end.line == 2

    def test_unterminated(self) -> None:
        with pytest.raises(LexerError, match="unterminated quasi-quotation"):
            run("[sql|SELECT")

    def test_tight_list_comprehension_is_read_as_quasi_quote(self) -> None:
        """Same reading as GHC with QuasiQuotes on: "[x|" opens a quotation."""
        with pytest.raises(LexerError):
            run("[x|x<-xs]")

    def test_spaced_list_comprehension(self) -> None:
        assert kinds("[x | x <- xs]") == [
            K.OBRACK,
            K.VARID,
            K.VBAR,
            K.VARID,
            K.LARROW,
            K.VARID,
            K.CBRACK,
        ]

    def test_tight_list_comprehension_without_extension(self) -> None:
        config = without(Extension.QUASI_QUOTES)
        assert kinds("[x|x<-xs]", config)[:3] == [K.OBRACK, K.VARID, K.VBAR]


class TestOtherExtensions:
    def test_arrow_notation(self) -> None:
        assert kinds("proc x -> f -< x") == [
            K.PROC,
            K.VARID,
            K.RARROW,
            K.VARID,
            K.LARROWTAIL,
            K.VARID,
        ]

    def test_banana_brackets(self) -> None:
        assert kinds("(| e |)") == [K.OPARENBAR, K.VARID, K.CPARENBAR]

    def test_implicit_parameter(self) -> None:
        assert located("?cmp") == [(K.DUPIPVARID, "?cmp")]

    def test_overloaded_label(self) -> None:
        assert located("#name") == [(K.LABELVARID, "#name")]


class TestUnknownAndControl:
    def test_unrecognised_character(self) -> None:
        assert located("x ① y") == [(K.VARID, "x"), (K.UNKNOWN, "①"), (K.VARID, "y")]

    def test_control_character_fails(self) -> None:
        with pytest.raises(LexerError, match="lexical error"):
            run("x = \x01")
