"""Tests for ContextVar-based lexer configuration."""

import pytest

from hshighlight.config import (
    ALL_EXTENSIONS,
    Extension,
    LexerConfig,
    LexerWarning,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from hshighlight.errors import LexerError
from hshighlight.lexer import Lexer, run


@pytest.fixture(autouse=True)
def _reset_config():
    reset_lexer_config()
    yield
    reset_lexer_config()


class TestLexerConfig:
    def test_defaults(self) -> None:
        config = LexerConfig()
        assert config.extensions == ALL_EXTENSIONS
        assert config.warnings == frozenset()
        assert config.source_name == ""
        assert all(config.enabled(ext) for ext in Extension)
        assert not any(config.warns(w) for w in LexerWarning)

    def test_frozen(self) -> None:
        config = LexerConfig()
        with pytest.raises(AttributeError):
            config.source_name = "x"  # type: ignore[misc]

    def test_default_context_config(self) -> None:
        assert get_lexer_config() == LexerConfig()


class TestFromDict:
    def test_names_are_case_insensitive(self) -> None:
        config = LexerConfig.from_dict(
            {"extensions": ["magic_hash", "Arrows"], "warnings": ["TABS"], "source_name": "Main.hs"}
        )
        assert config.extensions == frozenset({Extension.MAGIC_HASH, Extension.ARROWS})
        assert config.warnings == frozenset({LexerWarning.TABS})
        assert config.source_name == "Main.hs"

    def test_missing_keys_keep_defaults(self) -> None:
        assert LexerConfig.from_dict({}) == LexerConfig()

    def test_unknown_keys_ignored(self) -> None:
        assert LexerConfig.from_dict({"color": "blue"}) == LexerConfig()

    @pytest.mark.parametrize(
        "data",
        [{"extensions": ["no_such_extension"]}, {"warnings": ["loud"]}],
    )
    def test_unknown_names_rejected(self, data: dict) -> None:
        with pytest.raises(ValueError, match="Unknown"):
            LexerConfig.from_dict(data)


class TestContext:
    def test_set_and_reset(self) -> None:
        config = LexerConfig(source_name="A.hs")
        set_lexer_config(config)
        assert get_lexer_config() is config
        reset_lexer_config()
        assert get_lexer_config() == LexerConfig()

    def test_context_manager_restores_previous(self) -> None:
        outer = LexerConfig(source_name="Outer.hs")
        inner = LexerConfig(source_name="Inner.hs")
        set_lexer_config(outer)
        with lexer_config_context(inner):
            assert get_lexer_config() is inner
        assert get_lexer_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError), lexer_config_context(LexerConfig(source_name="X.hs")):
            raise RuntimeError("boom")
        assert get_lexer_config() == LexerConfig()

    def test_lexer_reads_config_at_construction(self) -> None:
        no_th = LexerConfig(extensions=ALL_EXTENSIONS - {Extension.TEMPLATE_HASKELL})
        with lexer_config_context(no_th):
            lexer = Lexer("'x")
        with pytest.raises(LexerError):
            list(lexer.tokenize())


class TestWarnings:
    def test_tab_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        config = LexerConfig(warnings=frozenset({LexerWarning.TABS}), source_name="Tabs.hs")
        with caplog.at_level("WARNING"):
            run("f =\n\tx\n\ty", config)
        assert "Tabs.hs:2:1: tab character found (2 in total)" in caplog.text

    def test_no_tab_warning_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING"):
            run("\tx")
        assert caplog.text == ""
