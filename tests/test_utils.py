"""Tests for hshighlight utility modules."""


class TestEscapeHtml:
    """Tests for escape_html function."""

    def test_operators(self) -> None:
        from hshighlight.utils.text import escape_html

        assert escape_html("a <$> b") == "a &lt;$&gt; b"
        assert escape_html("x && y") == "x &amp;&amp; y"

    def test_quotes(self) -> None:
        from hshighlight.utils.text import escape_html

        assert escape_html("'a' \"b\"") == "&#x27;a&#x27; &quot;b&quot;"

    def test_empty_string(self) -> None:
        from hshighlight.utils.text import escape_html

        assert escape_html("") == ""


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_foreign_names(self) -> None:
        from hshighlight.utils.logger import get_logger

        assert get_logger("mymodule").name == "hshighlight.mymodule"

    def test_keeps_package_names(self) -> None:
        from hshighlight.utils.logger import get_logger

        assert get_logger("hshighlight.driver").name == "hshighlight.driver"
        assert get_logger("hshighlight").name == "hshighlight"
