"""Syntax highlighting protocol and HTML rendering for Haskell.

Renders highlight tokens as HTML with one CSS class per category.

Protocol Alignment:
    The Highlighter protocol matches the interface used by documentation
    builders for pluggable highlighting:
    - highlight(code, language, hl_lines, show_linenos) -> str
    - supports_language(language) -> bool

Usage:
    from hshighlight.highlighting import highlight

    html = highlight("main = pure ()", "haskell")
    # <pre class="highlight"><code class="language-haskell">
    # <span class="hs-variable">main</span> <span class="hs-symbol">=</span> ...

    # Swap in a callable, e.g. one that only escapes
    from hshighlight.highlighting import set_highlighter
    from hshighlight.utils.text import escape_html

    set_highlighter(lambda code, language: f"<pre>{escape_html(code)}</pre>")
    set_highlighter(None)  # back to HaskellHighlighter
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from hshighlight.categories import HighlightToken, TokenCategory
from hshighlight.driver import tokenize_haskell
from hshighlight.utils.logger import get_logger
from hshighlight.utils.text import escape_html

logger = get_logger(__name__)

LANGUAGE_ALIASES = frozenset({"haskell", "hs"})


class Highlighter(Protocol):
    """Anything that can turn a code block into highlighted HTML.

    HaskellHighlighter is the built-in implementation. Replacements are
    installed with set_highlighter().

    Thread Safety:
        highlight() must not keep per-call state on the instance; one
        highlighter is shared by every caller.
    """

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Render code as an HTML block.

        Args:
            code: Raw source text of the block
            language: Language tag of the block ("haskell", "hs", ...)
            hl_lines: 1-based lines wrapped in an emphasis span
            show_linenos: Prefix every line with its number

        Returns:
            A complete ``<pre>`` element

        Contract:
            - Never raises; text that cannot be tokenized is shown unstyled
            - All source text is HTML-escaped
            - Styling is by CSS class only
            - Unsupported languages get a plain escaped block
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Whether highlight() styles blocks tagged with language.

        Must not raise. Tags are compared case-insensitively and
        aliases are accepted.
        """
        ...


# Plain (code, language) -> html callables are accepted too
SimpleHighlighter = Callable[[str, str], str]


def render_tokens(code: str, tokens: Sequence[HighlightToken]) -> list[str]:
    """Render tokens as HTML, one string per source line.

    Spans never cross a line break. Source text after the last token is
    appended unstyled so the output always shows the whole of ``code``.
    """
    pieces: list[tuple[TokenCategory | None, str]] = [
        (token.category, token.text) for token in tokens
    ]
    covered = sum(len(text) for _, text in pieces)
    if covered < len(code):
        pieces.append((None, code[covered:]))

    lines: list[list[str]] = [[]]
    for category, text in pieces:
        for index, part in enumerate(text.split("\n")):
            if index:
                lines.append([])
            if not part:
                continue
            escaped = escape_html(part)
            if category is None or category is TokenCategory.SPACE:
                lines[-1].append(escaped)
            else:
                lines[-1].append(f'<span class="hs-{category.value}">{escaped}</span>')
    return ["".join(line) for line in lines]


def _decorate(lines: list[str], hl_lines: list[int] | None, show_linenos: bool) -> list[str]:
    emphasized = set(hl_lines) if hl_lines else set()
    width = len(str(len(lines)))
    result: list[str] = []
    for number, line in enumerate(lines, start=1):
        if number in emphasized:
            line = f'<span class="hll">{line}</span>'
        if show_linenos:
            line = f'<span class="lineno">{number:>{width}} </span>{line}'
        result.append(line)
    return result


class HaskellHighlighter:
    """Haskell highlighter implementing the Highlighter protocol."""

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight Haskell code; other languages get a plain block."""
        if not self.supports_language(language):
            return _plain(code, language)

        tokens = tokenize_haskell(code)
        if tokens is None:
            logger.debug("Rendering unlexable Haskell block as plain text")
            tokens = []
        lines = _decorate(render_tokens(code, tokens), hl_lines, show_linenos)
        body = "\n".join(lines)
        return f'<pre class="highlight"><code class="language-haskell">{body}</code></pre>'

    def supports_language(self, language: str) -> bool:
        return language.lower() in LANGUAGE_ALIASES


_highlighter: Highlighter | SimpleHighlighter | None = None


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the global syntax highlighter.

    Args:
        highlighter: A Highlighter protocol implementation, or a simple
            function that takes (code, language) and returns HTML.
            Pass None to restore the built-in Haskell highlighter.
    """
    global _highlighter
    _highlighter = highlighter


def get_highlighter() -> Highlighter | SimpleHighlighter:
    """Get the current highlighter (the built-in one unless replaced)."""
    global _highlighter
    if _highlighter is None:
        _highlighter = HaskellHighlighter()
    return _highlighter


def highlight(
    code: str,
    language: str = "haskell",
    *,
    hl_lines: list[int] | None = None,
    show_linenos: bool = False,
) -> str:
    """Highlight code using the configured highlighter.

    Args:
        code: Source code to highlight
        language: Language identifier
        hl_lines: 1-indexed line numbers to emphasize (optional)
        show_linenos: Include line numbers in output

    Returns:
        HTML markup
    """
    highlighter = get_highlighter()
    # Check if it's the full protocol or a simple callable
    if hasattr(highlighter, "highlight") and callable(highlighter.highlight):
        return highlighter.highlight(code, language, hl_lines=hl_lines, show_linenos=show_linenos)
    return highlighter(code, language)


def _plain(code: str, language: str) -> str:
    lang_class = f' class="language-{escape_html(language)}"' if language else ""
    return f"<pre><code{lang_class}>{escape_html(code)}</code></pre>"
