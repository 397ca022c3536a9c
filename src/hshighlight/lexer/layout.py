"""Layout mixin: virtual braces for indentation-delimited blocks.

After a layout keyword (``where``, ``let``, ``do``, ``of`` and friends) the
next token opens a block at its column unless it is an explicit ``{``.
A later line starting left of the block's column closes it. The virtual
braces have no source text, so they carry ``span=None``; a consumer that
only cares about located text can drop them.

Virtual semicolons are not produced.
"""

from __future__ import annotations

from collections.abc import Iterator

from hshighlight.tokens import RawToken, RawTokenKind

K = RawTokenKind

LAYOUT_KEYWORDS = frozenset({K.WHERE, K.LET, K.DO, K.OF, K.MDO, K.REC, K.LCASE})

# Tokens the layout algorithm looks through
TRANSPARENT_KINDS = frozenset(
    {
        K.LINE_COMMENT,
        K.BLOCK_COMMENT,
        K.DOC_COMMENT_NEXT,
        K.DOC_COMMENT_PREV,
        K.DOC_COMMENT_NAMED,
        K.DOC_SECTION,
        K.DOC_OPTIONS,
        K.OPTIONS_PRAGMA,
        K.INCLUDE_PRAGMA,
        K.CLOSE_PRAGMA,
    }
)


class LayoutMixin:
    """Mixin inserting VOCURLY/VCCURLY around implicit blocks.

    The stack holds (column, opener) pairs. Column 0 marks an explicit
    ``{ ... }`` context, which indentation never closes.
    """

    _in_pragma: bool
    _layout_stack: list[tuple[int, RawTokenKind]]
    _layout_pending: RawTokenKind | None
    _last_line: int

    def _apply_layout(self, token: RawToken) -> Iterator[RawToken]:
        """Yield token preceded by any virtual braces it implies."""
        kind = token.kind
        # Pragma openers and bodies are scanned with _in_pragma set
        if kind in TRANSPARENT_KINDS or self._in_pragma or token.span is None:
            yield token
            return

        start = token.span.start
        stack = self._layout_stack
        opened = False

        opener = self._layout_pending
        if opener is not None:
            self._layout_pending = None
            if kind is not K.OCURLY:
                enclosing = stack[-1][0] if stack else 0
                yield RawToken(K.VOCURLY, None)
                if start.col > enclosing:
                    stack.append((start.col, opener))
                    opened = True
                else:
                    yield RawToken(K.VCCURLY, None)

        if not opened and start.line > self._last_line:
            while stack and stack[-1][0] > start.col:
                stack.pop()
                yield RawToken(K.VCCURLY, None)

        if kind is K.IN and stack and stack[-1][0] > 0 and stack[-1][1] is K.LET:
            stack.pop()
            yield RawToken(K.VCCURLY, None)

        if kind is K.OCURLY:
            stack.append((0, K.OCURLY))
        elif kind is K.CCURLY:
            while stack and stack[-1][0] > 0:
                stack.pop()
                yield RawToken(K.VCCURLY, None)
            if stack:
                stack.pop()

        yield token
        self._last_line = token.span.end.line
        if kind in LAYOUT_KEYWORDS:
            self._layout_pending = kind

    def _close_layout(self) -> Iterator[RawToken]:
        """Close every implicit block still open at end of input."""
        if self._layout_pending is not None:
            self._layout_pending = None
            yield RawToken(K.VOCURLY, None)
            yield RawToken(K.VCCURLY, None)
        stack = self._layout_stack
        while stack:
            column, _ = stack.pop()
            if column > 0:
                yield RawToken(K.VCCURLY, None)
