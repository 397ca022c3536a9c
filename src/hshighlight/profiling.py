"""TokenizeAccumulator: opt-in profiling for Haskell tokenization.

This module provides accumulated metrics while tokenizing:
- Total elapsed time
- Source length
- Highlight token count
- Sources that failed to lex

Zero overhead when disabled (get_tokenize_accumulator() returns None).

Example:
    from hshighlight import tokenize_haskell
    from hshighlight.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        tokens = tokenize_haskell("main = pure ()")

    print(metrics.summary())
    # {"total_ms": 0.4, "source_length": 14, "token_count": 9, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TokenizeAccumulator:
    """Accumulated metrics over tokenize calls.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of the sources tokenized.
        token_count: Total highlight tokens produced.
        tokenize_calls: Number of tokenize calls recorded.
        failures: Number of calls whose source failed to lex.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    tokenize_calls: int = 0
    failures: int = 0

    def record_tokenize(self, source_length: int, token_count: int) -> None:
        """Record a successful tokenize call."""
        self.tokenize_calls += 1
        self.source_length += source_length
        self.token_count += token_count

    def record_failure(self, source_length: int) -> None:
        """Record a tokenize call that raised a lexical error."""
        self.tokenize_calls += 1
        self.failures += 1
        self.source_length += source_length

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms, source_length, token_count, tokenize_calls, failures.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "tokenize_calls": self.tokenize_calls,
            "failures": self.failures,
        }


_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Context manager for profiled tokenization.

    Yields:
        TokenizeAccumulator populated by every tokenize call in the block.

    """
    acc = TokenizeAccumulator()
    token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
