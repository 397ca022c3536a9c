"""ContextVar-based lexer configuration for hshighlight.

The active LexerConfig lives in a ContextVar.
The default configuration is the permissive one used for highlighting:
every language extension enabled, no warnings reported, anonymous source.

Thread Safety:
    Each thread and asyncio task sees its own value. LexerConfig is frozen,
    so one instance can be shared freely.

Usage:
    # Default: everything the lexer knows is accepted
    tokens = tokenize("f = 1")

    # Restricted lexing (advanced)
    from hshighlight.config import LexerConfig, Extension, lexer_config_context

    config = LexerConfig(extensions=frozenset({Extension.MAGIC_HASH}))
    with lexer_config_context(config):
        tokens = tokenize("proc x -> f -< x")  # proc is a plain identifier here

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum, auto


class Extension(Enum):
    """Language extensions that change what the lexer recognizes."""

    MAGIC_HASH = auto()  # 1#, 'x'#, "s"#, name#
    TEMPLATE_HASKELL = auto()  # [| |], $x, $(, ''T
    QUASI_QUOTES = auto()  # [name| ... |]
    ARROWS = auto()  # proc, rec, (| |), -<, >-
    UNBOXED_TUPLES = auto()  # (# #)
    PARALLEL_ARRAYS = auto()  # [: :]
    RECURSIVE_DO = auto()  # mdo, rec
    EXPLICIT_FORALL = auto()  # forall
    TYPE_FAMILIES = auto()  # family
    ROLE_ANNOTATIONS = auto()  # role
    PATTERN_SYNONYMS = auto()  # pattern
    STATIC_POINTERS = auto()  # static
    DERIVING_STRATEGIES = auto()  # stock, anyclass
    TRANSFORM_LIST_COMP = auto()  # group, by, using
    FFI = auto()  # export, safe, ccall, ...
    IMPLICIT_PARAMS = auto()  # ?x
    OVERLOADED_LABELS = auto()  # #x
    BINARY_LITERALS = auto()  # 0b101
    NEGATIVE_LITERALS = auto()  # -1 as a single literal
    NUMERIC_UNDERSCORES = auto()  # 1_000
    LAMBDA_CASE = auto()  # \case
    UNICODE_SYNTAX = auto()  # ∷ ⇒ → ← ∀
    TYPE_APPLICATIONS = auto()  # f @Int
    BACKPACK = auto()  # unit, signature, dependency, requires
    HADDOCK = auto()  # -- |, -- ^, -- $, -- *


class LexerWarning(Enum):
    """Diagnostics the lexer can report through logging."""

    TABS = auto()  # tab characters in source
    UNRECOGNISED_PRAGMAS = auto()  # {-# UNKNOWN #-}


ALL_EXTENSIONS: frozenset[Extension] = frozenset(Extension)


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        extensions: Extensions the lexer accepts (default: all)
        warnings: Warnings reported through logging (default: none)
        source_name: Name of the source unit, used in error messages only

    """

    extensions: frozenset[Extension] = ALL_EXTENSIONS
    warnings: frozenset[LexerWarning] = frozenset()
    source_name: str = ""

    def enabled(self, extension: Extension) -> bool:
        """Check if an extension is enabled."""
        return extension in self.extensions

    def warns(self, warning: LexerWarning) -> bool:
        """Check if a warning is reported."""
        return warning in self.warnings

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexerConfig:
        """Create LexerConfig from dictionary.

        Extension and warning names are matched case-insensitively against
        the enum member names. Unknown top-level keys are silently ignored;
        unknown extension or warning names raise ValueError.

        Args:
            config_dict: Dictionary with config values, e.g.
                ``{"extensions": ["magic_hash"], "warnings": ["tabs"]}``

        Returns:
            New LexerConfig instance with values from dict.

        Example:
            >>> config = LexerConfig.from_dict({"extensions": ["arrows"]})
            >>> config.enabled(Extension.ARROWS)
            True
            >>> config.enabled(Extension.MAGIC_HASH)
            False

        """
        kwargs: dict[str, object] = {}
        if "extensions" in config_dict:
            kwargs["extensions"] = frozenset(
                _lookup(Extension, name) for name in config_dict["extensions"]
            )
        if "warnings" in config_dict:
            kwargs["warnings"] = frozenset(
                _lookup(LexerWarning, name) for name in config_dict["warnings"]
            )
        if "source_name" in config_dict:
            kwargs["source_name"] = str(config_dict["source_name"])
        return cls(**kwargs)  # type: ignore[arg-type]


def _lookup(enum_cls: type[Enum], name: str) -> Enum:
    try:
        return enum_cls[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown {enum_cls.__name__} name: {name!r}") from None


_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar("lexer_config", default=_DEFAULT_CONFIG)


def get_lexer_config() -> LexerConfig:
    """Config used by a Lexer constructed without an explicit one."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Install config for the current context until reset or replaced."""
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Go back to the permissive default (all extensions, no warnings)."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Lex with config inside the block.

    The previous config comes back on exit, including exit by exception.
    Configs are read when a Lexer is created, so a lexer built inside the
    block keeps config after the block ends.

    Example:
        >>> strict = LexerConfig(extensions=frozenset())
        >>> with lexer_config_context(strict):
        ...     tokens = tokenize("forall a. a")  # forall is an identifier
    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "ALL_EXTENSIONS",
    "Extension",
    "LexerConfig",
    "LexerWarning",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
]
