"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Reference: Haskell 2010 report, chapter 2 (Lexical Structure)

Usage:
    from hshighlight.lexer.charsets import ASCII_SYMBOLS

    if char in ASCII_SYMBOLS:  # O(1) lookup
        ...
"""

import unicodedata

# Haskell 2010: ascSymbol
ASCII_SYMBOLS: frozenset[str] = frozenset("!#$%&*+./<=>?@\\^|-~:")

# Haskell 2010: special
SPECIAL_CHARS: frozenset[str] = frozenset("(),;[]`{}")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

DECIMAL_DIGITS: frozenset[str] = frozenset("0123456789")
OCTAL_DIGITS: frozenset[str] = frozenset("01234567")
BINARY_DIGITS: frozenset[str] = frozenset("01")
HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Unicode categories that count as symbol characters (uniSymbol)
_SYMBOL_CATEGORIES = frozenset({"Pc", "Pd", "Po", "Sm", "Sc", "Sk", "So"})

# Characters that open a bracket; an "@" after one of these is prefix
OPENING_CHARS: frozenset[str] = frozenset("([{,;")


def is_symbol_char(char: str) -> bool:
    """Check if character can appear in an operator."""
    if not char:
        return False
    if char < "\x80":
        return char in ASCII_SYMBOLS
    return unicodedata.category(char) in _SYMBOL_CATEGORIES


def is_whitespace(char: str) -> bool:
    """Check if character is skipped between lexemes (ASCII or Unicode space)."""
    if char in WHITESPACE:
        return True
    return char >= "\x80" and char.isspace()


def is_ident_start(char: str) -> bool:
    """Check if character can start a variable or constructor name."""
    return char == "_" or char.isalpha()


def is_upper_start(char: str) -> bool:
    """Check if character starts a constructor name (uppercase or titlecase)."""
    return char.isupper() or (char >= "\x80" and unicodedata.category(char) == "Lt")


def is_varid_start(char: str) -> bool:
    """Check if character starts a variable name."""
    return bool(char) and is_ident_start(char) and not is_upper_start(char)


def is_ident_char(char: str) -> bool:
    """Check if character can continue a name."""
    return char == "_" or char == "'" or char.isalnum()


def is_control_char(char: str) -> bool:
    """Check if character is a control character that may not appear in source."""
    return unicodedata.category(char) == "Cc" and char not in WHITESPACE
