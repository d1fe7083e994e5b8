"""Shared constants for sexpreader.

Centralized configuration constants used by the syntax and diagnostics
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested lists and quoting
- Input limits: DoS prevention via size constraints
- Grammar: Character classes and integer range

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Grammar
    "SYMBOL_CHARS",
    "WHITESPACE_CHARS",
    "ASCII_DIGITS",
    "ASCII_LETTERS",
    "INT64_MIN",
    "INT64_MAX",
    "INT64_MAX_DIGITS",
    "QUOTE_SYMBOL",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of parentheses and quote prefixes.
# Each level of "(" or "'" counts once. 64 levels is far beyond hand-written
# Lisp and still fits the default recursion limit (64 * 12 < 1000 - 50).
MAX_DEPTH: int = 64

# Python stack frames consumed per nesting level by the recursive rules.
# The longest chain is a list element followed by a nested form: eleven frames
# from parse_expr through the dotted-list attempt and repetition back to
# parse_expr. One extra frame per level is headroom.
# Used to clamp max depth against sys.getrecursionlimit().
FRAMES_PER_NESTING_LEVEL: int = 12

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source length in characters (10 million).
MAX_SOURCE_SIZE: int = 10_000_000

# ============================================================================
# GRAMMAR
# ============================================================================

# Punctuation permitted in symbols. "#" is included so #t / #f lex as atoms
# before being reclassified as booleans.
SYMBOL_CHARS: frozenset[str] = frozenset("!#$%&|*+-/:<=>?@^_~")

# ASCII whitespace accepted as a list separator.
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\n\r\f\v")

# ASCII only. str.isdigit() / str.isalpha() accept Unicode categories.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# Signed 64-bit range for Integer literals.
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# len(str(INT64_MAX)). Longer digit runs (ignoring leading zeros) overflow
# without needing int() conversion.
INT64_MAX_DIGITS: int = 19

# Head symbol of the list produced by the ' prefix.
QUOTE_SYMBOL: str = "quote"
