"""S-expression value model.

The Expression union is closed: every parsed value is exactly one of
Symbol, Integer, Text, Boolean, List, DottedPair. Nodes are frozen and hold
their children in tuples, so a tree built by the parser is immutable and
acyclic.

Includes type guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from sexpreader.constants import INT64_MAX, INT64_MIN, QUOTE_SYMBOL

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Atoms
    "Symbol",
    "Integer",
    "Text",
    "Boolean",
    # Containers
    "List",
    "DottedPair",
    # Type aliases
    "Atom",
    "Expression",
    # Constructors
    "quoted",
]

# ============================================================================
# ATOMS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Symbol:
    """User-defined name: foo, $bar, set!, <=>

    Never "#t" or "#f"; those parse as Boolean.
    """

    name: str

    @staticmethod
    def guard(expr: object) -> TypeIs["Symbol"]:
        """Type guard for Symbol."""
        return isinstance(expr, Symbol)


@dataclass(frozen=True, slots=True)
class Integer:
    """Integer literal in signed 64-bit range.

    Example:
        42 -> Integer(42)
    """

    value: int

    def __post_init__(self) -> None:
        """Validate 64-bit range."""
        if not INT64_MIN <= self.value <= INT64_MAX:
            msg = f"Integer value {self.value} outside signed 64-bit range"
            raise ValueError(msg)

    @staticmethod
    def guard(expr: object) -> TypeIs["Integer"]:
        """Type guard for Integer."""
        return isinstance(expr, Integer)


@dataclass(frozen=True, slots=True)
class Text:
    """String literal contents, without the surrounding quotes.

    Example:
        "hello" -> Text("hello")
    """

    value: str

    @staticmethod
    def guard(expr: object) -> TypeIs["Text"]:
        """Type guard for Text."""
        return isinstance(expr, Text)


@dataclass(frozen=True, slots=True)
class Boolean:
    """Boolean literal: #t or #f."""

    value: bool

    @staticmethod
    def guard(expr: object) -> TypeIs["Boolean"]:
        """Type guard for Boolean."""
        return isinstance(expr, Boolean)


# ============================================================================
# CONTAINERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class List:
    """Proper list.

    Examples:
        () -> List(())
        (a 1 "b") -> List((Symbol("a"), Integer(1), Text("b")))
        'x -> List((Symbol("quote"), Symbol("x")))
    """

    items: tuple["Expression", ...]

    @staticmethod
    def guard(expr: object) -> TypeIs["List"]:
        """Type guard for List."""
        return isinstance(expr, List)


@dataclass(frozen=True, slots=True)
class DottedPair:
    """Improper list: head elements followed by one tail expression.

    The head may be empty: "( . x)" is accepted by the grammar and yields
    DottedPair((), Symbol("x")).

    Example:
        (a b . c) -> DottedPair((Symbol("a"), Symbol("b")), Symbol("c"))
    """

    head: tuple["Expression", ...]
    tail: "Expression"

    @staticmethod
    def guard(expr: object) -> TypeIs["DottedPair"]:
        """Type guard for DottedPair."""
        return isinstance(expr, DottedPair)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Atom = Symbol | Integer | Text | Boolean

type Expression = Symbol | Integer | Text | Boolean | List | DottedPair


def quoted(expr: Expression) -> List:
    """Desugar 'expr into (quote expr)."""
    return List((Symbol(QUOTE_SYMBOL), expr))
