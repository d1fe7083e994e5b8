"""Primitive parsers: character classes and leaf values.

Character-class predicates and one-character parsers, plus the three leaf
value parsers (text, integer, atom/boolean). Every parser here takes a
Cursor and returns ParseResult | ParseError without consuming input on
failure.

All character classes are ASCII-only. Unicode letters and digits are not
symbol or number characters.
"""

from sexpreader.constants import (
    ASCII_DIGITS,
    ASCII_LETTERS,
    INT64_MAX,
    INT64_MAX_DIGITS,
    SYMBOL_CHARS,
    WHITESPACE_CHARS,
)
from sexpreader.diagnostics import ErrorTemplate
from sexpreader.syntax.ast import Boolean, Integer, Symbol, Text
from sexpreader.syntax.cursor import Cursor, ParseError, ParseResult
from sexpreader.syntax.parser.combinators import (
    char,
    delimited,
    map_value,
    one_or_more,
    satisfy,
    sequence,
    take_while,
    zero_or_more,
)

__all__ = [
    "alphanumeric",
    "digit",
    "is_alphanumeric",
    "is_atom_char",
    "is_atom_start",
    "is_digit",
    "is_letter",
    "is_symbol_char",
    "is_whitespace",
    "letter",
    "parse_atom_or_boolean",
    "parse_integer_literal",
    "parse_text_literal",
    "symbol_char",
    "whitespace0",
    "whitespace1",
]

# Atom tokens reclassified as booleans.
_BOOLEAN_LITERALS: dict[str, bool] = {"#t": True, "#f": False}

# =============================================================================
# Character classification
# =============================================================================


def is_letter(ch: str) -> bool:
    """ASCII letter a-z / A-Z."""
    return ch in ASCII_LETTERS


def is_digit(ch: str) -> bool:
    """ASCII digit 0-9 (not Unicode digits like ² or ٣)."""
    return ch in ASCII_DIGITS


def is_alphanumeric(ch: str) -> bool:
    return ch in ASCII_LETTERS or ch in ASCII_DIGITS


def is_symbol_char(ch: str) -> bool:
    """Punctuation permitted in symbols: ! # $ % & | * + - / : < = > ? @ ^ _ ~"""
    return ch in SYMBOL_CHARS


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE_CHARS


def is_atom_start(ch: str) -> bool:
    """First character of an atom: letter or symbol character, never a digit."""
    return is_letter(ch) or is_symbol_char(ch)


def is_atom_char(ch: str) -> bool:
    """Continuation character of an atom: alphanumeric or symbol character."""
    return is_alphanumeric(ch) or is_symbol_char(ch)


# =============================================================================
# Character-class parsers
# =============================================================================

letter = satisfy(is_letter, "letter")
digit = satisfy(is_digit, "digit")
alphanumeric = satisfy(is_alphanumeric, "letter or digit")
symbol_char = satisfy(is_symbol_char, "symbol character")

whitespace1 = take_while(is_whitespace, "whitespace", min_count=1)
whitespace0 = take_while(is_whitespace, "whitespace")

_double_quote = char('"')
_not_double_quote = satisfy(lambda ch: ch != '"', "any character except '\"'")
_atom_start = satisfy(is_atom_start, "symbol")
_atom_char = satisfy(is_atom_char, "symbol")

# =============================================================================
# Leaf value parsers
# =============================================================================

_text_body = map_value(
    delimited(_double_quote, zero_or_more(_not_double_quote), _double_quote),
    "".join,
)


def parse_text_literal(cursor: Cursor) -> ParseResult[Text] | ParseError:
    """Parse string literal: "[^"]*"

    No escape processing: a backslash is an ordinary character, so "a\\"b"
    ends at the second quote.

    Examples:
        "hello" -> Text("hello")
        "" -> Text("")

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(Text, new_cursor) on success
        ParseError if the opening quote is missing (UNEXPECTED_CHARACTER) or
        input ends before the closing quote (UNEXPECTED_EOF)
    """
    result = _text_body(cursor)
    if isinstance(result, ParseError):
        return result
    return ParseResult(Text(result.value), result.cursor)


_digit_run = map_value(one_or_more(digit), "".join)


def parse_integer_literal(cursor: Cursor) -> ParseResult[Integer] | ParseError:
    """Parse integer literal: [0-9]+

    No sign handling: "-5" is not an integer here (it parses as a symbol).

    Examples:
        23 -> Integer(23)
        007 -> Integer(7)

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(Integer, new_cursor) on success
        ParseError if no leading digit, or a committed NUMERIC_OVERFLOW if the
        value exceeds the signed 64-bit range
    """
    result = _digit_run(cursor)
    if isinstance(result, ParseError):
        return result

    digits = result.value
    # Length check first: int() refuses very long digit strings
    # (sys.int_info.str_digits_check_threshold) with ValueError.
    significant = digits.lstrip("0") or "0"
    if len(significant) > INT64_MAX_DIGITS or int(significant) > INT64_MAX:
        diagnostic = ErrorTemplate.numeric_overflow(digits)
        return ParseError(diagnostic, cursor, ("integer",), committed=diagnostic.is_committed)

    return ParseResult(Integer(int(significant)), result.cursor)


_atom_token = map_value(
    sequence(_atom_start, zero_or_more(_atom_char)),
    lambda parts: parts[0] + "".join(parts[1]),
)


def parse_atom_or_boolean(cursor: Cursor) -> ParseResult[Symbol | Boolean] | ParseError:
    """Parse atom: (letter | symbol-char) (alnum | symbol-char)*

    The token "#t" becomes Boolean(True) and "#f" becomes Boolean(False);
    every other token is a Symbol. "#true" or "#f1" stay symbols.

    Examples:
        $foo -> Symbol("$foo")
        set! -> Symbol("set!")
        #f -> Boolean(False)

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(Symbol | Boolean, new_cursor) on success
        ParseError if the first character is not a letter or symbol character
    """
    result = _atom_token(cursor)
    if isinstance(result, ParseError):
        return result

    token = result.value
    if token in _BOOLEAN_LITERALS:
        return ParseResult(Boolean(_BOOLEAN_LITERALS[token]), result.cursor)
    return ParseResult(Symbol(token), result.cursor)
