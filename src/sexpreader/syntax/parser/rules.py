"""Grammar rules for the S-expression parser.

This module provides the composite parsing rules: lists, dotted lists,
quoting, the parenthesized-list dispatcher, and the recursive parse_expr.

All rules are co-located in a single module because they are mutually
recursive through parse_expr.

Grammar:
    expr        := atom | integer | text | quoted | "(" (dotted-list | list) ")"
    quoted      := "'" expr
    list        := (expr (whitespace+ expr)*)?
    dotted-list := list whitespace* "." whitespace* expr

Backtracking:
    The dispatcher tries dotted-list before list. Both begin with the same
    element sequence, so parse_list_items memoizes its result per position
    in the ParseContext (packrat style); the fallback to a plain list reuses
    the elements instead of parsing them again. Without this, every nesting
    level would double the work.

Error reporting:
    parse_expr and parse_dotted_list record their failures in the
    ParseContext. The entry point reports the deepest recorded failure, so
    "(a (b c]" points at "]" rather than at the space the outer list
    stopped on.

Security:
    Includes configurable nesting depth limit to prevent stack exhaustion
    via deeply nested input (e.g., (((((...))))) or ''''''x).
"""

from dataclasses import dataclass, field
from functools import partial

from sexpreader.constants import MAX_DEPTH
from sexpreader.diagnostics import ErrorTemplate
from sexpreader.syntax.ast import DottedPair, Expression, List, quoted
from sexpreader.syntax.cursor import Cursor, ParseError, ParseResult
from sexpreader.syntax.parser.combinators import (
    alternation,
    char,
    map_value,
    merge_failures,
    separated_list,
    sequence,
    terminated,
)
from sexpreader.syntax.parser.primitives import (
    parse_atom_or_boolean,
    parse_integer_literal,
    parse_text_literal,
    whitespace0,
    whitespace1,
)

__all__ = [
    "ParseContext",
    "parse_dotted",
    "parse_dotted_list",
    "parse_expr",
    "parse_list",
    "parse_list_items",
    "parse_parenthesized",
    "parse_quoted",
]

_open_paren = char("(")
_close_paren = char(")")
_quote = char("'")
_dot = char(".")


@dataclass(slots=True)
class ParseContext:
    """Explicit context for one parse.

    Replaces global state with explicit parameter passing for:
    - Thread safety without global state
    - Easier testing (no state reset needed)
    - Clear dependency flow

    Attributes:
        max_nesting_depth: Maximum allowed nesting of "(" and "'"
        current_depth: Current nesting depth (0 = top level)
        list_memo: Element-sequence results keyed by (position, depth),
            shared by every context derived from the same root
        failures: Deepest failures recorded so far, all at one position;
            shared like list_memo
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0
    list_memo: dict[tuple[int, int], ParseResult[tuple[Expression, ...]] | ParseError] = field(
        default_factory=dict
    )
    failures: list[ParseError] = field(default_factory=list)

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nesting(self) -> "ParseContext":
        """Create new context with incremented depth for a nested form."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
            list_memo=self.list_memo,
            failures=self.failures,
        )

    def record_failure(self, error: ParseError) -> None:
        """Keep ``error`` if it is at least as deep as every recorded failure."""
        if self.failures:
            deepest = self.failures[0].position
            if error.position < deepest:
                return
            if error.position > deepest:
                self.failures.clear()
        if error not in self.failures:
            self.failures.append(error)

    def deepest_failure(self, error: ParseError) -> ParseError:
        """Return the deepest of ``error`` and the recorded failures.

        Repetition ends a list by swallowing the failure of the element it
        could not parse, so the failure a rule returns can be shallower than
        the one that explains the input. Committed failures are returned
        unchanged.

        Example:
            >>> context = ParseContext()
            >>> error = parse_expr(Cursor("(a (b c]", 0), context)
            >>> error.position
            2
            >>> context.deepest_failure(error).position
            7
        """
        if error.committed or not self.failures:
            return error
        return merge_failures([error, *self.failures])


def _depth_exceeded(cursor: Cursor, context: ParseContext) -> ParseError:
    diagnostic = ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth)
    return ParseError(diagnostic, cursor, committed=diagnostic.is_committed)


# =============================================================================
# Lists
# =============================================================================


def parse_list_items(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[tuple[Expression, ...]] | ParseError:
    """Parse element sequence: (expr (whitespace+ expr)*)?

    Never fails on ordinary grammar mismatches; an empty sequence is a
    success. Only committed failures (overflow, depth) propagate.

    Args:
        cursor: Current position in source
        context: Parse context for depth tracking and memoization

    Returns:
        ParseResult(tuple of expressions, cursor after last element)
    """
    if context is None:
        context = ParseContext()

    key = (cursor.pos, context.current_depth)
    cached = context.list_memo.get(key)
    if cached is not None:
        return cached

    items = separated_list(partial(parse_expr, context=context), whitespace1)
    result = items(cursor)
    context.list_memo[key] = result
    return result


def parse_list(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[List] | ParseError:
    """Parse proper list body (without parentheses).

    Examples:
        $foo 42 53 -> List((Symbol("$foo"), Integer(42), Integer(53)))
        (empty) -> List(())

    Note:
        Elements must be separated by whitespace. "a(b)" yields List((a,))
        with "(b)" left unconsumed.
    """
    result = parse_list_items(cursor, context)
    if isinstance(result, ParseError):
        return result
    return ParseResult(List(result.value), result.cursor)


_dotted_separator = map_value(sequence(whitespace0, _dot, whitespace0), lambda _: None)


def parse_dotted(cursor: Cursor) -> ParseResult[None] | ParseError:
    """Recognize the dotted-pair separator: whitespace* "." whitespace*"""
    return _dotted_separator(cursor)


def parse_dotted_list(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[DottedPair] | ParseError:
    """Parse improper list body: list whitespace* "." whitespace* expr

    The head is the element tuple from parse_list_items, so it may be empty:
    " . x" yields DottedPair((), Symbol("x")).

    Examples:
        a . b -> DottedPair((Symbol("a"),), Symbol("b"))
        a b.c -> DottedPair((Symbol("a"), Symbol("b")), Symbol("c"))
    """
    if context is None:
        context = ParseContext()

    pair = sequence(
        partial(parse_list_items, context=context),
        parse_dotted,
        partial(parse_expr, context=context),
    )
    result = pair(cursor)
    if isinstance(result, ParseError):
        context.record_failure(result)
        return result

    head, _, tail = result.value
    return ParseResult(DottedPair(head, tail), result.cursor)  # type: ignore[arg-type]


# =============================================================================
# Nested forms
# =============================================================================


def parse_quoted(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[List] | ParseError:
    """Parse quote sugar: "'" expr

    Rewritten at parse time into an ordinary two-element list.

    Example:
        '52 -> List((Symbol("quote"), Integer(52)))
    """
    if context is None:
        context = ParseContext()

    prefix = _quote(cursor)
    if isinstance(prefix, ParseError):
        return prefix

    if context.is_depth_exceeded():
        return _depth_exceeded(cursor, context)

    inner = parse_expr(prefix.cursor, context.enter_nesting())
    if isinstance(inner, ParseError):
        return inner
    return ParseResult(quoted(inner.value), inner.cursor)


def parse_parenthesized(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[List | DottedPair] | ParseError:
    """Parse parenthesized form: "(" (dotted-list | list) ")"

    The dotted form is tried first; "(a b)" falls back to a plain list
    because no "." follows the elements.

    Security:
        Enforces maximum nesting depth. Configure via max_nesting_depth on
        SexpParser.

    Examples:
        (a . b) -> DottedPair((Symbol("a"),), Symbol("b"))
        (a b) -> List((Symbol("a"), Symbol("b")))
        () -> List(())
    """
    if context is None:
        context = ParseContext()

    opening = _open_paren(cursor)
    if isinstance(opening, ParseError):
        return opening

    if context.is_depth_exceeded():
        return _depth_exceeded(cursor, context)

    nested = context.enter_nesting()
    body = alternation(
        partial(parse_dotted_list, context=nested),
        partial(parse_list, context=nested),
    )
    return terminated(body, _close_paren)(opening.cursor)


# =============================================================================
# Expressions
# =============================================================================


def parse_expr(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[Expression] | ParseError:
    """Parse any expression.

    Alternatives, in order: atom or boolean, integer, text, quoted,
    parenthesized. Atoms cannot start with a digit and integers cannot
    contain letters, so the first two never compete. Parenthesized comes
    last because it recurses into all the others.

    Args:
        cursor: Current position in source
        context: Parse context for depth tracking. If None, creates fresh context.

    Returns:
        ParseResult(Expression, new_cursor) on success
        ParseError describing the deepest failure otherwise
    """
    if context is None:
        context = ParseContext()

    expr = alternation(
        parse_atom_or_boolean,
        parse_integer_literal,
        parse_text_literal,
        partial(parse_quoted, context=context),
        partial(parse_parenthesized, context=context),
    )
    result = expr(cursor)
    if isinstance(result, ParseError):
        context.record_failure(result)
    return result
