"""Generic parser combinators over the immutable cursor.

A parser is any callable taking a Cursor and returning either a ParseResult
(success: value plus advanced cursor) or a ParseError (failure). Because the
cursor is immutable, a failing parser never consumes input: the caller still
holds the cursor it passed in, which is what makes ordered alternation a
plain loop.

Committed errors (see ParseError.committed) are not recoverable. Alternation
and repetition propagate them instead of trying the next branch or stopping
quietly, in the manner of nom's Err::Failure and Parsec's consumed-error.

Combinators:
    satisfy / char - single character matching a predicate / literal
    take_while - run of characters matching a predicate
    sequence - all parsers in order, tuple of values
    alternation - first success wins, deepest failure reported
    zero_or_more / one_or_more - repetition
    optional - success with a default when the parser fails
    preceded / terminated / delimited - sequence keeping one value
    separated_list - (item (separator item)*)?
    map_value - transform a successful value

The set is public for composing further grammars; the S-expression rules
use all of it except optional.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

from sexpreader.diagnostics import DiagnosticCode, ErrorTemplate, SexpInternalError
from sexpreader.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "Parser",
    "alternation",
    "char",
    "delimited",
    "fail_at",
    "map_value",
    "merge_failures",
    "one_or_more",
    "optional",
    "preceded",
    "satisfy",
    "separated_list",
    "sequence",
    "take_while",
    "terminated",
    "zero_or_more",
]

type Parser[T] = Callable[[Cursor], ParseResult[T] | ParseError]


# =============================================================================
# Failure construction
# =============================================================================


def fail_at(cursor: Cursor, *expected: str) -> ParseError:
    """Build the failure for "expected one of ``expected`` at ``cursor``".

    Picks UNEXPECTED_EOF when the cursor is exhausted and
    UNEXPECTED_CHARACTER otherwise.
    """
    description = " or ".join(expected) if expected else "more input"
    if cursor.is_eof:
        diagnostic = ErrorTemplate.unexpected_eof(cursor.pos, description)
    else:
        diagnostic = ErrorTemplate.unexpected_character(
            cursor.current, cursor.pos, description
        )
    return ParseError(diagnostic, cursor, expected)


def merge_failures(errors: list[ParseError]) -> ParseError:
    """Reduce failures to the deepest one.

    Used by alternation for its branches and by ParseContext for failures
    recorded during a parse. Failures tied at the furthest position merge
    their expectations. If the tied failures disagree on the code, the
    result is ALL_ALTERNATIVES_FAILED.
    """
    furthest = max(error.position for error in errors)
    tied = [error for error in errors if error.position == furthest]
    first = tied[0]
    if len(tied) == 1:
        return first

    expected = tuple(dict.fromkeys(label for error in tied for label in error.expected))
    codes = {error.code for error in tied}
    if len(codes) > 1:
        return ParseError(
            ErrorTemplate.all_alternatives_failed(furthest, expected),
            first.cursor,
            expected,
        )
    if first.code in (DiagnosticCode.UNEXPECTED_CHARACTER, DiagnosticCode.UNEXPECTED_EOF):
        return fail_at(first.cursor, *expected)
    return ParseError(first.diagnostic, first.cursor, expected, first.committed)


# =============================================================================
# Character primitives
# =============================================================================


def satisfy(predicate: Callable[[str], bool], expected: str) -> Parser[str]:
    """Match exactly one character for which ``predicate`` holds."""

    def parse(cursor: Cursor) -> ParseResult[str] | ParseError:
        if cursor.is_eof or not predicate(cursor.current):
            return fail_at(cursor, expected)
        return ParseResult(cursor.current, cursor.advance())

    return parse


def char(literal: str) -> Parser[str]:
    """Match exactly the character ``literal``.

    Example:
        >>> char("(")(Cursor("(a)", 0)).value
        '('
    """
    if len(literal) != 1:
        msg = f"char() expects a single character, got {literal!r}"
        raise SexpInternalError(ErrorTemplate.internal_fault(msg))
    return satisfy(lambda ch: ch == literal, repr(literal))


def take_while(
    predicate: Callable[[str], bool], expected: str, *, min_count: int = 0
) -> Parser[str]:
    """Match the longest run of characters satisfying ``predicate``.

    Fails (without consuming) if fewer than ``min_count`` characters match.
    """

    def parse(cursor: Cursor) -> ParseResult[str] | ParseError:
        source = cursor.source
        end = cursor.pos
        while end < len(source) and predicate(source[end]):
            end += 1
        if end - cursor.pos < min_count:
            return fail_at(Cursor(source, end), expected)
        return ParseResult(cursor.slice_to(end), Cursor(source, end))

    return parse


# =============================================================================
# Composition
# =============================================================================


def map_value[T, U](parser: Parser[T], transform: Callable[[T], U]) -> Parser[U]:
    """Apply ``transform`` to the value of a successful parse."""

    def parse(cursor: Cursor) -> ParseResult[U] | ParseError:
        result = parser(cursor)
        if isinstance(result, ParseError):
            return result
        return ParseResult(transform(result.value), result.cursor)

    return parse


def sequence(*parsers: Parser[object]) -> Parser[tuple[object, ...]]:
    """Apply parsers in order, threading the cursor.

    Fails as soon as any step fails. Partial results are discarded and the
    caller's cursor is untouched.
    """

    def parse(cursor: Cursor) -> ParseResult[tuple[object, ...]] | ParseError:
        values: list[object] = []
        current = cursor
        for parser in parsers:
            result = parser(current)
            if isinstance(result, ParseError):
                return result
            values.append(result.value)
            current = result.cursor
        return ParseResult(tuple(values), current)

    return parse


def alternation[T](*parsers: Parser[T]) -> Parser[T]:
    """Try each parser against the same cursor; first success wins.

    Order is significant. When every branch fails, the failure that got
    furthest into the input is reported. A committed failure stops the
    search immediately.

    Raises:
        SexpInternalError: If called with no parsers
    """
    if not parsers:
        raise SexpInternalError(
            ErrorTemplate.internal_fault("alternation() requires at least one parser")
        )

    def parse(cursor: Cursor) -> ParseResult[T] | ParseError:
        failures: list[ParseError] = []
        for parser in parsers:
            result = parser(cursor)
            if not isinstance(result, ParseError):
                return result
            if result.committed:
                return result
            failures.append(result)
        return merge_failures(failures)

    return parse


def zero_or_more[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Apply ``parser`` until it fails. Never fails on its own.

    Stops when the parser fails or succeeds without consuming input (a
    zero-width success would repeat forever). Committed failures propagate.
    """

    def parse(cursor: Cursor) -> ParseResult[tuple[T, ...]] | ParseError:
        values: list[T] = []
        current = cursor
        while True:
            result = parser(current)
            if isinstance(result, ParseError):
                if result.committed:
                    return result
                break
            if result.cursor.pos == current.pos:
                break
            values.append(result.value)
            current = result.cursor
        return ParseResult(tuple(values), current)

    return parse


def one_or_more[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Like zero_or_more, but the first application must succeed."""
    rest = zero_or_more(parser)

    def parse(cursor: Cursor) -> ParseResult[tuple[T, ...]] | ParseError:
        first = parser(cursor)
        if isinstance(first, ParseError):
            return first
        more = rest(first.cursor)
        if isinstance(more, ParseError):
            return more
        return ParseResult((first.value, *more.value), more.cursor)

    return parse


def optional[T, D](parser: Parser[T], default: D = None) -> Parser[T | D]:
    """Succeed with ``default`` (consuming nothing) if ``parser`` fails."""

    def parse(cursor: Cursor) -> ParseResult[T | D] | ParseError:
        result = parser(cursor)
        if isinstance(result, ParseError):
            if result.committed:
                return result
            return ParseResult(default, cursor)
        return result

    return parse


def preceded[T](prefix: Parser[object], parser: Parser[T]) -> Parser[T]:
    """Match ``prefix`` then ``parser``; keep the second value."""

    def parse(cursor: Cursor) -> ParseResult[T] | ParseError:
        first = prefix(cursor)
        if isinstance(first, ParseError):
            return first
        return parser(first.cursor)

    return parse


def terminated[T](parser: Parser[T], suffix: Parser[object]) -> Parser[T]:
    """Match ``parser`` then ``suffix``; keep the first value."""

    def parse(cursor: Cursor) -> ParseResult[T] | ParseError:
        result = parser(cursor)
        if isinstance(result, ParseError):
            return result
        end = suffix(result.cursor)
        if isinstance(end, ParseError):
            return end
        return ParseResult(result.value, end.cursor)

    return parse


def delimited[T](
    opening: Parser[object], parser: Parser[T], closing: Parser[object]
) -> Parser[T]:
    """Match ``opening``, ``parser``, ``closing``; keep the middle value."""
    return preceded(opening, terminated(parser, closing))


def separated_list[T](item: Parser[T], separator: Parser[object]) -> Parser[tuple[T, ...]]:
    """Match ``(item (separator item)*)?``. Never fails on an uncommitted error.

    A separator not followed by an item is left unconsumed.
    """
    rest = zero_or_more(preceded(separator, item))

    def parse(cursor: Cursor) -> ParseResult[tuple[T, ...]] | ParseError:
        first = item(cursor)
        if isinstance(first, ParseError):
            if first.committed:
                return first
            return ParseResult((), cursor)
        more = rest(first.cursor)
        if isinstance(more, ParseError):
            return more
        return ParseResult((first.value, *more.value), more.cursor)

    return parse
