"""S-expression parser entry point.

This module provides the SexpParser class that applies input limits and
drives the grammar rules in :mod:`sexpreader.syntax.parser.rules`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~sexpreader.syntax.cursor.Cursor`)
    to traverse source text. Each rule returns either a
    :class:`~sexpreader.syntax.cursor.ParseResult` containing the parsed value
    and updated cursor position, or a :class:`~sexpreader.syntax.cursor.ParseError`.

Security:
    Includes configurable input size limit and nesting depth limit to prevent
    DoS via unbounded memory or stack use.
"""

import logging

from sexpreader.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from sexpreader.core.depth_guard import depth_clamp
from sexpreader.diagnostics import ErrorTemplate, SexpSyntaxError
from sexpreader.syntax.ast import Expression
from sexpreader.syntax.cursor import Cursor, ParseError, ParseResult
from sexpreader.syntax.parser.combinators import fail_at
from sexpreader.syntax.parser.rules import ParseContext, parse_expr

__all__ = ["SexpParser"]

logger = logging.getLogger(__name__)


class SexpParser:
    """S-expression parser using immutable cursor pattern.

    Design:
    - Parse failures are values (ParseError), never exceptions, in
      parse_expression(); parse() and parse_all() raise SexpSyntaxError
    - A failed parse leaves the caller's input untouched
    - Error messages include line:column with source context

    Security:
    - Configurable max_source_size rejects oversized input up front
    - Configurable max_nesting_depth bounds recursion on (((...))) and '''x;
      clamped against sys.getrecursionlimit()

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10M)
        max_nesting_depth: Maximum allowed nesting depth (default: 64)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10M).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum nesting depth (default: 64). Values
                              above what the recursion limit allows are
                              clamped with a logged warning.

        Raises:
            ValueError: If max_nesting_depth is less than 1
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        requested_depth = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        if requested_depth < 1:
            msg = f"max_nesting_depth must be >= 1, got {requested_depth}"
            raise ValueError(msg)
        self._max_nesting_depth = depth_clamp(requested_depth)

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed nesting depth (after clamping)."""
        return self._max_nesting_depth

    def _check_size(self, source: str) -> None:
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            raise ValueError(ErrorTemplate.source_too_large(len(source), self._max_source_size))

    def _new_context(self) -> ParseContext:
        return ParseContext(max_nesting_depth=self._max_nesting_depth)

    def parse_expression(self, source: str) -> ParseResult[Expression] | ParseError:
        """Parse one expression from the start of ``source``.

        Text after the expression is returned unconsumed in
        ``ParseResult.remaining``.

        Args:
            source: Lisp/Scheme source text

        Returns:
            ParseResult with the expression and remaining text, or ParseError

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)

        Example:
            >>> result = SexpParser().parse_expression("(a . b) rest")
            >>> result.value
            DottedPair(head=(Symbol(name='a'),), tail=Symbol(name='b'))
            >>> result.remaining
            ' rest'
        """
        self._check_size(source)
        context = self._new_context()
        result = parse_expr(Cursor(source, 0), context)
        if isinstance(result, ParseError):
            result = context.deepest_failure(result)
            logger.debug("Parse failed: %s", result.format_error())
        return result

    def parse(self, source: str) -> tuple[str, Expression]:
        """Parse one expression, raising on failure.

        Returns:
            (remaining_text, expression)

        Raises:
            SexpSyntaxError: If no expression can be parsed
            ValueError: If source exceeds max_source_size

        Example:
            >>> SexpParser().parse("23")
            ('', Integer(value=23))
        """
        result = self.parse_expression(source)
        if isinstance(result, ParseError):
            raise SexpSyntaxError(result)
        return (result.remaining, result.value)

    def parse_all(self, source: str) -> tuple[Expression, ...]:
        """Parse every top-level expression in ``source``.

        Expressions are separated by whitespace; leading and trailing
        whitespace is allowed. Empty or all-whitespace input yields ().

        Raises:
            SexpSyntaxError: On the first expression that fails to parse, or
                on text that is not separated from the previous expression
            ValueError: If source exceeds max_source_size

        Example:
            >>> [type(e).__name__ for e in SexpParser().parse_all("(define x 1)\\n'x #t")]
            ['List', 'List', 'Boolean']
        """
        self._check_size(source)
        expressions: list[Expression] = []
        cursor = Cursor(source, 0)

        while True:
            start = cursor.skip_whitespace()
            if start.is_eof:
                break
            if expressions and start.pos == cursor.pos:
                error = fail_at(cursor, "whitespace")
                logger.debug("Parse failed: %s", error.format_error())
                raise SexpSyntaxError(error)

            context = self._new_context()
            result = parse_expr(start, context)
            if isinstance(result, ParseError):
                result = context.deepest_failure(result)
                logger.debug("Parse failed: %s", result.format_error())
                raise SexpSyntaxError(result)
            expressions.append(result.value)
            cursor = result.cursor

        logger.debug("Parsed %d top-level expressions", len(expressions))
        return tuple(expressions)
