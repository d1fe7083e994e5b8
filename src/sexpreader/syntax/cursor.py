"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern that makes backtracking free:
a parser that fails simply returns an error, and the caller still holds the
cursor it started from. No parser can partially consume input on failure.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Line:column computed on-demand (O(n) only for errors)

Result Shape:
    Every parser has signature:
        def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass, field

from sexpreader.constants import WHITESPACE_CHARS
from sexpreader.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, SourceSpan

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input. Check is_eof first.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos, "a character")
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Unconsumed source text from the current position."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.pos  # Original unchanged
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor and slice once the scan is done:
            >>> cursor = Cursor("hello world", 0)
            >>> start_cursor = cursor
            >>> while not cursor.is_eof and cursor.current != ' ':
            ...     cursor = cursor.advance()
            >>> start_cursor.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip ASCII whitespace (space, tab, newline, CR, form feed, VT).

        Example:
            >>> Cursor("  \\n\\t x", 0).skip_whitespace().current
            'x'
        """
        c = self
        while not c.is_eof and c.current in WHITESPACE_CHARS:
            c = c.advance()
        return c

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only call for error reporting.

        Example:
            >>> Cursor("(a\\n  b)", 5).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Example:
        >>> result = ParseResult('h', Cursor("hello", 1))
        >>> result.value
        'h'
        >>> result.remaining
        'ello'
    """

    value: T
    cursor: Cursor

    @property
    def remaining(self) -> str:
        """Text left unconsumed after this parse."""
        return self.cursor.remaining


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with location and context.

    Design:
        - Stores cursor at error point (for line:column)
        - Diagnostic carries the code, message and hint
        - Expected tuple names the constructs that would have matched
        - committed=True forbids backtracking into another alternative

    Example:
        >>> from sexpreader.diagnostics import ErrorTemplate
        >>> cursor = Cursor("(a b", 4)
        >>> error = ParseError(ErrorTemplate.unexpected_eof(4, "')'"), cursor, ("')'",))
        >>> error.format_error()
        "1:5: Unexpected end of input at position 4, expected ')' (expected: ')')"
    """

    diagnostic: Diagnostic
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)
    committed: bool = False

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code of this failure."""
        return self.diagnostic.code

    @property
    def message(self) -> str:
        """Human-readable failure description."""
        return self.diagnostic.message

    @property
    def position(self) -> int:
        """Character offset where the failure was detected."""
        return self.cursor.pos

    def to_diagnostic(self) -> Diagnostic:
        """Return the diagnostic with a SourceSpan attached."""
        line, col = self.cursor.compute_line_col()
        span = SourceSpan(start=self.cursor.pos, end=self.cursor.pos, line=line, column=col)
        return Diagnostic(
            code=self.diagnostic.code,
            message=self.diagnostic.message,
            span=span,
            hint=self.diagnostic.hint,
        )

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> from sexpreader.diagnostics import ErrorTemplate
            >>> cursor = Cursor("(a\\n [)", 4)
            >>> error = ParseError(ErrorTemplate.unexpected_character("[", 4, "expression"), cursor)
            >>> error.format_error()
            "2:2: Unexpected character '[' at position 4, expected expression"
        """
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            if i == line:
                pointer = " " * (len(line_num_str) + col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)
