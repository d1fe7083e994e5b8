"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "COMMITTED_CODES",
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3098: Syntax errors (grammar failures on user input)
        3099: Internal parser faults (never caused by user input)
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNEXPECTED_CHARACTER = 3002
    NUMERIC_OVERFLOW = 3003
    # Only from alternations whose branches fail with different codes at the
    # same position. The built-in grammar never produces it; composed grammars can.
    ALL_ALTERNATIVES_FAILED = 3004
    NESTING_DEPTH_EXCEEDED = 3005

    # Internal faults
    INTERNAL_FAULT = 3099


# Failures that must not be recovered by trying another alternative.
# A digit run that overflows is still a digit run, and a depth breach or
# parser defect is not a grammar mismatch.
COMMITTED_CODES: frozenset[DiagnosticCode] = frozenset({
    DiagnosticCode.NUMERIC_OVERFLOW,
    DiagnosticCode.NESTING_DEPTH_EXCEEDED,
    DiagnosticCode.INTERNAL_FAULT,
})


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line /
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None until attached to a position)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def is_committed(self) -> bool:
        """True if this failure must not be recovered by backtracking."""
        return self.code in COMMITTED_CODES

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[NUMERIC_OVERFLOW]: Integer literal '99999999999999999999' ...
              --> line 1, column 1
              = help: Integer literals must fit in a signed 64-bit integer

        Returns:
            Formatted error message
        """
        parts = [f"error[{self.code.name}]: {self.message}"]
        if self.span is not None:
            parts.append(f"  --> line {self.span.line}, column {self.span.column}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
