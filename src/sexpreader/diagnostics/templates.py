"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _describe(ch: str) -> str:
    """Render a character for messages, escaping control characters."""
    if ch.isprintable() and ch != " ":
        return f"'{ch}'"
    return repr(ch)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every failure mode of the
    grammar in one place.
    """

    # =========================================================================
    # SYNTAX ERRORS (3000-3098)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int, expected: str) -> Diagnostic:
        """Input exhausted while a construct still needed characters.

        Args:
            position: The position where EOF was encountered
            expected: Description of what the parser needed

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected end of input at position {position}, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check for an unterminated string or a missing ')'",
        )

    @staticmethod
    def unexpected_character(found: str, position: int, expected: str) -> Diagnostic:
        """Character does not match the class or literal required here.

        Args:
            found: The offending character
            position: Character offset of the offending character
            expected: Description of what the parser needed

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character {_describe(found)} at position {position}, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
        )

    @staticmethod
    def numeric_overflow(digits: str) -> Diagnostic:
        """Digit run does not fit in a signed 64-bit integer.

        Args:
            digits: The digit run as written in the source

        Returns:
            Diagnostic for NUMERIC_OVERFLOW
        """
        shown = digits if len(digits) <= 40 else f"{digits[:37]}..."
        msg = f"Integer literal '{shown}' does not fit in a signed 64-bit integer"
        return Diagnostic(
            code=DiagnosticCode.NUMERIC_OVERFLOW,
            message=msg,
            hint="Integer literals must be at most 9223372036854775807",
        )

    @staticmethod
    def all_alternatives_failed(position: int, expected: tuple[str, ...]) -> Diagnostic:
        """Every branch of an alternation failed at the same furthest position.

        Args:
            position: The furthest position any branch reached
            expected: Merged expectations of the tied branches

        Returns:
            Diagnostic for ALL_ALTERNATIVES_FAILED
        """
        choices = ", ".join(expected) if expected else "a valid expression"
        msg = f"No alternative matched at position {position} (tried: {choices})"
        return Diagnostic(
            code=DiagnosticCode.ALL_ALTERNATIVES_FAILED,
            message=msg,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Nesting of lists and quotes exceeded the configured limit.

        Args:
            max_depth: Maximum allowed nesting depth

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting or raise max_nesting_depth on SexpParser",
        )

    # =========================================================================
    # INTERNAL FAULTS (3099)
    # =========================================================================

    @staticmethod
    def internal_fault(detail: str) -> Diagnostic:
        """Parser defect, not a problem with the input.

        Args:
            detail: What went wrong inside the parser

        Returns:
            Diagnostic for INTERNAL_FAULT
        """
        msg = f"Internal parser fault: {detail}"
        return Diagnostic(
            code=DiagnosticCode.INTERNAL_FAULT,
            message=msg,
            hint="This is likely a bug in sexpreader",
        )

    # =========================================================================
    # INPUT LIMITS
    # =========================================================================

    @staticmethod
    def source_too_large(size: int, max_size: int) -> str:
        """Source exceeds the configured size limit.

        Returned as plain text: the condition is a caller error (ValueError),
        not a grammar failure.
        """
        return (
            f"Source size ({size:,} characters) exceeds maximum "
            f"({max_size:,} characters). "
            "Configure max_source_size in SexpParser constructor to increase limit."
        )
