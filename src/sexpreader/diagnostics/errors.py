"""Exception hierarchy with structured diagnostics.

Parse failures travel through the parser as ParseError values. These
exceptions exist for the convenience API, which raises instead of returning
failure values, and for programming errors in parser construction.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from sexpreader.syntax.cursor import ParseError

__all__ = ["SexpError", "SexpInternalError", "SexpSyntaxError"]


class SexpError(Exception):
    """Base exception for all sexpreader errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SexpError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SexpSyntaxError(SexpError):
    """Source text does not match the S-expression grammar.

    Raised by parse() and parse_all(). The failure value is kept so callers
    can render it (format_with_context) or inspect code and position.

    Attributes:
        parse_error: The ParseError returned by the grammar
    """

    def __init__(self, parse_error: "ParseError") -> None:
        """Initialize SexpSyntaxError from a ParseError value."""
        super().__init__(parse_error.to_diagnostic())
        self.parse_error = parse_error


class SexpInternalError(SexpError):
    """Parser misconstruction (e.g., an alternation with no branches).

    Never caused by source text.
    """
