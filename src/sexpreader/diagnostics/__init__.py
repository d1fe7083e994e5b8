"""Diagnostic system for sexpreader errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import COMMITTED_CODES, Diagnostic, DiagnosticCode, SourceSpan
from .errors import SexpError, SexpInternalError, SexpSyntaxError
from .templates import ErrorTemplate

__all__ = [
    "COMMITTED_CODES",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "SexpError",
    "SexpInternalError",
    "SexpSyntaxError",
    "SourceSpan",
]
