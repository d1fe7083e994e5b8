"""sexpreader - Lisp/Scheme S-expression reader.

Converts source text into an immutable S-expression value tree using
composable parser combinators with backtracking. No separate lexer: the
grammar runs directly on characters.

Public API:
    parse_expression - Parse one expression; returns ParseResult or ParseError
    parse - Parse one expression; returns (remaining_text, expression), raises on failure
    parse_all - Parse all whitespace-separated top-level expressions
    SexpParser - Parser with configurable size and nesting limits

Value model:
    Symbol, Integer, Text, Boolean, List, DottedPair (union: Expression)

Exceptions:
    SexpError - Base exception class
    SexpSyntaxError - Parse errors raised by parse() / parse_all()
    SexpInternalError - Parser misconstruction

Submodules:
    sexpreader.syntax.parser.combinators - Reusable combinators
    sexpreader.diagnostics - Error codes, diagnostics and templates
"""

from .diagnostics import DiagnosticCode, SexpError, SexpInternalError, SexpSyntaxError
from .syntax import (
    Boolean,
    DottedPair,
    Expression,
    Integer,
    List,
    ParseError,
    ParseResult,
    SexpParser,
    Symbol,
    Text,
    parse,
    parse_all,
    parse_expression,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("sexpreader")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Boolean",
    "DiagnosticCode",
    "DottedPair",
    "Expression",
    "Integer",
    "List",
    "ParseError",
    "ParseResult",
    "SexpError",
    "SexpInternalError",
    "SexpParser",
    "SexpSyntaxError",
    "Symbol",
    "Text",
    "__version__",
    "parse",
    "parse_all",
    "parse_expression",
]
