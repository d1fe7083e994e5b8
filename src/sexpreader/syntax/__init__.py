"""S-expression syntax package.

Provides the parser, the cursor/result types, and the Expression value model.

Python 3.13+.
"""

from .ast import Atom, Boolean, DottedPair, Expression, Integer, List, Symbol, Text, quoted
from .cursor import Cursor, ParseError, ParseResult
from .parser import ParseContext, SexpParser

__all__ = [
    "Atom",
    "Boolean",
    "Cursor",
    "DottedPair",
    "Expression",
    "Integer",
    "List",
    "ParseContext",
    "ParseError",
    "ParseResult",
    "SexpParser",
    "Symbol",
    "Text",
    "parse",
    "parse_all",
    "parse_expression",
    "quoted",
]


def parse_expression(source: str) -> ParseResult[Expression] | ParseError:
    """Parse one expression from the start of ``source``.

    Convenience function for SexpParser().parse_expression(). Failure is
    returned as a ParseError value, not raised.

    Example:
        >>> from sexpreader.syntax import parse_expression
        >>> result = parse_expression("'52")
        >>> result.value
        List(items=(Symbol(name='quote'), Integer(value=52)))
    """
    return SexpParser().parse_expression(source)


def parse(source: str) -> tuple[str, Expression]:
    """Parse one expression into (remaining_text, expression).

    Raises:
        SexpSyntaxError: If no expression can be parsed

    Example:
        >>> from sexpreader.syntax import parse
        >>> parse('"hello"')
        ('', Text(value='hello'))
    """
    return SexpParser().parse(source)


def parse_all(source: str) -> tuple[Expression, ...]:
    """Parse every whitespace-separated top-level expression in ``source``.

    Raises:
        SexpSyntaxError: On the first failure
    """
    return SexpParser().parse_all(source)
