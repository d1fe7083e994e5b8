"""S-expression parser module.

Module Organization:
- core.py: SexpParser class (input limits, logging, convenience API)
- combinators.py: Generic sequence / alternation / repetition combinators
- primitives.py: Character classes and leaf value parsers
- rules.py: Lists, dotted lists, quoting, and the recursive parse_expr

Public API:
    SexpParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from sexpreader.syntax.parser.core import SexpParser
from sexpreader.syntax.parser.rules import ParseContext

__all__ = ["ParseContext", "SexpParser"]
