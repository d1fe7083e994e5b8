"""Hypothesis strategies for sexpreader property-based testing.

Usage:
    from tests.strategies import expressions, render, symbol_names
"""

from .sexp import (
    ATOM_CHARS,
    ATOM_START_CHARS,
    INVALID_START_CHARS,
    atoms,
    dotted_pairs,
    expressions,
    integer_values,
    lists,
    render,
    symbol_names,
    text_values,
    whitespace_runs,
)

__all__ = [
    "ATOM_CHARS",
    "ATOM_START_CHARS",
    "INVALID_START_CHARS",
    "atoms",
    "dotted_pairs",
    "expressions",
    "integer_values",
    "lists",
    "render",
    "symbol_names",
    "text_values",
    "whitespace_runs",
]
