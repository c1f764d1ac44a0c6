"""
Text subpackage - formula string helpers.

Parsing, element counting and Hill-notation output on top of the core
pipeline.
"""

from chemeval.text.formula import (
    normalize_subscripts,
    parse_formula,
    parse_cached,
    count_element,
    total_atom_count,
    format_formula,
)

__all__ = [
    "normalize_subscripts",
    "parse_formula",
    "parse_cached",
    "count_element",
    "total_atom_count",
    "format_formula",
]
