"""
Molecular formula helpers built on the formula pipeline.

Convenience functions for parsing, counting and writing formula strings.
"""

__all__ = [
    "normalize_subscripts",
    "parse_formula",
    "parse_cached",
    "count_element",
    "total_atom_count",
    "format_formula",
]

from collections.abc import Mapping
from functools import lru_cache
from typing import Tuple, Union

from chemeval.config import CONFIG, SUBSCRIPT_DIGITS
from chemeval.core.evaluate import evaluate
from chemeval.core.molecule import Molecule

# Subscript to digit translation table
_SUBSCRIPT_MAP = str.maketrans(SUBSCRIPT_DIGITS, "0123456789")


def normalize_subscripts(formula: str) -> str:
    """
    Convert subscript digits to regular digits.

    Args:
        formula: Formula string possibly containing subscripts

    Returns:
        Formula with subscripts converted to regular digits

    Example:
        >>> normalize_subscripts("C₆H₁₂O₆")
        'C6H12O6'
    """
    return formula.translate(_SUBSCRIPT_MAP)


def parse_formula(formula: str) -> Molecule:
    """
    Parse a molecular formula into element counts.

    Args:
        formula: Molecular formula string (e.g., "C6H12O6", "C₆H₁₂O₆" or
                 "5(H2O)3CoMnSi")

    Returns:
        Molecule mapping element symbols to counts; empty for a blank string

    Raises:
        MalformedFormulaError: If the formula cannot be tokenized
        EvaluationError: If an operator is left without operands (e.g., "2"
            or "H -")
        InvalidOperationError: If operators receive incompatible operands

    Example:
        >>> parse_formula("NaCl")
        Molecule({'Na': 1, 'Cl': 1})
    """
    if not formula or not formula.strip():
        return Molecule()
    return evaluate(normalize_subscripts(formula))


@lru_cache(maxsize=CONFIG["parse_cache_size"])
def parse_cached(formula: str) -> Tuple[Tuple[str, int], ...]:
    """Parse molecular formula with caching. Returns tuple for hashability."""
    return tuple(parse_formula(formula).items())


def count_element(formula: str, element: str) -> int:
    """
    Count occurrences of an element in a formula.

    Example:
        >>> count_element("C6H12O6", "C")
        6
        >>> count_element("C6H12O6", "N")
        0
    """
    return dict(parse_cached(formula)).get(element, 0)


def total_atom_count(formula: str) -> int:
    """
    Total number of atoms in a formula.

    Example:
        >>> total_atom_count("(H2O)2Ge")
        7
    """
    return sum(count for _, count in parse_cached(formula))


def format_formula(source: Union[Molecule, Mapping, str]) -> str:
    """
    Write a molecule, mapping or formula string in Hill notation.

    Args:
        source: Molecule or element count mapping, or a formula string to
                parse first

    Returns:
        Hill-order formula (e.g., "C2H6O")

    Example:
        >>> format_formula("HOCH2CH3")
        'C2H6O'
        >>> format_formula({"O": 1, "H": 2})
        'H2O'
    """
    if isinstance(source, str):
        return parse_formula(source).to_formula()
    if not isinstance(source, Molecule):
        source = Molecule(source)
    return source.to_formula()
