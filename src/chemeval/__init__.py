"""
chemeval - Chemical formula parsing and atom-count arithmetic.

This package is organized into focused subpackages:

- core/     The formula pipeline (no heavy dependencies)
            - molecule: Molecule, is_atom
            - tokens: TokenType, Token, format_tokens
            - tokenize: tokenize
            - rpn: to_rpn
            - evaluate: evaluate
            - errors: MalformedFormulaError, InvalidOperationError, EvaluationError

- text/     Formula string helpers
            - formula: parse_formula, count_element, format_formula, ...

- df/       DataFrame utilities (requires polars)
            - filters: formula_frame, filter_element_range

- cli       Command line interface (fire): python -m chemeval evaluate "H2O"

Logging goes through loguru and is disabled for this package unless the
caller runs logger.enable("chemeval").

Usage:
    from chemeval import evaluate, Molecule
    evaluate("5(H2O)3((FeW)5CrMo2V)6CoMnSi")
    Molecule("H", 2).add("O")
"""

__version__ = "0.1.0"

from loguru import logger

# Convenience imports from core
from chemeval.core import (
    FormulaError,
    MalformedFormulaError,
    InvalidOperationError,
    EvaluationError,
    Molecule,
    is_atom,
    TokenType,
    Token,
    format_tokens,
    tokenize,
    to_rpn,
    evaluate,
)

# Convenience imports from text
from chemeval.text import (
    normalize_subscripts,
    parse_formula,
    parse_cached,
    count_element,
    total_atom_count,
    format_formula,
)

logger.disable("chemeval")

__all__ = [
    "__version__",
    # core.errors
    "FormulaError",
    "MalformedFormulaError",
    "InvalidOperationError",
    "EvaluationError",
    # core.molecule
    "Molecule",
    "is_atom",
    # core.tokens
    "TokenType",
    "Token",
    "format_tokens",
    # core pipeline
    "tokenize",
    "to_rpn",
    "evaluate",
    # text.formula
    "normalize_subscripts",
    "parse_formula",
    "parse_cached",
    "count_element",
    "total_atom_count",
    "format_formula",
]
