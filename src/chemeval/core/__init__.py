"""
Core subpackage - the formula pipeline.

    str -> tokenize -> to_rpn -> evaluate -> Molecule | int

Each stage also accepts the previous stage's output directly.
"""

from chemeval.core.errors import (
    FormulaError,
    MalformedFormulaError,
    InvalidOperationError,
    EvaluationError,
)

from chemeval.core.molecule import (
    Molecule,
    is_atom,
)

from chemeval.core.tokens import (
    TokenType,
    Token,
    TOKEN_NAMES,
    TOKEN_SYMBOLS,
    PRECEDENCE,
    format_tokens,
)

from chemeval.core.tokenize import tokenize
from chemeval.core.rpn import to_rpn
from chemeval.core.evaluate import evaluate

__all__ = [
    # errors
    "FormulaError",
    "MalformedFormulaError",
    "InvalidOperationError",
    "EvaluationError",
    # molecule
    "Molecule",
    "is_atom",
    # tokens
    "TokenType",
    "Token",
    "TOKEN_NAMES",
    "TOKEN_SYMBOLS",
    "PRECEDENCE",
    "format_tokens",
    # pipeline
    "tokenize",
    "to_rpn",
    "evaluate",
]
