"""
Command line interface.

    python -m chemeval evaluate "5(H2O)3((FeW)5CrMo2V)6CoMnSi"
    python -m chemeval tokens "2H2O" --verbose
    python -m chemeval rpn "H2O"
    python -m chemeval counts "C6H12O6"
"""

__all__ = [
    "evaluate_command",
    "tokens_command",
    "rpn_command",
    "counts_command",
    "main",
]

import json
import sys
from typing import Callable, List, Optional

import fire
from loguru import logger

from chemeval.config import CONFIG
from chemeval.core.errors import FormulaError
from chemeval.core.evaluate import evaluate
from chemeval.core.rpn import to_rpn
from chemeval.core.tokenize import tokenize
from chemeval.core.tokens import format_tokens
from chemeval.text.formula import normalize_subscripts, parse_formula


def _configure_logging(verbose: bool) -> None:
    level = CONFIG["log_level_verbose"] if verbose else CONFIG["log_level"]
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONFIG["log_format"])
    logger.enable(CONFIG["app_name"])


def _run(func: Callable[[str], str], formula, verbose: bool) -> str:
    """Set up logging, run func and turn formula errors into exit status 1."""
    _configure_logging(verbose)
    # fire hands over numbers and tuples for inputs like "2" or "(1)"
    formula = normalize_subscripts(str(formula))
    try:
        return func(formula)
    except FormulaError as e:
        logger.error(f"Cannot process {formula!r}: {e}")
        sys.exit(1)


def evaluate_command(formula: str, verbose: bool = False) -> str:
    """Evaluate FORMULA and print it in Hill notation (or the bare number)."""
    return _run(lambda f: str(evaluate(f)), formula, verbose)


def tokens_command(formula: str, verbose: bool = False) -> str:
    """Print the tokens of FORMULA, operators included."""
    return _run(lambda f: format_tokens(tokenize(f)), formula, verbose)


def rpn_command(formula: str, verbose: bool = False) -> str:
    """Print FORMULA in postfix order."""
    return _run(lambda f: format_tokens(to_rpn(f)), formula, verbose)


def counts_command(formula: str, verbose: bool = False) -> str:
    """Print element counts of FORMULA as JSON."""
    return _run(lambda f: json.dumps(dict(parse_formula(f))), formula, verbose)


COMMANDS = {
    "evaluate": evaluate_command,
    "tokens": tokens_command,
    "rpn": rpn_command,
    "counts": counts_command,
}


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the chemeval console script.

    fire prints the command's result. main returns None, since the
    console-script wrapper passes its return value to sys.exit.
    """
    fire.Fire(COMMANDS, command=argv)
