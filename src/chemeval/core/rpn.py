"""Infix to postfix (Reverse Polish Notation) conversion."""

__all__ = ["to_rpn"]

from collections import deque
from collections.abc import Iterable
from typing import Union

from loguru import logger

from .molecule import Molecule
from .tokenize import tokenize
from .tokens import OPERANDS, PRECEDENCE, Token, TokenType, format_tokens


def to_rpn(source: Union[str, Iterable[Union[Token, Molecule]]]) -> deque[Token]:
    """
    Reorder a formula into postfix form using operator precedence.

    Equal-precedence operators associate to the left, so "A - B - C" becomes
    "A B - C -".

    Args:
        source: Formula string, or tokens as returned by tokenize. Token
                input is copied, never consumed. A bare Molecule item is
                treated as a MOLECULE token, as evaluate does.

    Returns:
        Deque of tokens in postfix order

    Raises:
        MalformedFormulaError: Only when source is a string that fails to
            tokenize

    Example:
        >>> from chemeval.core.tokens import format_tokens
        >>> format_tokens(to_rpn("H2O"))
        'H 2 v O +'
    """
    if isinstance(source, str):
        tokens = tokenize(source)
    else:
        tokens = deque(
            Token.molecule(item) if isinstance(item, Molecule) else item
            for item in source
        )

    output: deque[Token] = deque()
    operators: list[Token] = []

    while tokens:
        token = tokens.popleft()
        kind = token.type

        if kind in OPERANDS:
            output.append(token)
        elif kind == TokenType.GROUP_LEFT:
            operators.append(token)
        elif kind == TokenType.GROUP_RIGHT:
            while operators and operators[-1].type != TokenType.GROUP_LEFT:
                output.append(operators.pop())
            if operators:
                operators.pop()
        else:
            precedence = PRECEDENCE[kind]
            while (
                operators
                and operators[-1].type != TokenType.GROUP_LEFT
                and precedence <= PRECEDENCE[operators[-1].type]
            ):
                output.append(operators.pop())
            operators.append(token)

    # A leftover left parenthesis is passed through for the evaluator to reject
    while operators:
        output.append(operators.pop())

    logger.debug(f"Postfix: {format_tokens(output)}")
    return output
