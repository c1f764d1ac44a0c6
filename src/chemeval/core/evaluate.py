"""
Postfix evaluator.

Reduces a postfix token stream with a single operand stack. Atoms stay atom
tokens until an operator needs them as molecules.
"""

__all__ = ["evaluate"]

from collections import deque
from collections.abc import Iterable
from typing import Union

from loguru import logger

from .errors import EvaluationError, InvalidOperationError
from .molecule import Molecule
from .rpn import to_rpn
from .tokenize import tokenize
from .tokens import OPERANDS, OPERATORS, TOKEN_NAMES, Token, TokenType

_SPECIES = frozenset({TokenType.ATOM, TokenType.MOLECULE})


def _as_token(item: Union[Token, Molecule]) -> Token:
    if isinstance(item, Molecule):
        return Token.molecule(item.copy())
    if not isinstance(item, Token):
        raise EvaluationError(f"Cannot evaluate {type(item).__name__} item")
    if item.type == TokenType.MOLECULE:
        return Token.molecule(item.value.copy())
    return item


def _to_molecule(token: Token) -> Molecule:
    if token.type == TokenType.ATOM:
        return Molecule.from_atom(token.value)
    return token.value


def _check_operands(
    operator: Token,
    lhs: Token,
    rhs: Token,
    lhs_types: frozenset,
    rhs_types: frozenset,
) -> None:
    if lhs.type not in lhs_types:
        expected = " or ".join(sorted(TOKEN_NAMES[t] for t in lhs_types))
        raise InvalidOperationError(
            f"Bad lhs operand for {operator.name} (expected {expected}, got {lhs.name})",
            lhs,
            rhs,
            operator,
        )
    if rhs.type not in rhs_types:
        expected = " or ".join(sorted(TOKEN_NAMES[t] for t in rhs_types))
        raise InvalidOperationError(
            f"Bad rhs operand for {operator.name} (expected {expected}, got {rhs.name})",
            lhs,
            rhs,
            operator,
        )


def _apply(operator: Token, lhs: Token, rhs: Token) -> Token:
    kind = operator.type

    if kind == TokenType.SUBSCRIPT:
        _check_operands(operator, lhs, rhs, _SPECIES, frozenset({TokenType.NUMBER}))
        return Token.molecule(_to_molecule(lhs).multiply_mut(rhs.value))

    if kind == TokenType.COEFFICIENT:
        _check_operands(operator, lhs, rhs, frozenset({TokenType.NUMBER}), _SPECIES)
        return Token.molecule(_to_molecule(rhs).multiply_mut(lhs.value))

    _check_operands(operator, lhs, rhs, _SPECIES, _SPECIES)
    molecule = _to_molecule(lhs)
    if kind == TokenType.SUBTRACT:
        molecule.subtract_mut(_to_molecule(rhs))
    else:
        molecule.add_mut(_to_molecule(rhs))
    return Token.molecule(molecule)


def evaluate(
    source: Union[str, Iterable[Union[Token, Molecule]]],
) -> Union[Molecule, int]:
    """
    Evaluate a formula to a molecule or a bare number.

    Args:
        source: Formula string, or tokens in postfix order as returned by
                to_rpn. Molecules may appear in the postfix input either as
                MOLECULE tokens or directly; they are copied, never mutated.

    Returns:
        The resulting Molecule. A formula that is a single number evaluates
        to that int; a single atom evaluates to a one-entry Molecule.

    Raises:
        MalformedFormulaError: If a string source fails to tokenize
        EvaluationError: On empty input, a missing operand, a parenthesis in
            postfix input, or more than one operand left at the end
        InvalidOperationError: If an operator receives operand types it
            cannot combine

    Example:
        >>> evaluate("2H2O2")
        Molecule({'H': 4, 'O': 4})
        >>> evaluate("A - A")
        Molecule({})
    """
    if isinstance(source, str):
        postfix = to_rpn(tokenize(source))
    else:
        postfix = deque(source)

    if not postfix:
        raise EvaluationError("Empty input")

    operands: list[Token] = []

    while postfix:
        token = _as_token(postfix.popleft())
        kind = token.type

        if kind in OPERANDS:
            operands.append(token)
        elif kind in OPERATORS:
            if not operands:
                raise EvaluationError(
                    "Unexpected end of input (expected rhs value, got none)"
                )
            rhs = operands.pop()
            if not operands:
                raise EvaluationError(
                    "Unexpected end of input (expected lhs value, got none)"
                )
            lhs = operands.pop()
            operands.append(_apply(token, lhs, rhs))
        else:
            raise EvaluationError(f"Unexpected {token.name} in postfix input")

    if len(operands) != 1:
        raise EvaluationError(
            f"Expected a single result, got {len(operands)} operands"
        )

    result = operands[0]
    logger.debug(f"Evaluated to {result}")
    if result.type == TokenType.NUMBER:
        return result.value
    return _to_molecule(result)
