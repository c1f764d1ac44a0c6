"""
Tokenizer for chemical formulas.

Formulas rely on adjacency instead of explicit operators: "H2O" is H,
subscript 2, implicit add, O. The tokenizer inserts those operators so the
next stage can treat the stream as ordinary infix with precedence.
"""

__all__ = ["tokenize"]

from collections import deque

from loguru import logger

from .errors import MalformedFormulaError
from .tokens import TOKEN_NAMES, Token, TokenType

# A following atom or group is implicitly added after these
_IMPLICIT_ADD_AFTER = frozenset({TokenType.NUMBER, TokenType.ATOM, TokenType.GROUP_RIGHT})
# A number following these is a coefficient of what comes next
_COEFFICIENT_AFTER = frozenset({TokenType.GROUP_LEFT, TokenType.JOIN, TokenType.SUBTRACT})
# A number following these is a subscript of what came before
_SUBSCRIPT_AFTER = frozenset({TokenType.NUMBER, TokenType.ATOM, TokenType.GROUP_RIGHT})


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def tokenize(formula: str) -> deque[Token]:
    """
    Split a chemical formula into tokens, inserting implicit operators.

    Args:
        formula: Formula string (e.g., "2H2O" or "5(H2O)3CoMnSi")

    Returns:
        Deque of tokens in source order

    Raises:
        MalformedFormulaError: On an unknown character, an unmatched
            parenthesis, or a number where none may appear

    Example:
        >>> [str(t) for t in tokenize("2H2O")]
        ['2', '^', 'H', 'v', '2', '+', 'O']
    """
    tokens: deque[Token] = deque()
    idx = 0
    parens = 0
    length = len(formula)

    while idx < length:
        char = formula[idx]
        last = tokens[-1].type if tokens else None

        # Number
        if _is_digit(char):
            start = idx
            while idx < length and _is_digit(formula[idx]):
                idx += 1
            value = int(formula[start:idx])

            if last in _SUBSCRIPT_AFTER:
                tokens.append(Token(TokenType.SUBSCRIPT))
                tokens.append(Token.number(value))
            elif last is None or last in _COEFFICIENT_AFTER:
                tokens.append(Token.number(value))
                tokens.append(Token(TokenType.COEFFICIENT))
            else:
                raise MalformedFormulaError(
                    f"Unexpected number after {TOKEN_NAMES[last]}", start
                )

        # Atom
        elif _is_upper(char):
            if last in _IMPLICIT_ADD_AFTER:
                tokens.append(Token(TokenType.ADD))

            if idx + 1 < length and _is_lower(formula[idx + 1]):
                tokens.append(Token.atom(formula[idx : idx + 2]))
                idx += 2
            else:
                tokens.append(Token.atom(char))
                idx += 1

        # Group start
        elif char == "(":
            if last in _IMPLICIT_ADD_AFTER:
                tokens.append(Token(TokenType.ADD))
            tokens.append(Token(TokenType.GROUP_LEFT))
            parens += 1
            idx += 1

        # Group end
        elif char == ")":
            if parens == 0:
                raise MalformedFormulaError("Unmatched right bracket", idx)
            tokens.append(Token(TokenType.GROUP_RIGHT))
            parens -= 1
            idx += 1

        elif char == "+":
            tokens.append(Token(TokenType.JOIN))
            idx += 1

        elif char == "-":
            tokens.append(Token(TokenType.SUBTRACT))
            idx += 1

        elif char.isspace():
            idx += 1

        else:
            raise MalformedFormulaError(f"Unexpected token {char!r}", idx)

    if parens != 0:
        raise MalformedFormulaError("Unmatched left bracket", idx)

    logger.debug(f"Tokenized {formula!r} into {len(tokens)} tokens")
    return tokens
