"""
Token types shared by the tokenizer, the postfix converter and the evaluator.

A token sequence is a collections.deque of Token; working stacks are lists.
"""

__all__ = [
    "TokenType",
    "Token",
    "TOKEN_NAMES",
    "TOKEN_SYMBOLS",
    "PRECEDENCE",
    "OPERATORS",
    "OPERANDS",
    "format_tokens",
]

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Any, Dict, FrozenSet

from .molecule import Molecule


class TokenType(IntEnum):
    NUMBER = auto()
    ATOM = auto()
    MOLECULE = auto()
    GROUP_LEFT = auto()
    GROUP_RIGHT = auto()
    ADD = auto()
    SUBTRACT = auto()
    COEFFICIENT = auto()
    SUBSCRIPT = auto()
    # Explicit "+"; combines like ADD but stays distinct in the stream
    JOIN = auto()


TOKEN_NAMES: Dict[TokenType, str] = {
    TokenType.NUMBER: "number",
    TokenType.ATOM: "atom",
    TokenType.MOLECULE: "molecule",
    TokenType.GROUP_LEFT: "left parenthesis",
    TokenType.GROUP_RIGHT: "right parenthesis",
    TokenType.ADD: "plus",
    TokenType.SUBTRACT: "minus",
    TokenType.COEFFICIENT: "coefficient",
    TokenType.SUBSCRIPT: "subscript",
    TokenType.JOIN: "join",
}

TOKEN_SYMBOLS: Dict[TokenType, str] = {
    TokenType.GROUP_LEFT: "(",
    TokenType.GROUP_RIGHT: ")",
    TokenType.ADD: "+",
    TokenType.SUBTRACT: "-",
    TokenType.COEFFICIENT: "^",
    TokenType.SUBSCRIPT: "v",
    TokenType.JOIN: "j",
}

# Higher binds tighter; equal precedence associates to the left
PRECEDENCE: Dict[TokenType, int] = {
    TokenType.SUBSCRIPT: 3,
    TokenType.ADD: 2,
    TokenType.COEFFICIENT: 1,
    TokenType.JOIN: 0,
    TokenType.SUBTRACT: 0,
}

OPERATORS: FrozenSet[TokenType] = frozenset(PRECEDENCE)
OPERANDS: FrozenSet[TokenType] = frozenset(
    {TokenType.NUMBER, TokenType.ATOM, TokenType.MOLECULE}
)


@dataclass(frozen=True)
class Token:
    """
    A single token.

    value is an int for NUMBER, an atom symbol for ATOM, a Molecule for
    MOLECULE and None for parentheses and operators.
    """

    type: TokenType
    value: Any = None

    @classmethod
    def number(cls, value: int) -> "Token":
        return cls(TokenType.NUMBER, value)

    @classmethod
    def atom(cls, symbol: str) -> "Token":
        return cls(TokenType.ATOM, symbol)

    @classmethod
    def molecule(cls, molecule: Molecule) -> "Token":
        return cls(TokenType.MOLECULE, molecule)

    @property
    def name(self) -> str:
        return TOKEN_NAMES[self.type]

    def is_operand(self) -> bool:
        return self.type in OPERANDS

    def is_operator(self) -> bool:
        return self.type in OPERATORS

    def __str__(self) -> str:
        if self.type == TokenType.MOLECULE:
            return f"[{self.value}]"
        if self.type in OPERANDS:
            return str(self.value)
        return TOKEN_SYMBOLS[self.type]


def format_tokens(tokens: Iterable[Token]) -> str:
    """
    Render a token sequence as space-separated symbols.

    Example:
        >>> from chemeval.core.tokenize import tokenize
        >>> format_tokens(tokenize("H2O"))
        'H v 2 + O'
    """
    return " ".join(str(token) for token in tokens)
