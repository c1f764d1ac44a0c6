"""
Molecule - a multiset of atom symbols with signed integer frequencies.

Every mutation goes through this class so that no atom is ever stored with a
frequency of zero and every key is a valid atom symbol.
"""

__all__ = [
    "Molecule",
    "is_atom",
]

import numbers
import re
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Optional, Union

from chemeval.config import HILL_FIRST

_ATOM_PATTERN = re.compile(r"[A-Z][a-z]?")

Operand = Union["Molecule", Mapping, str]


def is_atom(value: object) -> bool:
    """
    Check if a value is a valid atom symbol.

    Args:
        value: Value to check

    Returns:
        True if value is one uppercase letter, optionally followed by one
        lowercase letter

    Example:
        >>> is_atom("Cl")
        True
        >>> is_atom("CL")
        False
    """
    return isinstance(value, str) and _ATOM_PATTERN.fullmatch(value) is not None


def _check_atom(atom: object) -> str:
    if not is_atom(atom):
        raise ValueError(f"Invalid atom format: {atom!r}")
    return atom  # type: ignore[return-value]


def _check_frequency(frequency: object) -> int:
    if isinstance(frequency, bool) or not isinstance(frequency, numbers.Integral):
        raise TypeError(f"Frequency must be an integer, got {type(frequency).__name__}")
    return int(frequency)


class Molecule(MutableMapping):
    """
    Mapping of atom symbol to frequency.

    Keys keep insertion order. Equality is structural and ignores order, and
    a Molecule compares equal to a plain dict holding the same items.

    Example:
        >>> Molecule("H", 2).add("O")
        Molecule({'H': 2, 'O': 1})
        >>> Molecule([("H", 2), ("O",)]) == {"O": 1, "H": 2}
        True
    """

    def __init__(
        self,
        source: Optional[Union[Operand, Iterable]] = None,
        frequency: int = 1,
    ):
        """
        Create a molecule.

        Args:
            source: None for an empty molecule, an atom symbol, another
                    molecule (or mapping) to copy, or an iterable of
                    (atom, frequency) pairs where frequency may be omitted
            frequency: Frequency of the atom when source is an atom symbol

        Raises:
            ValueError: On an invalid atom symbol
            TypeError: On a non-integer frequency, an unsupported source, or
                a pair that is a string or holds other than one or two items
        """
        self._data: dict[str, int] = {}

        if source is None:
            return
        if isinstance(source, str):
            self.add_mut(source, frequency)
        elif isinstance(source, Mapping):
            for atom, freq in source.items():
                self.set(atom, freq)
        elif isinstance(source, Iterable):
            for pair in source:
                if not isinstance(pair, str) and isinstance(pair, Iterable):
                    pair = tuple(pair)
                if not isinstance(pair, tuple) or len(pair) not in (1, 2):
                    raise TypeError(f"Expected an (atom, frequency) pair, got {pair!r}")
                self.add_mut(*pair)
        else:
            raise TypeError(f"Cannot build a molecule from {type(source).__name__}")

    @classmethod
    def from_atom(cls, atom: str, frequency: int = 1) -> "Molecule":
        """Create a molecule holding a single atom."""
        return cls(atom, frequency)

    # Mapping protocol

    def __getitem__(self, atom: str) -> int:
        return self._data[atom]

    def __setitem__(self, atom: str, frequency: int) -> None:
        atom = _check_atom(atom)
        frequency = _check_frequency(frequency)
        if frequency == 0:
            self._data.pop(atom, None)
        else:
            self._data[atom] = frequency

    def __delitem__(self, atom: str) -> None:
        del self._data[atom]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Molecule({self._data!r})"

    def __str__(self) -> str:
        return self.to_formula()

    def set(self, atom: str, frequency: int) -> "Molecule":
        """
        Set the frequency of an atom, removing it when frequency is zero.

        Raises:
            ValueError: If atom is not a valid atom symbol
        """
        self[atom] = frequency
        return self

    def copy(self) -> "Molecule":
        return Molecule(self)

    def total(self) -> int:
        """Sum of all frequencies."""
        return sum(self._data.values())

    # Arithmetic

    def _shift(self, atom: str, delta: int) -> None:
        freq = self._data.get(atom, 0) + delta
        if freq == 0:
            self._data.pop(atom, None)
        else:
            self._data[atom] = freq

    def _add_or_subtract_mut(self, other: Operand, frequency: int, sign: int) -> "Molecule":
        if isinstance(other, str):
            self._shift(_check_atom(other), sign * _check_frequency(frequency))
        elif isinstance(other, Mapping):
            # Snapshot so that m.add_mut(m) sees the original counts
            for atom, freq in list(other.items()):
                self._shift(_check_atom(atom), sign * _check_frequency(freq))
        else:
            raise TypeError(
                f"Expected a molecule or an atom symbol, got {type(other).__name__}"
            )
        return self

    def add_mut(self, other: Operand, frequency: int = 1) -> "Molecule":
        """
        Add a molecule, or an atom at the given frequency, in place.

        Args:
            other: Molecule, mapping or atom symbol
            frequency: Amount to add when other is an atom symbol

        Returns:
            self
        """
        return self._add_or_subtract_mut(other, frequency, 1)

    def add(self, other: Operand, frequency: int = 1) -> "Molecule":
        """Return a copy with other added."""
        return self.copy().add_mut(other, frequency)

    def subtract_mut(self, other: Operand, frequency: int = 1) -> "Molecule":
        """
        Subtract a molecule, or an atom at the given frequency, in place.

        Args:
            other: Molecule, mapping or atom symbol
            frequency: Amount to subtract when other is an atom symbol

        Returns:
            self
        """
        return self._add_or_subtract_mut(other, frequency, -1)

    def subtract(self, other: Operand, frequency: int = 1) -> "Molecule":
        """Return a copy with other subtracted."""
        return self.copy().subtract_mut(other, frequency)

    def multiply_mut(self, factor: int) -> "Molecule":
        """Multiply every frequency by factor in place; a factor of 0 empties it."""
        factor = _check_frequency(factor)
        if factor == 0:
            self._data.clear()
        else:
            for atom in self._data:
                self._data[atom] *= factor
        return self

    def multiply(self, factor: int) -> "Molecule":
        """Return a copy with every frequency multiplied by factor."""
        return self.copy().multiply_mut(factor)

    def negate_mut(self) -> "Molecule":
        return self.multiply_mut(-1)

    def negate(self) -> "Molecule":
        return self.copy().negate_mut()

    # Operator sugar

    def __add__(self, other: Operand) -> "Molecule":
        if not isinstance(other, (str, Mapping)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> "Molecule":
        if not isinstance(other, (str, Mapping)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Operand) -> "Molecule":
        if not isinstance(other, (str, Mapping)):
            return NotImplemented
        return self.negate().add_mut(other)

    def __mul__(self, factor: int) -> "Molecule":
        if isinstance(factor, bool) or not isinstance(factor, numbers.Integral):
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Molecule":
        return self.negate()

    def __iadd__(self, other: Operand) -> "Molecule":
        if not isinstance(other, (str, Mapping)):
            return NotImplemented
        return self.add_mut(other)

    def __isub__(self, other: Operand) -> "Molecule":
        if not isinstance(other, (str, Mapping)):
            return NotImplemented
        return self.subtract_mut(other)

    def __imul__(self, factor: int) -> "Molecule":
        if isinstance(factor, bool) or not isinstance(factor, numbers.Integral):
            return NotImplemented
        return self.multiply_mut(factor)

    # Serialization

    def hill_order(self) -> list[str]:
        """
        Atoms in Hill order.

        Carbon then hydrogen come first when carbon is present; everything
        else (or everything, without carbon) is sorted alphabetically.
        """
        if "C" not in self._data:
            return sorted(self._data)
        first = [atom for atom in HILL_FIRST if atom in self._data]
        return first + sorted(atom for atom in self._data if atom not in HILL_FIRST)

    def to_formula(self) -> str:
        """
        Write the molecule as a Hill-order formula.

        Example:
            >>> Molecule([("O", 1), ("H", 2)]).to_formula()
            'H2O'
            >>> Molecule([("H", 6), ("C", 2), ("O", 1)]).to_formula()
            'C2H6O'
        """
        return "".join(
            atom if self._data[atom] == 1 else f"{atom}{self._data[atom]}"
            for atom in self.hill_order()
        )
