import pytest

from chemeval import Molecule, evaluate, is_atom


def test_constructors():
    assert Molecule("H", 2) == Molecule([("H", 2)])
    assert Molecule("H") == Molecule([("H", 1)])
    assert Molecule("H", 1) == Molecule([("H",)])
    assert Molecule(Molecule("H", 2)) == Molecule("H", 2)
    assert Molecule({"H": 2, "O": 1}) == Molecule([("H", 2), ("O", 1)])
    assert Molecule.from_atom("Fe", 3) == {"Fe": 3}
    assert len(Molecule()) == 0


def test_constructor_accumulates_repeated_pairs():
    assert Molecule([("H", 1), ("O", 1), ("H", 1)]) == {"H": 2, "O": 1}
    assert Molecule([("H", 1), ("H", -1)]) == {}


def test_zero_frequency_is_not_stored():
    assert "H" not in Molecule("H", 0)
    assert "H" not in Molecule({"H": 0, "O": 1})

    molecule = Molecule("H", 2).set("H", 0)
    assert "H" not in molecule


@pytest.mark.parametrize("atom", ["asdasdas", "h", "CL", "", "H2", "Hee"])
def test_invalid_atoms_are_rejected(atom):
    with pytest.raises(ValueError):
        Molecule(atom)
    with pytest.raises(ValueError):
        Molecule().set(atom, 1)
    with pytest.raises(ValueError):
        Molecule().add_mut(atom)
    with pytest.raises(ValueError):
        Molecule([(atom, 2)])


@pytest.mark.parametrize("atom", [1, None, ("H",)])
def test_non_string_keys_are_rejected(atom):
    with pytest.raises(ValueError):
        Molecule().set(atom, 1)


def test_is_atom():
    assert is_atom("H")
    assert is_atom("Cl")
    assert not is_atom("cl")
    assert not is_atom("Cla")
    assert not is_atom(42)


@pytest.mark.parametrize("frequency", [1.5, "2", True])
def test_non_integer_frequencies_are_rejected(frequency):
    with pytest.raises(TypeError):
        Molecule("H", frequency)
    with pytest.raises(TypeError):
        Molecule().set("H", frequency)


def test_unsupported_source():
    with pytest.raises(TypeError):
        Molecule(42)


@pytest.mark.parametrize("pairs", [["H", "O"], ["Cl"], [("H", 2, 9)], [()], [42]])
def test_malformed_pairs_are_rejected(pairs):
    with pytest.raises(TypeError, match="pair"):
        Molecule(pairs)


def test_mapping_reads():
    molecule = Molecule([("H", 2), ("O", 1)])

    assert molecule["H"] == 2
    assert molecule.get("N") is None
    assert molecule.get("N", 0) == 0
    assert "O" in molecule
    assert list(molecule) == ["H", "O"]
    assert dict(molecule.items()) == {"H": 2, "O": 1}

    del molecule["O"]
    assert molecule == {"H": 2}
    with pytest.raises(KeyError):
        molecule["O"]


def test_equality_ignores_order():
    assert Molecule([("H", 2), ("O", 1)]) == Molecule([("O", 1), ("H", 2)])
    assert Molecule("H") != Molecule("H", 2)
    assert Molecule("H") != "H"


def test_copy_is_independent():
    original = Molecule("H", 2)
    copy = original.copy()
    copy.add_mut("O")

    assert original == {"H": 2}
    assert copy == {"H": 2, "O": 1}


def test_trims_zeroes_when_adding_and_subtracting():
    lhs = Molecule("H").add_mut("O")
    rhs = Molecule("H").add_mut("O")

    lhs.subtract_mut(rhs)
    assert "H" not in lhs
    assert "O" not in lhs
    assert len(lhs) == 0

    molecule = Molecule("H", -3).add_mut("H", 3)
    assert "H" not in molecule


@pytest.mark.parametrize("atom", ["H", "O", "Fe", "Xe"])
@pytest.mark.parametrize("frequency", [1, 2, -4])
def test_add_then_subtract_leaves_no_entry(atom, frequency):
    molecule = Molecule([("H", 2), ("O", 1)])
    expected = Molecule(molecule)
    molecule.add_mut(atom, frequency).subtract_mut(atom, frequency)

    assert molecule == expected
    if atom not in expected:
        assert atom not in molecule


def test_mutable_and_immutable_methods_agree():
    molecule = Molecule("H").add_mut("O")

    assert molecule.add("H") == molecule.add_mut("H")
    assert molecule.subtract("H") == molecule.subtract_mut("H")
    assert molecule.negate() == molecule.negate_mut()
    assert molecule.multiply(5) == molecule.multiply_mut(5)

    assert molecule == Molecule([("H", -5), ("O", -5)])


@pytest.mark.parametrize(
    "method, args",
    [
        ("add", ("H",)),
        ("add", ("Cl", 3)),
        ("add", (Molecule([("H", -2), ("N", 1)]),)),
        ("subtract", ("O",)),
        ("subtract", ("Cl", 3)),
        ("subtract", (Molecule([("H", 2), ("O", 1)]),)),
        ("multiply", (3,)),
        ("multiply", (0,)),
        ("multiply", (-1,)),
        ("negate", ()),
    ],
)
def test_immutable_form_leaves_receiver_untouched(method, args):
    molecule = Molecule([("H", 2), ("O", 1)])
    before = molecule.copy()

    result = getattr(molecule, method)(*args)
    assert molecule == before

    mutated = getattr(molecule, f"{method}_mut")(*args)
    assert mutated is molecule
    assert result == molecule


def test_add_self():
    molecule = Molecule([("H", 2), ("O", 1)])
    molecule.add_mut(molecule)
    assert molecule == {"H": 4, "O": 2}

    molecule.subtract_mut(molecule)
    assert molecule == {}


def test_add_plain_mapping():
    assert Molecule("H").add({"H": 1, "O": 1}) == {"H": 2, "O": 1}
    with pytest.raises(ValueError):
        Molecule("H").add({"oops": 1})
    with pytest.raises(TypeError):
        Molecule("H").add(3)


def test_multiply_by_zero_empties():
    assert Molecule([("H", 2), ("O", 1)]).multiply(0) == {}


def test_operators():
    water = Molecule([("H", 2), ("O", 1)])

    assert water + "O" == {"H": 2, "O": 2}
    assert "O" + water == {"H": 2, "O": 2}
    assert water - water == {}
    assert {"H": 2} - water == {"O": -1}
    assert water * 2 == 2 * water == {"H": 4, "O": 2}
    assert -water == {"H": -2, "O": -1}

    acc = Molecule()
    acc += water
    acc *= 3
    acc -= "O"
    assert acc == {"H": 6, "O": 2}

    with pytest.raises(TypeError):
        water * 1.5
    with pytest.raises(TypeError):
        water + 1


def test_total():
    assert Molecule([("H", 2), ("O", 1)]).total() == 3
    assert Molecule().total() == 0


def test_repr_and_formula():
    water = Molecule([("O", 1), ("H", 2)])

    assert repr(water) == "Molecule({'O': 1, 'H': 2})"
    assert str(water) == "H2O"
    assert Molecule([("O", 1), ("H", 6), ("C", 2)]).to_formula() == "C2H6O"
    assert Molecule([("Cl", 1), ("Na", 1)]).to_formula() == "ClNa"
    assert Molecule([("H", -2)]).to_formula() == "H-2"
    assert Molecule().to_formula() == ""


def test_works_with_any_combination_of_operands():
    a = evaluate("A - 2A")
    b = evaluate("2A - A")
    assert a != b

    c = evaluate("A - A")
    assert isinstance(c, Molecule)
    assert c.get("A") is None


def test_subtract_respects_associativity():
    assert evaluate("A - 2A") == Molecule([("A", -1)])
    assert evaluate("2A - A") == Molecule([("A", 1)])
    assert evaluate("A - C") == Molecule([("A", 1), ("C", -1)])
    assert evaluate("C - A") == Molecule([("A", -1), ("C", 1)])
