from __future__ import annotations

import pathlib
import sys

import numpy as np
import pytest

# Ensure the repository root is on sys.path when running from source.
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from stabsim.errors import InvariantViolationError, QubitIndexError
from stabsim.tableau import GeneratorRow, Tableau


def test_zero_state_generators():
    tab = Tableau.zero_state(3)

    assert tab.num_qubits == 3
    assert tab.stabilizer_strings() == ["+ZII", "+IZI", "+IIZ"]
    assert tab.destabilizer_strings() == ["+XII", "+IXI", "+IIX"]
    tab.validate()


def test_zero_state_rejects_empty_register():
    with pytest.raises(ValueError):
        Tableau.zero_state(0)


@pytest.mark.parametrize("num_qubits", [2.7, 2.0, "2", True, None])
def test_zero_state_rejects_non_integer_sizes(num_qubits):
    with pytest.raises(TypeError):
        Tableau.zero_state(num_qubits)


def test_zero_state_accepts_numpy_integers():
    assert Tableau.zero_state(np.int64(2)).num_qubits == 2


def test_pauli_string_round_trip_keeps_sign_and_letters():
    row = GeneratorRow.from_pauli_string("-XZ_Y")

    assert row.phase_is_negated
    assert row.num_qubits == 4
    assert [row.pauli_at(q) for q in range(4)] == ["X", "Z", "I", "Y"]
    assert row.to_pauli_string() == "-XZIY"


def test_from_pauli_string_rejects_unknown_letters():
    with pytest.raises(ValueError):
        GeneratorRow.from_pauli_string("+XQ")


def test_identity_row_is_fully_initialised():
    row = GeneratorRow.identity(5)

    assert not row.phase_is_negated
    assert row.is_identity()
    assert row.x_bits.dtype == np.bool_
    assert row.z_bits.shape == (5,)


@pytest.mark.parametrize(
    "left, right, commutes",
    [
        ("+X", "+Z", False),
        ("+X", "+Y", False),
        ("+Z", "-Z", True),
        ("+XX", "+ZZ", True),
        ("+XI", "+IZ", True),
        ("+XY", "+YX", True),
        ("+XZ", "+ZZ", False),
    ],
)
def test_commutation_is_symplectic_parity(left, right, commutes):
    a = GeneratorRow.from_pauli_string(left)
    b = GeneratorRow.from_pauli_string(right)

    assert a.commutes_with(b) is commutes
    assert b.commutes_with(a) is commutes


def test_commutes_with_returns_a_python_bool():
    a = GeneratorRow.from_pauli_string("+X")
    b = GeneratorRow.from_pauli_string("+Z")

    assert type(a.commutes_with(b)) is bool
    assert type(a.commutes_with(a)) is bool


def test_copy_is_independent_of_source_tableau():
    tab = Tableau.zero_state(2, seed=11)
    clone = tab.copy()

    clone.stabilizers[0].x_bits[1] = True
    clone.destabilizers[1].phase_is_negated = True

    assert tab.stabilizer_strings() == ["+ZI", "+IZ"]
    assert tab.destabilizer_strings() == ["+XI", "+IX"]
    # Random streams continue identically from the copy point.
    assert np.array_equal(tab.rng.integers(0, 2, size=32), clone.rng.integers(0, 2, size=32))


@pytest.mark.parametrize("qubit", [-1, 3, 100])
def test_check_qubit_rejects_out_of_range(qubit):
    tab = Tableau.zero_state(3)

    with pytest.raises(QubitIndexError) as exc_info:
        tab.check_qubit(qubit)

    assert isinstance(exc_info.value, IndexError)
    assert exc_info.value.num_qubits == 3


@pytest.mark.parametrize("qubit", [1.0, "0", True])
def test_check_qubit_rejects_non_integers(qubit):
    tab = Tableau.zero_state(3)

    with pytest.raises(TypeError):
        tab.check_qubit(qubit)


def test_check_qubit_accepts_numpy_integers():
    tab = Tableau.zero_state(3)

    assert tab.check_qubit(np.int64(2)) == 2


def test_find_x_stabilizer_index():
    rows = [GeneratorRow.from_pauli_string(s) for s in ("+ZII", "+XXI", "+YZI")]
    destabs = [GeneratorRow.from_pauli_string(s) for s in ("+XII", "+IZI", "+IIX")]
    tab = Tableau(rows, destabs, np.random.default_rng(0))

    assert tab.find_x_stabilizer_index(0) == 1
    assert tab.find_x_stabilizer_index(1) == 1
    assert tab.find_x_stabilizer_index(2) is None


def test_tableau_rejects_rows_of_the_wrong_width():
    rows = [GeneratorRow.from_pauli_string(s) for s in ("+ZI", "+XX", "+YZ")]
    destabs = [GeneratorRow.from_pauli_string(s) for s in ("+XI", "+IZ", "+IX")]

    with pytest.raises(ValueError):
        Tableau(rows, destabs, np.random.default_rng(0))


def test_mismatched_row_widths_are_rejected():
    with pytest.raises(ValueError):
        Tableau(
            [GeneratorRow.from_pauli_string("+Z")],
            [GeneratorRow.from_pauli_string("+XI")],
            np.random.default_rng(0),
        )


def test_validate_detects_commuting_pair():
    tab = Tableau.zero_state(2)
    tab.destabilizers[0] = GeneratorRow.from_pauli_string("+ZI")

    with pytest.raises(InvariantViolationError):
        tab.validate()


def test_validate_detects_anticommuting_stabilizers():
    tab = Tableau.zero_state(2)
    tab.stabilizers[1] = GeneratorRow.from_pauli_string("+XZ")

    with pytest.raises(InvariantViolationError):
        tab.validate()
