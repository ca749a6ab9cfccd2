from __future__ import annotations

import pathlib
import sys

import pytest

# Ensure the repository root is on sys.path when running from source.
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from stabsim import circuits
from stabsim.gates import is_clifford_gate


def test_random_clifford_is_reproducible_and_clifford_only():
    a = circuits.random_clifford(5, depth=4, seed=9)
    b = circuits.random_clifford(5, depth=4, seed=9)

    assert str(a) == str(b)
    assert all(is_clifford_gate(inst.operation) for inst in a.data)


def test_build_drops_unused_arguments():
    qc = circuits.build("ghz", num_qubits=3, depth=10, seed=1)

    assert qc.num_qubits == 3
    assert circuits.build("bell", num_qubits=7).num_qubits == 2


def test_build_rejects_unknown_kind():
    with pytest.raises(ValueError):
        circuits.build("qft", num_qubits=3)
