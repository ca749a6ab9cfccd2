"""Conjugation rules for H, S and CX on tableau generator rows."""

from __future__ import annotations

import logging

from .gates import Gate, H, S, gate_qubits
from .tableau import GeneratorRow, Tableau

LOGGER = logging.getLogger(__name__)

__all__ = ["apply_gate", "hadamard_row", "phase_row", "cnot_row"]


def hadamard_row(row: GeneratorRow, qubit: int) -> None:
    x = bool(row.x_bits[qubit])
    z = bool(row.z_bits[qubit])
    # X <-> Z; a Y factor picks up a sign because HYH = -Y.
    if x and z:
        row.phase_is_negated = not row.phase_is_negated
    row.x_bits[qubit] = z
    row.z_bits[qubit] = x


def phase_row(row: GeneratorRow, qubit: int) -> None:
    x = bool(row.x_bits[qubit])
    z = bool(row.z_bits[qubit])
    # X -> Y -> -X; the sign flips when starting from Y.
    if x and z:
        row.phase_is_negated = not row.phase_is_negated
    row.z_bits[qubit] = z ^ x


def cnot_row(row: GeneratorRow, control: int, target: int) -> None:
    x_c = bool(row.x_bits[control])
    z_c = bool(row.z_bits[control])
    x_t = bool(row.x_bits[target])
    z_t = bool(row.z_bits[target])
    if x_c and z_t and (z_c ^ x_t ^ True):
        row.phase_is_negated = not row.phase_is_negated
    row.x_bits[target] = x_t ^ x_c
    row.z_bits[control] = z_c ^ z_t


def apply_gate(tableau: Tableau, gate: Gate) -> None:
    """Conjugate every stabilizer and destabilizer row of ``tableau`` by ``gate``."""

    qubits = [tableau.check_qubit(q) for q in gate_qubits(gate)]
    if isinstance(gate, H):
        for row in tableau.rows():
            hadamard_row(row, qubits[0])
    elif isinstance(gate, S):
        for row in tableau.rows():
            phase_row(row, qubits[0])
    else:
        control, target = qubits
        for row in tableau.rows():
            cnot_row(row, control, target)
    LOGGER.debug("Applied %r to %d-qubit tableau.", gate, tableau.num_qubits)
