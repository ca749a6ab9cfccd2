"""Helpers for converting qiskit circuits into backend-agnostic operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

from qiskit import QuantumCircuit


@dataclass(frozen=True)
class Operation:
    """Light-weight instruction descriptor extracted from a circuit."""

    name: str
    qubits: Tuple[int, ...]
    clbits: Tuple[int, ...] = ()


def _require_quantum_circuit(circuit: Any) -> QuantumCircuit:
    if not isinstance(circuit, QuantumCircuit):
        raise TypeError(
            f"Expected a qiskit QuantumCircuit, got {type(circuit).__name__}"
        )
    return circuit


def extract_operations(circuit: Any) -> Tuple[int, int, List[Operation]]:
    """Return ``(num_qubits, num_clbits, operations)`` for *circuit*."""

    qc = _require_quantum_circuit(circuit)
    if qc.num_qubits == 0:
        return 0, qc.num_clbits, []

    qubit_indices = {qubit: index for index, qubit in enumerate(qc.qubits)}
    clbit_indices = {clbit: index for index, clbit in enumerate(qc.clbits)}
    operations: List[Operation] = []

    for entry in qc.data:
        name = entry.operation.name.lower()
        if name in {"barrier"}:
            continue
        qubits = tuple(qubit_indices[q] for q in entry.qubits)
        clbits = tuple(clbit_indices[c] for c in entry.clbits)
        operations.append(Operation(name=name, qubits=qubits, clbits=clbits))

    return qc.num_qubits, qc.num_clbits, operations


def extract_register_layout(circuit: Any) -> List[Tuple[int, ...]]:
    """Return the clbit indices of each classical register, in declaration order.

    Clbits that belong to no register are collected into one trailing group.
    """

    qc = _require_quantum_circuit(circuit)
    clbit_indices = {clbit: index for index, clbit in enumerate(qc.clbits)}
    layout: List[Tuple[int, ...]] = []
    covered = set()
    for creg in qc.cregs:
        indices = tuple(clbit_indices[bit] for bit in creg)
        layout.append(indices)
        covered.update(indices)
    loose = tuple(index for index in range(qc.num_clbits) if index not in covered)
    if loose:
        layout.append(loose)
    return layout
