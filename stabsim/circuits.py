"""Seeded Clifford circuit generators."""

from __future__ import annotations

import inspect
from typing import Any, Dict

import numpy as np
from qiskit import QuantumCircuit

__all__ = [
    "bell_pair",
    "ghz",
    "random_clifford",
    "CIRCUIT_REGISTRY",
    "build",
]


def bell_pair() -> QuantumCircuit:
    qc = QuantumCircuit(2)
    qc.h(0)
    qc.cx(0, 1)
    return qc


def ghz(num_qubits: int) -> QuantumCircuit:
    qc = QuantumCircuit(num_qubits)
    if num_qubits <= 0:
        return qc
    qc.h(0)
    for i in range(1, num_qubits):
        qc.cx(i - 1, i)
    return qc


def random_clifford(num_qubits: int, depth: int = 20, seed: int = 42) -> QuantumCircuit:
    """Layers of random single-qubit Cliffords followed by random disjoint pairs."""

    rng = np.random.default_rng(seed)
    qc = QuantumCircuit(num_qubits)
    cliff1 = ["h", "s", "sdg", "x", "y", "z"]
    cliff2 = ["cx", "cz", "swap"]
    for _ in range(depth):
        for qubit in range(num_qubits):
            getattr(qc, rng.choice(cliff1))(qubit)
        order = list(range(num_qubits))
        rng.shuffle(order)
        for a, b in zip(order[::2], order[1::2]):
            getattr(qc, rng.choice(cliff2))(int(a), int(b))
    return qc


CIRCUIT_REGISTRY = {
    "bell": bell_pair,
    "ghz": ghz,
    "random_clifford": random_clifford,
}


def build(kind: str, /, **kwargs: Any) -> QuantumCircuit:
    """Build circuit ``kind``, dropping keyword arguments its generator does not take."""

    try:
        factory = CIRCUIT_REGISTRY[kind]
    except KeyError as exc:
        raise ValueError(f"Unknown circuit kind: {kind}") from exc
    accepted = inspect.signature(factory).parameters
    params: Dict[str, Any] = {k: v for k, v in kwargs.items() if k in accepted}
    return factory(**params)
