"""Error types raised by the stabilizer simulator."""

from __future__ import annotations

__all__ = [
    "StabilizerError",
    "InvariantViolationError",
    "QubitIndexError",
    "UnsupportedGateError",
]


class StabilizerError(RuntimeError):
    """Base class for all simulator errors."""


class InvariantViolationError(StabilizerError):
    """Raised when the tableau no longer satisfies its commutation invariants.

    This signals a defect in the engine rather than a caller mistake; the
    tableau that raised it must be considered corrupted.
    """


class QubitIndexError(StabilizerError, IndexError):
    """Raised when a qubit index lies outside the register."""

    def __init__(self, qubit: int, num_qubits: int) -> None:
        super().__init__(f"Qubit index {qubit} out of range for {num_qubits}-qubit register.")
        self.qubit = qubit
        self.num_qubits = num_qubits


class UnsupportedGateError(StabilizerError):
    """Raised when a circuit asks for a gate outside the Clifford set."""

    def __init__(self, gate: str, circuit_name: str = "unknown") -> None:
        message = f"Gate '{gate}' is not a supported Clifford operation (circuit '{circuit_name}')."
        super().__init__(message)
        self.gate = gate
        self.circuit_name = circuit_name
