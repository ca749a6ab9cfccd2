"""CHP stabilizer tableau simulation for H, S and CNOT circuits."""

from .errors import (
    InvariantViolationError,
    QubitIndexError,
    StabilizerError,
    UnsupportedGateError,
)
from .gates import Cx, Gate, H, S, decompose
from .gate_engine import apply_gate
from .measurement import is_deterministic, measure, peek_deterministic
from .rowsum import pauli_imaginary_phase_exponent, rowsum
from .simulator import SimulatorConfig, StabilizerSimulator
from .tableau import GeneratorRow, Tableau

__all__ = [
    "InvariantViolationError",
    "QubitIndexError",
    "StabilizerError",
    "UnsupportedGateError",
    "Cx",
    "Gate",
    "H",
    "S",
    "decompose",
    "apply_gate",
    "is_deterministic",
    "measure",
    "peek_deterministic",
    "pauli_imaginary_phase_exponent",
    "rowsum",
    "SimulatorConfig",
    "StabilizerSimulator",
    "GeneratorRow",
    "Tableau",
]
