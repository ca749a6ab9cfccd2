from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

import numpy as np

from .gate_engine import apply_gate
from .gates import Gate
from .measurement import is_deterministic, measure, peek_deterministic
from .tableau import Tableau

LOGGER = logging.getLogger(__name__)

_MAX_SEED = 1 << 64


@dataclass
class SimulatorConfig:
    seed: int = 0
    # Re-check the commutation invariants after every gate and measurement.
    validate_invariants: bool = False


class StabilizerSimulator:
    """CHP stabilizer simulator over a fixed number of qubits.

    The register starts in ``|0...0>``. Gates are restricted to H, S and Cx;
    measurements are in the computational basis and consume randomness only
    when the outcome is not already fixed by the state. Runs are reproducible
    for a given seed.
    """

    def __init__(
        self,
        num_qubits: int,
        seed: Optional[int] = None,
        *,
        config: Optional[SimulatorConfig] = None,
    ) -> None:
        cfg = config or SimulatorConfig()
        if seed is not None:
            cfg = replace(cfg, seed=seed)
        if isinstance(cfg.seed, bool) or not isinstance(cfg.seed, (int, np.integer)):
            raise TypeError(f"Seed must be an integer, got {type(cfg.seed).__name__}")
        if not 0 <= int(cfg.seed) < _MAX_SEED:
            raise ValueError(f"Seed must be an unsigned 64-bit integer, got {cfg.seed}")
        self.config = cfg
        self._tableau = Tableau.zero_state(num_qubits, seed=int(cfg.seed))
        self._gate_count = 0
        self._measurement_count = 0

    @classmethod
    def seeded(cls, num_qubits: int) -> "StabilizerSimulator":
        return cls(num_qubits, seed=0)

    @property
    def num_qubits(self) -> int:
        return self._tableau.num_qubits

    @property
    def tableau(self) -> Tableau:
        return self._tableau

    @property
    def gate_count(self) -> int:
        return self._gate_count

    @property
    def measurement_count(self) -> int:
        return self._measurement_count

    def _after_mutation(self) -> None:
        if self.config.validate_invariants:
            self._tableau.validate()

    def apply_gate(self, gate: Gate) -> None:
        apply_gate(self._tableau, gate)
        self._gate_count += 1
        self._after_mutation()

    def apply_gates(self, gates: Iterable[Gate]) -> None:
        for gate in gates:
            self.apply_gate(gate)

    def measure(self, qubit: int) -> bool:
        outcome = measure(self._tableau, qubit)
        self._measurement_count += 1
        self._after_mutation()
        return outcome

    def measure_all(self) -> List[bool]:
        return [self.measure(q) for q in range(self.num_qubits)]

    def is_deterministic(self, qubit: int) -> bool:
        return is_deterministic(self._tableau, qubit)

    def peek_deterministic(self, qubit: int) -> Optional[bool]:
        return peek_deterministic(self._tableau, qubit)

    def validate(self) -> None:
        self._tableau.validate()

    def stabilizers(self) -> List[str]:
        return self._tableau.stabilizer_strings()

    def destabilizers(self) -> List[str]:
        return self._tableau.destabilizer_strings()

    def copy(self) -> "StabilizerSimulator":
        """Independent copy including the random generator state."""

        clone = StabilizerSimulator.__new__(StabilizerSimulator)
        clone.config = replace(self.config)
        clone._tableau = self._tableau.copy()
        clone._gate_count = self._gate_count
        clone._measurement_count = self._measurement_count
        return clone

    def to_stim(self):
        from .conversion import tableau_to_stim

        return tableau_to_stim(self._tableau)

    def state_vector(self) -> np.ndarray:
        from .conversion import tableau_to_statevector

        return tableau_to_statevector(self._tableau)

    def __repr__(self) -> str:
        return (
            f"StabilizerSimulator(num_qubits={self.num_qubits}, seed={self.config.seed}, "
            f"gates={self._gate_count}, measurements={self._measurement_count})"
        )
