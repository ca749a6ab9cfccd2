from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import numpy as np

from ..errors import UnsupportedGateError
from ..gates import Gate, decompose, is_clifford_gate
from ..simulator import SimulatorConfig, StabilizerSimulator
from ._extract import Operation, extract_operations, extract_register_layout

LOGGER = logging.getLogger(__name__)

# A compiled step is either a run of gates or a ("measure"/"reset", qubit, clbit) triple.
_Step = Union[List[Gate], Tuple[str, int, Optional[int]]]


@dataclass
class TableauResult:
    num_qubits: int
    shots: int
    memory: List[str] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)
    statevector: Optional[np.ndarray] = None


def _compile(ops: List[Operation], circuit_name: str) -> Tuple[List[_Step], int]:
    steps: List[_Step] = []
    pending: List[Gate] = []
    gate_ops = 0
    for op in ops:
        if op.name in {"measure", "reset"}:
            if pending:
                steps.append(pending)
                pending = []
            clbit = op.clbits[0] if op.clbits else None
            steps.append((op.name, op.qubits[0], clbit))
            continue
        if not is_clifford_gate(op.name):
            raise UnsupportedGateError(op.name, circuit_name)
        pending.extend(decompose(op.name, op.qubits))
        gate_ops += 1
    if pending:
        steps.append(pending)
    return steps, gate_ops


def _bitstring(bits: List[bool], layout: List[Tuple[int, ...]]) -> str:
    # Bit 0 of each register is its rightmost character; the first register
    # is the rightmost group and groups are separated by spaces.
    groups = [
        "".join("1" if bits[index] else "0" for index in reversed(register))
        for register in layout
    ]
    return " ".join(reversed(groups))


class TableauBackend:
    """Run Clifford circuits on :class:`~stabsim.simulator.StabilizerSimulator`."""

    def __init__(self, seed: int = 0, *, validate_invariants: bool = False) -> None:
        self.seed = int(seed)
        self.validate_invariants = validate_invariants

    def _shot_seeds(self, shots: int) -> List[int]:
        state = np.random.SeedSequence(self.seed).generate_state(shots, dtype=np.uint64)
        return [int(value) for value in state]

    def run(
        self,
        circuit: Any,
        shots: int = 1,
        *,
        progress_cb: Optional[Callable[[int], None]] = None,
        want_statevector: bool = False,
    ) -> TableauResult:
        if shots < 1:
            raise ValueError(f"shots must be >= 1, got {shots}")
        num_qubits, num_clbits, ops = extract_operations(circuit)
        circuit_name = circuit.name or "unknown"
        layout = extract_register_layout(circuit)
        result = TableauResult(num_qubits=num_qubits, shots=shots)
        if num_qubits == 0:
            return result

        steps, gate_ops = _compile(ops, circuit_name)
        has_measurements = any(isinstance(step, tuple) for step in steps)
        LOGGER.info(
            "Simulating circuit %s on tableau backend: %d qubits, %d Clifford ops, %d shots.",
            circuit_name,
            num_qubits,
            gate_ops,
            shots,
        )

        counts: Counter = Counter()
        sim: Optional[StabilizerSimulator] = None
        for shot_seed in self._shot_seeds(shots):
            config = SimulatorConfig(seed=shot_seed, validate_invariants=self.validate_invariants)
            sim = StabilizerSimulator(num_qubits, config=config)
            clbits = [False] * num_clbits
            for step in steps:
                if isinstance(step, list):
                    sim.apply_gates(step)
                    continue
                kind, qubit, clbit = step
                outcome = sim.measure(qubit)
                if kind == "measure" and clbit is not None:
                    clbits[clbit] = outcome
                elif kind == "reset" and outcome:
                    sim.apply_gates(decompose("x", (qubit,)))
            if num_clbits:
                key = _bitstring(clbits, layout)
                result.memory.append(key)
                counts[key] += 1
            if progress_cb is not None:
                progress_cb(max(1, gate_ops))

        result.counts = dict(counts)

        if want_statevector:
            if has_measurements:
                LOGGER.warning(
                    "Circuit %s contains measurements; no statevector is returned.", circuit_name
                )
            elif shots > 1:
                LOGGER.warning(
                    "Statevector requested for %d shots of circuit %s; only single-shot runs return one.",
                    shots,
                    circuit_name,
                )
            elif sim is not None:
                result.statevector = sim.state_vector()
        return result
