"""Clifford gate descriptors and helpers for named Clifford operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple, Union

from .errors import UnsupportedGateError

__all__ = [
    "H",
    "S",
    "Cx",
    "Gate",
    "CLIFFORD_GATES",
    "gate_name",
    "gate_qubits",
    "is_clifford_gate",
    "decompose",
]


@dataclass(frozen=True)
class H:
    """Hadamard on ``qubit``."""

    qubit: int


@dataclass(frozen=True)
class S:
    """Phase gate ``diag(1, i)`` on ``qubit``."""

    qubit: int


@dataclass(frozen=True)
class Cx:
    """Controlled-NOT from ``control`` onto ``target``."""

    control: int
    target: int

    def __post_init__(self) -> None:
        if self.control == self.target:
            raise ValueError(f"Cx control and target must differ, got {self.control}")


Gate = Union[H, S, Cx]


def gate_qubits(gate: Gate) -> Tuple[int, ...]:
    if isinstance(gate, Cx):
        return (gate.control, gate.target)
    if isinstance(gate, (H, S)):
        return (gate.qubit,)
    raise TypeError(f"Unsupported gate object: {gate!r}")


# Each entry expands a named Clifford into the H/S/CX generating set. Indices
# in the templates refer to positions in the instruction's qubit tuple.
# Expansions are exact up to a global phase.
_DECOMPOSITIONS: Dict[str, Tuple[Tuple[str, Tuple[int, ...]], ...]] = {
    "id": (),
    "i": (),
    "h": (("h", (0,)),),
    "s": (("s", (0,)),),
    "sdg": (("s", (0,)), ("s", (0,)), ("s", (0,))),
    "z": (("s", (0,)), ("s", (0,))),
    "x": (("h", (0,)), ("s", (0,)), ("s", (0,)), ("h", (0,))),
    "y": (
        ("s", (0,)),
        ("s", (0,)),
        ("h", (0,)),
        ("s", (0,)),
        ("s", (0,)),
        ("h", (0,)),
    ),
    "sx": (("h", (0,)), ("s", (0,)), ("h", (0,))),
    "sxdg": (("h", (0,)), ("s", (0,)), ("s", (0,)), ("s", (0,)), ("h", (0,))),
    "cx": (("cx", (0, 1)),),
    "cnot": (("cx", (0, 1)),),
    "cz": (("h", (1,)), ("cx", (0, 1)), ("h", (1,))),
    "swap": (("cx", (0, 1)), ("cx", (1, 0)), ("cx", (0, 1))),
}

_ARITY = {name: (2 if name in {"cx", "cnot", "cz", "swap"} else 1) for name in _DECOMPOSITIONS}

CLIFFORD_GATES = frozenset(_DECOMPOSITIONS)


def gate_name(inst: Any) -> str:
    """Return a lowercase instruction name for ``inst``.

    Accepts plain strings, qiskit instructions and the local gate classes.
    """

    if isinstance(inst, str):
        return inst.lower()
    if isinstance(inst, (H, S, Cx)):
        return type(inst).__name__.lower()
    return str(getattr(inst, "name", inst)).lower()


def is_clifford_gate(inst: Any) -> bool:
    return gate_name(inst) in CLIFFORD_GATES


def decompose(name: str, qubits: Sequence[int]) -> List[Gate]:
    """Expand the Clifford gate ``name`` acting on ``qubits`` into H, S and Cx."""

    key = name.lower()
    template = _DECOMPOSITIONS.get(key)
    if template is None:
        raise UnsupportedGateError(key)
    if len(qubits) != _ARITY[key]:
        raise ValueError(
            f"Gate '{key}' acts on {_ARITY[key]} qubit(s), got {len(qubits)}: {tuple(qubits)}"
        )
    gates: List[Gate] = []
    for base, positions in template:
        targets = [int(qubits[pos]) for pos in positions]
        if base == "h":
            gates.append(H(targets[0]))
        elif base == "s":
            gates.append(S(targets[0]))
        else:
            gates.append(Cx(targets[0], targets[1]))
    return gates
