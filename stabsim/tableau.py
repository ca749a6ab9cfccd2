"""Generator rows and the stabilizer/destabilizer tableau."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np

from .errors import InvariantViolationError, QubitIndexError

LOGGER = logging.getLogger(__name__)

__all__ = ["GeneratorRow", "Tableau", "PAULI_LETTERS"]

# Indexed by ``2 * z + x``.
PAULI_LETTERS = ("I", "X", "Z", "Y")

_PAULI_BITS = {
    "I": (False, False),
    "X": (True, False),
    "Z": (False, True),
    "Y": (True, True),
}


@dataclass(eq=False)
class GeneratorRow:
    """One Pauli-string generator over ``N`` qubits.

    Qubit ``q`` carries X when ``x_bits[q]`` is set, Z when ``z_bits[q]`` is
    set and Y when both are. The overall coefficient is ``-1`` when
    ``phase_is_negated`` holds and ``+1`` otherwise.
    """

    phase_is_negated: bool
    x_bits: np.ndarray
    z_bits: np.ndarray

    @classmethod
    def identity(cls, num_qubits: int) -> "GeneratorRow":
        return cls(
            phase_is_negated=False,
            x_bits=np.zeros(num_qubits, dtype=bool),
            z_bits=np.zeros(num_qubits, dtype=bool),
        )

    @classmethod
    def single(cls, num_qubits: int, qubit: int, pauli: str, negated: bool = False) -> "GeneratorRow":
        """Return ``±P`` acting on ``qubit`` with identity everywhere else."""

        try:
            x, z = _PAULI_BITS[pauli.upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown Pauli letter {pauli!r}") from exc
        row = cls.identity(num_qubits)
        row.phase_is_negated = bool(negated)
        row.x_bits[qubit] = x
        row.z_bits[qubit] = z
        return row

    @classmethod
    def from_pauli_string(cls, text: str) -> "GeneratorRow":
        """Parse ``"+XZ_Y"``-style strings; ``_`` and ``I`` both mean identity."""

        negated = False
        body = text.strip()
        if body[:1] in {"+", "-"}:
            negated = body[0] == "-"
            body = body[1:]
        row = cls.identity(len(body))
        row.phase_is_negated = negated
        for qubit, letter in enumerate(body):
            letter = "I" if letter == "_" else letter.upper()
            if letter not in _PAULI_BITS:
                raise ValueError(f"Unknown Pauli letter {letter!r} in {text!r}")
            row.x_bits[qubit], row.z_bits[qubit] = _PAULI_BITS[letter]
        return row

    @property
    def num_qubits(self) -> int:
        return int(self.x_bits.shape[0])

    def copy(self) -> "GeneratorRow":
        return GeneratorRow(
            phase_is_negated=bool(self.phase_is_negated),
            x_bits=self.x_bits.copy(),
            z_bits=self.z_bits.copy(),
        )

    def pauli_at(self, qubit: int) -> str:
        return PAULI_LETTERS[2 * int(self.z_bits[qubit]) + int(self.x_bits[qubit])]

    def is_identity(self) -> bool:
        return not (self.x_bits.any() or self.z_bits.any())

    def commutes_with(self, other: "GeneratorRow") -> bool:
        # Symplectic inner product: one anticommuting factor per qubit where
        # the X part of one row meets the Z part of the other.
        overlap = np.count_nonzero(self.x_bits & other.z_bits) + np.count_nonzero(
            self.z_bits & other.x_bits
        )
        return bool(overlap % 2 == 0)

    def to_pauli_string(self) -> str:
        sign = "-" if self.phase_is_negated else "+"
        letters = (2 * self.z_bits.astype(np.int8) + self.x_bits.astype(np.int8)).tolist()
        return sign + "".join(PAULI_LETTERS[code] for code in letters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeneratorRow):
            return NotImplemented
        return (
            bool(self.phase_is_negated) == bool(other.phase_is_negated)
            and np.array_equal(self.x_bits, other.x_bits)
            and np.array_equal(self.z_bits, other.z_bits)
        )

    def __repr__(self) -> str:
        return f"GeneratorRow({self.to_pauli_string()!r})"


class Tableau:
    """Stabilizer and destabilizer generators of an ``N``-qubit state.

    The tableau owns its rows and its random generator. Row ``i`` of
    ``destabilizers`` anticommutes with row ``i`` of ``stabilizers`` and
    commutes with every other stabilizer; stabilizers commute pairwise, as do
    destabilizers. Gates and measurements preserve these relations and the
    measurement procedure depends on them.
    """

    def __init__(
        self,
        stabilizers: List[GeneratorRow],
        destabilizers: List[GeneratorRow],
        rng: np.random.Generator,
    ) -> None:
        if len(stabilizers) != len(destabilizers):
            raise ValueError("Tableau needs as many destabilizers as stabilizers")
        width = len(stabilizers)
        for row in (*stabilizers, *destabilizers):
            if row.num_qubits != width:
                raise ValueError(
                    f"Generator row spans {row.num_qubits} qubits, expected {width}"
                )
        self.stabilizers = stabilizers
        self.destabilizers = destabilizers
        self.rng = rng

    @classmethod
    def zero_state(cls, num_qubits: int, seed: Optional[int] = 0) -> "Tableau":
        """Tableau of ``|0...0>``: stabilizer ``i`` is ``+Z_i``, destabilizer ``i`` is ``+X_i``."""

        if isinstance(num_qubits, (bool, np.bool_)) or not isinstance(num_qubits, (int, np.integer)):
            raise TypeError(f"num_qubits must be an integer, got {type(num_qubits).__name__}")
        n = int(num_qubits)
        if n < 1:
            raise ValueError(f"num_qubits must be >= 1, got {num_qubits}")
        stabilizers = [GeneratorRow.single(n, q, "Z") for q in range(n)]
        destabilizers = [GeneratorRow.single(n, q, "X") for q in range(n)]
        LOGGER.debug("Initialised %d-qubit tableau with seed %s.", n, seed)
        return cls(stabilizers, destabilizers, np.random.default_rng(seed))

    @property
    def num_qubits(self) -> int:
        return len(self.stabilizers)

    def rows(self) -> Iterator[GeneratorRow]:
        """Iterate over all ``2N`` rows, destabilizers first."""

        yield from self.destabilizers
        yield from self.stabilizers

    def copy(self) -> "Tableau":
        return Tableau(
            [row.copy() for row in self.stabilizers],
            [row.copy() for row in self.destabilizers],
            copy.deepcopy(self.rng),
        )

    def check_qubit(self, qubit: int) -> int:
        if isinstance(qubit, (bool, np.bool_)) or not isinstance(qubit, (int, np.integer)):
            raise TypeError(f"Qubit index must be an integer, got {type(qubit).__name__}")
        index = int(qubit)
        if not 0 <= index < self.num_qubits:
            raise QubitIndexError(index, self.num_qubits)
        return index

    def find_x_stabilizer_index(self, qubit: int) -> Optional[int]:
        for index, row in enumerate(self.stabilizers):
            if row.x_bits[qubit]:
                return index
        return None

    def stabilizer_strings(self) -> List[str]:
        return [row.to_pauli_string() for row in self.stabilizers]

    def destabilizer_strings(self) -> List[str]:
        return [row.to_pauli_string() for row in self.destabilizers]

    def validate(self) -> None:
        """Raise :class:`InvariantViolationError` if the commutation relations fail."""

        n = self.num_qubits
        for i in range(n):
            for j in range(i + 1, n):
                if not self.stabilizers[i].commutes_with(self.stabilizers[j]):
                    raise InvariantViolationError(f"Stabilizers {i} and {j} anticommute")
                if not self.destabilizers[i].commutes_with(self.destabilizers[j]):
                    raise InvariantViolationError(f"Destabilizers {i} and {j} anticommute")
        for i in range(n):
            for j in range(n):
                commutes = self.destabilizers[i].commutes_with(self.stabilizers[j])
                if i == j and commutes:
                    raise InvariantViolationError(
                        f"Destabilizer {i} commutes with its paired stabilizer"
                    )
                if i != j and not commutes:
                    raise InvariantViolationError(
                        f"Destabilizer {i} anticommutes with stabilizer {j}"
                    )

    def __repr__(self) -> str:
        return (
            f"Tableau(stabilizers={self.stabilizer_strings()}, "
            f"destabilizers={self.destabilizer_strings()})"
        )
