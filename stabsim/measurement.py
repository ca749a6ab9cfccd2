"""Computational-basis measurement on a stabilizer tableau."""

from __future__ import annotations

import logging
from typing import Optional

from .rowsum import rowsum
from .tableau import GeneratorRow, Tableau

LOGGER = logging.getLogger(__name__)

__all__ = ["is_deterministic", "peek_deterministic", "measure"]


def is_deterministic(tableau: Tableau, qubit: int) -> bool:
    """True when no stabilizer carries an X or Y factor on ``qubit``."""

    index = tableau.check_qubit(qubit)
    return tableau.find_x_stabilizer_index(index) is None


def _deterministic_outcome(tableau: Tableau, qubit: int) -> bool:
    # The product of the stabilizers whose destabilizer anticommutes with
    # Z_qubit is +/-Z_qubit; its sign is the outcome.
    scratch = GeneratorRow.identity(tableau.num_qubits)
    for destabilizer, stabilizer in zip(tableau.destabilizers, tableau.stabilizers):
        if destabilizer.x_bits[qubit]:
            rowsum(scratch, stabilizer)
    return bool(scratch.phase_is_negated)


def _collapse(tableau: Tableau, qubit: int, pivot: int) -> bool:
    pivot_row = tableau.stabilizers[pivot]
    for i in range(tableau.num_qubits):
        if i == pivot:
            continue
        if tableau.stabilizers[i].x_bits[qubit]:
            rowsum(tableau.stabilizers[i], pivot_row)
        if tableau.destabilizers[i].x_bits[qubit]:
            rowsum(tableau.destabilizers[i], pivot_row)

    tableau.destabilizers[pivot] = pivot_row
    outcome = bool(tableau.rng.integers(0, 2))
    tableau.stabilizers[pivot] = GeneratorRow.single(
        tableau.num_qubits, qubit, "Z", negated=outcome
    )
    return outcome


def peek_deterministic(tableau: Tableau, qubit: int) -> Optional[bool]:
    """Return the forced outcome of measuring ``qubit``, or ``None`` if it is random.

    The tableau and its random generator are left untouched.
    """

    index = tableau.check_qubit(qubit)
    if tableau.find_x_stabilizer_index(index) is not None:
        return None
    return _deterministic_outcome(tableau, index)


def measure(tableau: Tableau, qubit: int) -> bool:
    """Measure ``qubit`` in the Z basis; ``False`` is ``|0>`` and ``True`` is ``|1>``.

    Deterministic outcomes are read off the stabilizer group without touching
    the tableau. Otherwise the state collapses: the first stabilizer ``p`` with
    an X factor on ``qubit`` is multiplied into every other row that
    anticommutes with ``Z_qubit``, moves into destabilizer ``p``, and is
    replaced by ``±Z_qubit`` with the sign drawn from a fair coin.

    Raises :class:`~stabsim.errors.InvariantViolationError` if a row product
    comes out with an imaginary phase; the tableau is corrupted afterwards.
    """

    index = tableau.check_qubit(qubit)
    pivot = tableau.find_x_stabilizer_index(index)
    if pivot is None:
        outcome = _deterministic_outcome(tableau, index)
        LOGGER.debug("Qubit %d measured deterministically: %d", index, outcome)
        return outcome
    outcome = _collapse(tableau, index, pivot)
    LOGGER.debug("Qubit %d collapsed on stabilizer %d: %d", index, pivot, outcome)
    return outcome
