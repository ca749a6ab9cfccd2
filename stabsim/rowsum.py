"""Pauli multiplication of generator rows with exact phase tracking."""

from __future__ import annotations

import numpy as np

from .errors import InvariantViolationError
from .tableau import GeneratorRow

__all__ = ["pauli_imaginary_phase_exponent", "phase_exponent_sum", "rowsum"]


def pauli_imaginary_phase_exponent(x1: bool, z1: bool, x2: bool, z2: bool) -> int:
    """Return the power of ``i`` produced by multiplying Pauli ``(x1, z1)`` by ``(x2, z2)``.

    For example ``X * Z = -iY`` gives ``-1`` and ``Z * X = iY`` gives ``1``.
    """

    x2_i = int(x2)
    z2_i = int(z2)
    if x1 and z1:
        return z2_i - x2_i
    if x1:
        return z2_i * (2 * x2_i - 1)
    if z1:
        return x2_i * (1 - 2 * z2_i)
    return 0


def phase_exponent_sum(row_i: GeneratorRow, row_h: GeneratorRow) -> int:
    """Sum :func:`pauli_imaginary_phase_exponent` over every qubit of ``row_i * row_h``."""

    x1 = row_i.x_bits.astype(np.int64)
    z1 = row_i.z_bits.astype(np.int64)
    x2 = row_h.x_bits.astype(np.int64)
    z2 = row_h.z_bits.astype(np.int64)
    y_terms = x1 * z1 * (z2 - x2)
    x_terms = x1 * (1 - z1) * z2 * (2 * x2 - 1)
    z_terms = (1 - x1) * z1 * x2 * (1 - 2 * z2)
    return int(np.sum(y_terms + x_terms + z_terms))


def rowsum(row_h: GeneratorRow, row_i: GeneratorRow) -> None:
    """Replace ``row_h`` with the Pauli product ``row_i * row_h``.

    The resulting coefficient must be real. An odd power of ``i`` means the
    two rows anticommute, which can only happen once the tableau invariants
    are broken; :class:`InvariantViolationError` is raised and ``row_h`` is
    left untouched.
    """

    if row_h.num_qubits != row_i.num_qubits:
        raise ValueError(
            f"Cannot multiply rows over {row_i.num_qubits} and {row_h.num_qubits} qubits"
        )
    exponent = phase_exponent_sum(row_i, row_h)
    exponent += 2 * int(row_h.phase_is_negated) + 2 * int(row_i.phase_is_negated)
    residue = exponent % 4
    if residue == 0:
        negated = False
    elif residue == 2:
        negated = True
    else:
        raise InvariantViolationError(
            f"Product of {row_i.to_pauli_string()} and {row_h.to_pauli_string()} "
            f"has imaginary phase i^{residue}"
        )
    row_h.phase_is_negated = negated
    np.bitwise_xor(row_h.x_bits, row_i.x_bits, out=row_h.x_bits)
    np.bitwise_xor(row_h.z_bits, row_i.z_bits, out=row_h.z_bits)
