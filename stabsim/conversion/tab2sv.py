from __future__ import annotations

import logging

import numpy as np
import stim

from ..tableau import Tableau

LOGGER = logging.getLogger(__name__)


def tableau_to_stim(tableau: Tableau) -> stim.Tableau:
    """Return the Clifford that maps ``X_k`` to destabilizer ``k`` and ``Z_k`` to stabilizer ``k``."""

    xs = [stim.PauliString(text) for text in tableau.destabilizer_strings()]
    zs = [stim.PauliString(text) for text in tableau.stabilizer_strings()]
    return stim.Tableau.from_conjugated_generators(xs=xs, zs=zs)


def tableau_to_statevector(tableau: Tableau) -> np.ndarray:
    """Materialise the stabilizer state as a dense vector (qubit 0 least significant).

    The global phase is not tracked by the tableau and is whatever stim picks.
    """

    n = tableau.num_qubits
    if n > 24:
        LOGGER.warning("Materialising a statevector for %d qubits needs %d amplitudes.", n, 1 << n)
    state = tableau_to_stim(tableau).to_state_vector(endian="little")
    return np.asarray(state, dtype=np.complex128)
