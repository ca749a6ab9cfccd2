"""State representation conversion helpers."""

from .tab2sv import tableau_to_statevector, tableau_to_stim

__all__ = [
    "tableau_to_statevector",
    "tableau_to_stim",
]
