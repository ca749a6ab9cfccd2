"""Circuit-level simulation backend on top of the tableau simulator."""

from ._extract import Operation, extract_operations, extract_register_layout
from .tableau import TableauBackend, TableauResult

__all__ = [
    "Operation",
    "extract_operations",
    "extract_register_layout",
    "TableauBackend",
    "TableauResult",
]
