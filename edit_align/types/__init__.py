"""Types for the project."""

from .table import Cell, CostTable, UNSET
from .alignment import GAP, Alignment, AlignmentResult
from .parameters import EditCosts, DEFAULT_COSTS


__all__ = [
    "Cell",
    "CostTable",
    "UNSET",
    "GAP",
    "Alignment",
    "AlignmentResult",
    "EditCosts",
    "DEFAULT_COSTS",
    "parameters",
]
