"""Minimum edit-distance alignment of two and three sequences."""

from .algorithms import PairAligner, TripleAligner
from .types import GAP, Alignment, AlignmentResult, EditCosts, DEFAULT_COSTS


__all__ = [
    "PairAligner",
    "TripleAligner",
    "GAP",
    "Alignment",
    "AlignmentResult",
    "EditCosts",
    "DEFAULT_COSTS",
]
